"""Per-request check that the cached credential is still accepted."""

import logging
from dataclasses import dataclass

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.profile import OrganizerProfile
from gig_organizer.domain.session import SessionContext

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuardResult:
    """Outcome of a session check."""

    authenticated: bool
    profile: OrganizerProfile | None = None


@dataclass
class SessionGuard:
    """Gate for protected pages.

    Without a token no request is made. With a token, a profile fetch serves
    as the validity check; any failure clears the credential, whatever caused it.
    """

    api: OrganizerApi
    session: SessionContext

    async def check(self) -> GuardResult:
        if not self.session.is_authenticated:
            return GuardResult(authenticated=False)
        try:
            payload = await self.api.get_profile()
            profile = OrganizerProfile.model_validate(payload)
        except Exception:
            _logger.warning("Session check failed, clearing credential", exc_info=True)
            self.session.clear()
            return GuardResult(authenticated=False)
        return GuardResult(authenticated=True, profile=profile)
