"""Organizer sign-up, sign-in and sign-out."""

import logging
from dataclasses import dataclass

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.errors import FormValidationError
from gig_organizer.domain.profile import SignInResult
from gig_organizer.domain.session import SessionContext

_logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Issues and discards the session credential."""

    api: OrganizerApi
    session: SessionContext

    async def sign_up(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> dict[str, object]:
        """Create an organizer account."""
        if not email.strip() or not password:
            raise FormValidationError("Email and password are required")
        if not first_name.strip() or not last_name.strip():
            raise FormValidationError("First and last name are required")
        return await self.api.sign_up(
            {
                "email": email.strip(),
                "password": password,
                "firstName": first_name.strip(),
                "lastName": last_name.strip(),
            }
        )

    async def sign_in(self, email: str, password: str) -> SignInResult:
        """Sign in and store the returned token in the session."""
        if not email.strip() or not password:
            raise FormValidationError("Email and password are required")
        payload = await self.api.sign_in({"email": email.strip(), "password": password})
        result = SignInResult.model_validate(payload)
        self.session.set_token(result.token)
        _logger.info("Organizer signed in")
        return result

    def sign_out(self) -> None:
        """Discard the session credential."""
        self.session.clear()
