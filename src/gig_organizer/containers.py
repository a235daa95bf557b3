"""Dependency container wiring for the application."""

import hashlib
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import tzinfo

import httpx

from gig_organizer.adapters.organizer_api import HttpxOrganizerApi, OrganizerApi
from gig_organizer.config import Settings, resolve_timezone
from gig_organizer.domain.session import SessionContext
from gig_organizer.services.applications import ApplicationService
from gig_organizer.services.auth import AuthService
from gig_organizer.services.chats import ChatService
from gig_organizer.services.dashboard import DashboardService
from gig_organizer.services.gigs import GigService
from gig_organizer.services.inflight import InFlightRegistry
from gig_organizer.services.payments import PaymentService
from gig_organizer.services.profile import ProfileService
from gig_organizer.services.reviews import ReviewService
from gig_organizer.services.session_guard import SessionGuard


@dataclass
class SessionServices:
    """Services bound to one browser session."""

    session: SessionContext
    api: OrganizerApi
    inflight: InFlightRegistry
    auth: AuthService
    guard: SessionGuard
    gigs: GigService
    applications: ApplicationService
    chats: ChatService
    profile: ProfileService
    reviews: ReviewService
    payments: PaymentService
    dashboard: DashboardService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_factory: Callable[[SessionContext], OrganizerApi]
    inflight: InFlightRegistry
    close_resources: Callable[[], Awaitable[None]]
    local_tz: tzinfo | None = None

    def services_for(self, session: SessionContext) -> SessionServices:
        """Build the per-request service graph around the session's credential."""
        api = self.api_factory(session)
        gigs = GigService(api, local_tz=self.local_tz)
        chats = ChatService(api, local_tz=self.local_tz)
        profile = ProfileService(api)
        return SessionServices(
            session=session,
            api=api,
            inflight=self.inflight.scoped(_session_scope(session)),
            auth=AuthService(api, session),
            guard=SessionGuard(api, session),
            gigs=gigs,
            applications=ApplicationService(api),
            chats=chats,
            profile=profile,
            reviews=ReviewService(api),
            payments=PaymentService(api),
            dashboard=DashboardService(
                profile_service=profile, gig_service=gigs, chat_service=chats
            ),
        )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_client = httpx.AsyncClient()

    def api_factory(session: SessionContext) -> OrganizerApi:
        return HttpxOrganizerApi.create(
            http_client,
            base_url=resolved_settings.api_base_url,
            session=session,
            timeout_seconds=resolved_settings.request_timeout_seconds,
        )

    async def close_resources() -> None:
        await http_client.aclose()

    return AppContainer(
        settings=resolved_settings,
        api_factory=api_factory,
        inflight=InFlightRegistry(),
        close_resources=close_resources,
        local_tz=resolve_timezone(resolved_settings.local_timezone),
    )


def _session_scope(session: SessionContext) -> str:
    if not session.token:
        return "anonymous"
    return hashlib.sha256(session.token.encode()).hexdigest()[:16]
