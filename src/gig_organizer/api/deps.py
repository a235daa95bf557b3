"""Request-scoped dependencies: session cookie and the session guard."""

from __future__ import annotations

from fastapi import Request

from gig_organizer.containers import AppContainer, SessionServices  # noqa: TC001
from gig_organizer.domain.session import SessionContext  # noqa: TC001

SIGN_IN_PATH = "/auth/signin"


class SignInRequired(Exception):  # noqa: N818
    """Raised by the guard; answered with a redirect to the sign-in page."""


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_session(request: Request) -> SessionContext:
    return request.state.session


def get_services(request: Request) -> SessionServices:
    """Services for the current session, without any validity check."""
    return get_container(request).services_for(get_session(request))


async def require_session(request: Request) -> SessionServices:
    """Guard for protected routes; re-validates the credential on every request."""
    services = get_services(request)
    result = await services.guard.check()
    if not result.authenticated:
        raise SignInRequired
    return services
