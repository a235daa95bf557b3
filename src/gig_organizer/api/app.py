"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from gig_organizer.api.auth import router as auth_router
from gig_organizer.api.dashboard import router as dashboard_router
from gig_organizer.api.deps import SIGN_IN_PATH, SignInRequired
from gig_organizer.api.ui import router as ui_router
from gig_organizer.app_logging import configure_logging
from gig_organizer.containers import AppContainer
from gig_organizer.domain.errors import (
    ActionInFlightError,
    ApiError,
    FormValidationError,
)
from gig_organizer.domain.session import SessionContext


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def session_cookie(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        token = request.cookies.get(settings.session_cookie_name)
        session = SessionContext(token=token)
        request.state.session = session
        response = await call_next(request)
        if session.changed:
            if session.token:
                response.set_cookie(
                    settings.session_cookie_name,
                    session.token,
                    httponly=True,
                    secure=settings.session_cookie_secure,
                    samesite="lax",
                )
            else:
                response.delete_cookie(settings.session_cookie_name)
        return response

    @app.exception_handler(SignInRequired)
    async def sign_in_required(request: Request, _: SignInRequired) -> Response:
        logger.info("Redirecting unauthenticated request for %s", request.url.path)
        return RedirectResponse(SIGN_IN_PATH, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(FormValidationError)
    async def form_invalid(_: Request, exc: FormValidationError) -> Response:
        return JSONResponse(
            {"detail": str(exc)}, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
        )

    @app.exception_handler(ActionInFlightError)
    async def action_in_flight(_: Request, exc: ActionInFlightError) -> Response:
        return JSONResponse(
            {"detail": str(exc), "itemId": exc.item_id, "action": exc.action},
            status_code=status.HTTP_409_CONFLICT,
        )

    @app.exception_handler(ApiError)
    async def upstream_failed(request: Request, exc: ApiError) -> Response:
        logger.error(
            "Upstream request failed for %s with status %s",
            request.url.path,
            exc.status,
        )
        return JSONResponse(
            {"detail": "Upstream request failed", "status": exc.status},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    @app.exception_handler(httpx.HTTPError)
    async def upstream_unreachable(request: Request, exc: httpx.HTTPError) -> Response:
        logger.error("Upstream transport error for %s: %s", request.url.path, exc)
        return JSONResponse(
            {"detail": "Upstream unavailable"},
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
