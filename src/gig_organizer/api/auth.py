"""Sign-up, sign-in and sign-out endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from gig_organizer.api.deps import get_services
from gig_organizer.containers import SessionServices  # noqa: TC001
from gig_organizer.domain.errors import ApiError

router = APIRouter(prefix="/auth", tags=["auth"])
_logger = logging.getLogger(__name__)


class SignInForm(BaseModel):
    """Credentials posted by the sign-in form."""

    email: str
    password: str


class SignUpForm(BaseModel):
    """Account details posted by the sign-up form."""

    email: str
    password: str
    first_name: str
    last_name: str


@router.post("/sign-in")
async def sign_in(
    form: SignInForm, services: SessionServices = Depends(get_services)
) -> dict[str, object]:
    """Exchange credentials for a session cookie."""
    try:
        result = await services.auth.sign_in(form.email, form.password)
    except ApiError as exc:
        _logger.warning("Sign-in rejected with status %s", exc.status)
        if exc.status in {status.HTTP_400_BAD_REQUEST, status.HTTP_401_UNAUTHORIZED}:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            ) from exc
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to sign in"
        ) from exc
    return {
        "status": "ok",
        "organizer": result.organizer.to_payload() if result.organizer else None,
    }


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(
    form: SignUpForm, services: SessionServices = Depends(get_services)
) -> dict[str, object]:
    """Create an organizer account."""
    try:
        await services.auth.sign_up(
            form.email, form.password, form.first_name, form.last_name
        )
    except ApiError as exc:
        _logger.warning("Sign-up rejected with status %s", exc.status)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST
            if exc.status < status.HTTP_500_INTERNAL_SERVER_ERROR
            else status.HTTP_502_BAD_GATEWAY,
            detail="Failed to create account",
        ) from exc
    return {"status": "ok"}


@router.post("/sign-out")
async def sign_out(
    services: SessionServices = Depends(get_services),
) -> dict[str, str]:
    """Drop the session cookie."""
    services.auth.sign_out()
    return {"status": "ok"}


@router.get("/signin", response_class=HTMLResponse)
async def sign_in_page() -> HTMLResponse:
    """Minimal sign-in page; protected routes redirect here."""
    return HTMLResponse(_SIGN_IN_HTML)


_SIGN_IN_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Organizer sign in</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; }
    </style>
  </head>
  <body>
    <h1>Organizer sign in</h1>
    <div class="row"><input id="email" type="email" placeholder="Email" /></div>
    <div class="row">
      <input id="password" type="password" placeholder="Password" />
    </div>
    <button onclick="signIn()">Sign in</button>
    <p id="output"></p>
    <script>
      async function signIn() {
        const res = await fetch('/auth/sign-in', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({
            email: document.getElementById('email').value,
            password: document.getElementById('password').value
          })
        });
        if (!res.ok) {
          document.getElementById('output').textContent = 'Sign in failed.';
          return;
        }
        window.location.href = '/ui';
      }
    </script>
  </body>
</html>
"""
