"""Minimal HTML shell over the dashboard endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from gig_organizer.api.deps import require_session
from gig_organizer.domain.chats import CHAT_STATUSES
from gig_organizer.domain.gigs import APPLICATION_STATUSES, GIG_STATUSES

router = APIRouter(tags=["ui"])


@router.get("/ui", response_class=HTMLResponse, dependencies=[Depends(require_session)])
async def dashboard_ui() -> HTMLResponse:
    """Organizer UI that consumes the dashboard API."""
    return HTMLResponse(
        _DASHBOARD_UI_HTML.replace("__STATUS_OPTIONS__", _status_options())
    )


def _status_options() -> str:
    statuses = dict.fromkeys((*GIG_STATUSES, *APPLICATION_STATUSES, *CHAT_STATUSES))
    return "\n".join(
        f'        <option value="{name}">{name.capitalize()}</option>'
        for name in statuses
    )


_DASHBOARD_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Organizer Dashboard</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Organizer Dashboard</h1>
    <div class="row">
      <input id="search" placeholder="Search" />
      <select id="status">
        <option value="all">All</option>
__STATUS_OPTIONS__
      </select>
    </div>
    <div class="row">
      <button onclick="loadEndpoint('/dashboard')">Overview</button>
      <button onclick="loadList('/dashboard/gigs')">Gigs</button>
      <button onclick="loadList('/dashboard/applications')">Applications</button>
      <button onclick="loadList('/dashboard/messages')">Messages</button>
      <button onclick="loadEndpoint('/dashboard/reviews')">Reviews</button>
      <button onclick="loadEndpoint('/dashboard/payments')">Payments</button>
      <button onclick="loadEndpoint('/dashboard/profile')">Profile</button>
      <button onclick="signOut()">Sign out</button>
    </div>
    <pre id="output">Ready.</pre>
    <script>
      async function loadEndpoint(path) {
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, { credentials: 'same-origin' });
        if (res.redirected) {
          window.location.href = res.url;
          return;
        }
        const data = await res.json();
        output.textContent = JSON.stringify(data, null, 2);
      }
      function loadList(path) {
        const params = new URLSearchParams({
          search: document.getElementById('search').value,
          status: document.getElementById('status').value
        });
        return loadEndpoint(path + '?' + params.toString());
      }
      async function signOut() {
        await fetch('/auth/sign-out', { method: 'POST' });
        window.location.href = '/auth/signin';
      }
    </script>
  </body>
</html>
"""
