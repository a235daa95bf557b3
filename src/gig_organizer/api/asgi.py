"""ASGI entrypoint for the organizer dashboard."""

from gig_organizer.api.app import create_app
from gig_organizer.containers import build_container

app = create_app(build_container())
