"""Tests for container wiring."""

import asyncio

from gig_organizer.containers import build_container
from gig_organizer.domain.session import SessionContext


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    services = container.services_for(SessionContext(token="abc"))

    assert services.dashboard is not None
    assert services.guard.session is services.session
    assert services.api.gateway.base_url == "http://api.test"
    assert container.local_tz is not None
    asyncio.run(container.close_resources())


def test_inflight_scope_follows_the_token(settings) -> None:
    container = build_container(settings)

    first = container.services_for(SessionContext(token="abc"))
    same = container.services_for(SessionContext(token="abc"))
    other = container.services_for(SessionContext(token="xyz"))

    assert first.inflight.scope == same.inflight.scope
    assert first.inflight.scope != other.inflight.scope
    assert container.services_for(SessionContext()).inflight.scope == "anonymous"
    asyncio.run(container.close_resources())
