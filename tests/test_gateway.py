"""Tests for the HTTP gateway."""

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from gig_organizer.adapters.gateway import HttpGateway
from gig_organizer.domain.errors import ApiError
from gig_organizer.domain.session import SessionContext


def _gateway(
    handler: Callable[[httpx.Request], httpx.Response], token: str | None = None
) -> HttpGateway:
    transport = httpx.MockTransport(handler)
    return HttpGateway(
        base_url="http://api.test/",
        http_client=httpx.AsyncClient(transport=transport),
        session=SessionContext(token=token),
    )


def test_request_injects_bearer_and_json_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    gateway = _gateway(handler, token="abc")
    result = asyncio.run(
        gateway.request(
            "/api/organizer/gigs",
            method="POST",
            json={"title": "Jazz"},
            headers={"X-Trace": "1"},
        )
    )

    assert result == {"ok": True}
    request = seen[0]
    assert str(request.url) == "http://api.test/api/organizer/gigs"
    assert request.headers["authorization"] == "Bearer abc"
    assert request.headers["content-type"] == "application/json"
    assert request.headers["x-trace"] == "1"
    assert json.loads(request.content) == {"title": "Jazz"}


def test_request_without_token_sends_no_authorization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    asyncio.run(_gateway(handler).request("/api/organizer/profile"))

    assert "authorization" not in seen[0].headers


def test_request_accepts_header_pairs_and_drops_none_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    asyncio.run(
        _gateway(handler).request(
            "/api/organizer/chats/c1/messages",
            headers=[("X-One", "1"), ("X-Two", "2")],
            params={"page": 0, "size": 50, "since": None},
        )
    )

    request = seen[0]
    assert request.headers["x-one"] == "1"
    assert request.headers["x-two"] == "2"
    assert dict(request.url.params) == {"page": "0", "size": "50"}


def test_no_content_returns_empty_dict() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    result = asyncio.run(
        _gateway(handler, token="abc").request(
            "/api/organizer/gigs/g1/publish", method="POST"
        )
    )

    assert result == {}


def test_empty_success_body_returns_empty_dict() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"")

    assert asyncio.run(_gateway(handler).request("/api/organizer/chats/c1/read")) == {}


def test_error_status_raises_api_error_with_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, text="Application already decided")

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(_gateway(handler).request("/api/organizer/gigs"))

    assert excinfo.value.status == 409
    assert excinfo.value.body == "Application already decided"
    assert "409" in str(excinfo.value)
