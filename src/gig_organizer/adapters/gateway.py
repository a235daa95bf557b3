"""Single HTTP chokepoint for calls to the organizer API."""

from dataclasses import dataclass
from typing import Any

import httpx

from gig_organizer.domain.errors import ApiError
from gig_organizer.domain.session import SessionContext

HeaderInput = httpx.Headers | dict[str, str] | list[tuple[str, str]] | None


@dataclass
class HttpGateway:
    """Builds URLs, injects the bearer token and classifies responses."""

    base_url: str
    http_client: httpx.AsyncClient
    session: SessionContext
    timeout_seconds: float = 15.0

    async def request(  # noqa: PLR0913
        self,
        endpoint: str,
        *,
        method: str = "GET",
        headers: HeaderInput = None,
        json: object | None = None,
        params: dict[str, object] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Raises ApiError for any non-2xx status. A 204 returns an empty dict.
        """
        url = f"{self.base_url.rstrip('/')}{endpoint}"
        merged = httpx.Headers({"Content-Type": "application/json"})
        merged.update(headers)
        if self.session.token:
            merged["Authorization"] = f"Bearer {self.session.token}"

        response = await self.http_client.request(
            method,
            url,
            headers=merged,
            json=json,
            params=_drop_none(params),
            timeout=self.timeout_seconds,
        )
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return {}
        return response.json()


def _drop_none(params: dict[str, object] | None) -> dict[str, object] | None:
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}
