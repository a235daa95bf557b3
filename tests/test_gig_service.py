"""Tests for gig form validation and gig mutations."""

import asyncio
from datetime import UTC, datetime, timedelta, timezone

import pytest

from gig_organizer.domain.errors import FormValidationError
from gig_organizer.domain.gigs import Money
from gig_organizer.services.gigs import (
    DEFAULT_CANCEL_REASON,
    GigDraft,
    GigService,
    validate_draft,
)
from tests.conftest import FakeOrganizerApi, gig_payload

NOW = datetime(2024, 1, 1, tzinfo=UTC)
PLUS_TWO = timezone(timedelta(hours=2))


def _draft(**overrides: object) -> GigDraft:
    values: dict[str, object] = {
        "title": "Jazz night",
        "category": "CONCERT",
        "genres": ["JAZZ", "JAZZ", " "],
        "event_date": "2024-06-01T20:00",
        "price_euros": 150,
    }
    values.update(overrides)
    return GigDraft(**values)


def test_valid_draft_passes() -> None:
    validate_draft(_draft(), now=NOW, tz=PLUS_TWO)


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"title": "  "}, "Gig title is required"),
        ({"category": ""}, "Please select a category"),
        ({"genres": [" "]}, "Please select at least one genre"),
        ({"event_date": ""}, "Event date and time is required"),
        ({"price_euros": 0}, "Price must be greater than 0"),
        ({"event_date": "soon"}, "Event date is not a valid date"),
        ({"event_date": "2023-12-31T20:00"}, "Event date must be in the future"),
        (
            {"application_deadline": "2024-06-02T10:00"},
            "Application deadline must be before the event date",
        ),
        (
            {"application_deadline": "2023-12-01T10:00"},
            "Application deadline must be in the future",
        ),
    ],
)
def test_invalid_drafts_are_rejected(overrides: dict, message: str) -> None:
    with pytest.raises(FormValidationError, match=message):
        validate_draft(_draft(**overrides), now=NOW, tz=PLUS_TWO)


def test_request_payload_uses_utc_and_pricing() -> None:
    payload = _draft(application_deadline="2024-05-20T12:00").request_payload(
        PLUS_TWO
    )

    assert payload["title"] == "Jazz night"
    assert payload["genres"] == ["JAZZ"]
    assert payload["eventDate"] == "2024-06-01T18:00:00Z"
    assert payload["applicationDeadline"] == "2024-05-20T10:00:00Z"
    assert payload["pricing"] == {
        "amountInCents": 15000,
        "currency": "EUR",
        "amountInEuros": 150.0,
    }
    assert payload["isNegotiable"] is False
    assert "description" not in payload


def test_create_gig_sends_normalized_payload() -> None:
    api = FakeOrganizerApi()
    service = GigService(api, local_tz=PLUS_TWO)

    gig = asyncio.run(service.create_gig(_draft(), now=NOW))

    assert gig is not None
    assert gig.gig_id == "gig-1"
    name, payload = api.calls[0]
    assert name == "create_gig"
    assert payload["eventDate"] == "2024-06-01T18:00:00Z"


def test_drafts_skip_validation() -> None:
    api = FakeOrganizerApi()
    service = GigService(api, local_tz=PLUS_TWO)

    gig = asyncio.run(service.create_gig(GigDraft(title="Untitled"), as_draft=True))

    assert gig is not None
    assert gig.status == "DRAFT"
    assert api.call_names() == ["create_gig"]


def test_invalid_form_sends_nothing() -> None:
    api = FakeOrganizerApi()
    service = GigService(api, local_tz=PLUS_TWO)

    with pytest.raises(FormValidationError):
        asyncio.run(service.create_gig(_draft(title=""), now=NOW))

    assert api.calls == []


def test_cancel_uses_default_reason() -> None:
    api = FakeOrganizerApi(gigs={"g1": gig_payload("g1")})
    service = GigService(api)

    asyncio.run(service.cancel_gig("g1", "  "))

    assert api.calls[-1] == ("cancel_gig", "g1", DEFAULT_CANCEL_REASON)


def test_create_without_echo_returns_none() -> None:
    api = FakeOrganizerApi(echo_gig=False)
    service = GigService(api)

    gig = asyncio.run(service.create_gig(GigDraft(title="Untitled"), as_draft=True))

    assert gig is None
    assert api.call_names() == ["create_gig"]


def test_update_without_echo_refetches_gig() -> None:
    api = FakeOrganizerApi(gigs={"g1": gig_payload("g1")}, echo_gig=False)
    service = GigService(api, local_tz=PLUS_TWO)

    gig = asyncio.run(service.update_gig("g1", _draft(title="Late show"), now=NOW))

    assert gig.title == "Late show"
    assert api.call_names() == ["update_gig", "get_gig"]


@pytest.mark.parametrize(
    ("euros", "cents"),
    [(2.625, 263), (0.125, 13), (19.99, 1999), (150, 15000)],
)
def test_price_rounds_half_up_to_cents(euros: float, cents: int) -> None:
    assert Money.from_euros(euros).amount_in_cents == cents
