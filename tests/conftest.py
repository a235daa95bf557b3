"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.config import Settings
from gig_organizer.containers import AppContainer
from gig_organizer.domain.errors import ApiError
from gig_organizer.domain.session import SessionContext
from gig_organizer.services.inflight import InFlightRegistry

Json = dict[str, Any]

VALID_TOKEN = "valid-token"


def page(items: list[Json], number: int = 0, size: int = 20) -> Json:
    return {
        "content": items,
        "totalElements": len(items),
        "totalPages": 1,
        "size": size,
        "number": number,
        "first": True,
        "last": True,
    }


def gig_payload(gig_id: str, **overrides: object) -> Json:
    payload: Json = {
        "gigId": gig_id,
        "title": f"Gig {gig_id}",
        "category": "CONCERT",
        "genres": ["JAZZ"],
        "locationCity": "Berlin",
        "eventDate": "2030-06-01T18:00:00Z",
        "pricing": {"amountInCents": 50000, "currency": "EUR", "amountInEuros": 500},
        "priceType": "FIXED",
        "status": "OPEN",
        "applicationsCount": 0,
    }
    payload.update(overrides)
    return payload


def application_payload(
    application_id: str, gig_id: str, applied_at: str, **overrides: object
) -> Json:
    payload: Json = {
        "id": application_id,
        "gigId": gig_id,
        "performerId": f"performer-{application_id}",
        "performerDisplayName": f"Performer {application_id}",
        "status": "PENDING",
        "appliedAt": applied_at,
    }
    payload.update(overrides)
    return payload


@dataclass
class FakeOrganizerApi(OrganizerApi):
    """In-memory organizer API that records calls.

    Method names listed in ``failures`` raise a 500 ApiError; gigs listed in
    ``failing_application_gigs`` fail only their application listing.
    Accepting an application books the gig and rejects the other pending
    applications of the same gig, the way the real backend does. With
    ``echo_gig`` off, gig create and update acknowledge with an empty body.
    When ``accept_gate`` is set, accept waits on it.
    """

    valid_token: str = VALID_TOKEN
    session: SessionContext | None = None
    profile: Json = field(
        default_factory=lambda: {
            "id": "organizer-1",
            "firstName": "Ada",
            "lastName": "Lovelace",
            "displayName": "Ada Events",
        }
    )
    statistics: Json = field(
        default_factory=lambda: {
            "totalGigsCreated": 4,
            "totalGigsCompleted": 3,
            "totalApplicationsReceived": 9,
        }
    )
    gigs: dict[str, Json] = field(default_factory=dict)
    applications: dict[str, list[Json]] = field(default_factory=dict)
    chats: list[Json] = field(default_factory=list)
    messages: dict[str, list[Json]] = field(default_factory=dict)
    unread: int = 0
    failures: set[str] = field(default_factory=set)
    failing_application_gigs: set[str] = field(default_factory=set)
    calls: list[tuple[object, ...]] = field(default_factory=list)
    accept_gate: asyncio.Event | None = None
    echo_gig: bool = True
    echo_reject: bool = False
    echo_message: bool = True

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        if name in self.failures:
            raise ApiError(500, f"{name} failed")

    def call_names(self) -> list[object]:
        return [call[0] for call in self.calls]

    async def sign_up(self, payload: Json) -> Json:
        self._record("sign_up", payload)
        return {"id": "organizer-2"}

    async def sign_in(self, payload: Json) -> Json:
        self._record("sign_in", payload)
        if payload.get("password") != "secret":
            raise ApiError(401, "Invalid credentials")
        return {"token": self.valid_token, "organizer": self.profile}

    async def get_profile(self) -> Json:
        self._record("get_profile")
        if self.session is not None and self.session.token != self.valid_token:
            raise ApiError(401, "Unauthorized")
        return self.profile

    async def update_profile(self, payload: Json) -> Json:
        self._record("update_profile", payload)
        self.profile = {**self.profile, **payload}
        return self.profile

    async def get_statistics(self) -> Json:
        self._record("get_statistics")
        return self.statistics

    async def get_gigs(self, page_number: int = 0, size: int = 20) -> Json:
        self._record("get_gigs", page_number, size)
        return page(list(self.gigs.values())[:size], page_number, size)

    async def get_gig(self, gig_id: str) -> Json:
        self._record("get_gig", gig_id)
        if gig_id not in self.gigs:
            raise ApiError(404, "Gig not found")
        return self.gigs[gig_id]

    async def create_gig(self, payload: Json) -> Json:
        self._record("create_gig", payload)
        gig = {**payload, "gigId": f"gig-{len(self.gigs) + 1}", "status": "DRAFT"}
        self.gigs[gig["gigId"]] = gig
        return gig if self.echo_gig else {}

    async def update_gig(self, gig_id: str, payload: Json) -> Json:
        self._record("update_gig", gig_id, payload)
        self.gigs[gig_id] = {**self.gigs.get(gig_id, {}), **payload, "gigId": gig_id}
        return self.gigs[gig_id] if self.echo_gig else {}

    async def publish_gig(self, gig_id: str) -> Json:
        self._record("publish_gig", gig_id)
        self.gigs[gig_id]["status"] = "OPEN"
        return {}

    async def complete_gig(self, gig_id: str) -> Json:
        self._record("complete_gig", gig_id)
        self.gigs[gig_id]["status"] = "COMPLETED"
        return {}

    async def cancel_gig(self, gig_id: str, reason: str) -> Json:
        self._record("cancel_gig", gig_id, reason)
        self.gigs[gig_id]["status"] = "CANCELLED"
        return {}

    async def get_gig_applications(
        self, gig_id: str, page_number: int = 0, size: int = 20
    ) -> Json:
        self._record("get_gig_applications", gig_id)
        if gig_id in self.failing_application_gigs:
            raise ApiError(503, "Applications unavailable")
        return page(list(self.applications.get(gig_id, [])), page_number, size)

    async def accept_application(self, gig_id: str, application_id: str) -> Json:
        self._record("accept_application", gig_id, application_id)
        if self.accept_gate is not None:
            await self.accept_gate.wait()
        for application in self.applications.get(gig_id, []):
            if application["id"] == application_id:
                application["status"] = "ACCEPTED"
            elif application["status"] == "PENDING":
                application["status"] = "REJECTED"
        if gig_id in self.gigs:
            self.gigs[gig_id]["status"] = "BOOKED"
        return {}

    async def reject_application(
        self, gig_id: str, application_id: str, reason: str
    ) -> Json:
        self._record("reject_application", gig_id, application_id, reason)
        for application in self.applications.get(gig_id, []):
            if application["id"] == application_id:
                application["status"] = "REJECTED"
                application["decisionReason"] = reason
                if self.echo_reject:
                    return dict(application)
        return {}

    async def get_chats(self, page_number: int = 0, size: int = 20) -> Json:
        self._record("get_chats")
        return page(list(self.chats), page_number, size)

    async def get_chat(self, chat_id: str) -> Json:
        self._record("get_chat", chat_id)
        for chat in self.chats:
            if chat["id"] == chat_id:
                return chat
        raise ApiError(404, "Chat not found")

    async def get_chat_messages(
        self,
        chat_id: str,
        page_number: int = 0,
        size: int = 50,
        since: str | None = None,
    ) -> Json:
        self._record("get_chat_messages", chat_id, since)
        return page(list(self.messages.get(chat_id, [])), page_number, size)

    async def send_message(
        self, chat_id: str, content: str, message_type: str = "TEXT"
    ) -> Json:
        self._record("send_message", chat_id, content)
        message = {
            "id": f"message-{len(self.messages.get(chat_id, [])) + 1}",
            "chatId": chat_id,
            "senderType": "ORGANIZER",
            "content": content,
            "messageType": message_type,
            "sentAt": "2030-01-01T12:00:00Z",
        }
        self.messages.setdefault(chat_id, []).append(message)
        return message if self.echo_message else {}

    async def mark_chat_read(self, chat_id: str) -> Json:
        self._record("mark_chat_read", chat_id)
        for chat in self.chats:
            if chat["id"] == chat_id:
                chat["unreadCount"] = 0
        return {}

    async def get_unread_count(self) -> Json:
        self._record("get_unread_count")
        return {"count": self.unread}

    async def get_performer_profile(self, performer_id: str) -> Json:
        self._record("get_performer_profile", performer_id)
        return {"id": performer_id, "stageName": "DJ Test"}

    async def get_review_summary(self) -> Json:
        self._record("get_review_summary")
        return {"averageRating": 4.5, "totalReviews": 2}

    async def get_review_statistics(self) -> Json:
        self._record("get_review_statistics")
        return {"averageRating": 4.5, "totalReviews": 2}

    async def get_reviews_received(self, page_number: int = 0, size: int = 20) -> Json:
        self._record("get_reviews_received")
        return page([], page_number, size)

    async def get_reviews_given(self, page_number: int = 0, size: int = 20) -> Json:
        self._record("get_reviews_given")
        return page([], page_number, size)

    async def get_payments(self, page_number: int = 0, size: int = 20) -> Json:
        self._record("get_payments")
        return page([], page_number, size)

    async def get_payment_summary(self) -> Json:
        self._record("get_payment_summary")
        return {"totalPayments": 0}

    async def get_payment_by_gig(self, gig_id: str) -> Json:
        self._record("get_payment_by_gig", gig_id)
        raise ApiError(404, "No payment")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base_url="http://api.test",
        local_timezone="UTC",
        session_cookie_name="auth_token",
    )


@pytest.fixture
def fake_api() -> FakeOrganizerApi:
    return FakeOrganizerApi()


@pytest.fixture
def container(settings: Settings, fake_api: FakeOrganizerApi) -> AppContainer:
    def api_factory(session: SessionContext) -> OrganizerApi:
        fake_api.session = session
        return fake_api

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        api_factory=api_factory,
        inflight=InFlightRegistry(),
        close_resources=close_resources,
    )
