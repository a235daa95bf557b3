"""Organizer REST API client."""

from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from gig_organizer.adapters.gateway import HttpGateway
from gig_organizer.domain.session import SessionContext

Json = dict[str, Any]


class OrganizerApi(Protocol):
    """Interface for the organizer endpoints of the booking platform."""

    async def sign_up(self, payload: Json) -> Json:
        """Create an organizer account."""

    async def sign_in(self, payload: Json) -> Json:
        """Exchange credentials for a session token."""

    async def get_profile(self) -> Json:
        """Return the signed-in organizer's profile."""

    async def update_profile(self, payload: Json) -> Json:
        """Replace the organizer profile."""

    async def get_statistics(self) -> Json:
        """Return organizer statistics."""

    async def get_gigs(self, page: int = 0, size: int = 20) -> Json:
        """Return one page of the organizer's gigs."""

    async def get_gig(self, gig_id: str) -> Json:
        """Return gig details."""

    async def create_gig(self, payload: Json) -> Json:
        """Create a gig."""

    async def update_gig(self, gig_id: str, payload: Json) -> Json:
        """Replace a gig."""

    async def publish_gig(self, gig_id: str) -> Json:
        """Move a draft gig to open."""

    async def complete_gig(self, gig_id: str) -> Json:
        """Mark a gig completed."""

    async def cancel_gig(self, gig_id: str, reason: str) -> Json:
        """Cancel a gig."""

    async def get_gig_applications(
        self, gig_id: str, page: int = 0, size: int = 20
    ) -> Json:
        """Return one page of applications for a gig."""

    async def accept_application(self, gig_id: str, application_id: str) -> Json:
        """Accept an application."""

    async def reject_application(
        self, gig_id: str, application_id: str, reason: str
    ) -> Json:
        """Reject an application with a reason."""

    async def get_chats(self, page: int = 0, size: int = 20) -> Json:
        """Return one page of chats."""

    async def get_chat(self, chat_id: str) -> Json:
        """Return chat details."""

    async def get_chat_messages(
        self, chat_id: str, page: int = 0, size: int = 50, since: str | None = None
    ) -> Json:
        """Return one page of messages for a chat."""

    async def send_message(
        self, chat_id: str, content: str, message_type: str = "TEXT"
    ) -> Json:
        """Send a message to a chat."""

    async def mark_chat_read(self, chat_id: str) -> Json:
        """Mark all messages in a chat as read."""

    async def get_unread_count(self) -> Json:
        """Return the global unread message count."""

    async def get_performer_profile(self, performer_id: str) -> Json:
        """Return a public performer profile."""

    async def get_review_summary(self) -> Json:
        """Return the review summary."""

    async def get_review_statistics(self) -> Json:
        """Return review statistics."""

    async def get_reviews_received(self, page: int = 0, size: int = 20) -> Json:
        """Return reviews received."""

    async def get_reviews_given(self, page: int = 0, size: int = 20) -> Json:
        """Return reviews given."""

    async def get_payments(self, page: int = 0, size: int = 20) -> Json:
        """Return one page of payments."""

    async def get_payment_summary(self) -> Json:
        """Return payment totals."""

    async def get_payment_by_gig(self, gig_id: str) -> Json:
        """Return the payment for a gig."""


@dataclass
class HttpxOrganizerApi(OrganizerApi):
    """Organizer API client backed by the HTTP gateway."""

    gateway: HttpGateway

    @classmethod
    def create(
        cls,
        http_client: httpx.AsyncClient,
        base_url: str,
        session: SessionContext,
        timeout_seconds: float = 15.0,
    ) -> "HttpxOrganizerApi":
        """Create a client bound to one session over a shared httpx session."""
        return cls(
            gateway=HttpGateway(
                base_url=base_url,
                http_client=http_client,
                session=session,
                timeout_seconds=timeout_seconds,
            )
        )

    async def sign_up(self, payload: Json) -> Json:
        return await self.gateway.request(
            "/api/auth/organizer/sign-up", method="POST", json=payload
        )

    async def sign_in(self, payload: Json) -> Json:
        return await self.gateway.request(
            "/api/auth/organizer/sign-in", method="POST", json=payload
        )

    async def get_profile(self) -> Json:
        return await self.gateway.request("/api/organizer/profile")

    async def update_profile(self, payload: Json) -> Json:
        return await self.gateway.request(
            "/api/organizer/profile", method="PUT", json=payload
        )

    async def get_statistics(self) -> Json:
        return await self.gateway.request("/api/organizer/profile/statistics")

    async def get_gigs(self, page: int = 0, size: int = 20) -> Json:
        return await self.gateway.request(
            "/api/organizer/gigs", params={"page": page, "size": size}
        )

    async def get_gig(self, gig_id: str) -> Json:
        return await self.gateway.request(f"/api/organizer/gigs/{_seg(gig_id)}")

    async def create_gig(self, payload: Json) -> Json:
        return await self.gateway.request(
            "/api/organizer/gigs", method="POST", json=payload
        )

    async def update_gig(self, gig_id: str, payload: Json) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}", method="PUT", json=payload
        )

    async def publish_gig(self, gig_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}/publish", method="POST"
        )

    async def complete_gig(self, gig_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}/complete", method="POST"
        )

    async def cancel_gig(self, gig_id: str, reason: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}/cancel",
            method="POST",
            json={"reason": reason},
        )

    async def get_gig_applications(
        self, gig_id: str, page: int = 0, size: int = 20
    ) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}/applications",
            params={"page": page, "size": size},
        )

    async def accept_application(self, gig_id: str, application_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}"
            f"/applications/{_seg(application_id)}/accept",
            method="POST",
            json={},
        )

    async def reject_application(
        self, gig_id: str, application_id: str, reason: str
    ) -> Json:
        return await self.gateway.request(
            f"/api/organizer/gigs/{_seg(gig_id)}"
            f"/applications/{_seg(application_id)}/reject",
            method="POST",
            json={"reason": reason},
        )

    async def get_chats(self, page: int = 0, size: int = 20) -> Json:
        return await self.gateway.request(
            "/api/organizer/chats", params={"page": page, "size": size}
        )

    async def get_chat(self, chat_id: str) -> Json:
        return await self.gateway.request(f"/api/organizer/chats/{_seg(chat_id)}")

    async def get_chat_messages(
        self, chat_id: str, page: int = 0, size: int = 50, since: str | None = None
    ) -> Json:
        return await self.gateway.request(
            f"/api/organizer/chats/{_seg(chat_id)}/messages",
            params={"page": page, "size": size, "since": since},
        )

    async def send_message(
        self, chat_id: str, content: str, message_type: str = "TEXT"
    ) -> Json:
        return await self.gateway.request(
            f"/api/organizer/chats/{_seg(chat_id)}/messages",
            method="POST",
            json={"chatId": chat_id, "content": content, "messageType": message_type},
        )

    async def mark_chat_read(self, chat_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/chats/{_seg(chat_id)}/read", method="POST"
        )

    async def get_unread_count(self) -> Json:
        return await self.gateway.request("/api/organizer/chats/unread-count")

    async def get_performer_profile(self, performer_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/performers/{_seg(performer_id)}"
        )

    async def get_review_summary(self) -> Json:
        return await self.gateway.request("/api/organizer/reviews/summary")

    async def get_review_statistics(self) -> Json:
        return await self.gateway.request("/api/organizer/reviews/statistics")

    async def get_reviews_received(self, page: int = 0, size: int = 20) -> Json:
        return await self.gateway.request(
            "/api/organizer/reviews/received", params={"page": page, "size": size}
        )

    async def get_reviews_given(self, page: int = 0, size: int = 20) -> Json:
        return await self.gateway.request(
            "/api/organizer/reviews/given", params={"page": page, "size": size}
        )

    async def get_payments(self, page: int = 0, size: int = 20) -> Json:
        return await self.gateway.request(
            "/api/organizer/payments", params={"page": page, "size": size}
        )

    async def get_payment_summary(self) -> Json:
        return await self.gateway.request("/api/organizer/payments/summary")

    async def get_payment_by_gig(self, gig_id: str) -> Json:
        return await self.gateway.request(
            f"/api/organizer/payments/by-gig/{_seg(gig_id)}"
        )


def _seg(value: str) -> str:
    """Quote a path segment."""
    return quote(str(value), safe="")
