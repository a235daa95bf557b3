"""Chats between the organizer and performers."""

import logging
from dataclasses import dataclass
from datetime import tzinfo

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.base import ApiModel, Page
from gig_organizer.domain.chats import ChatMessage, ChatSummary, UnreadCount
from gig_organizer.domain.errors import FormValidationError
from gig_organizer.domain.gigs import Gig
from gig_organizer.services.fanout import gather_settled
from gig_organizer.timestamps import to_utc_iso_or_raw

_logger = logging.getLogger(__name__)


class ChatThread(ApiModel):
    """Chat joined with the gig it belongs to, when that gig could be loaded."""

    chat: ChatSummary
    gig: Gig | None = None


@dataclass
class ChatService:
    """Chat reads, sending and read-state updates."""

    api: OrganizerApi
    local_tz: tzinfo | None = None

    async def list_chats(self, page: int = 0, size: int = 20) -> Page[ChatSummary]:
        payload = await self.api.get_chats(page, size)
        return Page[ChatSummary].model_validate(payload)

    async def list_threads(self, page: int = 0, size: int = 20) -> list[ChatThread]:
        """List chats with gig details fetched once per distinct gig."""
        chats = (await self.list_chats(page, size)).content
        gig_ids = list(dict.fromkeys(chat.gig_id for chat in chats))
        outcomes = await gather_settled(
            *(self.api.get_gig(gig_id) for gig_id in gig_ids)
        )
        gigs: dict[str, Gig] = {}
        for gig_id, outcome in zip(gig_ids, outcomes, strict=True):
            if outcome.error is not None:
                _logger.warning(
                    "Failed to load gig %s for chats: %s", gig_id, outcome.error
                )
                continue
            gigs[gig_id] = Gig.model_validate(outcome.value)
        return [ChatThread(chat=chat, gig=gigs.get(chat.gig_id)) for chat in chats]

    async def get_chat(self, chat_id: str) -> ChatSummary:
        return ChatSummary.model_validate(await self.api.get_chat(chat_id))

    async def list_messages(
        self,
        chat_id: str,
        page: int = 0,
        size: int = 50,
        since: str | None = None,
    ) -> Page[ChatMessage]:
        payload = await self.api.get_chat_messages(
            chat_id, page, size, since=to_utc_iso_or_raw(since, self.local_tz)
        )
        return Page[ChatMessage].model_validate(payload)

    async def send_message(self, chat_id: str, content: str) -> ChatMessage | None:
        """Send a text message; returns the stored message when echoed."""
        cleaned = content.strip()
        if not cleaned:
            raise FormValidationError("Message cannot be empty")
        payload = await self.api.send_message(chat_id, cleaned)
        if not payload:
            return None
        return ChatMessage.model_validate(payload)

    async def mark_read(self, chat_id: str) -> None:
        await self.api.mark_chat_read(chat_id)

    async def unread_count(self) -> int:
        return UnreadCount.model_validate(await self.api.get_unread_count()).count
