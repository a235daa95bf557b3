"""Messages page: chat list and a single conversation."""

import logging
from dataclasses import dataclass, field

from gig_organizer.domain.chats import CHAT_STATUSES, ChatMessage, ChatSummary
from gig_organizer.domain.errors import ActionInFlightError
from gig_organizer.services.chats import ChatService, ChatThread
from gig_organizer.services.fanout import gather_settled
from gig_organizer.services.inflight import InFlightRegistry
from gig_organizer.services.notifications import Notifier
from gig_organizer.views.lists import (
    ERROR,
    IDLE,
    LOADING,
    READY,
    REFRESHING,
    ResourceListView,
)

_logger = logging.getLogger(__name__)


def chat_list_view(service: ChatService) -> ResourceListView[ChatThread]:
    return ResourceListView(
        loader=service.list_threads,
        label="messages",
        search_fields=lambda thread: [
            thread.chat.performer_name,
            thread.chat.gig_title,
            thread.chat.last_message,
        ],
        status_of=lambda thread: thread.chat.status,
        statuses=CHAT_STATUSES,
    )


@dataclass
class ConversationView:
    """One chat with its messages, oldest first."""

    chat_id: str
    service: ChatService
    inflight: InFlightRegistry
    notifier: Notifier
    chat: ChatSummary | None = None
    messages: list[ChatMessage] = field(default_factory=list)
    state: str = IDLE
    error: str | None = None

    async def load(self) -> bool:
        """Load chat and messages, then mark the chat read if needed."""
        self.state = REFRESHING if self.chat is not None else LOADING
        chat, messages = await gather_settled(
            self.service.get_chat(self.chat_id),
            self.service.list_messages(self.chat_id),
        )
        if not chat.ok or not messages.ok:
            _logger.error(
                "Failed to load chat %s: %s", self.chat_id, chat.error or messages.error
            )
            self.state = ERROR
            self.error = "Failed to load conversation. Please try again."
            return False
        self.chat = chat.value
        self.messages = sorted(
            messages.value.content,
            key=lambda message: message.sent_at.timestamp() if message.sent_at else 0.0,
        )
        self.state = READY
        self.error = None
        if self.chat is not None and self.chat.unread_count > 0:
            await self._mark_read()
        return True

    async def _mark_read(self) -> None:
        try:
            await self.service.mark_read(self.chat_id)
        except Exception:
            _logger.exception("Failed to mark chat %s read", self.chat_id)
            return
        if self.chat is not None:
            self.chat = self.chat.model_copy(update={"unread_count": 0})
        self.messages = [
            message.model_copy(update={"is_read": True}) for message in self.messages
        ]

    async def send(self, content: str) -> bool:
        if not content.strip():
            self.notifier.error("Message cannot be empty")
            return False
        try:
            async with self.inflight.claim(self.chat_id, "send"):
                sent = await self.service.send_message(self.chat_id, content)
        except ActionInFlightError:
            raise
        except Exception:
            _logger.exception("Failed to send message to chat %s", self.chat_id)
            self.notifier.error("Failed to send message")
            return False
        if sent is None:
            await self.load()
        else:
            self.messages.append(sent)
            if self.chat is not None:
                self.chat = self.chat.model_copy(
                    update={
                        "last_message": sent.content,
                        "last_message_at": sent.sent_at,
                    }
                )
        return True

    def snapshot(self) -> dict[str, object]:
        if self.state == ERROR:
            return {"state": self.state, "error": self.error}
        return {
            "state": self.state,
            "error": None,
            "chat": self.chat.to_payload() if self.chat else None,
            "messages": [message.to_payload() for message in self.messages],
            "sending": self.inflight.is_busy(self.chat_id),
        }
