"""Domain models for organizer/performer chats."""

from datetime import datetime

from pydantic import computed_field

from gig_organizer.domain.base import ApiModel

CHAT_STATUSES = ("ACTIVE", "ARCHIVED")


class ChatSummary(ApiModel):
    """Chat thread scoped to one gig and one performer."""

    id: str
    gig_id: str
    gig_title: str = ""
    performer_id: str | None = None
    performer_name: str = ""
    performer_image_url: str | None = None
    last_message: str | None = None
    last_message_at: datetime | None = None
    unread_count: int = 0
    status: str = "ACTIVE"


class ChatMessage(ApiModel):
    """Single message in a chat."""

    id: str
    chat_id: str | None = None
    sender_id: str | None = None
    sender_type: str = "ORGANIZER"
    content: str = ""
    message_type: str = "TEXT"
    sent_at: datetime | None = None
    is_read: bool = False

    @computed_field(alias="isSystem")  # type: ignore[prop-decorator]
    @property
    def is_system(self) -> bool:
        return self.sender_type == "SYSTEM" or self.message_type == "SYSTEM"


class UnreadCount(ApiModel):
    """Global unread message counter."""

    count: int = 0
