"""Domain models for gigs and performer applications."""

import math
from datetime import datetime

from pydantic import computed_field

from gig_organizer.domain.base import ApiModel

GIG_STATUSES = ("DRAFT", "OPEN", "BOOKED", "COMPLETED", "CANCELLED")
APPLICATION_STATUSES = ("PENDING", "ACCEPTED", "REJECTED")
PRICE_TYPES = ("FIXED", "HOURLY", "NEGOTIABLE")
PAYMENT_METHODS = ("CASH", "STRIPE_CONNECT")


class Money(ApiModel):
    """Price in minor units with the derived major-unit amount.

    Minor units round half up, so 2.625 EUR is 263 cents.
    """

    amount_in_cents: int = 0
    currency: str = "EUR"
    amount_in_euros: float = 0.0

    @classmethod
    def from_euros(cls, euros: float, currency: str = "EUR") -> "Money":
        return cls(
            amount_in_cents=math.floor(euros * 100 + 0.5),
            currency=currency,
            amount_in_euros=euros,
        )


class Gig(ApiModel):
    """Gig as returned by the organizer API."""

    gig_id: str
    public_id: str | None = None
    organizer_id: str | None = None
    organizer_display_name: str | None = None
    title: str
    description: str | None = None
    category: str = ""
    genres: list[str] = []
    location_city: str | None = None
    event_date: datetime | None = None
    application_deadline: datetime | None = None
    pricing: Money = Money()
    price_type: str = "FIXED"
    is_negotiable: bool = False
    payment_method: str | None = None
    status: str = "DRAFT"
    applications_count: int = 0
    can_apply: bool = False
    created_at: datetime | None = None


class GigApplication(ApiModel):
    """A performer's application to one gig."""

    id: str
    gig_id: str
    gig_title: str = ""
    performer_id: str | None = None
    performer_display_name: str | None = None
    performer_first_name: str | None = None
    performer_last_name: str | None = None
    performer_avatar_url: str | None = None
    performer_genres: list[str] = []
    performer_rating: float | None = None
    performer_review_count: int = 0
    application_message: str | None = None
    status: str = "PENDING"
    applied_at: datetime | None = None
    decision_at: datetime | None = None
    decision_reason: str | None = None

    @computed_field(alias="performerName")  # type: ignore[prop-decorator]
    @property
    def performer_name(self) -> str:
        """Best available display name for the applicant."""
        if self.performer_display_name:
            return self.performer_display_name
        full_name = " ".join(
            part
            for part in (self.performer_first_name, self.performer_last_name)
            if part
        )
        return full_name or "Unknown performer"

    @property
    def is_pending(self) -> bool:
        return self.status == "PENDING"
