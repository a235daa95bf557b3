"""Gig listing, creation and lifecycle transitions."""

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.base import ApiModel, Page
from gig_organizer.domain.errors import FormValidationError
from gig_organizer.domain.gigs import PAYMENT_METHODS, PRICE_TYPES, Gig, Money
from gig_organizer.timestamps import to_utc_iso, to_utc_iso_or_raw

DEFAULT_CANCEL_REASON = "Cancelled by organizer"


class GigDraft(ApiModel):
    """Form input for creating or replacing a gig.

    ``event_date`` and ``application_deadline`` hold whatever the form sent:
    usually a zone-less ``datetime-local`` value.
    """

    title: str = ""
    description: str | None = None
    category: str = ""
    genres: list[str] = []
    location_city: str | None = None
    event_date: str | None = None
    application_deadline: str | None = None
    price_euros: float = 0.0
    currency: str = "EUR"
    price_type: str = "FIXED"
    payment_method: str | None = "STRIPE_CONNECT"

    def unique_genres(self) -> list[str]:
        """Genres without blanks or repeats, in the order they were picked."""
        return list(dict.fromkeys(g.strip() for g in self.genres if g.strip()))

    def request_payload(self, tz: tzinfo | None = None) -> dict[str, object]:
        """Build the create/update body with UTC timestamps."""
        payload: dict[str, object | None] = {
            "title": self.title.strip(),
            "description": (self.description or "").strip() or None,
            "category": self.category,
            "genres": self.unique_genres(),
            "locationCity": (self.location_city or "").strip() or None,
            "eventDate": to_utc_iso_or_raw(self.event_date, tz),
            "applicationDeadline": to_utc_iso_or_raw(self.application_deadline, tz),
            "pricing": Money.from_euros(self.price_euros, self.currency).to_payload(),
            "priceType": self.price_type,
            "isNegotiable": self.price_type == "NEGOTIABLE",
            "paymentMethod": self.payment_method,
        }
        return {key: value for key, value in payload.items() if value is not None}


def validate_draft(  # noqa: PLR0912
    draft: GigDraft, *, now: datetime | None = None, tz: tzinfo | None = None
) -> None:
    """Raise FormValidationError for the first problem found in the form."""
    current = now or datetime.now(tz=UTC)
    if not draft.title.strip():
        raise FormValidationError("Gig title is required")
    if not draft.category:
        raise FormValidationError("Please select a category")
    if not draft.unique_genres():
        raise FormValidationError("Please select at least one genre")
    if not draft.event_date or not draft.event_date.strip():
        raise FormValidationError("Event date and time is required")
    if draft.price_euros <= 0:
        raise FormValidationError("Price must be greater than 0")
    if draft.price_type not in PRICE_TYPES:
        raise FormValidationError("Please select a valid price type")
    if not draft.payment_method:
        raise FormValidationError("Please select a payment method")
    if draft.payment_method not in PAYMENT_METHODS:
        raise FormValidationError("Please select a valid payment method")

    event_date = _parse_utc(draft.event_date, tz)
    if event_date is None:
        raise FormValidationError("Event date is not a valid date")
    if event_date <= current:
        raise FormValidationError("Event date must be in the future")

    if draft.application_deadline and draft.application_deadline.strip():
        deadline = _parse_utc(draft.application_deadline, tz)
        if deadline is None:
            raise FormValidationError("Application deadline is not a valid date")
        if deadline >= event_date:
            raise FormValidationError(
                "Application deadline must be before the event date"
            )
        if deadline <= current:
            raise FormValidationError("Application deadline must be in the future")


@dataclass
class GigService:
    """Gig reads and mutations for the signed-in organizer."""

    api: OrganizerApi
    local_tz: tzinfo | None = None

    async def list_gigs(self, page: int = 0, size: int = 20) -> Page[Gig]:
        payload = await self.api.get_gigs(page, size)
        return Page[Gig].model_validate(payload)

    async def get_gig(self, gig_id: str) -> Gig:
        payload = await self.api.get_gig(gig_id)
        return Gig.model_validate(payload)

    async def create_gig(
        self, draft: GigDraft, *, as_draft: bool = False, now: datetime | None = None
    ) -> Gig | None:
        """Create a gig; drafts skip form validation.

        Returns None when the API acknowledges without echoing the new gig.
        """
        if not as_draft:
            validate_draft(draft, now=now, tz=self.local_tz)
        payload = await self.api.create_gig(draft.request_payload(self.local_tz))
        if not payload:
            return None
        return Gig.model_validate(payload)

    async def update_gig(
        self, gig_id: str, draft: GigDraft, *, now: datetime | None = None
    ) -> Gig:
        validate_draft(draft, now=now, tz=self.local_tz)
        payload = await self.api.update_gig(
            gig_id, draft.request_payload(self.local_tz)
        )
        if not payload:
            return await self.get_gig(gig_id)
        return Gig.model_validate(payload)

    async def publish_gig(self, gig_id: str) -> None:
        await self.api.publish_gig(gig_id)

    async def complete_gig(self, gig_id: str) -> None:
        await self.api.complete_gig(gig_id)

    async def cancel_gig(self, gig_id: str, reason: str | None = None) -> None:
        cleaned = (reason or "").strip()
        await self.api.cancel_gig(gig_id, cleaned or DEFAULT_CANCEL_REASON)


def _parse_utc(value: str, tz: tzinfo | None) -> datetime | None:
    normalized = to_utc_iso(value, tz)
    if normalized is None:
        return None
    return datetime.fromisoformat(normalized)
