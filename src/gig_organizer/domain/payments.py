"""Payment models."""

from datetime import datetime

from gig_organizer.domain.base import ApiModel
from gig_organizer.domain.gigs import Money


class Payment(ApiModel):
    """Payment for a booked gig."""

    id: str
    gig_id: str
    organizer_id: str | None = None
    performer_id: str | None = None
    amount: Money
    provider: str
    status: str
    platform_fee: Money | None = None
    performer_payout: Money | None = None
    failure_reason: str | None = None
    processed_at: datetime | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaymentSummary(ApiModel):
    """Payment totals for the organizer."""

    total_payments: int = 0
    completed_payments: int = 0
    failed_payments: int = 0
    total_amount_processed: Money = Money()
    total_platform_fees: Money = Money()
