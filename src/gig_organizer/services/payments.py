"""Payment reads for the organizer."""

from dataclasses import dataclass

import httpx

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.base import Page
from gig_organizer.domain.errors import ApiError
from gig_organizer.domain.payments import Payment, PaymentSummary


@dataclass
class PaymentService:
    """Read-only access to payments."""

    api: OrganizerApi

    async def list_payments(self, page: int = 0, size: int = 20) -> Page[Payment]:
        return Page[Payment].model_validate(await self.api.get_payments(page, size))

    async def summary(self) -> PaymentSummary:
        return PaymentSummary.model_validate(await self.api.get_payment_summary())

    async def for_gig(self, gig_id: str) -> Payment | None:
        """Return the gig's payment, or None when none exists yet."""
        try:
            payload = await self.api.get_payment_by_gig(gig_id)
        except ApiError as exc:
            if exc.status == httpx.codes.NOT_FOUND:
                return None
            raise
        if not payload:
            return None
        return Payment.model_validate(payload)
