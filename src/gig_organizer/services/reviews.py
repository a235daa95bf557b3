"""Review reads for the organizer."""

from dataclasses import dataclass

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.base import Page
from gig_organizer.domain.reviews import Review, ReviewStatistics, ReviewSummary


@dataclass
class ReviewService:
    """Read-only access to reviews received and given."""

    api: OrganizerApi

    async def summary(self) -> ReviewSummary:
        return ReviewSummary.model_validate(await self.api.get_review_summary())

    async def statistics(self) -> ReviewStatistics:
        return ReviewStatistics.model_validate(await self.api.get_review_statistics())

    async def received(self, page: int = 0, size: int = 20) -> Page[Review]:
        return Page[Review].model_validate(
            await self.api.get_reviews_received(page, size)
        )

    async def given(self, page: int = 0, size: int = 20) -> Page[Review]:
        return Page[Review].model_validate(await self.api.get_reviews_given(page, size))
