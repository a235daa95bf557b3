"""Review models."""

from datetime import datetime

from gig_organizer.domain.base import ApiModel


class Review(ApiModel):
    """Review exchanged between an organizer and a performer."""

    id: str
    gig_id: str
    reviewer_id: str
    reviewee_id: str
    review_type: str
    rating: int
    review_text: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewSummary(ApiModel):
    """Totals and latest reviews for the organizer."""

    total_reviews: int = 0
    average_rating: float | None = None
    rating_distribution: dict[str, int] = {}
    recent_reviews: list[Review] = []


class ReviewStatistics(ApiModel):
    """Detailed review statistics for the organizer."""

    user_id: str | None = None
    total_reviews_received: int = 0
    total_reviews_given: int = 0
    average_rating_received: float | None = None
    rating_distribution: dict[str, int] = {}
    positive_review_percentage: float = 0.0
    most_common_rating: int | None = None
    last_review_received_at: datetime | None = None
    last_review_given_at: datetime | None = None
    has_received_reviews: bool = False
    has_given_reviews: bool = False
