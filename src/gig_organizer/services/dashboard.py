"""Dashboard overview built from independent requests."""

import logging
from dataclasses import dataclass, field

from gig_organizer.domain.gigs import Gig
from gig_organizer.domain.profile import OrganizerStatistics
from gig_organizer.services.chats import ChatService
from gig_organizer.services.fanout import gather_settled
from gig_organizer.services.gigs import GigService
from gig_organizer.services.profile import ProfileService

_logger = logging.getLogger(__name__)

RECENT_GIGS_LIMIT = 5


@dataclass
class DashboardSummary:
    """Whatever slices of the overview loaded; missing slices stay at defaults."""

    statistics: OrganizerStatistics | None = None
    recent_gigs: list[Gig] = field(default_factory=list)
    unread_count: int = 0
    failed: list[str] = field(default_factory=list)

    @property
    def completion_rate(self) -> float:
        """Completed over created gigs, with the denominator floored at 1."""
        if self.statistics is None:
            return 0.0
        created = max(self.statistics.total_gigs_created, 1)
        return self.statistics.total_gigs_completed / created

    def to_dict(self) -> dict[str, object]:
        return {
            "statistics": self.statistics.to_payload() if self.statistics else None,
            "recentGigs": [gig.to_payload() for gig in self.recent_gigs],
            "unreadCount": self.unread_count,
            "completionRate": self.completion_rate,
            "failed": list(self.failed),
        }


@dataclass
class DashboardService:
    """Loads statistics, recent gigs and the unread badge concurrently."""

    profile_service: ProfileService
    gig_service: GigService
    chat_service: ChatService

    async def load(self) -> DashboardSummary:
        statistics, gigs, unread = await gather_settled(
            self.profile_service.get_statistics(),
            self.gig_service.list_gigs(0, RECENT_GIGS_LIMIT),
            self.chat_service.unread_count(),
        )
        summary = DashboardSummary()
        if statistics.ok:
            summary.statistics = statistics.value
        else:
            _logger.error("Failed to fetch statistics: %s", statistics.error)
            summary.failed.append("statistics")
        if gigs.ok and gigs.value is not None:
            summary.recent_gigs = list(gigs.value.content)
        else:
            _logger.error("Failed to fetch gigs: %s", gigs.error)
            summary.failed.append("recentGigs")
        if unread.ok:
            summary.unread_count = unread.value_or(0)
        else:
            _logger.error("Failed to fetch unread count: %s", unread.error)
            summary.failed.append("unreadCount")
        return summary
