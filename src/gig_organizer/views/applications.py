"""Applications page: every application across the organizer's gigs."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from gig_organizer.domain.errors import ActionInFlightError, FormValidationError
from gig_organizer.domain.gigs import APPLICATION_STATUSES, GigApplication
from gig_organizer.services.applications import ApplicationService
from gig_organizer.services.inflight import InFlightRegistry
from gig_organizer.services.notifications import Notifier
from gig_organizer.views.lists import ResourceListView

_logger = logging.getLogger(__name__)


def application_search_fields(application: GigApplication) -> list[str | None]:
    return [
        application.performer_first_name,
        application.performer_last_name,
        application.performer_display_name,
        application.gig_title,
    ]


@dataclass
class ApplicationsBoard:
    """Flat list of applications with accept/reject actions.

    Accepting rejects competing applications server-side, so it refetches.
    Rejecting only touches one application, so it patches the local list.
    """

    service: ApplicationService
    inflight: InFlightRegistry
    notifier: Notifier
    listing: ResourceListView[GigApplication] = field(init=False)

    def __post_init__(self) -> None:
        self.listing = ResourceListView(
            loader=self.service.list_all,
            label="applications",
            search_fields=application_search_fields,
            status_of=lambda application: application.status,
            statuses=APPLICATION_STATUSES,
        )

    async def load(self) -> bool:
        return await self.listing.load()

    def get(self, application_id: str) -> GigApplication | None:
        return self.listing.find(lambda application: application.id == application_id)

    def is_busy(self, application_id: str) -> bool:
        return self.inflight.is_busy(application_id)

    async def accept(self, application_id: str, gig_id: str | None = None) -> bool:
        application = await self._pending(application_id, gig_id)
        if application is None:
            return False
        try:
            async with self.inflight.claim(application_id, "accept"):
                await self.service.accept(application.gig_id, application.id)
        except ActionInFlightError:
            raise
        except Exception:
            _logger.exception("Error accepting application %s", application_id)
            self.notifier.error("Failed to accept application")
            return False
        self.notifier.success(
            f"Accepted application from {application.performer_name}"
        )
        await self.listing.load()
        return True

    async def reject(
        self, application_id: str, reason: str, gig_id: str | None = None
    ) -> bool:
        if not reason.strip():
            self.notifier.error("Please provide a reason for rejection")
            return False
        application = await self._pending(application_id, gig_id)
        if application is None:
            return False
        try:
            async with self.inflight.claim(application_id, "reject"):
                updated = await self.service.reject(
                    application.gig_id, application.id, reason
                )
        except ActionInFlightError:
            raise
        except FormValidationError as exc:
            self.notifier.error(str(exc))
            return False
        except Exception:
            _logger.exception("Error rejecting application %s", application_id)
            self.notifier.error("Failed to reject application")
            return False

        replacement = updated or application.model_copy(
            update={
                "status": "REJECTED",
                "decision_reason": reason.strip(),
                "decision_at": datetime.now(tz=UTC),
            }
        )
        self.listing.patch(
            lambda item: item.id == application_id, lambda _: replacement
        )
        self.notifier.success(
            f"Rejected application from {application.performer_name}"
        )
        return True

    async def _pending(
        self, application_id: str, gig_id: str | None
    ) -> GigApplication | None:
        """Find an undecided application on the board, or within ``gig_id``."""
        application = self.get(application_id)
        if application is None and gig_id is not None:
            application = await self._find_in_gig(gig_id, application_id)
        if application is None:
            self.notifier.error("Application not found")
            return None
        if not application.is_pending:
            self.notifier.error("Only pending applications can be decided")
            return None
        return application

    async def _find_in_gig(
        self, gig_id: str, application_id: str
    ) -> GigApplication | None:
        try:
            page = await self.service.list_for_gig(gig_id)
        except Exception:
            _logger.exception("Error fetching applications for gig %s", gig_id)
            return None
        return next((item for item in page.content if item.id == application_id), None)
