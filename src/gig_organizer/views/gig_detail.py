"""Gig detail page with lifecycle and application actions."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from gig_organizer.domain.errors import ActionInFlightError, FormValidationError
from gig_organizer.domain.gigs import Gig, GigApplication
from gig_organizer.services.applications import ApplicationService
from gig_organizer.services.gigs import GigService
from gig_organizer.services.inflight import InFlightRegistry
from gig_organizer.services.notifications import Notifier
from gig_organizer.views.lists import ERROR, IDLE, LOADING, READY, REFRESHING

_logger = logging.getLogger(__name__)


@dataclass
class GigDetailView:
    """One gig plus its applications; every action refetches the page."""

    gig_id: str
    gig_service: GigService
    application_service: ApplicationService
    inflight: InFlightRegistry
    notifier: Notifier
    gig: Gig | None = None
    applications: list[GigApplication] = field(default_factory=list)
    state: str = IDLE
    error: str | None = None

    async def load(self) -> bool:
        self.state = REFRESHING if self.gig is not None else LOADING
        try:
            self.gig = await self.gig_service.get_gig(self.gig_id)
        except Exception:
            _logger.exception("Error fetching gig details for %s", self.gig_id)
            self.state = ERROR
            self.error = "Failed to load gig details. Please try again."
            return False
        self.error = None
        self.applications = []
        if self.gig.applications_count > 0:
            await self._load_applications()
        self.state = READY
        return True

    async def _load_applications(self) -> None:
        try:
            page = await self.application_service.list_for_gig(self.gig_id)
        except Exception:
            _logger.exception("Error fetching applications for gig %s", self.gig_id)
            return
        self.applications = list(page.content)

    async def publish(self) -> bool:
        return await self._run(
            self.gig_id,
            "publish",
            lambda: self.gig_service.publish_gig(self.gig_id),
            success="Gig published",
            failure="Failed to publish gig. Please try again.",
        )

    async def complete(self) -> bool:
        return await self._run(
            self.gig_id,
            "complete",
            lambda: self.gig_service.complete_gig(self.gig_id),
            success="Gig marked as completed",
            failure="Failed to complete gig. Please try again.",
        )

    async def cancel(self, reason: str | None = None) -> bool:
        return await self._run(
            self.gig_id,
            "cancel",
            lambda: self.gig_service.cancel_gig(self.gig_id, reason),
            success="Gig cancelled",
            failure="Failed to cancel gig. Please try again.",
        )

    async def accept(self, application_id: str) -> bool:
        return await self._run(
            application_id,
            "accept",
            lambda: self.application_service.accept(self.gig_id, application_id),
            success="Application accepted",
            failure="Failed to accept application. Please try again.",
        )

    async def reject(self, application_id: str, reason: str) -> bool:
        if not reason.strip():
            self.notifier.error("Please provide a reason for rejection")
            return False
        return await self._run(
            application_id,
            "reject",
            lambda: self.application_service.reject(
                self.gig_id, application_id, reason
            ),
            success="Application rejected",
            failure="Failed to reject application. Please try again.",
        )

    async def _run(  # noqa: PLR0913
        self,
        item_id: str,
        action: str,
        call: Callable[[], Awaitable[object]],
        *,
        success: str,
        failure: str,
    ) -> bool:
        try:
            async with self.inflight.claim(item_id, action):
                await call()
        except ActionInFlightError:
            raise
        except FormValidationError as exc:
            self.notifier.error(str(exc))
            return False
        except Exception:
            _logger.exception("Error running %s on %s", action, item_id)
            self.notifier.error(failure)
            return False
        self.notifier.success(success)
        await self.load()
        return True

    def snapshot(self) -> dict[str, object]:
        if self.state == ERROR and self.gig is None:
            return {"state": self.state, "error": self.error}
        return {
            "state": self.state,
            "error": self.error,
            "gig": self.gig.to_payload() if self.gig else None,
            "applications": [item.to_payload() for item in self.applications],
            "busy": self.inflight.busy_items(),
        }
