"""Performer applications across the organizer's gigs."""

import logging
from dataclasses import dataclass

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.base import Page
from gig_organizer.domain.errors import FormValidationError
from gig_organizer.domain.gigs import Gig, GigApplication
from gig_organizer.services.fanout import gather_settled

_logger = logging.getLogger(__name__)


@dataclass
class ApplicationService:
    """Reads and decisions on performer applications."""

    api: OrganizerApi
    gig_page_size: int = 100
    application_page_size: int = 50

    async def list_for_gig(
        self, gig_id: str, page: int = 0, size: int | None = None
    ) -> Page[GigApplication]:
        payload = await self.api.get_gig_applications(
            gig_id, page, size or self.application_page_size
        )
        return Page[GigApplication].model_validate(payload)

    async def list_all(self) -> list[GigApplication]:
        """Collect applications for every gig, newest first.

        A gig whose applications fail to load is logged and skipped.
        """
        gigs = Page[Gig].model_validate(
            await self.api.get_gigs(0, self.gig_page_size)
        ).content
        outcomes = await gather_settled(
            *(self.list_for_gig(gig.gig_id) for gig in gigs)
        )
        applications: list[GigApplication] = []
        for gig, outcome in zip(gigs, outcomes, strict=True):
            if outcome.error is not None:
                _logger.error(
                    "Failed to load applications for gig %s: %s",
                    gig.gig_id,
                    outcome.error,
                )
                continue
            for application in outcome.value_or(Page[GigApplication]()).content:
                if not application.gig_title:
                    application = application.model_copy(
                        update={"gig_title": gig.title}
                    )
                applications.append(application)
        return sort_newest_first(applications)

    async def accept(self, gig_id: str, application_id: str) -> None:
        await self.api.accept_application(gig_id, application_id)

    async def reject(
        self, gig_id: str, application_id: str, reason: str
    ) -> GigApplication | None:
        """Reject with a reason; returns the updated application when echoed."""
        cleaned = reason.strip()
        if not cleaned:
            raise FormValidationError("Please provide a reason for rejection")
        payload = await self.api.reject_application(gig_id, application_id, cleaned)
        if not payload:
            return None
        return GigApplication.model_validate(payload)


def sort_newest_first(applications: list[GigApplication]) -> list[GigApplication]:
    return sorted(
        applications,
        key=lambda app: app.applied_at.timestamp() if app.applied_at else float("-inf"),
        reverse=True,
    )
