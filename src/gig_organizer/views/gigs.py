"""Gigs page list."""

from gig_organizer.domain.gigs import GIG_STATUSES, Gig
from gig_organizer.services.gigs import GigService
from gig_organizer.views.lists import ResourceListView


def gig_search_fields(gig: Gig) -> list[str | None]:
    return [gig.title, gig.location_city, gig.category]


def gig_list_view(
    service: GigService, page: int = 0, size: int = 20
) -> ResourceListView[Gig]:
    async def load() -> list[Gig]:
        return (await service.list_gigs(page, size)).content

    return ResourceListView(
        loader=load,
        label="gigs",
        search_fields=gig_search_fields,
        status_of=lambda gig: gig.status,
        statuses=GIG_STATUSES,
    )
