"""Page-local state for fetched resource lists."""

import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from gig_organizer.domain.base import ApiModel
from gig_organizer.services.filtering import (
    ALL_STATUSES,
    filter_items,
    partition_by_status,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ApiModel)

IDLE = "idle"
LOADING = "loading"
REFRESHING = "refreshing"
READY = "ready"
ERROR = "error"


@dataclass
class ResourceListView(Generic[T]):
    """List fetched once per page mount, then filtered and grouped locally.

    ``loading`` means nothing has been shown yet; ``refreshing`` keeps the
    previous items visible. A failed load replaces the list with an error
    until ``retry`` succeeds.
    """

    loader: Callable[[], Awaitable[Sequence[T]]]
    label: str
    search_fields: Callable[[T], Iterable[str | None]]
    status_of: Callable[[T], str]
    statuses: Sequence[str]
    items: list[T] = field(default_factory=list)
    state: str = IDLE
    error: str | None = None
    has_loaded: bool = False

    async def load(self) -> bool:
        self.state = REFRESHING if self.has_loaded else LOADING
        try:
            items = await self.loader()
        except Exception:
            _logger.exception("Failed to load %s", self.label)
            self.items = []
            self.has_loaded = False
            self.state = ERROR
            self.error = f"Failed to load {self.label}. Please try again."
            return False
        self.items = list(items)
        self.has_loaded = True
        self.state = READY
        self.error = None
        return True

    async def retry(self) -> bool:
        """Discard everything and fetch from scratch."""
        self.items = []
        self.has_loaded = False
        self.error = None
        return await self.load()

    def filtered(self, search: str = "", status_filter: str = ALL_STATUSES) -> list[T]:
        return filter_items(
            self.items,
            search=search,
            status_filter=status_filter,
            fields=self.search_fields,
            status=self.status_of,
        )

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next((item for item in self.items if predicate(item)), None)

    def patch(self, predicate: Callable[[T], bool], update: Callable[[T], T]) -> int:
        """Replace matching items in place; returns how many changed."""
        changed = 0
        for index, item in enumerate(self.items):
            if predicate(item):
                self.items[index] = update(item)
                changed += 1
        return changed

    def snapshot(
        self, search: str = "", status_filter: str = ALL_STATUSES
    ) -> dict[str, object]:
        """Render state, filtered items and status tabs as JSON-ready data."""
        if self.state == ERROR:
            return {"state": self.state, "error": self.error}
        filtered = self.filtered(search, status_filter)
        tabs = partition_by_status(filtered, self.statuses, self.status_of)
        return {
            "state": self.state,
            "error": None,
            "total": len(self.items),
            "items": [item.to_payload() for item in filtered],
            "tabs": {
                name.lower(): [item.to_payload() for item in bucket]
                for name, bucket in tabs.items()
            },
        }
