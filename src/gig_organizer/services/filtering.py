"""Client-side search, status filtering and status partitioning."""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")

ALL_STATUSES = "all"


def matches_search(fields: Iterable[str | None], search: str) -> bool:
    """Case-insensitive substring match across display fields."""
    needle = search.strip().lower()
    if not needle:
        return True
    return any(field and needle in field.lower() for field in fields)


def matches_status(status: str, status_filter: str) -> bool:
    """Case-insensitive status match; ``all`` matches everything."""
    if not status_filter or status_filter.lower() == ALL_STATUSES:
        return True
    return status.lower() == status_filter.lower()


def filter_items(
    items: Sequence[T],
    *,
    search: str,
    status_filter: str,
    fields: Callable[[T], Iterable[str | None]],
    status: Callable[[T], str],
) -> list[T]:
    """Return items matching both the search term and the status filter."""
    return [
        item
        for item in items
        if matches_status(status(item), status_filter)
        and matches_search(fields(item), search)
    ]


def partition_by_status(
    items: Sequence[T], statuses: Sequence[str], status: Callable[[T], str]
) -> dict[str, list[T]]:
    """Split items into one bucket per status, preserving order.

    Statuses compare the way ``matches_status`` does. Items whose status is
    not listed are dropped from every bucket.
    """
    buckets: dict[str, list[T]] = {name: [] for name in statuses}
    by_key = {name.lower(): bucket for name, bucket in buckets.items()}
    for item in items:
        bucket = by_key.get(status(item).lower())
        if bucket is not None:
            bucket.append(item)
    return buckets
