"""Normalization of form timestamps into the API's UTC wire format.

Values coming from a ``datetime-local`` form control carry no zone: they mean
wall-clock time where the organizer sits. Those are read in the configured
local zone and converted to UTC. Values that already carry ``Z`` or an offset
are taken as given. The output is always ``YYYY-MM-DDTHH:MM:SSZ``.
"""

import re
from datetime import UTC, datetime, tzinfo

_LOCAL_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})(?::(\d{2}))?$"
)
_DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_WIRE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def to_utc_iso(value: str | datetime | None, tz: tzinfo | None = None) -> str | None:
    """Convert a local or zoned timestamp to UTC; None when it can't be parsed.

    ``tz`` is the wall-clock zone for naive input; None means the host zone.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _format(_localize(value, tz))

    cleaned = value.strip()
    if not cleaned:
        return None

    match = _LOCAL_PATTERN.match(cleaned)
    if match:
        year, month, day, hour, minute, second = match.groups()
        try:
            local = datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second or 0),
            )
        except ValueError:
            return None
        return _format(_localize(local, tz))

    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError:
        return None
    if _DATE_ONLY_PATTERN.match(cleaned):
        # Bare dates are calendar days in UTC, not local midnight.
        return _format(parsed.replace(tzinfo=UTC))
    return _format(_localize(parsed, tz))


def to_utc_iso_or_raw(
    value: str | datetime | None, tz: tzinfo | None = None
) -> str | None:
    """Normalize a timestamp, falling back to the raw input when unparseable."""
    normalized = to_utc_iso(value, tz)
    if normalized is not None:
        return normalized
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    return value.strip() or None


def _localize(value: datetime, tz: tzinfo | None) -> datetime:
    if value.tzinfo is not None:
        return value
    if tz is None:
        return value.astimezone()
    return value.replace(tzinfo=tz)


def _format(value: datetime) -> str:
    return value.astimezone(UTC).strftime(_WIRE_FORMAT)
