"""Date normalization, validation and year clamping."""

from datetime import date, datetime
import re

from src.domain.constants import (
    DATE_FORMAT,
    INVERTED_RANGE_ERROR,
    MISSING_DATES_ERROR,
    NORMALIZED_HOUR,
)
from src.domain.models.calendar import ActiveRange, NormalizedRange


_ISO_DATE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def normalize_date(value: str | date | None) -> datetime | None:
    """Parse a calendar date and pin it to the normalized hour.

    Text must be ``YYYY-MM-DD``. Dates that do not exist (e.g. Feb 30)
    are rejected instead of rolling over into the next month.

    Args:
        value: Date text, ``date`` or ``datetime`` value.

    Returns:
        datetime | None: Naive datetime at the normalized hour, or None.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, NORMALIZED_HOUR)
    if not isinstance(value, str):
        return None
    match = _ISO_DATE.match(value.strip())
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, NORMALIZED_HOUR)
    except ValueError:
        return None


def format_date(value: datetime) -> str:
    """Return the canonical ``YYYY-MM-DD`` text for a normalized date."""
    return value.strftime(DATE_FORMAT)


def year_bounds(year: int) -> tuple[datetime, datetime]:
    """Return January 1 and December 31 of a year at the normalized hour."""
    return (
        datetime(year, 1, 1, NORMALIZED_HOUR),
        datetime(year, 12, 31, NORMALIZED_HOUR),
    )


def default_range_for_year(year: int) -> ActiveRange:
    """Return the full-year range used for newly created entities."""
    first, last = year_bounds(year)
    return ActiveRange(start=format_date(first), end=format_date(last))


def normalize_range(active_range: ActiveRange) -> NormalizedRange | None:
    """Return the parsed range, or None when either bound is invalid."""
    start = normalize_date(active_range.start)
    end = normalize_date(active_range.end)
    if start is None or end is None:
        return None
    return NormalizedRange(start=start, end=end)


def validate_range(active_range: ActiveRange) -> str | None:
    """Return a user-facing error for an invalid range, or None.

    Args:
        active_range: Range as entered by the user.

    Returns:
        str | None: Error message when the range cannot be allocated.
    """
    normalized = normalize_range(active_range)
    if normalized is None:
        return MISSING_DATES_ERROR
    if normalized.start > normalized.end:
        return INVERTED_RANGE_ERROR
    return None


def clamp_to_year(active_range: ActiveRange, year: int) -> ActiveRange:
    """Clamp a range into the bounds of a fiscal year.

    Each parseable bound is clamped to ``[Jan 1, Dec 31]`` independently.
    If clamping leaves the end before the start, the end collapses onto
    the start. Unparseable bounds are kept as entered so validation can
    still report them.

    Args:
        active_range: Range as entered by the user.
        year: Target fiscal year.

    Returns:
        ActiveRange: Range guaranteed to sit inside the year when valid.
    """
    first, last = year_bounds(year)
    start = normalize_date(active_range.start)
    end = normalize_date(active_range.end)

    if start is not None:
        start = min(max(start, first), last)
    if end is not None:
        end = min(max(end, first), last)
    if start is not None and end is not None and start > end:
        end = start

    return ActiveRange(
        start=format_date(start) if start is not None else active_range.start,
        end=format_date(end) if end is not None else active_range.end,
    )


__all__ = [
    "normalize_date",
    "format_date",
    "year_bounds",
    "default_range_for_year",
    "normalize_range",
    "validate_range",
    "clamp_to_year",
]
