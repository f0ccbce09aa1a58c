"""Calendar bucket generation for a fiscal year."""

import calendar
from datetime import datetime, timedelta
from functools import lru_cache

from src.domain.constants import DAYS_PER_WEEK, MONTH_LABELS, NORMALIZED_HOUR
from src.domain.models.calendar import CalendarBucket, Granularity


def build_buckets(
    year: int,
    granularity: Granularity | str,
) -> tuple[CalendarBucket, ...]:
    """Return the ordered, contiguous buckets of a year.

    Month mode yields twelve buckets. Week mode yields 7-day buckets
    starting January 1 for as long as a bucket starts on or before
    December 31; the last one may run past the end of the year.

    Args:
        year: Fiscal year.
        granularity: ``month`` or ``week``.

    Returns:
        tuple[CalendarBucket, ...]: Buckets in calendar order.
    """
    return _build_buckets(int(year), Granularity.parse(granularity))


@lru_cache(maxsize=64)
def _build_buckets(
    year: int,
    granularity: Granularity,
) -> tuple[CalendarBucket, ...]:
    if granularity is Granularity.WEEK:
        return _week_buckets(year)
    return _month_buckets(year)


def _month_buckets(year: int) -> tuple[CalendarBucket, ...]:
    buckets = []
    for index, label in enumerate(MONTH_LABELS):
        month = index + 1
        last_day = calendar.monthrange(year, month)[1]
        buckets.append(
            CalendarBucket(
                index=index,
                start=datetime(year, month, 1, NORMALIZED_HOUR),
                end=datetime(year, month, last_day, NORMALIZED_HOUR),
                label=label,
            )
        )
    return tuple(buckets)


def _week_buckets(year: int) -> tuple[CalendarBucket, ...]:
    buckets = []
    year_end = datetime(year, 12, 31, NORMALIZED_HOUR)
    start = datetime(year, 1, 1, NORMALIZED_HOUR)
    index = 1
    while start <= year_end:
        end = start + timedelta(days=DAYS_PER_WEEK - 1)
        buckets.append(
            CalendarBucket(
                index=index,
                start=start,
                end=end,
                label=f"W{index}",
            )
        )
        start = end + timedelta(days=1)
        index += 1
    return tuple(buckets)


__all__ = ["build_buckets"]
