"""Overlap proration of weekly rates into bucket amounts."""

from src.domain.models.calendar import CalendarBucket, NormalizedRange
from src.domain.models.portfolio import Amounts, WeeklyRate, ZERO_AMOUNTS
from src.domain.policies.proration import FRACTIONAL, ProrationPolicy


def overlap_days(
    entity_range: NormalizedRange,
    bucket: CalendarBucket,
) -> int:
    """Return the inclusive count of days shared by a range and a bucket.

    Args:
        entity_range: Normalized entity range.
        bucket: Allocation bucket.

    Returns:
        int: Overlapping days, zero when disjoint.
    """
    overlap_start = max(entity_range.start, bucket.start)
    overlap_end = min(entity_range.end, bucket.end)
    if overlap_start > overlap_end:
        return 0
    elapsed = overlap_end - overlap_start
    return round(elapsed.total_seconds() / 86400) + 1


def amount_for(
    entity_range: NormalizedRange,
    weekly_rate: WeeklyRate,
    bucket: CalendarBucket,
    policy: ProrationPolicy = FRACTIONAL,
) -> Amounts:
    """Return the amounts an entity contributes to one bucket.

    Args:
        entity_range: Normalized entity range.
        weekly_rate: Constant weekly rate of the entity.
        bucket: Allocation bucket.
        policy: Strategy turning overlap days into a share of the rate.

    Returns:
        Amounts: Prorated revenue, cost and adjustments.
    """
    days = overlap_days(entity_range, bucket)
    if days == 0:
        return ZERO_AMOUNTS
    return Amounts(
        revenue=policy.scale(weekly_rate.revenue, days),
        cost=policy.scale(weekly_rate.cost, days),
        adjustments=policy.scale(weekly_rate.adjustments, days),
    )


__all__ = ["overlap_days", "amount_for"]
