"""Proration policies converting a weekly rate into a bucket amount."""

from decimal import Decimal
from typing import Protocol

from src.domain.constants import DAYS_PER_WEEK


class ProrationPolicy(Protocol):
    """Strategy scaling a weekly value by the days an entity overlaps."""

    name: str

    def scale(self, weekly_value: Decimal, overlap_days: int) -> Decimal:
        """Return the share of a weekly value earned over the overlap.

        Args:
            weekly_value: Amount accrued per full week.
            overlap_days: Inclusive count of overlapping days.

        Returns:
            Decimal: Amount attributed to the bucket.
        """


class FractionalDayProration:
    """Charge one seventh of the weekly value per overlapping day."""

    name = "fractional"

    def scale(self, weekly_value: Decimal, overlap_days: int) -> Decimal:
        if overlap_days <= 0:
            return Decimal("0")
        return weekly_value * overlap_days / DAYS_PER_WEEK


class BinaryWeekProration:
    """Charge the full weekly value for any bucket the entity touches."""

    name = "binary"

    def scale(self, weekly_value: Decimal, overlap_days: int) -> Decimal:
        if overlap_days <= 0:
            return Decimal("0")
        return weekly_value


FRACTIONAL = FractionalDayProration()
BINARY = BinaryWeekProration()

_POLICIES: dict[str, ProrationPolicy] = {
    FRACTIONAL.name: FRACTIONAL,
    BINARY.name: BINARY,
}


def resolve_proration_policy(name: str | None) -> ProrationPolicy:
    """Return the policy registered under a configuration name.

    Args:
        name: ``fractional`` or ``binary``; None selects the default.

    Returns:
        ProrationPolicy: Matching policy instance.

    Raises:
        ValueError: If the name is not registered.
    """
    if name is None:
        return FRACTIONAL
    key = name.strip().lower()
    try:
        return _POLICIES[key]
    except KeyError:
        raise ValueError(f"Unknown proration policy: {name!r}") from None


def available_policies() -> tuple[str, ...]:
    """Return the names of the registered policies."""
    return tuple(_POLICIES)


__all__ = [
    "ProrationPolicy",
    "FractionalDayProration",
    "BinaryWeekProration",
    "FRACTIONAL",
    "BINARY",
    "resolve_proration_policy",
    "available_policies",
]
