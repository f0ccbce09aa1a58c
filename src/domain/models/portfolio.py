"""Domain models for portfolio entities and rollups."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.calendar import ActiveRange, CalendarBucket, Granularity


def margin_pct(revenue: Decimal, margin: Decimal) -> Decimal | None:
    """Return margin divided by revenue, or None when revenue is not positive.

    Args:
        revenue: Revenue amount.
        margin: Margin amount.

    Returns:
        Decimal | None: Margin ratio, undefined for non-positive revenue.
    """
    if not revenue.is_finite() or revenue <= 0:
        return None
    return margin / revenue


@dataclass(frozen=True)
class WeeklyRate:
    """Amounts accrued per full 7-day week while an entity is active."""

    revenue: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")
    adjustments: Decimal = Decimal("0")


@dataclass(frozen=True)
class FinancialEntity:
    """A project with an active date range and a constant weekly rate.

    Attributes:
        id: Opaque identifier, unique within a portfolio.
        name: Display label.
        active_range: Inclusive date range as entered.
        weekly_rate: Revenue, cost and adjustments per week.
    """

    id: str
    name: str
    active_range: ActiveRange
    weekly_rate: WeeklyRate = field(default_factory=WeeklyRate)


@dataclass(frozen=True)
class Amounts:
    """Revenue, cost and adjustments for a period.

    Margin is always derived from the three components.
    """

    revenue: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")
    adjustments: Decimal = Decimal("0")

    @property
    def margin(self) -> Decimal:
        """Return revenue minus cost plus adjustments."""
        return self.revenue - self.cost + self.adjustments

    @property
    def margin_pct(self) -> Decimal | None:
        """Return the margin ratio for these amounts."""
        return margin_pct(self.revenue, self.margin)

    def __add__(self, other: "Amounts") -> "Amounts":
        if not isinstance(other, Amounts):
            return NotImplemented
        return Amounts(
            revenue=self.revenue + other.revenue,
            cost=self.cost + other.cost,
            adjustments=self.adjustments + other.adjustments,
        )


ZERO_AMOUNTS = Amounts()


@dataclass(frozen=True)
class RollupRow:
    """Per-entity rollup across all buckets of a year."""

    entity: FinancialEntity
    date_error: str | None
    amounts_by_bucket: tuple[Amounts, ...]
    total: Amounts
    margin_pct: Decimal | None


@dataclass(frozen=True)
class PortfolioRollup:
    """Portfolio-wide sums per bucket and for the year."""

    amounts_by_bucket: tuple[Amounts, ...]
    total: Amounts
    margin_pct: Decimal | None


@dataclass(frozen=True)
class PortfolioRollupResult:
    """Complete rollup for a year, ready for presentation."""

    year: int
    granularity: Granularity
    buckets: tuple[CalendarBucket, ...]
    rows: tuple[RollupRow, ...]
    portfolio: PortfolioRollup


__all__ = [
    "margin_pct",
    "WeeklyRate",
    "FinancialEntity",
    "Amounts",
    "ZERO_AMOUNTS",
    "RollupRow",
    "PortfolioRollup",
    "PortfolioRollupResult",
]
