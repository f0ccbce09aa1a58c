"""Domain models package."""

from .calendar import ActiveRange, CalendarBucket, Granularity, NormalizedRange
from .portfolio import (
    ZERO_AMOUNTS,
    Amounts,
    FinancialEntity,
    PortfolioRollup,
    PortfolioRollupResult,
    RollupRow,
    WeeklyRate,
    margin_pct,
)

__all__ = [
    "ActiveRange",
    "CalendarBucket",
    "Granularity",
    "NormalizedRange",
    "ZERO_AMOUNTS",
    "Amounts",
    "FinancialEntity",
    "PortfolioRollup",
    "PortfolioRollupResult",
    "RollupRow",
    "WeeklyRate",
    "margin_pct",
]
