"""Domain package for calendar allocation and portfolio rollups."""

from .constants import DAYS_PER_WEEK, MONTH_LABELS
from .models import (
    ActiveRange,
    Amounts,
    CalendarBucket,
    FinancialEntity,
    Granularity,
    PortfolioRollup,
    PortfolioRollupResult,
    RollupRow,
    WeeklyRate,
)
from .policies import ProrationPolicy, resolve_proration_policy
from .services import (
    amount_for,
    build_buckets,
    clamp_to_year,
    compute_portfolio_rollup,
    new_entity,
    normalize_date,
    validate_range,
)

__all__ = [
    "DAYS_PER_WEEK",
    "MONTH_LABELS",
    "ActiveRange",
    "Amounts",
    "CalendarBucket",
    "FinancialEntity",
    "Granularity",
    "PortfolioRollup",
    "PortfolioRollupResult",
    "RollupRow",
    "WeeklyRate",
    "ProrationPolicy",
    "resolve_proration_policy",
    "amount_for",
    "build_buckets",
    "clamp_to_year",
    "compute_portfolio_rollup",
    "new_entity",
    "normalize_date",
    "validate_range",
]
