"""Domain services package."""

from .buckets import build_buckets
from .dates import (
    clamp_to_year,
    default_range_for_year,
    normalize_date,
    normalize_range,
    validate_range,
)
from .entities import new_entity, seed_portfolio
from .proration import amount_for, overlap_days
from .rollup import compute_portfolio_rollup, sum_amounts

__all__ = [
    "build_buckets",
    "clamp_to_year",
    "default_range_for_year",
    "normalize_date",
    "normalize_range",
    "validate_range",
    "new_entity",
    "seed_portfolio",
    "amount_for",
    "overlap_days",
    "compute_portfolio_rollup",
    "sum_amounts",
]
