"""Domain policies package."""

from .proration import (
    BINARY,
    FRACTIONAL,
    BinaryWeekProration,
    FractionalDayProration,
    ProrationPolicy,
    available_policies,
    resolve_proration_policy,
)

__all__ = [
    "BINARY",
    "FRACTIONAL",
    "BinaryWeekProration",
    "FractionalDayProration",
    "ProrationPolicy",
    "available_policies",
    "resolve_proration_policy",
]
