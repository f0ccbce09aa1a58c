"""Domain models for calendar ranges and allocation buckets."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Granularity(str, Enum):
    """Bucket granularity for a fiscal year."""

    MONTH = "month"
    WEEK = "week"

    @classmethod
    def parse(cls, value: "Granularity | str") -> "Granularity":
        """Return the granularity matching an enum member or its value.

        Raises:
            ValueError: If the value names no known granularity.
        """
        if isinstance(value, cls):
            return value
        cleaned = str(value).strip().lower()
        for member in cls:
            if member.value == cleaned:
                return member
        raise ValueError(f"Unknown granularity: {value!r}")


@dataclass(frozen=True)
class ActiveRange:
    """Raw date range of an entity as entered by a user.

    Attributes:
        start: Inclusive start date text (YYYY-MM-DD), possibly malformed.
        end: Inclusive end date text (YYYY-MM-DD), possibly malformed.
    """

    start: str | None
    end: str | None


@dataclass(frozen=True)
class NormalizedRange:
    """Parsed inclusive range with both bounds fixed at the same hour."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class CalendarBucket:
    """One allocation period of a fiscal year.

    Attributes:
        index: Display position (0-based for months, 1-based for weeks).
        start: Inclusive start, normalized to the fixed hour.
        end: Inclusive end, normalized to the fixed hour.
        label: Short display tag.
    """

    index: int
    start: datetime
    end: datetime
    label: str

    @property
    def day_count(self) -> int:
        """Return the number of calendar days spanned by the bucket."""
        return (self.end - self.start).days + 1


__all__ = ["Granularity", "ActiveRange", "NormalizedRange", "CalendarBucket"]
