"""Clock port for the proforma application.

Use cases that need "today" depend on this protocol so that the current
date is injected instead of read from the environment.
"""

from datetime import date
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the current calendar date."""

    def today(self) -> date:
        """Return the current local date.

        Returns:
            date: Today's date in the local calendar.
        """


__all__ = ["ClockPort"]
