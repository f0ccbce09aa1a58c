"""System clock adapter."""

from datetime import date


class SystemClock:
    """Clock reading the local system date."""

    def today(self) -> date:
        return date.today()


__all__ = ["SystemClock"]
