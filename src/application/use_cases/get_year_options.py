"""Use case listing the fiscal years offered to the user."""

from dataclasses import dataclass

from src.application.ports.clock import ClockPort


@dataclass(frozen=True)
class YearOptions:
    """Selectable fiscal years and the preselected one."""

    years: tuple[int, ...]
    default_year: int


class GetYearOptionsUseCase:
    """Build the year selector options around the current year."""

    def __init__(
        self,
        clock: ClockPort,
        years_before: int = 1,
        years_after: int = 3,
    ) -> None:
        self._clock = clock
        self._years_before = years_before
        self._years_after = years_after

    def execute(self) -> YearOptions:
        """Return the year options for the clock's current date."""
        current = self._clock.today().year
        years = tuple(
            range(current - self._years_before, current + self._years_after + 1)
        )
        return YearOptions(years=years, default_year=current)


__all__ = ["GetYearOptionsUseCase", "YearOptions"]
