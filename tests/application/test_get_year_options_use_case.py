"""Tests for the GetYearOptionsUseCase."""

from datetime import date

from src.application.use_cases.get_year_options import GetYearOptionsUseCase


class _FixedClock:
    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today


def test_execute_lists_years_around_current_year() -> None:
    """Options span one year back and three ahead by default."""
    options = GetYearOptionsUseCase(_FixedClock(date(2026, 10, 18))).execute()

    assert options.years == (2025, 2026, 2027, 2028, 2029)
    assert options.default_year == 2026


def test_execute_honours_custom_window() -> None:
    """The window around the current year is configurable."""
    use_case = GetYearOptionsUseCase(
        _FixedClock(date(2024, 1, 1)),
        years_before=0,
        years_after=1,
    )

    assert use_case.execute().years == (2024, 2025)
