"""Tests for date normalization, validation and clamping."""

from datetime import date, datetime

from src.domain.constants import INVERTED_RANGE_ERROR, MISSING_DATES_ERROR
from src.domain.models import ActiveRange
from src.domain.services.dates import (
    clamp_to_year,
    default_range_for_year,
    normalize_date,
    normalize_range,
    validate_range,
)


def test_normalize_date_pins_noon() -> None:
    """Valid text should parse to the same day at 12:00."""
    assert normalize_date("2024-02-29") == datetime(2024, 2, 29, 12)
    assert normalize_date(" 2024-01-05 ") == datetime(2024, 1, 5, 12)


def test_normalize_date_rejects_rollover_dates() -> None:
    """Days that do not exist should not roll into the next month."""
    assert normalize_date("2024-02-30") is None
    assert normalize_date("2023-02-29") is None
    assert normalize_date("2024-13-01") is None


def test_normalize_date_rejects_malformed_text() -> None:
    """Only the YYYY-MM-DD format is accepted."""
    for value in ("", "2024-1-5", "01/05/2024", "2024-01-05T00:00", "soon"):
        assert normalize_date(value) is None
    assert normalize_date(None) is None
    assert normalize_date(20240105) is None
    assert normalize_date("\uff12\uff10\uff12\uff14-01-01") is None
    assert normalize_date("2024-0\u0661-01") is None


def test_normalize_date_accepts_date_objects() -> None:
    """date and datetime values should be pinned to noon as well."""
    assert normalize_date(date(2024, 3, 1)) == datetime(2024, 3, 1, 12)
    assert normalize_date(datetime(2024, 3, 1, 0, 30)) == datetime(
        2024, 3, 1, 12
    )


def test_validate_range_reports_missing_dates() -> None:
    """Either bound unparseable should yield the required-dates message."""
    assert validate_range(ActiveRange("", "2024-01-31")) == MISSING_DATES_ERROR
    assert validate_range(ActiveRange("2024-01-01", None)) == MISSING_DATES_ERROR
    assert (
        validate_range(ActiveRange("2024-02-30", "2024-03-01"))
        == MISSING_DATES_ERROR
    )


def test_validate_range_reports_inverted_range() -> None:
    """A start after the end should be reported."""
    assert (
        validate_range(ActiveRange("2024-02-01", "2024-01-31"))
        == INVERTED_RANGE_ERROR
    )


def test_validate_range_accepts_single_day() -> None:
    """Start equal to end is a valid one-day range."""
    assert validate_range(ActiveRange("2024-06-01", "2024-06-01")) is None
    assert normalize_range(ActiveRange("2024-06-01", "2024-06-01")) is not None


def test_clamp_to_year_is_noop_inside_year() -> None:
    """Clamping an in-year range should not change it."""
    active_range = ActiveRange("2024-03-01", "2024-09-30")

    assert clamp_to_year(active_range, 2024) == active_range


def test_clamp_to_year_collapses_range_before_year() -> None:
    """A range entirely before the year collapses onto January 1."""
    clamped = clamp_to_year(ActiveRange("2022-05-01", "2023-06-30"), 2024)

    assert clamped == ActiveRange("2024-01-01", "2024-01-01")


def test_clamp_to_year_collapses_range_after_year() -> None:
    """A range entirely after the year collapses onto December 31."""
    clamped = clamp_to_year(ActiveRange("2026-01-01", "2026-02-01"), 2024)

    assert clamped == ActiveRange("2024-12-31", "2024-12-31")


def test_clamp_to_year_trims_straddling_range() -> None:
    """Each bound is clamped independently."""
    clamped = clamp_to_year(ActiveRange("2023-11-15", "2025-02-01"), 2024)

    assert clamped == ActiveRange("2024-01-01", "2024-12-31")


def test_clamp_to_year_forces_end_onto_start() -> None:
    """An end left before the start after clamping moves to the start."""
    clamped = clamp_to_year(ActiveRange("2024-05-01", "2024-03-01"), 2024)

    assert clamped == ActiveRange("2024-05-01", "2024-05-01")


def test_clamp_to_year_keeps_unparseable_bounds() -> None:
    """Invalid text survives clamping so validation still reports it."""
    clamped = clamp_to_year(ActiveRange("not a date", "2025-03-01"), 2024)

    assert clamped == ActiveRange("not a date", "2024-12-31")
    assert validate_range(clamped) == MISSING_DATES_ERROR


def test_default_range_for_year_spans_year() -> None:
    """New entities default to the whole year."""
    assert default_range_for_year(2025) == ActiveRange(
        "2025-01-01",
        "2025-12-31",
    )
