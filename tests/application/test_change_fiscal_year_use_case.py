"""Tests for the ChangeFiscalYearUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.change_fiscal_year import (
    ChangeFiscalYearUseCase,
)
from src.domain.models import ActiveRange, FinancialEntity, WeeklyRate


def _entity(entity_id: str, start: str, end: str) -> FinancialEntity:
    return FinancialEntity(
        id=entity_id,
        name=entity_id,
        active_range=ActiveRange(start, end),
        weekly_rate=WeeklyRate(),
    )


def test_execute_clamps_ranges_to_new_year() -> None:
    """Ranges outside the new year are pulled inside it."""
    logger = MagicMock()
    entities = (
        _entity("inside", "2025-02-01", "2025-03-01"),
        _entity("before", "2024-01-01", "2024-12-31"),
        _entity("straddle", "2024-06-01", "2025-06-30"),
    )

    result = ChangeFiscalYearUseCase(logger=logger).execute(entities, 2025)

    assert [entity.active_range for entity in result] == [
        ActiveRange("2025-02-01", "2025-03-01"),
        ActiveRange("2025-01-01", "2025-01-01"),
        ActiveRange("2025-01-01", "2025-06-30"),
    ]
    assert "2 of 3" in logger.info.call_args[0][0]


def test_execute_returns_new_entities() -> None:
    """Input entities are left untouched."""
    original = _entity("p", "2023-03-01", "2023-04-01")

    result = ChangeFiscalYearUseCase(logger=MagicMock()).execute(
        [original],
        2024,
    )

    assert original.active_range == ActiveRange("2023-03-01", "2023-04-01")
    assert result[0] is not original
    assert result[0].id == "p"
