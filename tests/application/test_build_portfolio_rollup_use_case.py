"""Tests for the BuildPortfolioRollupUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.build_portfolio_rollup import (
    BuildPortfolioRollupUseCase,
)
from src.domain.models import ActiveRange, FinancialEntity, Granularity, WeeklyRate
from src.domain.policies.proration import BINARY


def _entities() -> list[FinancialEntity]:
    return [
        FinancialEntity(
            id="p1",
            name="Project 1",
            active_range=ActiveRange("2024-01-01", "2024-01-14"),
            weekly_rate=WeeklyRate(
                revenue=Decimal("7000"),
                cost=Decimal("3500"),
            ),
        ),
        FinancialEntity(
            id="p2",
            name="Project 2",
            active_range=ActiveRange("2024-02-30", "2024-03-01"),
            weekly_rate=WeeklyRate(revenue=Decimal("700")),
        ),
    ]


def test_execute_returns_rollup_and_logs_summary() -> None:
    """Use case should compute the rollup and log a summary line."""
    logger = MagicMock()
    use_case = BuildPortfolioRollupUseCase(logger=logger)

    result = use_case.execute(_entities(), 2024, "month")

    assert result.year == 2024
    assert result.granularity is Granularity.MONTH
    assert [row.entity.id for row in result.rows] == ["p1", "p2"]
    assert result.portfolio.total.revenue == Decimal("14000")
    assert result.portfolio.total.margin == Decimal("7000")
    assert result.rows[1].date_error is not None
    logger.warning.assert_called_once()
    info_message = logger.info.call_args[0][0]
    assert "year=2024" in info_message
    assert "invalid=1" in info_message


def test_execute_does_not_mutate_input_sequence() -> None:
    """The caller's entity list is read as a snapshot."""
    entities = _entities()
    before = list(entities)

    BuildPortfolioRollupUseCase(logger=MagicMock()).execute(
        entities,
        2024,
        Granularity.WEEK,
    )

    assert entities == before


def test_binary_policy_with_months_logs_warning() -> None:
    """Binary proration over month buckets is allowed but flagged."""
    logger = MagicMock()
    use_case = BuildPortfolioRollupUseCase(logger=logger, policy=BINARY)

    result = use_case.execute(_entities()[:1], 2024, "month")

    assert result.portfolio.total.revenue == Decimal("7000")
    assert "Binary week proration" in logger.warning.call_args[0][0]


def test_binary_policy_with_weeks_charges_whole_weeks() -> None:
    """Week-active billing charges each touched week in full."""
    logger = MagicMock()
    use_case = BuildPortfolioRollupUseCase(logger=logger, policy=BINARY)

    result = use_case.execute(_entities()[:1], 2024, "week")

    assert result.portfolio.total.revenue == Decimal("14000")
    logger.warning.assert_not_called()


def test_execute_rejects_unknown_granularity() -> None:
    """Unknown granularities are a caller error."""
    use_case = BuildPortfolioRollupUseCase(logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(_entities(), 2024, "day")


def test_default_logger_is_app_logger(monkeypatch) -> None:
    """Without a logger the use case falls back to the app logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        "src.application.use_cases.build_portfolio_rollup.get_app_logger",
        lambda: fake_logger,
    )

    BuildPortfolioRollupUseCase().execute([], 2024)

    fake_logger.info.assert_called_once()
