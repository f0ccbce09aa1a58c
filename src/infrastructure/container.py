"""Composition root for wiring the proforma use cases."""

from src.application.ports.clock import ClockPort
from src.application.use_cases.build_portfolio_rollup import (
    BuildPortfolioRollupUseCase,
)
from src.application.use_cases.change_fiscal_year import (
    ChangeFiscalYearUseCase,
)
from src.application.use_cases.get_year_options import GetYearOptionsUseCase
from src.domain.policies.proration import resolve_proration_policy
from src.infrastructure.clock import SystemClock
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ProformaSettings


def build_clock() -> ClockPort:
    """Return the clock used to seed year selections."""
    return SystemClock()


def build_rollup_use_case(
    proration: str | None = None,
) -> BuildPortfolioRollupUseCase:
    """Return the rollup use case with the configured proration policy."""
    name = proration or ProformaSettings.from_env().proration
    return BuildPortfolioRollupUseCase(
        logger=get_app_logger(),
        policy=resolve_proration_policy(name),
    )


def build_change_fiscal_year_use_case() -> ChangeFiscalYearUseCase:
    """Return the use case clamping entities to a new year."""
    return ChangeFiscalYearUseCase(logger=get_app_logger())


def build_year_options_use_case(
    clock: ClockPort | None = None,
) -> GetYearOptionsUseCase:
    """Return the year options use case bound to a clock."""
    return GetYearOptionsUseCase(clock=clock or build_clock())


def resolve_year(
    settings: ProformaSettings,
    clock: ClockPort | None = None,
) -> int:
    """Return the configured fiscal year, or the clock's current year."""
    if settings.year is not None:
        return settings.year
    return (clock or build_clock()).today().year


__all__ = [
    "build_clock",
    "build_rollup_use_case",
    "build_change_fiscal_year_use_case",
    "build_year_options_use_case",
    "resolve_year",
]
