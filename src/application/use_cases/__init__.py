"""Application use cases package."""

from .build_portfolio_rollup import (
    BuildPortfolioRollupUseCase,
    PortfolioRollupResult,
)
from .change_fiscal_year import ChangeFiscalYearUseCase
from .get_year_options import GetYearOptionsUseCase, YearOptions

__all__ = [
    "BuildPortfolioRollupUseCase",
    "PortfolioRollupResult",
    "ChangeFiscalYearUseCase",
    "GetYearOptionsUseCase",
    "YearOptions",
]
