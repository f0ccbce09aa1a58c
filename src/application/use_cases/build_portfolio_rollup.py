"""Use case to compute the calendar rollup of a portfolio."""

from collections.abc import Sequence

from src.domain.models.calendar import Granularity
from src.domain.models.portfolio import FinancialEntity, PortfolioRollupResult
from src.domain.policies.proration import (
    FRACTIONAL,
    BinaryWeekProration,
    ProrationPolicy,
)
from src.domain.services.rollup import compute_portfolio_rollup
from src.infrastructure.logging.logger import get_app_logger


class BuildPortfolioRollupUseCase:
    """Allocate portfolio entities over a fiscal year and aggregate."""

    def __init__(
        self,
        logger=None,
        policy: ProrationPolicy = FRACTIONAL,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            policy: Proration strategy used for every entity.
        """
        self._logger = logger or get_app_logger()
        self._policy = policy

    def execute(
        self,
        entities: Sequence[FinancialEntity],
        year: int,
        granularity: Granularity | str = Granularity.MONTH,
    ) -> PortfolioRollupResult:
        """Return the rollup for a snapshot of entities.

        Args:
            entities: Portfolio entities; copied into an immutable snapshot.
            year: Fiscal year.
            granularity: ``month`` or ``week``.

        Returns:
            PortfolioRollupResult: Per-entity rows and portfolio totals.

        Raises:
            ValueError: If the granularity is unknown.
        """
        snapshot = tuple(entities)
        mode = Granularity.parse(granularity)
        if (
            mode is Granularity.MONTH
            and isinstance(self._policy, BinaryWeekProration)
        ):
            self._logger.warning(
                "Binary week proration charges one weekly rate per month "
                "bucket; use week granularity for week-active billing."
            )

        result = compute_portfolio_rollup(
            snapshot,
            year,
            mode,
            policy=self._policy,
            logger=self._logger,
        )
        invalid = sum(1 for row in result.rows if row.date_error is not None)
        self._logger.info(
            f"Rollup computed: year={year}, granularity={mode.value}, "
            f"policy={self._policy.name}, entities={len(snapshot)}, "
            f"invalid={invalid}, margin={result.portfolio.total.margin}"
        )
        return result


__all__ = ["BuildPortfolioRollupUseCase", "PortfolioRollupResult"]
