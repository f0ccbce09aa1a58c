"""Use case to move a portfolio to another fiscal year."""

from collections.abc import Sequence
from dataclasses import replace

from src.domain.models.portfolio import FinancialEntity
from src.domain.services.dates import clamp_to_year
from src.infrastructure.logging.logger import get_app_logger


class ChangeFiscalYearUseCase:
    """Re-clamp entity ranges whenever the selected year changes."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        entities: Sequence[FinancialEntity],
        year: int,
    ) -> tuple[FinancialEntity, ...]:
        """Return new entities whose ranges sit inside the given year.

        Args:
            entities: Current portfolio entities (left unchanged).
            year: Newly selected fiscal year.

        Returns:
            tuple[FinancialEntity, ...]: Entities with clamped ranges.
        """
        clamped = []
        changed = 0
        for entity in entities:
            new_range = clamp_to_year(entity.active_range, year)
            if new_range != entity.active_range:
                changed += 1
            clamped.append(replace(entity, active_range=new_range))
        self._logger.info(
            f"Fiscal year set to {year}: {changed} of {len(clamped)} "
            f"entity ranges clamped"
        )
        return tuple(clamped)


__all__ = ["ChangeFiscalYearUseCase"]
