"""Settings helpers for the proforma rollup."""

from dataclasses import dataclass
import os
from typing import Optional

from src.domain.models.calendar import Granularity
from src.domain.policies.proration import available_policies
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ProformaSettings:
    """Settings selecting how the rollup is computed.

    Attributes:
        granularity: Bucket granularity (month or week).
        proration: Proration policy name (fractional or binary).
        year: Optional fiscal year; None means the current year.
    """

    granularity: Granularity = Granularity.MONTH
    proration: str = "fractional"
    year: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ProformaSettings":
        """Build settings from environment variables.

        Invalid values are logged and replaced by the defaults.

        Returns:
            ProformaSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        granularity = cls._granularity(
            os.getenv("PROFORMA_GRANULARITY", "month"),
            logger=logger,
        )
        proration = cls._proration(
            os.getenv("PROFORMA_PRORATION", "fractional"),
            logger=logger,
        )
        year = cls._year(os.getenv("PROFORMA_YEAR"), logger=logger)
        return cls(granularity=granularity, proration=proration, year=year)

    @staticmethod
    def _granularity(raw_value: str, logger) -> Granularity:
        try:
            return Granularity.parse(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid PROFORMA_GRANULARITY '{raw_value}'. "
                "Falling back to month."
            )
            return Granularity.MONTH

    @staticmethod
    def _proration(raw_value: str, logger) -> str:
        cleaned = raw_value.strip().lower()
        if cleaned in available_policies():
            return cleaned
        logger.warning(
            f"Invalid PROFORMA_PRORATION '{raw_value}'. "
            "Falling back to fractional."
        )
        return "fractional"

    @staticmethod
    def _year(raw_value: str | None, logger) -> int | None:
        if raw_value is None or not raw_value.strip():
            return None
        try:
            year = int(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid PROFORMA_YEAR '{raw_value}'. Using current year."
            )
            return None
        if not 1 <= year <= 9998:
            logger.warning(
                f"PROFORMA_YEAR {year} is out of range. Using current year."
            )
            return None
        return year


__all__ = ["ProformaSettings"]
