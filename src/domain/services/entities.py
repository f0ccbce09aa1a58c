"""Factories for portfolio entities."""

from decimal import Decimal
import uuid

from src.domain.models.portfolio import FinancialEntity, WeeklyRate
from src.domain.services.dates import default_range_for_year


SEED_WEEKLY_RATE = WeeklyRate(
    revenue=Decimal("10000"),
    cost=Decimal("7000"),
    adjustments=Decimal("0"),
)


def new_entity(
    year: int,
    name: str,
    weekly_rate: WeeklyRate | None = None,
    entity_id: str | None = None,
) -> FinancialEntity:
    """Create an entity active for the whole of a year.

    Args:
        year: Fiscal year used for the default range.
        name: Display label.
        weekly_rate: Optional rate; zero rates when omitted.
        entity_id: Optional identifier; a random hex id when omitted.

    Returns:
        FinancialEntity: New entity.
    """
    return FinancialEntity(
        id=entity_id or uuid.uuid4().hex,
        name=name,
        active_range=default_range_for_year(year),
        weekly_rate=weekly_rate or WeeklyRate(),
    )


def seed_portfolio(year: int) -> tuple[FinancialEntity, ...]:
    """Return the starter portfolio shown before any edits."""
    return (new_entity(year, "Project 1", weekly_rate=SEED_WEEKLY_RATE),)


__all__ = ["SEED_WEEKLY_RATE", "new_entity", "seed_portfolio"]
