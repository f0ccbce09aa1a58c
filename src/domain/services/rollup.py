"""Aggregation of bucket amounts into entity and portfolio rollups."""

from collections.abc import Iterable
from logging import Logger

from src.domain.models.calendar import Granularity
from src.domain.models.portfolio import (
    Amounts,
    FinancialEntity,
    PortfolioRollup,
    PortfolioRollupResult,
    RollupRow,
    WeeklyRate,
    ZERO_AMOUNTS,
    margin_pct,
)
from src.domain.policies.proration import FRACTIONAL, ProrationPolicy
from src.domain.services.buckets import build_buckets
from src.domain.services.dates import normalize_range, validate_range
from src.domain.services.proration import amount_for
from src.utils.decimal_utils import coerce_rate


def sum_amounts(amounts: Iterable[Amounts]) -> Amounts:
    """Return the element-wise sum of amounts (zero for no amounts)."""
    return sum(amounts, start=ZERO_AMOUNTS)


def compute_portfolio_rollup(
    entities: Iterable[FinancialEntity],
    year: int,
    granularity: Granularity | str,
    *,
    policy: ProrationPolicy = FRACTIONAL,
    logger: Logger | None = None,
) -> PortfolioRollupResult:
    """Allocate every entity over the year's buckets and aggregate.

    Entities with invalid ranges contribute zero to every bucket but keep
    their row and carry the validation message.

    Args:
        entities: Snapshot of the portfolio.
        year: Fiscal year.
        granularity: ``month`` or ``week``.
        policy: Proration strategy applied to every entity.
        logger: Optional logger used for warnings.

    Returns:
        PortfolioRollupResult: Per-entity rows and the portfolio rollup.
    """
    mode = Granularity.parse(granularity)
    buckets = build_buckets(year, mode)
    zero_row = tuple(ZERO_AMOUNTS for _ in buckets)

    rows: list[RollupRow] = []
    for entity in entities:
        date_error = validate_range(entity.active_range)
        if date_error is not None:
            if logger is not None:
                logger.warning(
                    f"Entity {entity.id} ({entity.name}) has invalid dates: "
                    f"{date_error}"
                )
            by_bucket = zero_row
        else:
            entity_range = normalize_range(entity.active_range)
            rate = _coerced_rate(entity.weekly_rate)
            by_bucket = tuple(
                amount_for(entity_range, rate, bucket, policy)
                for bucket in buckets
            )
        total = sum_amounts(by_bucket)
        rows.append(
            RollupRow(
                entity=entity,
                date_error=date_error,
                amounts_by_bucket=by_bucket,
                total=total,
                margin_pct=margin_pct(total.revenue, total.margin),
            )
        )

    portfolio_by_bucket = tuple(
        sum_amounts(row.amounts_by_bucket[position] for row in rows)
        for position in range(len(buckets))
    )
    portfolio_total = sum_amounts(portfolio_by_bucket)
    portfolio = PortfolioRollup(
        amounts_by_bucket=portfolio_by_bucket,
        total=portfolio_total,
        margin_pct=margin_pct(portfolio_total.revenue, portfolio_total.margin),
    )
    return PortfolioRollupResult(
        year=year,
        granularity=mode,
        buckets=buckets,
        rows=tuple(rows),
        portfolio=portfolio,
    )


def _coerced_rate(rate: WeeklyRate) -> WeeklyRate:
    return WeeklyRate(
        revenue=coerce_rate(rate.revenue),
        cost=coerce_rate(rate.cost),
        adjustments=coerce_rate(rate.adjustments),
    )


__all__ = ["sum_amounts", "compute_portfolio_rollup"]
