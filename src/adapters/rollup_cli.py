"""CLI adapter printing the calendar rollup of the seed portfolio.

Year, granularity and proration policy come from the PROFORMA_* environment
variables; see ``ProformaSettings``.
"""

from src.adapters.formatting import format_money, format_pct
from src.domain.services.entities import seed_portfolio
from src.infrastructure.container import build_rollup_use_case, resolve_year
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ProformaSettings


def main() -> None:
    """Compute and print the rollup for the configured year."""
    logger = get_app_logger()
    settings = ProformaSettings.from_env()
    year = resolve_year(settings)
    entities = seed_portfolio(year)

    use_case = build_rollup_use_case(settings.proration)
    result = use_case.execute(entities, year, settings.granularity)
    logger.info(f"Printing rollup for {len(result.rows)} entities")

    print(
        f"Portfolio rollup (year={year}, "
        f"granularity={result.granularity.value}, "
        f"proration={settings.proration})"
    )
    for row in result.rows:
        line = (
            f"{row.entity.name}: margin={format_money(row.total.margin)} "
            f"({format_pct(row.margin_pct)})"
        )
        if row.date_error:
            line += f" [{row.date_error}]"
        print(line)
    for bucket, amounts in zip(
        result.buckets,
        result.portfolio.amounts_by_bucket,
    ):
        print(
            f"  {bucket.label}: revenue={format_money(amounts.revenue)}, "
            f"cost={format_money(amounts.cost)}, "
            f"margin={format_money(amounts.margin)} "
            f"({format_pct(amounts.margin_pct)})"
        )
    total = result.portfolio.total
    print(
        f"Total: revenue={format_money(total.revenue)}, "
        f"cost={format_money(total.cost)}, "
        f"adjustments={format_money(total.adjustments)}, "
        f"margin={format_money(total.margin)} "
        f"({format_pct(result.portfolio.margin_pct)})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
