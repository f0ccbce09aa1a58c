"""Streamlit proforma entry point."""

from collections.abc import Sequence
import uuid

import altair as alt
import streamlit as st

from src.adapters.formatting import format_money, format_pct
from src.application.use_cases.build_portfolio_rollup import (
    PortfolioRollupResult,
)
from src.application.use_cases.get_year_options import YearOptions
from src.domain.models import (
    ActiveRange,
    Amounts,
    FinancialEntity,
    WeeklyRate,
)
from src.domain.models.calendar import Granularity
from src.domain.policies.proration import available_policies
from src.domain.services.entities import new_entity, seed_portfolio
from src.infrastructure.container import (
    build_clock,
    build_change_fiscal_year_use_case,
    build_rollup_use_case,
    build_year_options_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.utils.decimal_utils import coerce_rate


_COLUMNS = (
    "ID",
    "Project",
    "Start",
    "End",
    "Revenue / wk",
    "Cost / wk",
    "Adjustments / wk",
)


def _fetch_year_options() -> YearOptions:
    """Fetch selectable years from the system clock."""
    return build_year_options_use_case().execute()


@st.cache_data(show_spinner=False)
def _load_year_options(day_stamp: str) -> YearOptions:
    """Cached wrapper around _fetch_year_options, refreshed daily."""
    _ = day_stamp
    return _fetch_year_options()


def _entity_to_record(entity: FinancialEntity) -> dict[str, str | float]:
    """Flatten an entity into an editor row."""
    return {
        "ID": entity.id,
        "Project": entity.name,
        "Start": entity.active_range.start or "",
        "End": entity.active_range.end or "",
        "Revenue / wk": float(entity.weekly_rate.revenue),
        "Cost / wk": float(entity.weekly_rate.cost),
        "Adjustments / wk": float(entity.weekly_rate.adjustments),
    }


def _entities_from_records(
    records: Sequence[dict],
    year: int,
) -> tuple[FinancialEntity, ...]:
    """Rebuild entities from edited rows.

    Rows added in the editor get a fresh id, a default name and the full
    year as their range.
    """
    entities = []
    for position, record in enumerate(records, start=1):
        entity_id = str(record.get("ID") or "").strip() or uuid.uuid4().hex
        name = str(record.get("Project") or "").strip() or f"Project {position}"
        start = record.get("Start")
        end = record.get("End")
        if not start and not end:
            active_range = new_entity(year, name).active_range
        else:
            active_range = ActiveRange(
                start=str(start) if start else None,
                end=str(end) if end else None,
            )
        entities.append(
            FinancialEntity(
                id=entity_id,
                name=name,
                active_range=active_range,
                weekly_rate=WeeklyRate(
                    revenue=coerce_rate(record.get("Revenue / wk")),
                    cost=coerce_rate(record.get("Cost / wk")),
                    adjustments=coerce_rate(record.get("Adjustments / wk")),
                ),
            )
        )
    return tuple(entities)


def _table_record(
    name: str,
    labels: Sequence[str],
    amounts_by_bucket: Sequence[Amounts],
    total: Amounts,
) -> dict[str, str]:
    """Format one table row: margin and margin % per bucket, then totals."""
    record = {"Project": name}
    for label, amounts in zip(labels, amounts_by_bucket):
        record[label] = format_money(amounts.margin)
        record[f"{label} %"] = format_pct(amounts.margin_pct)
    record["Revenue"] = format_money(total.revenue)
    record["Cost"] = format_money(total.cost)
    record["Adjustments"] = format_money(total.adjustments)
    record["Total"] = format_money(total.margin)
    record["Margin %"] = format_pct(total.margin_pct)
    return record


def _rollup_table(result: PortfolioRollupResult) -> list[dict[str, str]]:
    """Build display rows: one per entity plus the portfolio row."""
    labels = [bucket.label for bucket in result.buckets]
    table = [
        _table_record(
            row.entity.name,
            labels,
            row.amounts_by_bucket,
            row.total,
        )
        for row in result.rows
    ]
    table.append(
        _table_record(
            "Portfolio",
            labels,
            result.portfolio.amounts_by_bucket,
            result.portfolio.total,
        )
    )
    return table


def _chart_data(
    result: PortfolioRollupResult,
) -> list[dict[str, str | float | int]]:
    """Return Altair-ready portfolio figures per bucket."""
    return [
        {
            "order": position,
            "bucket": bucket.label,
            "margin": float(amounts.margin),
            "margin_label": format_money(amounts.margin),
            "margin_pct_label": format_pct(amounts.margin_pct),
        }
        for position, (bucket, amounts) in enumerate(
            zip(result.buckets, result.portfolio.amounts_by_bucket)
        )
    ]


def _render_margin_chart(result: PortfolioRollupResult) -> None:
    """Render a bar chart of portfolio margin per bucket."""
    data = _chart_data(result)
    if not data:
        st.info("No buckets to chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "bucket:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        y=alt.Y("margin:Q", title="Margin"),
        color=alt.condition(
            alt.datum.margin >= 0,
            alt.value("#1b9aaa"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("bucket:N"),
            alt.Tooltip("margin_label:N", title="Margin"),
            alt.Tooltip("margin_pct_label:N", title="Margin %"),
        ],
    ).properties(height=320)
    st.subheader("Portfolio margin by period")
    st.altair_chart(chart, use_container_width=True)


def _editor_base(year: int) -> tuple[FinancialEntity, ...]:
    """Return the rows the entity editor starts from.

    The base only changes when the year changes; edits live in the
    editor's own state until then. A new year re-clamps the latest edits
    into a new base and bumps the editor key so stale deltas are dropped.
    """
    state = st.session_state
    if "base_entities" not in state:
        state["base_entities"] = seed_portfolio(year)
        state["entities"] = state["base_entities"]
        state["editor_version"] = 0
        state["year"] = year
    elif state.get("year") != year:
        use_case = build_change_fiscal_year_use_case()
        latest = state.get("entities", state["base_entities"])
        state["base_entities"] = use_case.execute(latest, year)
        state["entities"] = state["base_entities"]
        state["editor_version"] = state.get("editor_version", 0) + 1
        state["year"] = year
    return state["base_entities"]


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Portfolio ProForma", layout="wide")
    st.title("Portfolio ProForma")
    st.caption(
        "Each project accrues a constant weekly revenue, cost and "
        "adjustment while active. Margin = revenue - cost + adjustments."
    )
    usage_logger = get_usage_logger()

    options = _load_year_options(build_clock().today().isoformat())
    year = st.sidebar.selectbox(
        "Fiscal year",
        options=list(options.years),
        index=list(options.years).index(options.default_year),
    )
    granularity = st.sidebar.radio(
        "Buckets",
        options=[mode.value for mode in Granularity],
        format_func=str.capitalize,
    )
    proration = st.sidebar.radio(
        "Proration",
        options=list(available_policies()),
        format_func=str.capitalize,
    )

    base = _editor_base(year)
    edited = st.data_editor(
        [_entity_to_record(entity) for entity in base],
        column_order=_COLUMNS[1:],
        num_rows="dynamic",
        hide_index=True,
        use_container_width=True,
        key=f"entities_{st.session_state['editor_version']}",
    )
    updated = _entities_from_records(edited, year)
    if not updated:
        st.warning("At least one project is required.")
        updated = base
    st.session_state["entities"] = updated
    usage_logger.info(
        f"Rollup requested: year={year}, granularity={granularity}, "
        f"proration={proration}, entities={len(updated)}"
    )

    result = build_rollup_use_case(proration).execute(
        updated,
        year,
        granularity,
    )

    margin_col, revenue_col, pct_col = st.columns(3)
    margin_col.metric(
        "Projected portfolio margin",
        format_money(result.portfolio.total.margin),
    )
    revenue_col.metric(
        "Projected revenue",
        format_money(result.portfolio.total.revenue),
    )
    pct_col.metric("Margin %", format_pct(result.portfolio.margin_pct))

    for row in result.rows:
        if row.date_error:
            st.warning(f"{row.entity.name}: {row.date_error}")

    st.dataframe(
        _rollup_table(result),
        use_container_width=True,
        hide_index=True,
    )
    _render_margin_chart(result)
    st.caption(
        f"Revenue {format_money(result.portfolio.total.revenue)} · "
        f"Cost {format_money(result.portfolio.total.cost)} · "
        f"Adjustments {format_money(result.portfolio.total.adjustments)} · "
        f"{len(result.buckets)} periods"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
