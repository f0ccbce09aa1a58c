"""Display formatting for rollup figures."""

from decimal import Decimal, ROUND_HALF_UP


def format_money(value: Decimal) -> str:
    """Format an amount as US dollars, e.g. ``-$1,234.56``."""
    rounded = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_pct(value: Decimal | None) -> str:
    """Format a ratio as a percentage with one decimal, or a dash."""
    if value is None or not value.is_finite():
        return "—"
    percent = (value * Decimal("100")).quantize(
        Decimal("0.1"),
        rounding=ROUND_HALF_UP,
    )
    return f"{percent}%"


__all__ = ["format_money", "format_pct"]
