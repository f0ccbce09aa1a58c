"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation, getcontext


# Headroom so a rate can be scaled by a year of days and summed across a
# portfolio without leaving the Decimal context range.
_RATE_EXPONENT_HEADROOM = 12


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from inputs or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_rate(value) -> Decimal:
    """Normalize a user supplied rate, falling back to zero.

    Blank text is read as zero so a field being edited does not break the
    rollup. Unparseable, non-finite and out-of-range values also become
    zero.

    Args:
        value: Raw rate from an entity record or an input widget.

    Returns:
        Decimal: Finite Decimal amount.
    """
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return Decimal("0")
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    if amount and amount.adjusted() > (
        getcontext().Emax - _RATE_EXPONENT_HEADROOM
    ):
        return Decimal("0")
    return amount


__all__ = ["coerce_decimal", "coerce_rate"]
