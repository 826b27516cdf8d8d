"""
Display formatting for currency, counts and percentages.

All formatters are total: ``None``, NaN and infinite inputs render as zero.
Rounding is half away from zero, matching en-US currency formatting.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

Number = int | float | Decimal

_WHOLE = Decimal("1")
_TENTH = Decimal("0.1")


def _to_decimal(value: Number | None) -> Decimal:
    """Coerce a numeric value to Decimal, mapping missing or non-finite values to 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, float) and not math.isfinite(value):
        return Decimal(0)
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not result.is_finite():
        return Decimal(0)
    return result


def _round(value: Number | None, exponent: Decimal) -> Decimal:
    """Round half away from zero to ``exponent``; zero is never signed."""
    amount = _to_decimal(value)
    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context precision
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        amount = amount.quantize(exponent, rounding=ROUND_HALF_UP)
    if amount == 0:
        return abs(amount)
    return amount


def format_currency(value: Number | None) -> str:
    """Format as whole-dollar USD with thousands separators (e.g. ``$43,780``)."""
    amount = _round(value, _WHOLE)
    if amount < 0:
        return f"-${-amount:,}"
    return f"${amount:,}"


def format_number(value: Number | None) -> str:
    """Format as a grouped integer (e.g. ``28,456``)."""
    return f"{_round(value, _WHOLE):,}"


def format_percentage(value: Number | None) -> str:
    """Format with one decimal place and a percent sign (e.g. ``19.7%``)."""
    return f"{_round(value, _TENTH)}%"


def compute_share(entity_value: Number | None, total_value: Number | None) -> float:
    """
    Percentage share of ``entity_value`` in ``total_value``.

    Returns 0 when the total is zero or missing, so callers never see NaN
    or infinity.
    """
    total = _to_decimal(total_value)
    if total == 0:
        return 0.0
    share = float(_to_decimal(entity_value) / total * 100)
    return share if math.isfinite(share) else 0.0
