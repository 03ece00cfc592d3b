"""Human-readable rendering of resistances and voltages"""

from decimal import ROUND_HALF_UP, Context, Decimal

# Wide enough to quantize any finite float without signalling
_EXACT = Context(prec=400)


def to_fixed(value: float, digits: int) -> str:
    """
    Render value with a fixed number of decimals

    Rounds the exact binary value half away from zero, so 1.25 becomes
    "1.3" where Python's own formatting would give "1.2".
    """
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_EXACT), "f")


def _strip_zero_decimal(text: str) -> str:
    return text[:-2] if text.endswith(".0") else text


def format_resistance(value: float) -> str:
    """
    Canonical display string for a resistance in ohms

    Examples:
        999 -> "999Ω", 1500 -> "1.5kΩ", 1000000 -> "1MΩ"
    """
    if value >= 1000000:
        return _strip_zero_decimal(to_fixed(value / 1000000, 1)) + "MΩ"
    if value >= 1000:
        return _strip_zero_decimal(to_fixed(value / 1000, 1)) + "kΩ"
    return to_fixed(value, 0) + "Ω"


def format_voltage(value: float) -> str:
    """Volts to two decimals, without unit"""
    return to_fixed(value, 2)
