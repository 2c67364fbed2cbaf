"""Decimal helpers shared by the models and the engine."""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Coerce ints/floats/strings from callers into Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def cents(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)
