from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals, ties going away from zero.

    The float is read through its shortest repr so that 2.675 rounds to 2.68
    the way it reads, not the way it is stored.
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
