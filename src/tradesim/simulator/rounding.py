"""Money rounding."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_money(value: float, places: int = 2) -> float:
    """Round half away from zero, working from the float's shortest repr.

    ``round()`` would give ``round(1.005, 2) == 1.0`` because of the binary
    representation; going through ``repr`` yields ``1.01``. Infinities and
    NaN are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as context:
        # Every integer digit plus the kept places must fit in the context.
        context.prec = max(exact.adjusted(), 0) + places + 2
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
