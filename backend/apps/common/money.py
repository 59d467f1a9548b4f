from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any

CENT = Decimal("0.01")

# Cart quantities are unbounded; sums and products must never round or trap.
EXACT = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def to_decimal(value: Any) -> Decimal:
    """Coerce ints, floats and numeric strings to ``Decimal`` via their text form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value: Any) -> Decimal:
    with localcontext(EXACT):
        return to_decimal(value).quantize(CENT)
