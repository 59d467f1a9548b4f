from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, localcontext
from typing import Iterable, List

from apps.common.money import EXACT, quantize_money

from .dtos import CartLineDTO


def compute_total(lines: Iterable[CartLineDTO]) -> Decimal:
    """Exact sum of ``price * qty`` over the lines, rounded to cents once."""
    with localcontext(EXACT):
        raw = sum((line.price * line.qty for line in lines), Decimal("0"))
    return quantize_money(raw)


def copy_lines(lines: Iterable[CartLineDTO]) -> List[CartLineDTO]:
    return [replace(line) for line in lines]
