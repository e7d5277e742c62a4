# smartbuy/domain/weights.py
from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple

from .types import PriorityMode


class Weights(NamedTuple):
    price: Decimal
    space: Decimal
    safety: Decimal
    schools: Decimal


def _w(price: str, space: str, safety: str, schools: str) -> Weights:
    return Weights(Decimal(price), Decimal(space), Decimal(safety), Decimal(schools))


# (price, space, safety, schools); every row sums to 1.00
WEIGHTS: dict[PriorityMode, Weights] = {
    PriorityMode.BALANCED: _w("0.25", "0.25", "0.25", "0.25"),
    PriorityMode.BUDGET_DRIVEN: _w("0.50", "0.20", "0.20", "0.10"),
    PriorityMode.SAFETY_FIRST: _w("0.25", "0.15", "0.50", "0.10"),
    PriorityMode.EDUCATION_FIRST: _w("0.20", "0.15", "0.15", "0.50"),
}


def weights_for(mode: PriorityMode) -> Weights:
    return WEIGHTS[PriorityMode(mode)]
