# smartbuy/domain/types.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence


class PriorityMode(str, Enum):
    BALANCED = "BALANCED"
    BUDGET_DRIVEN = "BUDGET_DRIVEN"
    SAFETY_FIRST = "SAFETY_FIRST"
    EDUCATION_FIRST = "EDUCATION_FIRST"


@dataclass(frozen=True)
class BuyerProfile:
    max_price: Decimal | None
    min_bedrooms: int | None
    min_bathrooms: Decimal | None
    priority_mode: PriorityMode | None


@dataclass(frozen=True)
class House:
    avm_value: int | None = None
    beds: int | None = None
    baths_total: Decimal | None = None
    crime_index: int | None = None
    # raw provider JSON text, or already-decoded list of {"schoolRating": ...} / "A-"
    schools_json: str | Sequence[Any] | None = None

    # descriptive only, echoed back to the caller
    address1: str | None = None
    address2: str | None = None
    attom_id: int | None = None


@dataclass(frozen=True)
class DimensionScore:
    name: str
    score: int


@dataclass(frozen=True)
class ScoreResult:
    house: House
    total_score: int
    dimensions: tuple[DimensionScore, ...]
    summary: str
    priority_mode: PriorityMode

    def dimension(self, name: str) -> int:
        for d in self.dimensions:
            if d.name == name:
                return d.score
        raise KeyError(name)
