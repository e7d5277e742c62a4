# smartbuy/domain/ranking.py
from __future__ import annotations

from typing import Sequence

from .types import DimensionScore, PriorityMode

MATCH_THRESHOLD = 60


def is_match(total: int) -> bool:
    return total >= MATCH_THRESHOLD


def rank_dimensions(dims: Sequence[DimensionScore]) -> list[DimensionScore]:
    # ascending; ties keep Price, Space, Safety, Schools order
    return sorted(dims, key=lambda d: d.score)


def explain(total: int, dims: Sequence[DimensionScore], mode: PriorityMode) -> str:
    """
    One-sentence-per-idea summary for the buyer.

    Names the two strongest dimensions, flags the weakest one as a concern and
    says whether the house is a match for the chosen priority. The second-weakest
    dimension is not mentioned.
    """
    ranked = rank_dimensions(dims)
    weakest = ranked[0]
    second_strongest = ranked[-2]
    strongest = ranked[-1]

    match_status = "a match" if is_match(total) else "not a match"
    mode_name = mode.value if isinstance(mode, PriorityMode) else str(mode)

    return (
        f"This house received a SmartScore of {total}. "
        f"Its strongest areas are {strongest.name} {strongest.score} "
        f"and {second_strongest.name} {second_strongest.score}. "
        f"However, the {weakest.name} score is lower at {weakest.score}, which may be a concern. "
        f"Given your priority '{mode_name}', this property is {match_status} for you."
    )
