# smartbuy/domain/scoring.py
from __future__ import annotations

from decimal import Decimal

from .dimensions import price_fit_score, safety_score, schools_score, space_fit_score
from .errors import InvalidValue, MissingField
from .parsing import clamp, round_half_up
from .ranking import explain
from .types import BuyerProfile, DimensionScore, House, PriorityMode, ScoreResult
from .weights import weights_for

PRICE = "Price"
SPACE = "Space"
SAFETY = "Safety"
SCHOOLS = "Schools"

# deal-breaker: no space or no safety caps the total here
CAP_TOTAL = 40


def weighted_total(mode: PriorityMode, price: int, space: int, safety: int, schools: int) -> int:
    w = weights_for(mode)
    s = price * w.price + space * w.space + safety * w.safety + schools * w.schools
    return clamp(round_half_up(Decimal(s)))


def apply_cap(total: int, *, space: int, safety: int) -> int:
    if space == 0 or safety == 0:
        return min(total, CAP_TOTAL)
    return total


def compute_score(profile: BuyerProfile | None, house: House | None) -> ScoreResult:
    """
    Fail-fast scoring: the first missing/invalid input raises and nothing is returned.
    Pure and re-entrant; safe to call from any number of workers at once.
    """
    if profile is None:
        raise MissingField("buyerProfile", None)
    if profile.priority_mode is None:
        raise MissingField("priorityMode", "buyerProfile")
    if house is None:
        raise MissingField("house", None)

    try:
        mode = PriorityMode(profile.priority_mode)
    except ValueError as e:
        raise InvalidValue("priorityMode", "buyerProfile.priorityMode is invalid") from e

    price = price_fit_score(house, profile)
    space = space_fit_score(profile, house)
    safety = safety_score(house)
    schools = schools_score(house)

    dimensions = (
        DimensionScore(PRICE, price),
        DimensionScore(SPACE, space),
        DimensionScore(SAFETY, safety),
        DimensionScore(SCHOOLS, schools),
    )

    total = weighted_total(mode, price, space, safety, schools)
    total = apply_cap(total, space=space, safety=safety)

    return ScoreResult(
        house=house,
        total_score=total,
        dimensions=dimensions,
        summary=explain(total, dimensions, mode),
        priority_mode=mode,
    )
