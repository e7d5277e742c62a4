# smartbuy/domain/dimensions.py
from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from .errors import InvalidValue, MissingField
from .parsing import clamp, load_schools, round_half_up, school_rating, to_decimal
from .types import BuyerProfile, House

# (ratio upper bound inclusive, score); checked in order, first hit wins
PRICE_TIERS: tuple[tuple[Decimal, int], ...] = (
    (Decimal("0.80"), 100),  # well under budget
    (Decimal("0.90"), 95),
    (Decimal("1.00"), 90),   # at budget
    (Decimal("1.05"), 80),
    (Decimal("1.10"), 70),
    (Decimal("1.20"), 50),
)
PRICE_OVER_TIERS_SCORE = 30

BEDROOM_PENALTY = 50
BATHROOM_PENALTY = Decimal("15")

# crime index: 100 = national average
CRIME_SAFE_AT_OR_BELOW = 80
CRIME_ZERO_AT_OR_ABOVE = 200

SCHOOL_LETTER_SCORES: dict[str, int] = {
    "A": 90,
    "B": 75,
    "C": 60,
    "D": 50,
    "F": 50,
}
SCHOOL_DEFAULT_SCORE = 50


def price_ratio(avm_value: int, max_price: Decimal) -> Decimal:
    """
    avm / maxPrice at 4 decimals, half-up. Exact for any magnitude:
    the quotient is never rounded to the decimal context first.
    """
    exact = Fraction(avm_value) / Fraction(max_price)
    ten_thousandths = int(abs(exact) * 10_000 + Fraction(1, 2))
    if exact < 0:
        ten_thousandths = -ten_thousandths
    return Decimal(f"{ten_thousandths}E-4")


def price_fit_score(house: House, profile: BuyerProfile) -> int:
    """
    Tiered on avm / maxPrice. One-sided: being far under budget never costs points,
    going over budget costs more the further over it goes.
    """
    if house.avm_value is None:
        raise MissingField("avmValue", "house")
    max_price = to_decimal(profile.max_price)
    if max_price is None:
        raise MissingField("maxPrice", "buyerProfile")
    if max_price <= 0:
        raise InvalidValue("maxPrice", "buyerProfile.maxPrice must be > 0")

    ratio = price_ratio(house.avm_value, max_price)
    for upper, score in PRICE_TIERS:
        if ratio <= upper:
            return score
    return PRICE_OVER_TIERS_SCORE


def space_fit_score(profile: BuyerProfile, house: House) -> int:
    # -50 per missing bedroom, -15 per missing bathroom (fractional baths count)
    if profile.min_bedrooms is None:
        raise MissingField("minBedrooms", "buyerProfile")
    if profile.min_bathrooms is None:
        raise MissingField("minBathrooms", "buyerProfile")
    if house.beds is None:
        raise MissingField("beds", "house")
    if house.baths_total is None:
        raise MissingField("bathsTotal", "house")

    missing_beds = max(0, profile.min_bedrooms - house.beds)
    bed_penalty = Decimal(BEDROOM_PENALTY * missing_beds)

    missing_baths = to_decimal(profile.min_bathrooms) - to_decimal(house.baths_total)
    bath_penalty = missing_baths * BATHROOM_PENALTY if missing_baths > 0 else Decimal(0)

    return clamp(round_half_up(Decimal(100) - bed_penalty - bath_penalty))


def safety_score(house: House) -> int:
    """
    <= 80 -> 100, >= 200 (twice the national average) -> 0,
    linear in between: (200 - c) * 100 / 120.
    """
    if house.crime_index is None:
        raise MissingField("crimeIndex", "house")
    c = house.crime_index

    if c >= CRIME_ZERO_AT_OR_ABOVE:
        return 0
    if c <= CRIME_SAFE_AT_OR_BELOW:
        return 100

    span = CRIME_ZERO_AT_OR_ABOVE - CRIME_SAFE_AT_OR_BELOW
    score = Decimal(CRIME_ZERO_AT_OR_ABOVE - c) * 100 / span
    return clamp(round_half_up(score))


def school_letter_score(rating: str | None) -> int:
    if rating is None:
        return SCHOOL_DEFAULT_SCORE
    s = rating.strip().upper()
    if not s:
        return SCHOOL_DEFAULT_SCORE
    return SCHOOL_LETTER_SCORES.get(s[0], SCHOOL_DEFAULT_SCORE)


def schools_score(house: House) -> int:
    schools = load_schools(house.schools_json)
    total = sum(school_letter_score(school_rating(s)) for s in schools)
    return clamp(round_half_up(Decimal(total) / len(schools)))
