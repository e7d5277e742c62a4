from decimal import Decimal

import pytest

from smartbuy.domain.dimensions import price_fit_score, price_ratio
from smartbuy.domain.errors import InvalidValue, MissingField

from conftest import make_house, make_profile


@pytest.mark.parametrize(
    "avm, expected",
    [
        (50, 100),
        (80, 100),   # exactly 0.80 stays in the better tier
        (85, 95),
        (90, 95),
        (100, 90),
        (105, 80),
        (110, 70),
        (120, 50),
        (121, 30),
        (500, 30),
    ],
)
def test_price_tiers(avm, expected):
    p = make_profile(max_price="100", min_bedrooms=0, min_bathrooms="0")
    assert price_fit_score(make_house(avm_value=avm), p) == expected


def test_far_under_budget_is_never_penalized():
    p = make_profile(max_price="2000000")
    assert price_fit_score(make_house(avm_value=1), p) == 100


def test_ratio_is_quantized_to_four_places_half_up():
    assert price_ratio(800_004, Decimal("1000000")) == Decimal("0.8000")
    assert price_ratio(800_050, Decimal("1000000")) == Decimal("0.8001")
    # 0.800049 rounds down to the boundary and keeps the top tier
    p = make_profile(max_price="1000000")
    assert price_fit_score(make_house(avm_value=800_049), p) == 100
    assert price_fit_score(make_house(avm_value=800_050), p) == 95


def test_missing_avm():
    with pytest.raises(MissingField) as ei:
        price_fit_score(make_house(avm_value=None), make_profile())
    assert ei.value.field == "avmValue"
    assert str(ei.value) == "house.avmValue is required"


def test_missing_max_price():
    with pytest.raises(MissingField) as ei:
        price_fit_score(make_house(), make_profile(max_price=None))
    assert ei.value.field == "maxPrice"
    assert ei.value.reason == "buyerProfile.maxPrice is required"


@pytest.mark.parametrize("max_price", ["0", "-1"])
def test_non_positive_budget_is_invalid(max_price):
    with pytest.raises(InvalidValue) as ei:
        price_fit_score(make_house(), make_profile(max_price=max_price))
    assert ei.value.field == "maxPrice"
    assert ei.value.reason == "buyerProfile.maxPrice must be > 0"


@pytest.mark.parametrize(
    "avm, max_price, expected",
    [
        (10**30, "1", 30),
        (1_900_000, "0.0000000000000000000001", 30),
        (1, "1" + "0" * 40, 100),
    ],
)
def test_extreme_ratios_still_land_in_a_tier(avm, max_price, expected):
    p = make_profile(max_price=max_price)
    assert price_fit_score(make_house(avm_value=avm), p) == expected


def test_ratio_is_exact_for_non_terminating_quotients():
    # 2400 / 3001 = 0.799733...
    assert price_ratio(2400, Decimal("3001")) == Decimal("0.7997")
    assert price_ratio(10**30, Decimal("3")) == Decimal("333333333333333333333333333333.3333")
