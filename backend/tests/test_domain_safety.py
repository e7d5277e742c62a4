import pytest

from smartbuy.domain.dimensions import safety_score
from smartbuy.domain.errors import MissingField

from conftest import make_house


@pytest.mark.parametrize(
    "crime, expected",
    [
        (0, 100),
        (33, 100),
        (80, 100),
        (81, 99),
        (113, 73),   # 72.5 rounds up
        (140, 50),
        (199, 1),
        (200, 0),
        (450, 0),
    ],
)
def test_crime_index_mapping(crime, expected):
    assert safety_score(make_house(crime_index=crime)) == expected


def test_monotonic_non_increasing():
    scores = [safety_score(make_house(crime_index=c)) for c in range(0, 260)]
    assert all(a >= b for a, b in zip(scores, scores[1:]))
    assert all(0 <= s <= 100 for s in scores)


def test_missing_crime_index():
    with pytest.raises(MissingField) as ei:
        safety_score(make_house(crime_index=None))
    assert ei.value.field == "crimeIndex"
    assert ei.value.reason == "house.crimeIndex is required"
