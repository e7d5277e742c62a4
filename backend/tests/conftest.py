from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from smartbuy.domain.types import BuyerProfile, House, PriorityMode
from smartbuy.entrypoints.fastapi_app import create_app

SCHOOLS_A_BPLUS = '[{"schoolRating":"A"},{"schoolRating":"B+"}]'


def make_profile(
    max_price="2000000",
    min_bedrooms=3,
    min_bathrooms="2.0",
    mode=PriorityMode.BALANCED,
) -> BuyerProfile:
    return BuyerProfile(
        max_price=Decimal(max_price) if max_price is not None else None,
        min_bedrooms=min_bedrooms,
        min_bathrooms=Decimal(min_bathrooms) if min_bathrooms is not None else None,
        priority_mode=mode,
    )


def make_house(
    avm_value=1_900_000,
    beds=3,
    baths_total="2.0",
    crime_index=33,
    schools_json=SCHOOLS_A_BPLUS,
) -> House:
    return House(
        avm_value=avm_value,
        beds=beds,
        baths_total=Decimal(baths_total) if baths_total is not None else None,
        crime_index=crime_index,
        schools_json=schools_json,
        address1="2464 Forbes Ave",
        address2="Santa Clara, CA 95050",
    )


@pytest.fixture
def profile() -> BuyerProfile:
    return make_profile()


@pytest.fixture
def house() -> House:
    return make_house()


@pytest.fixture
def request_body() -> dict:
    return {
        "buyerProfile": {
            "maxPrice": 2000000,
            "minBedrooms": 3,
            "minBathrooms": 2.0,
            "priorityMode": "BALANCED",
        },
        "house": {
            "address1": "2464 Forbes Ave",
            "address2": "Santa Clara, CA 95050",
            "avmValue": 1900000,
            "beds": 3,
            "bathsTotal": 2.0,
            "crimeIndex": 33,
            "schoolsJson": SCHOOLS_A_BPLUS,
        },
    }


@pytest.fixture
async def client():
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
