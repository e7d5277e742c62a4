# smartbuy/entrypoints/api/routers/score.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import require_api_key
from ....domain.errors import MissingField
from ....schemas import ModeWeightsOut, ScoreHouseRequest, ScoreOut
from ....service_layer.scoring import list_mode_weights, score_house

router = APIRouter(prefix="/api/score", tags=["score"], dependencies=[Depends(require_api_key)])


@router.post("/house", response_model=ScoreOut)
def score_house_endpoint(body: ScoreHouseRequest) -> ScoreOut:
    if body.house is None:
        raise MissingField("house", None)
    if body.buyer_profile is None:
        raise MissingField("buyerProfile", None)

    result = score_house(body.buyer_profile.to_domain(), body.house.to_domain())
    return ScoreOut.from_domain(result)


@router.get("/modes", response_model=list[ModeWeightsOut])
def priority_modes() -> list[ModeWeightsOut]:
    return list_mode_weights()
