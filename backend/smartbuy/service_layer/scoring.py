# smartbuy/service_layer/scoring.py
from __future__ import annotations

import logging

from ..domain.errors import ScoringError
from ..domain.scoring import compute_score
from ..domain.types import BuyerProfile, House, ScoreResult
from ..domain.weights import WEIGHTS
from ..schemas import ModeWeightsOut

log = logging.getLogger(__name__)


def score_house(profile: BuyerProfile | None, house: House | None) -> ScoreResult:
    """
    Score one house for one buyer.
    Domain errors propagate unchanged; the HTTP layer turns them into 400s.
    """
    try:
        result = compute_score(profile, house)
    except ScoringError as e:
        log.warning("score rejected field=%s reason=%s", e.field, e.reason)
        raise

    log.info(
        "scored house address=%s mode=%s total=%d dims=%s",
        house.address1 if house else None,
        result.priority_mode.value,
        result.total_score,
        ",".join(f"{d.name}={d.score}" for d in result.dimensions),
    )
    return result


def list_mode_weights() -> list[ModeWeightsOut]:
    return [
        ModeWeightsOut(
            mode=mode.value,
            price=float(w.price),
            space=float(w.space),
            safety=float(w.safety),
            schools=float(w.schools),
        )
        for mode, w in WEIGHTS.items()
    ]
