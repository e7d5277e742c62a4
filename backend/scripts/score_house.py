# scripts/score_house.py
"""
Score one house from a JSON file, without starting the API.

    python scripts/score_house.py request.json

request.json has the same shape as POST /api/score/house:
    {"buyerProfile": {...}, "house": {...}}
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from smartbuy.domain.errors import ScoringError
from smartbuy.schemas import ScoreHouseRequest, ScoreOut
from smartbuy.service_layer.scoring import score_house


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("path", type=Path, help="JSON file with buyerProfile + house")
    parser.add_argument("--json", action="store_true", help="Print the full response body as JSON")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")

    req = ScoreHouseRequest.model_validate_json(args.path.read_text(encoding="utf-8"))
    profile = req.buyer_profile.to_domain() if req.buyer_profile else None
    house = req.house.to_domain() if req.house else None

    try:
        result = score_house(profile, house)
    except ScoringError as e:
        print(f"error: {e.reason}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(ScoreOut.from_domain(result).model_dump(mode="json", by_alias=True), indent=2))
        return 0

    for d in result.dimensions:
        print(f"{d.name:<8} {d.score:>3}")
    print(f"{'Total':<8} {result.total_score:>3}")
    print(result.summary)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
