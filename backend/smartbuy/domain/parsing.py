# smartbuy/domain/parsing.py
from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Sequence

from .errors import InvalidValue

SCHOOLS_FIELD = "schoolsJson"


def round_half_up(x: Decimal) -> int:
    """Round to the nearest integer, .5 away from zero (not banker's rounding)."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit
        ctx.prec = max(ctx.prec, x.adjusted() + 2)
        return int(x.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(v: int, lo: int = 0, hi: int = 100) -> int:
    return max(lo, min(hi, v))


def to_decimal(x: Any) -> Decimal | None:
    if x is None or x == "":
        return None
    if isinstance(x, Decimal):
        return x
    if isinstance(x, float):
        # go through str so 1.1 stays 1.1 and not 1.100000000000000088...
        return Decimal(str(x))
    return Decimal(x)


def load_schools(raw: str | Sequence[Any] | None) -> list[Any]:
    """
    Decode school data into a non-empty list.
    Stateless: every call decodes on its own, nothing is shared between calls.
    """
    if raw is None:
        raise InvalidValue(SCHOOLS_FIELD, "house.schoolsJson is required")

    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")

    if isinstance(raw, str):
        if not raw.strip():
            raise InvalidValue(SCHOOLS_FIELD, "house.schoolsJson is required")
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidValue(SCHOOLS_FIELD, "house.schoolsJson is invalid JSON") from e
    else:
        decoded = raw

    if isinstance(decoded, (str, dict)) or not isinstance(decoded, Sequence):
        raise InvalidValue(SCHOOLS_FIELD, "house.schoolsJson must be a JSON array")
    if len(decoded) == 0:
        raise InvalidValue(SCHOOLS_FIELD, "house.schoolsJson is empty; cannot score schools")
    return list(decoded)


def school_rating(entry: Any) -> str | None:
    """Pull the rating text out of one school entry ("A-" or {"schoolRating": "A-"})."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        v = entry.get("schoolRating")
        if isinstance(v, str):
            return v
    return None
