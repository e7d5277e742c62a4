# smartbuy/domain/errors.py
from __future__ import annotations


class ScoringError(ValueError):
    """
    Caller-input problem detected while scoring.
    `field` is the external attribute name (e.g. "crimeIndex").
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


class MissingField(ScoringError):
    def __init__(self, field: str, owner: str | None = "house") -> None:
        path = f"{owner}.{field}" if owner else field
        super().__init__(field, f"{path} is required")


class InvalidValue(ScoringError):
    pass
