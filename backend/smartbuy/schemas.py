from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .domain.types import BuyerProfile, DimensionScore, House, PriorityMode, ScoreResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class BuyerProfileIn(_CamelModel):
    # presence is checked by the scoring engine so the caller gets its field-level message
    max_price: Decimal | None = Field(default=None, alias="maxPrice")
    min_bedrooms: int | None = Field(default=None, ge=0, alias="minBedrooms")
    min_bathrooms: Decimal | None = Field(default=None, ge=0, alias="minBathrooms")
    priority_mode: PriorityMode | None = Field(default=None, alias="priorityMode")

    def to_domain(self) -> BuyerProfile:
        return BuyerProfile(
            max_price=self.max_price,
            min_bedrooms=self.min_bedrooms,
            min_bathrooms=self.min_bathrooms,
            priority_mode=self.priority_mode,
        )


class HouseIn(_CamelModel):
    address1: str | None = None
    address2: str | None = None
    attom_id: int | None = Field(default=None, alias="attomId")

    avm_value: int | None = Field(default=None, alias="avmValue")
    beds: int | None = None
    baths_total: Decimal | None = Field(default=None, alias="bathsTotal")
    crime_index: int | None = Field(default=None, alias="crimeIndex")
    schools_json: str | list[Any] | None = Field(default=None, alias="schoolsJson")

    @field_serializer("baths_total")
    def serialize_baths_total(self, v: Decimal | None) -> float | None:
        return float(v) if v is not None else None

    def to_domain(self) -> House:
        return House(
            avm_value=self.avm_value,
            beds=self.beds,
            baths_total=self.baths_total,
            crime_index=self.crime_index,
            schools_json=self.schools_json,
            address1=self.address1,
            address2=self.address2,
            attom_id=self.attom_id,
        )

    @classmethod
    def from_domain(cls, h: House) -> "HouseIn":
        return cls(
            address1=h.address1,
            address2=h.address2,
            attom_id=h.attom_id,
            avm_value=h.avm_value,
            beds=h.beds,
            baths_total=h.baths_total,
            crime_index=h.crime_index,
            schools_json=list(h.schools_json) if isinstance(h.schools_json, (list, tuple)) else h.schools_json,
        )


class ScoreHouseRequest(_CamelModel):
    buyer_profile: BuyerProfileIn | None = Field(default=None, alias="buyerProfile")
    house: HouseIn | None = None


class DimensionScoreOut(BaseModel):
    name: str
    score: int = Field(..., ge=0, le=100)

    @classmethod
    def from_domain(cls, d: DimensionScore) -> "DimensionScoreOut":
        return cls(name=d.name, score=d.score)


class ScoreOut(_CamelModel):
    house: HouseIn
    total_score: int = Field(..., ge=0, le=100, alias="totalScore")
    dimensions: list[DimensionScoreOut]
    summary: str

    @classmethod
    def from_domain(cls, r: ScoreResult) -> "ScoreOut":
        return cls(
            house=HouseIn.from_domain(r.house),
            total_score=r.total_score,
            dimensions=[DimensionScoreOut.from_domain(d) for d in r.dimensions],
            summary=r.summary,
        )


class ModeWeightsOut(BaseModel):
    mode: str
    price: float
    space: float
    safety: float
    schools: float
