from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional


class QueryModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_absent(cls, value):
        # ?type=&minRating= behaves like the keys were never sent
        if isinstance(value, str) and value == "":
            return None
        return value


class SortKey(str, Enum):
    RATING = "rating"
    REVIEWS = "reviews"


class ClinicFilters(QueryModel):
    """Optional criteria, combined with AND. A None field imposes no constraint.

    min_rating must parse as a finite number; anything else is rejected.
    The remaining fields are plain strings and never fail to parse.
    """
    type: Optional[str] = None
    min_rating: Optional[float] = Field(default=None, allow_inf_nan=False)
    department: Optional[str] = None
    service: Optional[str] = None
    feature: Optional[str] = None
    district: Optional[str] = None
    address: Optional[str] = None
    specialty: Optional[str] = None


class Pagination(QueryModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class NearbyQuery(QueryModel):
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(ge=-180, le=180, allow_inf_nan=False)
    radius: float = Field(default=1.0, ge=0, allow_inf_nan=False)


class DoctorQuery(QueryModel):
    name: Optional[str] = None
    specialty: Optional[str] = None
