from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# --------------------------
# Location & Contact
# --------------------------
class GeoPoint(FrozenModel):
    lat: float
    lng: float


class Contact(FrozenModel):
    model_config = ConfigDict(extra="allow")

    address: str
    phone: Optional[str] = None
    location: GeoPoint


class Rating(FrozenModel):
    score: float = 0.0
    review_count: int = 0


# --------------------------
# Services & Staff
# --------------------------
class ServiceGroup(FrozenModel):
    model_config = ConfigDict(extra="allow")

    category: Optional[str] = None
    items: List[str] = Field(default_factory=list)


class StaffMember(FrozenModel):
    model_config = ConfigDict(extra="allow")

    name: str
    title: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)


class MedicalTeam(FrozenModel):
    director: Optional[StaffMember] = None
    doctors: List[StaffMember] = Field(default_factory=list)

    def members(self) -> List[StaffMember]:
        """Director first, then doctors in listed order."""
        staff = [self.director] if self.director else []
        return staff + list(self.doctors)


# --------------------------
# Clinic
# --------------------------
class Clinic(FrozenModel):
    # Keys we do not model (openingHours, description, ...) pass through untouched
    model_config = ConfigDict(extra="allow")

    id: int = Field(gt=0)
    name: str
    type: Optional[str] = None
    contact: Contact
    rating: Rating = Field(default_factory=Rating)
    departments: List[str] = Field(default_factory=list)
    services: List[ServiceGroup] = Field(default_factory=list)
    # Stored verbatim; only a real boolean true switches a feature on
    features: Dict[str, Any] = Field(default_factory=dict)
    medical_team: MedicalTeam = Field(default_factory=MedicalTeam)

    @property
    def address(self) -> str:
        return self.contact.address

    @property
    def location(self) -> GeoPoint:
        return self.contact.location
