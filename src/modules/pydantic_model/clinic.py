# modules/pydantic_model/clinic.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List
from core.models.clinic import Clinic, StaffMember


class ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClinicPage(ResponseModel):
    total: int
    page: int
    limit: int
    data: List[Clinic]


class ClinicList(ResponseModel):
    total: int
    data: List[Clinic]


class DistrictClinicList(ClinicList):
    district: str


class NearbyClinic(Clinic):
    distance: float


class NearbyClinicList(ResponseModel):
    total: int
    data: List[NearbyClinic]


class DoctorResult(StaffMember):
    clinic_id: int
    clinic_name: str


class DoctorList(ResponseModel):
    total: int
    data: List[DoctorResult]
