# modules/services/clinic_query.py
import logging
import re
from typing import Iterable, List, Optional, Sequence

import numpy as np

from core.exceptions import ClinicNotFound
from core.models.clinic import Clinic
from core.store import ClinicStore
from core.utils.geo import haversine_km
from modules.pydantic_model.clinic import ClinicPage, DoctorResult, NearbyClinic
from modules.pydantic_model.query import ClinicFilters, NearbyQuery, Pagination, SortKey

logger = logging.getLogger(__name__)

# "台北市信義區信義路1段100號" -> "信義區"
DISTRICT_PATTERN = re.compile(r"^[^市縣]+[市縣]([^區]+區)")


def parse_district(address: str) -> Optional[str]:
    match = DISTRICT_PATTERN.match(address or "")
    return match.group(1) if match else None


# --------------------------
# Filter Engine
# --------------------------
def has_specialty(clinic: Clinic, specialty: str) -> bool:
    if specialty in clinic.departments:
        return True
    return any(specialty in member.specialties for member in clinic.medical_team.members())


def matches(clinic: Clinic, filters: ClinicFilters) -> bool:
    if filters.type is not None and clinic.type != filters.type:
        return False

    if filters.min_rating is not None and clinic.rating.score < filters.min_rating:
        return False

    if filters.department is not None and filters.department not in clinic.departments:
        return False

    if filters.service is not None and not any(
        filters.service in group.items for group in clinic.services
    ):
        return False

    if filters.feature is not None and clinic.features.get(filters.feature) is not True:
        return False

    if filters.district is not None and parse_district(clinic.address) != filters.district:
        return False

    if filters.address is not None and filters.address not in clinic.address:
        return False

    if filters.specialty is not None and not has_specialty(clinic, filters.specialty):
        return False

    return True


def filter_clinics(clinics: Iterable[Clinic], filters: ClinicFilters) -> List[Clinic]:
    return [clinic for clinic in clinics if matches(clinic, filters)]


# --------------------------
# Sort & Pagination
# --------------------------
SORT_KEYS = {
    SortKey.RATING: lambda clinic: clinic.rating.score,
    SortKey.REVIEWS: lambda clinic: clinic.rating.review_count,
}


def sort_clinics(clinics: Sequence[Clinic], sort: Optional[SortKey]) -> List[Clinic]:
    """Descending by the chosen key; Python's sort is stable so ties keep input order."""
    if sort is None:
        return list(clinics)
    return sorted(clinics, key=SORT_KEYS[sort], reverse=True)


def paginate(clinics: Sequence[Clinic], pagination: Pagination) -> ClinicPage:
    start = pagination.offset
    return ClinicPage(
        total=len(clinics),
        page=pagination.page,
        limit=pagination.limit,
        data=list(clinics[start:start + pagination.limit]),
    )


# --------------------------
# Lookups
# --------------------------
def find_clinic(store: ClinicStore, clinic_id: int) -> Clinic:
    clinic = store.get(clinic_id)
    if clinic is None:
        raise ClinicNotFound(clinic_id)
    return clinic


def list_departments(clinics: Iterable[Clinic]) -> List[str]:
    departments = {}
    for clinic in clinics:
        for department in clinic.departments:
            departments.setdefault(department, None)
    return list(departments)


def list_districts(clinics: Iterable[Clinic]) -> List[str]:
    districts = {parse_district(clinic.address) for clinic in clinics}
    districts.discard(None)
    return sorted(districts)


def search_doctors(
    clinics: Iterable[Clinic],
    name: Optional[str] = None,
    specialty: Optional[str] = None,
) -> List[DoctorResult]:
    doctors = []
    for clinic in clinics:
        for member in clinic.medical_team.members():
            if name and name not in member.name:
                continue
            if specialty and specialty not in member.specialties:
                continue
            doctors.append(
                DoctorResult.model_validate({
                    **member.model_dump(by_alias=True),
                    "clinicId": clinic.id,
                    "clinicName": clinic.name,
                })
            )
    return doctors


# --------------------------
# Nearby Search
# --------------------------
def find_nearby(store: ClinicStore, query: NearbyQuery) -> List[NearbyClinic]:
    if not len(store):
        return []

    distances = haversine_km(query.lat, query.lng, store.latitudes, store.longitudes)
    within = np.flatnonzero(distances <= query.radius)
    ordered = within[np.argsort(distances[within], kind="stable")]

    return [
        NearbyClinic.model_validate({
            **store.clinics[index].model_dump(by_alias=True),
            "distance": float(distances[index]),
        })
        for index in ordered
    ]
