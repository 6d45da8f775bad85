# modules/routes/clinic.py
from fastapi import APIRouter, Depends
from typing import Optional
from core.config import settings
from core.dependencies import (
    get_clinic_filters,
    get_clinic_store,
    get_min_rating_filter,
    get_nearby_query,
    get_pagination,
    get_sort_key,
)
from core.exceptions import InvalidArgument
from core.models.clinic import Clinic
from core.store import ClinicStore
from modules.pydantic_model.clinic import (
    ClinicList,
    ClinicPage,
    DistrictClinicList,
    NearbyClinicList,
)
from modules.pydantic_model.query import ClinicFilters, NearbyQuery, Pagination, SortKey
from modules.services import clinic_query

router = APIRouter(prefix=f"{settings.API_PREFIX}/clinics", tags=["clinics"])


@router.get("", response_model=ClinicPage)
async def read_clinics(
    filters: ClinicFilters = Depends(get_clinic_filters),
    pagination: Pagination = Depends(get_pagination),
    sort: Optional[SortKey] = Depends(get_sort_key),
    store: ClinicStore = Depends(get_clinic_store),
):
    clinics = clinic_query.filter_clinics(store, filters)
    clinics = clinic_query.sort_clinics(clinics, sort)
    return clinic_query.paginate(clinics, pagination)


# Fixed sub-paths are registered before /{clinic_id} so they are never read as an id
@router.get("/search/specialty", response_model=ClinicList)
async def search_clinics_by_specialty(
    specialty: Optional[str] = None,
    store: ClinicStore = Depends(get_clinic_store),
):
    if not specialty:
        raise InvalidArgument("Specialty is required")

    clinics = clinic_query.filter_clinics(store, ClinicFilters(specialty=specialty))
    return ClinicList(total=len(clinics), data=clinics)


@router.get("/search/area", response_model=ClinicList)
async def search_clinics_by_area(
    area: Optional[str] = None,
    store: ClinicStore = Depends(get_clinic_store),
):
    if not area:
        raise InvalidArgument("Area is required")

    clinics = clinic_query.filter_clinics(store, ClinicFilters(address=area))
    return ClinicList(total=len(clinics), data=clinics)


@router.get("/nearby", response_model=NearbyClinicList)
async def read_nearby_clinics(
    query: NearbyQuery = Depends(get_nearby_query),
    store: ClinicStore = Depends(get_clinic_store),
):
    clinics = clinic_query.find_nearby(store, query)
    return NearbyClinicList(total=len(clinics), data=clinics)


@router.get("/by-district/{district}", response_model=DistrictClinicList)
async def read_clinics_by_district(
    district: str,
    rating_filter: ClinicFilters = Depends(get_min_rating_filter),
    sort: Optional[SortKey] = Depends(get_sort_key),
    store: ClinicStore = Depends(get_clinic_store),
):
    filters = rating_filter.model_copy(update={"district": district})
    clinics = clinic_query.sort_clinics(clinic_query.filter_clinics(store, filters), sort)
    return DistrictClinicList(district=district, total=len(clinics), data=clinics)


@router.get("/{clinic_id:int}", response_model=Clinic)
async def read_clinic(
    clinic_id: int,
    store: ClinicStore = Depends(get_clinic_store),
):
    return clinic_query.find_clinic(store, clinic_id)
