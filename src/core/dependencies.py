import logging
from fastapi import Query, Request
from pydantic import BaseModel, ValidationError
from typing import Optional, Type, TypeVar
from .config import settings
from .exceptions import InvalidArgument
from .store import ClinicStore
from modules.pydantic_model.query import (
    ClinicFilters,
    DoctorQuery,
    NearbyQuery,
    Pagination,
    SortKey,
)

logger = logging.getLogger(__name__)

QueryT = TypeVar("QueryT", bound=BaseModel)


def get_clinic_store(request: Request) -> ClinicStore:
    return request.app.state.clinic_store


def parse_query(model: Type[QueryT], **params) -> QueryT:
    """Builds a typed query model, turning validation failures into a 400."""
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "query"
        raise InvalidArgument(f"Invalid value for '{field}': {error['msg']}")


def get_clinic_filters(
    type: Optional[str] = None,
    min_rating: Optional[str] = Query(default=None, alias="minRating"),
    department: Optional[str] = None,
    service: Optional[str] = None,
    feature: Optional[str] = None,
    district: Optional[str] = None,
    address: Optional[str] = None,
    specialty: Optional[str] = None,
) -> ClinicFilters:
    return parse_query(
        ClinicFilters,
        type=type,
        minRating=min_rating,
        department=department,
        service=service,
        feature=feature,
        district=district,
        address=address,
        specialty=specialty,
    )


def get_min_rating_filter(
    min_rating: Optional[str] = Query(default=None, alias="minRating"),
) -> ClinicFilters:
    return parse_query(ClinicFilters, minRating=min_rating)


def get_pagination(
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Pagination:
    return parse_query(
        Pagination,
        page=page or 1,
        limit=limit or settings.DEFAULT_PAGE_SIZE,
    )


def get_sort_key(sort: Optional[str] = None) -> Optional[SortKey]:
    if not sort:
        return None
    try:
        return SortKey(sort)
    except ValueError:
        logger.debug("Ignoring unsupported sort key %r", sort)
        return None


def get_nearby_query(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    radius: Optional[str] = None,
) -> NearbyQuery:
    if not lat or not lng:
        raise InvalidArgument("Latitude and longitude are required")
    return parse_query(
        NearbyQuery,
        lat=lat,
        lng=lng,
        radius=radius or settings.DEFAULT_NEARBY_RADIUS_KM,
    )


def get_doctor_query(
    name: Optional[str] = None,
    specialty: Optional[str] = None,
) -> DoctorQuery:
    return parse_query(DoctorQuery, name=name, specialty=specialty)
