# modules/routes/department.py
from fastapi import APIRouter, Depends
from core.config import settings
from core.dependencies import get_clinic_store
from core.store import ClinicStore
from modules.services import clinic_query

router = APIRouter(prefix=settings.API_PREFIX, tags=["departments"])


@router.get("/departments", response_model=list[str])
async def read_departments(store: ClinicStore = Depends(get_clinic_store)):
    return clinic_query.list_departments(store)


@router.get("/districts", response_model=list[str])
async def read_districts(store: ClinicStore = Depends(get_clinic_store)):
    return clinic_query.list_districts(store)
