# modules/routes/doctor.py
from fastapi import APIRouter, Depends
from core.config import settings
from core.dependencies import get_clinic_store, get_doctor_query
from core.store import ClinicStore
from modules.pydantic_model.clinic import DoctorList
from modules.pydantic_model.query import DoctorQuery
from modules.services import clinic_query

router = APIRouter(prefix=f"{settings.API_PREFIX}/doctors", tags=["doctors"])


@router.get("/search", response_model=DoctorList)
async def search_doctors(
    query: DoctorQuery = Depends(get_doctor_query),
    store: ClinicStore = Depends(get_clinic_store),
):
    doctors = clinic_query.search_doctors(store, name=query.name, specialty=query.specialty)
    return DoctorList(total=len(doctors), data=doctors)
