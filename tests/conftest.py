import pytest
from fastapi.testclient import TestClient

from core.dependencies import get_clinic_store
from core.models.clinic import Clinic
from core.store import ClinicStore
from main import app


def clinic_record(
    clinic_id,
    address,
    lat,
    lng,
    score,
    review_count,
    type="診所",
    departments=(),
    services=(),
    features=None,
    director=None,
    doctors=(),
    **extra,
):
    return {
        "id": clinic_id,
        "name": f"康健診所{clinic_id}",
        "type": type,
        "contact": {
            "address": address,
            "phone": f"02-2000-{1000 + clinic_id}",
            "location": {"lat": lat, "lng": lng},
        },
        "rating": {"score": score, "reviewCount": review_count},
        "departments": list(departments),
        "services": [{"category": category, "items": list(items)} for category, items in services],
        "features": features or {},
        "medicalTeam": {
            "director": director,
            "doctors": list(doctors),
        },
        **extra,
    }


def staff(name, *specialties, title="主治醫師"):
    return {"name": name, "title": title, "specialties": list(specialties)}


CLINIC_RECORDS = [
    clinic_record(
        1, "台北市信義區信義路1段100號", 25.0330, 121.5654, 4.8, 120,
        departments=["家醫科"],
        services=[("門診服務", ["一般門診", "預防注射"])],
        features={"parking": True, "nightClinic": False},
        director=staff("張醫生1", "家醫科", "內科", title="院長"),
        doctors=[staff("李醫生1A", "小兒科")],
        openingHours={"weekday": "09:00-21:00"},
    ),
    clinic_record(
        2, "台北市大安區復興南路2段101號", 25.0268, 121.5434, 3.2, 300,
        type="牙醫診所",
        departments=["家醫科", "內科"],
        services=[("門診服務", ["洗牙"])],
        features={"parking": False},
        director=staff("陳醫生2", "牙科", title="院長"),
    ),
    clinic_record(
        3, "台北市信義區松仁路3段102號", 25.0360, 121.5680, 4.8, 50,
        departments=["小兒科"],
        services=[("檢查服務", ["抽血檢驗"])],
        features={"parking": True},
        director=staff("林醫生3", "小兒科", title="院長"),
        doctors=[staff("王醫生3A", "骨科", "復健科")],
    ),
    clinic_record(
        4, "台北市中山區南京東路4段103號", 25.0518, 121.5500, 4.1, 300,
        type="中醫診所",
        departments=["中醫科"],
        doctors=[staff("李醫生4A", "中醫科")],
    ),
    clinic_record(
        5, "高雄市前鎮區中山二路5號", 22.6, 120.3, 2.0, 0,
        departments=["家醫科"],
        director=staff("張醫生5", "家醫科", title="院長"),
    ),
]


def build_store(records):
    return ClinicStore(Clinic.model_validate(record) for record in records)


@pytest.fixture
def store():
    return build_store(CLINIC_RECORDS)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_clinic_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def ids(clinics):
    return [clinic["id"] if isinstance(clinic, dict) else clinic.id for clinic in clinics]
