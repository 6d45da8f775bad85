# modules/utils/generate_clinic_data.py
import argparse
import json
import logging
import random
from pathlib import Path
from typing import List, Optional

from core.config import settings

logger = logging.getLogger(__name__)

# District -> (centre lat, centre lng, main road)
TAIPEI_DISTRICTS = {
    "信義區": (25.0330, 121.5654, "信義路"),
    "大安區": (25.0268, 121.5434, "復興南路"),
    "中山區": (25.0642, 121.5330, "南京東路"),
    "中正區": (25.0324, 121.5199, "重慶南路"),
    "松山區": (25.0500, 121.5776, "八德路"),
    "內湖區": (25.0838, 121.5880, "成功路"),
    "士林區": (25.0929, 121.5246, "中正路"),
    "萬華區": (25.0345, 121.4997, "西園路"),
}

CLINIC_TYPES = ["診所", "醫院", "牙醫診所", "中醫診所"]

DEPARTMENTS = ["家醫科", "內科", "小兒科", "骨科", "復健科", "皮膚科", "耳鼻喉科", "眼科"]

SERVICE_GROUPS = {
    "門診服務": ["一般門診", "預防注射", "健康檢查", "外傷處理"],
    "檢查服務": ["X光檢查", "抽血檢驗", "超音波檢查"],
    "復健服務": ["物理治療", "運動治療"],
}

FEATURES = ["parking", "wheelchairAccessible", "nightClinic", "weekendService", "onlineBooking"]

SURNAMES = ["張", "李", "王", "陳", "林", "黃", "吳", "劉"]


def _doctor(rng: random.Random, surname: str, suffix: str, title: str) -> dict:
    return {
        "name": f"{surname}醫生{suffix}",
        "title": title,
        "specialties": rng.sample(DEPARTMENTS, 2),
    }


def generate_clinics(count: int = 50, seed: Optional[int] = 42) -> List[dict]:
    """Builds `count` synthetic clinics; the same seed always yields the same data."""
    rng = random.Random(seed)
    district_names = list(TAIPEI_DISTRICTS)
    clinics = []

    for index in range(count):
        clinic_id = index + 1
        district = district_names[index % len(district_names)]
        lat, lng, road = TAIPEI_DISTRICTS[district]
        departments = rng.sample(DEPARTMENTS, rng.randint(2, 4))

        clinics.append({
            "id": clinic_id,
            "name": f"康健診所{clinic_id}",
            "type": rng.choice(CLINIC_TYPES),
            "contact": {
                "address": f"台北市{district}{road}{rng.randint(1, 5)}段{100 + index}號",
                "phone": f"02-2{index:03d}-{1000 + index:04d}",
                # jitter stays within roughly 1.5 km of the district centre
                "location": {
                    "lat": round(lat + rng.uniform(-0.01, 0.01), 6),
                    "lng": round(lng + rng.uniform(-0.01, 0.01), 6),
                },
            },
            "rating": {
                "score": round(rng.uniform(3.0, 5.0), 1),
                "reviewCount": rng.randint(0, 500),
            },
            "departments": departments,
            "services": [
                {"category": category, "items": rng.sample(items, rng.randint(1, len(items)))}
                for category, items in SERVICE_GROUPS.items()
            ],
            "features": {feature: rng.random() < 0.5 for feature in FEATURES},
            "openingHours": {
                "weekday": "09:00-21:00",
                "weekend": "09:00-17:00",
            },
            "medicalTeam": {
                "director": {
                    "name": f"{rng.choice(SURNAMES)}醫生{clinic_id}",
                    "title": "院長",
                    "specialties": departments[:2],
                },
                "doctors": [
                    _doctor(rng, rng.choice(SURNAMES), f"{clinic_id}A", "主治醫師"),
                    _doctor(rng, rng.choice(SURNAMES), f"{clinic_id}B", "主治醫師"),
                ],
            },
        })

    return clinics


def write_clinics_file(path: Path, count: int = 50, seed: Optional[int] = 42) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        json.dump({"clinics": generate_clinics(count, seed)}, file, ensure_ascii=False, indent=2)
    logger.info("Wrote %d clinics to %s", count, path)
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate synthetic clinic data")
    parser.add_argument("--count", type=int, default=50)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--output", type=Path, default=settings.CLINICS_DATA_PATH)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    write_clinics_file(args.output, args.count, args.seed)


if __name__ == "__main__":
    main()
