import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from core.models.clinic import Clinic
from core.store import ClinicStore

logger = logging.getLogger(__name__)


def parse_clinic_records(records: list) -> List[Clinic]:
    """Validates records one by one; a bad record is logged and skipped."""
    clinics = []
    for index, record in enumerate(records):
        try:
            clinics.append(Clinic.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping clinic record %d: %d validation error(s), first at %s",
                index,
                exc.error_count(),
                ".".join(str(part) for part in exc.errors()[0]["loc"]),
            )
    return clinics


def load_clinics_data(file_path: Union[str, Path]) -> ClinicStore:
    """Loads the clinics JSON document into a ClinicStore.

    A missing, unreadable or malformed file is logged and yields an empty
    store so the service still starts and answers health checks.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            raw_data = json.load(file)

        records = raw_data["clinics"]
        if not isinstance(records, list):
            raise ValueError("'clinics' must be a list")

    # JSONDecodeError is a ValueError; TypeError covers a non-object document
    except (OSError, ValueError, KeyError, TypeError):
        logger.exception("Error loading clinics data from %s", file_path)
        return ClinicStore()

    store = ClinicStore(parse_clinic_records(records))
    logger.info("Loaded %d of %d clinics from %s", len(store), len(records), file_path)
    return store
