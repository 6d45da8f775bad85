import logging
from typing import Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from core.models.clinic import Clinic

logger = logging.getLogger(__name__)


def _read_only(values) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    array.flags.writeable = False
    return array


class ClinicStore:
    """Immutable clinic collection built once at startup and shared by every request."""

    def __init__(self, clinics: Iterable[Clinic] = ()):
        self._clinics: Tuple[Clinic, ...] = tuple(clinics)

        by_id: Dict[int, Clinic] = {}
        for clinic in self._clinics:
            if clinic.id in by_id:
                logger.warning("Duplicate clinic id %s, keeping the first record", clinic.id)
                continue
            by_id[clinic.id] = clinic
        self._by_id = by_id

        self.latitudes = _read_only([c.location.lat for c in self._clinics])
        self.longitudes = _read_only([c.location.lng for c in self._clinics])

    @property
    def clinics(self) -> Tuple[Clinic, ...]:
        return self._clinics

    def get(self, clinic_id: int) -> Optional[Clinic]:
        return self._by_id.get(clinic_id)

    def __len__(self) -> int:
        return len(self._clinics)

    def __iter__(self) -> Iterator[Clinic]:
        return iter(self._clinics)
