# web/services/unit_storage.py
# Seed JSON'dan (data/unit_data.json) beslenen bellek içi birim deposu.
# Salt okunur: yazma API'si yok, süreç kapanınca veri kaybolur.

import json
import logging
import uuid
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from msm_floorplan.config import UNIT_DATA_PATH
from web.schemas.units import StoredUnit

logger = logging.getLogger(__name__)

FILTERABLE_STATUSES = ("available", "sold")


class UnitStoreError(Exception):
    """Birim deposu okunamadı / seed verisi bozuk."""
    pass


class UnitStore:
    """Birim listesi üzerinde basit sorgular."""

    def __init__(self, units: List[StoredUnit]) -> None:
        self._units = list(units)

    @classmethod
    def from_json(cls, path: str | Path = UNIT_DATA_PATH) -> "UnitStore":
        """
        Seed JSON'u okur, her kayda yeni bir UUID atar.

        Raises:
            UnitStoreError: Dosya okunamazsa veya kayıtlar geçersizse.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            units = [
                StoredUnit.model_validate({"id": str(uuid.uuid4()), "tourUrl": None, **entry})
                for entry in raw
            ]
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            raise UnitStoreError(f"Seed verisi yüklenemedi: {path}: {e}") from e
        logger.info("Loaded %d units from %s", len(units), path)
        return cls(units)

    def get_all_units(self) -> List[StoredUnit]:
        return list(self._units)

    def get_unit(self, unit_id: str) -> Optional[StoredUnit]:
        return next((u for u in self._units if u.id == unit_id), None)

    def get_unit_by_unit_number(self, unit_number: str) -> Optional[StoredUnit]:
        return next((u for u in self._units if u.unit_number == unit_number), None)

    def search_units(self, term: str) -> List[StoredUnit]:
        """Birim numarası veya blok adında büyük/küçük harf duyarsız arama."""
        needle = term.lower()
        return [
            u for u in self._units
            if needle in u.unit_number.lower() or needle in u.block_name.lower()
        ]

    def get_units_by_status(self, status: str) -> List[StoredUnit]:
        if status not in FILTERABLE_STATUSES:
            raise ValueError(f"Geçersiz durum filtresi: {status}")
        return [u for u in self._units if u.status == status]


_store: Optional[UnitStore] = None


def get_unit_store() -> UnitStore:
    """Süreç başına tek depo; ilk çağrıda seed JSON'dan yüklenir."""
    global _store
    if _store is None:
        _store = UnitStore.from_json()
    return _store
