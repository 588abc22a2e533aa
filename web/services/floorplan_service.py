# web/services/floorplan_service.py
# Etap başına FloorPlanDataset önbelleği ve lokasyon tablosu.
# Veri setleri ilk istekte kurulur; reload() ile yeniden okunur.

import logging
from typing import Dict, Optional

from msm_floorplan.config import SOURCE
from msm_floorplan.loader import FloorPlanDataLoader
from msm_floorplan.locations import Location, load_locations
from msm_floorplan.parsing.units import get_phase_layout
from msm_floorplan.pipeline import FloorPlanDataset, FloorPlanPipeline

logger = logging.getLogger(__name__)


class FloorPlanService:
    """Kat planı veri setlerini etap başına bir kez kurar ve saklar."""

    def __init__(self, loader: Optional[FloorPlanDataLoader] = None) -> None:
        self.loader = loader or FloorPlanDataLoader(source=SOURCE)
        self._datasets: Dict[str, FloorPlanDataset] = {}

    def get_dataset(self, phase: str) -> FloorPlanDataset:
        """
        Etap veri setini döner (gerekirse kurar).

        Raises:
            UnknownPhaseError: Tanınmayan etap.
        """
        get_phase_layout(phase)
        phase = str(phase)
        if phase not in self._datasets:
            self._datasets[phase] = FloorPlanPipeline(phase, loader=self.loader).run()
        return self._datasets[phase]

    def reload(self, phase: Optional[str] = None) -> None:
        if phase is None:
            self._datasets.clear()
        else:
            self._datasets.pop(str(phase), None)
        logger.info("Floor plan cache cleared (phase=%s)", phase or "all")


_service: Optional[FloorPlanService] = None
_locations: Optional[Dict[str, Location]] = None


def get_floorplan_service() -> FloorPlanService:
    global _service
    if _service is None:
        _service = FloorPlanService()
    return _service


def get_locations() -> Dict[str, Location]:
    global _locations
    if _locations is None:
        _locations = load_locations()
    return _locations
