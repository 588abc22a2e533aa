"""
Static map locations (project site, ports, train stations, OSBs, customs).

Loaded from a JSON configuration file as a mapping of id -> Location.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from msm_floorplan.config import LOCATIONS_PATH
from msm_floorplan.errors import LocationNotFoundError

logger = logging.getLogger(__name__)

LOCATION_TYPES = ("port", "train", "industrial", "customs", "osb", "project")


class Location:
    """One point of interest on the location map; coordinates are (lng, lat)."""

    def __init__(
        self,
        id: str,
        title: str,
        type: str,
        coordinates: Tuple[float, float],
        description: str = "",
        polygon: Optional[List[Tuple[float, float]]] = None,
        polyline: Optional[List[Tuple[float, float]]] = None,
    ) -> None:
        if type not in LOCATION_TYPES:
            raise ValueError(f"Unknown location type for {id}: {type}")
        self.id = id
        self.title = title
        self.type = type
        self.coordinates = tuple(coordinates)
        self.description = description
        self.polygon = [tuple(p) for p in polygon] if polygon else None
        self.polyline = [tuple(p) for p in polyline] if polyline else None

    def to_dict(self) -> Dict[str, object]:
        data = {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "coordinates": list(self.coordinates),
            "description": self.description,
        }
        if self.polygon:
            data["polygon"] = [list(p) for p in self.polygon]
        if self.polyline:
            data["polyline"] = [list(p) for p in self.polyline]
        return data


def load_locations(path: str | Path = LOCATIONS_PATH) -> Dict[str, Location]:
    """
    Load the location table.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If an entry has an unknown type.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    locations = {key: Location(id=key, **entry) for key, entry in raw.items()}
    logger.info(f"Loaded {len(locations)} locations from {path}")
    return locations


def get_location(locations: Dict[str, Location], location_id: str) -> Location:
    try:
        return locations[location_id]
    except KeyError:
        raise LocationNotFoundError(location_id) from None


def locations_by_type(locations: Dict[str, Location], location_type: str) -> List[Location]:
    return [loc for loc in locations.values() if loc.type == location_type]
