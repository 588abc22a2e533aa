# web/api/locations.py
# Harita lokasyonları (liman, tren istasyonu, OSB, gümrük, proje).

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from msm_floorplan.errors import LocationNotFoundError
from msm_floorplan.locations import Location, get_location
from web.schemas.floorplans import LocationOut
from web.schemas.units import ErrorResponse
from web.services.floorplan_service import get_locations

router = APIRouter()


@router.get("/locations", response_model=List[LocationOut], summary="Tüm lokasyonlar")
async def list_locations(
    type: Optional[str] = None,
    locations: Dict[str, Location] = Depends(get_locations),
):
    """type verilirse sadece o türdeki lokasyonlar (port, train, osb ...)."""
    return [
        loc.to_dict() for loc in locations.values()
        if type is None or loc.type == type
    ]


@router.get(
    "/locations/{location_id}",
    response_model=LocationOut,
    summary="Tek lokasyon",
    responses={404: {"model": ErrorResponse}},
)
async def read_location(
    location_id: str,
    locations: Dict[str, Location] = Depends(get_locations),
):
    try:
        return get_location(locations, location_id).to_dict()
    except LocationNotFoundError:
        raise HTTPException(status_code=404, detail=f"Lokasyon bulunamadı: {location_id}")
