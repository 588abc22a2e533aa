# web/api/units.py
# Seed birim listesi üzerinde salt okunur sorgular.
# Depo hataları (UnitStoreError) web/main.py içinde 500 {"error": ...} olur.

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from web.schemas.units import ErrorResponse, StoredUnit
from web.services.unit_storage import (
    FILTERABLE_STATUSES,
    UnitStore,
    get_unit_store,
)

router = APIRouter()


@router.get(
    "/units",
    response_model=List[StoredUnit],
    summary="Tüm birimler",
    responses={500: {"model": ErrorResponse}},
)
async def list_units(store: UnitStore = Depends(get_unit_store)):
    return store.get_all_units()


@router.get(
    "/units/search/{term}",
    response_model=List[StoredUnit],
    summary="Birim numarası veya blok adında ara",
    responses={500: {"model": ErrorResponse}},
)
async def search_units(term: str, store: UnitStore = Depends(get_unit_store)):
    """Büyük/küçük harf duyarsız alt dize araması."""
    return store.search_units(term)


@router.get(
    "/units/filter/{status}",
    response_model=List[StoredUnit],
    summary="Duruma göre filtrele (available | sold)",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def filter_units(status: str, store: UnitStore = Depends(get_unit_store)):
    if status not in FILTERABLE_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status filter")
    return store.get_units_by_status(status)


@router.get(
    "/units/{unit_id}",
    response_model=StoredUnit,
    summary="Tek birim",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_unit(unit_id: str, store: UnitStore = Depends(get_unit_store)):
    unit = store.get_unit(unit_id)
    if unit is None:
        raise HTTPException(status_code=404, detail="Unit not found")
    return unit
