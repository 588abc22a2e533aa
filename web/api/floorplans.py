# web/api/floorplans.py
# Etap/blok bazlı kat planı verisi ve ödeme planı endpoint'leri.
# Hesaplama msm_floorplan'da; burada sadece veri seti seçimi ve HTTP dönüşümü.

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from msm_floorplan.config import PHASES
from msm_floorplan.errors import UnknownPhaseError
from msm_floorplan.exports import MEDIA_TYPES, export_filename, render_payment_plan
from msm_floorplan.layout import get_block_geometry
from msm_floorplan.payment_plan import calculate_payment_plan
from msm_floorplan.pipeline import FloorPlanDataset
from web.schemas.floorplans import (
    BlockLayoutOut,
    BlockSummaryOut,
    FirmOut,
    PaymentPlanOut,
    UnitOut,
)
from web.schemas.units import ErrorResponse
from web.services.floorplan_service import FloorPlanService, get_floorplan_service

router = APIRouter()

CURRENCIES = ("TL", "USD")


def _dataset(phase: str, service: FloorPlanService) -> FloorPlanDataset:
    try:
        return service.get_dataset(phase)
    except UnknownPhaseError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _plan_out(price: float, currency: str, down_payment_date: date) -> PaymentPlanOut:
    plan = calculate_payment_plan(price, down_payment_date)
    return PaymentPlanOut(
        price=price,
        currency=currency,
        down_payment_date=down_payment_date.isoformat(),
        items=[item.to_dict() for item in plan],
    )


def _check_currency(currency: str) -> str:
    currency = currency.upper()
    if currency not in CURRENCIES:
        raise HTTPException(status_code=400, detail=f"Geçersiz para birimi: {currency}")
    return currency


@router.get("/phases", response_model=List[str], summary="Tanımlı etaplar")
async def list_phases():
    return list(PHASES)


@router.get(
    "/phases/{phase}/units",
    response_model=List[UnitOut],
    summary="Etabın birimleri (override verisiyle zenginleştirilmiş)",
    responses={404: {"model": ErrorResponse}},
)
async def list_phase_units(
    phase: str,
    block: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    """block/status tam eşleşme, search birim numarasında alt dize araması."""
    units = _dataset(phase, service).units
    if block:
        units = [u for u in units if u.block == block]
    if status:
        units = [u for u in units if u.status == status]
    if search:
        needle = search.lower()
        units = [u for u in units if needle in u.unit_number.lower()]
    return [u.to_dict() for u in units]


@router.get(
    "/phases/{phase}/blocks",
    response_model=List[str],
    summary="Etabın blokları",
    responses={404: {"model": ErrorResponse}},
)
async def list_blocks(phase: str, service: FloorPlanService = Depends(get_floorplan_service)):
    return _dataset(phase, service).blocks


@router.get(
    "/phases/{phase}/blocks/{block}/summary",
    response_model=BlockSummaryOut,
    summary="Blok doluluk özeti",
    responses={404: {"model": ErrorResponse}},
)
async def block_summary(
    phase: str,
    block: str,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    return _dataset(phase, service).block_summary(block).to_dict()


@router.get(
    "/phases/{phase}/blocks/{block}/layout",
    response_model=BlockLayoutOut,
    summary="Blok kat planı ızgara yerleşimi",
    responses={404: {"model": ErrorResponse}},
)
async def block_layout(
    phase: str,
    block: str,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    dataset = _dataset(phase, service)
    return {
        "block": block,
        "geometry": get_block_geometry(block).to_dict(),
        "cells": [cell.to_dict() for cell in dataset.block_layout(block)],
    }


@router.get(
    "/phases/{phase}/blocks/{block}/firms",
    response_model=List[FirmOut],
    summary="Bloktaki firmalar",
    responses={404: {"model": ErrorResponse}},
)
async def block_firms(
    phase: str,
    block: str,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    return [firm.to_dict() for firm in _dataset(phase, service).firms_for_block(block)]


@router.get(
    "/phases/{phase}/blocks/{block}/units/{unit_number}/firm",
    response_model=FirmOut,
    summary="Birimdeki firma (ilk eşleşme)",
    responses={404: {"model": ErrorResponse}},
)
async def unit_firm(
    phase: str,
    block: str,
    unit_number: str,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    firm = _dataset(phase, service).firm_for_unit(block, unit_number)
    if firm is None:
        raise HTTPException(
            status_code=404,
            detail=f"Firma bulunamadı: etap={phase} blok={block} no={unit_number}",
        )
    return firm.to_dict()


@router.get(
    "/phases/{phase}/blocks/{block}/units/{unit_number}/payment-plan",
    response_model=PaymentPlanOut,
    summary="Birim fiyatından ödeme planı",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def unit_payment_plan(
    phase: str,
    block: str,
    unit_number: str,
    currency: str = "TL",
    down_payment_date: Optional[date] = None,
    service: FloorPlanService = Depends(get_floorplan_service),
):
    """Fiyat birimin price_tl / price_usd alanından; fiyat yoksa 0 kabul edilir."""
    currency = _check_currency(currency)
    unit = _dataset(phase, service).get_unit(block, unit_number)
    if unit is None:
        raise HTTPException(
            status_code=404,
            detail=f"Birim bulunamadı: etap={phase} blok={block} no={unit_number}",
        )
    price = (unit.price_tl if currency == "TL" else unit.price_usd) or 0
    return _plan_out(price, currency, down_payment_date or date.today())


@router.get(
    "/payment-plan",
    response_model=PaymentPlanOut,
    summary="Ödeme planı hesapla (%30 peşinat + 20 taksit)",
    responses={400: {"model": ErrorResponse}},
)
async def payment_plan(
    price: float = Query(..., allow_inf_nan=False, description="Toplam satış fiyatı"),
    down_payment_date: Optional[date] = Query(None, description="Peşinat tarihi (varsayılan: bugün)"),
    currency: str = "TL",
):
    return _plan_out(price, _check_currency(currency), down_payment_date or date.today())


@router.get(
    "/payment-plan/export",
    summary="Ödeme planını CSV/XLSX olarak indir",
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
)
async def export_payment_plan(
    price: float = Query(..., allow_inf_nan=False, description="Toplam satış fiyatı"),
    down_payment_date: Optional[date] = None,
    currency: str = "TL",
    format: str = "xlsx",
    block: Optional[str] = None,
    unit_number: Optional[str] = None,
):
    currency = _check_currency(currency)
    fmt = format.lower()
    if fmt not in MEDIA_TYPES:
        raise HTTPException(status_code=400, detail=f"Desteklenmeyen format: {format}")
    plan = calculate_payment_plan(price, down_payment_date or date.today())
    content = render_payment_plan(plan, fmt, currency)
    if block and unit_number:
        filename = export_filename(block, unit_number, fmt)
    else:
        filename = f"Odeme_Plani.{fmt}"
    return Response(
        content=content,
        media_type=MEDIA_TYPES[fmt],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
