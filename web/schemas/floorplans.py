# web/schemas/floorplans.py
# Kat planı endpoint'lerinin response modelleri. Alanlar msm_floorplan
# nesnelerinin to_dict() çıktısıyla birebir aynı.

from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class UnitOut(BaseModel):
    section: str
    block: str
    unit_number: str
    gross_area: float
    net_area: float
    status: str
    ground_floor_area: Optional[float] = None
    normal_floor_area: Optional[float] = None
    price_tl: Optional[float] = None
    price_usd: Optional[float] = None
    list_price: Optional[float] = None
    display_area: float
    ordinal: int


class FirmOut(BaseModel):
    sira_no: int
    etap: str
    block: str
    unit_no: str
    firma: str
    kiraci: str
    is_kolu: str


class BlockSummaryOut(BaseModel):
    total: int
    sold: int
    available: int
    reserved: int
    total_area: float
    avg_area: int
    occupancy_rate: int


class GridCellOut(BaseModel):
    unit_number: str
    status: str
    display_area: float
    row: int
    column: int
    span: int


class BlockLayoutOut(BaseModel):
    block: str
    geometry: Dict[str, int]
    cells: List[GridCellOut]


class PaymentPlanItemOut(BaseModel):
    installment_no: int
    date: str
    amount: Union[int, float]
    description: str


class PaymentPlanOut(BaseModel):
    price: float
    currency: str
    down_payment_date: str
    items: List[PaymentPlanItemOut]


class LocationOut(BaseModel):
    id: str
    title: str
    type: str
    coordinates: List[float]
    description: str
    polygon: Optional[List[List[float]]] = None
    polyline: Optional[List[List[float]]] = None
