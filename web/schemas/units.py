# web/schemas/units.py
# Seed JSON'dan gelen birim kaydı. Alan adları JSON'da camelCase.

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredUnit(BaseModel):
    """Birim listesi kaydı (GET /api/units)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    unit_number: str
    block_name: str
    size: int
    status: str
    price: int
    company_name: Optional[str] = None
    x: int
    y: int
    width: int
    height: int
    tour_url: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
