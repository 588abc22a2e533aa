# web/main.py
# ---------------------------------------------------------------------------
# Web servisinin giriş noktası.
#
# İçermeli:
#   - FastAPI uygulama örneği
#   - Router'ların mount edilmesi
#   - Hata gövdelerinin {"error": ...} biçimine çevrilmesi
#
# İçermemeli:
#   - CSV ayrıştırma / hesaplama (msm_floorplan/ tarafında kalmalı)
#   - Doğrudan dosya erişimi (services üzerinden)
# ---------------------------------------------------------------------------

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from web.api.floorplans import router as floorplans_router
from web.api.locations import router as locations_router
from web.api.units import router as units_router
from web.services.unit_storage import UnitStoreError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Model Sanayi Merkezi API")

# GET /api/units, /api/units/{id}, /api/units/search/{term}, /api/units/filter/{status}
app.include_router(units_router, prefix="/api", tags=["units"])
# GET /api/phases/..., /api/payment-plan
app.include_router(floorplans_router, prefix="/api", tags=["floorplans"])
# GET /api/locations
app.include_router(locations_router, prefix="/api", tags=["locations"])


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    messages = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"error": messages or "Invalid request"})


@app.exception_handler(UnitStoreError)
async def _unit_store_error(request: Request, exc: UnitStoreError):
    logger.error("Unit store error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Failed to fetch units"})


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health")
def health():
    """Servis ayakta mı kontrolü."""
    return {"status": "ok", "service": "web"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("web.main:app", host="0.0.0.0", port=8000)
