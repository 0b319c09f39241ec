"""WMS API — Bin movement endpoints (newest movement first)."""
from wms.api.crud import build_crud_router
from wms.schemas.bin import BinMovementCreate, BinMovementFilters, BinMovementResponse, BinMovementUpdate
from wms.services.bin_service import BinMovementService

router = build_crud_router(
    BinMovementService(),
    name="bin movement",
    plural="bin movements",
    create_schema=BinMovementCreate,
    update_schema=BinMovementUpdate,
    response_schema=BinMovementResponse,
    filter_schema=BinMovementFilters,
)
