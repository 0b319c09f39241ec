"""WMS API — Bin endpoints."""
from wms.api.crud import build_crud_router
from wms.models.bin import Bin
from wms.schemas.bin import BinCreate, BinFilters, BinResponse, BinUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Bin, order_by=Bin.bin_code.asc())

router = build_crud_router(
    service,
    name="bin",
    plural="bins",
    create_schema=BinCreate,
    update_schema=BinUpdate,
    response_schema=BinResponse,
    filter_schema=BinFilters,
)
