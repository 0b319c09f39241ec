"""WMS API — Bin content endpoints."""
from wms.api.crud import build_crud_router
from wms.models.bin import BinContent
from wms.schemas.bin import BinContentCreate, BinContentFilters, BinContentResponse, BinContentUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(BinContent, order_by=BinContent.putaway_date.desc())

router = build_crud_router(
    service,
    name="bin content",
    plural="bin contents",
    create_schema=BinContentCreate,
    update_schema=BinContentUpdate,
    response_schema=BinContentResponse,
    filter_schema=BinContentFilters,
)
