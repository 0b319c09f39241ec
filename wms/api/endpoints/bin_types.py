"""WMS API — Bin type endpoints."""
from wms.api.crud import build_crud_router
from wms.models.bin import BinType
from wms.schemas.bin import BinTypeCreate, BinTypeFilters, BinTypeResponse, BinTypeUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(BinType, order_by=BinType.type_name.asc(), unique_fields=("type_code",))

router = build_crud_router(
    service,
    name="bin type",
    plural="bin types",
    create_schema=BinTypeCreate,
    update_schema=BinTypeUpdate,
    response_schema=BinTypeResponse,
    filter_schema=BinTypeFilters,
)
