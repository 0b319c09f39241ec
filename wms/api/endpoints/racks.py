"""WMS API — Rack endpoints."""
from wms.api.crud import build_crud_router
from wms.models.warehouse import Rack
from wms.schemas.warehouse import RackCreate, RackFilters, RackResponse, RackUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Rack, order_by=Rack.rack_name.asc())

router = build_crud_router(
    service,
    name="rack",
    plural="racks",
    create_schema=RackCreate,
    update_schema=RackUpdate,
    response_schema=RackResponse,
    filter_schema=RackFilters,
)
