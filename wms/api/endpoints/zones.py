"""WMS API — Zone endpoints."""
from wms.api.crud import build_crud_router
from wms.models.warehouse import Zone
from wms.schemas.warehouse import ZoneCreate, ZoneFilters, ZoneResponse, ZoneUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Zone, order_by=Zone.zone_name.asc())

router = build_crud_router(
    service,
    name="zone",
    plural="zones",
    create_schema=ZoneCreate,
    update_schema=ZoneUpdate,
    response_schema=ZoneResponse,
    filter_schema=ZoneFilters,
)
