"""WMS API — Location endpoints."""
from wms.api.crud import build_crud_router
from wms.models.warehouse import Location
from wms.schemas.warehouse import LocationCreate, LocationFilters, LocationResponse, LocationUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Location, order_by=Location.location_name.asc())

router = build_crud_router(
    service,
    name="location",
    plural="locations",
    create_schema=LocationCreate,
    update_schema=LocationUpdate,
    response_schema=LocationResponse,
    filter_schema=LocationFilters,
)
