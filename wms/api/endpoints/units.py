"""WMS API — Units of measure endpoints. Writes need an admin role."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin, require_auth
from wms.models.catalogue import UnitOfMeasure
from wms.schemas.catalogue import UnitCreate, UnitFilters, UnitResponse, UnitUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(
    UnitOfMeasure,
    order_by=UnitOfMeasure.name.asc(),
    soft_delete=True,
    search_columns=("name", "symbol"),
    unique_fields=("symbol",),
)

router = build_crud_router(
    service,
    name="unit of measure",
    plural="units of measure",
    create_schema=UnitCreate,
    update_schema=UnitUpdate,
    response_schema=UnitResponse,
    filter_schema=UnitFilters,
    read_dependency=require_auth,
    write_dependency=require_admin,
)
