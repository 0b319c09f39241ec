"""WMS API — Aisle endpoints."""
from wms.api.crud import build_crud_router
from wms.models.warehouse import Aisle
from wms.schemas.warehouse import AisleCreate, AisleFilters, AisleResponse, AisleUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Aisle, order_by=Aisle.aisle_name.asc())

router = build_crud_router(
    service,
    name="aisle",
    plural="aisles",
    create_schema=AisleCreate,
    update_schema=AisleUpdate,
    response_schema=AisleResponse,
    filter_schema=AisleFilters,
)
