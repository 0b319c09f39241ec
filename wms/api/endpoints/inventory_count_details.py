"""WMS API — Inventory count detail endpoints."""
from wms.api.crud import build_crud_router
from wms.models.inventory import InventoryCountDetail
from wms.schemas.inventory import InventoryCountDetailCreate, InventoryCountDetailFilters, InventoryCountDetailResponse, InventoryCountDetailUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(InventoryCountDetail, order_by=InventoryCountDetail.created_at.desc())

router = build_crud_router(
    service,
    name="inventory count detail",
    plural="inventory count details",
    create_schema=InventoryCountDetailCreate,
    update_schema=InventoryCountDetailUpdate,
    response_schema=InventoryCountDetailResponse,
    filter_schema=InventoryCountDetailFilters,
)
