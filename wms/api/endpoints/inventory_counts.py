"""WMS API — Inventory count endpoints."""
from wms.api.crud import build_crud_router
from wms.models.inventory import InventoryCount
from wms.schemas.inventory import InventoryCountCreate, InventoryCountFilters, InventoryCountResponse, InventoryCountUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(InventoryCount, order_by=InventoryCount.created_at.desc())

router = build_crud_router(
    service,
    name="inventory count",
    plural="inventory counts",
    create_schema=InventoryCountCreate,
    update_schema=InventoryCountUpdate,
    response_schema=InventoryCountResponse,
    filter_schema=InventoryCountFilters,
)
