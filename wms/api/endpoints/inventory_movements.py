"""WMS API — Inventory movement endpoints."""
from wms.api.crud import build_crud_router
from wms.models.inventory import InventoryMovement
from wms.schemas.inventory import (
    InventoryMovementCreate,
    InventoryMovementFilters,
    InventoryMovementResponse,
    InventoryMovementUpdate,
)
from wms.services.crud_service import CRUDService

# ?status= filters on the approval workflow state
service = CRUDService(
    InventoryMovement,
    order_by=InventoryMovement.created_at.desc(),
    column_aliases={"status": "approval_status"},
)

router = build_crud_router(
    service,
    name="inventory movement",
    plural="inventory movements",
    create_schema=InventoryMovementCreate,
    update_schema=InventoryMovementUpdate,
    response_schema=InventoryMovementResponse,
    filter_schema=InventoryMovementFilters,
)
