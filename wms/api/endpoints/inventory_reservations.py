"""WMS API — Inventory reservation endpoints."""
from wms.api.crud import build_crud_router
from wms.schemas.inventory import (
    InventoryReservationCreate,
    InventoryReservationFilters,
    InventoryReservationResponse,
    InventoryReservationUpdate,
)
from wms.services.inventory_service import ReservationService

router = build_crud_router(
    ReservationService(),
    name="inventory reservation",
    plural="inventory reservations",
    create_schema=InventoryReservationCreate,
    update_schema=InventoryReservationUpdate,
    response_schema=InventoryReservationResponse,
    filter_schema=InventoryReservationFilters,
)
