"""WMS API — Inventory endpoints: stock records with on-hand/reserved/available quantities."""
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.crud import build_crud_router
from wms.models.inventory import Inventory
from wms.schemas.inventory import InventoryCreate, InventoryFilters, InventoryResponse, InventoryUpdate
from wms.services.inventory_service import InventoryService

service = InventoryService()


async def serialize_inventory(db: AsyncSession, items: list[Inventory]) -> list[InventoryResponse]:
    reserved = await InventoryService.reserved_totals(db, [item.id for item in items])
    out = []
    for item in items:
        resp = InventoryResponse.model_validate(item)
        resp.quantity_reserved = float(reserved.get(item.id, 0))
        out.append(resp)
    return out


router = build_crud_router(
    service,
    name="inventory",
    plural="inventory",
    create_schema=InventoryCreate,
    update_schema=InventoryUpdate,
    response_schema=InventoryResponse,
    filter_schema=InventoryFilters,
    serializer=serialize_inventory,
)
