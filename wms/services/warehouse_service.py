"""WMS API — WarehouseService: CRUD with location-code derivation, stock summary."""
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.models.inventory import Inventory
from wms.models.warehouse import Location, Warehouse
from wms.services.crud_service import CRUDService

FULL_CODE_PREFIX = "WH-"


def derive_codes(warehouse_code: str) -> dict[str, str]:
    lc_code = warehouse_code.upper()
    return {"lc_warehouse_code": lc_code, "lc_full_code": f"{FULL_CODE_PREFIX}{lc_code}"}


class WarehouseService(CRUDService):
    """CRUD and stock summary for warehouses."""

    def __init__(self):
        super().__init__(
            Warehouse,
            order_by=Warehouse.warehouse_name.asc(),
            unique_fields=("warehouse_code",),
        )

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        data.update(derive_codes(data["warehouse_code"]))
        return data

    async def prepare_update(self, db: AsyncSession, obj: Warehouse, data: dict[str, Any]) -> dict[str, Any]:
        code = data.get("warehouse_code")
        if code is not None and code != obj.warehouse_code:
            data.update(derive_codes(code))
        return data

    @staticmethod
    async def get_warehouse_stock(db: AsyncSession, warehouse_id: UUID) -> list[tuple[UUID, Decimal]]:
        """Returns list of (product_id, quantity) for products with stock at the warehouse."""
        result = await db.execute(
            select(Inventory.product_id, func.coalesce(func.sum(Inventory.quantity), 0))
            .join(Location, Location.id == Inventory.location_id)
            .where(
                Location.warehouse_id == warehouse_id,
                Inventory.deleted_at.is_(None),
            )
            .group_by(Inventory.product_id)
            .having(func.sum(Inventory.quantity) > 0)
        )
        return [(row[0], Decimal(str(row[1]))) for row in result.all()]
