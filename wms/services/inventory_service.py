"""WMS API — Inventory services: stock records with reservation totals, reservations."""
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.db.base import utcnow
from wms.models.inventory import Inventory, InventoryReservation
from wms.services.crud_service import CRUDService

# Reservations in these states still hold stock.
ACTIVE_RESERVATION_STATUSES = ("active", "pending")


class InventoryService(CRUDService):
    def __init__(self):
        super().__init__(
            Inventory,
            order_by=Inventory.created_at.desc(),
            soft_delete=True,
            search_columns=("lot_number", "serial_number", "barcode"),
        )

    @staticmethod
    async def reserved_totals(db: AsyncSession, inventory_ids: list[UUID]) -> dict[UUID, Decimal]:
        """Sum of active reservation quantity per inventory row."""
        if not inventory_ids:
            return {}
        result = await db.execute(
            select(InventoryReservation.inventory_id, func.coalesce(func.sum(InventoryReservation.quantity), 0))
            .where(
                InventoryReservation.inventory_id.in_(inventory_ids),
                InventoryReservation.status.in_(ACTIVE_RESERVATION_STATUSES),
            )
            .group_by(InventoryReservation.inventory_id)
        )
        return {row[0]: Decimal(str(row[1])) for row in result.all()}


class ReservationService(CRUDService):
    def __init__(self):
        super().__init__(InventoryReservation, order_by=InventoryReservation.created_at.desc())

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("reserved_at") is None:
            data["reserved_at"] = utcnow()
        return data
