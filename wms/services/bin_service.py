"""WMS API — BinMovementService."""
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from wms.db.base import utcnow
from wms.models.bin import BinMovement
from wms.services.crud_service import CRUDService

MOVEMENT_DEFAULTS = {"status": "completed", "movement_type": "transfer"}


class BinMovementService(CRUDService):
    """Bin-to-bin transfers; explicit nulls fall back to the movement defaults."""

    def __init__(self):
        super().__init__(BinMovement, order_by=BinMovement.movement_date.desc())

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        for key, default in MOVEMENT_DEFAULTS.items():
            if data.get(key) is None:
                data[key] = default
        if data.get("movement_date") is None:
            data["movement_date"] = utcnow()
        return data
