"""WMS API — Warehouse endpoints: CRUD plus per-warehouse stock summary."""
import logging
from uuid import UUID

from fastapi import Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.crud import build_crud_router
from wms.api.deps import CurrentUser, get_db, require_auth
from wms.schemas.common import ApiResponse
from wms.schemas.warehouse import (
    WarehouseCreate,
    WarehouseFilters,
    WarehouseResponse,
    WarehouseStockLine,
    WarehouseUpdate,
)
from wms.services.warehouse_service import WarehouseService

logger = logging.getLogger(__name__)

service = WarehouseService()

router = build_crud_router(
    service,
    name="warehouse",
    plural="warehouses",
    create_schema=WarehouseCreate,
    update_schema=WarehouseUpdate,
    response_schema=WarehouseResponse,
    filter_schema=WarehouseFilters,
)


@router.get("/{id}/stock", response_model=ApiResponse[list[WarehouseStockLine]])
async def get_warehouse_stock(
    id: UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_auth),
):
    """Stock on hand per product across all locations of a warehouse."""
    if await service.get(db, id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Warehouse not found")
    try:
        rows = await WarehouseService.get_warehouse_stock(db, id)
    except SQLAlchemyError:
        logger.exception("Error fetching stock for warehouse %s", id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve warehouse stock",
        )
    return ApiResponse(data=[WarehouseStockLine(product_id=pid, quantity=float(qty)) for pid, qty in rows])
