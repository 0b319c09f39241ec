"""WMS API — Level endpoints."""
from wms.api.crud import build_crud_router
from wms.models.warehouse import Level
from wms.schemas.warehouse import LevelCreate, LevelFilters, LevelResponse, LevelUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(Level, order_by=Level.level_number.asc())

router = build_crud_router(
    service,
    name="level",
    plural="levels",
    create_schema=LevelCreate,
    update_schema=LevelUpdate,
    response_schema=LevelResponse,
    filter_schema=LevelFilters,
)
