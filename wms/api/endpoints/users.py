"""WMS API — User management endpoints (admin only)."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin
from wms.schemas.rbac import UserCreate, UserFilters, UserResponse, UserUpdate
from wms.services.user_service import UserService

router = build_crud_router(
    UserService(),
    name="user",
    plural="users",
    create_schema=UserCreate,
    update_schema=UserUpdate,
    response_schema=UserResponse,
    filter_schema=UserFilters,
    read_dependency=require_admin,
    write_dependency=require_admin,
)
