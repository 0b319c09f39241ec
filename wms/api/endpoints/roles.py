"""WMS API — Role and permission endpoints.

Any authenticated user may read; only super-admins may change the RBAC tables.
"""
from wms.api.crud import build_crud_router
from wms.api.deps import require_auth, require_super_admin
from wms.models.rbac import Permission, Role, RolePermission, UserRole
from wms.schemas.rbac import (
    PermissionCreate,
    PermissionFilters,
    PermissionResponse,
    PermissionUpdate,
    RoleCreate,
    RoleFilters,
    RolePermissionCreate,
    RolePermissionFilters,
    RolePermissionResponse,
    RolePermissionUpdate,
    RoleResponse,
    RoleUpdate,
    UserRoleCreate,
    UserRoleFilters,
    UserRoleResponse,
    UserRoleUpdate,
)
from wms.services.crud_service import CRUDService

roles_router = build_crud_router(
    CRUDService(Role, order_by=Role.name.asc(), soft_delete=True, unique_fields=("slug",)),
    name="role",
    plural="roles",
    create_schema=RoleCreate,
    update_schema=RoleUpdate,
    response_schema=RoleResponse,
    filter_schema=RoleFilters,
    read_dependency=require_auth,
    write_dependency=require_super_admin,
)

permissions_router = build_crud_router(
    CRUDService(Permission, order_by=Permission.name.asc(), soft_delete=True, unique_fields=("slug",)),
    name="permission",
    plural="permissions",
    create_schema=PermissionCreate,
    update_schema=PermissionUpdate,
    response_schema=PermissionResponse,
    filter_schema=PermissionFilters,
    read_dependency=require_auth,
    write_dependency=require_super_admin,
)

role_permissions_router = build_crud_router(
    CRUDService(RolePermission, soft_delete=True, unique_together=(("role_id", "permission_id"),)),
    name="role permission",
    plural="role permissions",
    create_schema=RolePermissionCreate,
    update_schema=RolePermissionUpdate,
    response_schema=RolePermissionResponse,
    filter_schema=RolePermissionFilters,
    read_dependency=require_auth,
    write_dependency=require_super_admin,
)

user_roles_router = build_crud_router(
    CRUDService(UserRole, soft_delete=True, unique_together=(("user_id", "role_id"),)),
    name="user role",
    plural="user roles",
    create_schema=UserRoleCreate,
    update_schema=UserRoleUpdate,
    response_schema=UserRoleResponse,
    filter_schema=UserRoleFilters,
    read_dependency=require_auth,
    write_dependency=require_super_admin,
)
