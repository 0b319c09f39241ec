"""WMS API — Users, roles, permissions, assignments and audit log schemas."""
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from wms.schemas.common import SoftDeleteFields

SLUG_PATTERN = r"^[a-z0-9]+(?:[-_:.][a-z0-9]+)*$"


# ── Users ───────────────────────────────────────────────────────────────────

class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool = True


class UserUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=3, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=128)
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool | None = None


class UserResponse(SoftDeleteFields):
    username: str
    email: str
    first_name: str | None
    last_name: str | None
    is_active: bool
    last_login_at: datetime | None


class UserFilters(BaseModel):
    is_active: bool | None = None
    search: str | None = None


# ── Roles ───────────────────────────────────────────────────────────────────

class RoleCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: str | None = None
    is_active: bool = True


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = Field(default=None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: str | None = None
    is_active: bool | None = None


class RoleResponse(SoftDeleteFields):
    name: str
    slug: str
    description: str | None
    is_active: bool


class RoleFilters(BaseModel):
    is_active: bool | None = None


# ── Permissions ─────────────────────────────────────────────────────────────

class PermissionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=150, pattern=SLUG_PATTERN)
    resource: str | None = None
    action: str | None = None
    description: str | None = None


class PermissionUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    slug: str | None = Field(default=None, min_length=1, max_length=150, pattern=SLUG_PATTERN)
    resource: str | None = None
    action: str | None = None
    description: str | None = None


class PermissionResponse(SoftDeleteFields):
    name: str
    slug: str
    resource: str | None
    action: str | None
    description: str | None


class PermissionFilters(BaseModel):
    resource: str | None = None
    action: str | None = None


# ── Role permissions / user roles ───────────────────────────────────────────

class RolePermissionCreate(BaseModel):
    role_id: UUID
    permission_id: UUID


class RolePermissionUpdate(BaseModel):
    role_id: UUID | None = None
    permission_id: UUID | None = None


class RolePermissionResponse(SoftDeleteFields):
    role_id: UUID
    permission_id: UUID


class RolePermissionFilters(BaseModel):
    role_id: UUID | None = None
    permission_id: UUID | None = None


class UserRoleCreate(BaseModel):
    user_id: UUID
    role_id: UUID


class UserRoleUpdate(BaseModel):
    user_id: UUID | None = None
    role_id: UUID | None = None


class UserRoleResponse(SoftDeleteFields):
    user_id: UUID
    role_id: UUID


class UserRoleFilters(BaseModel):
    user_id: UUID | None = None
    role_id: UUID | None = None


# ── Audit log ───────────────────────────────────────────────────────────────

class AuditLogResponse(BaseModel):
    id: UUID
    actor_id: UUID | None
    action: str
    target_type: str | None
    target_id: UUID | None
    payload: dict[str, Any] | None
    created_at: datetime | None

    model_config = {"from_attributes": True}


class AuditLogFilters(BaseModel):
    action: str | None = None
    target_type: str | None = None
    target_id: UUID | None = None
    actor_id: UUID | None = None
