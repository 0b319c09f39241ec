"""WMS API — Common response envelope."""
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel

T = TypeVar("T")


class Meta(BaseModel):
    """Pagination metadata for list responses."""

    total: int
    limit: int
    offset: int


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope: {success, data, message, error, meta}."""

    success: bool = True
    data: T | None = None
    message: str | None = None
    error: Any | None = None
    meta: Meta | None = None


class DeletedResponse(BaseModel):
    id: UUID


class AuditFields(BaseModel):
    """Columns every table carries."""

    id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: UUID | None = None
    updated_by: UUID | None = None

    model_config = {"from_attributes": True}


class SoftDeleteFields(AuditFields):
    deleted_at: datetime | None = None
    deleted_by: UUID | None = None
