"""WMS API — Units of measure, product categories, families and brands schemas."""
from uuid import UUID

from pydantic import BaseModel, Field

from wms.schemas.common import SoftDeleteFields
from wms.schemas.rbac import SLUG_PATTERN


# ── Units of measure ────────────────────────────────────────────────────────

class UnitCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    symbol: str = Field(min_length=1, max_length=20)
    description: str | None = None
    is_active: bool = True


class UnitUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    symbol: str | None = Field(default=None, min_length=1, max_length=20)
    description: str | None = None
    is_active: bool | None = None


class UnitResponse(SoftDeleteFields):
    name: str
    symbol: str
    description: str | None
    is_active: bool


class UnitFilters(BaseModel):
    is_active: bool | None = None
    search: str | None = None


# ── Categories ──────────────────────────────────────────────────────────────

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    # derived from name when omitted
    slug: str | None = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    parent_id: UUID | None = None
    image_url: str | None = Field(default=None, max_length=500)
    sort_order: int = 0
    is_active: bool = True


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    parent_id: UUID | None = None
    image_url: str | None = Field(default=None, max_length=500)
    sort_order: int | None = None
    is_active: bool | None = None


class CategoryResponse(SoftDeleteFields):
    name: str
    slug: str
    description: str | None
    parent_id: UUID | None
    image_url: str | None
    sort_order: int
    is_active: bool


class CategoryFilters(BaseModel):
    parent_id: UUID | None = None
    is_active: bool | None = None
    search: str | None = None


# ── Families ────────────────────────────────────────────────────────────────

class FamilyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    category_id: UUID | None = None
    is_active: bool = True


class FamilyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    category_id: UUID | None = None
    is_active: bool | None = None


class FamilyResponse(SoftDeleteFields):
    name: str
    description: str | None
    category_id: UUID | None
    is_active: bool


class FamilyFilters(BaseModel):
    category_id: UUID | None = None
    is_active: bool | None = None


# ── Brands ──────────────────────────────────────────────────────────────────

class BrandCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    website: str | None = Field(default=None, max_length=500)
    logo_url: str | None = Field(default=None, max_length=500)
    is_active: bool = True


class BrandUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    website: str | None = Field(default=None, max_length=500)
    logo_url: str | None = Field(default=None, max_length=500)
    is_active: bool | None = None


class BrandResponse(SoftDeleteFields):
    name: str
    slug: str
    description: str | None
    website: str | None
    logo_url: str | None
    is_active: bool


class BrandFilters(BaseModel):
    is_active: bool | None = None
    search: str | None = None
