"""WMS API — Product schemas."""
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from wms.schemas.common import SoftDeleteFields


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    sku: str = Field(min_length=1, max_length=100)
    barcode: str | None = None
    description: str | None = None
    short_description: str | None = Field(default=None, max_length=500)
    category_id: UUID | None = None
    family_id: UUID | None = None
    brand_id: UUID | None = None
    unit_id: UUID | None = None
    price: Decimal | None = Field(default=None, ge=0)
    cost: Decimal | None = Field(default=None, ge=0)
    stock_quantity: int = Field(default=0, ge=0)
    min_stock_level: int = Field(default=0, ge=0)
    weight: Decimal | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    status: str = "active"
    is_digital: bool = False
    track_stock: bool = True
    attributes: dict[str, Any] | None = None


class ProductUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    sku: str | None = Field(default=None, min_length=1, max_length=100)
    barcode: str | None = None
    description: str | None = None
    short_description: str | None = Field(default=None, max_length=500)
    category_id: UUID | None = None
    family_id: UUID | None = None
    brand_id: UUID | None = None
    unit_id: UUID | None = None
    price: Decimal | None = Field(default=None, ge=0)
    cost: Decimal | None = Field(default=None, ge=0)
    stock_quantity: int | None = Field(default=None, ge=0)
    min_stock_level: int | None = Field(default=None, ge=0)
    weight: Decimal | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    status: str | None = None
    is_digital: bool | None = None
    track_stock: bool | None = None
    attributes: dict[str, Any] | None = None


class ProductResponse(SoftDeleteFields):
    name: str
    sku: str
    barcode: str | None
    description: str | None
    short_description: str | None
    category_id: UUID | None
    family_id: UUID | None
    brand_id: UUID | None
    unit_id: UUID | None
    price: float | None
    cost: float | None
    stock_quantity: int
    min_stock_level: int
    weight: float | None
    length: float | None
    width: float | None
    height: float | None
    status: str
    is_digital: bool
    track_stock: bool
    attributes: dict[str, Any] | None


class ProductFilters(BaseModel):
    status: str | None = None
    category_id: UUID | None = None
    brand_id: UUID | None = None
    search: str | None = None
