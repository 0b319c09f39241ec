"""WMS API — Bin schemas: bin types, bins, bin contents, bin movements."""
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from wms.schemas.common import AuditFields


# ── Bin types ───────────────────────────────────────────────────────────────

class BinTypeCreate(BaseModel):
    type_name: str = Field(min_length=1, max_length=255)
    type_code: str = Field(min_length=1, max_length=50)
    description: str | None = None
    default_capacity: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_stackable: bool = True
    stackable_height: int | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str = "CM"
    material: str | None = None
    color: str | None = None
    hazmat_approved: bool = False
    temperature_controlled: bool = False
    is_active: bool = True


class BinTypeUpdate(BaseModel):
    type_name: str | None = Field(default=None, min_length=1, max_length=255)
    type_code: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = None
    default_capacity: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_stackable: bool | None = None
    stackable_height: int | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str | None = None
    material: str | None = None
    color: str | None = None
    hazmat_approved: bool | None = None
    temperature_controlled: bool | None = None
    is_active: bool | None = None


class BinTypeResponse(AuditFields):
    type_name: str
    type_code: str
    description: str | None
    default_capacity: float | None
    weight_capacity: float | None
    is_stackable: bool
    stackable_height: int | None
    length: float | None
    width: float | None
    height: float | None
    dimension_unit: str | None
    material: str | None
    color: str | None
    hazmat_approved: bool
    temperature_controlled: bool
    is_active: bool


class BinTypeFilters(BaseModel):
    is_active: bool | None = None


# ── Bins ────────────────────────────────────────────────────────────────────

class BinCreate(BaseModel):
    location_id: UUID | None = None
    bin_type_id: UUID | None = None
    bin_code: str = Field(min_length=1, max_length=100)
    bin_name: str | None = None
    description: str | None = None
    capacity: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_active: bool = True
    status: str = "available"
    bin_priority: int = Field(default=5, ge=1, le=10)
    accessibility: str = "normal"
    temperature_zone: str = "ambient"
    hazmat_approved: bool = False
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str = "meters"
    position_x: Decimal | None = None
    position_y: Decimal | None = None
    position_z: Decimal | None = None
    barcode: str | None = None
    rfid_tag: str | None = None
    qr_code: str | None = None
    custom_attributes: dict[str, Any] | None = None
    lc_full_code: str | None = None


class BinUpdate(BaseModel):
    location_id: UUID | None = None
    bin_type_id: UUID | None = None
    bin_code: str | None = Field(default=None, min_length=1, max_length=100)
    bin_name: str | None = None
    description: str | None = None
    capacity: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_active: bool | None = None
    status: str | None = None
    bin_priority: int | None = Field(default=None, ge=1, le=10)
    accessibility: str | None = None
    temperature_zone: str | None = None
    hazmat_approved: bool | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str | None = None
    position_x: Decimal | None = None
    position_y: Decimal | None = None
    position_z: Decimal | None = None
    barcode: str | None = None
    rfid_tag: str | None = None
    qr_code: str | None = None
    custom_attributes: dict[str, Any] | None = None
    lc_full_code: str | None = None


class BinResponse(AuditFields):
    location_id: UUID | None
    bin_type_id: UUID | None
    bin_code: str
    bin_name: str | None
    description: str | None
    capacity: float | None
    weight_capacity: float | None
    is_active: bool
    status: str
    bin_priority: int
    accessibility: str
    temperature_zone: str
    hazmat_approved: bool
    length: float | None
    width: float | None
    height: float | None
    dimension_unit: str | None
    position_x: float | None
    position_y: float | None
    position_z: float | None
    barcode: str | None
    rfid_tag: str | None
    qr_code: str | None
    custom_attributes: dict[str, Any] | None
    lc_full_code: str | None


class BinFilters(BaseModel):
    location_id: UUID | None = None
    bin_type_id: UUID | None = None
    is_active: bool | None = None


# ── Bin contents ────────────────────────────────────────────────────────────

class BinContentCreate(BaseModel):
    bin_id: UUID
    product_id: UUID
    batch_number: str | None = None
    serial_number: str | None = None
    quantity: Decimal = Field(default=Decimal("0"), ge=0)
    uom: str | None = None
    min_quantity: Decimal | None = None
    max_quantity: Decimal | None = None
    storage_condition: str = "normal"
    putaway_date: datetime | None = None
    last_accessed: datetime | None = None
    expiration_date: datetime | None = None
    quality_status: str = "approved"
    inspection_required: bool = False
    is_locked: bool = False
    lock_reason: str | None = None


class BinContentUpdate(BaseModel):
    bin_id: UUID | None = None
    product_id: UUID | None = None
    batch_number: str | None = None
    serial_number: str | None = None
    quantity: Decimal | None = Field(default=None, ge=0)
    uom: str | None = None
    min_quantity: Decimal | None = None
    max_quantity: Decimal | None = None
    storage_condition: str | None = None
    putaway_date: datetime | None = None
    last_accessed: datetime | None = None
    expiration_date: datetime | None = None
    quality_status: str | None = None
    inspection_required: bool | None = None
    is_locked: bool | None = None
    locked_by: UUID | None = None
    locked_at: datetime | None = None
    lock_reason: str | None = None


class BinContentResponse(AuditFields):
    bin_id: UUID
    product_id: UUID
    batch_number: str | None
    serial_number: str | None
    quantity: float
    uom: str | None
    min_quantity: float | None
    max_quantity: float | None
    storage_condition: str
    putaway_date: datetime | None
    last_accessed: datetime | None
    expiration_date: datetime | None
    quality_status: str
    inspection_required: bool
    is_locked: bool
    locked_by: UUID | None
    locked_at: datetime | None
    lock_reason: str | None


class BinContentFilters(BaseModel):
    bin_id: UUID | None = None
    product_id: UUID | None = None
    batch_number: str | None = None
    quality_status: str | None = None
    is_locked: bool | None = None


# ── Bin movements ───────────────────────────────────────────────────────────

class BinMovementCreate(BaseModel):
    source_bin_id: UUID | None = None
    destination_bin_id: UUID | None = None
    product_id: UUID | None = None
    quantity: Decimal = Field(default=Decimal("1"), gt=0)
    uom: str | None = None
    movement_type: str | None = None
    reason: str | None = None
    reference_document: str | None = None
    reference_number: str | None = None
    movement_date: datetime | None = None
    performed_by: UUID | None = None
    batch_number: str | None = None
    serial_number: str | None = None
    status: str | None = None
    priority: str = "normal"
    equipment_used: str | None = None
    labor_hours: Decimal | None = None
    movement_cost: Decimal | None = None
    notes: str | None = None


class BinMovementUpdate(BaseModel):
    source_bin_id: UUID | None = None
    destination_bin_id: UUID | None = None
    product_id: UUID | None = None
    quantity: Decimal | None = Field(default=None, gt=0)
    uom: str | None = None
    movement_type: str | None = None
    reason: str | None = None
    reference_document: str | None = None
    reference_number: str | None = None
    movement_date: datetime | None = None
    performed_by: UUID | None = None
    batch_number: str | None = None
    serial_number: str | None = None
    status: str | None = None
    priority: str | None = None
    equipment_used: str | None = None
    labor_hours: Decimal | None = None
    movement_cost: Decimal | None = None
    notes: str | None = None


class BinMovementResponse(AuditFields):
    source_bin_id: UUID | None
    destination_bin_id: UUID | None
    product_id: UUID | None
    quantity: float
    uom: str | None
    movement_type: str
    reason: str | None
    reference_document: str | None
    reference_number: str | None
    movement_date: datetime | None
    performed_by: UUID | None
    batch_number: str | None
    serial_number: str | None
    status: str
    priority: str
    equipment_used: str | None
    labor_hours: float | None
    movement_cost: float | None
    notes: str | None


class BinMovementFilters(BaseModel):
    source_bin_id: UUID | None = None
    destination_bin_id: UUID | None = None
    product_id: UUID | None = None
    movement_type: str | None = None
    status: str | None = None
