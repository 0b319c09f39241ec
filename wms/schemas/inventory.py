"""WMS API — Inventory schemas: stock records, movements, reservations, counts."""
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from wms.schemas.common import AuditFields, SoftDeleteFields


# ── Inventory ───────────────────────────────────────────────────────────────

class InventoryCreate(BaseModel):
    product_id: UUID
    location_id: UUID
    quantity: Decimal = Field(default=Decimal("0"), ge=0)
    uom: str | None = None
    min_stock_level: Decimal = Field(default=Decimal("0"), ge=0)
    max_stock_level: Decimal | None = Field(default=None, ge=0)
    reorder_point: Decimal = Field(default=Decimal("0"), ge=0)
    lot_number: str | None = None
    serial_number: str | None = None
    production_date: datetime | None = None
    expiry_date: datetime | None = None
    status: str = "available"
    quality_status: str = "approved"
    is_active: bool = True
    temperature_zone: str | None = None
    barcode: str | None = None
    rfid_tag: str | None = None
    audit_notes: str | None = None


class InventoryUpdate(BaseModel):
    product_id: UUID | None = None
    location_id: UUID | None = None
    quantity: Decimal | None = Field(default=None, ge=0)
    uom: str | None = None
    min_stock_level: Decimal | None = Field(default=None, ge=0)
    max_stock_level: Decimal | None = Field(default=None, ge=0)
    reorder_point: Decimal | None = Field(default=None, ge=0)
    lot_number: str | None = None
    serial_number: str | None = None
    production_date: datetime | None = None
    expiry_date: datetime | None = None
    last_movement_date: datetime | None = None
    status: str | None = None
    quality_status: str | None = None
    is_active: bool | None = None
    temperature_zone: str | None = None
    barcode: str | None = None
    rfid_tag: str | None = None
    audit_notes: str | None = None


class InventoryResponse(SoftDeleteFields):
    product_id: UUID
    location_id: UUID
    quantity: float
    uom: str | None
    min_stock_level: float
    max_stock_level: float | None
    reorder_point: float
    lot_number: str | None
    serial_number: str | None
    production_date: datetime | None
    expiry_date: datetime | None
    last_movement_date: datetime | None
    status: str
    quality_status: str
    is_active: bool
    temperature_zone: str | None
    barcode: str | None
    rfid_tag: str | None
    audit_notes: str | None
    # Filled in from active reservations after validation.
    quantity_reserved: float = 0.0

    @computed_field
    @property
    def quantity_on_hand(self) -> float:
        return self.quantity

    @computed_field
    @property
    def quantity_available(self) -> float:
        return max(self.quantity - self.quantity_reserved, 0.0)

    @computed_field
    @property
    def needs_reorder(self) -> bool:
        return self.quantity <= self.reorder_point


class InventoryFilters(BaseModel):
    location_id: UUID | None = None
    product_id: UUID | None = None
    status: str | None = None
    quality_status: str | None = None
    is_active: bool | None = None
    search: str | None = None


# ── Inventory movements ─────────────────────────────────────────────────────

class InventoryMovementCreate(BaseModel):
    inventory_id: UUID
    movement_type: str = Field(min_length=1, max_length=30)
    quantity: Decimal
    reference_type: str | None = None
    reference_id: str | None = None
    approval_status: str = "pending"
    movement_date: datetime | None = None
    notes: str | None = None


class InventoryMovementUpdate(BaseModel):
    movement_type: str | None = Field(default=None, min_length=1, max_length=30)
    quantity: Decimal | None = None
    reference_type: str | None = None
    reference_id: str | None = None
    approval_status: str | None = None
    movement_date: datetime | None = None
    notes: str | None = None


class InventoryMovementResponse(AuditFields):
    inventory_id: UUID
    movement_type: str
    quantity: float
    reference_type: str | None
    reference_id: str | None
    approval_status: str
    movement_date: datetime | None
    notes: str | None


class InventoryMovementFilters(BaseModel):
    inventory_id: UUID | None = None
    movement_type: str | None = None
    reference_type: str | None = None
    status: str | None = None


# ── Inventory reservations ──────────────────────────────────────────────────

class InventoryReservationCreate(BaseModel):
    product_id: UUID
    location_id: UUID | None = None
    inventory_id: UUID | None = None
    quantity: Decimal = Field(gt=0)
    status: str = "active"
    reference_type: str | None = None
    reference_id: str | None = None
    expires_at: datetime | None = None
    notes: str | None = None


class InventoryReservationUpdate(BaseModel):
    location_id: UUID | None = None
    inventory_id: UUID | None = None
    quantity: Decimal | None = Field(default=None, gt=0)
    status: str | None = None
    reference_type: str | None = None
    reference_id: str | None = None
    expires_at: datetime | None = None
    notes: str | None = None


class InventoryReservationResponse(AuditFields):
    product_id: UUID
    location_id: UUID | None
    inventory_id: UUID | None
    quantity: float
    status: str
    reference_type: str | None
    reference_id: str | None
    reserved_at: datetime | None
    expires_at: datetime | None
    notes: str | None


class InventoryReservationFilters(BaseModel):
    product_id: UUID | None = None
    location_id: UUID | None = None
    status: str | None = None


# ── Inventory counts ────────────────────────────────────────────────────────

class InventoryCountCreate(BaseModel):
    warehouse_id: UUID
    count_name: str = Field(min_length=1, max_length=255)
    count_type: str = "cycle"
    status: str = "planned"
    start_date: datetime | None = None
    end_date: datetime | None = None
    expected_completion: datetime | None = None
    team_leader: str | None = None
    count_method: str | None = None
    variance_threshold: Decimal | None = None
    priority: str = "normal"
    notes: str | None = None


class InventoryCountUpdate(BaseModel):
    warehouse_id: UUID | None = None
    count_name: str | None = Field(default=None, min_length=1, max_length=255)
    count_type: str | None = None
    status: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    expected_completion: datetime | None = None
    team_leader: str | None = None
    count_method: str | None = None
    variance_threshold: Decimal | None = None
    priority: str | None = None
    notes: str | None = None


class InventoryCountResponse(AuditFields):
    warehouse_id: UUID
    count_name: str
    count_type: str
    status: str
    start_date: datetime | None
    end_date: datetime | None
    expected_completion: datetime | None
    team_leader: str | None
    count_method: str | None
    variance_threshold: float | None
    priority: str
    notes: str | None


class InventoryCountFilters(BaseModel):
    warehouse_id: UUID | None = None
    status: str | None = None
    count_type: str | None = None


# ── Inventory count details ─────────────────────────────────────────────────

class InventoryCountDetailCreate(BaseModel):
    count_id: UUID
    inventory_id: UUID
    expected_quantity: Decimal = Field(default=Decimal("0"), ge=0)
    counted_quantity: Decimal | None = Field(default=None, ge=0)
    recount_quantity: Decimal | None = Field(default=None, ge=0)
    counted_by: UUID | None = None
    counted_at: datetime | None = None
    notes: str | None = None


class InventoryCountDetailUpdate(BaseModel):
    expected_quantity: Decimal | None = Field(default=None, ge=0)
    counted_quantity: Decimal | None = Field(default=None, ge=0)
    recount_quantity: Decimal | None = Field(default=None, ge=0)
    counted_by: UUID | None = None
    counted_at: datetime | None = None
    notes: str | None = None


class InventoryCountDetailResponse(AuditFields):
    count_id: UUID
    inventory_id: UUID
    expected_quantity: float
    counted_quantity: float | None
    recount_quantity: float | None
    counted_by: UUID | None
    counted_at: datetime | None
    notes: str | None

    @computed_field
    @property
    def variance(self) -> float | None:
        # uncounted lines have no variance yet
        if self.counted_quantity is None:
            return None
        return self.counted_quantity - self.expected_quantity

    @computed_field
    @property
    def is_discrepancy(self) -> bool:
        return self.variance is not None and self.variance != 0


class InventoryCountDetailFilters(BaseModel):
    count_id: UUID | None = None
    inventory_id: UUID | None = None
