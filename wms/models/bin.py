"""WMS API — Bin, BinType, BinContent and BinMovement models."""
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wms.db.base import AuditMixin, Base, utcnow


class BinType(AuditMixin, Base):
    """Catalogue of bin kinds (tote, pallet, shelf bin, ...)."""

    __tablename__ = "bin_types"

    type_name: Mapped[str] = mapped_column(String(255), nullable=False)
    type_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    default_capacity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    weight_capacity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    is_stackable: Mapped[bool] = mapped_column(Boolean, default=True)
    stackable_height: Mapped[int | None] = mapped_column(Integer, nullable=True)
    length: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    width: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    height: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    dimension_unit: Mapped[str] = mapped_column(String(10), default="CM")
    material: Mapped[str | None] = mapped_column(String(100), nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    hazmat_approved: Mapped[bool] = mapped_column(Boolean, default=False)
    temperature_controlled: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Bin(AuditMixin, Base):
    """Smallest physical storage unit."""

    __tablename__ = "bins"

    location_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True, index=True)
    bin_type_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("bin_types.id", ondelete="SET NULL"), nullable=True)
    bin_code: Mapped[str] = mapped_column(String(100), nullable=False)
    bin_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    capacity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    weight_capacity: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="available")
    bin_priority: Mapped[int] = mapped_column(Integer, default=5)
    accessibility: Mapped[str] = mapped_column(String(30), default="normal")
    temperature_zone: Mapped[str] = mapped_column(String(30), default="ambient")
    hazmat_approved: Mapped[bool] = mapped_column(Boolean, default=False)
    length: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    width: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    height: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    dimension_unit: Mapped[str] = mapped_column(String(10), default="meters")
    position_x: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    position_y: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    position_z: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    barcode: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rfid_tag: Mapped[str | None] = mapped_column(String(100), nullable=True)
    qr_code: Mapped[str | None] = mapped_column(String(255), nullable=True)
    custom_attributes: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    lc_full_code: Mapped[str | None] = mapped_column(String(255), nullable=True)


class BinContent(AuditMixin, Base):
    """Quantity of one product (batch/serial) held in a bin."""

    __tablename__ = "bin_contents"

    bin_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("bins.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("products.id", ondelete="RESTRICT"), index=True)
    batch_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=0)
    uom: Mapped[str | None] = mapped_column(String(20), nullable=True)
    min_quantity: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    max_quantity: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    storage_condition: Mapped[str] = mapped_column(String(30), default="normal")
    putaway_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    last_accessed: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expiration_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    quality_status: Mapped[str] = mapped_column(String(30), default="approved")
    inspection_required: Mapped[bool] = mapped_column(Boolean, default=False)
    is_locked: Mapped[bool] = mapped_column(Boolean, default=False)
    locked_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    locked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    lock_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)


class BinMovement(AuditMixin, Base):
    """Record of stock moved between bins."""

    __tablename__ = "bin_movements"

    source_bin_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("bins.id", ondelete="SET NULL"), nullable=True, index=True)
    destination_bin_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("bins.id", ondelete="SET NULL"), nullable=True, index=True)
    product_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=1)
    uom: Mapped[str | None] = mapped_column(String(20), nullable=True)
    movement_type: Mapped[str] = mapped_column(String(30), default="transfer")
    reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reference_document: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reference_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    movement_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    performed_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    batch_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(String(30), default="completed")
    priority: Mapped[str] = mapped_column(String(20), default="normal")
    equipment_used: Mapped[str | None] = mapped_column(String(100), nullable=True)
    labor_hours: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)
    movement_cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
