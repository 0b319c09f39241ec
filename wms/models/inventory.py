"""WMS API — Inventory, movements, reservations and cycle counts."""
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wms.db.base import AuditMixin, Base, SoftDeleteMixin, utcnow


class Inventory(AuditMixin, SoftDeleteMixin, Base):
    """Stock of one product (lot/serial) at one location."""

    __tablename__ = "inventory"

    product_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("products.id", ondelete="RESTRICT"), index=True)
    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="RESTRICT"), index=True)
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=0)
    uom: Mapped[str | None] = mapped_column(String(20), nullable=True)
    min_stock_level: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=0)
    max_stock_level: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    reorder_point: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=0)
    lot_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    serial_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    production_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expiry_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_movement_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(String(30), default="available")
    quality_status: Mapped[str] = mapped_column(String(30), default="approved")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    temperature_zone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    barcode: Mapped[str | None] = mapped_column(String(100), nullable=True)
    rfid_tag: Mapped[str | None] = mapped_column(String(100), nullable=True)
    audit_notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class InventoryMovement(AuditMixin, Base):
    __tablename__ = "inventory_movements"

    inventory_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("inventory.id", ondelete="CASCADE"), index=True)
    movement_type: Mapped[str] = mapped_column(String(30), nullable=False)  # receipt|issue|adjustment|transfer
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    reference_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reference_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    approval_status: Mapped[str] = mapped_column(String(30), default="pending")
    movement_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class InventoryReservation(AuditMixin, Base):
    __tablename__ = "inventory_reservations"

    product_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), index=True)
    location_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("locations.id", ondelete="SET NULL"), nullable=True)
    inventory_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("inventory.id", ondelete="CASCADE"), nullable=True, index=True)
    quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), nullable=False)
    status: Mapped[str] = mapped_column(String(30), default="active")  # active|pending|fulfilled|cancelled|expired
    reference_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reference_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    reserved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class InventoryCount(AuditMixin, Base):
    """Cycle count / stock-take header."""

    __tablename__ = "inventory_counts"

    warehouse_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("warehouses.id", ondelete="CASCADE"), index=True)
    count_name: Mapped[str] = mapped_column(String(255), nullable=False)
    count_type: Mapped[str] = mapped_column(String(30), default="cycle")
    status: Mapped[str] = mapped_column(String(30), default="planned")
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expected_completion: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    team_leader: Mapped[str | None] = mapped_column(String(255), nullable=True)
    count_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    variance_threshold: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)
    priority: Mapped[str] = mapped_column(String(20), default="normal")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class InventoryCountDetail(AuditMixin, Base):
    __tablename__ = "inventory_count_details"

    count_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("inventory_counts.id", ondelete="CASCADE"), index=True)
    inventory_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("inventory.id", ondelete="CASCADE"), index=True)
    expected_quantity: Mapped[Decimal] = mapped_column(Numeric(18, 4), default=0)
    counted_quantity: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    recount_quantity: Mapped[Decimal | None] = mapped_column(Numeric(18, 4), nullable=True)
    counted_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    counted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
