"""WMS API — Warehouse structure models: warehouse > zone > aisle > rack > level > location."""
import uuid
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from wms.db.base import AuditMixin, Base


class Warehouse(AuditMixin, Base):
    """Physical warehouse site."""

    __tablename__ = "warehouses"

    warehouse_name: Mapped[str] = mapped_column(String(255), nullable=False)
    warehouse_code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    lc_warehouse_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_full_code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    warehouse_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_line1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state_province: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    contact_person: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    total_area: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    area_unit: Mapped[str] = mapped_column(String(10), default="SQM")
    storage_area: Mapped[int | None] = mapped_column(Integer, nullable=True)
    climate_controlled: Mapped[bool] = mapped_column(Boolean, default=False)
    temperature_min: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    temperature_max: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    time_zone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    operating_hours: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    custom_attributes: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="operational")


class Zone(AuditMixin, Base):
    """Functional area of a warehouse (receiving, storage, picking, ...)."""

    __tablename__ = "zones"

    warehouse_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("warehouses.id", ondelete="CASCADE"), index=True)
    zone_name: Mapped[str] = mapped_column(String(255), nullable=False)
    zone_code: Mapped[str] = mapped_column(String(50), nullable=False)
    zone_type: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    temperature_controlled: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="operational")


class Aisle(AuditMixin, Base):
    __tablename__ = "aisles"

    zone_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("zones.id", ondelete="CASCADE"), index=True)
    aisle_name: Mapped[str] = mapped_column(String(255), nullable=False)
    aisle_code: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    length: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    width: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    height: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    dimension_unit: Mapped[str | None] = mapped_column(String(10), nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    aisle_direction: Mapped[str | None] = mapped_column(String(30), nullable=True)
    start_x: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    start_y: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    end_x: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    end_y: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    center_x: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    center_y: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="operational")


class Rack(AuditMixin, Base):
    __tablename__ = "racks"

    aisle_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("aisles.id", ondelete="CASCADE"), index=True)
    rack_name: Mapped[str] = mapped_column(String(255), nullable=False)
    rack_code: Mapped[str] = mapped_column(String(50), nullable=False)
    rack_type: Mapped[str] = mapped_column(String(30), default="standard")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    position_in_aisle: Mapped[int | None] = mapped_column(Integer, nullable=True)
    side: Mapped[str | None] = mapped_column(String(10), nullable=True)
    levels_count: Mapped[int] = mapped_column(Integer, default=1)
    max_weight: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    length: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    width: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    height: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    dimension_unit: Mapped[str] = mapped_column(String(10), default="meters")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="active")
    barcode: Mapped[str | None] = mapped_column(String(100), nullable=True)
    lc_warehouse_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_zone_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_aisle_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_rack_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_full_code: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Level(AuditMixin, Base):
    __tablename__ = "levels"

    rack_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("racks.id", ondelete="CASCADE"), index=True)
    level_number: Mapped[int] = mapped_column(Integer, default=1)
    level_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    height_from_floor: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=0)
    level_height: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    weight_capacity: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="active")
    accessibility: Mapped[str] = mapped_column(String(30), default="normal")
    lc_warehouse_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_zone_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_aisle_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_rack_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_level_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    lc_full_code: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Location(AuditMixin, Base):
    """Addressable storage position, optionally attached to a rack level."""

    __tablename__ = "locations"

    warehouse_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("warehouses.id", ondelete="CASCADE"), index=True)
    level_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("levels.id", ondelete="SET NULL"), nullable=True)
    location_name: Mapped[str] = mapped_column(String(255), nullable=False)
    location_code: Mapped[str] = mapped_column(String(100), nullable=False)
    location_type: Mapped[str] = mapped_column(String(30), default="storage")
    location_priority: Mapped[int] = mapped_column(Integer, default=5)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    status: Mapped[str] = mapped_column(String(30), default="available")
