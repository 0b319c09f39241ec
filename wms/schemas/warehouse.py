"""WMS API — Warehouse structure schemas: warehouses, zones, aisles, racks, levels, locations."""
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from wms.schemas.common import AuditFields


# ── Warehouses ──────────────────────────────────────────────────────────────

class WarehouseCreate(BaseModel):
    warehouse_name: str = Field(min_length=1, max_length=255)
    warehouse_code: str = Field(min_length=1, max_length=50)
    warehouse_type: str | None = None
    description: str | None = None
    address_line1: str | None = None
    city: str | None = None
    state_province: str | None = None
    country: str | None = None
    postal_code: str | None = None
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    total_area: Decimal | None = None
    area_unit: str = "SQM"
    storage_area: int | None = None
    climate_controlled: bool = False
    temperature_min: Decimal | None = None
    temperature_max: Decimal | None = None
    time_zone: str | None = None
    operating_hours: dict[str, Any] | None = None
    custom_attributes: dict[str, Any] | None = None
    is_active: bool = True
    status: str = "operational"


class WarehouseUpdate(BaseModel):
    warehouse_name: str | None = Field(default=None, min_length=1, max_length=255)
    warehouse_code: str | None = Field(default=None, min_length=1, max_length=50)
    warehouse_type: str | None = None
    description: str | None = None
    address_line1: str | None = None
    city: str | None = None
    state_province: str | None = None
    country: str | None = None
    postal_code: str | None = None
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    total_area: Decimal | None = None
    area_unit: str | None = None
    storage_area: int | None = None
    climate_controlled: bool | None = None
    temperature_min: Decimal | None = None
    temperature_max: Decimal | None = None
    time_zone: str | None = None
    operating_hours: dict[str, Any] | None = None
    custom_attributes: dict[str, Any] | None = None
    is_active: bool | None = None
    status: str | None = None


class WarehouseResponse(AuditFields):
    warehouse_name: str
    warehouse_code: str
    lc_warehouse_code: str | None
    lc_full_code: str | None
    warehouse_type: str | None
    description: str | None
    address_line1: str | None
    city: str | None
    state_province: str | None
    country: str | None
    postal_code: str | None
    contact_person: str | None
    email: str | None
    phone: str | None
    total_area: float | None
    area_unit: str | None
    storage_area: int | None
    climate_controlled: bool
    temperature_min: float | None
    temperature_max: float | None
    time_zone: str | None
    operating_hours: dict[str, Any] | None
    custom_attributes: dict[str, Any] | None
    is_active: bool
    status: str


class WarehouseFilters(BaseModel):
    is_active: bool | None = None
    status: str | None = None
    warehouse_type: str | None = None


class WarehouseStockLine(BaseModel):
    product_id: UUID
    quantity: float


# ── Zones ───────────────────────────────────────────────────────────────────

class ZoneCreate(BaseModel):
    warehouse_id: UUID
    zone_name: str = Field(min_length=1, max_length=255)
    zone_code: str = Field(min_length=1, max_length=50)
    zone_type: str | None = None
    description: str | None = None
    capacity: int | None = None
    temperature_controlled: bool = False
    is_active: bool = True
    status: str = "operational"


class ZoneUpdate(BaseModel):
    warehouse_id: UUID | None = None
    zone_name: str | None = Field(default=None, min_length=1, max_length=255)
    zone_code: str | None = Field(default=None, min_length=1, max_length=50)
    zone_type: str | None = None
    description: str | None = None
    capacity: int | None = None
    temperature_controlled: bool | None = None
    is_active: bool | None = None
    status: str | None = None


class ZoneResponse(AuditFields):
    warehouse_id: UUID
    zone_name: str
    zone_code: str
    zone_type: str | None
    description: str | None
    capacity: int | None
    temperature_controlled: bool
    is_active: bool
    status: str


class ZoneFilters(BaseModel):
    warehouse_id: UUID | None = None
    zone_type: str | None = None
    is_active: bool | None = None


# ── Aisles ──────────────────────────────────────────────────────────────────

class AisleCreate(BaseModel):
    zone_id: UUID
    aisle_name: str = Field(min_length=1, max_length=255)
    aisle_code: str = Field(min_length=1, max_length=50)
    description: str | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str | None = None
    capacity: int | None = None
    aisle_direction: str | None = None
    start_x: Decimal | None = None
    start_y: Decimal | None = None
    end_x: Decimal | None = None
    end_y: Decimal | None = None
    center_x: Decimal | None = None
    center_y: Decimal | None = None
    is_active: bool = True
    status: str = "operational"


class AisleUpdate(BaseModel):
    zone_id: UUID | None = None
    aisle_name: str | None = Field(default=None, min_length=1, max_length=255)
    aisle_code: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str | None = None
    capacity: int | None = None
    aisle_direction: str | None = None
    start_x: Decimal | None = None
    start_y: Decimal | None = None
    end_x: Decimal | None = None
    end_y: Decimal | None = None
    center_x: Decimal | None = None
    center_y: Decimal | None = None
    is_active: bool | None = None
    status: str | None = None


class AisleResponse(AuditFields):
    zone_id: UUID
    aisle_name: str
    aisle_code: str
    description: str | None
    length: float | None
    width: float | None
    height: float | None
    dimension_unit: str | None
    capacity: int | None
    aisle_direction: str | None
    start_x: float | None
    start_y: float | None
    end_x: float | None
    end_y: float | None
    center_x: float | None
    center_y: float | None
    is_active: bool
    status: str


class AisleFilters(BaseModel):
    zone_id: UUID | None = None
    is_active: bool | None = None


# ── Racks ───────────────────────────────────────────────────────────────────

class RackCreate(BaseModel):
    aisle_id: UUID
    rack_name: str = Field(min_length=1, max_length=255)
    rack_code: str = Field(min_length=1, max_length=50)
    rack_type: str = "standard"
    description: str | None = None
    position_in_aisle: int | None = None
    side: str | None = None
    levels_count: int = Field(default=1, ge=1)
    max_weight: Decimal | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str = "meters"
    is_active: bool = True
    status: str = "active"
    barcode: str | None = None
    lc_warehouse_code: str | None = None
    lc_zone_code: str | None = None
    lc_aisle_code: str | None = None
    lc_rack_code: str | None = None
    lc_full_code: str | None = None


class RackUpdate(BaseModel):
    aisle_id: UUID | None = None
    rack_name: str | None = Field(default=None, min_length=1, max_length=255)
    rack_code: str | None = Field(default=None, min_length=1, max_length=50)
    rack_type: str | None = None
    description: str | None = None
    position_in_aisle: int | None = None
    side: str | None = None
    levels_count: int | None = Field(default=None, ge=1)
    max_weight: Decimal | None = None
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    dimension_unit: str | None = None
    is_active: bool | None = None
    status: str | None = None
    barcode: str | None = None
    lc_warehouse_code: str | None = None
    lc_zone_code: str | None = None
    lc_aisle_code: str | None = None
    lc_rack_code: str | None = None
    lc_full_code: str | None = None


class RackResponse(AuditFields):
    aisle_id: UUID
    rack_name: str
    rack_code: str
    rack_type: str
    description: str | None
    position_in_aisle: int | None
    side: str | None
    levels_count: int
    max_weight: float | None
    length: float | None
    width: float | None
    height: float | None
    dimension_unit: str | None
    is_active: bool
    status: str
    barcode: str | None
    lc_warehouse_code: str | None
    lc_zone_code: str | None
    lc_aisle_code: str | None
    lc_rack_code: str | None
    lc_full_code: str | None


class RackFilters(BaseModel):
    aisle_id: UUID | None = None
    rack_type: str | None = None
    is_active: bool | None = None


# ── Levels ──────────────────────────────────────────────────────────────────

class LevelCreate(BaseModel):
    rack_id: UUID
    level_number: int = Field(default=1, ge=0)
    level_name: str | None = None
    level_code: str | None = None
    description: str | None = None
    height_from_floor: Decimal = Decimal("0")
    level_height: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_active: bool = True
    status: str = "active"
    accessibility: str = "normal"
    lc_warehouse_code: str | None = None
    lc_zone_code: str | None = None
    lc_aisle_code: str | None = None
    lc_rack_code: str | None = None
    lc_level_code: str | None = None
    lc_full_code: str | None = None


class LevelUpdate(BaseModel):
    rack_id: UUID | None = None
    level_number: int | None = Field(default=None, ge=0)
    level_name: str | None = None
    level_code: str | None = None
    description: str | None = None
    height_from_floor: Decimal | None = None
    level_height: Decimal | None = None
    weight_capacity: Decimal | None = None
    is_active: bool | None = None
    status: str | None = None
    accessibility: str | None = None
    lc_warehouse_code: str | None = None
    lc_zone_code: str | None = None
    lc_aisle_code: str | None = None
    lc_rack_code: str | None = None
    lc_level_code: str | None = None
    lc_full_code: str | None = None


class LevelResponse(AuditFields):
    rack_id: UUID
    level_number: int
    level_name: str | None
    level_code: str | None
    description: str | None
    height_from_floor: float | None
    level_height: float | None
    weight_capacity: float | None
    is_active: bool
    status: str
    accessibility: str
    lc_warehouse_code: str | None
    lc_zone_code: str | None
    lc_aisle_code: str | None
    lc_rack_code: str | None
    lc_level_code: str | None
    lc_full_code: str | None


class LevelFilters(BaseModel):
    rack_id: UUID | None = None
    is_active: bool | None = None


# ── Locations ───────────────────────────────────────────────────────────────

class LocationCreate(BaseModel):
    warehouse_id: UUID
    level_id: UUID | None = None
    location_name: str = Field(min_length=1, max_length=255)
    location_code: str = Field(min_length=1, max_length=100)
    location_type: str = "storage"
    location_priority: int = Field(default=5, ge=1, le=10)
    is_active: bool = True
    status: str = "available"


class LocationUpdate(BaseModel):
    warehouse_id: UUID | None = None
    level_id: UUID | None = None
    location_name: str | None = Field(default=None, min_length=1, max_length=255)
    location_code: str | None = Field(default=None, min_length=1, max_length=100)
    location_type: str | None = None
    location_priority: int | None = Field(default=None, ge=1, le=10)
    is_active: bool | None = None
    status: str | None = None


class LocationResponse(AuditFields):
    warehouse_id: UUID
    level_id: UUID | None
    location_name: str
    location_code: str
    location_type: str
    location_priority: int
    is_active: bool
    status: str


class LocationFilters(BaseModel):
    warehouse_id: UUID | None = None
    level_id: UUID | None = None
    location_type: str | None = None
    is_active: bool | None = None
