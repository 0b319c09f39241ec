"""WMS API — SQLAlchemy models."""
from wms.models.bin import Bin, BinContent, BinMovement, BinType
from wms.models.catalogue import ProductBrand, ProductCategory, ProductFamily, UnitOfMeasure
from wms.models.inventory import (
    Inventory,
    InventoryCount,
    InventoryCountDetail,
    InventoryMovement,
    InventoryReservation,
)
from wms.models.product import Product
from wms.models.rbac import AuditLog, Permission, Role, RolePermission, User, UserRole
from wms.models.warehouse import Aisle, Level, Location, Rack, Warehouse, Zone

__all__ = [
    "Warehouse", "Zone", "Aisle", "Rack", "Level", "Location",
    "BinType", "Bin", "BinContent", "BinMovement",
    "Inventory", "InventoryMovement", "InventoryReservation", "InventoryCount", "InventoryCountDetail",
    "UnitOfMeasure", "ProductCategory", "ProductFamily", "ProductBrand", "Product",
    "User", "Role", "Permission", "RolePermission", "UserRole", "AuditLog",
]
