"""WMS API — API router aggregation."""
from fastapi import APIRouter

from wms.api.endpoints import (
    aisles,
    audit_logs,
    auth,
    bin_contents,
    bin_movements,
    bin_types,
    bins,
    brands,
    categories,
    families,
    inventory,
    inventory_count_details,
    inventory_counts,
    inventory_movements,
    inventory_reservations,
    levels,
    locations,
    products,
    racks,
    roles,
    units,
    users,
    warehouses,
    zones,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Warehouse structure
api_router.include_router(warehouses.router, prefix="/warehouses", tags=["warehouses"])
api_router.include_router(zones.router, prefix="/zones", tags=["zones"])
api_router.include_router(aisles.router, prefix="/aisles", tags=["aisles"])
api_router.include_router(racks.router, prefix="/racks", tags=["racks"])
api_router.include_router(levels.router, prefix="/levels", tags=["levels"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])

# Bins
api_router.include_router(bin_types.router, prefix="/bin-types", tags=["bins"])
api_router.include_router(bins.router, prefix="/bins", tags=["bins"])
api_router.include_router(bin_contents.router, prefix="/bin-contents", tags=["bins"])
api_router.include_router(bin_movements.router, prefix="/bin-movements", tags=["bins"])

# Inventory
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
api_router.include_router(inventory_movements.router, prefix="/inventory-movements", tags=["inventory"])
api_router.include_router(inventory_reservations.router, prefix="/inventory-reservations", tags=["inventory"])
api_router.include_router(inventory_counts.router, prefix="/inventory-counts", tags=["inventory"])
api_router.include_router(inventory_count_details.router, prefix="/inventory-count-details", tags=["inventory"])

# Products and catalogue
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(categories.router, prefix="/categories", tags=["products"])
api_router.include_router(families.router, prefix="/families", tags=["products"])
api_router.include_router(brands.router, prefix="/brands", tags=["products"])
api_router.include_router(units.router, prefix="/units", tags=["products"])

# Users and access control
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(roles.roles_router, prefix="/roles", tags=["rbac"])
api_router.include_router(roles.permissions_router, prefix="/permissions", tags=["rbac"])
api_router.include_router(roles.role_permissions_router, prefix="/role-permissions", tags=["rbac"])
api_router.include_router(roles.user_roles_router, prefix="/user-roles", tags=["rbac"])
api_router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit"])
