"""WMS API — Product endpoints. Reads for any user; writes need an admin role."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin, require_auth
from wms.models.product import Product
from wms.schemas.product import ProductCreate, ProductFilters, ProductResponse, ProductUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(
    Product,
    order_by=Product.created_at.desc(),
    soft_delete=True,
    search_columns=("name", "sku", "barcode"),
    unique_fields=("sku",),
)

router = build_crud_router(
    service,
    name="product",
    plural="products",
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    response_schema=ProductResponse,
    filter_schema=ProductFilters,
    read_dependency=require_auth,
    write_dependency=require_admin,
)
