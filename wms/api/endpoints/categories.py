"""WMS API — Product category endpoints."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin, require_auth
from wms.models.catalogue import ProductCategory
from wms.schemas.catalogue import CategoryCreate, CategoryFilters, CategoryResponse, CategoryUpdate
from wms.services.catalogue_service import CategoryService

service = CategoryService(
    ProductCategory,
    order_by=(ProductCategory.sort_order.asc(), ProductCategory.name.asc()),
    search_columns=("name", "slug"),
)

router = build_crud_router(
    service,
    name="category",
    plural="categories",
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
    response_schema=CategoryResponse,
    filter_schema=CategoryFilters,
    read_dependency=require_auth,
    write_dependency=require_admin,
)
