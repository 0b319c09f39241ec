"""WMS API — Product brand endpoints."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin, require_auth
from wms.models.catalogue import ProductBrand
from wms.schemas.catalogue import BrandCreate, BrandFilters, BrandResponse, BrandUpdate
from wms.services.catalogue_service import SluggedService

service = SluggedService(ProductBrand, order_by=ProductBrand.name.asc(), search_columns=("name", "slug"))

router = build_crud_router(
    service,
    name="brand",
    plural="brands",
    create_schema=BrandCreate,
    update_schema=BrandUpdate,
    response_schema=BrandResponse,
    filter_schema=BrandFilters,
    read_dependency=require_auth,
    write_dependency=require_admin,
)
