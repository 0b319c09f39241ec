"""WMS API — Product family endpoints."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin, require_auth
from wms.models.catalogue import ProductFamily
from wms.schemas.catalogue import FamilyCreate, FamilyFilters, FamilyResponse, FamilyUpdate
from wms.services.crud_service import CRUDService

service = CRUDService(ProductFamily, order_by=ProductFamily.name.asc(), soft_delete=True)

router = build_crud_router(
    service,
    name="family",
    plural="families",
    create_schema=FamilyCreate,
    update_schema=FamilyUpdate,
    response_schema=FamilyResponse,
    filter_schema=FamilyFilters,
    read_dependency=require_auth,
    write_dependency=require_admin,
)
