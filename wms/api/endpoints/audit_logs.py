"""WMS API — Audit log endpoints (read only, admin)."""
from wms.api.crud import build_crud_router
from wms.api.deps import require_admin
from wms.models.rbac import AuditLog
from wms.schemas.rbac import AuditLogFilters, AuditLogResponse
from wms.services.crud_service import CRUDService

router = build_crud_router(
    CRUDService(AuditLog, order_by=AuditLog.created_at.desc()),
    name="audit log",
    plural="audit logs",
    response_schema=AuditLogResponse,
    filter_schema=AuditLogFilters,
    read_dependency=require_admin,
)
