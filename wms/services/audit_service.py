"""WMS API — AuditService: append-only trail of API writes."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from wms.models.rbac import AuditLog

logger = logging.getLogger(__name__)

# ── Audit action suffixes: "<resource>.<suffix>", e.g. "bin.created" ─────────
ACTION_CREATED = "created"
ACTION_UPDATED = "updated"
ACTION_DELETED = "deleted"
ACTION_RESTORED = "restored"
ACTION_USER_LOGIN = "user.login"


def audit_action(resource: str, suffix: str) -> str:
    return f"{resource.replace(' ', '_')}.{suffix}"


async def log_audit(
    db: AsyncSession,
    actor_id: UUID | None,
    action: str,
    target_type: str | None = None,
    target_id: UUID | None = None,
    payload: dict | None = None,
) -> None:
    """Write an audit log entry. Call this from services/endpoints after the main action."""
    try:
        entry = AuditLog(
            actor_id=actor_id,
            action=action,
            target_type=target_type,
            target_id=target_id,
            payload=payload,
        )
        db.add(entry)
        # Committed atomically with the main action by the caller.
    except Exception as exc:
        # Never allow audit failure to break the main request
        logger.error("Audit log write failed: %s", exc, exc_info=True)
