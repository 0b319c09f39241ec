"""WMS API — FastAPI dependencies (auth, DB, roles)."""
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.db.session import get_db
from wms.services.user_service import UserService

DbSession = Annotated[AsyncSession, Depends(get_db)]

# ── Role slugs ──────────────────────────────────────────────────────────────
# Use these string constants everywhere; no raw role strings in route files.
ROLE_SUPER_ADMIN = "super-admin"
ROLE_ADMIN = "admin"

ADMIN_ROLES = (ROLE_ADMIN, ROLE_SUPER_ADMIN)


class CurrentUser:
    """User identity from JWT, set on request.state by middleware and re-checked against the DB."""

    def __init__(
        self,
        id: UUID,
        email: str,
        username: str | None = None,
        roles: list[str] | None = None,
    ):
        self.id = id
        self.email = email
        self.username = username
        self.roles: list[str] = roles or []

    def has_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)


async def get_current_user(request: Request) -> CurrentUser | None:
    """Extract user from request.state (populated by auth middleware)."""
    return getattr(request.state, "user", None)


async def require_auth(request: Request, db: AsyncSession = Depends(get_db)) -> CurrentUser:
    """Require an authenticated, active, non-deleted user. Raise 401 otherwise."""
    user = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    db_user = await UserService.get_active_user(db, user.id)
    if not db_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )
    # Role assignments can change after the token was issued.
    user.roles = await UserService.get_role_slugs(db, db_user.id)
    user.email = db_user.email
    user.username = db_user.username
    return user


def require_role(*roles: str):
    """Dependency factory: require one of the given role slugs."""

    async def _check(user: CurrentUser = Depends(require_auth)) -> CurrentUser:
        if not user.has_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return _check


require_admin = require_role(*ADMIN_ROLES)
require_super_admin = require_role(ROLE_SUPER_ADMIN)
