"""WMS API — UserService: user management, credential checks, role lookup."""
import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.security import get_password_hash, verify_password
from wms.db.base import utcnow
from wms.models.rbac import Role, User, UserRole
from wms.services.crud_service import CRUDService, InvalidOperationError

logger = logging.getLogger(__name__)


class UserService(CRUDService):
    """Users are soft-deleted; passwords are stored only as bcrypt hashes."""

    def __init__(self):
        super().__init__(
            User,
            order_by=User.created_at.desc(),
            soft_delete=True,
            search_columns=("username", "email"),
            unique_fields=("email", "username"),
        )

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        data["hashed_password"] = get_password_hash(data.pop("password"))
        return data

    async def prepare_update(self, db: AsyncSession, obj: User, data: dict[str, Any]) -> dict[str, Any]:
        password = data.pop("password", None)
        if password:
            data["hashed_password"] = get_password_hash(password)
        return data

    async def check_delete(self, db: AsyncSession, obj: User, actor_id: UUID | None) -> None:
        if actor_id is not None and obj.id == actor_id:
            raise InvalidOperationError("You cannot delete your own account")

    @staticmethod
    async def get_active_user(db: AsyncSession, user_id: UUID) -> User | None:
        result = await db.execute(
            select(User).where(
                User.id == user_id,
                User.is_active == True,  # noqa: E712
                User.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_role_slugs(db: AsyncSession, user_id: UUID) -> list[str]:
        """Slugs of the active roles assigned to a user."""
        result = await db.execute(
            select(Role.slug)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(
                UserRole.user_id == user_id,
                UserRole.deleted_at.is_(None),
                Role.deleted_at.is_(None),
                Role.is_active == True,  # noqa: E712
            )
            .order_by(Role.slug)
        )
        return list(result.scalars().all())

    @staticmethod
    async def authenticate(db: AsyncSession, email: str, password: str) -> User | None:
        result = await db.execute(
            select(User).where(User.email == email, User.deleted_at.is_(None))
        )
        user = result.scalar_one_or_none()
        if not user or not user.is_active:
            return None
        if not verify_password(password, user.hashed_password):
            logger.info("Failed login for %s", email)
            return None
        user.last_login_at = utcnow()
        await db.flush()
        return user
