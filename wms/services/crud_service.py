"""WMS API — CRUDService: list/get/create/update/delete/restore with audit stamping."""
import logging
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.db.base import utcnow

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Business rule violation, mapped to an HTTP status by the API layer."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordConflictError(ServiceError):
    status_code = 409


class InvalidOperationError(ServiceError):
    status_code = 400


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CRUDService:
    """Generic persistence for one model.

    Filters are equality matches on columns; the special ``search`` key is a
    case-insensitive substring match OR-ed across ``search_columns``.
    Soft-deletable models are hidden once ``deleted_at`` is set.
    """

    def __init__(
        self,
        model: type,
        *,
        order_by: ColumnElement | tuple[ColumnElement, ...] | None = None,
        soft_delete: bool = False,
        search_columns: tuple[str, ...] = (),
        column_aliases: dict[str, str] | None = None,
        unique_fields: tuple[str, ...] = (),
        unique_together: tuple[tuple[str, ...], ...] = (),
    ):
        self.model = model
        if order_by is None:
            order_by = model.created_at.desc()
        self.order_by = order_by if isinstance(order_by, tuple) else (order_by,)
        self.soft_delete = soft_delete
        self.search_columns = search_columns
        # query param name -> column name, e.g. status -> approval_status
        self.column_aliases = column_aliases or {}
        self.unique_fields = unique_fields
        # column groups whose combined values must be unique, e.g. (user_id, role_id)
        self.unique_together = unique_together

    # ── Queries ─────────────────────────────────────────────────────────────

    def _base_query(self, include_deleted: bool = False):
        stmt = select(self.model)
        if self.soft_delete and not include_deleted:
            stmt = stmt.where(self.model.deleted_at.is_(None))
        return stmt

    def _apply_filters(self, stmt, filters: dict[str, Any]):
        for key, value in filters.items():
            if value is None:
                continue
            if key == "search":
                if self.search_columns and value != "":
                    pattern = f"%{escape_like(value)}%"
                    stmt = stmt.where(
                        or_(*(getattr(self.model, col).ilike(pattern, escape="\\") for col in self.search_columns))
                    )
                continue
            column = getattr(self.model, self.column_aliases.get(key, key))
            stmt = stmt.where(column == value)
        return stmt

    async def list_records(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[Any], int]:
        """Return one page of rows and the total number of matching rows."""
        stmt = self._apply_filters(self._base_query(), filters or {})
        total = await db.scalar(select(func.count()).select_from(stmt.subquery()))
        result = await db.execute(stmt.order_by(*self.order_by).limit(limit).offset(offset))
        return list(result.scalars().all()), total or 0

    async def get(self, db: AsyncSession, id: UUID, include_deleted: bool = False) -> Any | None:
        result = await db.execute(self._base_query(include_deleted).where(self.model.id == id))
        return result.scalar_one_or_none()

    # ── Hooks ───────────────────────────────────────────────────────────────

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def prepare_update(self, db: AsyncSession, obj: Any, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def check_delete(self, db: AsyncSession, obj: Any, actor_id: UUID | None) -> None:
        return None

    def null_required_fields(self, data: dict[str, Any]) -> list[str]:
        """Keys of ``data`` set to None whose columns are NOT NULL."""
        columns = self.model.__table__.columns
        return [
            key for key, value in data.items()
            if value is None and key in columns and not columns[key].nullable
        ]

    async def _check_unique(self, db: AsyncSession, data: dict[str, Any], current: Any | None = None) -> None:
        # Soft-deleted rows still hold their unique values.
        exclude_id = current.id if current is not None else None
        for field in self.unique_fields:
            value = data.get(field)
            if value is None:
                continue
            stmt = select(self.model.id).where(getattr(self.model, field) == value)
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            if await db.scalar(stmt.limit(1)) is not None:
                raise RecordConflictError(f"{field} '{value}' already exists")

        for fields in self.unique_together:
            if current is not None and not any(field in data for field in fields):
                continue
            # an update may change one half of the pair; the other comes from the row
            values = {f: data[f] if f in data else getattr(current, f, None) for f in fields}
            if any(value is None for value in values.values()):
                continue
            stmt = select(self.model.id).where(*(getattr(self.model, f) == v for f, v in values.items()))
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            if await db.scalar(stmt.limit(1)) is not None:
                raise RecordConflictError(f"{' and '.join(fields)} combination already exists")

    # ── Writes ──────────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, data: dict[str, Any], actor_id: UUID | None = None) -> Any:
        data = await self.prepare_create(db, dict(data))
        await self._check_unique(db, data)
        obj = self.model(**data, created_by=actor_id, updated_by=actor_id)
        db.add(obj)
        await db.flush()
        await db.refresh(obj)
        logger.info("Created %s %s", self.model.__tablename__, obj.id)
        return obj

    async def update(self, db: AsyncSession, obj: Any, data: dict[str, Any], actor_id: UUID | None = None) -> Any:
        data = await self.prepare_update(db, obj, dict(data))
        await self._check_unique(db, data, current=obj)
        for key, value in data.items():
            setattr(obj, key, value)
        obj.updated_by = actor_id
        obj.updated_at = utcnow()
        await db.flush()
        await db.refresh(obj)
        return obj

    async def delete(self, db: AsyncSession, obj: Any, actor_id: UUID | None = None) -> None:
        await self.check_delete(db, obj, actor_id)
        if self.soft_delete:
            obj.deleted_at = utcnow()
            obj.deleted_by = actor_id
            obj.updated_by = actor_id
        else:
            await db.delete(obj)
        await db.flush()
        logger.info(
            "%s %s %s",
            "Soft-deleted" if self.soft_delete else "Deleted",
            self.model.__tablename__,
            obj.id,
        )

    async def restore(self, db: AsyncSession, obj: Any, actor_id: UUID | None = None) -> Any:
        obj.deleted_at = None
        obj.deleted_by = None
        obj.updated_by = actor_id
        obj.updated_at = utcnow()
        await db.flush()
        await db.refresh(obj)
        return obj
