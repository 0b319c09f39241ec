"""WMS API — Router factory for the list/get/create/update/delete(/restore) routes every resource shares.

Each route parses its parameters, calls the resource's CRUDService, wraps the
result in ApiResponse, and turns database failures into a 500 carrying a
generic per-resource message ("Failed to retrieve bins", ...).
"""
import logging
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.deps import CurrentUser, get_db, require_auth
from wms.config import get_settings
from wms.schemas.common import ApiResponse, DeletedResponse, Meta
from wms.services.audit_service import (
    ACTION_CREATED,
    ACTION_DELETED,
    ACTION_RESTORED,
    ACTION_UPDATED,
    audit_action,
    log_audit,
)
from wms.services.crud_service import CRUDService, ServiceError

logger = logging.getLogger(__name__)
settings = get_settings()

Serializer = Callable[[AsyncSession, list[Any]], Awaitable[list[BaseModel]]]


def build_crud_router(
    service: CRUDService,
    *,
    name: str,
    plural: str,
    response_schema: type[BaseModel],
    filter_schema: type[BaseModel],
    create_schema: type[BaseModel] | None = None,
    update_schema: type[BaseModel] | None = None,
    read_dependency: Callable = require_auth,
    write_dependency: Callable = require_auth,
    serializer: Serializer | None = None,
) -> APIRouter:
    """Build the standard routes for one resource.

    ``name``/``plural`` are the human-readable nouns used in messages
    ("bin content" / "bin contents"). Without create/update schemas the
    resource is read-only. Soft-delete services also get ``POST /{id}/restore``.
    """
    router = APIRouter()
    label = name[:1].upper() + name[1:]
    target_type = name.replace(" ", "_")

    async def serialize(db: AsyncSession, items: list[Any]) -> list[BaseModel]:
        if serializer is not None:
            return await serializer(db, items)
        return [response_schema.model_validate(item) for item in items]

    async def get_or_404(db: AsyncSession, id: UUID, include_deleted: bool = False) -> Any:
        try:
            obj = await service.get(db, id, include_deleted=include_deleted)
        except SQLAlchemyError:
            logger.exception("Error fetching %s %s", name, id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to retrieve {name}",
            )
        if obj is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
        return obj

    async def write(db: AsyncSession, action: Callable[[], Awaitable[Any]], failure: str) -> Any:
        """Run a write and commit it, mapping service/database errors to HTTP errors."""
        try:
            result = await action()
            await db.commit()
            return result
        except ServiceError as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.message)
        except IntegrityError as exc:
            logger.warning("Integrity error writing %s: %s", name, exc.orig)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"{label} conflicts with an existing record",
            )
        except SQLAlchemyError:
            logger.exception("Database error: %s", failure)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure)

    @router.get("", response_model=ApiResponse[list[response_schema]])
    async def list_records(
        filters: filter_schema = Depends(),
        limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
        offset: int = Query(0, ge=0),
        db: AsyncSession = Depends(get_db),
        user: CurrentUser = Depends(read_dependency),
    ):
        try:
            items, total = await service.list_records(db, filters.model_dump(exclude_none=True), limit, offset)
            data = await serialize(db, items)
        except SQLAlchemyError:
            logger.exception("Error fetching %s", plural)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to retrieve {plural}",
            )
        return ApiResponse(data=data, meta=Meta(total=total, limit=limit, offset=offset))

    @router.get("/{id}", response_model=ApiResponse[response_schema])
    async def get_record(
        id: UUID,
        db: AsyncSession = Depends(get_db),
        user: CurrentUser = Depends(read_dependency),
    ):
        obj = await get_or_404(db, id)
        return ApiResponse(data=(await serialize(db, [obj]))[0])

    if create_schema is not None:

        @router.post("", response_model=ApiResponse[response_schema], status_code=status.HTTP_201_CREATED)
        async def create_record(
            body: create_schema,
            db: AsyncSession = Depends(get_db),
            user: CurrentUser = Depends(write_dependency),
        ):
            data = body.model_dump(exclude_none=True)

            async def action():
                obj = await service.create(db, data, actor_id=user.id)
                await log_audit(
                    db, user.id, audit_action(target_type, ACTION_CREATED),
                    target_type, obj.id, {"fields": sorted(data)},
                )
                return obj

            obj = await write(db, action, f"Failed to create {name}")
            return ApiResponse(data=(await serialize(db, [obj]))[0], message=f"{label} created successfully")

    if update_schema is not None:

        @router.put("/{id}", response_model=ApiResponse[response_schema])
        async def update_record(
            id: UUID,
            body: update_schema,
            db: AsyncSession = Depends(get_db),
            user: CurrentUser = Depends(write_dependency),
        ):
            data = body.model_dump(exclude_unset=True)
            required = service.null_required_fields(data)
            if required:
                raise RequestValidationError(
                    [{"loc": ("body", key), "msg": "Field cannot be null", "input": None} for key in required]
                )
            obj = await get_or_404(db, id)

            async def action():
                updated = await service.update(db, obj, data, actor_id=user.id)
                await log_audit(
                    db, user.id, audit_action(target_type, ACTION_UPDATED),
                    target_type, id, {"fields": sorted(data)},
                )
                return updated

            obj = await write(db, action, f"Failed to update {name}")
            return ApiResponse(data=(await serialize(db, [obj]))[0], message=f"{label} updated successfully")

    if create_schema is not None:

        @router.delete("/{id}", response_model=ApiResponse[DeletedResponse])
        async def delete_record(
            id: UUID,
            db: AsyncSession = Depends(get_db),
            user: CurrentUser = Depends(write_dependency),
        ):
            obj = await get_or_404(db, id)

            async def action():
                await service.delete(db, obj, actor_id=user.id)
                await log_audit(db, user.id, audit_action(target_type, ACTION_DELETED), target_type, id)

            await write(db, action, f"Failed to delete {name}")
            return ApiResponse(data=DeletedResponse(id=id), message=f"{label} deleted successfully")

        if service.soft_delete:

            @router.post("/{id}/restore", response_model=ApiResponse[response_schema])
            async def restore_record(
                id: UUID,
                db: AsyncSession = Depends(get_db),
                user: CurrentUser = Depends(write_dependency),
            ):
                obj = await get_or_404(db, id, include_deleted=True)

                async def action():
                    restored = await service.restore(db, obj, actor_id=user.id)
                    await log_audit(db, user.id, audit_action(target_type, ACTION_RESTORED), target_type, id)
                    return restored

                obj = await write(db, action, f"Failed to restore {name}")
                return ApiResponse(data=(await serialize(db, [obj]))[0], message=f"{label} restored successfully")

    return router
