"""WMS API — Catalogue services: slugged categories and brands."""
import re
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from wms.services.crud_service import CRUDService, InvalidOperationError

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase the name and join its alphanumeric runs with underscores."""
    return _NON_SLUG_CHARS.sub("_", name.lower()).strip("_")


class SluggedService(CRUDService):
    """Catalogue entries keyed by a unique slug, derived from the name when not given."""

    def __init__(self, model: type, **kwargs):
        super().__init__(model, soft_delete=True, unique_fields=("slug",), **kwargs)

    async def prepare_create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("slug"):
            data["slug"] = slugify(data["name"])
            if not data["slug"]:
                raise InvalidOperationError("Cannot derive a slug from the name; provide one")
        return data


class CategoryService(SluggedService):
    async def prepare_update(self, db: AsyncSession, obj: Any, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("parent_id") is not None and data["parent_id"] == obj.id:
            raise InvalidOperationError("A category cannot be its own parent")
        return data
