# =============================================================================
# core/models/base.py - Shared Record Base
# =============================================================================
# Every record served by the REST backend carries a Mongo-style "_id" and
# camelCase timestamps. AdminRecord maps them to snake_case attributes and
# keeps any field it doesn't know about, so records pass through intact.
# =============================================================================

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class AdminRecord(BaseModel):
    """Base for backend records: `_id`, `createdAt`, `updatedAt`, extras kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = Field(default=None, alias="_id")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")


def to_body(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """
    Turn a model or mapping into a JSON request body.

    Models are dumped with their wire aliases; server-managed fields
    (`_id`, timestamps) and unset values are left out.
    """
    if isinstance(data, BaseModel):
        body = data.model_dump(by_alias=True, exclude_none=True, mode="json")
        for key in ("_id", "createdAt", "updatedAt"):
            body.pop(key, None)
        return body
    return dict(data)
