# =============================================================================
# core/models/sermons.py - Sermon Schemas
# =============================================================================

from datetime import date

from pydantic import BaseModel, Field, field_validator

from lib.utils import split_tags

from .base import AdminRecord


class Sermon(AdminRecord):
    """A recorded sermon with optional media links and transcript."""

    title: str
    description: str | None = None
    pastor_name: str
    sermon_date: date
    scripture_reference: str | None = None
    video_url: str | None = None
    audio_url: str | None = None
    transcript: str | None = None
    series: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_by: str | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, value):
        # The backend stores tags as a list but older records hold "a, b"
        return split_tags(value)


class SermonSearch(BaseModel):
    """Filters accepted by GET /sermons/search (wire names use camelCase)."""

    query: str | None = None
    pastor: str | None = None
    series: str | None = None
    tags: str | None = None
    start_date: date | None = Field(default=None, serialization_alias="startDate")
    end_date: date | None = Field(default=None, serialization_alias="endDate")

    def to_query(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
