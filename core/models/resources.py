# =============================================================================
# core/models/resources.py - Downloadable Resource Schemas
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from lib.utils import format_file_size

from .base import AdminRecord


class ResourceCategory(str, Enum):
    BOOK = "book"
    BROCHURE = "brochure"
    SONG = "song"
    FAQ = "faq"
    OTHER = "other"


class ResourceFileType(str, Enum):
    PDF = "pdf"
    AUDIO = "audio"
    VIDEO = "video"
    TEXT = "text"
    IMAGE = "image"
    NONE = "none"


class Resource(AdminRecord):
    """A book, brochure, song or FAQ entry offered for download."""

    title: str
    description: str = ""
    category: ResourceCategory = ResourceCategory.OTHER
    file_type: ResourceFileType = ResourceFileType.NONE
    file_url: str | None = None
    file_size: int | None = Field(default=None, ge=0)
    pages: int | None = None
    duration: str | None = None
    artist: str | None = None
    download_count: int = 0
    is_published: bool = False
    published_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    order: int = 0

    @property
    def display_size(self) -> str:
        return format_file_size(self.file_size)


class ResourceCategoryStats(BaseModel):
    category: str = Field(..., alias="_id")
    count: int = 0
    published: int = 0
    total_downloads: int = Field(0, alias="totalDownloads")


class ResourceStats(BaseModel):
    by_category: list[ResourceCategoryStats] = Field(default_factory=list, alias="byCategory")
    total: int = 0
    total_downloads: int = Field(0, alias="totalDownloads")
