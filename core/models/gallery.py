# =============================================================================
# core/models/gallery.py - Gallery Schemas
# =============================================================================
# Albums group photos; videos link to an external player URL.
# The backend uses camelCase for a few media fields.
# =============================================================================

from pydantic import Field

from .base import AdminRecord


class GalleryAlbum(AdminRecord):
    title: str
    description: str = ""
    date: str | None = None
    photo_count: int = Field(0, alias="photoCount")
    cover_image: str | None = Field(None, alias="coverImage")
    category: str = "other"
    images: list[str] = Field(default_factory=list)
    is_published: bool = False
    order: int = 0


class GalleryVideo(AdminRecord):
    title: str
    description: str | None = None
    thumbnail: str | None = None
    video_url: str = Field(..., alias="videoUrl")
    duration: str | None = None
    views: int = 0
    category: str = "other"
    is_published: bool = False
    order: int = 0
