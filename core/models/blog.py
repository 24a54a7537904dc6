# =============================================================================
# core/models/blog.py - Blog Post Schemas
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from lib.utils import split_tags

from .base import AdminRecord


class BlogPostStatus(str, Enum):
    """Publishing state of a blog post."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class BlogPost(AdminRecord):
    """A blog article."""

    title: str
    slug: str
    content: str
    excerpt: str | None = None
    featured_image: str | None = None
    status: BlogPostStatus = BlogPostStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    author_id: str | None = None
    published_at: datetime | None = None
    views: int = 0
    reading_time: int = 0

    @field_validator("tags", mode="before")
    @classmethod
    def _parse_tags(cls, value):
        return split_tags(value)
