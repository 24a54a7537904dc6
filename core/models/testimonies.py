# =============================================================================
# core/models/testimonies.py - Testimony Schemas
# =============================================================================

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .base import AdminRecord


class TestimonyStatus(str, Enum):
    """
    Moderation state of a testimony.

    Flow: pending -> approved | scheduled | rejected -> archived
    """
    PENDING = "pending"
    APPROVED = "approved"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"
    REJECTED = "rejected"


class Testimony(AdminRecord):
    title: str
    content: str
    author_name: str
    author_email: str | None = None
    author_location: str | None = None
    category: str = "other"
    status: TestimonyStatus = TestimonyStatus.PENDING
    scheduled_date: datetime | None = None
    images: list[str] = Field(default_factory=list)
    is_featured: bool = False
    likes: int = 0
    approved_by: str | None = None
    approved_at: datetime | None = None


class TestimonyStatusUpdate(BaseModel):
    """Body of PUT /testimonies/admin/{id}/status."""
    status: TestimonyStatus
    scheduled_date: datetime | None = None
    is_featured: bool | None = None


class TestimonyStats(BaseModel):
    by_status: list[dict] = Field(default_factory=list, alias="byStatus")
    total: int = 0
    featured: int = 0


class LikeResult(BaseModel):
    success: bool = True
    likes: int
