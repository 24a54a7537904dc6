# =============================================================================
# core/models/prayers.py - Prayer Request Schemas
# =============================================================================

from .base import AdminRecord


class PrayerRequest(AdminRecord):
    """A prayer request; anonymous requests hide the requester name."""

    title: str
    description: str
    requester_name: str | None = None
    requester_id: str | None = None
    status: str = "pending"
    is_anonymous: bool = False
    is_public: bool = False
    prayer_count: int = 0
