# =============================================================================
# core/models/events.py - Event Schemas
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import AdminRecord


class Event(AdminRecord):
    """
    A church event (service, conference, outreach...).

    Example:
        {
            "_id": "65f0c2...",
            "title": "Easter Service",
            "event_type": "service",
            "start_date": "2024-03-31T09:00:00Z",
            "end_date": "2024-03-31T12:00:00Z",
            "location": "Main hall",
            "max_attendees": 300,
            "images": ["https://.../cover.jpg"]
        }
    """

    title: str
    description: str | None = None
    event_type: str
    start_date: datetime
    end_date: datetime
    location: str | None = None
    max_attendees: int | None = Field(default=None, ge=0)
    images: list[str] = Field(default_factory=list)
