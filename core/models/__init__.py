# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for the backend's records:
# - base.py: AdminRecord (the `_id` / createdAt / updatedAt fields) and to_body()
# - events.py, sermons.py, blog.py: Content
# - donations.py, members.py, prayers.py: Congregation records
# - gallery.py, projects.py, resources.py, testimonies.py: Public site content
# - uploads.py: Image upload results
#
# These models define the "contract" between the console and the backend.
# =============================================================================

from .base import AdminRecord, to_body

# -----------------------------------------------------------------------------
# Content
# -----------------------------------------------------------------------------
from .events import Event
from .sermons import Sermon, SermonSearch
from .blog import BlogPost, BlogPostStatus

# -----------------------------------------------------------------------------
# Congregation
# -----------------------------------------------------------------------------
from .donations import (
    AmountByType,
    Donation,
    DonationStats,
    DonationType,
    PaymentMethod,
    PaymentStatus,
    RecurrenceFrequency,
)
from .members import (
    EmergencyContact,
    Member,
    MemberRole,
    MemberStats,
    MembershipStatus,
    StatusCount,
)
from .prayers import PrayerRequest

# -----------------------------------------------------------------------------
# Public Site
# -----------------------------------------------------------------------------
from .gallery import GalleryAlbum, GalleryVideo
from .projects import (
    DonationExample,
    Project,
    ProjectCategory,
    ProjectCategoryStats,
    ProjectStats,
    ProjectStatus,
    ProjectStep,
)
from .resources import (
    Resource,
    ResourceCategory,
    ResourceCategoryStats,
    ResourceFileType,
    ResourceStats,
)
from .testimonies import (
    LikeResult,
    Testimony,
    TestimonyStats,
    TestimonyStatus,
    TestimonyStatusUpdate,
)
from .uploads import MultipleUploadResult, UploadResult

__all__ = [
    # Base
    "AdminRecord",
    "to_body",
    # Content
    "Event",
    "Sermon",
    "SermonSearch",
    "BlogPost",
    "BlogPostStatus",
    # Donations
    "AmountByType",
    "Donation",
    "DonationStats",
    "DonationType",
    "PaymentMethod",
    "PaymentStatus",
    "RecurrenceFrequency",
    # Members
    "EmergencyContact",
    "Member",
    "MemberRole",
    "MemberStats",
    "MembershipStatus",
    "StatusCount",
    "PrayerRequest",
    # Gallery
    "GalleryAlbum",
    "GalleryVideo",
    # Projects
    "DonationExample",
    "Project",
    "ProjectCategory",
    "ProjectCategoryStats",
    "ProjectStats",
    "ProjectStatus",
    "ProjectStep",
    # Resources
    "Resource",
    "ResourceCategory",
    "ResourceCategoryStats",
    "ResourceFileType",
    "ResourceStats",
    # Testimonies
    "LikeResult",
    "Testimony",
    "TestimonyStats",
    "TestimonyStatus",
    "TestimonyStatusUpdate",
    # Uploads
    "MultipleUploadResult",
    "UploadResult",
]
