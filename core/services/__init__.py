# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .base import ApiService
from .event_service import EventService
from .sermon_service import SermonService
from .blog_service import BlogPostService
from .donation_service import DonationService
from .member_service import MemberService
from .prayer_service import PrayerRequestService
from .gallery_service import GalleryService
from .project_service import ProjectService
from .resource_service import ResourceService
from .testimony_service import TestimonyService
from .upload_service import UploadService
from .directory_service import DirectoryService

__all__ = [
    "ApiService",
    "EventService",
    "SermonService",
    "BlogPostService",
    "DonationService",
    "MemberService",
    "PrayerRequestService",
    "GalleryService",
    "ProjectService",
    "ResourceService",
    "TestimonyService",
    "UploadService",
    "DirectoryService",
]
