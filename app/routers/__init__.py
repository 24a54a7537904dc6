# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by admin area:
# - health.py: Health check endpoints
# - events.py, sermons.py, blog.py: Content management
# - donations.py, members.py, prayers.py: Congregation records
# - gallery.py, projects.py, resources.py, testimonies.py: Public site content
# - uploads.py: Image uploads
# - directory.py: Supabase-backed member directory
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import events
from . import sermons
from . import blog
from . import donations
from . import members
from . import prayers
from . import gallery
from . import projects
from . import resources
from . import testimonies
from . import uploads
from . import directory

__all__ = [
    "health",
    "events",
    "sermons",
    "blog",
    "donations",
    "members",
    "prayers",
    "gallery",
    "projects",
    "resources",
    "testimonies",
    "uploads",
    "directory",
]
