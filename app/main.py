# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Church Admin Console.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 3000
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import EXCEPTION_HANDLERS
from app.routers import (
    blog,
    directory,
    donations,
    events,
    gallery,
    health,
    members,
    prayers,
    projects,
    resources,
    sermons,
    testimonies,
    uploads,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/api/v1/admin"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    API clients are request-scoped, so there is nothing to open or close
    here beyond logging.
    """
    logger.info(f"Starting Church Admin Console in {settings.ENVIRONMENT} mode")
    logger.info(f"REST backend: {settings.API_BASE_URL} (timeout {settings.API_TIMEOUT_SECONDS}s)")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Church Admin Console")


# Create FastAPI application
app = FastAPI(
    title="Church Admin Console",
    description="""
## Church Admin Console

Administration for the church website: events, sermons, blog, donations,
members, prayer requests, gallery, projects, resources and testimonies.

### Sessions

1. **Sign in** - `POST /auth/login` with email and password sets a session cookie
2. **Work** - every admin endpoint forwards that session to the REST backend
3. **Expiry** - when the backend answers 401 the session is signed out and
   the browser is redirected to `/auth/login`
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Sign-in, sign-out and current user"},
        {"name": "Events", "description": "Church events"},
        {"name": "Sermons", "description": "Sermons, series and search"},
        {"name": "Blog", "description": "Blog posts and slugs"},
        {"name": "Donations", "description": "Donations and giving statistics"},
        {"name": "Members", "description": "Membership records"},
        {"name": "Prayers", "description": "Prayer requests"},
        {"name": "Gallery", "description": "Photo albums and videos"},
        {"name": "Projects", "description": "Church projects and fundraising"},
        {"name": "Resources", "description": "Books, brochures, songs and FAQs"},
        {"name": "Testimonies", "description": "Testimony moderation"},
        {"name": "Uploads", "description": "Image uploads"},
        {"name": "Directory", "description": "Member directory, volunteers and messages"},
        {"name": "Health", "description": "API health and liveness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints (mounted at the root so /auth/login is LOGIN_PATH)
app.include_router(auth_routes.router)

# Health check endpoints
app.include_router(health.router, tags=["Health"])

# Admin areas, each backed by a REST service
ADMIN_ROUTERS = [
    (events.router, "/events", "Events"),
    (sermons.router, "/sermons", "Sermons"),
    (blog.router, "/blog/posts", "Blog"),
    (donations.router, "/donations", "Donations"),
    (members.router, "/members", "Members"),
    (prayers.router, "/prayers", "Prayers"),
    (gallery.router, "/gallery", "Gallery"),
    (projects.router, "/projects", "Projects"),
    (resources.router, "/resources", "Resources"),
    (testimonies.router, "/testimonies", "Testimonies"),
    (uploads.router, "/uploads", "Uploads"),
    (directory.router, "/directory", "Directory"),
]

for router, prefix, tag in ADMIN_ROUTERS:
    app.include_router(router, prefix=f"{ADMIN_PREFIX}{prefix}", tags=[tag])


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Church Admin Console",
        "version": health.VERSION,
        "docs": "/docs",
        "health": "/health",
        "login": settings.LOGIN_PATH,
    }
