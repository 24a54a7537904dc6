# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - UUID normalization
# - Base error class
# - Small formatting helpers shared by the admin screens
# =============================================================================

import re
from typing import Any, Iterable, Mapping
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        member_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        member_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


# =============================================================================
# Query Helpers
# =============================================================================

def compact_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Drop None values from a query mapping.

    Filters on the list screens are optional; unset ones must not be sent
    as the literal string "None".
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


# =============================================================================
# Formatting Helpers
# =============================================================================

_FILE_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_file_size(size: int | None) -> str:
    """
    Render a byte count for display.

    Uses base 1024 and at most two decimals, trailing zeros stripped.

    Example:
        format_file_size(0)        # "0 Bytes"
        format_file_size(1536)     # "1.5 KB"
        format_file_size(1048576)  # "1 MB"
    """
    if size is None:
        return "Unknown"
    if size == 0:
        return "0 Bytes"

    index = 0
    value = float(size)
    while value >= 1024 and index < len(_FILE_SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_FILE_SIZE_UNITS[index]}"


def slugify(title: str) -> str:
    """
    Build a URL slug from a title.

    Example:
        slugify("Sunday Service: Hope & Grace")  # "sunday-service-hope-grace"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    return slug.strip("-")


def split_tags(tags: str | Iterable[str] | None) -> list[str]:
    """Parse a comma-separated tag string (or list) into clean tags."""
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return [tag.strip() for tag in tags if tag and tag.strip()]


def join_tags(tags: str | Iterable[str] | None) -> str | None:
    """
    Join tags into the "a, b, c" form the blog and sermon endpoints expect.

    Strings are passed through untouched.
    """
    if tags is None or isinstance(tags, str):
        return tags
    return ", ".join(split_tags(tags))


# Status -> badge variant used by the list screens
_BADGE_VARIANTS: dict[str, str] = {
    # Generic publishing states
    "published": "default",
    "approved": "default",
    "active": "default",
    "completed": "default",
    "draft": "secondary",
    "pending": "secondary",
    "scheduled": "secondary",
    "planning": "secondary",
    "in_progress": "secondary",
    "archived": "outline",
    "inactive": "outline",
    "paused": "outline",
    "refunded": "outline",
    "failed": "destructive",
    "rejected": "destructive",
    "cancelled": "destructive",
    "suspended": "destructive",
}


def status_badge(status: str | None) -> str:
    """Map an entity status to a badge variant (unknown -> "outline")."""
    if not status:
        return "outline"
    return _BADGE_VARIANTS.get(status.lower(), "outline")
