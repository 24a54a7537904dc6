# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the admin console.
# Following the principle: "Errors should tell HOW to fix, not just WHAT failed."
#
# Session expiry is the one global policy: whatever endpoint hit the 401,
# the browser is sent to the login page with a full redirect.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse

from app.config import settings
from lib.api_client import (
    ApiDecodeError,
    ApiNetworkError,
    ApiRequestError,
    ApiTimeoutError,
    SessionExpiredError,
)
from lib.envelope import EnvelopeDecodeError
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)


class ChurchAdminException(Exception):
    """
    Base exception for the admin console web layer.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CHURCH_ADMIN_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Lookup Exceptions
# =============================================================================

class NotFoundError(ChurchAdminException):
    """Raised when a Supabase-backed record doesn't exist."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(
            message=f"{kind} not found: {record_id}",
            code="NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {kind.lower()} id is correct",
            details={"id": record_id}
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class AuthenticationError(ChurchAdminException):
    """Raised when sign-in fails."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Sign-in failed: {reason}",
            code="AUTHENTICATION_FAILED",
            status_code=401,
            suggestion="Check the email and password and try again",
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class InvalidFileTypeError(ChurchAdminException):
    """Raised when an uploaded file type is not allowed."""

    def __init__(self, filename: str, content_type: str | None, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename} ({content_type})",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(ChurchAdminException):
    """Raised when an uploaded file exceeds the size limit."""

    def __init__(self, filename: str, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {filename} is {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"filename": filename, "size_mb": size_mb, "max_mb": max_mb}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def church_admin_exception_handler(
    request: Request,
    exc: ChurchAdminException
) -> JSONResponse:
    """
    Convert ChurchAdminException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def session_expired_handler(
    request: Request,
    exc: SessionExpiredError
) -> RedirectResponse:
    """
    Send the browser to the login page and drop the session cookie.

    The session itself was already signed out by the API client.
    """
    logger.info(f"Session expired on {request.url.path}, redirecting to {exc.redirect_to}")
    response = RedirectResponse(url=exc.redirect_to, status_code=303)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


async def api_request_error_handler(
    request: Request,
    exc: ApiRequestError
) -> JSONResponse:
    """Relay a backend error with its original status and message."""
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc.payload, dict):
        content["upstream"] = exc.payload
    return JSONResponse(status_code=exc.status_code, content=content)


async def upstream_unavailable_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Timeouts answer 504; network and decode failures answer 502."""
    status_code = 504 if isinstance(exc, ApiTimeoutError) else 502
    content = {"detail": exc.message, "code": exc.code}
    if exc.suggestion:
        content["suggestion"] = exc.suggestion
    return JSONResponse(status_code=status_code, content=content)


async def supabase_error_handler(
    request: Request,
    exc: SupabaseClientError
) -> JSONResponse:
    logger.error(f"Supabase error on {request.url.path}: {exc}")
    content = {"detail": exc.message, "code": exc.code}
    if exc.suggestion:
        content["suggestion"] = exc.suggestion
    return JSONResponse(status_code=500, content=content)


# Exception type -> handler, registered by app.main
EXCEPTION_HANDLERS = {
    ChurchAdminException: church_admin_exception_handler,
    SessionExpiredError: session_expired_handler,
    ApiRequestError: api_request_error_handler,
    ApiTimeoutError: upstream_unavailable_handler,
    ApiNetworkError: upstream_unavailable_handler,
    ApiDecodeError: upstream_unavailable_handler,
    EnvelopeDecodeError: upstream_unavailable_handler,
    SupabaseClientError: supabase_error_handler,
}
