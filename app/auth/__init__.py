# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Sign-in/sign-out through Supabase Auth and the per-request session
# provider used by the API client.
#
# Usage:
#   from app.auth import SessionProviderDep
#
#   @router.get("/protected")
#   def protected(provider: SessionProviderDep):
#       ...
# =============================================================================

from app.auth.dependencies import (
    SessionProviderDep,
    get_session_provider,
    get_session_token,
)
from app.auth.models import AuthUser, LoginRequest, LoginResponse

__all__ = [
    "SessionProviderDep",
    "get_session_provider",
    "get_session_token",
    "AuthUser",
    "LoginRequest",
    "LoginResponse",
]
