# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides the per-request session provider.
#
# The access token is read from the session cookie, or from an
# "Authorization: Bearer" header for non-browser callers. Nothing is
# verified here: the REST backend validates the token and answers 401 when
# it is expired, which the API client turns into a sign-out + redirect.
#
# Usage:
#   from app.auth import get_session_provider
#
#   @router.get("/things")
#   def list_things(provider: TokenSessionProvider = Depends(get_session_provider)):
#       ...
# =============================================================================

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from lib.session import TokenSessionProvider
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# Bearer header is optional; the cookie is the normal path
security_optional = HTTPBearer(auto_error=False)


def revoke_token(token: str) -> None:
    """Revoke a session token through the Supabase admin API."""
    SupabaseClient.get_client().auth.admin.sign_out(token)


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> Optional[str]:
    """
    Extract the access token for this request.

    Returns:
        The token from the session cookie, else from the bearer header,
        else None (the request then goes out unauthenticated)
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def get_session_provider(
    token: Annotated[Optional[str], Depends(get_session_token)],
) -> TokenSessionProvider:
    """Build the request-scoped session provider handed to the API client."""
    return TokenSessionProvider(token, revoke=revoke_token)


SessionProviderDep = Annotated[TokenSessionProvider, Depends(get_session_provider)]
