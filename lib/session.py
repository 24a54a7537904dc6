# =============================================================================
# lib/session.py - Session Providers
# =============================================================================
# A session provider is the only thing the API client knows about auth:
# - get_access_token(): the current bearer token, or None
# - sign_out(): invalidate the current session
#
# The client asks for the token on every request and never stores it, so a
# token refreshed by the provider is picked up by the next call.
#
# Usage:
#   from lib.session import SupabaseSessionProvider
#   provider = SupabaseSessionProvider(supabase_client)
#   client = ApiClient(provider)
# =============================================================================

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable

from supabase import Client

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionProvider(Protocol):
    """Read/clear access to the current authenticated session."""

    def get_access_token(self) -> str | None:
        """Return the current bearer token, or None when signed out."""
        ...

    def sign_out(self) -> None:
        """Invalidate the current session."""
        ...


class SupabaseSessionProvider:
    """
    Session provider backed by a Supabase client's auth session.

    Used by scripts and long-lived processes where the Supabase client
    itself holds the signed-in session (after sign_in_with_password).
    """

    def __init__(self, client: Client):
        self._client = client

    def get_access_token(self) -> str | None:
        session = self._client.auth.get_session()
        if session is None:
            return None
        return session.access_token or None

    def sign_out(self) -> None:
        self._client.auth.sign_out()
        logger.info("Supabase session signed out")


class TokenSessionProvider:
    """
    Session provider for a token received with an incoming web request.

    The token comes from the session cookie (or a bearer header). Signing
    out forgets it locally and hands it to `revoke` (the web layer revokes
    it through the Supabase admin API); clearing the browser cookie is left
    to the web layer.

    Attributes:
        signed_out: True once sign_out() has run
    """

    def __init__(self, token: str | None, revoke: Callable[[str], None] | None = None):
        self._token = token or None
        self._revoke = revoke
        self.signed_out = False

    def get_access_token(self) -> str | None:
        return self._token

    def sign_out(self) -> None:
        token, self._token = self._token, None
        self.signed_out = True

        if token is None or self._revoke is None:
            return

        try:
            self._revoke(token)
            logger.info("Revoked session token")
        except Exception as e:
            # The token is usually already expired; the cookie is still cleared
            logger.warning(f"Could not revoke session token: {e}")
