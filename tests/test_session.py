# =============================================================================
# tests/test_session.py - Session Provider Tests
# =============================================================================

from unittest.mock import MagicMock

from lib.session import SessionProvider, SupabaseSessionProvider, TokenSessionProvider


class TestTokenSessionProvider:
    """Provider for the token carried by an incoming request."""

    def test_returns_token(self):
        provider = TokenSessionProvider("abc")

        assert provider.get_access_token() == "abc"
        assert provider.signed_out is False

    def test_empty_token_is_none(self):
        """An empty cookie counts as no session."""
        assert TokenSessionProvider("").get_access_token() is None

    def test_sign_out_forgets_and_revokes(self):
        """Sign-out clears the token locally and revokes it once."""
        revoke = MagicMock()
        provider = TokenSessionProvider("abc", revoke=revoke)

        provider.sign_out()

        assert provider.get_access_token() is None
        assert provider.signed_out is True
        revoke.assert_called_once_with("abc")

    def test_revoke_failure_is_not_raised(self):
        """An already-expired token may fail to revoke; sign-out still completes."""
        revoke = MagicMock(side_effect=Exception("token expired"))
        provider = TokenSessionProvider("abc", revoke=revoke)

        provider.sign_out()

        assert provider.signed_out is True
        assert provider.get_access_token() is None

    def test_sign_out_without_token_skips_revoke(self):
        revoke = MagicMock()

        TokenSessionProvider(None, revoke=revoke).sign_out()

        revoke.assert_not_called()

    def test_satisfies_protocol(self):
        assert isinstance(TokenSessionProvider("abc"), SessionProvider)


class TestSupabaseSessionProvider:
    """Provider backed by a signed-in Supabase client."""

    def test_token_from_current_session(self):
        client = MagicMock()
        client.auth.get_session.return_value.access_token = "supa-token"

        assert SupabaseSessionProvider(client).get_access_token() == "supa-token"

    def test_no_session(self):
        client = MagicMock()
        client.auth.get_session.return_value = None

        assert SupabaseSessionProvider(client).get_access_token() is None

    def test_sign_out(self):
        client = MagicMock()

        SupabaseSessionProvider(client).sign_out()

        client.auth.sign_out.assert_called_once_with()
