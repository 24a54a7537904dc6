# =============================================================================
# tests/test_app.py - Web Layer Tests
# =============================================================================
# This module contains tests for the FastAPI app:
# - session cookie -> bearer token forwarding
# - 401 from the backend -> 303 redirect to /auth/login, cookie cleared
# - backend error pass-through, timeouts
# - sign-in / sign-out / current user
# - multipart forms and upload validation
# - Supabase-backed directory endpoints
#
# The REST backend is an httpx.MockTransport injected through a dependency
# override; Supabase is patched.
# =============================================================================

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from app.auth.dependencies import SessionProviderDep
from app.config import settings
from app.dependencies import get_api_client
from app.main import app
from core.services.directory_service import DirectoryService
from lib.api_client import ApiClient
from tests.conftest import BASE_URL, RecordingHandler

ADMIN = "/api/v1/admin"
MEMBER_ID = "550e8400-e29b-41d4-a716-446655440000"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def backend():
    """The mocked REST backend; tests set `backend.responder`."""
    return RecordingHandler(httpx.Response(200, json=[]))


@pytest.fixture
def revoke():
    """Replaces the Supabase admin sign-out used on session expiry."""
    with patch("app.auth.dependencies.revoke_token") as mock_revoke:
        yield mock_revoke


@pytest.fixture
def client(backend, revoke):
    """TestClient whose request-scoped ApiClient talks to `backend`."""

    def api_client_override(provider: SessionProviderDep):
        api_client = ApiClient(provider, base_url=BASE_URL, transport=httpx.MockTransport(backend))
        try:
            yield api_client
        finally:
            api_client.close()

    app.dependency_overrides[get_api_client] = api_client_override
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(client):
    """Client carrying a session cookie."""
    client.cookies.set(settings.SESSION_COOKIE_NAME, "valid-token")
    return client


# =============================================================================
# Health
# =============================================================================

class TestHealth:

    def test_health(self, client):
        """Health reports the environment and backend URL."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["api_base_url"] == settings.API_BASE_URL

    def test_liveness(self, client):
        assert client.get("/health/live").json()["status"] == "alive"


# =============================================================================
# Session Forwarding & Expiry
# =============================================================================

class TestSessionForwarding:
    """The console's session reaches the backend as a bearer token."""

    def test_cookie_becomes_bearer_token(self, signed_in, backend, sample_event):
        """GET /events returns the backend's events and forwards the token."""
        backend.responder = httpx.Response(200, json=[sample_event])

        response = signed_in.get(f"{ADMIN}/events")

        assert response.status_code == 200
        assert response.json()[0]["_id"] == sample_event["_id"]
        assert backend.last.headers["Authorization"] == "Bearer valid-token"
        assert backend.last.url.path == "/api/events/get"

    def test_bearer_header_is_accepted(self, client, backend):
        """Without a cookie, an Authorization header is forwarded."""
        client.get(f"{ADMIN}/events", headers={"Authorization": "Bearer header-token"})

        assert backend.last.headers["Authorization"] == "Bearer header-token"

    def test_anonymous_request_still_goes_out(self, client, backend):
        """No session: the backend is called without Authorization."""
        response = client.get(f"{ADMIN}/events")

        assert response.status_code == 200
        assert "Authorization" not in backend.last.headers


class TestSessionExpiry:
    """401 from the backend ends the session."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", f"{ADMIN}/events"),
            ("GET", f"{ADMIN}/donations/stats"),
            ("DELETE", f"{ADMIN}/blog/posts/p1"),
            ("PATCH", f"{ADMIN}/prayers/p1/pray"),
        ],
    )
    def test_401_redirects_to_login(self, signed_in, backend, revoke, method, path):
        """Any endpoint: 303 to /auth/login, cookie cleared, token revoked once."""
        backend.responder = httpx.Response(401, json={"message": "jwt expired"})

        response = signed_in.request(method, path)

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/login"
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
        assert "Max-Age=0" in set_cookie
        revoke.assert_called_once_with("valid-token")

    def test_expired_sermon_create(self, signed_in, backend, revoke, sample_sermon):
        """POST with an expired token returns no data, only the redirect."""
        backend.responder = httpx.Response(401)

        response = signed_in.post(f"{ADMIN}/sermons", json=sample_sermon)

        assert response.status_code == 303
        assert response.content == b""
        assert len(backend.requests) == 1
        revoke.assert_called_once()


class TestErrorPassThrough:

    def test_backend_error_keeps_status(self, signed_in, backend, revoke):
        """A 404 from the backend is relayed as a 404 with its message."""
        backend.responder = httpx.Response(404, json={"message": "Event not found"})

        response = signed_in.get(f"{ADMIN}/events/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"
        assert response.json()["upstream"] == {"message": "Event not found"}
        revoke.assert_not_called()

    def test_timeout_is_gateway_timeout(self, signed_in, backend):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        backend.responder = slow

        response = signed_in.get(f"{ADMIN}/events")

        assert response.status_code == 504
        assert response.json()["code"] == "API_TIMEOUT"

    def test_unexpected_shape_is_bad_gateway(self, signed_in, backend):
        """An envelope where the events array was expected."""
        backend.responder = httpx.Response(200, json={"success": True, "data": []})

        response = signed_in.get(f"{ADMIN}/events")

        assert response.status_code == 502
        assert response.json()["code"] == "ENVELOPE_DECODE_ERROR"


# =============================================================================
# Auth Routes
# =============================================================================

class TestLogin:

    def test_login_page_hint(self, client):
        response = client.get("/auth/login")

        assert response.status_code == 200
        assert response.json()["login"]["method"] == "POST"

    @patch("app.auth.routes.SupabaseClient")
    def test_login_sets_session_cookie(self, mock_supabase, client):
        """A successful sign-in stores the access token in an httponly cookie."""
        result = MagicMock()
        result.user.id = MEMBER_ID
        result.user.email = "pastor@church.test"
        result.session.access_token = "new-token"
        result.session.expires_in = 3600
        result.session.expires_at = 1700000000
        mock_supabase.create_anon_client.return_value.auth.sign_in_with_password.return_value = result

        response = client.post(
            "/auth/login", json={"email": "pastor@church.test", "password": "secret"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "pastor@church.test"
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=new-token")
        assert "httponly" in set_cookie.lower()
        assert "Max-Age=3600" in set_cookie

    @patch("app.auth.routes.SupabaseClient")
    def test_bad_credentials(self, mock_supabase, client):
        """Rejected credentials answer 401 with an actionable error."""
        mock_supabase.create_anon_client.return_value.auth.sign_in_with_password.side_effect = (
            Exception("Invalid login credentials")
        )

        response = client.post("/auth/login", json={"email": "a@b.test", "password": "nope"})

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_FAILED"
        assert "set-cookie" not in response.headers


class TestLogout:

    def test_logout_revokes_and_redirects(self, signed_in, revoke):
        response = signed_in.post("/auth/logout")

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/login"
        assert "Max-Age=0" in response.headers["set-cookie"]
        revoke.assert_called_once_with("valid-token")


class TestCurrentUser:

    def test_without_session_redirects(self, client, revoke):
        response = client.get("/auth/me")

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/login"
        revoke.assert_not_called()

    @patch("app.auth.routes.SupabaseClient")
    def test_with_session(self, mock_supabase, signed_in):
        user = MagicMock(id=MEMBER_ID, email="pastor@church.test")
        mock_supabase.get_client.return_value.auth.get_user.return_value.user = user

        response = signed_in.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"id": MEMBER_ID, "email": "pastor@church.test"}
        mock_supabase.get_client.return_value.auth.get_user.assert_called_once_with("valid-token")

    @patch("app.auth.routes.SupabaseClient")
    def test_rejected_token_ends_session(self, mock_supabase, signed_in, revoke):
        mock_supabase.get_client.return_value.auth.get_user.side_effect = Exception("bad jwt")

        response = signed_in.get("/auth/me")

        assert response.status_code == 303
        revoke.assert_called_once_with("valid-token")

    @patch("app.auth.routes.SupabaseClient")
    def test_token_without_user_ends_session(self, mock_supabase, signed_in, revoke):
        """A lookup that finds no user redirects to login instead of failing."""
        mock_supabase.get_client.return_value.auth.get_user.return_value.user = None

        response = signed_in.get("/auth/me")

        assert response.status_code == 303
        assert response.headers["location"] == "/auth/login"
        revoke.assert_called_once_with("valid-token")


# =============================================================================
# Admin Endpoints
# =============================================================================

class TestMultipartForms:

    def test_event_form_is_forwarded_as_multipart(self, signed_in, backend, sample_event):
        """Fields and images reach the backend as multipart, never JSON."""
        backend.responder = httpx.Response(201, json=sample_event)

        response = signed_in.post(
            f"{ADMIN}/events/form",
            data={"title": "Easter Service", "event_type": "service"},
            files={"images": ("cover.png", b"PNGDATA", "image/png")},
        )

        assert response.status_code == 201
        sent = backend.last
        assert sent.url.path == "/api/events/create"
        assert sent.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="title"' in sent.content
        assert b'filename="cover.png"' in sent.content
        assert b"PNGDATA" in sent.content

    def test_edit_without_new_image_stays_multipart(self, signed_in, backend, sample_event):
        """An edit with only text fields still reaches the backend as multipart."""
        backend.responder = httpx.Response(200, json=sample_event)

        response = signed_in.put(
            f"{ADMIN}/events/{sample_event['_id']}/form",
            data={"title": "Easter Service", "tags": ["easter", "worship"]},
        )

        assert response.status_code == 200
        sent = backend.last
        assert sent.url.path == f"/api/events/update/{sample_event['_id']}"
        assert sent.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert sent.content.count(b'name="tags"') == 2
        assert b"easter" in sent.content
        assert b"worship" in sent.content

    def test_non_image_is_rejected(self, signed_in, backend):
        """Unsupported files are refused before the backend is called."""
        response = signed_in.post(
            f"{ADMIN}/events/form",
            data={"title": "Easter"},
            files={"images": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FILE_TYPE"
        assert backend.requests == []


class TestUploads:

    def test_upload_image(self, signed_in, backend):
        backend.responder = httpx.Response(
            200, json={"success": True, "imageUrl": "https://cdn.test/a.jpg", "imageId": "img_1"}
        )

        response = signed_in.post(
            f"{ADMIN}/uploads/image", files={"image": ("a.jpg", b"JPEG", "image/jpeg")}
        )

        assert response.status_code == 201
        assert response.json()["imageId"] == "img_1"
        assert backend.last.url.path == "/api/upload/single"

    def test_too_large(self, signed_in, backend, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)
        content = b"x" * (1024 * 1024 + 1)

        response = signed_in.post(
            f"{ADMIN}/uploads/image", files={"image": ("big.jpg", content, "image/jpeg")}
        )

        assert response.status_code == 413
        assert response.json()["code"] == "FILE_TOO_LARGE"
        assert backend.requests == []


class TestBlogEndpoints:

    def test_create_derives_slug(self, signed_in, backend, sample_blog_post):
        """Posts created without a slug get one from the title."""
        backend.responder = httpx.Response(201, json={"success": True, "data": sample_blog_post})

        response = signed_in.post(
            f"{ADMIN}/blog/posts", json={"title": "Hope & Grace", "content": "..."}
        )

        assert response.status_code == 201
        assert json.loads(backend.last.content)["slug"] == "hope-grace"

    def test_list_posts_keeps_pagination(self, signed_in, backend, sample_blog_post):
        backend.responder = httpx.Response(200, json={
            "success": True,
            "data": [sample_blog_post],
            "pagination": {"page": 1, "limit": 10, "total": 1, "pages": 1},
        })

        response = signed_in.get(f"{ADMIN}/blog/posts", params={"status": "published"})

        body = response.json()
        assert body["data"][0]["slug"] == "welcome-home"
        assert body["pagination"]["total"] == 1
        assert dict(backend.last.url.params)["status"] == "published"

    def test_delete(self, signed_in, backend):
        backend.responder = httpx.Response(200, json={"success": True})

        response = signed_in.delete(f"{ADMIN}/blog/posts/p1")

        assert response.status_code == 204
        assert backend.last.url.path == "/api/blogs/blog/posts/p1"


class TestDirectoryEndpoints:

    @patch.object(DirectoryService, "list_members")
    def test_members_with_badges_and_stats(self, mock_list, client):
        mock_list.return_value = [
            {"id": "1", "membership_status": "active"},
            {"id": "2", "membership_status": "pending"},
        ]

        response = client.get(f"{ADMIN}/directory/members", params={"search": "ama"})

        body = response.json()
        assert [m["badge"] for m in body["members"]] == ["default", "secondary"]
        assert body["stats"]["total"] == 2
        mock_list.assert_called_once_with(search="ama", status=None)

    @patch.object(DirectoryService, "get_member_profile", return_value=None)
    def test_unknown_member_is_404(self, mock_get, client):
        response = client.get(f"{ADMIN}/directory/members/{MEMBER_ID}")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"
        mock_get.assert_called_once_with(MEMBER_ID)
