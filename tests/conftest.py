# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - A fake session provider that counts sign-outs
# - An ApiClient factory wired to httpx.MockTransport (no network)
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("API_BASE_URL", "https://api.test/api")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import httpx
import pytest

from lib.api_client import ApiClient

BASE_URL = "https://api.test/api"


class FakeSessionProvider:
    """Session provider double: fixed token, counts sign-outs."""

    def __init__(self, token="valid-token"):
        self.token = token
        self.sign_out_calls = 0

    def get_access_token(self):
        return self.token

    def sign_out(self):
        self.sign_out_calls += 1
        self.token = None


class RecordingHandler:
    """
    MockTransport handler that records every request.

    `responder` is either an httpx.Response or a callable taking the
    request and returning one (or raising an httpx exception).
    """

    def __init__(self, responder):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.responder):
            return self.responder(request)
        return self.responder

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def session_provider():
    """Signed-in session provider."""
    return FakeSessionProvider()


@pytest.fixture
def make_client(session_provider):
    """
    Build an ApiClient whose backend is `responder`.

    Returns (client, handler); handler.requests holds what was sent.
    """
    clients = []

    def factory(responder, provider=None, **kwargs):
        handler = RecordingHandler(responder)
        client = ApiClient(
            provider or session_provider,
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        clients.append(client)
        return client, handler

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def sample_event():
    """An event as the backend returns it."""
    return {
        "_id": "65f0c2a1b2c3d4e5f6a7b8c9",
        "title": "Easter Service",
        "description": "Celebration service",
        "event_type": "service",
        "start_date": "2024-03-31T09:00:00Z",
        "end_date": "2024-03-31T12:00:00Z",
        "location": "Main hall",
        "max_attendees": 300,
        "images": ["https://cdn.test/easter.jpg"],
        "createdAt": "2024-03-01T10:00:00Z",
        "updatedAt": "2024-03-02T10:00:00Z",
    }


@pytest.fixture
def sample_sermon():
    """A sermon as the backend returns it."""
    return {
        "_id": "65f0c2a1b2c3d4e5f6a7b8d0",
        "title": "Grace Abounds",
        "pastor_name": "John Mensah",
        "sermon_date": "2024-04-07",
        "scripture_reference": "Romans 5:20",
        "series": "Romans",
        "tags": ["grace", "faith"],
    }


@pytest.fixture
def sample_blog_post():
    """A blog post as the backend returns it."""
    return {
        "_id": "65f0c2a1b2c3d4e5f6a7b8e1",
        "title": "Welcome Home",
        "slug": "welcome-home",
        "content": "We are glad you are here.",
        "status": "published",
        "tags": "welcome, community",
        "views": 12,
    }
