# =============================================================================
# tests/test_envelope.py - Response Envelope Tests
# =============================================================================
# Tests for the typed parsers in lib/envelope.py:
# - bare objects and arrays
# - {success, data} envelopes
# - paginated {data, pagination} responses
# - malformed shapes raising EnvelopeDecodeError
# =============================================================================

import pytest

from core.models.blog import BlogPost
from core.models.events import Event
from lib.envelope import (
    EnvelopeDecodeError,
    Pagination,
    parse_model,
    parse_models,
    unwrap_data,
    unwrap_flag,
    unwrap_list,
    unwrap_page,
)


class TestBarePayloads:
    """Endpoints that return the object or array directly."""

    def test_parse_model(self, sample_event):
        """A bare object validates into the model."""
        event = parse_model(sample_event, Event)

        assert event.id == "65f0c2a1b2c3d4e5f6a7b8c9"
        assert event.title == "Easter Service"
        assert event.max_attendees == 300

    def test_parse_models(self, sample_event):
        """A bare array validates item by item."""
        events = parse_models([sample_event, sample_event], Event)

        assert len(events) == 2
        assert all(isinstance(e, Event) for e in events)

    def test_parse_models_rejects_envelope(self, sample_event):
        """An envelope where an array was expected is a decode error."""
        with pytest.raises(EnvelopeDecodeError) as exc_info:
            parse_models({"success": True, "data": [sample_event]}, Event)

        assert exc_info.value.code == "ENVELOPE_DECODE_ERROR"
        assert exc_info.value.details == {"expected": "list[Event]"}

    def test_parse_model_invalid_object(self):
        """Missing required fields raise EnvelopeDecodeError, not ValidationError."""
        with pytest.raises(EnvelopeDecodeError) as exc_info:
            parse_model({"title": "No dates"}, Event)

        assert exc_info.value.payload == {"title": "No dates"}


class TestDataEnvelope:
    """{success, data, message} envelopes."""

    def test_unwrap_data(self, sample_blog_post):
        """The inner object is returned as the model."""
        post = unwrap_data({"success": True, "data": sample_blog_post}, BlogPost)

        assert post.slug == "welcome-home"
        assert post.tags == ["welcome", "community"]

    def test_unwrap_data_missing_data(self):
        """An envelope without `data` is a decode error."""
        with pytest.raises(EnvelopeDecodeError):
            unwrap_data({"success": True, "message": "ok"}, BlogPost)

    def test_unwrap_data_rejects_bare_object(self, sample_blog_post):
        """A bare object where an envelope was expected is a decode error."""
        with pytest.raises(EnvelopeDecodeError):
            unwrap_data(sample_blog_post, BlogPost)

    def test_unwrap_list(self, sample_blog_post):
        """{success, data: [...]} yields the list."""
        posts = unwrap_list({"success": True, "data": [sample_blog_post]}, BlogPost)

        assert [p.slug for p in posts] == ["welcome-home"]


class TestPaginatedEnvelope:
    """{data, pagination} list responses."""

    def test_unwrap_page(self, sample_blog_post):
        """Items and pagination are both parsed."""
        payload = {
            "success": True,
            "data": [sample_blog_post],
            "pagination": {"page": 2, "limit": 10, "total": 25, "pages": 3},
        }

        page = unwrap_page(payload, BlogPost)

        assert len(page.data) == 1
        assert page.pagination == Pagination(page=2, limit=10, total=25, pages=3)
        assert page.pagination.has_more is True

    def test_missing_pagination_is_single_page(self, sample_blog_post):
        """Without a pagination block the data is one complete page."""
        page = unwrap_page({"data": [sample_blog_post, sample_blog_post]}, BlogPost)

        assert page.pagination == Pagination(page=1, limit=2, total=2, pages=1)
        assert page.pagination.has_more is False

    def test_empty_page(self):
        """An empty list has zero pages."""
        page = unwrap_page({"data": []}, BlogPost)

        assert page.data == []
        assert page.pagination.pages == 0

    def test_last_page_has_no_more(self):
        """page == pages means there is nothing left to load."""
        assert Pagination(page=3, limit=10, total=25, pages=3).has_more is False

    def test_invalid_items(self):
        """An item that doesn't validate fails the whole page."""
        with pytest.raises(EnvelopeDecodeError):
            unwrap_page({"data": [{"title": "no slug"}]}, BlogPost)


class TestFlags:
    """Boolean answers such as slug and email availability."""

    def test_unwrap_flag(self):
        """The named flag is returned."""
        assert unwrap_flag({"success": True, "available": False}, "available") is False

    def test_unwrap_flag_missing(self):
        """A missing or non-boolean flag is a decode error."""
        with pytest.raises(EnvelopeDecodeError):
            unwrap_flag({"success": True}, "available")
        with pytest.raises(EnvelopeDecodeError):
            unwrap_flag({"available": "yes"}, "available")
