# =============================================================================
# tests/test_utils.py - Shared Utility Tests
# =============================================================================

from uuid import UUID

import pytest

from lib.utils import (
    ApplicationError,
    compact_params,
    format_file_size,
    join_tags,
    normalize_uuid,
    slugify,
    split_tags,
    status_badge,
)


class TestApplicationError:
    """Base error formatting."""

    def test_str_includes_code_and_suggestion(self):
        """str() shows the code, message and suggestion."""
        error = ApplicationError("Boom", code="X_FAILED", suggestion="Try again")

        assert str(error) == "[X_FAILED] Boom\n  Suggestion: Try again"

    def test_to_dict(self):
        """to_dict() exposes every field for API responses."""
        error = ApplicationError("Boom", details={"id": 1})

        assert error.to_dict() == {
            "code": "APPLICATION_ERROR",
            "message": "Boom",
            "suggestion": None,
            "details": {"id": 1},
        }


class TestNormalizeUuid:

    def test_uuid_and_string(self):
        """UUID objects and strings normalize to the same string."""
        value = "550e8400-e29b-41d4-a716-446655440000"

        assert normalize_uuid(UUID(value)) == value
        assert normalize_uuid(value) == value


class TestCompactParams:

    def test_drops_none(self):
        """None values are removed; falsy values are kept."""
        assert compact_params({"a": None, "b": 0, "c": "", "d": False}) == {
            "b": 0,
            "c": "",
            "d": False,
        }

    def test_empty(self):
        assert compact_params(None) == {}


class TestFormatFileSize:
    """Byte counts rendered for the resources screen."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (None, "Unknown"),
            (0, "0 Bytes"),
            (512, "512 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1048576, "1 MB"),
            (2621440, "2.5 MB"),
            (1073741824, "1 GB"),
            (1234567, "1.18 MB"),
        ],
    )
    def test_format(self, size, expected):
        """Base 1024, two decimals at most, trailing zeros stripped."""
        assert format_file_size(size) == expected


class TestSlugify:

    def test_slugify_title(self):
        """Punctuation and spaces collapse into single dashes."""
        assert slugify("Sunday Service: Hope & Grace!") == "sunday-service-hope-grace"

    def test_slugify_trims_dashes(self):
        assert slugify("  --Easter 2024--  ") == "easter-2024"


class TestTags:
    """Comma-separated tag handling."""

    def test_split_tags(self):
        """Whitespace and empty entries are removed."""
        assert split_tags(" grace, faith ,,hope ") == ["grace", "faith", "hope"]

    def test_split_tags_none(self):
        assert split_tags(None) == []

    def test_join_tags_list(self):
        """Lists are joined into the 'a, b' form."""
        assert join_tags(["grace", " faith "]) == "grace, faith"

    def test_join_tags_passes_strings_through(self):
        assert join_tags("grace,faith") == "grace,faith"


class TestStatusBadge:

    @pytest.mark.parametrize(
        "status,variant",
        [
            ("published", "default"),
            ("APPROVED", "default"),
            ("draft", "secondary"),
            ("pending", "secondary"),
            ("archived", "outline"),
            ("rejected", "destructive"),
            ("failed", "destructive"),
            ("something-new", "outline"),
            (None, "outline"),
        ],
    )
    def test_variants(self, status, variant):
        """Statuses map to badge variants; unknown ones fall back to outline."""
        assert status_badge(status) == variant
