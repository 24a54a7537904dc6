# =============================================================================
# lib/envelope.py - Response Envelope Parsing
# =============================================================================
# The REST backend wraps most payloads as:
#
#   {"success": true, "data": {...}, "message": "...", "pagination": {...}}
#
# Some endpoints return the bare object or array instead. Services declare
# which shape they expect and parse it here, so a malformed response fails
# in one place with EnvelopeDecodeError instead of a KeyError deep inside a
# screen.
#
# Usage:
#   from lib.envelope import unwrap_data, unwrap_page, parse_model
#   post = unwrap_data(client.get(f"/blogs/blog/posts/{id}"), BlogPost)
#   page = unwrap_page(client.get("/members", query), Member)
# =============================================================================

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError

from lib.utils import ApplicationError

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


class EnvelopeDecodeError(ApplicationError):
    """A response did not match the shape its endpoint is expected to return."""

    def __init__(self, expected: str, error: str, payload: Any = None):
        super().__init__(
            f"Unexpected response shape (expected {expected}): {error}",
            code="ENVELOPE_DECODE_ERROR",
            suggestion="Check that API_BASE_URL points at a compatible backend version",
            details={"expected": expected},
        )
        self.payload = payload


# =============================================================================
# Envelope Models
# =============================================================================

class Pagination(BaseModel):
    """Pagination block returned by list endpoints."""
    page: int = 1
    limit: int = 10
    total: int = 0
    pages: int = 0

    @property
    def has_more(self) -> bool:
        return self.page < self.pages


class Envelope(BaseModel, Generic[T]):
    """`{success, data, message}` wrapper around a single payload."""
    success: bool = True
    data: T
    message: str | None = None


class Page(BaseModel, Generic[T]):
    """A list payload with its pagination block."""
    data: list[T] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


# =============================================================================
# Parsers
# =============================================================================

def parse_model(payload: Any, model: type[ModelT]) -> ModelT:
    """Validate a bare object (no envelope) into `model`."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise EnvelopeDecodeError(model.__name__, str(e), payload)


def parse_models(payload: Any, model: type[ModelT]) -> list[ModelT]:
    """Validate a bare array (no envelope) into a list of `model`."""
    if not isinstance(payload, list):
        raise EnvelopeDecodeError(
            f"list[{model.__name__}]", f"got {type(payload).__name__}", payload
        )
    return [parse_model(item, model) for item in payload]


def unwrap_data(payload: Any, model: type[ModelT]) -> ModelT:
    """
    Parse `{success, data}` and return `data` as `model`.

    Raises:
        EnvelopeDecodeError: If `data` is missing or does not validate
    """
    try:
        envelope = Envelope[model].model_validate(payload)
    except ValidationError as e:
        raise EnvelopeDecodeError(f"Envelope[{model.__name__}]", str(e), payload)
    return envelope.data


def unwrap_list(payload: Any, model: type[ModelT]) -> list[ModelT]:
    """Parse `{success, data: [...]}` and return the list."""
    try:
        envelope = Envelope[list[model]].model_validate(payload)
    except ValidationError as e:
        raise EnvelopeDecodeError(f"Envelope[list[{model.__name__}]]", str(e), payload)
    return envelope.data


def unwrap_page(payload: Any, model: type[ModelT]) -> Page[ModelT]:
    """
    Parse `{data: [...], pagination: {...}}`.

    A missing pagination block yields a single page covering `data`.
    """
    try:
        page = Page[model].model_validate(payload)
    except ValidationError as e:
        raise EnvelopeDecodeError(f"Page[{model.__name__}]", str(e), payload)

    if isinstance(payload, dict) and "pagination" not in payload:
        count = len(page.data)
        page.pagination = Pagination(page=1, limit=count, total=count, pages=1 if count else 0)
    return page


def unwrap_flag(payload: Any, key: str) -> bool:
    """Read a boolean flag such as `available` from `{success, <key>}`."""
    if not isinstance(payload, dict) or not isinstance(payload.get(key), bool):
        raise EnvelopeDecodeError(f"{{success, {key}: bool}}", f"missing '{key}'", payload)
    return payload[key]
