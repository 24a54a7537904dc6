# =============================================================================
# core/services/base.py - REST Service Base
# =============================================================================
# Every REST-backed service wraps one ApiClient and does nothing beyond
# shaping the request and unwrapping the response. Failures are logged with
# the action that failed, then re-raised unchanged for the caller to show.
# =============================================================================

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from core.models.base import to_body
from lib.api_client import ApiClient, ApiClientError, MultipartPayload, SessionExpiredError
from lib.envelope import EnvelopeDecodeError

F = TypeVar("F", bound=Callable[..., Any])


def logs_failure(action: str) -> Callable[[F], F]:
    """
    Log a failed service call as "<action> failed: <error>" and re-raise.

    Session expiry is not logged here; the client already reported it.

    Example:
        @logs_failure("load events")
        def list_events(self): ...
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except SessionExpiredError:
                raise
            except (ApiClientError, EnvelopeDecodeError) as e:
                self.logger.error(f"{action} failed: {e.message}")
                raise
        return wrapper  # type: ignore[return-value]
    return decorator


class ApiService:
    """
    Base class for services that talk to the REST backend.

    Args:
        client: Authenticated ApiClient (request-scoped in the web layer)
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self.logger = logging.getLogger(type(self).__module__)


def request_body(data: Any) -> Any:
    """Pass multipart payloads through; dump models/mappings to JSON bodies."""
    if isinstance(data, MultipartPayload):
        return data
    return to_body(data)
