# =============================================================================
# lib/api_client.py - Authenticated REST Client
# =============================================================================
# Thin wrapper around httpx for the church REST backend:
# - Resolves relative paths against API_BASE_URL
# - Attaches "Authorization: Bearer <token>" from the session provider,
#   read fresh on every request
# - Sends JSON bodies by default, multipart when given a MultipartPayload
# - On 401: signs the session out, notifies on_session_expired, and raises
#   SessionExpiredError carrying the login path
#
# Every request is attempted exactly once. There are no retries.
#
# Usage:
#   from lib.api_client import ApiClient
#   with ApiClient(session_provider) as client:
#       events = client.get("/events/get")
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

import httpx

from app.config import settings
from lib.session import SessionProvider
from lib.utils import ApplicationError, compact_params

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================

class ApiClientError(ApplicationError):
    """Base class for every failure raised by ApiClient."""

    def __init__(self, message: str, code: str = "API_CLIENT_ERROR", **kwargs: Any):
        super().__init__(message, code=code, **kwargs)


class ApiRequestError(ApiClientError):
    """
    The backend answered with a non-2xx status (other than 401).

    Attributes:
        status_code: HTTP status returned by the backend
        payload: Decoded error body, if it was JSON
    """

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(
            message,
            code="API_REQUEST_FAILED",
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.payload = payload


class ApiTimeoutError(ApiClientError):
    """The request did not complete within the configured timeout."""

    def __init__(self, method: str, path: str, timeout: float):
        super().__init__(
            f"{method} {path} timed out after {timeout:g}s",
            code="API_TIMEOUT",
            suggestion="Check that the backend at API_BASE_URL is reachable",
            details={"method": method, "path": path, "timeout": timeout},
        )


class ApiNetworkError(ApiClientError):
    """The request failed before any response was received."""

    def __init__(self, method: str, path: str, error: str):
        super().__init__(
            f"{method} {path} failed: {error}",
            code="API_NETWORK_ERROR",
            suggestion="Check API_BASE_URL and your network connection",
            details={"method": method, "path": path},
        )


class ApiDecodeError(ApiClientError):
    """A 2xx response body was not valid JSON."""

    def __init__(self, method: str, path: str):
        super().__init__(
            f"{method} {path} returned a body that is not JSON",
            code="API_DECODE_ERROR",
            details={"method": method, "path": path},
        )


@dataclass
class MultipartPayload:
    """
    A file-bearing request body.

    `fields` are sent as form fields (a list value repeats the field), `files`
    as (field, (filename, content, content_type)) tuples. Fields travel as
    filename-less parts, so the body is multipart even without files. httpx
    writes the multipart boundary header.

    Example:
        payload = MultipartPayload(fields={"title": "Easter"})
        payload.add_file("images", "cover.jpg", data, "image/jpeg")
        client.post("/events/create", payload)
    """

    fields: dict[str, Any] = field(default_factory=dict)
    files: list[tuple[str, tuple[str, bytes, str]]] = field(default_factory=list)

    def add_field(self, name: str, value: Any) -> "MultipartPayload":
        """Set a form field; a repeated name collects its values in a list."""
        if name not in self.fields:
            self.fields[name] = value
        elif isinstance(self.fields[name], list):
            self.fields[name].append(value)
        else:
            self.fields[name] = [self.fields[name], value]
        return self

    def add_file(
        self,
        field_name: str,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> "MultipartPayload":
        self.files.append((field_name, (filename, content, content_type)))
        return self

    def form_fields(self) -> dict[str, str | list[str]]:
        """Form values as strings; None values are dropped."""
        result: dict[str, str | list[str]] = {}
        for key, value in self.fields.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                result[key] = [_form_value(item) for item in value if item is not None]
            else:
                result[key] = _form_value(value)
        return result

    def parts(self) -> list[tuple[str, tuple[str | None, Any]]]:
        """Fields (without a filename) followed by files, in httpx `files=` form."""
        result: list[tuple[str, tuple[str | None, Any]]] = []
        for key, value in self.form_fields().items():
            values = value if isinstance(value, list) else [value]
            result.extend((key, (None, item)) for item in values)
        return result + list(self.files)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


Body = Mapping[str, Any] | MultipartPayload


# =============================================================================
# Client
# =============================================================================

class ApiClient:
    """
    Authenticated client for the REST backend.

    Args:
        session_provider: Supplies the bearer token and performs sign-out
        base_url: Backend base URL (default: settings.API_BASE_URL)
        timeout: Seconds before a request fails (default: settings.API_TIMEOUT_SECONDS)
        login_path: Where an expired session is sent (default: settings.LOGIN_PATH)
        on_session_expired: Optional callback invoked with a SessionExpired event
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Example:
        client = ApiClient(provider)
        sermon = client.post("/sermons/sermons", {"title": "Grace"})
        client.remove(f"/blogs/blog/posts/{post_id}")
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        base_url: str | None = None,
        timeout: float | None = None,
        login_path: str | None = None,
        on_session_expired: Callable[[SessionExpired], None] | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._session_provider = session_provider
        self._on_session_expired = on_session_expired
        self.base_url = base_url or settings.API_BASE_URL
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT_SECONDS
        self.login_path = login_path or settings.LOGIN_PATH

        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Verbs
    # -------------------------------------------------------------------------

    def get(self, path: str, query: Mapping[str, Any] | None = None) -> Any:
        """GET `path` with optional query parameters; returns the decoded body."""
        return self.request("GET", path, query=query)

    def post(self, path: str, body: Body | None = None) -> Any:
        """POST a JSON mapping or a MultipartPayload; returns the decoded body."""
        return self.request("POST", path, body=body)

    def put(self, path: str, body: Body | None = None) -> Any:
        """PUT a JSON mapping or a MultipartPayload; returns the decoded body."""
        return self.request("PUT", path, body=body)

    def patch(self, path: str, body: Body | None = None) -> Any:
        """PATCH `path`; used by the counter endpoints (views, prayers, activity)."""
        return self.request("PATCH", path, body=body)

    def remove(self, path: str) -> None:
        """DELETE `path`. The response body is discarded."""
        self.request("DELETE", path)

    # -------------------------------------------------------------------------
    # Request pipeline
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Body | None = None,
    ) -> Any:
        """
        Send one request and decode its response.

        Raises:
            SessionExpiredError: Backend answered 401 (session already signed out)
            ApiRequestError: Any other non-2xx status
            ApiTimeoutError: No response within the timeout
            ApiNetworkError: Connection-level failure
            ApiDecodeError: 2xx body is not JSON
        """
        headers: dict[str, str] = {}

        token = self._session_provider.get_access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        kwargs: dict[str, Any] = {"params": compact_params(query)}
        if isinstance(body, MultipartPayload):
            kwargs["files"] = body.parts()
        elif body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = dict(body)

        logger.debug(f"{method} {path} (authenticated={bool(token)})")

        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException:
            logger.error(f"{method} {path} timed out after {self.timeout:g}s")
            raise ApiTimeoutError(method, path, self.timeout)
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiNetworkError(method, path, str(e))

        if response.status_code == 401:
            self._expire_session(method, path)

        if not response.is_success:
            payload = _json_or_none(response)
            message = _error_message(response, payload)
            logger.debug(f"{method} {path} -> {response.status_code}: {message}")
            raise ApiRequestError(response.status_code, message, payload)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            raise ApiDecodeError(method, path)

    def _expire_session(self, method: str, path: str) -> None:
        """Sign out, notify, and raise SessionExpiredError."""
        logger.warning(f"Session expired or invalid token ({method} {path})")

        try:
            self._session_provider.sign_out()
        except Exception as e:
            logger.error(f"Sign-out after 401 failed: {e}")

        event = SessionExpired(method=method, path=path, redirect_to=self.login_path)
        if self._on_session_expired is not None:
            self._on_session_expired(event)

        raise SessionExpiredError(event)


# =============================================================================
# Helpers
# =============================================================================

def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(response: httpx.Response, payload: Any) -> str:
    """Pick the server-provided message out of an error body."""
    if isinstance(payload, dict):
        for key in ("message", "detail", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    text = response.text.strip()
    return text or response.reason_phrase or f"HTTP {response.status_code}"
