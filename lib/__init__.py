# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - api_client.py: Authenticated REST client (bearer token, 401 handling)
# - session.py: Session providers the client reads tokens from
# - envelope.py: Typed parsing of backend response envelopes
# - supabase_client.py: Typed Supabase wrapper for database operations
# - utils.py: Shared utilities (error handling, formatting, tags)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.api_client import (
    ApiClient,
    ApiClientError,
    ApiDecodeError,
    ApiNetworkError,
    ApiRequestError,
    ApiTimeoutError,
    MultipartPayload,
    SessionExpired,
    SessionExpiredError,
)
from lib.envelope import (
    Envelope,
    EnvelopeDecodeError,
    Page,
    Pagination,
    parse_model,
    parse_models,
    unwrap_data,
    unwrap_flag,
    unwrap_list,
    unwrap_page,
)
from lib.session import SessionProvider, SupabaseSessionProvider, TokenSessionProvider
from lib.supabase_client import SupabaseClient, SupabaseClientError
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

__all__ = [
    # API client
    "ApiClient",
    "ApiClientError",
    "ApiDecodeError",
    "ApiNetworkError",
    "ApiRequestError",
    "ApiTimeoutError",
    "MultipartPayload",
    "SessionExpired",
    "SessionExpiredError",
    # Envelopes
    "Envelope",
    "EnvelopeDecodeError",
    "Page",
    "Pagination",
    "parse_model",
    "parse_models",
    "unwrap_data",
    "unwrap_flag",
    "unwrap_list",
    "unwrap_page",
    # Sessions
    "SessionProvider",
    "SupabaseSessionProvider",
    "TokenSessionProvider",
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "ApplicationError",
    "compact_params",
    "format_file_size",
    "join_tags",
    "normalize_uuid",
    "slugify",
    "split_tags",
    "status_badge",
]
