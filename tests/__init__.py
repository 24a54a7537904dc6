# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Church Admin Console:
# - test_api_client.py: Authenticated client (tokens, 401, errors, timeouts)
# - test_envelope.py: Response envelope parsing
# - test_services.py: REST services against a mocked backend
# - test_directory_service.py: Supabase-backed directory
# - test_app.py: FastAPI routes, redirects and uploads
#
# Run tests with: pytest
# =============================================================================
