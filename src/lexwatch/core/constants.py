"""Global constants for lexwatch.

Centralizes magic numbers and fixed phrases used throughout the codebase,
making them discoverable, consistent, and easy to modify.
"""

# =============================================================================
# Polling
# =============================================================================

DEFAULT_POLL_INTERVAL_SECONDS = 5.0
"""Fixed delay between two status requests for a job."""

MAX_POLL_INTERVAL_SECONDS = 3600.0
"""Upper bound accepted for a configured poll interval."""

# =============================================================================
# HTTP transport
# =============================================================================

DEFAULT_API_BASE_URL = "http://localhost:3000/api"
"""Base URL of the administration API when no config file overrides it."""

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
"""Total timeout applied to each HTTP request."""

DEFAULT_TOKEN_ENV = "LEXWATCH_TOKEN"
"""Environment variable holding the bearer token."""

NETWORK_ERROR_MESSAGE = "Network Error"
"""Client message attached to connectivity failures and timeouts."""

# =============================================================================
# Presentation
# =============================================================================

PROCESSING_PLACEHOLDER = "Procesando..."
"""Shown while a job has been started but no status has arrived yet."""

ITEM_SEPARATOR = ", "
"""Separator used when a message names several related items."""
