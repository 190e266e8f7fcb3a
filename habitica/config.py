"""Centralized configuration from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()


def _get_float(key: str, default: float) -> float:
    """Get float value from environment variable."""
    value = os.getenv(key)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_str(key: str, default: str) -> str:
    """Get string value from environment variable."""
    return os.getenv(key, default)


# =============================================================================
# Endpoint and client identification
# =============================================================================
DEFAULT_ENDPOINT = _get_str("HABITICA_ENDPOINT", "https://habitica.com")
DEFAULT_PLATFORM = _get_str("HABITICA_PLATFORM", "Habitica-Python")
API_VERSION_PREFIX = "/api/v3"

# =============================================================================
# Credentials (used by Habitica.from_env)
# =============================================================================
HABITICA_USER_ID = os.getenv("HABITICA_USER_ID")
HABITICA_API_KEY = os.getenv("HABITICA_API_KEY")

# =============================================================================
# HTTP Timeouts (seconds)
# =============================================================================
HTTP_DEFAULT_TIMEOUT = _get_float("HTTP_DEFAULT_TIMEOUT", 30.0)
