"""Configuration for the Octopart API client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

# Octopart API endpoint
OCTOPART_BASE_URL = os.getenv("OCTOPART_BASE_URL", "http://octopart.com/api/v2")

# Request settings
REQUEST_TIMEOUT = float(os.getenv("OCTOPART_REQUEST_TIMEOUT", "15.0"))

# Search limits enforced before a request is sent
MIN_QUERY_LENGTH = 3
CATEGORY_SEARCH_MAX_START = 100
PART_SEARCH_MAX_START = 1000
MAX_SEARCH_LIMIT = 100
DEFAULT_SEARCH_LIMIT = 10
MAX_SUGGEST_LIMIT = 10
DEFAULT_SUGGEST_LIMIT = 5

# Process-wide default key, set once at startup
_api_key: str | None = None


def set_api_key(api_key: str | None) -> None:
    """Set the default API key used by clients built without one."""
    global _api_key
    _api_key = api_key


def get_api_key() -> str:
    """Return the default API key, falling back to OCTOPART_API_KEY.

    Raises:
        ConfigurationError: if no default key is set and the env var is empty.
    """
    api_key = _api_key or os.getenv("OCTOPART_API_KEY", "")
    if not api_key:
        raise ConfigurationError("API key not set")
    return api_key


@dataclass(frozen=True)
class Settings:
    """Connection settings handed to OctopartClient at construction."""

    api_key: str | None = None
    base_url: str = OCTOPART_BASE_URL
    timeout: float = REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the default key and environment.

        A missing key is left as None so the client can report it.
        """
        try:
            api_key = get_api_key()
        except ConfigurationError:
            api_key = None
        return cls(api_key=api_key)
