"""Python client for the Octopart API v2.

Provides part, category and part attribute lookup, search, suggestion and
BOM matching over Octopart's REST endpoints.
"""

__version__ = "0.1.0"

from .client import OctopartClient
from .config import Settings, get_api_key, set_api_key
from .encoding import encode_lines, encode_list, encode_quoted_list
from .errors import APIResponseError, ArgumentError, ConfigurationError, OctopartError

__all__ = [
    "OctopartClient",
    "Settings",
    "get_api_key",
    "set_api_key",
    "encode_lines",
    "encode_list",
    "encode_quoted_list",
    "APIResponseError",
    "ArgumentError",
    "ConfigurationError",
    "OctopartError",
]
