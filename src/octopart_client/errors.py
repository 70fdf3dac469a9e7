"""Exceptions raised by the Octopart API client."""


class OctopartError(Exception):
    """Base class for all client errors."""


class ConfigurationError(OctopartError):
    """No API key could be resolved when building a client."""


class ArgumentError(OctopartError, ValueError):
    """A caller-supplied argument violates an API constraint."""


class APIResponseError(OctopartError):
    """Octopart API returned a status other than 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Octopart API returned HTTP {status_code}")
