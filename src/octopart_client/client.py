"""Octopart API v2 client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config import (
    CATEGORY_SEARCH_MAX_START,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SUGGEST_LIMIT,
    MAX_SEARCH_LIMIT,
    MAX_SUGGEST_LIMIT,
    MIN_QUERY_LENGTH,
    PART_SEARCH_MAX_START,
    Settings,
    get_api_key,
)
from .encoding import encode_lines, encode_list, encode_quoted_list
from .errors import APIResponseError, ArgumentError

logger = logging.getLogger(__name__)

_PART_TYPES = ("part", "parts")
_CATEGORY_TYPES = ("category", "categories")


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _in_range(value: Any, upper: int) -> bool:
    """Inclusive 0..upper check that rejects bools and non-integers."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= upper


def _valid_query(query: Any) -> bool:
    return isinstance(query, str) and len(query) >= MIN_QUERY_LENGTH


class OctopartClient:
    """Synchronous client for the Octopart API v2.

    Every request carries the client's API key as the ``apikey`` query
    parameter. Arguments are validated before anything is sent, so an
    invalid call never costs a round trip.

    Example:
        >>> client = OctopartClient("apikey")
        >>> client.part(39619421)
    """

    def __init__(self, api_key: str | None = None, settings: Settings | None = None):
        if settings is None:
            settings = Settings.from_env()
        resolved = api_key or settings.api_key
        if not resolved:
            # Falls back to the default slot, then OCTOPART_API_KEY
            resolved = get_api_key()
        self._api_key = resolved
        self._base_url = settings.base_url.rstrip("/")
        self._timeout = settings.timeout
        self._http: httpx.Client | None = None

    @property
    def api_key(self) -> str:
        """The API key sent with every request."""
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=self._timeout)
        return self._http

    def _get(self, path: str, params: dict[str, Any]) -> Any:
        """Send an authenticated GET request and return the validated body."""
        logger.debug(f"GET {path} {params}")
        query = {**params, "apikey": self._api_key}
        response = self._get_http().get(f"{self._base_url}{path}", params=query)
        return self._validate_response(response, path)

    @staticmethod
    def _validate_response(response: httpx.Response, path: str = "") -> Any:
        """Return the parsed JSON body of a 200 response, raise otherwise."""
        if response.status_code != 200:
            logger.warning(f"Octopart API returned HTTP {response.status_code} for {path}")
            raise APIResponseError(response.status_code)
        return response.json()

    # --- Categories ---

    def category(self, id: Any) -> Any:
        """Fetch a category by id, or several when given a list of ids.

        Args:
            id: Category id, e.g. 4174. A list or tuple is passed to categories().

        Returns:
            Category dict, or a list of them for multiple ids
        """
        if _is_array(id):
            return self.categories(id)
        return self._get("/categories/get", {"id": id})

    def categories(self, ids: list[Any]) -> Any:
        """Fetch multiple categories by id, e.g. categories([4215, 4174, 4780])."""
        if not _is_array(ids):
            raise ArgumentError("ids must be an array")
        return self._get("/categories/get_multi", {"ids": encode_list(ids)})

    def search_categories(self, query: str, start: int = 0, limit: int = DEFAULT_SEARCH_LIMIT) -> Any:
        """Search categories.

        Args:
            query: Query string, at least 3 characters
            start: Ordinal position of the first result (0-100)
            limit: Maximum number of results (0-100)
        """
        if not (
            _valid_query(query)
            and _in_range(start, CATEGORY_SEARCH_MAX_START)
            and _in_range(limit, MAX_SEARCH_LIMIT)
        ):
            raise ArgumentError(
                f"query must be a string > 2 characters, start must be an integer 0-{CATEGORY_SEARCH_MAX_START} "
                f"and limit must be an integer 0-{MAX_SEARCH_LIMIT}"
            )
        return self._get("/categories/search", {"q": query, "start": start, "limit": limit})

    # --- Parts ---

    def part(self, uid: Any) -> Any:
        """Fetch a part by uid, or several when given a list of uids."""
        if _is_array(uid):
            return self.parts(uid)
        return self._get("/parts/get", {"uid": uid})

    def parts(self, uids: list[Any]) -> Any:
        """Fetch multiple parts by uid. The API accepts at most 100 uids."""
        if not _is_array(uids):
            raise ArgumentError("uids must be an array")
        return self._get("/parts/get_multi", {"uids": encode_list(uids)})

    def search_parts(self, query: str, start: int = 0, limit: int = DEFAULT_SEARCH_LIMIT) -> Any:
        """Search parts.

        Args:
            query: Query string, at least 3 characters
            start: Ordinal position of the first result (0-1000)
            limit: Number of results to return (0-100)

        Returns:
            Search result dict with a "results" list
        """
        if not (
            _valid_query(query)
            and _in_range(start, PART_SEARCH_MAX_START)
            and _in_range(limit, MAX_SEARCH_LIMIT)
        ):
            raise ArgumentError(
                f"query must be a string > 2 characters, start must be an integer 0-{PART_SEARCH_MAX_START} "
                f"and limit must be an integer 0-{MAX_SEARCH_LIMIT}"
            )
        return self._get("/parts/search", {"q": query, "start": start, "limit": limit})

    def suggest_parts(self, query: str, limit: int = DEFAULT_SUGGEST_LIMIT) -> Any:
        """Suggest part search queries for a partial query such as "sn74f".

        Words in the query are joined with "+" before sending.
        """
        if not (_valid_query(query) and _in_range(limit, MAX_SUGGEST_LIMIT)):
            raise ArgumentError(
                f"query must be a string > 2 characters and limit must be an integer 0-{MAX_SUGGEST_LIMIT}"
            )
        return self._get("/parts/suggest", {"q": "+".join(query.split()), "limit": limit})

    def match_part(self, manufacturer_name: str, mpn: str) -> Any:
        """Match a (manufacturer, MPN) pair to part uids."""
        return self._get("/parts/match", {"manufacturer_name": manufacturer_name, "mpn": mpn})

    match = match_part

    # --- Part attributes ---

    def part_attribute(self, fieldname: Any) -> Any:
        """Fetch a part attribute such as "capacitance", or several given a list."""
        if _is_array(fieldname):
            return self.part_attributes(fieldname)
        return self._get("/partattributes/get", {"fieldname": fieldname})

    def part_attributes(self, fieldnames: list[Any]) -> Any:
        if not _is_array(fieldnames):
            raise ArgumentError("fieldnames must be an array")
        return self._get("/partattributes/get_multi", {"fieldnames": encode_quoted_list(fieldnames)})

    # --- BOM ---

    def bom_match(self, lines: Mapping[str, Any]) -> Any:
        """Match a BOM line to parts.

        Args:
            lines: Mapping of optional fields: q, mpn, manufacturer, sku,
                supplier, mpn_or_sku, start, limit, reference

        Returns:
            Match result dict

        Example:
            >>> client.bom_match({"mpn_or_sku": "60K6871", "manufacturer": "Texas Instruments"})
        """
        if not isinstance(lines, Mapping):
            raise ArgumentError("lines must be a mapping")
        return self._get("/bom/match", {"lines": encode_lines(lines)})

    # --- Helpers ---

    def search(self, type: str, query: str, start: int = 0, limit: int = DEFAULT_SEARCH_LIMIT) -> Any:
        """Search parts or categories by type name.

        Args:
            type: "part"/"parts" or "category"/"categories", case-insensitive
            query: Query string, at least 3 characters
            start: Ordinal position of the first result (0-100)
            limit: Number of results to return (0-100)
        """
        if not (
            _valid_query(query)
            and _in_range(start, CATEGORY_SEARCH_MAX_START)
            and _in_range(limit, MAX_SEARCH_LIMIT)
        ):
            raise ArgumentError(
                f"query must be a string > 2 characters and start/limit must be integers 0-{MAX_SEARCH_LIMIT}"
            )
        kind = type.lower() if isinstance(type, str) else None
        if kind in _PART_TYPES:
            return self.search_parts(query, start, limit)
        if kind in _CATEGORY_TYPES:
            return self.search_categories(query, start, limit)
        raise ArgumentError("type must be either 'parts' or 'categories'")

    def close(self) -> None:
        """Close the HTTP client."""
        if self._http:
            self._http.close()
            self._http = None

    def __enter__(self) -> OctopartClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
