"""Encoders for the list and object literals Octopart expects in query values.

The v2 API takes arrays and BOM lines as JSON-like text inside a single query
parameter. The quoting is not standard JSON: plain arrays are left unquoted,
and BOM line values are quoted but never escaped.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def _format_value(value: Any) -> str:
    """Render one element the way the API's own examples write it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_list(values: Iterable[Any]) -> str:
    """Encode values as ``[a,b,c]`` with no quoting and no spaces.

    >>> encode_list([4215, 4174, 4780])
    '[4215,4174,4780]'
    """
    return "[" + ",".join(_format_value(v) for v in values) + "]"


def encode_quoted_list(values: Iterable[Any]) -> str:
    """Encode values as ``["a","b"]``, each element double-quoted.

    >>> encode_quoted_list(["capacitance", "resistance"])
    '["capacitance","resistance"]'
    """
    return "[" + ",".join(f'"{_format_value(v)}"' for v in values) + "]"


def encode_lines(line: Mapping[str, Any]) -> str:
    """Encode one BOM line as a single-element array holding one object.

    Keys keep the mapping's iteration order. Embedded quotes are not escaped.

    >>> encode_lines({"mpn_or_sku": "60K6871", "manufacturer": "Texas Instruments"})
    '[{"mpn_or_sku":"60K6871","manufacturer":"Texas Instruments"}]'
    """
    fields = ",".join(f'"{k}":"{_format_value(v)}"' for k, v in line.items())
    return "[{" + fields + "}]"
