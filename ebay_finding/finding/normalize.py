"""Response normalisation for the Finding service's JSON format.

The JSON flavour of the Finding API wraps every field in a list regardless of
cardinality (``{"ack": ["Success"], "searchResult": [{"@count": ["1"], ...}]}``).
These helpers undo that so callers see plain values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def force_list(value: Any) -> list[Any]:
    """Return *value* as a list.

    ``None`` → ``[]``, a list is returned as-is, a tuple becomes a list and
    anything else (scalar or mapping) is wrapped in a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def _collapse(value: Any) -> Any:
    """Unwrap single-element lists, however deeply nested, then flatten."""
    while isinstance(value, (list, tuple)) and len(value) == 1:
        value = value[0]
    return flatten(value)


def flatten(value: Any) -> Any:
    """Collapse every single-element list field of a mapping, recursively.

    Returns a new structure; the input is not modified. Lists of length 0
    or >= 2 are kept as they are (their elements are not visited), and
    non-mapping input is returned unchanged.

    ``{"a": [{"b": ["x"]}], "c": [1, 2]}`` → ``{"a": {"b": "x"}, "c": [1, 2]}``
    """
    if not isinstance(value, Mapping):
        return value
    return {key: _collapse(field) for key, field in value.items()}
