"""Serializer that flattens nested values back into dot-path keys.

The output is what a form needs to redisplay the values a user submitted:
nested mappings collapse into ``"a.b.c"`` keys, while lists stay intact as
single leaves (a multi-select keeps its whole selection under one key).

Before flattening, the value is canonicalized with JSON semantics:

- mapping entries holding ``UNDEFINED``, callables or attachments are dropped;
- inside lists those values become ``None``;
- dates, UUIDs, Decimals, enums and pydantic models take their JSON form.
"""

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic_core import to_jsonable_python

from formwire.decoding.decoder import PATH_SEPARATOR
from formwire.types import UNDEFINED, is_attachment

logger = logging.getLogger(__name__)

_SCALARS = (str, int, bool, type(None))


def serialize_form_data(value: Any) -> Any:
    """Canonicalize ``value`` and flatten it into a dot-path mapping.

    Args:
        value: Any JSON-representable value, typically a decoded submission.

    Returns:
        A flat ``{dot.path: leaf}`` mapping when the canonical value is a
        mapping; otherwise the canonical value itself (scalars and lists are
        passed through).
    """
    canonical = canonicalize(value)
    if not isinstance(canonical, dict):
        return canonical

    flat: dict[str, Any] = {}
    _flatten(canonical, None, flat)
    return flat


def canonicalize(value: Any) -> Any:
    """Return a deep, JSON-safe copy of ``value``."""
    if _is_dropped(value):
        return None
    return _canonical(value)


def _canonical(value: Any) -> Any:
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if _is_dropped(item):
                if is_attachment(item):
                    logger.debug("Dropping attachment %r from serialized form data", key)
                continue
            result[str(key)] = _canonical(item)
        return result

    if isinstance(value, (list, tuple, set, frozenset)):
        return [None if _is_dropped(item) else _canonical(item) for item in value]

    if isinstance(value, Enum):
        return _canonical(value.value)

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if isinstance(value, _SCALARS):
        return value

    jsonable = to_jsonable_python(value)
    if isinstance(jsonable, (dict, list)):
        return _canonical(jsonable)
    return jsonable


def _is_dropped(value: Any) -> bool:
    """Values that a JSON round-trip cannot carry."""
    return value is UNDEFINED or callable(value) or is_attachment(value)


def _flatten(obj: dict[str, Any], prefix: str | None, out: dict[str, Any]) -> None:
    for key, value in obj.items():
        path = key if prefix is None else f"{prefix}{PATH_SEPARATOR}{key}"
        if isinstance(value, dict):
            # An empty mapping contributes no key at all
            _flatten(value, path, out)
        else:
            out[path] = value
