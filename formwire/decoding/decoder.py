"""Decoder for flat, multi-valued form submissions.

Browsers submit forms as an ordered list of ``(key, value)`` pairs. Keys may
repeat (checkbox groups, multi-selects) and may contain dots to address a
nested field (``user.profile.name``). The decoder turns that list into a
nested mapping that a validation engine can consume directly.

The decoder never rejects input. Ambiguous keys are resolved by fixed rules:

- a repeated key becomes a list, in submission order;
- a key starting or ending with ``.`` yields an ``""`` path segment;
- a dot-path that walks through a key holding a non-mapping value replaces
  that value with a mapping (unless ``on_conflict="raise"``).
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from formwire.config import DecodeConfig, EmptyValuePolicy
from formwire.types import UNDEFINED

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


class PathConflictError(ValueError):
    """Raised when a dot-path collides with an existing non-mapping value."""

    def __init__(self, key: str, segment: str, existing: Any) -> None:
        self.key = key
        self.segment = segment
        self.existing = existing
        super().__init__(
            f"Cannot nest {key!r}: segment {segment!r} already holds "
            f"a {type(existing).__name__} value"
        )


def iter_submission(submission: Any) -> Iterator[tuple[str, Any]]:
    """Iterate a submission as ordered ``(key, value)`` pairs.

    Accepts an iterable of pairs, a multi-dict exposing ``multi_items()``
    (Starlette) or ``items(multi=True)`` (Werkzeug), or a plain mapping.
    """
    if hasattr(submission, "multi_items"):
        yield from submission.multi_items()
    elif isinstance(submission, Mapping):
        try:
            items = submission.items(multi=True)  # type: ignore[call-arg]
        except TypeError:
            items = submission.items()
        yield from items
    else:
        for key, value in submission:
            yield key, value


def decode_form_data(
    submission: Iterable[tuple[str, Any]] | Mapping[str, Any] | Any,
    config: DecodeConfig | EmptyValuePolicy | str | None = None,
) -> dict[str, Any]:
    """Decode a flat submission into a nested mapping.

    Args:
        submission: Ordered, possibly repeated key/value pairs. Text values are
            ``str``; anything else is treated as an opaque attachment.
        config: Decoding configuration. A bare empty-value policy is accepted
            as shorthand for ``DecodeConfig(empty_value=policy)``.

    Returns:
        The decoded object. Repeated keys hold lists, dotted keys are nested.

    Raises:
        PathConflictError: Only when ``config.on_conflict == "raise"`` and a
            dot-path collides with an existing non-mapping value.
    """
    config = _resolve_config(config)

    data: dict[str, Any] = {}
    for key, value in iter_submission(submission):
        if key not in data:
            if isinstance(value, str) and not value:
                value = _empty_replacement(value, config.empty_value)
            data[key] = value
            continue
        # Grouped fields (checkbox groups, multi-selects) accumulate in order
        if not isinstance(data[key], list):
            data[key] = [data[key]]
        data[key].append(value)

    for key in [k for k in data if PATH_SEPARATOR in k]:
        _nest(data, key, config)

    return data


def _resolve_config(config: DecodeConfig | EmptyValuePolicy | str | None) -> DecodeConfig:
    if config is None:
        return DecodeConfig()
    if isinstance(config, DecodeConfig):
        return config
    return DecodeConfig(empty_value=config)


def _empty_replacement(value: str, policy: EmptyValuePolicy | str) -> Any:
    """Apply the empty-value policy to a zero-length text value."""
    if policy == EmptyValuePolicy.UNDEFINED:
        return UNDEFINED
    if policy == EmptyValuePolicy.NULL:
        return None
    if policy == EmptyValuePolicy.EMPTY_STRING:
        return ""
    return value


def _nest(data: dict[str, Any], key: str, config: DecodeConfig) -> None:
    """Move the value stored under a dotted top-level key into nested mappings."""
    value = data.pop(key)
    *parents, last = key.split(PATH_SEPARATOR)

    node = data
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, dict):
            if segment in node:
                if config.on_conflict == "raise":
                    raise PathConflictError(key, segment, child)
                logger.debug(
                    "Overwriting %r with a mapping while nesting %r", segment, key
                )
            child = {}
            node[segment] = child
        node = child

    node[last] = value
