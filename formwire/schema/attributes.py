"""Native input attributes derived from a schema tree.

Given the schema used to validate a form and the path of one field, this
module computes the HTML constraint attributes (``required``, ``min``,
``max``, ``minLength``, ``maxLength``, ``step``) and, on request, a ``type``
hint for the ``<input>`` that renders the field. The browser then enforces
the same rules the server validates.

The walk peels one node per step. Object nodes consume a path segment,
modifier nodes are unwrapped, and the first leaf decides the attributes.
Passing through an optional, nullable or defaulted node suppresses
``required`` for everything below it; ``required`` is then omitted, never set
to ``False``.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

from formwire.config import AttributeOptions
from formwire.decoding.decoder import PATH_SEPARATOR
from formwire.schema.models import (
    CoerceNode,
    DefaultNode,
    LeafKind,
    LeafNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    PipelineNode,
    SchemaNode,
)

logger = logging.getLogger(__name__)

AttributeValue = bool | int | float | str

_TYPE_HINTS: dict[str, str] = {
    "string": "text",
    "number": "number",
    "date": "date",
    "boolean": "checkbox",
    "enum": "radio",
    "attachment": "file",
}


class FieldAttributes(BaseModel):
    """Leaf kind and native input attributes for a single field."""

    kind: LeafKind = "string"
    attrs: dict[str, AttributeValue] = Field(default_factory=dict)


def get_validation_attributes(
    schema: SchemaNode,
    path: Sequence[str] | str,
    options: AttributeOptions | bool | None = None,
) -> FieldAttributes:
    """Compute the input attributes for the field at ``path``.

    Args:
        schema: Root of the schema tree.
        path: Field path, as segments or as a dot-path string.
        options: Attribute options; a bool is shorthand for
            ``AttributeOptions(infer_type_hint=...)``.

    Returns:
        The field's leaf kind and attributes. A path that does not resolve to
        a field yields ``FieldAttributes(kind="string", attrs={})``.
    """
    if options is None:
        options = AttributeOptions()
    elif isinstance(options, bool):
        options = AttributeOptions(infer_type_hint=options)

    if isinstance(path, str):
        path = path.split(PATH_SEPARATOR) if path else []

    node: Any = schema
    remaining = tuple(path)
    required = True

    while True:
        if isinstance(node, ObjectNode) and remaining:
            child = node.shape.get(remaining[0])
            if child is None:
                logger.debug("No schema field for path %r", PATH_SEPARATOR.join(path))
                return FieldAttributes()
            node, remaining = child, remaining[1:]
        elif isinstance(node, (OptionalNode, NullableNode, DefaultNode)):
            required = False
            node = node.inner
        elif isinstance(node, CoerceNode):
            node = node.inner
        elif isinstance(node, PipelineNode):
            if _is_text_to_boolean(node):
                node = LeafNode(kind="boolean")
            else:
                # The raw submission has to satisfy the input side
                node = node.input
        else:
            break

    if isinstance(node, LeafNode):
        kind, attrs = _leaf_attributes(node)
    else:
        kind, attrs = "string", {}

    if required:
        attrs = {"required": True, **attrs}
    if not options.infer_type_hint:
        attrs.pop("type", None)

    return FieldAttributes(kind=kind, attrs=attrs)


def _leaf_attributes(leaf: LeafNode) -> tuple[LeafKind, dict[str, AttributeValue]]:
    attrs: dict[str, AttributeValue] = {"type": _TYPE_HINTS[leaf.kind]}

    if leaf.kind == "string":
        for check in leaf.checks:
            if check.kind in ("min_length", "length") and _is_number(check.value):
                attrs["minLength"] = check.value
            if check.kind in ("max_length", "length") and _is_number(check.value):
                attrs["maxLength"] = check.value
            if check.kind == "email":
                attrs["type"] = "email"
            elif check.kind == "url":
                attrs["type"] = "url"

    elif leaf.kind == "number":
        for check in leaf.checks:
            if check.kind == "int":
                attrs["step"] = 1
                continue
            if not _is_number(check.value):
                continue
            if check.kind == "gte":
                attrs["min"] = check.value
            elif check.kind == "gt":
                attrs["min"] = check.value + 1
            elif check.kind == "lte":
                attrs["max"] = check.value
            elif check.kind == "lt":
                attrs["max"] = check.value - 1

    elif leaf.kind == "date":
        for check in leaf.checks:
            if check.kind in ("gte", "gt"):
                bound = _calendar_date(check.value, 1 if check.kind == "gt" else 0)
                if bound:
                    attrs["min"] = bound
            elif check.kind in ("lte", "lt"):
                bound = _calendar_date(check.value, -1 if check.kind == "lt" else 0)
                if bound:
                    attrs["max"] = bound

    return leaf.kind, attrs


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _calendar_date(value: Any, offset_days: int = 0) -> str | None:
    """Format a date bound as ``YYYY-MM-DD``, shifted by ``offset_days``.

    Numbers are epoch milliseconds. Aware datetimes are converted to UTC
    before the date is taken.
    """
    bound = value
    try:
        if _is_number(bound):
            bound = datetime.fromtimestamp(bound / 1000, tz=timezone.utc)
        elif isinstance(bound, str):
            bound = datetime.fromisoformat(bound.replace("Z", "+00:00"))

        if isinstance(bound, datetime):
            if bound.tzinfo is not None:
                bound = bound.astimezone(timezone.utc)
            bound = bound.date()
        if not isinstance(bound, date):
            return None

        return (bound + timedelta(days=offset_days)).isoformat()
    except (OverflowError, OSError, ValueError):
        logger.debug("Ignoring unrepresentable date bound %r", value)
        return None


def _terminal_kind(node: Any, side: Literal["input", "output"]) -> LeafKind | None:
    """Leaf kind of ``node`` once modifiers are peeled, following one pipeline side."""
    while True:
        if isinstance(node, (OptionalNode, NullableNode, DefaultNode, CoerceNode)):
            node = node.inner
        elif isinstance(node, PipelineNode):
            node = node.input if side == "input" else node.output
        elif isinstance(node, LeafNode):
            return node.kind
        else:
            return None


def _is_text_to_boolean(node: PipelineNode) -> bool:
    return (
        _terminal_kind(node.input, "input") == "string"
        and _terminal_kind(node.output, "output") == "boolean"
    )
