"""Terse constructors for schema trees.

    form = obj(
        name=string(min_length=1),
        email=string(email=True),
        age=coerce(number(gte=18, integer=True)),
        newsletter=optional(boolean()),
    )
"""

from datetime import date as date_type
from typing import Any

from formwire.schema.models import (
    Check,
    CoerceNode,
    DefaultNode,
    LeafNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    PipelineNode,
    SchemaNode,
)


def _bounds(gte: Any, gt: Any, lte: Any, lt: Any) -> list[Check]:
    checks = []
    for kind, value in (("gte", gte), ("gt", gt), ("lte", lte), ("lt", lt)):
        if value is not None:
            checks.append(Check(kind=kind, value=value))
    return checks


def string(
    min_length: int | None = None,
    max_length: int | None = None,
    email: bool = False,
    url: bool = False,
) -> LeafNode:
    checks = []
    if min_length is not None:
        checks.append(Check(kind="min_length", value=min_length))
    if max_length is not None:
        checks.append(Check(kind="max_length", value=max_length))
    if email:
        checks.append(Check(kind="email"))
    if url:
        checks.append(Check(kind="url"))
    return LeafNode(kind="string", checks=tuple(checks))


def number(
    gte: float | None = None,
    gt: float | None = None,
    lte: float | None = None,
    lt: float | None = None,
    integer: bool = False,
) -> LeafNode:
    checks = _bounds(gte, gt, lte, lt)
    if integer:
        checks.append(Check(kind="int"))
    return LeafNode(kind="number", checks=tuple(checks))


def date(
    gte: date_type | str | None = None,
    gt: date_type | str | None = None,
    lte: date_type | str | None = None,
    lt: date_type | str | None = None,
) -> LeafNode:
    return LeafNode(kind="date", checks=tuple(_bounds(gte, gt, lte, lt)))


def boolean() -> LeafNode:
    return LeafNode(kind="boolean")


def enum(*values: str) -> LeafNode:
    return LeafNode(kind="enum", values=tuple(values))


def attachment() -> LeafNode:
    return LeafNode(kind="attachment")


def obj(**shape: SchemaNode) -> ObjectNode:
    return ObjectNode(shape=shape)


def optional(inner: SchemaNode) -> OptionalNode:
    return OptionalNode(inner=inner)


def nullable(inner: SchemaNode) -> NullableNode:
    return NullableNode(inner=inner)


def default(inner: SchemaNode, value: Any) -> DefaultNode:
    return DefaultNode(inner=inner, default=value)


def coerce(inner: SchemaNode) -> CoerceNode:
    return CoerceNode(inner=inner)


def pipeline(input: SchemaNode, output: SchemaNode) -> PipelineNode:
    return PipelineNode(input=input, output=output)
