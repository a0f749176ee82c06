"""Schema tree node models.

A schema tree describes the shape of a form: object nodes hold named
fields, modifier nodes wrap exactly one inner node, and leaf nodes carry a
kind plus the checks a value of that kind must pass. Trees are immutable and
can be loaded from JSON through the ``node`` discriminator.
"""

from datetime import date, datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

LeafKind = Literal["string", "number", "date", "boolean", "enum", "attachment"]

CheckKind = Literal[
    "min_length",
    "max_length",
    "length",
    "email",
    "url",
    "gte",  # inclusive lower bound
    "gt",  # exclusive lower bound
    "lte",  # inclusive upper bound
    "lt",  # exclusive upper bound
    "int",
]


class Check(BaseModel):
    """A single constraint on a leaf value."""

    kind: CheckKind
    value: int | float | datetime | date | str | None = None

    model_config = ConfigDict(frozen=True)


class ObjectNode(BaseModel):
    """A record with named child fields."""

    node: Literal["object"] = "object"
    shape: dict[str, "SchemaNode"] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class OptionalNode(BaseModel):
    """The inner value may be absent."""

    node: Literal["optional"] = "optional"
    inner: "SchemaNode"

    model_config = ConfigDict(frozen=True)


class NullableNode(BaseModel):
    """The inner value may be null."""

    node: Literal["nullable"] = "nullable"
    inner: "SchemaNode"

    model_config = ConfigDict(frozen=True)


class DefaultNode(BaseModel):
    """A missing inner value is replaced by ``default``."""

    node: Literal["default"] = "default"
    inner: "SchemaNode"
    default: Any = None

    model_config = ConfigDict(frozen=True)


class CoerceNode(BaseModel):
    """The raw value is coerced to the inner node's kind before checking."""

    node: Literal["coerce"] = "coerce"
    inner: "SchemaNode"

    model_config = ConfigDict(frozen=True)


class PipelineNode(BaseModel):
    """The raw value is validated by ``input``, then transformed into ``output``."""

    node: Literal["pipeline"] = "pipeline"
    input: "SchemaNode"
    output: "SchemaNode"

    model_config = ConfigDict(frozen=True)


class LeafNode(BaseModel):
    """A primitive value of a given kind."""

    node: Literal["leaf"] = "leaf"
    kind: LeafKind
    checks: tuple[Check, ...] = ()
    values: tuple[str, ...] = ()  # enum members

    model_config = ConfigDict(frozen=True)


SchemaNode = Annotated[
    Union[
        ObjectNode,
        OptionalNode,
        NullableNode,
        DefaultNode,
        CoerceNode,
        PipelineNode,
        LeafNode,
    ],
    Field(discriminator="node"),
]

for _model in (ObjectNode, OptionalNode, NullableNode, DefaultNode, CoerceNode, PipelineNode):
    _model.model_rebuild()

schema_tree_adapter: TypeAdapter[SchemaNode] = TypeAdapter(SchemaNode)


def parse_schema_tree(data: Any) -> SchemaNode:
    """Validate a JSON-like document into a schema tree.

    Raises:
        pydantic.ValidationError: If the document is not a valid tree.
    """
    return schema_tree_adapter.validate_python(data)
