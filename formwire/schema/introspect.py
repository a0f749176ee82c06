"""Schema trees derived from pydantic models.

Lets one pydantic model both validate a decoded submission and drive the
native input attributes of the form that produces it::

    class Signup(BaseModel):
        name: str = Field(min_length=1)
        age: int = Field(ge=18)
        newsletter: bool = False

    tree = schema_from_model(Signup)
    get_validation_attributes(tree, ["age"]).attrs
    # {"required": True, "min": 18, "step": 1}
"""

import types
from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import AnyUrl, BaseModel
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

from formwire.schema.models import (
    Check,
    DefaultNode,
    LeafKind,
    LeafNode,
    NullableNode,
    ObjectNode,
    SchemaNode,
)
from formwire.types import Attachment

# Constraint attribute names found on annotated_types / pydantic metadata
_LENGTH_ATTRS = (("min_length", "min_length"), ("max_length", "max_length"))
_BOUND_ATTRS = (("ge", "gte"), ("gt", "gt"), ("le", "lte"), ("lt", "lt"))

_EMAIL_TYPE_NAMES = {"EmailStr", "NameEmail"}
_URL_TYPE_NAMES = {"Url", "AnyUrl", "AnyHttpUrl", "HttpUrl"}
_COLLECTION_ORIGINS = (list, tuple, set, frozenset, Sequence)


def schema_from_model(model: type[BaseModel]) -> ObjectNode:
    """Build a schema tree from a pydantic model class.

    Field aliases are used as keys, since they are the names a submission
    carries.
    """
    shape: dict[str, SchemaNode] = {}
    for name, field in model.model_fields.items():
        node = _node_for(field.annotation, list(field.metadata))
        if not field.is_required():
            node = DefaultNode(inner=node, default=_default_of(field))
        shape[field.alias or name] = node
    return ObjectNode(shape=shape)


def _default_of(field: FieldInfo) -> Any:
    if field.default is PydanticUndefined:
        return None
    return field.default


def _node_for(annotation: Any, metadata: list[Any]) -> SchemaNode:
    origin = get_origin(annotation)

    if origin is Annotated:
        inner, *extra = get_args(annotation)
        return _node_for(inner, metadata + extra)

    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        members = [arg for arg in args if arg is not type(None)]
        # Mixed unions are described by their first member
        node = _node_for(members[0], metadata) if members else _leaf("string", [], metadata)
        return NullableNode(inner=node) if len(members) < len(args) else node

    if origin is Literal:
        return LeafNode(kind="enum", values=tuple(str(v) for v in get_args(annotation)))

    if origin in _COLLECTION_ORIGINS:
        # A grouped field: describe one element; length metadata counts items
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        return _node_for(args[0] if args else str, [])

    if not isinstance(annotation, type):
        return _leaf("string", [], metadata)

    name = annotation.__name__
    if issubclass(annotation, Attachment) or issubclass(annotation, (bytes, bytearray)):
        return LeafNode(kind="attachment")
    if issubclass(annotation, BaseModel):
        return schema_from_model(annotation)
    if issubclass(annotation, bool):
        return LeafNode(kind="boolean")
    if issubclass(annotation, Enum):
        return LeafNode(kind="enum", values=tuple(str(m.value) for m in annotation))
    if issubclass(annotation, int):
        return _leaf("number", [Check(kind="int")], metadata)
    if issubclass(annotation, (float, Decimal)):
        return _leaf("number", [], metadata)
    if issubclass(annotation, date):
        return _leaf("date", [], metadata)
    if name in _EMAIL_TYPE_NAMES:
        return _leaf("string", [Check(kind="email")], metadata)
    if name in _URL_TYPE_NAMES or issubclass(annotation, AnyUrl):
        return _leaf("string", [Check(kind="url")], metadata)
    return _leaf("string", [], metadata)


def _leaf(kind: LeafKind, checks: list[Check], metadata: list[Any]) -> LeafNode:
    if kind == "string":
        attr_map = _LENGTH_ATTRS
    elif kind in ("number", "date"):
        attr_map = _BOUND_ATTRS
    else:
        attr_map = ()

    found = []
    for item in metadata:
        for attr, check_kind in attr_map:
            value = getattr(item, attr, None)
            if value is not None:
                found.append(Check(kind=check_kind, value=value))

    return LeafNode(kind=kind, checks=tuple(found + checks))
