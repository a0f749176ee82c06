"""Schema trees and the native input attributes derived from them."""

from formwire.schema.attributes import FieldAttributes, get_validation_attributes
from formwire.schema.introspect import schema_from_model
from formwire.schema.models import (
    Check,
    CoerceNode,
    DefaultNode,
    LeafKind,
    LeafNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    PipelineNode,
    SchemaNode,
    parse_schema_tree,
    schema_tree_adapter,
)

__all__ = [
    # Tree
    "Check",
    "CoerceNode",
    "DefaultNode",
    "LeafKind",
    "LeafNode",
    "NullableNode",
    "ObjectNode",
    "OptionalNode",
    "PipelineNode",
    "SchemaNode",
    "parse_schema_tree",
    "schema_tree_adapter",
    # Derivation
    "FieldAttributes",
    "get_validation_attributes",
    "schema_from_model",
]
