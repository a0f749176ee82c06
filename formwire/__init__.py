"""formwire: form submission transcoding and input constraint extraction."""

__version__ = "0.1.0"

from formwire.config import AttributeOptions, DecodeConfig, EmptyValuePolicy
from formwire.decoding import PathConflictError, decode_form_data
from formwire.schema import (
    FieldAttributes,
    get_validation_attributes,
    parse_schema_tree,
    schema_from_model,
)
from formwire.serialization import serialize_form_data
from formwire.types import UNDEFINED, Attachment
from formwire.validation import (
    FieldErrors,
    Issue,
    aggregate_issues,
    issues_from_jsonschema,
    issues_from_pydantic,
    strip_undefined,
    validate_decoded,
)

__all__ = [
    "__version__",
    # Configuration
    "AttributeOptions",
    "DecodeConfig",
    "EmptyValuePolicy",
    # Values
    "UNDEFINED",
    "Attachment",
    # Decoding / serialization
    "PathConflictError",
    "decode_form_data",
    "serialize_form_data",
    # Validation
    "FieldErrors",
    "Issue",
    "aggregate_issues",
    "issues_from_jsonschema",
    "issues_from_pydantic",
    "strip_undefined",
    "validate_decoded",
    # Schema
    "FieldAttributes",
    "get_validation_attributes",
    "parse_schema_tree",
    "schema_from_model",
]
