"""Validation issues, field error maps and engine adapters."""

from formwire.validation.engines import (
    issues_from_jsonschema,
    issues_from_pydantic,
    iter_jsonschema_issues,
    strip_undefined,
    validate_decoded,
)
from formwire.validation.issues import FieldErrors, Issue, aggregate_issues

__all__ = [
    "FieldErrors",
    "Issue",
    "aggregate_issues",
    "issues_from_jsonschema",
    "issues_from_pydantic",
    "iter_jsonschema_issues",
    "strip_undefined",
    "validate_decoded",
]
