"""Flattening of nested values into dot-path form data."""

from formwire.serialization.flatten import canonicalize, serialize_form_data

__all__ = [
    "canonicalize",
    "serialize_form_data",
]
