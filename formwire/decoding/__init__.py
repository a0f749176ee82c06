"""Decoding of flat form submissions into nested objects."""

from formwire.decoding.decoder import (
    PATH_SEPARATOR,
    PathConflictError,
    decode_form_data,
    iter_submission,
)

__all__ = [
    "PATH_SEPARATOR",
    "PathConflictError",
    "decode_form_data",
    "iter_submission",
]
