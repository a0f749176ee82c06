"""Configuration objects passed explicitly into each decode / extract call."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class EmptyValuePolicy(str, Enum):
    """What a zero-length text value decodes to."""

    UNDEFINED = "undefined"  # formwire.types.UNDEFINED
    NULL = "null"  # None
    EMPTY_STRING = "empty-string"  # ""


class DecodeConfig(BaseModel):
    """Configuration for decoding a submission.

    Attributes:
        empty_value: Replacement for empty text values. A plain string that is
            not one of the policy values leaves empty text unchanged.
        on_conflict: What to do when a dot-path walks through a key that
            already holds a non-mapping value. ``"overwrite"`` replaces the
            value with a mapping, ``"raise"`` raises ``PathConflictError``.
    """

    empty_value: EmptyValuePolicy | str = EmptyValuePolicy.UNDEFINED
    on_conflict: Literal["overwrite", "raise"] = "overwrite"

    model_config = ConfigDict(frozen=True)


class AttributeOptions(BaseModel):
    """Options for deriving native input attributes from a schema tree."""

    infer_type_hint: bool = False

    model_config = ConfigDict(frozen=True)
