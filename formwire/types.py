"""Value types shared by the decoder, serializer and validation adapters."""

from typing import Any

from pydantic import BaseModel


class _Undefined:
    """A key that is present in a submission but carries no value.

    Falsy, and dropped from mappings by the serializer the same way a JSON
    encoder drops an ``undefined`` property.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class Attachment(BaseModel):
    """A file uploaded as part of a submission.

    Attachments are opaque to the decoder: they are stored as-is, even when
    empty, and never go through the empty-value policy.
    """

    name: str = ""
    size: int = 0
    content_type: str = "application/octet-stream"
    data: bytes = b""

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        name: str = "",
        content_type: str = "application/octet-stream",
    ) -> "Attachment":
        """Build an attachment whose size is taken from ``data``."""
        return cls(name=name, size=len(data), content_type=content_type, data=data)


def is_attachment(value: Any) -> bool:
    """Return True if ``value`` looks like an uploaded file.

    Recognises :class:`Attachment`, raw ``bytes`` and framework upload objects
    exposing a file name (``filename`` or ``name``) together with ``size``.
    """
    if isinstance(value, (Attachment, bytes, bytearray)):
        return True
    if isinstance(value, (str, dict, list, tuple)):
        return False
    has_name = hasattr(value, "filename") or hasattr(value, "name")
    return has_name and hasattr(value, "size")
