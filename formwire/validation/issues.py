"""Aggregation of path-qualified validation issues into per-field errors."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from formwire.decoding.decoder import PATH_SEPARATOR

FieldErrors = dict[str, list[str]]


class Issue(BaseModel):
    """A single validation failure.

    An empty ``path`` marks a form-level issue that belongs to no field.
    """

    path: tuple[str | int, ...] = ()
    message: str

    @property
    def field(self) -> str:
        """The dot-path of the field this issue belongs to."""
        return PATH_SEPARATOR.join(str(segment) for segment in self.path)

    @classmethod
    def coerce(cls, value: "Issue | Mapping[str, Any] | Sequence[Any]") -> "Issue":
        """Build an issue from a model, a ``(path, message)`` pair, or an
        error dict with ``loc``/``msg`` keys (pydantic) or ``path``/``message``.

        A plain string path is a single segment.
        """
        if isinstance(value, Issue):
            return value
        if isinstance(value, Mapping):
            path = value.get("loc", value.get("path", ()))
            message = value.get("msg", value.get("message", ""))
        else:
            path, message = value
        if isinstance(path, str):
            path = (path,) if path else ()
        return cls(path=tuple(path), message=message)


def aggregate_issues(
    issues: Iterable["Issue | Mapping[str, Any] | Sequence[Any]"],
) -> FieldErrors:
    """Group issue messages by field dot-path.

    Messages keep the order the issues were supplied in, duplicates included.
    Issues with an empty path are dropped.

    Args:
        issues: Issues as models, ``(path, message)`` pairs or error dicts.

    Returns:
        Mapping of dot-path to the ordered list of its messages.
    """
    errors: FieldErrors = {}
    for raw in issues:
        issue = Issue.coerce(raw)
        if not issue.path:
            continue
        errors.setdefault(issue.field, []).append(issue.message)
    return errors
