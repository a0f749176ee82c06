"""Input utilities for reading submissions and schema trees from files."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl

from pydantic import ValidationError

from formwire.schema.models import SchemaNode, parse_schema_tree


class SubmissionFormatError(ValueError):
    """Raised when a submission file cannot be parsed."""

    pass


class SchemaTreeError(ValueError):
    """Raised when a schema tree document is invalid."""

    pass


def parse_submission(text: str) -> list[tuple[str, Any]]:
    """Parse a raw submission body into ordered key/value pairs.

    Accepts ``application/x-www-form-urlencoded`` text, or a JSON array of
    ``[key, value]`` pairs. Blank values are kept.

    Raises:
        SubmissionFormatError: If a JSON body is malformed or not a pair list.
    """
    text = text.strip()
    if not text.startswith("["):
        return parse_qsl(text, keep_blank_values=True)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SubmissionFormatError(f"Invalid JSON submission: {e}") from e

    pairs: list[tuple[str, Any]] = []
    for index, pair in enumerate(data):
        if not isinstance(pair, list) or len(pair) != 2 or not isinstance(pair[0], str):
            raise SubmissionFormatError(
                f"Entry {index} is not a [key, value] pair: {pair!r}"
            )
        pairs.append((pair[0], pair[1]))
    return pairs


def read_submission(path: Path | str) -> list[tuple[str, Any]]:
    """Read a submission file. See :func:`parse_submission`."""
    with open(path) as f:
        return parse_submission(f.read())


def read_json(path: Path | str) -> Any:
    """Read a JSON document.

    Raises:
        ValueError: If the file is not valid JSON.
    """
    with open(path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e


def load_schema_tree(path: Path | str) -> SchemaNode:
    """Load and validate a schema tree document.

    Raises:
        SchemaTreeError: If the document does not describe a schema tree.
    """
    data = read_json(path)
    try:
        return parse_schema_tree(data)
    except ValidationError as e:
        raise SchemaTreeError(
            f"Schema tree validation failed for {path}: {e.error_count()} error(s)\n{e}"
        ) from e
