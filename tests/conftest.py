"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from formwire.schema import ObjectNode
from formwire.schema.builders import (
    boolean,
    coerce,
    date,
    enum,
    number,
    obj,
    optional,
    string,
)
from formwire.types import Attachment


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def text_file() -> Attachment:
    """A small text attachment."""
    return Attachment.from_bytes(b"content", name="test.txt", content_type="text/plain")


@pytest.fixture
def empty_file() -> Attachment:
    """An attachment from a file input left empty."""
    return Attachment(name="", size=0)


@pytest.fixture
def signup_schema() -> ObjectNode:
    """Schema tree of a typical signup form."""
    return obj(
        name=string(min_length=1),
        email=string(email=True),
        password=string(min_length=8),
        birth_date=coerce(date()),
        age=coerce(number(gte=18)),
        gender=enum("male", "female", "other"),
        accept_terms=coerce(boolean()),
        accept_optional=optional(coerce(boolean())),
    )
