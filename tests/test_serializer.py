"""Tests for the nested-value serializer."""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum, IntEnum
from uuid import UUID

from formwire.decoding import decode_form_data
from formwire.serialization import canonicalize, serialize_form_data
from formwire.types import UNDEFINED, Attachment


class Color(Enum):
    RED = "red"


class Shade(str, Enum):
    DARK = "dark"


class Level(IntEnum):
    HIGH = 3


class TestSerializeFormData:
    """Tests for serialize_form_data()."""

    def test_simple_object(self) -> None:
        """Test that a flat mapping is returned as is."""
        assert serialize_form_data({"name": "John", "age": 25}) == {"name": "John", "age": 25}

    def test_nested_objects_flatten(self) -> None:
        """Test that nested mappings collapse into dot-paths."""
        data = {"user": {"name": "John", "profile": {"email": "john@example.com"}}}

        assert serialize_form_data(data) == {
            "user.name": "John",
            "user.profile.email": "john@example.com",
        }

    def test_arrays_are_leaves(self) -> None:
        """Test that lists are kept whole, even when they hold mappings."""
        data = {
            "user": {"profile": {"name": "Jane"}},
            "tags": ["x", "y"],
            "users": [{"name": "John", "age": 25}],
        }

        assert serialize_form_data(data) == {
            "user.profile.name": "Jane",
            "tags": ["x", "y"],
            "users": [{"name": "John", "age": 25}],
        }

    def test_dates_become_text(self) -> None:
        """Test that temporal values take their ISO form."""
        data = {
            "created": datetime(2023, 1, 1, tzinfo=timezone.utc),
            "day": date(2023, 6, 15),
        }

        result = serialize_form_data(data)

        assert result["created"].startswith("2023-01-01T00:00:00")
        assert result["day"] == "2023-06-15"

    def test_undefined_values_dropped(self) -> None:
        """Test that UNDEFINED properties vanish while None stays."""
        result = serialize_form_data({"name": "John", "email": None, "phone": UNDEFINED})

        assert result == {"name": "John", "email": None}
        assert "phone" not in result

    def test_callables_dropped(self) -> None:
        """Test that functions are not serialized."""
        result = serialize_form_data({"name": "John", "fn": lambda: "test"})

        assert result == {"name": "John"}

    def test_empty_object_vanishes(self) -> None:
        """Test that an empty mapping contributes no key."""
        result = serialize_form_data({"emptyObj": {}, "emptyArr": [], "a": {"b": {}}})

        assert result == {"emptyArr": []}

    def test_scalars_and_booleans(self) -> None:
        """Test that JSON scalars pass through."""
        data = {"isActive": True, "isPublic": False, "score": 100.5, "count": 0}

        assert serialize_form_data(data) == data

    def test_non_mapping_root_passthrough(self) -> None:
        """Test that scalars and lists are returned unflattened."""
        assert serialize_form_data("hello") == "hello"
        assert serialize_form_data([{"a": {"b": 1}}]) == [{"a": {"b": 1}}]
        assert serialize_form_data(None) is None

    def test_mixin_enums_become_plain_values(self) -> None:
        """Test that str and int enum members lose their enum type."""
        result = serialize_form_data({"shade": Shade.DARK, "level": Level.HIGH})

        assert result == {"shade": "dark", "level": 3}
        assert type(result["shade"]) is str
        assert type(result["level"]) is int

    def test_attachment_excluded(self, text_file: Attachment) -> None:
        """Test that attachments are left out of the redisplay data."""
        result = serialize_form_data({"name": "John", "avatar": text_file})

        assert result == {"name": "John"}

    def test_rich_scalar_types(self) -> None:
        """Test Decimal, UUID and Enum canonicalization."""
        uid = UUID("12345678-1234-5678-1234-567812345678")
        result = serialize_form_data({"price": Decimal("1.50"), "id": uid, "color": Color.RED})

        assert result == {"price": "1.50", "id": str(uid), "color": "red"}

    def test_complex_nested_structure(self) -> None:
        """Test a mix of nesting, dates, lists and booleans."""
        created = datetime(2023, 1, 1)
        data = {
            "user": {
                "name": "John",
                "createdAt": created,
                "tags": ["admin", "user"],
                "settings": {"theme": "dark", "notifications": True},
            },
            "posts": [{"title": "Post 1", "published": True}],
        }

        assert serialize_form_data(data) == {
            "user.name": "John",
            "user.createdAt": created.isoformat(),
            "user.tags": ["admin", "user"],
            "user.settings.theme": "dark",
            "user.settings.notifications": True,
            "posts": [{"title": "Post 1", "published": True}],
        }


class TestCanonicalize:
    """Tests for the JSON-semantics deep copy."""

    def test_undefined_in_list_becomes_none(self) -> None:
        """Test array semantics for values a JSON encoder cannot carry."""
        assert canonicalize({"a": [UNDEFINED, "x"]}) == {"a": [None, "x"]}

    def test_deep_copy(self) -> None:
        """Test that the result shares no containers with the input."""
        data = {"a": {"b": [1, 2]}}
        result = canonicalize(data)

        result["a"]["b"].append(3)

        assert data == {"a": {"b": [1, 2]}}

    def test_non_finite_floats_become_none(self) -> None:
        """Test that NaN is not carried through."""
        assert canonicalize({"x": float("nan")}) == {"x": None}


class TestRoundTrip:
    """Tests for decoding then flattening."""

    def test_flatten_restores_field_names(self) -> None:
        """Test that flattening a decoded submission restores its dotted keys."""
        pairs = [
            ("name", "John"),
            ("user.profile.name", "Jane"),
            ("user.email", "jane@example.com"),
            ("tags", "a"),
            ("tags", "b"),
            ("blank", ""),
        ]

        result = serialize_form_data(decode_form_data(pairs, "undefined"))

        assert result == {
            "name": "John",
            "user.profile.name": "Jane",
            "user.email": "jane@example.com",
            "tags": ["a", "b"],
        }

    def test_edge_separators_round_trip(self) -> None:
        """Test that leading and trailing dots survive a round trip."""
        pairs = [(".field", "v"), ("field.", "v2")]

        result = serialize_form_data(decode_form_data(pairs))

        assert result == {".field": "v", "field.": "v2"}
