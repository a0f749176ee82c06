"""Adapters between decoded submissions and external validation engines.

formwire does not validate data itself. These helpers prepare a decoded
submission for an engine (pydantic models or JSON Schema documents) and turn
the engine's failures into :class:`~formwire.validation.issues.Issue` lists.
"""

from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

import jsonschema
from pydantic import BaseModel, TypeAdapter, ValidationError

from formwire.types import UNDEFINED
from formwire.validation.issues import FieldErrors, Issue, aggregate_issues

ModelT = TypeVar("ModelT", bound=BaseModel)


def strip_undefined(value: Any) -> Any:
    """Remove ``UNDEFINED`` entries so engines see them as missing keys.

    Inside lists, ``UNDEFINED`` becomes ``None``.
    """
    if isinstance(value, Mapping):
        return {
            key: strip_undefined(item)
            for key, item in value.items()
            if item is not UNDEFINED
        }
    if isinstance(value, list):
        return [None if item is UNDEFINED else strip_undefined(item) for item in value]
    return value


def issues_from_pydantic(exc: ValidationError) -> list[Issue]:
    """Convert a pydantic ``ValidationError`` into issues, in error order."""
    return [Issue(path=tuple(error["loc"]), message=error["msg"]) for error in exc.errors()]


def iter_jsonschema_issues(schema: dict[str, Any], instance: Any) -> Iterator[Issue]:
    """Validate ``instance`` against a JSON Schema and yield its issues.

    A ``required`` failure is attributed to the missing property rather than
    to the object that lacks it, so it lands on the field it concerns.
    """
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    validator = validator_cls(schema)

    for error in validator.iter_errors(instance):
        path = tuple(error.absolute_path)
        if error.validator == "required" and isinstance(error.instance, Mapping):
            missing = [
                name for name in error.validator_value if name not in error.instance
            ]
            # One error per missing property, in the order they are listed
            name = next((m for m in missing if repr(m) in error.message), None)
            if name is not None:
                path = path + (name,)
        yield Issue(path=path, message=error.message)


def issues_from_jsonschema(schema: dict[str, Any], instance: Any) -> list[Issue]:
    """Validate ``instance`` against a JSON Schema and return its issues."""
    return list(iter_jsonschema_issues(schema, strip_undefined(instance)))


def validate_decoded(
    model: type[ModelT] | TypeAdapter,
    decoded: Mapping[str, Any],
) -> tuple[Any, FieldErrors]:
    """Validate a decoded submission with a pydantic model.

    Args:
        model: A ``BaseModel`` subclass or a ``TypeAdapter``.
        decoded: Output of :func:`~formwire.decoding.decode_form_data`.

    Returns:
        ``(value, {})`` on success, ``(None, field_errors)`` on failure.
    """
    adapter = model if isinstance(model, TypeAdapter) else TypeAdapter(model)
    try:
        return adapter.validate_python(strip_undefined(decoded)), {}
    except ValidationError as exc:
        return None, aggregate_issues(issues_from_pydantic(exc))
