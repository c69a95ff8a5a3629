"""Schema validation adapter.

``validate(schema, candidate)`` runs a candidate dict through a schema and
returns ``Accepted`` or ``Rejected`` instead of raising. Pydantic models,
``TypeAdapter`` instances and any type pydantic can adapt are supported, as
are objects implementing the ``Validator`` protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol, Union, runtime_checkable

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from path_mapper.core.exceptions import SchemaError


@dataclass(frozen=True)
class Accepted:
    """Validation succeeded; ``value`` is the validator's output."""

    value: Any


@dataclass(frozen=True)
class Rejected:
    """Validation failed; ``issues`` is the validator's ordered issue list."""

    issues: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.issues:
            raise ValueError("Rejected requires at least one issue")


Outcome = Union[Accepted, Rejected]


@runtime_checkable
class Validator(Protocol):
    """Custom validator protocol."""

    def validate(self, candidate: dict[str, Any]) -> Outcome:
        """Validate a candidate dict."""
        ...


def _build_adapter(schema: Any) -> TypeAdapter[Any]:
    try:
        return TypeAdapter(schema)
    except PydanticUserError as e:
        raise SchemaError(f"Cannot build a validator for {schema!r}: {e}") from e


@lru_cache(maxsize=128)
def _cached_adapter(schema: Any) -> TypeAdapter[Any]:
    return _build_adapter(schema)


def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    """Return a TypeAdapter for *schema*, cached when the schema is hashable."""
    if isinstance(schema, TypeAdapter):
        return schema
    try:
        return _cached_adapter(schema)
    except TypeError:
        return _build_adapter(schema)


def _is_model_class(schema: Any) -> bool:
    # Parameterized generics such as dict[str, int] pass isinstance(..., type)
    # on some interpreters but are rejected by issubclass
    try:
        return isinstance(schema, type) and issubclass(schema, BaseModel)
    except TypeError:
        return False


def validate(schema: Any, candidate: dict[str, Any]) -> Outcome:
    """Validate *candidate* against *schema*.

    Detection order:
    1. Pydantic BaseModel subclass -> model_validate(candidate)
    2. Validator protocol instance -> schema.validate(candidate)
    3. Anything else -> TypeAdapter(schema).validate_python(candidate)

    Pydantic issues are the dicts from ``ValidationError.errors()``,
    passed through unchanged and in order.

    Raises:
        SchemaError: If the schema cannot be used for validation.
    """
    if _is_model_class(schema):
        try:
            return Accepted(schema.model_validate(candidate))
        except ValidationError as e:
            return Rejected(tuple(e.errors()))

    if not isinstance(schema, (type, TypeAdapter)) and isinstance(schema, Validator):
        outcome = schema.validate(candidate)
        if not isinstance(outcome, (Accepted, Rejected)):
            raise SchemaError(
                f"{type(schema).__name__}.validate must return Accepted or Rejected, "
                f"got {type(outcome).__name__}"
            )
        return outcome

    adapter = _adapter_for(schema)
    try:
        return Accepted(adapter.validate_python(candidate))
    except ValidationError as e:
        return Rejected(tuple(e.errors()))
