"""Path-based mapper.

Extracts fields from a nested source by path, applies defaults and
transforms, and validates the assembled dict against a schema.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from path_mapper.core.config import MapperConfig
from path_mapper.core.exceptions import MappingDeclarationError
from path_mapper.core.paths import MISSING, get
from path_mapper.core.validation import Accepted, validate
from path_mapper.mapping.entry import MappingDeclaration, MappingEntry
from path_mapper.mapping.result import Failure, MappingResult, Success

logger = logging.getLogger(__name__)


def _normalize_entries(
    mapping: MappingDeclaration,
    config: MapperConfig,
) -> dict[str, MappingEntry]:
    """Coerce every declared entry, skipping empty ones."""
    entries: dict[str, MappingEntry] = {}
    for field_name, value in mapping.items():
        # An entry with nothing in it (None, "", {}) has no path to resolve
        if not value:
            if config.strict:
                raise MappingDeclarationError(field_name, "entry is empty")
            if config.warn_on_skip:
                logger.warning("Skipping field '%s': mapping entry is empty", field_name)
            continue
        entries[field_name] = MappingEntry.coerce(field_name, value)
    return entries


def resolve_field(source: Any, entry: MappingEntry) -> Any:
    """Resolve one entry against *source*: path lookup, default, then transform.

    A declared transform always runs. When the path does not resolve and no
    default is declared it receives ``MISSING``, which is falsy, so
    ``lambda v: v or []`` supplies a fallback. ``MISSING`` is returned when
    nothing produced a value.
    """
    value = get(source, entry.path, entry.default)
    if entry.transform is not None:
        value = entry.transform(value)
    return value


class PathMapper:
    """Reusable mapper for one mapping declaration and schema.

    Args:
        mapping: Output field name -> MappingEntry (or dict / path string).
        schema: Pydantic model, TypeAdapter, adaptable type or Validator.
        config: Optional MapperConfig.

    Raises:
        MappingDeclarationError: If an entry cannot be read, or an entry is
            empty and ``config.strict`` is set.
    """

    def __init__(
        self,
        mapping: MappingDeclaration,
        schema: Any,
        config: MapperConfig | None = None,
    ) -> None:
        self._config = config or MapperConfig()
        self._entries = _normalize_entries(mapping, self._config)
        self._schema = schema

    @property
    def fields(self) -> list[str]:
        """Declared output field names, sorted alphabetically."""
        return sorted(self._entries)

    @property
    def schema(self) -> Any:
        return self._schema

    def build_candidate(self, source: Any) -> dict[str, Any]:
        """Assemble the unvalidated candidate dict for *source*.

        Fields that are still missing after defaulting are left out, so the
        schema sees them as absent.
        """
        candidate: dict[str, Any] = {}
        for field_name, entry in self._entries.items():
            value = resolve_field(source, entry)
            if value is not MISSING:
                candidate[field_name] = value
        return candidate

    def map_one(self, source: Any) -> MappingResult:
        """Map *source* and validate it. Rejection is returned as Failure."""
        candidate = self.build_candidate(source)
        outcome = validate(self._schema, candidate)
        if isinstance(outcome, Accepted):
            return Success(outcome.value)

        logger.debug(
            "Validation rejected %d field(s) with %d issue(s)",
            len(candidate),
            len(outcome.issues),
        )
        return Failure(outcome.issues)

    def map_many(self, sources: Iterable[Any]) -> list[MappingResult]:
        """Map all sources via map_one."""
        return [self.map_one(source) for source in sources]


def map_and_validate(
    source: Any,
    mapping: MappingDeclaration,
    schema: Any,
    *,
    config: MapperConfig | None = None,
) -> MappingResult:
    """Map values out of *source* per *mapping* and validate them against *schema*.

    Example:
        >>> from typing_extensions import TypedDict
        >>> class User(TypedDict):
        ...     name: str
        ...     age: int
        >>> source = {"user": {"name": "Alice", "age": "30"}}
        >>> mapping = {
        ...     "name": {"path": "user.name"},
        ...     "age": {"path": "user.age", "transform": int},
        ... }
        >>> map_and_validate(source, mapping, User)
        Success(value={'name': 'Alice', 'age': 30}, is_error=False, issues=None)

    Returns:
        ``Success`` with the validator's output, or ``Failure`` with its issues.
    """
    return PathMapper(mapping, schema, config).map_one(source)
