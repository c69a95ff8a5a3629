"""Mapping declaration data classes.

A mapping declaration maps output field names to ``MappingEntry`` objects.
Entries may also be written as plain dicts or bare path strings:

    {
        "name": MappingEntry("user.name", default="Unknown"),
        "email": {"path": "user.email", "transform": str.lower},
        "age": "user.age",
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from path_mapper.core.exceptions import MappingDeclarationError, PathSyntaxError
from path_mapper.core.paths import MISSING, PathLike, to_segments

_ENTRY_KEYS = frozenset({"path", "default", "transform"})


@dataclass(frozen=True)
class MappingEntry:
    """How to produce one output field from the source object."""

    path: PathLike
    default: Any = MISSING
    transform: Callable[[Any], Any] | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @classmethod
    def coerce(cls, field_name: str, value: Any) -> MappingEntry:
        """Build a MappingEntry from an entry, a dict, or a path string.

        Raises:
            MappingDeclarationError: If *value* cannot be read as an entry.
        """
        if isinstance(value, MappingEntry):
            entry = value
        elif isinstance(value, str):
            entry = cls(path=value)
        elif isinstance(value, Mapping):
            unknown = set(value) - _ENTRY_KEYS
            if unknown:
                raise MappingDeclarationError(field_name, f"unknown keys {sorted(unknown)}")
            if "path" not in value:
                raise MappingDeclarationError(field_name, "missing 'path'")
            entry = cls(
                path=value["path"],
                default=value.get("default", MISSING),
                transform=value.get("transform"),
            )
        else:
            raise MappingDeclarationError(
                field_name, f"expected MappingEntry, dict or str, got {type(value).__name__}"
            )

        if entry.transform is not None and not callable(entry.transform):
            raise MappingDeclarationError(field_name, "transform must be callable")
        if not isinstance(entry.path, str) and not isinstance(entry.path, (list, tuple)):
            raise MappingDeclarationError(
                field_name, f"path must be a str or a sequence, got {type(entry.path).__name__}"
            )
        # Parse eagerly so a malformed path fails at declaration time
        try:
            to_segments(entry.path)
        except PathSyntaxError as e:
            raise MappingDeclarationError(field_name, str(e)) from e
        return entry


MappingDeclaration = Mapping[str, Union[MappingEntry, Mapping[str, Any], str, None]]
