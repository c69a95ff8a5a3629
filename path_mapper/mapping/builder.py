"""Mapping DSL builder.

Provides a fluent builder for declaring mapping plans:

    plan = (
        mapping()
        .field("name", "user.name", default="Unknown")
        .field("age", "user.age", transform=int)
        .build()
    )
    result = plan.bind(UserSchema).map_one(payload)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from path_mapper.core.config import MapperConfig
from path_mapper.core.exceptions import PathSyntaxError, PlanCompilationError
from path_mapper.core.paths import MISSING, PathLike, to_segments
from path_mapper.mapping.entry import MappingEntry
from path_mapper.mapping.mapper import PathMapper


@dataclass(frozen=True)
class MappingPlan:
    """Compiled, validated mapping declaration."""

    entries: dict[str, MappingEntry]
    strict: bool = False

    def bind(self, schema: Any) -> PathMapper:
        """Create a PathMapper for this plan and *schema*."""
        return PathMapper(self.entries, schema, MapperConfig(strict=self.strict))


def mapping() -> MappingBuilder:
    """Entry point for the mapping DSL."""
    return MappingBuilder()


class MappingBuilder:
    """Fluent builder for mapping declarations."""

    def __init__(self) -> None:
        self._fields: dict[str, MappingEntry] = {}
        self._strict_mode = False

    def field(
        self,
        name: str,
        path: PathLike | None = None,
        *,
        default: Any = MISSING,
        transform: Callable[[Any], Any] | None = None,
    ) -> MappingBuilder:
        """Map output field *name* from *path* (defaults to *name*)."""
        self._fields[name] = MappingEntry(
            path=name if path is None else path,
            default=default,
            transform=transform,
        )
        return self

    def strict(self, enabled: bool = True) -> MappingBuilder:
        """Enable or disable strict mode for this mapping."""
        self._strict_mode = enabled
        return self

    def build(self) -> MappingPlan:
        """Compile and validate the declaration into a MappingPlan."""
        for name, entry in self._fields.items():
            if not name:
                raise PlanCompilationError("Field names must be non-empty")
            if entry.transform is not None and not callable(entry.transform):
                raise PlanCompilationError(f"Transform for field '{name}' is not callable")
            try:
                segments = to_segments(entry.path)
            except PathSyntaxError as e:
                raise PlanCompilationError(f"Field '{name}': {e}") from e
            if not segments:
                raise PlanCompilationError(f"Field '{name}' has an empty path")

        return MappingPlan(entries=dict(self._fields), strict=self._strict_mode)
