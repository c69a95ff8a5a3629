"""Mapper protocol.

All mappers implement this interface: one source object in, one
``MappingResult`` out.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from path_mapper.mapping.result import MappingResult


@runtime_checkable
class Mapper(Protocol):
    """Base mapper protocol."""

    def map_one(self, source: Any) -> MappingResult:
        """Map and validate a single source object."""
        ...

    def map_many(self, sources: Iterable[Any]) -> list[MappingResult]:
        """Map and validate each source object independently."""
        ...
