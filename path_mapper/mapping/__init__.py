"""Mapping layer - extract, default, transform and validate."""

from __future__ import annotations

from path_mapper.mapping.builder import MappingBuilder, MappingPlan, mapping
from path_mapper.mapping.entry import MappingDeclaration, MappingEntry
from path_mapper.mapping.mapper import PathMapper, map_and_validate, resolve_field
from path_mapper.mapping.protocol import Mapper
from path_mapper.mapping.result import Failure, MappingResult, Success

__all__ = [
    "Mapper",
    "PathMapper",
    "map_and_validate",
    "resolve_field",
    "MappingEntry",
    "MappingDeclaration",
    "MappingBuilder",
    "MappingPlan",
    "mapping",
    "Success",
    "Failure",
    "MappingResult",
]
