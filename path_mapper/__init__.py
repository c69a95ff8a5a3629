"""PathMapper - path-based extraction and schema validation for nested data."""

from __future__ import annotations

from path_mapper.core.config import MapperConfig
from path_mapper.core.exceptions import (
    MappingDeclarationError,
    MappingError,
    PathMapperError,
    PathSyntaxError,
    PlanCompilationError,
    SchemaError,
    ValidationRejectedError,
)
from path_mapper.core.paths import MISSING, get, has
from path_mapper.core.validation import Accepted, Rejected, Validator, validate
from path_mapper.mapping.builder import MappingBuilder, MappingPlan, mapping
from path_mapper.mapping.entry import MappingEntry
from path_mapper.mapping.mapper import PathMapper, map_and_validate
from path_mapper.mapping.result import Failure, MappingResult, Success

__all__ = [
    # Mapping
    "map_and_validate",
    "PathMapper",
    "MappingEntry",
    "MappingBuilder",
    "MappingPlan",
    "mapping",
    # Results
    "Success",
    "Failure",
    "MappingResult",
    # Paths
    "get",
    "has",
    "MISSING",
    # Validation
    "validate",
    "Validator",
    "Accepted",
    "Rejected",
    # Config
    "MapperConfig",
    # Exceptions
    "PathMapperError",
    "MappingError",
    "MappingDeclarationError",
    "PlanCompilationError",
    "PathSyntaxError",
    "SchemaError",
    "ValidationRejectedError",
]
