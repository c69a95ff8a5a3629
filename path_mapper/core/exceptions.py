"""PathMapper exception hierarchy.

Validation rejection is reported as data (``Failure``), not raised. The
exceptions here cover declaration and configuration problems, plus the
explicit ``Failure.unwrap()`` escape hatch.
"""

from __future__ import annotations

from typing import Any, Sequence


class PathMapperError(Exception):
    """Base exception for all PathMapper errors."""


# --- Mapping declaration ---


class MappingError(PathMapperError):
    """Base for mapping declaration errors."""


class MappingDeclarationError(MappingError):
    """Raised when a mapping entry cannot be understood."""

    def __init__(self, field_name: str, detail: str) -> None:
        self.field_name = field_name
        super().__init__(f"Invalid mapping entry for '{field_name}': {detail}")


class PlanCompilationError(MappingError):
    """Raised when a MappingPlan fails validation during build()."""


# --- Paths ---


class PathSyntaxError(PathMapperError):
    """Raised when a path string cannot be parsed."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(f"Invalid path '{path}': {detail}")


# --- Validation ---


class SchemaError(PathMapperError):
    """Raised when a schema cannot be used for validation."""


class ValidationRejectedError(PathMapperError):
    """Raised by ``Failure.unwrap()``; carries the validator's issues."""

    def __init__(self, issues: Sequence[Any]) -> None:
        self.issues = tuple(issues)
        super().__init__(f"Validation failed with {len(self.issues)} issue(s)")
