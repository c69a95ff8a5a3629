"""Mapping result variants.

Every mapping call returns exactly one of ``Success`` or ``Failure``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, NoReturn, Union

from path_mapper.core.exceptions import ValidationRejectedError


@dataclass(frozen=True)
class Success:
    """Validated output of one mapping call."""

    value: Any
    is_error: Literal[False] = field(default=False, init=False)
    issues: None = field(default=None, init=False)

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Validation issues of one mapping call, in validator order."""

    issues: Sequence[Any]
    is_error: Literal[True] = field(default=True, init=False)
    value: None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not self.issues:
            raise ValueError("Failure requires at least one issue")
        object.__setattr__(self, "issues", tuple(self.issues))

    def unwrap(self) -> NoReturn:
        """Raise ValidationRejectedError carrying the issues."""
        raise ValidationRejectedError(self.issues)


MappingResult = Union[Success, Failure]
