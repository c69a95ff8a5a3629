"""Path resolution over nested data.

Paths use dot notation with optional bracket segments:

    user.name              -> ("user", "name")
    users.0.name           -> ("users", "0", "name")
    users[0]['first name'] -> ("users", 0, "first name")

A path may also be given as a list or tuple of segments.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, Final, Union

from path_mapper.core.exceptions import PathSyntaxError

Segment = Union[str, int]
PathLike = Union[str, Sequence[Segment]]


class _Missing:
    """Sentinel type for values that are not present."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

_TOKEN_PATTERN = re.compile(
    r"""
      (?P<name>[^.\[\]]+)
    | \[(?P<index>\d+)\]
    | \[(?P<quote>['"])(?P<key>.*?)(?P=quote)\]
    | (?P<dot>\.)
    """,
    re.VERBOSE,
)

# Values that are never traversed by attribute lookup
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool, type(None))


@lru_cache(maxsize=512)
def parse_path(path: str) -> tuple[Segment, ...]:
    """Split a path string into its segments.

    Raises:
        PathSyntaxError: If a bracket segment is malformed or unterminated.
    """
    segments: list[Segment] = []
    pos = 0
    while pos < len(path):
        match = _TOKEN_PATTERN.match(path, pos)
        if match is None:
            raise PathSyntaxError(path, f"unexpected character at position {pos}")
        if match.group("name") is not None:
            segments.append(match.group("name"))
        elif match.group("index") is not None:
            segments.append(int(match.group("index")))
        elif match.group("quote") is not None:
            segments.append(match.group("key"))
        pos = match.end()
    return tuple(segments)


def to_segments(path: PathLike) -> tuple[Segment, ...]:
    """Normalize a path string or segment sequence to a tuple of segments.

    Raises:
        PathSyntaxError: If a sequence holds anything but str or int segments.
    """
    if isinstance(path, str):
        return parse_path(path)
    segments = tuple(path)
    for segment in segments:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise PathSyntaxError(
                repr(segments), f"segment {segment!r} is not a str or int"
            )
    return segments


def _as_index(segment: Segment) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if segment.isdigit():
        return int(segment)
    return None


def _step(current: Any, segment: Segment) -> Any:
    """Resolve one segment against the current value."""
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        # "0" and 0 address the same key, whichever one the mapping uses
        alternate: Segment | None = None
        if isinstance(segment, int):
            alternate = str(segment)
        elif segment.isdigit():
            alternate = int(segment)
        if alternate is not None and alternate in current:
            return current[alternate]
        return MISSING

    if isinstance(current, Sequence) and not isinstance(current, (str, bytes, bytearray)):
        index = _as_index(segment)
        if index is None or index >= len(current):
            return MISSING
        return current[index]

    if isinstance(current, _SCALAR_TYPES):
        return MISSING
    if not isinstance(segment, str) or segment.startswith("_"):
        return MISSING
    return getattr(current, segment, MISSING)


def get(obj: Any, path: PathLike, default: Any = MISSING) -> Any:
    """Return the value at *path* inside *obj*, or *default* if it does not resolve.

    Mappings are traversed by key, lists and tuples by non-negative index,
    and other objects by public attribute. ``None`` stored at the path is a
    present value and is returned as-is.

    Args:
        obj: The nested structure to read from.
        path: Dotted path string or a sequence of segments.
        default: Value returned when any segment is missing.

    Returns:
        The resolved value, or *default*.
    """
    segments = to_segments(path)
    if not segments:
        return default

    current = obj
    for segment in segments:
        current = _step(current, segment)
        if current is MISSING:
            return default
    return current


def has(obj: Any, path: PathLike) -> bool:
    """Check if *path* resolves to a present value inside *obj*."""
    return get(obj, path) is not MISSING
