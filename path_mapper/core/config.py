"""Mapper configuration."""

from __future__ import annotations

from pydantic import BaseModel


class MapperConfig(BaseModel):
    """Configuration for PathMapper instances."""

    strict: bool = False
    warn_on_skip: bool = True
