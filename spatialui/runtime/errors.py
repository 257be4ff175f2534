"""Shared exception types for platform, state and scene modules."""

from __future__ import annotations


class SpatialUIError(Exception):
    """Base class for spatialui failures surfaced to callers."""


class PresetNotFoundError(SpatialUIError, LookupError):
    """Raised when a preset name is not in the built-in table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown preset: {name!r}")
        self.name = name


class InvalidPresetError(SpatialUIError, ValueError):
    """Raised when a caller-supplied preset has out-of-range fields."""


class InvalidColorError(SpatialUIError, ValueError):
    """Raised when a color value is neither #rrggbb text nor a 24-bit int."""


class DuplicateNodeKeyError(SpatialUIError, ValueError):
    """Raised when two sibling scene nodes share a key."""


__all__ = [
    "DuplicateNodeKeyError",
    "InvalidColorError",
    "InvalidPresetError",
    "PresetNotFoundError",
    "SpatialUIError",
]
