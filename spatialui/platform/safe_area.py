"""Safe-area inset snapshots parsed from computed style properties."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

_PX_VALUE = re.compile(r"(\d+)px")
_PROPERTY_PREFIX = "--safe-area-inset-"


@dataclass(frozen=True, slots=True)
class SafeAreaInsets:
    """Platform-reserved margins in pixels; stale once the viewport changes."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        for side in ("top", "right", "bottom", "left"):
            if int(getattr(self, side)) < 0:
                raise ValueError(f"SafeAreaInsets.{side} must be non-negative")


def parse_inset_value(raw: str | None) -> int:
    """Parse ``"12px"``-style values; anything unparseable is 0."""
    if not raw:
        return 0
    match = _PX_VALUE.search(str(raw))
    return int(match.group(1)) if match else 0


def read_safe_area_insets(properties: Mapping[str, str]) -> SafeAreaInsets:
    """Build insets from ``--safe-area-inset-*`` computed property values."""
    return SafeAreaInsets(
        top=parse_inset_value(properties.get(f"{_PROPERTY_PREFIX}top")),
        right=parse_inset_value(properties.get(f"{_PROPERTY_PREFIX}right")),
        bottom=parse_inset_value(properties.get(f"{_PROPERTY_PREFIX}bottom")),
        left=parse_inset_value(properties.get(f"{_PROPERTY_PREFIX}left")),
    )


__all__ = ["SafeAreaInsets", "parse_inset_value", "read_safe_area_insets"]
