"""Color normalization for scene appearance values."""

from __future__ import annotations

from typing import TypeAlias

from spatialui.runtime.errors import InvalidColorError

MAX_COLOR = 0xFFFFFF
_HEX_DIGITS = frozenset("0123456789abcdef")

ColorValue: TypeAlias = str | int


def normalize_color(value: ColorValue) -> int:
    """Return a 24-bit RGB int from ``#rrggbb``/``#rgb`` text or an int."""
    if isinstance(value, bool):
        raise InvalidColorError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= MAX_COLOR:
            return value
        raise InvalidColorError(f"Color out of range: {value!r}")
    if not isinstance(value, str):
        raise InvalidColorError(f"Invalid color: {value!r}")
    digits = value.strip().lower().removeprefix("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or any(ch not in _HEX_DIGITS for ch in digits):
        raise InvalidColorError(f"Invalid color: {value!r}")
    return int(digits, 16)


def is_color(value: object) -> bool:
    try:
        normalize_color(value)  # type: ignore[arg-type]
    except InvalidColorError:
        return False
    return True


def format_color(value: ColorValue) -> str:
    """Return the canonical ``#rrggbb`` text form."""
    return f"#{normalize_color(value):06x}"


__all__ = ["MAX_COLOR", "ColorValue", "format_color", "is_color", "normalize_color"]
