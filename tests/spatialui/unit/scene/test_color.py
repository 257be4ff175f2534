from __future__ import annotations

import pytest

from spatialui.runtime.errors import InvalidColorError
from spatialui.scene.color import format_color, is_color, normalize_color


def test_hex_string_and_int_normalize_to_same_value() -> None:
    assert normalize_color("#ff6b6b") == normalize_color(0xFF6B6B) == 0xFF6B6B


def test_accepted_text_forms() -> None:
    assert normalize_color("FF6B6B") == 0xFF6B6B
    assert normalize_color(" #4ecdc4 ") == 0x4ECDC4
    assert normalize_color("#fff") == 0xFFFFFF


@pytest.mark.parametrize("value", ["#ff6b6", "#gg0000", "#ff_ff0", "", 0x1000000, -1, True, 1.5, None])
def test_invalid_colors_raise(value: object) -> None:
    with pytest.raises(InvalidColorError):
        normalize_color(value)  # type: ignore[arg-type]
    assert is_color(value) is False


def test_format_color_round_trip_text() -> None:
    assert format_color(0x45B7D1) == "#45b7d1"
    assert format_color("#F7B731") == "#f7b731"
