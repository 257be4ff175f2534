from __future__ import annotations

import pytest

from spatialui.platform.cursor import CanvasCursor
from spatialui.platform.presets import resolve
from spatialui.platform.safe_area import SafeAreaInsets, parse_inset_value, read_safe_area_insets


def test_parse_inset_value_handles_px_and_garbage() -> None:
    assert parse_inset_value("24px") == 24
    assert parse_inset_value(" env(safe-area-inset-top, 12px) ") == 12
    assert parse_inset_value("auto") == 0
    assert parse_inset_value("") == 0
    assert parse_inset_value(None) == 0


def test_read_safe_area_insets_from_properties() -> None:
    insets = read_safe_area_insets(
        {
            "--safe-area-inset-top": "44px",
            "--safe-area-inset-bottom": "34px",
            "--safe-area-inset-left": "bogus",
        }
    )
    assert insets == SafeAreaInsets(top=44, right=0, bottom=34, left=0)


def test_negative_insets_rejected() -> None:
    with pytest.raises(ValueError):
        SafeAreaInsets(top=-1)


def test_cursor_enter_and_leave() -> None:
    cursor = CanvasCursor(resolve("VisionPro"))
    assert cursor.current == "auto"
    assert cursor.enter() == "crosshair"
    assert cursor.current == "crosshair"
    assert cursor.leave() == "auto"
    assert CanvasCursor(resolve("Desktop")).enter() == "auto"
