from __future__ import annotations

import math

from spatialui.scene.builder import DEFAULT_PARAMS
from spatialui.state.controls import (
    DEFAULT_CONTROLS,
    ControlDescriptor,
    apply_control_edit,
    color_keys,
    panel_items,
)
from spatialui.state.param_store import ParamStore


def _descriptor(key: str) -> ControlDescriptor:
    return next(item for item in DEFAULT_CONTROLS if item.key == key)


def test_default_controls_cover_default_params() -> None:
    assert {item.key for item in DEFAULT_CONTROLS} == set(DEFAULT_PARAMS)
    rotate = _descriptor("rotate_x")
    assert (rotate.type, rotate.min, rotate.max, rotate.step) == ("range", -math.pi, math.pi, 0.01)
    assert _descriptor("color1").type == "color"
    assert _descriptor("wireframe").type == "boolean"


def test_panel_items_skip_unknown_keys() -> None:
    descriptors = (*DEFAULT_CONTROLS, ControlDescriptor("range", "ghost", "Ghost", min=0.0, max=1.0, step=0.1))
    items = panel_items(descriptors, DEFAULT_PARAMS)
    assert [descriptor.key for descriptor, _ in items] == [item.key for item in DEFAULT_CONTROLS]
    assert dict((descriptor.key, value) for descriptor, value in items)["scale"] == 1.5


def test_range_edit_is_clamped() -> None:
    store = ParamStore(DEFAULT_PARAMS)
    assert apply_control_edit(store, _descriptor("scale"), "9") is True
    assert store.get()["scale"] == 2.0
    assert apply_control_edit(store, _descriptor("spacing"), 0.1) is True
    assert store.get()["spacing"] == 0.5


def test_color_edit_keeps_slot_representation() -> None:
    store = ParamStore({"color1": "#ff6b6b", "color2": 0x4ECDC4}, color_keys=("color1", "color2"))
    assert apply_control_edit(store, _descriptor("color1"), 0x112233) is True
    assert store.get()["color1"] == "#112233"
    assert apply_control_edit(store, _descriptor("color2"), "#abc") is True
    assert store.get()["color2"] == 0xAABBCC


def test_boolean_edit_coerces_text() -> None:
    store = ParamStore(DEFAULT_PARAMS)
    apply_control_edit(store, _descriptor("wireframe"), "true")
    assert store.get()["wireframe"] is True
    apply_control_edit(store, _descriptor("wireframe"), "off")
    assert store.get()["wireframe"] is False


def test_invalid_or_unknown_edits_are_ignored() -> None:
    store = ParamStore({"scale": 1.0})
    notifications: list[object] = []
    store.subscribe(notifications.append)

    assert apply_control_edit(store, _descriptor("spacing"), 1.0) is False
    assert apply_control_edit(store, _descriptor("scale"), "wide") is False
    assert apply_control_edit(store, _descriptor("scale"), True) is False

    assert dict(store.get()) == {"scale": 1.0}
    assert notifications == []


def test_descriptor_payload_shape() -> None:
    assert _descriptor("color1").as_payload() == {"type": "color", "key": "color1", "label": "Color 1"}
    assert _descriptor("scale").as_payload() == {
        "type": "range",
        "key": "scale",
        "label": "Scale",
        "min": 0.5,
        "max": 2.0,
        "step": 0.1,
    }


def test_color_keys_lists_color_descriptors() -> None:
    assert color_keys(DEFAULT_CONTROLS) == ("color1", "color2", "color3", "color4")
