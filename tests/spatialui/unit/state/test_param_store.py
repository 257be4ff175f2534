from __future__ import annotations

import pytest

from spatialui.runtime.errors import InvalidColorError
from spatialui.state.param_store import ParamSnapshot, ParamStore


def test_set_merges_and_notifies_full_set_each_time() -> None:
    store = ParamStore({"a": 0, "b": 0, "c": 5})
    received: list[ParamSnapshot] = []
    store.subscribe(received.append)

    store.set({"a": 1})
    store.set({"b": 2})

    assert dict(store.get()) == {"a": 1, "b": 2, "c": 5}
    assert len(received) == 2
    assert dict(received[0].values) == {"a": 1, "b": 0, "c": 5}
    assert dict(received[1].values) == {"a": 1, "b": 2, "c": 5}
    assert [snapshot.revision for snapshot in received] == [1, 2]


def test_listeners_run_before_set_returns() -> None:
    store = ParamStore({"a": 0})
    seen: list[int] = []
    store.subscribe(lambda snapshot: seen.append(int(snapshot["a"])))
    store.set({"a": 3})
    assert seen == [3]


def test_unknown_keys_are_ignored() -> None:
    store = ParamStore({"a": 1})
    received: list[ParamSnapshot] = []
    store.subscribe(received.append)

    store.set({"missing": 9, "a": 2})

    assert dict(store.get()) == {"a": 2}
    assert store.keys() == ("a",)
    assert len(received) == 1


def test_mismatched_value_types_are_ignored() -> None:
    store = ParamStore({"scale": 1.5, "wireframe": False, "color": "#ff6b6b"})
    store.set({"scale": True, "wireframe": 1, "color": "not-a-color"})
    assert dict(store.get()) == {"scale": 1.5, "wireframe": False, "color": "#ff6b6b"}

    store.set({"scale": 2, "wireframe": True, "color": 0x00FF00})
    assert dict(store.get()) == {"scale": 2, "wireframe": True, "color": 0x00FF00}
    store.set({"color": "#0000ff"})
    assert store.get()["color"] == "#0000ff"


def test_get_returns_read_only_copy() -> None:
    store = ParamStore({"a": 1})
    view = store.get()
    with pytest.raises(TypeError):
        view["a"] = 2  # type: ignore[index]
    store.set({"a": 5})
    assert view["a"] == 1


def test_key_order_is_preserved() -> None:
    store = ParamStore({"z": 1, "a": 2, "m": 3})
    store.set({"a": 9})
    assert store.keys() == ("z", "a", "m")
    assert tuple(store.get()) == ("z", "a", "m")


def test_unsubscribe_stops_notifications() -> None:
    store = ParamStore({"a": 0})
    received: list[ParamSnapshot] = []
    subscription = store.subscribe(received.append)
    store.set({"a": 1})
    store.unsubscribe(subscription)
    store.unsubscribe(subscription)
    store.set({"a": 2})
    assert len(received) == 1
    assert store.revision() == 2


def test_int_initialized_color_slot_accepts_hex_text() -> None:
    store = ParamStore({"color1": 0xFF6B6B, "scale": 1.0}, color_keys=("color1",))

    store.set({"color1": "#00ff00"})

    assert store.get()["color1"] == "#00ff00"


def test_color_slot_rejects_out_of_range_numbers() -> None:
    store = ParamStore({"color1": 0xFF6B6B}, color_keys=("color1",))

    store.set({"color1": 1.5})
    store.set({"color1": -5})
    store.set({"color1": 0x1000000})
    store.set({"color1": True})

    assert store.get()["color1"] == 0xFF6B6B
    assert store.revision() == 4


def test_invalid_initial_color_is_rejected() -> None:
    with pytest.raises(InvalidColorError):
        ParamStore({"color1": 1.5}, color_keys=("color1",))


def test_color_keys_missing_from_initial_values_are_skipped() -> None:
    store = ParamStore({"scale": 1.0}, color_keys=("color1",))
    assert store.keys() == ("scale",)
