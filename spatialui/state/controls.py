"""Declarative control-panel descriptors bound to a ParamStore."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

from spatialui.runtime.errors import InvalidColorError
from spatialui.scene.color import format_color, normalize_color
from spatialui.state.param_store import ParamStore, ParamValue

_LOG = logging.getLogger(__name__)

ControlType: TypeAlias = Literal["range", "color", "boolean"]


@dataclass(frozen=True, slots=True)
class ControlDescriptor:
    """One control the external panel renders for a parameter."""

    type: ControlType
    key: str
    label: str
    min: float | None = None
    max: float | None = None
    step: float | None = None

    def as_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"type": self.type, "key": self.key, "label": self.label}
        if self.type == "range":
            payload.update({"min": self.min, "max": self.max, "step": self.step})
        return payload


DEFAULT_CONTROLS: tuple[ControlDescriptor, ...] = (
    ControlDescriptor("range", "rotate_x", "Rotation X", min=-math.pi, max=math.pi, step=0.01),
    ControlDescriptor("range", "rotate_y", "Rotation Y", min=-math.pi, max=math.pi, step=0.01),
    ControlDescriptor("range", "rotate_z", "Rotation Z", min=-math.pi, max=math.pi, step=0.01),
    ControlDescriptor("range", "scale", "Scale", min=0.5, max=2.0, step=0.1),
    ControlDescriptor("range", "spacing", "Spacing", min=0.5, max=3.0, step=0.1),
    ControlDescriptor("range", "sphere_size", "Sphere Size", min=0.3, max=1.5, step=0.1),
    ControlDescriptor("color", "color1", "Color 1"),
    ControlDescriptor("color", "color2", "Color 2"),
    ControlDescriptor("color", "color3", "Color 3"),
    ControlDescriptor("color", "color4", "Color 4"),
    ControlDescriptor("boolean", "wireframe", "Wireframe"),
)


def panel_items(
    descriptors: Iterable[ControlDescriptor],
    values: Mapping[str, ParamValue],
) -> tuple[tuple[ControlDescriptor, ParamValue], ...]:
    """Pair each descriptor with its current value, skipping unknown keys."""
    items: list[tuple[ControlDescriptor, ParamValue]] = []
    for descriptor in descriptors:
        if descriptor.key not in values:
            _LOG.debug("control_unknown_key key=%s", descriptor.key)
            continue
        items.append((descriptor, values[descriptor.key]))
    return tuple(items)


def color_keys(descriptors: Iterable[ControlDescriptor]) -> tuple[str, ...]:
    """Keys whose store slots hold colors."""
    return tuple(descriptor.key for descriptor in descriptors if descriptor.type == "color")


def apply_control_edit(store: ParamStore, descriptor: ControlDescriptor, raw: object) -> bool:
    """Coerce a panel edit and write it into the store.

    Returns False when the edit was ignored (unknown key or uncoercible value).
    """
    current = store.get()
    if descriptor.key not in current:
        _LOG.debug("control_edit_unknown_key key=%s", descriptor.key)
        return False
    value = _coerce(descriptor, raw, current[descriptor.key])
    if value is None:
        _LOG.warning("control_edit_rejected key=%s raw=%r", descriptor.key, raw)
        return False
    store.set({descriptor.key: value})
    return True


def _coerce(descriptor: ControlDescriptor, raw: object, current: ParamValue) -> ParamValue | None:
    if descriptor.type == "boolean":
        if isinstance(raw, str):
            return raw.strip().lower() in {"1", "true", "yes", "on"}
        return bool(raw)
    if descriptor.type == "color":
        try:
            color = normalize_color(raw)  # type: ignore[arg-type]
        except InvalidColorError:
            return None
        # Keep the slot's representation so the store accepts it.
        return color if isinstance(current, int) else format_color(color)
    if isinstance(raw, bool):
        return None
    try:
        number = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    if descriptor.min is not None:
        number = max(float(descriptor.min), number)
    if descriptor.max is not None:
        number = min(float(descriptor.max), number)
    return number


__all__ = [
    "DEFAULT_CONTROLS",
    "ControlDescriptor",
    "ControlType",
    "apply_control_edit",
    "color_keys",
    "panel_items",
]
