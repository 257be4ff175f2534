"""Preset table mapping device categories to display configuration."""

from __future__ import annotations

from typing import TypeAlias

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields

from spatialui.platform.probe import DeviceCategory
from spatialui.runtime.errors import InvalidPresetError, PresetNotFoundError

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PresetConfig:
    """Resolved display/interaction configuration for one session."""

    inject_styles: bool
    framebuffer_scale: float
    cursor_style: str
    disable_text_selection: bool

    def __post_init__(self) -> None:
        scale = self.framebuffer_scale
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            raise InvalidPresetError(f"framebuffer_scale must be a number, got {scale!r}")
        if not math.isfinite(scale) or not 0.0 < scale <= 1.0:
            raise InvalidPresetError(f"framebuffer_scale must be in (0, 1], got {scale!r}")
        if not str(self.cursor_style).strip():
            raise InvalidPresetError("cursor_style must be a non-empty CSS cursor value")


_PRESETS: dict[DeviceCategory, PresetConfig] = {
    DeviceCategory.VISION_PRO: PresetConfig(
        inject_styles=True,
        framebuffer_scale=0.9,
        cursor_style="crosshair",
        disable_text_selection=True,
    ),
    DeviceCategory.TABLET: PresetConfig(
        inject_styles=True,
        framebuffer_scale=0.8,
        cursor_style="auto",
        disable_text_selection=True,
    ),
    DeviceCategory.DESKTOP: PresetConfig(
        inject_styles=False,
        framebuffer_scale=1.0,
        cursor_style="auto",
        disable_text_selection=False,
    ),
}

_ALIASES: dict[str, DeviceCategory] = {
    "visionpro": DeviceCategory.VISION_PRO,
    "vision-pro": DeviceCategory.VISION_PRO,
    "vision_pro": DeviceCategory.VISION_PRO,
    "visionos": DeviceCategory.VISION_PRO,
    "tablet": DeviceCategory.TABLET,
    "ipad": DeviceCategory.TABLET,
    "ipados": DeviceCategory.TABLET,
    "desktop": DeviceCategory.DESKTOP,
}

_CAMEL_FIELDS: dict[str, str] = {
    "injectStyles": "inject_styles",
    "framebufferScale": "framebuffer_scale",
    "cursorStyle": "cursor_style",
    "disableTextSelection": "disable_text_selection",
}

PresetSource: TypeAlias = DeviceCategory | str | PresetConfig | Mapping[str, object]


def preset_names() -> tuple[str, ...]:
    """Return canonical built-in preset names in table order."""
    return tuple(category.value for category in _PRESETS)


def preset_for(category: DeviceCategory) -> PresetConfig:
    return _PRESETS[category]


def category_for_name(name: str) -> DeviceCategory:
    """Resolve a preset name or alias to its category."""
    normalized = str(name).strip().lower()
    category = _ALIASES.get(normalized)
    if category is None:
        raise PresetNotFoundError(str(name))
    return category


def resolve(preset: PresetSource) -> PresetConfig:
    """Resolve a category, preset name, explicit config or config-shaped mapping.

    Unknown names raise ``PresetNotFoundError``; the fallback policy belongs
    to the caller.
    """
    if isinstance(preset, PresetConfig):
        return preset
    if isinstance(preset, DeviceCategory):
        return _PRESETS[preset]
    if isinstance(preset, str):
        category = category_for_name(preset)
        _LOG.debug("preset_resolved name=%s category=%s", preset, category.value)
        return _PRESETS[category]
    if isinstance(preset, Mapping):
        return preset_from_mapping(preset)
    raise InvalidPresetError(f"Unsupported preset source: {type(preset).__name__}")


def preset_from_mapping(raw: Mapping[str, object]) -> PresetConfig:
    """Build a preset from snake_case or camelCase keys; gaps take Desktop values."""
    base = _PRESETS[DeviceCategory.DESKTOP]
    values: dict[str, object] = {item.name: getattr(base, item.name) for item in fields(PresetConfig)}
    for key, value in raw.items():
        name = _CAMEL_FIELDS.get(str(key), str(key))
        if name not in values:
            _LOG.debug("preset_mapping_ignored_key key=%s", key)
            continue
        values[name] = value
    return PresetConfig(
        inject_styles=_as_flag("inject_styles", values["inject_styles"]),
        framebuffer_scale=_as_scale(values["framebuffer_scale"]),
        cursor_style=str(values["cursor_style"]),
        disable_text_selection=_as_flag("disable_text_selection", values["disable_text_selection"]),
    )


def _as_flag(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise InvalidPresetError(f"{name} must be a bool, got {value!r}")
    return value


def _as_scale(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidPresetError(f"framebuffer_scale must be a number, got {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidPresetError(f"framebuffer_scale must be a number, got {value!r}") from exc


__all__ = [
    "PresetConfig",
    "PresetSource",
    "category_for_name",
    "preset_for",
    "preset_from_mapping",
    "preset_names",
    "resolve",
]
