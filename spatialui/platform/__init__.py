"""Platform detection, presets and document styling."""

from spatialui.platform.cursor import CanvasCursor
from spatialui.platform.presets import PresetConfig, preset_names, resolve
from spatialui.platform.probe import (
    DeviceCategory,
    PlatformClassification,
    PlatformSignals,
    classify,
    classify_detailed,
)
from spatialui.platform.safe_area import SafeAreaInsets, read_safe_area_insets
from spatialui.platform.styles import InMemoryStyleSink, StyleApplier, StyleSink, build_stylesheet

__all__ = [
    "CanvasCursor",
    "DeviceCategory",
    "InMemoryStyleSink",
    "PlatformClassification",
    "PlatformSignals",
    "PresetConfig",
    "SafeAreaInsets",
    "StyleApplier",
    "StyleSink",
    "build_stylesheet",
    "classify",
    "classify_detailed",
    "preset_names",
    "read_safe_area_insets",
    "resolve",
]
