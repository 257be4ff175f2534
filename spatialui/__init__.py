"""Platform-adaptive configuration and interaction-driven scene descriptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spatialui.platform.presets import PresetConfig
    from spatialui.platform.probe import PlatformSignals
    from spatialui.platform.styles import StyleSink


def initialize(signals: "PlatformSignals | None", *, sink: "StyleSink") -> "PresetConfig":
    """Resolve platform preset and apply styles once at host startup."""
    from spatialui.session import initialize as session_initialize

    return session_initialize(signals, sink=sink)


__all__ = ["initialize"]
