"""Canvas cursor feedback for gaze/pointer interaction."""

from __future__ import annotations

from spatialui.platform.presets import PresetConfig

DEFAULT_CURSOR = "auto"


class CanvasCursor:
    """Tracks the cursor style the host should show over the canvas."""

    def __init__(self, preset: PresetConfig) -> None:
        self._active_style = preset.cursor_style
        self._current = DEFAULT_CURSOR

    @property
    def current(self) -> str:
        return self._current

    def enter(self) -> str:
        self._current = self._active_style
        return self._current

    def leave(self) -> str:
        self._current = DEFAULT_CURSOR
        return self._current


__all__ = ["DEFAULT_CURSOR", "CanvasCursor"]
