"""Idempotent global stylesheet application through an injectable sink."""

from __future__ import annotations

import logging
from typing import Protocol

from spatialui.platform.presets import PresetConfig
from spatialui.runtime.config import DEFAULT_STYLE_ID

_LOG = logging.getLogger(__name__)


class StyleSink(Protocol):
    """Document-level style registry the applier writes into."""

    def has_style(self, style_id: str) -> bool:
        """Return whether a style block with this id is present."""

    def insert_style(self, style_id: str, css_text: str) -> None:
        """Append one style block."""


class InMemoryStyleSink:
    """Ordered in-process style registry for headless hosts and tests."""

    def __init__(self) -> None:
        self._blocks: list[tuple[str, str]] = []

    def has_style(self, style_id: str) -> bool:
        return any(block_id == style_id for block_id, _ in self._blocks)

    def insert_style(self, style_id: str, css_text: str) -> None:
        self._blocks.append((style_id, css_text))

    @property
    def blocks(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._blocks)

    def count(self, style_id: str) -> int:
        return sum(1 for block_id, _ in self._blocks if block_id == style_id)


class StyleApplier:
    """Insert a named style block into the sink at most once."""

    def __init__(self, sink: StyleSink) -> None:
        self._sink = sink

    def apply(self, style_id: str, css_text: str) -> bool:
        """Insert ``css_text`` under ``style_id`` unless already present.

        Returns True when a block was inserted.
        """
        if self._sink.has_style(style_id):
            _LOG.debug("style_apply_skipped style_id=%s", style_id)
            return False
        self._sink.insert_style(style_id, css_text)
        _LOG.info("style_applied style_id=%s chars=%d", style_id, len(css_text))
        return True


def build_stylesheet(preset: PresetConfig) -> str:
    """Render the spatial-browser stylesheet for a resolved preset."""
    sections = [
        # Safe-area padding keeps content clear of the grab bar and rounded corners.
        "html, body {\n"
        "  padding: env(safe-area-inset-top) env(safe-area-inset-right)\n"
        "           env(safe-area-inset-bottom) env(safe-area-inset-left);\n"
        "  margin: 0;\n"
        "  width: 100%;\n"
        "  height: 100%;\n"
        "}",
        "body {\n  overscroll-behavior: none;\n}",
        "canvas {\n"
        "  overscroll-behavior: none;\n"
        "  display: block;\n"
        "  width: 100%;\n"
        "  height: 100%;\n"
        "  -webkit-touch-callout: none;\n"
        "}",
        "html {\n  -webkit-text-size-adjust: 100%;\n}",
        f"canvas:hover {{\n  cursor: {preset.cursor_style};\n}}",
    ]
    if preset.disable_text_selection:
        sections.append("body {\n  -webkit-user-select: none;\n  user-select: none;\n}")
    return "\n\n".join(sections) + "\n"


def apply_preset_styles(
    applier: StyleApplier,
    preset: PresetConfig,
    *,
    style_id: str = DEFAULT_STYLE_ID,
) -> bool:
    """Apply the preset stylesheet when the preset asks for injected styles."""
    if not preset.inject_styles:
        return False
    return applier.apply(style_id, build_stylesheet(preset))


__all__ = [
    "InMemoryStyleSink",
    "StyleApplier",
    "StyleSink",
    "apply_preset_styles",
    "build_stylesheet",
]
