"""Public platform-configuration API helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spatialui.platform.styles import StyleApplier, StyleSink


def create_style_applier(sink: "StyleSink | None" = None) -> "StyleApplier":
    """Create an applier over ``sink``, defaulting to an in-memory registry."""
    from spatialui.platform.styles import InMemoryStyleSink, StyleApplier

    return StyleApplier(sink if sink is not None else InMemoryStyleSink())
