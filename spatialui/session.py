"""Host-facing session wiring: startup resolution and pointer-driven rebuilds."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from spatialui.api.events import (
    PointerIgnored,
    SceneRebuilt,
    SessionEventBus,
    Subscription,
    create_event_bus,
)
from spatialui.api.scene import SceneBuilderPort
from spatialui.api.state import ParamStorePort
from spatialui.interaction.mapper import InteractionMapper, RotationUpdate, ViewportRect
from spatialui.platform.presets import PresetConfig, PresetSource, resolve
from spatialui.platform.probe import (
    DeviceCategory,
    PlatformClassification,
    PlatformSignals,
    classify_detailed,
)
from spatialui.platform.styles import StyleApplier, StyleSink, apply_preset_styles
from spatialui.runtime.config import SpatialConfig, get_config
from spatialui.runtime.logging import setup_logging
from spatialui.scene.builder import SceneDescription, SceneDescriptionBuilder, platform_label
from spatialui.scene.nodes import SceneNode
from spatialui.state.param_store import ParamSnapshot

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionBootstrap:
    """Startup resolution result threaded into renderer/session setup."""

    category: DeviceCategory
    preset: PresetConfig
    classification: PlatformClassification
    styles_applied: bool


def bootstrap(
    signals: PlatformSignals | None,
    *,
    sink: StyleSink,
    override: PresetSource | None = None,
    config: SpatialConfig | None = None,
) -> SessionBootstrap:
    """Classify once, resolve the preset and apply styles if the preset asks.

    Installs logging from ``config`` first unless the host configured it.

    Precedence: ``override`` argument, then the configured preset name, then
    the detected category. Unknown names raise ``PresetNotFoundError``.
    """
    cfg = config if config is not None else get_config()
    setup_logging(cfg.logging)
    classification = classify_detailed(signals, strict_vision=cfg.probe.strict_vision)
    if classification.ambiguous:
        _LOG.info(
            "platform_classified_by_heuristic rule=%s",
            classification.rule,
            extra={"category": classification.category.value},
        )
    source: PresetSource
    if override is not None:
        source = override
    elif cfg.preset.name is not None:
        source = cfg.preset.name
    else:
        source = classification.category
    preset = resolve(source)
    styles_applied = apply_preset_styles(StyleApplier(sink), preset, style_id=cfg.preset.style_id)
    _LOG.info(
        "session_initialized framebuffer_scale=%s styles_applied=%s",
        preset.framebuffer_scale,
        styles_applied,
        extra={
            "category": classification.category.value,
            "preset": _preset_label(source),
            "style_id": cfg.preset.style_id,
        },
    )
    return SessionBootstrap(
        category=classification.category,
        preset=preset,
        classification=classification,
        styles_applied=styles_applied,
    )


def _preset_label(source: PresetSource) -> str:
    if isinstance(source, DeviceCategory):
        return source.value
    if isinstance(source, str):
        return source.strip()
    return type(source).__name__

def initialize(
    signals: PlatformSignals | None,
    *,
    sink: StyleSink,
    override: PresetSource | None = None,
    config: SpatialConfig | None = None,
) -> PresetConfig:
    """Run startup resolution and return the preset for the XR session initializer."""
    return bootstrap(signals, sink=sink, override=override, config=config).preset


def platform_features(category: DeviceCategory, *, styles_applied: bool) -> tuple[str, ...]:
    """Info-panel lines describing the optimizations in effect."""
    lines = [f"Platform: {platform_label(category)}"]
    lines.append(f"Spatial styles: {'Applied' if styles_applied else 'Not Applicable'}")
    if category is DeviceCategory.VISION_PRO:
        lines.extend(
            (
                "Safe area insets enabled",
                "Overscroll prevention active",
                "Text size locked",
                "Cursor feedback enabled",
            )
        )
    elif category is DeviceCategory.TABLET:
        lines.extend(
            (
                "iPad optimizations applied",
                "Safe area insets enabled",
                "Overscroll prevention active",
            )
        )
    else:
        lines.append("Desktop/Standard WebXR mode")
    return tuple(lines)


class SceneSession:
    """Pointer events -> ParamStore -> scene rebuild, in receipt order.

    With ``coalesce`` enabled, pointer rotations are buffered and applied by
    ``frame()`` so a burst of moves costs one rebuild; control-panel writes
    still rebuild immediately.
    """

    def __init__(
        self,
        *,
        store: ParamStorePort,
        category: DeviceCategory,
        builder: SceneBuilderPort | None = None,
        mapper: InteractionMapper | None = None,
        events: SessionEventBus | None = None,
        coalesce: bool | None = None,
    ) -> None:
        self._store = store
        self._category = category
        self._builder: SceneBuilderPort = builder if builder is not None else SceneDescriptionBuilder()
        self._mapper = mapper if mapper is not None else InteractionMapper()
        self._events = events if events is not None else create_event_bus()
        self._coalesce = (
            bool(coalesce) if coalesce is not None else get_config().session.coalesce_pointer_events
        )
        self._pending: RotationUpdate | None = None
        self._nodes = self._builder.build(store.get(), category)
        self._subscription: Subscription | None = store.subscribe(self._on_params_changed)

    @property
    def events(self) -> SessionEventBus:
        return self._events

    @property
    def nodes(self) -> tuple[SceneNode, ...]:
        return self._nodes

    @property
    def category(self) -> DeviceCategory:
        return self._category

    def describe(self) -> SceneDescription:
        return self._builder.describe(self._store.get(), self._category)

    def on_pointer_move(
        self,
        pointer_x: float,
        pointer_y: float,
        viewport_width: float,
        viewport_height: float,
    ) -> bool:
        """Map one pointer position; returns False when it produced no update."""
        update = self._mapper.map(pointer_x, pointer_y, viewport_width, viewport_height)
        if update is None:
            self._events.publish(PointerIgnored(pointer_x, pointer_y, viewport_width, viewport_height))
            return False
        return self._accept(update)

    def on_client_pointer_move(self, client_x: float, client_y: float, rect: ViewportRect) -> bool:
        return self.on_pointer_move(client_x - rect.left, client_y - rect.top, rect.width, rect.height)

    def frame(self) -> bool:
        """Apply any buffered pointer rotation; returns True if one was applied."""
        pending = self._pending
        if pending is None:
            return False
        self._pending = None
        self._store.set(pending.as_params())
        return True

    def close(self) -> None:
        if self._subscription is None:
            return
        self._store.unsubscribe(self._subscription)
        self._subscription = None

    def _accept(self, update: RotationUpdate) -> bool:
        if self._coalesce:
            self._pending = update
            return True
        self._store.set(update.as_params())
        return True

    def _on_params_changed(self, snapshot: ParamSnapshot) -> None:
        self._nodes = self._builder.build(snapshot.values, self._category)
        _LOG.debug(
            "scene_rebuilt nodes=%d",
            len(self._nodes),
            extra={"category": self._category.value, "revision": snapshot.revision},
        )
        self._events.publish(
            SceneRebuilt(nodes=self._nodes, revision=snapshot.revision, category=self._category)
        )


__all__ = [
    "PointerIgnored",
    "SceneRebuilt",
    "SceneSession",
    "SessionBootstrap",
    "bootstrap",
    "initialize",
    "platform_features",
]
