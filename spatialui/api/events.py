"""Session event contracts consumed by renderer and control-panel adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from spatialui.platform.probe import DeviceCategory
    from spatialui.scene.nodes import SceneNode


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class SceneRebuilt:
    """Fresh node tree for the renderer after a parameter change."""

    nodes: tuple[SceneNode, ...]
    revision: int
    category: DeviceCategory


@dataclass(frozen=True, slots=True)
class PointerIgnored:
    """Pointer sample that fell outside the viewport; rotation is unchanged."""

    pointer_x: float
    pointer_y: float
    viewport_width: float
    viewport_height: float


SessionEvent: TypeAlias = SceneRebuilt | PointerIgnored


class SessionEventBus(Protocol):
    """Synchronous fan-out of session events to host adapters."""

    def on_rebuilt(self, handler: Callable[[SceneRebuilt], None]) -> Subscription:
        """Call ``handler`` with every rebuilt tree."""

    def on_pointer_ignored(self, handler: Callable[[PointerIgnored], None]) -> Subscription:
        """Call ``handler`` with every discarded pointer sample."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Drop a handler; unknown tokens are ignored."""

    def publish(self, event: SessionEvent) -> int:
        """Deliver ``event`` and return how many handlers ran."""


def create_event_bus() -> SessionEventBus:
    """Create the default in-process session bus."""
    from spatialui.runtime.events import SceneEventBus

    return SceneEventBus()
