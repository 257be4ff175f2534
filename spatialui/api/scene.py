"""Public scene-description API contracts."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from spatialui.platform.probe import DeviceCategory
    from spatialui.scene.builder import SceneDescription
    from spatialui.scene.nodes import SceneNode
    from spatialui.state.controls import ControlDescriptor
    from spatialui.state.param_store import ParamValue


class SceneBuilderPort(Protocol):
    """Deterministic params + category -> keyed node tree."""

    def build(
        self,
        params: Mapping[str, "ParamValue"],
        category: "DeviceCategory",
    ) -> tuple["SceneNode", ...]:
        """Return root-level nodes."""

    def describe(
        self,
        params: Mapping[str, "ParamValue"],
        category: "DeviceCategory",
    ) -> "SceneDescription":
        """Return nodes plus camera and lights."""


def create_scene_builder(
    controls: Sequence["ControlDescriptor"] | None = None,
) -> SceneBuilderPort:
    """Create the default sphere-scene builder."""
    from spatialui.scene.builder import SceneDescriptionBuilder
    from spatialui.state.controls import DEFAULT_CONTROLS

    return SceneDescriptionBuilder(DEFAULT_CONTROLS if controls is None else controls)
