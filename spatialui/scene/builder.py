"""Scene description builder for the interactive sphere group."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from spatialui.platform.probe import DeviceCategory
from spatialui.scene.color import normalize_color
from spatialui.scene.nodes import (
    ORIGIN,
    Appearance,
    NodeKind,
    SceneNode,
    Transform,
    Vec3,
)
from spatialui.state.controls import DEFAULT_CONTROLS, ControlDescriptor, panel_items
from spatialui.state.param_store import ParamValue

GROUP_KEY = "group"
PANEL_KEY = "config"
SPHERE_KEYS: tuple[str, ...] = ("sphere1", "sphere2", "sphere3", "sphere4")
CENTER_KEY = "center_sphere"

CENTER_COLOR = 0xFFFFFF
CENTER_RADIUS_FACTOR = 0.6

DEFAULT_PARAMS: Mapping[str, ParamValue] = {
    "rotate_x": 0.0,
    "rotate_y": 0.5,
    "rotate_z": 0.0,
    "scale": 1.5,
    "spacing": 1.2,
    "sphere_size": 0.8,
    "color1": "#ff6b6b",
    "color2": "#4ecdc4",
    "color3": "#45b7d1",
    "color4": "#f7b731",
    "wireframe": False,
}

# Quadrant sign per colored sphere: front right, front left, back right, back left.
_SPHERE_OFFSETS: tuple[tuple[float, float], ...] = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0))

_PLATFORM_LABELS: dict[DeviceCategory, str] = {
    DeviceCategory.VISION_PRO: "Vision Pro",
    DeviceCategory.TABLET: "iPadOS",
    DeviceCategory.DESKTOP: "Desktop WebXR",
}


@dataclass(frozen=True, slots=True)
class CameraSpec:
    position: Vec3
    look_at: Vec3 = ORIGIN


@dataclass(frozen=True, slots=True)
class LightSpec:
    type: str
    color: int
    intensity: float
    position: Vec3 | None = None


@dataclass(frozen=True, slots=True)
class SceneDescription:
    """Everything handed to the renderer for one rebuild."""

    camera: CameraSpec
    lights: tuple[LightSpec, ...]
    objects: tuple[SceneNode, ...]


DEFAULT_CAMERA = CameraSpec(position=Vec3(0.0, 0.0, 5.0))
DEFAULT_LIGHTS: tuple[LightSpec, ...] = (
    LightSpec(type="ambient", color=0xFFFFFF, intensity=0.6),
    LightSpec(type="directional", color=0xFFFFFF, intensity=0.8, position=Vec3(1.0, 1.0, 1.0)),
    LightSpec(type="directional", color=0xFFFFFF, intensity=0.3, position=Vec3(-1.0, -1.0, -1.0)),
)


def platform_label(category: DeviceCategory) -> str:
    return _PLATFORM_LABELS[category]


class SceneDescriptionBuilder:
    """Build the keyed object tree from parameters and device category.

    Output is a pure function of its inputs. Every rebuild yields the same
    keys in the same order; only attribute values track the parameters.
    """

    def __init__(self, controls: Sequence[ControlDescriptor] = DEFAULT_CONTROLS) -> None:
        self._controls = tuple(controls)

    def build(self, params: Mapping[str, ParamValue], category: DeviceCategory) -> tuple[SceneNode, ...]:
        resolved = {**DEFAULT_PARAMS, **params}
        return (self._group(resolved), self._panel(resolved, category))

    def describe(self, params: Mapping[str, ParamValue], category: DeviceCategory) -> SceneDescription:
        return SceneDescription(
            camera=DEFAULT_CAMERA,
            lights=DEFAULT_LIGHTS,
            objects=self.build(params, category),
        )

    def _group(self, params: Mapping[str, ParamValue]) -> SceneNode:
        scale = float(params["scale"])
        spacing = float(params["spacing"])
        radius = float(params["sphere_size"])
        wireframe = bool(params["wireframe"])
        children: list[SceneNode] = []
        placements = zip(SPHERE_KEYS, _SPHERE_OFFSETS, strict=True)
        for index, (key, (sx, sy)) in enumerate(placements, start=1):
            children.append(
                _sphere(
                    key,
                    position=Vec3(sx * spacing, sy * spacing, 0.0),
                    radius=radius,
                    appearance=Appearance(
                        color=normalize_color(params[f"color{index}"]),  # type: ignore[arg-type]
                        metalness=0.3,
                        roughness=0.4,
                        wireframe=wireframe,
                        cast_shadow=True,
                        receive_shadow=True,
                    ),
                )
            )
        children.append(
            _sphere(
                CENTER_KEY,
                position=ORIGIN,
                radius=radius * CENTER_RADIUS_FACTOR,
                appearance=Appearance(
                    color=CENTER_COLOR,
                    metalness=0.6,
                    roughness=0.2,
                    wireframe=wireframe,
                    cast_shadow=True,
                    receive_shadow=True,
                ),
            )
        )
        return SceneNode(
            key=GROUP_KEY,
            kind=NodeKind.GROUP,
            transform=Transform(
                rotation=Vec3(
                    float(params["rotate_x"]),
                    float(params["rotate_y"]),
                    float(params["rotate_z"]),
                ),
                scale=Vec3(scale, scale, scale),
            ),
            children=tuple(children),
        )

    def _panel(self, params: Mapping[str, ParamValue], category: DeviceCategory) -> SceneNode:
        items = panel_items(self._controls, params)
        return SceneNode(
            key=PANEL_KEY,
            kind=NodeKind.CONTROL_PANEL,
            attributes=(
                ("is_spatial_platform", category is DeviceCategory.VISION_PRO),
                ("platform", platform_label(category)),
                ("controls", tuple(descriptor for descriptor, _ in items)),
                ("data", tuple((descriptor.key, value) for descriptor, value in items)),
            ),
        )


def _sphere(key: str, *, position: Vec3, radius: float, appearance: Appearance) -> SceneNode:
    return SceneNode(
        key=key,
        kind=NodeKind.SPHERE,
        transform=Transform(position=position),
        appearance=appearance,
        attributes=(("radius", radius),),
    )


__all__ = [
    "CENTER_KEY",
    "DEFAULT_CAMERA",
    "DEFAULT_LIGHTS",
    "DEFAULT_PARAMS",
    "GROUP_KEY",
    "PANEL_KEY",
    "SPHERE_KEYS",
    "CameraSpec",
    "LightSpec",
    "SceneDescription",
    "SceneDescriptionBuilder",
    "platform_label",
]
