"""Renderer-facing serialization of scene descriptions."""

from __future__ import annotations

from collections.abc import Sequence

from spatialui.diagnostics.json_codec import dumps_text
from spatialui.scene.builder import CameraSpec, LightSpec, SceneDescription
from spatialui.scene.color import format_color
from spatialui.scene.nodes import SceneNode, Transform, Vec3


def node_payload(node: SceneNode) -> dict[str, object]:
    payload: dict[str, object] = {
        "key": node.key,
        "kind": node.kind.value,
        "transform": _transform_payload(node.transform),
    }
    if node.appearance is not None:
        appearance = node.appearance
        payload["material"] = {
            "color": appearance.color,
            "color_hex": format_color(appearance.color),
            "metalness": appearance.metalness,
            "roughness": appearance.roughness,
            "wireframe": appearance.wireframe,
            "cast_shadow": appearance.cast_shadow,
            "receive_shadow": appearance.receive_shadow,
        }
    if node.attributes:
        payload["attributes"] = {name: value for name, value in node.attributes}
    if node.children:
        payload["children"] = [node_payload(child) for child in node.children]
    return payload


def nodes_payload(nodes: Sequence[SceneNode]) -> list[dict[str, object]]:
    return [node_payload(node) for node in nodes]


def scene_payload(description: SceneDescription) -> dict[str, object]:
    return {
        "camera": _camera_payload(description.camera),
        "lights": [_light_payload(light) for light in description.lights],
        "objects": nodes_payload(description.objects),
    }


def dumps_scene(description: SceneDescription, *, pretty: bool = False) -> str:
    """Serialize a description to JSON text for an out-of-process renderer."""
    return dumps_text(scene_payload(description), pretty=pretty)


def _vec(value: Vec3) -> list[float]:
    return [value.x, value.y, value.z]


def _transform_payload(transform: Transform) -> dict[str, list[float]]:
    return {
        "position": _vec(transform.position),
        "rotation": _vec(transform.rotation),
        "scale": _vec(transform.scale),
    }


def _camera_payload(camera: CameraSpec) -> dict[str, object]:
    return {"position": _vec(camera.position), "look_at": _vec(camera.look_at)}


def _light_payload(light: LightSpec) -> dict[str, object]:
    payload: dict[str, object] = {"type": light.type, "color": light.color, "intensity": light.intensity}
    if light.position is not None:
        payload["position"] = _vec(light.position)
    return payload


__all__ = ["dumps_scene", "node_payload", "nodes_payload", "scene_payload"]
