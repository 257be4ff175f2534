"""Declarative scene-description nodes and builders."""

from spatialui.scene.color import format_color, normalize_color
from spatialui.scene.nodes import (
    Appearance,
    NodeKind,
    SceneNode,
    Transform,
    Vec3,
    node_keys,
    validate_sibling_keys,
)

__all__ = [
    "Appearance",
    "NodeKind",
    "SceneNode",
    "Transform",
    "Vec3",
    "format_color",
    "node_keys",
    "normalize_color",
    "validate_sibling_keys",
]
