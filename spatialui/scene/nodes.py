"""Immutable scene-description node contracts."""

from __future__ import annotations

from typing import TypeAlias

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from spatialui.runtime.errors import DuplicateNodeKeyError

AttributeValue: TypeAlias = str | int | float | bool | None | tuple[object, ...]


class NodeKind(Enum):
    """Renderable object kinds understood by the external renderer."""

    GROUP = "Group"
    SPHERE = "Sphere"
    CONTROL_PANEL = "ControlPanel"


@dataclass(frozen=True, slots=True)
class Vec3:
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


ORIGIN = Vec3()
UNIT_SCALE = Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Transform:
    """Position, Euler rotation (radians, XYZ order) and scale."""

    position: Vec3 = ORIGIN
    rotation: Vec3 = ORIGIN
    scale: Vec3 = UNIT_SCALE

    def matrix(self) -> np.ndarray:
        """Compose the local 4x4 matrix as T * Rz * Ry * Rx * S."""
        rx, ry, rz = self.rotation.as_tuple()
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)
        rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]], dtype=np.float64)
        rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]], dtype=np.float64)
        rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
        linear = rot_z @ rot_y @ rot_x @ np.diag(self.scale.as_tuple())
        out = np.eye(4, dtype=np.float64)
        out[:3, :3] = linear
        out[:3, 3] = self.position.as_tuple()
        return out


IDENTITY_TRANSFORM = Transform()


@dataclass(frozen=True, slots=True)
class Appearance:
    """Material values attached to a renderable node."""

    color: int
    metalness: float = 0.0
    roughness: float = 1.0
    wireframe: bool = False
    cast_shadow: bool = False
    receive_shadow: bool = False


@dataclass(frozen=True, slots=True)
class SceneNode:
    """One keyed object in the scene description.

    ``key`` is the identity the renderer uses to reuse objects across
    rebuilds; it must be unique among siblings.
    """

    key: str
    kind: NodeKind
    transform: Transform = IDENTITY_TRANSFORM
    appearance: Appearance | None = None
    attributes: tuple[tuple[str, AttributeValue], ...] = ()
    children: tuple[SceneNode, ...] = ()

    def attribute(self, name: str, default: AttributeValue = None) -> AttributeValue:
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return default

    def child(self, key: str) -> SceneNode:
        for node in self.children:
            if node.key == key:
                return node
        raise KeyError(key)


KeyTree: TypeAlias = tuple[tuple[str, "KeyTree"], ...]


def node_keys(nodes: Sequence[SceneNode]) -> KeyTree:
    """Return the nested ``(key, children)`` structure used for identity comparison."""
    return tuple((node.key, node_keys(node.children)) for node in nodes)


def iter_nodes(nodes: Iterable[SceneNode], *, prefix: str = "") -> Iterable[tuple[str, SceneNode]]:
    """Yield ``(path, node)`` depth-first, paths joined with ``/``."""
    for node in nodes:
        path = f"{prefix}/{node.key}" if prefix else node.key
        yield path, node
        yield from iter_nodes(node.children, prefix=path)


def validate_sibling_keys(nodes: Sequence[SceneNode]) -> None:
    """Raise ``DuplicateNodeKeyError`` if any sibling group repeats a key."""
    _validate_level(nodes, parent="")


def world_matrices(nodes: Sequence[SceneNode]) -> dict[str, np.ndarray]:
    """Resolve each node's world matrix keyed by its path."""
    out: dict[str, np.ndarray] = {}
    _accumulate(nodes, np.eye(4, dtype=np.float64), "", out)
    return out


def _validate_level(nodes: Sequence[SceneNode], *, parent: str) -> None:
    seen: set[str] = set()
    for node in nodes:
        if not node.key:
            raise DuplicateNodeKeyError(f"Empty node key under {parent or '<root>'}")
        if node.key in seen:
            raise DuplicateNodeKeyError(f"Duplicate node key {node.key!r} under {parent or '<root>'}")
        seen.add(node.key)
        path = f"{parent}/{node.key}" if parent else node.key
        _validate_level(node.children, parent=path)


def _accumulate(
    nodes: Sequence[SceneNode],
    parent_matrix: np.ndarray,
    prefix: str,
    out: dict[str, np.ndarray],
) -> None:
    for node in nodes:
        path = f"{prefix}/{node.key}" if prefix else node.key
        matrix = parent_matrix @ node.transform.matrix()
        out[path] = matrix
        _accumulate(node.children, matrix, path, out)


__all__ = [
    "IDENTITY_TRANSFORM",
    "ORIGIN",
    "UNIT_SCALE",
    "Appearance",
    "AttributeValue",
    "KeyTree",
    "NodeKind",
    "SceneNode",
    "Transform",
    "Vec3",
    "iter_nodes",
    "node_keys",
    "validate_sibling_keys",
    "world_matrices",
]
