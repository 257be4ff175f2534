from __future__ import annotations

import math

import numpy as np
import pytest

from spatialui.runtime.errors import DuplicateNodeKeyError
from spatialui.scene.nodes import (
    NodeKind,
    SceneNode,
    Transform,
    Vec3,
    iter_nodes,
    node_keys,
    validate_sibling_keys,
    world_matrices,
)


def _tree() -> tuple[SceneNode, ...]:
    leaf_a = SceneNode(key="a", kind=NodeKind.SPHERE, transform=Transform(position=Vec3(1.0, 0.0, 0.0)))
    leaf_b = SceneNode(key="b", kind=NodeKind.SPHERE)
    group = SceneNode(
        key="group",
        kind=NodeKind.GROUP,
        transform=Transform(rotation=Vec3(0.0, 0.0, math.pi / 2), scale=Vec3(2.0, 2.0, 2.0)),
        children=(leaf_a, leaf_b),
    )
    return (group, SceneNode(key="panel", kind=NodeKind.CONTROL_PANEL))


def test_node_keys_reflect_nesting_and_order() -> None:
    assert node_keys(_tree()) == (("group", (("a", ()), ("b", ()))), ("panel", ()))


def test_iter_nodes_yields_paths_depth_first() -> None:
    assert [path for path, _ in iter_nodes(_tree())] == ["group", "group/a", "group/b", "panel"]


def test_sibling_keys_must_be_unique() -> None:
    validate_sibling_keys(_tree())
    dup = SceneNode(
        key="g",
        kind=NodeKind.GROUP,
        children=(SceneNode(key="x", kind=NodeKind.SPHERE), SceneNode(key="x", kind=NodeKind.SPHERE)),
    )
    with pytest.raises(DuplicateNodeKeyError):
        validate_sibling_keys((dup,))
    with pytest.raises(DuplicateNodeKeyError):
        validate_sibling_keys((SceneNode(key="", kind=NodeKind.GROUP),))


def test_same_key_allowed_under_different_parents() -> None:
    left = SceneNode(key="l", kind=NodeKind.GROUP, children=(SceneNode(key="x", kind=NodeKind.SPHERE),))
    right = SceneNode(key="r", kind=NodeKind.GROUP, children=(SceneNode(key="x", kind=NodeKind.SPHERE),))
    validate_sibling_keys((left, right))


def test_transform_matrix_composes_translation_rotation_scale() -> None:
    identity = Transform().matrix()
    assert np.allclose(identity, np.eye(4))

    moved = Transform(position=Vec3(1.0, 2.0, 3.0), scale=Vec3(2.0, 2.0, 2.0)).matrix()
    assert np.allclose(moved @ np.array([1.0, 0.0, 0.0, 1.0]), [3.0, 2.0, 3.0, 1.0])


def test_world_matrices_apply_parent_transform() -> None:
    matrices = world_matrices(_tree())
    point = matrices["group/a"] @ np.array([0.0, 0.0, 0.0, 1.0])
    # Local x=1 scaled by 2 then rotated 90 degrees about z lands on +y.
    assert np.allclose(point, [0.0, 2.0, 0.0, 1.0])
    assert np.allclose(matrices["panel"], np.eye(4))


def test_attribute_and_child_lookup() -> None:
    node = SceneNode(key="s", kind=NodeKind.SPHERE, attributes=(("radius", 0.8),))
    assert node.attribute("radius") == 0.8
    assert node.attribute("missing", 1) == 1
    group = _tree()[0]
    assert group.child("b").key == "b"
    with pytest.raises(KeyError):
        group.child("zzz")
