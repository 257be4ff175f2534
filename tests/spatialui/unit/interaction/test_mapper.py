from __future__ import annotations

import math

import pytest

from spatialui.interaction.mapper import InteractionMapper, RotationUpdate, ViewportRect


def test_center_maps_to_zero_rotation() -> None:
    update = InteractionMapper().map(50.0, 25.0, 100.0, 50.0)
    assert update == RotationUpdate(rotate_x=0.0, rotate_y=0.0)


def test_origin_corner_maps_to_negative_extremes() -> None:
    update = InteractionMapper().map(0.0, 0.0, 200.0, 100.0)
    assert update is not None
    assert update.rotate_x == pytest.approx(-math.pi / 3)
    assert update.rotate_y == pytest.approx(-math.pi)


@pytest.mark.parametrize(
    ("width", "height"),
    [(1.0, 1.0), (640.0, 480.0), (1920.0, 1080.0), (3.0, 7.0)],
)
def test_in_bounds_results_stay_in_range(width: float, height: float) -> None:
    mapper = InteractionMapper()
    steps = 17
    for ix in range(steps):
        for iy in range(steps):
            x = width * ix / steps
            y = height * iy / steps
            update = mapper.map(x, y, width, height)
            assert update is not None
            assert -math.pi / 3 <= update.rotate_x <= math.pi / 3
            assert -math.pi <= update.rotate_y <= math.pi


def test_mapping_is_monotonic_per_axis() -> None:
    mapper = InteractionMapper()
    xs = [mapper.map(float(x), 10.0, 300.0, 200.0) for x in range(0, 300, 7)]
    ys = [mapper.map(10.0, float(y), 300.0, 200.0) for y in range(0, 200, 7)]
    yaw = [update.rotate_y for update in xs if update is not None]
    pitch = [update.rotate_x for update in ys if update is not None]
    assert len(yaw) == len(xs)
    assert len(pitch) == len(ys)
    assert yaw == sorted(yaw)
    assert pitch == sorted(pitch)
    assert len(set(yaw)) == len(yaw)


@pytest.mark.parametrize(
    ("x", "y"),
    [(-0.1, 10.0), (100.0, 10.0), (150.0, 10.0), (10.0, -1.0), (10.0, 50.0), (10.0, 80.0)],
)
def test_out_of_bounds_is_no_update(x: float, y: float) -> None:
    assert InteractionMapper().map(x, y, 100.0, 50.0) is None


def test_degenerate_viewport_and_non_finite_inputs() -> None:
    mapper = InteractionMapper()
    assert mapper.map(0.0, 0.0, 0.0, 10.0) is None
    assert mapper.map(0.0, 0.0, 10.0, -5.0) is None
    assert mapper.map(math.nan, 1.0, 10.0, 10.0) is None
    assert mapper.map(1.0, 1.0, math.inf, 10.0) is None


def test_map_client_offsets_by_viewport_origin() -> None:
    mapper = InteractionMapper()
    rect = ViewportRect(left=100.0, top=40.0, width=200.0, height=100.0)
    assert mapper.map_client(200.0, 90.0, rect) == RotationUpdate(rotate_x=0.0, rotate_y=0.0)
    assert mapper.map_client(50.0, 90.0, rect) is None


def test_rotation_update_as_params() -> None:
    assert RotationUpdate(rotate_x=0.1, rotate_y=-0.2).as_params() == {"rotate_x": 0.1, "rotate_y": -0.2}
