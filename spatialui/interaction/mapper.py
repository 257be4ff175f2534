"""Pointer-to-rotation mapping within a bounded viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass

PITCH_RANGE = math.pi / 3.0
YAW_RANGE = math.pi


@dataclass(frozen=True, slots=True)
class RotationUpdate:
    """Rotation derived from one pointer position, in radians."""

    rotate_x: float
    rotate_y: float

    def as_params(self) -> dict[str, float]:
        return {"rotate_x": self.rotate_x, "rotate_y": self.rotate_y}


@dataclass(frozen=True, slots=True)
class ViewportRect:
    """Viewport bounds in page coordinates."""

    left: float
    top: float
    width: float
    height: float


class InteractionMapper:
    """Convert viewport-local pointer positions to group rotation.

    Positions outside ``[0, width) x [0, height)`` yield ``None`` so callers
    keep the previous rotation instead of snapping.
    """

    def __init__(self, *, pitch_range: float = PITCH_RANGE, yaw_range: float = YAW_RANGE) -> None:
        self._pitch_range = float(pitch_range)
        self._yaw_range = float(yaw_range)

    def map(
        self,
        pointer_x: float,
        pointer_y: float,
        viewport_width: float,
        viewport_height: float,
    ) -> RotationUpdate | None:
        values = (pointer_x, pointer_y, viewport_width, viewport_height)
        if not all(math.isfinite(float(value)) for value in values):
            return None
        if viewport_width <= 0 or viewport_height <= 0:
            return None
        if not (0.0 <= pointer_x < viewport_width and 0.0 <= pointer_y < viewport_height):
            return None
        norm_x = float(pointer_x) / float(viewport_width) * 2.0 - 1.0
        norm_y = float(pointer_y) / float(viewport_height) * 2.0 - 1.0
        return RotationUpdate(
            rotate_x=_clamp_angle(self._pitch_range * norm_y),
            rotate_y=_clamp_angle(self._yaw_range * norm_x),
        )

    def map_client(self, client_x: float, client_y: float, rect: ViewportRect) -> RotationUpdate | None:
        """Map page coordinates by first offsetting into the viewport."""
        return self.map(client_x - rect.left, client_y - rect.top, rect.width, rect.height)


def _clamp_angle(value: float) -> float:
    return max(-math.pi, min(math.pi, value))


__all__ = ["PITCH_RANGE", "YAW_RANGE", "InteractionMapper", "RotationUpdate", "ViewportRect"]
