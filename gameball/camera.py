"""A third-person camera that eases towards its target pose."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

NEAR_PLANE = 0.1
FAR_PLANE = 100.0
PITCH_LIMIT = 89.0
CURSOR_SENSITIVITY = 0.1
EASING_RATE = 2.0


@dataclass(frozen=True, eq=False)
class CameraData:
    """View and projection matrices, both 4x4 in row-major layout."""

    view: np.ndarray
    projection: np.ndarray


def _wrap_degrees(angle: float) -> float:
    return (angle + 180.0) % 360.0 - 180.0


def _perspective_zo(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [0, 1]."""
    tan_half = math.tan(fov_y / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = far / (near - far)
    projection[3, 2] = -1.0
    projection[2, 3] = -(far * near) / (far - near)
    return projection


class ThirdPersonCamera:
    """Orbits a centre point; every target is blended in by ``interpolation_factor``."""

    def __init__(
        self,
        aspect: float = 1.0,
        on_update: Callable[[CameraData], object] | None = None,
    ) -> None:
        self.aspect = float(aspect)
        self.on_update = on_update
        self.interpolation_factor = 0.0
        self.camera_data: CameraData | None = None
        self._dst_distance = 10.0
        self._dst_center = np.zeros(3)
        self._dst_pitch = 0.0
        self._dst_yaw = 0.0
        self._dst_fov_y = 30.0
        self._src_distance = 10.0
        self._src_center = np.zeros(3)
        self._src_pitch = 0.0
        self._src_yaw = 0.0
        self._src_fov_y = 30.0

    def set_center(self, center) -> None:
        self._dst_center = np.array(center, dtype=float).reshape(3)

    def set_pitch_yaw(self, pitch: float, yaw: float) -> None:
        self._dst_pitch = float(pitch)
        self._dst_yaw = float(yaw)

    def set_distance(self, distance: float) -> None:
        self._dst_distance = float(distance)

    def set_fov_y(self, fov_y: float) -> None:
        self._dst_fov_y = float(fov_y)

    def current_pitch_yaw(self) -> tuple[float, float]:
        """Blended pitch and yaw in degrees, taking the short way round."""
        diff_pitch = _wrap_degrees(self._dst_pitch - self._src_pitch)
        diff_yaw = _wrap_degrees(self._dst_yaw - self._src_yaw)
        return (
            self._src_pitch + diff_pitch * self.interpolation_factor,
            self._src_yaw + diff_yaw * self.interpolation_factor,
        )

    def current_center(self) -> np.ndarray:
        return self._src_center + (self._dst_center - self._src_center) * self.interpolation_factor

    def current_distance(self) -> float:
        return self._src_distance + (self._dst_distance - self._src_distance) * self.interpolation_factor

    def current_fov_y(self) -> float:
        return self._src_fov_y + (self._dst_fov_y - self._src_fov_y) * self.interpolation_factor

    def store_current_state(self) -> None:
        """Make the blended pose the new starting pose."""
        self._src_center = self.current_center()
        self._src_pitch, self._src_yaw = self.current_pitch_yaw()
        self._src_distance = self.current_distance()
        self._src_fov_y = self.current_fov_y()

    def update(self, delta_time: float) -> CameraData:
        """Advance the easing and compute the camera matrices."""
        self.interpolation_factor = min(max(self.interpolation_factor + delta_time * EASING_RATE, 0.0), 1.0)
        pitch, yaw = self.current_pitch_yaw()
        center = self.current_center()
        distance = self.current_distance()
        fov_y = self.current_fov_y()

        pitch_r = math.radians(pitch)
        yaw_r = math.radians(yaw)
        back = np.array(
            [math.cos(pitch_r) * -math.sin(yaw_r), math.sin(pitch_r), math.cos(pitch_r) * math.cos(yaw_r)]
        )
        right = np.array([math.cos(yaw_r), 0.0, math.sin(yaw_r)])
        up = np.cross(back, right)
        eye = center + back * distance

        rotation = np.eye(4)
        rotation[0, :3] = right
        rotation[1, :3] = up
        rotation[2, :3] = back
        translation = np.eye(4)
        translation[:3, 3] = -eye
        view = rotation @ translation

        projection = _perspective_zo(math.radians(fov_y), self.aspect, NEAR_PLANE, FAR_PLANE)
        data = CameraData(view=view, projection=projection)
        self.camera_data = data
        if self.on_update is not None:
            self.on_update(data)
        return data

    def cursor_move(self, x: float, y: float) -> None:
        """Turn the target pose by a cursor offset; pitch stays within the limit."""
        self._dst_yaw += x * CURSOR_SENSITIVITY
        self._dst_pitch += y * CURSOR_SENSITIVITY
        self._dst_pitch = min(max(self._dst_pitch, -PITCH_LIMIT), PITCH_LIMIT)