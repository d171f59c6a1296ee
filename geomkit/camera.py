"""A fly-through camera driven by Euler angles."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np

YAW = -90.0
PITCH = 0.0
SPEED = 2.5
SENSITIVITY = 0.1
ZOOM = 45.0

MAX_PITCH = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class Camera:
    """A camera whose orientation is given by yaw and pitch in degrees."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        up: Sequence[float] = (0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.world_up = np.array(up, dtype=float)
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.zeros(3)
        self.up = np.zeros(3)
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = np.radians(self.yaw)
        pitch = np.radians(self.pitch)
        front = np.array(
            [np.cos(yaw) * np.cos(pitch), np.sin(pitch), np.sin(yaw) * np.cos(pitch)]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))

    def view_matrix(self) -> np.ndarray:
        """Return the 4x4 right-handed look-at view matrix."""
        f = _normalize(self.front)
        s = _normalize(np.cross(f, self.up))
        u = np.cross(s, f)
        eye = self.position
        matrix = np.identity(4)
        matrix[0, :3] = s
        matrix[1, :3] = u
        matrix[2, :3] = -f
        matrix[0, 3] = -np.dot(s, eye)
        matrix[1, 3] = -np.dot(u, eye)
        matrix[2, 3] = np.dot(f, eye)
        return matrix

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera in the given direction for delta_time seconds."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity
        else:
            raise ValueError(f"unknown camera movement: {direction!r}")

    def process_mouse_movement(
        self, x_offset: float, y_offset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by mouse offsets, keeping pitch within +-89 degrees if asked."""
        self.yaw += x_offset * self.mouse_sensitivity
        self.pitch += y_offset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = max(-MAX_PITCH, min(MAX_PITCH, self.pitch))
        self._update_vectors()

    def process_mouse_scroll(self, y_offset: float) -> None:
        """Zoom by the vertical scroll offset, keeping zoom within 1 to 45 degrees."""
        if MIN_ZOOM <= self.zoom <= MAX_ZOOM:
            self.zoom -= y_offset
        if self.zoom <= MIN_ZOOM:
            self.zoom = MIN_ZOOM
        if self.zoom >= MAX_ZOOM:
            self.zoom = MAX_ZOOM