from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from solar_nav.core.model import Viewpoint

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=float)
_PITCH_LIMIT = math.pi / 2.0 - 0.01


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


@dataclass
class CameraState:
    eye: np.ndarray
    yaw: float
    pitch: float


class FirstPersonCamera:
    """Perspective camera that the render loop steers and projects through.

    Yaw is measured around +y from the +z axis, pitch from the horizontal
    plane. The camera holds its own state; :meth:`sync` pulls it back from
    the navigator whenever the core replaces the viewpoint.
    """

    def __init__(
        self,
        viewpoint: Viewpoint,
        size: tuple[int, int],
        *,
        fov_deg: float = 45.0,
        near: float = 0.1,
        move_step: float = 0.5,
    ) -> None:
        self._size = size
        self._fov = math.radians(fov_deg)
        self._near = near
        self._move_step = move_step
        self._state = CameraState(eye=viewpoint.eye.astype(float).copy(), yaw=0.0, pitch=0.0)
        self._drag_anchor: tuple[int, int] | None = None
        self._revision: int | None = None
        self._orient_towards(viewpoint.look_at)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def update_size(self, size: tuple[int, int]) -> None:
        self._size = size

    @property
    def eye(self) -> np.ndarray:
        return self._state.eye

    @property
    def yaw(self) -> float:
        return self._state.yaw

    @property
    def pitch(self) -> float:
        return self._state.pitch

    @property
    def move_step(self) -> float:
        return self._move_step

    @property
    def focal_length(self) -> float:
        return (self._size[1] / 2.0) / math.tan(self._fov / 2.0)

    @property
    def forward(self) -> np.ndarray:
        cp = math.cos(self._state.pitch)
        return np.array(
            [
                cp * math.sin(self._state.yaw),
                math.sin(self._state.pitch),
                cp * math.cos(self._state.yaw),
            ],
            dtype=float,
        )

    @property
    def right(self) -> np.ndarray:
        right = np.cross(self.forward, WORLD_UP)
        return right / np.linalg.norm(right)

    @property
    def up(self) -> np.ndarray:
        return np.cross(self.right, self.forward)

    def _orient_towards(self, target: np.ndarray) -> None:
        direction = np.asarray(target, dtype=float) - self._state.eye
        length = float(np.linalg.norm(direction))
        if length <= 1e-9:
            # Eye on top of the target: keep the current heading
            return
        direction /= length
        self._state.yaw = math.atan2(direction[0], direction[2])
        self._state.pitch = _clamp(math.asin(_clamp(direction[1], -1.0, 1.0)), -_PITCH_LIMIT, _PITCH_LIMIT)

    def set_viewpoint(self, viewpoint: Viewpoint) -> None:
        self._state.eye = viewpoint.eye.astype(float).copy()
        self._orient_towards(viewpoint.look_at)

    def sync(self, viewpoint: Viewpoint, revision: int) -> bool:
        """Adopt *viewpoint* if the navigator replaced it since the last sync."""

        if revision == self._revision:
            return False
        self._revision = revision
        self.set_viewpoint(viewpoint)
        return True

    def viewpoint(self) -> Viewpoint:
        eye = self._state.eye.copy()
        return Viewpoint(eye=eye, look_at=eye + self.forward)

    def move(self, forward: float = 0.0, strafe: float = 0.0, rise: float = 0.0) -> None:
        """Translate by whole move steps along the view, right and up axes."""

        if forward == 0.0 and strafe == 0.0 and rise == 0.0:
            return
        delta = self.forward * forward + self.right * strafe + WORLD_UP * rise
        self._state.eye = self._state.eye + delta * self._move_step

    def rotate(self, d_yaw: float, d_pitch: float) -> None:
        """Turn right by ``d_yaw`` and up by ``d_pitch`` radians."""

        # Right is -x when looking down +z, so turning right lowers yaw
        self._state.yaw = (self._state.yaw - d_yaw) % (2.0 * math.pi)
        self._state.pitch = _clamp(self._state.pitch + d_pitch, -_PITCH_LIMIT, _PITCH_LIMIT)

    def begin_drag(self, position: tuple[int, int]) -> None:
        self._drag_anchor = position

    def drag(self, position: tuple[int, int], sensitivity: float) -> None:
        if self._drag_anchor is None:
            return
        dx = position[0] - self._drag_anchor[0]
        dy = position[1] - self._drag_anchor[1]
        if dx == 0 and dy == 0:
            return
        self.rotate(dx * sensitivity, -dy * sensitivity)
        self._drag_anchor = position

    def end_drag(self) -> None:
        self._drag_anchor = None

    def project(
        self,
        points: np.ndarray,
        eye: np.ndarray | None = None,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Project world points to screen coordinates.

        Returns ``(screen_xy, depth, visible)``; points at or behind the near
        plane are flagged invisible and their screen coordinates are
        meaningless. *eye* overrides the camera position, keeping its
        orientation.
        """

        pts = np.atleast_2d(np.asarray(points, dtype=float))
        origin = self._state.eye if eye is None else np.asarray(eye, dtype=float)
        basis = np.vstack((self.right, self.up, self.forward))
        cam = (pts - origin) @ basis.T
        depth = cam[:, 2]
        visible = depth > self._near
        safe_depth = np.where(visible, depth, 1.0)
        focal = self.focal_length
        width, height = self._size
        sx = width / 2.0 + focal * cam[:, 0] / safe_depth
        sy = height / 2.0 - focal * cam[:, 1] / safe_depth
        return np.column_stack((sx, sy)), depth, visible

    def projected_radius(self, radius: float, depth: float) -> float:
        if depth <= self._near:
            return 0.0
        return self.focal_length * radius / depth


__all__ = ["CameraState", "FirstPersonCamera"]
