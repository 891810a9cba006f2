"""Observer viewpoint ownership and collision avoidance."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import NAV_CFG
from .model import Viewpoint
from .orbits import OrbitingBody

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Collision:
    """The body that forced a viewpoint reset during a tick."""

    body: OrbitingBody
    body_index: int
    position: np.ndarray


def first_violation(
    eye: np.ndarray,
    bodies: Sequence[OrbitingBody],
    safety_margin: float,
) -> Collision | None:
    """Return the first body whose clearance *eye* violates, if any.

    A distance exactly equal to ``radius + safety_margin`` is clear.
    """

    for idx, body in enumerate(bodies):
        position = body.position()
        offset = eye - position
        distance = math.sqrt(float(offset @ offset))
        if distance < body.radius + safety_margin:
            return Collision(body=body, body_index=idx, position=position)
    return None


class Navigator:
    """Owns the observer viewpoint and keeps it out of every body.

    On a violation the viewpoint is replaced by ``(last_safe_eye,
    body_position)`` instead of being pushed out along a normal. The eye is
    promoted to ``last_safe_eye`` only after passing the check.
    """

    def __init__(
        self,
        viewpoint: Viewpoint,
        *,
        safety_margin: float = NAV_CFG.safety_margin,
    ) -> None:
        if safety_margin < 0.0:
            raise ValueError("safety_margin must be non-negative")
        self._viewpoint = viewpoint.copy()
        self._last_safe_eye = viewpoint.eye.copy()
        self._safety_margin = safety_margin
        self._revision = 0

    @property
    def viewpoint(self) -> Viewpoint:
        return self._viewpoint

    @property
    def eye(self) -> np.ndarray:
        return self._viewpoint.eye

    @property
    def last_safe_eye(self) -> np.ndarray:
        return self._last_safe_eye

    @property
    def safety_margin(self) -> float:
        return self._safety_margin

    @property
    def revision(self) -> int:
        """Incremented whenever the viewpoint is replaced by the core."""

        return self._revision

    def propose(self, viewpoint: Viewpoint) -> None:
        """Accept the viewpoint produced by external camera input."""

        self._viewpoint = viewpoint.copy()

    def replace(self, viewpoint: Viewpoint) -> None:
        """Replace the viewpoint on behalf of the core (reset or warp commit)."""

        self._viewpoint = viewpoint.copy()
        self._revision += 1

    def tick(self, bodies: Sequence[OrbitingBody]) -> Collision | None:
        eye = self._viewpoint.eye
        collision = first_violation(eye, bodies, self._safety_margin)
        if collision is None:
            self._last_safe_eye = eye.copy()
            return None

        logger.debug(
            "Too close to %s at %s, resetting eye to %s",
            collision.body.name,
            np.round(eye, 3).tolist(),
            np.round(self._last_safe_eye, 3).tolist(),
        )
        self.replace(Viewpoint(eye=self._last_safe_eye.copy(), look_at=collision.position))
        return collision


__all__ = ["Collision", "Navigator", "first_violation"]
