"""Kinematic orbital motion for the bodies of the system."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

TAU = 2.0 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap *angle* into ``[0, 2π)``."""

    wrapped = angle % TAU
    # ``-1e-20 % TAU`` rounds to TAU itself
    if wrapped >= TAU:
        wrapped = 0.0
    return wrapped


@dataclass
class OrbitingBody:
    """Body on a circular orbit around the origin in the y = 0 plane.

    ``angular_speed`` is in radians per tick; its sign picks the direction
    of travel and zero gives a stationary body.
    """

    name: str
    radius: float
    orbital_distance: float
    angular_speed: float
    color: tuple[int, int, int] = (255, 255, 255)
    angle: float = 0.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"{self.name}: radius must be positive")
        if self.orbital_distance < 0.0:
            raise ValueError(f"{self.name}: orbital distance must be non-negative")
        self.angle = wrap_angle(self.angle)

    def advance(self) -> None:
        self.angle = wrap_angle(self.angle + self.angular_speed)

    def position(self) -> np.ndarray:
        return np.array(
            [
                self.orbital_distance * math.cos(self.angle),
                0.0,
                self.orbital_distance * math.sin(self.angle),
            ],
            dtype=float,
        )

    def orbit_path(self, segments: int) -> np.ndarray:
        """Return ``segments`` evenly spaced points along the orbit."""

        theta = np.linspace(0.0, TAU, segments, endpoint=False)
        return np.column_stack(
            (
                self.orbital_distance * np.cos(theta),
                np.zeros_like(theta),
                self.orbital_distance * np.sin(theta),
            )
        )


@dataclass
class CentralStar:
    """The star at the origin. It spins in place and is not collidable."""

    name: str
    radius: float
    spin_speed: float
    color: tuple[int, int, int] = (255, 179, 0)
    spin_angle: float = 0.0

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"{self.name}: radius must be positive")
        self.spin_angle = wrap_angle(self.spin_angle)

    def spin(self) -> None:
        self.spin_angle = wrap_angle(self.spin_angle + self.spin_speed)

    def position(self) -> np.ndarray:
        return np.zeros(3, dtype=float)


__all__ = ["TAU", "CentralStar", "OrbitingBody", "wrap_angle"]
