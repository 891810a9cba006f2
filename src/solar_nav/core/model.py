"""Plain value types shared by the navigation core and the renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


@dataclass(frozen=True, eq=False)
class Viewpoint:
    """Observer eye position and the point it looks at."""

    eye: np.ndarray
    look_at: np.ndarray

    @classmethod
    def from_points(cls, eye: Sequence[float], look_at: Sequence[float]) -> "Viewpoint":
        return cls(
            eye=np.array(eye, dtype=float),
            look_at=np.array(look_at, dtype=float),
        )

    def copy(self) -> "Viewpoint":
        return Viewpoint(eye=self.eye.copy(), look_at=self.look_at.copy())


@dataclass(frozen=True)
class WarpIdle:
    pass


@dataclass(frozen=True, eq=False)
class WarpInProgress:
    origin: np.ndarray
    destination: np.ndarray
    destination_name: str
    progress: float = 0.0


WarpState = Union[WarpIdle, WarpInProgress]


__all__ = ["Viewpoint", "WarpIdle", "WarpInProgress", "WarpState"]
