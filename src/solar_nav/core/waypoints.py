"""Fixed warp destinations and nearest-waypoint lookup."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

import numpy as np


@dataclass(frozen=True)
class Waypoint:
    name: str
    coordinates: tuple[float, float, float]

    @property
    def position(self) -> np.ndarray:
        return np.array(self.coordinates, dtype=float)


@dataclass(frozen=True)
class WaypointCatalog:
    """Read-only, ordered set of waypoints.

    Lookups scan in enumeration order and only replace the current best on a
    strictly smaller distance, so the first of several equidistant waypoints
    wins.
    """

    waypoints: tuple[Waypoint, ...]
    _positions: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.waypoints:
            raise ValueError("Waypoint catalog must contain at least one waypoint")
        positions = np.array([wp.coordinates for wp in self.waypoints], dtype=float)
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_points(
        cls,
        points: Iterable[Sequence[float]],
        names: Sequence[str] | None = None,
    ) -> "WaypointCatalog":
        waypoints = []
        for idx, point in enumerate(points):
            name = names[idx] if names is not None else f"WP{idx}"
            x, y, z = (float(v) for v in point)
            waypoints.append(Waypoint(name=name, coordinates=(x, y, z)))
        return cls(tuple(waypoints))

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints)

    def nearest_to(self, point: Sequence[float] | np.ndarray) -> Waypoint:
        offsets = self._positions - np.asarray(point, dtype=float)
        dist2 = np.einsum("ij,ij->i", offsets, offsets)
        best_index = 0
        best = float(dist2[0])
        for idx in range(1, len(dist2)):
            if dist2[idx] < best:
                best = float(dist2[idx])
                best_index = idx
        return self.waypoints[best_index]

    def distance_to(self, point: Sequence[float] | np.ndarray) -> float:
        """Euclidean distance from *point* to its nearest waypoint."""

        nearest = self.nearest_to(point)
        offset = nearest.position - np.asarray(point, dtype=float)
        return math.sqrt(float(offset @ offset))


__all__ = ["Waypoint", "WaypointCatalog"]
