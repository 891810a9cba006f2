"""Warp state machine layered on top of the navigator."""
from __future__ import annotations

import logging

import numpy as np

from .config import NAV_CFG
from .model import Viewpoint, WarpIdle, WarpInProgress, WarpState
from .navigation import Navigator
from .waypoints import WaypointCatalog

logger = logging.getLogger(__name__)

# Absorbs float drift from summing a fixed step, e.g. 50 * 0.02.
_PROGRESS_EPSILON = 1e-9


class WarpController:
    """Idle / in-progress warp towards the waypoint nearest the trigger point.

    The destination is chosen once when the warp is triggered. Each tick in
    flight adds ``progress_step``; reaching 1.0 commits the navigator
    viewpoint to ``(destination, origin of coordinates)``.
    """

    def __init__(
        self,
        catalog: WaypointCatalog,
        *,
        progress_step: float = NAV_CFG.warp_progress_step,
    ) -> None:
        if progress_step <= 0.0:
            raise ValueError("progress_step must be positive")
        self._catalog = catalog
        self._progress_step = progress_step
        self._state: WarpState = WarpIdle()

    @property
    def catalog(self) -> WaypointCatalog:
        return self._catalog

    @property
    def progress_step(self) -> float:
        return self._progress_step

    @property
    def state(self) -> WarpState:
        return self._state

    @property
    def is_warping(self) -> bool:
        return isinstance(self._state, WarpInProgress)

    @property
    def progress(self) -> float:
        if isinstance(self._state, WarpInProgress):
            return self._state.progress
        return 0.0

    def trigger(self, navigator: Navigator) -> WarpInProgress | None:
        """Start a warp from the navigator's eye. No-op while one is in flight."""

        if isinstance(self._state, WarpInProgress):
            return None
        origin = navigator.eye.copy()
        waypoint = self._catalog.nearest_to(origin)
        self._state = WarpInProgress(
            origin=origin,
            destination=waypoint.position,
            destination_name=waypoint.name,
            progress=0.0,
        )
        logger.info("Warp to %s started from %s", waypoint.name, np.round(origin, 3).tolist())
        return self._state

    def tick(self, navigator: Navigator) -> WarpInProgress | None:
        """Advance an in-flight warp; return the finished warp on commit."""

        state = self._state
        if not isinstance(state, WarpInProgress):
            return None

        progress = state.progress + self._progress_step
        if progress < 1.0 - _PROGRESS_EPSILON:
            self._state = WarpInProgress(
                origin=state.origin,
                destination=state.destination,
                destination_name=state.destination_name,
                progress=progress,
            )
            return None

        navigator.replace(
            Viewpoint(eye=state.destination.copy(), look_at=np.zeros(3, dtype=float))
        )
        self._state = WarpIdle()
        logger.info("Warp to %s complete", state.destination_name)
        return state

    def interpolated_eye(self) -> np.ndarray | None:
        """Display-only eye between origin and destination while warping."""

        state = self._state
        if not isinstance(state, WarpInProgress):
            return None
        return state.origin + (state.destination - state.origin) * state.progress


__all__ = ["WarpController"]
