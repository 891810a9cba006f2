"""Per-frame input handed from the render loop to the simulation core."""
from __future__ import annotations

from dataclasses import dataclass

from .model import Viewpoint


class EdgeTrigger:
    """Turns a level-sampled key into one event per press."""

    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def update(self, level: bool) -> bool:
        fired = level and not self._held
        self._held = level
        return fired

    def reset(self) -> None:
        self._held = False


@dataclass(frozen=True)
class FrameControls:
    activate_warp: bool = False
    viewpoint: Viewpoint | None = None


__all__ = ["EdgeTrigger", "FrameControls"]
