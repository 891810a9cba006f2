"""Frame timing utilities for the render loop."""
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt


@dataclass
class FpsMeter:
    """Exponentially smoothed frames-per-second estimate."""

    smoothing: float = 0.1
    value: float = 0.0

    def update(self, dt: float) -> float:
        if dt <= 0.0:
            return self.value
        instant = 1.0 / dt
        if self.value <= 0.0:
            self.value = instant
        else:
            self.value += (instant - self.value) * self.smoothing
        return self.value


__all__ = ["FpsMeter", "FrameTimer"]
