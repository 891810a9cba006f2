"""World container and the single per-frame tick."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .config import NAV_CFG, NavigationCfg
from .controls import EdgeTrigger, FrameControls
from .model import Viewpoint, WarpInProgress
from .navigation import Collision, Navigator
from .orbits import CentralStar, OrbitingBody
from .warp import WarpController
from .waypoints import WaypointCatalog


@dataclass
class World:
    """Everything that persists from one tick to the next."""

    bodies: list[OrbitingBody]
    sun: CentralStar | None
    navigator: Navigator
    warp: WarpController
    warp_trigger: EdgeTrigger = field(default_factory=EdgeTrigger)
    tick_count: int = 0

    @property
    def catalog(self) -> WaypointCatalog:
        return self.warp.catalog


@dataclass(frozen=True)
class TickReport:
    tick: int
    collision: Collision | None = None
    warp_started: WarpInProgress | None = None
    warp_completed: WarpInProgress | None = None


def build_world(
    bodies: Sequence[OrbitingBody],
    catalog: WaypointCatalog,
    *,
    sun: CentralStar | None = None,
    cfg: NavigationCfg = NAV_CFG,
    viewpoint: Viewpoint | None = None,
) -> World:
    if viewpoint is None:
        viewpoint = Viewpoint(
            eye=np.array(cfg.start_eye, dtype=float),
            look_at=np.array(cfg.start_look_at, dtype=float),
        )
    return World(
        bodies=list(bodies),
        sun=sun,
        navigator=Navigator(viewpoint, safety_margin=cfg.safety_margin),
        warp=WarpController(catalog, progress_step=cfg.warp_progress_step),
    )


def step_world(world: World, controls: FrameControls) -> TickReport:
    """Run one tick: bodies, then collision check, then warp.

    Viewpoint proposals are dropped while a warp is in flight, so the
    observer cannot steer during the transition. A warp commit is checked
    again against the bodies; landing inside one resets the eye to the last
    safe eye (the warp origin) within the same tick.
    """

    if controls.viewpoint is not None and not world.warp.is_warping:
        world.navigator.propose(controls.viewpoint)

    if world.sun is not None:
        world.sun.spin()
    for body in world.bodies:
        body.advance()

    collision = world.navigator.tick(world.bodies)

    warp_started = None
    if world.warp_trigger.update(controls.activate_warp):
        warp_started = world.warp.trigger(world.navigator)
    warp_completed = world.warp.tick(world.navigator)
    if warp_completed is not None:
        # The committed eye must clear every body before the tick ends
        landing = world.navigator.tick(world.bodies)
        if landing is not None:
            collision = landing

    world.tick_count += 1
    return TickReport(
        tick=world.tick_count,
        collision=collision,
        warp_started=warp_started,
        warp_completed=warp_completed,
    )


__all__ = ["TickReport", "World", "build_world", "step_world"]
