"""Bridges tick reports into the flight recorder."""
from __future__ import annotations

from .config import NavigationCfg
from .logging_utils import RunLogger
from .simulation import TickReport, World


def build_meta(world: World, cfg: NavigationCfg) -> dict:
    return {
        "safety_margin": cfg.safety_margin,
        "warp_progress_step": cfg.warp_progress_step,
        "move_step": cfg.move_step,
        "log_every_ticks": cfg.log_every_ticks,
        "bodies": [
            {
                "name": body.name,
                "radius": body.radius,
                "orbital_distance": body.orbital_distance,
                "angular_speed": body.angular_speed,
            }
            for body in world.bodies
        ],
        "waypoints": [
            {"name": waypoint.name, "position": list(waypoint.coordinates)}
            for waypoint in world.catalog
        ],
    }


def record_tick(run_logger: RunLogger, world: World, report: TickReport, log_every_ticks: int) -> None:
    """Write the events of *report* and, every ``log_every_ticks``, a telemetry row."""

    if report.collision is not None:
        x, y, z = report.collision.position
        run_logger.log_event(
            [report.tick, "collision", float(x), float(y), float(z), {"body": report.collision.body.name}]
        )
    if report.warp_started is not None:
        x, y, z = report.warp_started.destination
        run_logger.log_event(
            [report.tick, "warp_start", float(x), float(y), float(z),
             {"destination": report.warp_started.destination_name}]
        )
    if report.warp_completed is not None:
        x, y, z = report.warp_completed.destination
        run_logger.log_event(
            [report.tick, "warp_complete", float(x), float(y), float(z),
             {"destination": report.warp_completed.destination_name}]
        )

    if report.tick % max(1, log_every_ticks) == 0:
        eye = world.navigator.eye
        run_logger.log_ts(
            [
                report.tick,
                float(eye[0]),
                float(eye[1]),
                float(eye[2]),
                1 if world.warp.is_warping else 0,
                world.warp.progress,
            ]
        )


__all__ = ["build_meta", "record_tick"]
