from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TYPE_CHECKING

import numpy as np
import pygame

from .camera import FirstPersonCamera

if TYPE_CHECKING:  # pragma: no cover
    from solar_nav.core.config import RenderCfg
    from solar_nav.core.orbits import CentralStar, OrbitingBody


@dataclass(frozen=True)
class DepthItem:
    depth: float
    paint: Callable[[pygame.Surface], None]


def generate_starfield(
    num_stars: int,
    *,
    size: float,
    rng: random.Random | None = None,
) -> np.ndarray:
    """Scatter stars uniformly inside a cube of edge ``size`` around the origin."""

    rng = rng or random.Random()
    half = size / 2.0
    return np.array(
        [[rng.uniform(-half, half) for _ in range(3)] for _ in range(num_stars)],
        dtype=float,
    ).reshape(num_stars, 3)


def draw_starfield(
    surface: pygame.Surface,
    camera: FirstPersonCamera,
    stars: np.ndarray,
    *,
    color: tuple[int, int, int],
    eye: np.ndarray | None = None,
) -> None:
    if stars.size == 0:
        return
    screen, depth, visible = camera.project(stars, eye)
    width, height = surface.get_size()
    for (sx, sy), z, shown in zip(screen, depth, visible):
        if not shown:
            continue
        x, y = int(sx), int(sy)
        if 0 <= x < width and 0 <= y < height:
            radius = 2 if z < 150.0 else 1
            pygame.draw.circle(surface, color, (x, y), radius)


def _sphere_item(
    camera: FirstPersonCamera,
    center: np.ndarray,
    radius: float,
    color: tuple[int, int, int],
    eye: np.ndarray | None,
    *,
    min_pixels: int = 1,
) -> DepthItem | None:
    screen, depth, visible = camera.project(center, eye)
    if not visible[0]:
        return None
    radius_px = max(min_pixels, int(round(camera.projected_radius(radius, float(depth[0])))))
    position = (int(screen[0][0]), int(screen[0][1]))

    def paint(surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, color, position, radius_px)

    return DepthItem(depth=float(depth[0]), paint=paint)


def _flat_box_item(
    camera: FirstPersonCamera,
    center: np.ndarray,
    size: tuple[float, float, float],
    color: tuple[int, int, int],
    eye: np.ndarray | None,
) -> DepthItem | None:
    half_x = size[0] / 2.0
    half_z = size[2] / 2.0
    corners = center + np.array(
        [
            [-half_x, 0.0, -half_z],
            [half_x, 0.0, -half_z],
            [half_x, 0.0, half_z],
            [-half_x, 0.0, half_z],
        ]
    )
    screen, depth, visible = camera.project(corners, eye)
    if not visible.all():
        return None
    polygon = [(int(x), int(y)) for x, y in screen]

    def paint(surface: pygame.Surface) -> None:
        pygame.draw.polygon(surface, color, polygon)

    return DepthItem(depth=float(depth.mean()), paint=paint)


def orbit_marker_items(
    camera: FirstPersonCamera,
    orbit_paths: Iterable[np.ndarray],
    *,
    render_cfg: RenderCfg,
    eye: np.ndarray | None = None,
) -> list[DepthItem]:
    items: list[DepthItem] = []
    for path in orbit_paths:
        screen, depth, visible = camera.project(path, eye)
        for (sx, sy), z, shown in zip(screen, depth, visible):
            if not shown:
                continue
            radius_px = max(1, int(round(camera.projected_radius(render_cfg.orbit_marker_radius, float(z)))))
            position = (int(sx), int(sy))

            def paint(surface: pygame.Surface, position=position, radius_px=radius_px) -> None:
                pygame.draw.circle(surface, render_cfg.orbit_marker_color, position, radius_px)

            items.append(DepthItem(depth=float(z), paint=paint))
    return items


def sun_items(
    camera: FirstPersonCamera,
    sun: CentralStar,
    *,
    render_cfg: RenderCfg,
    eye: np.ndarray | None = None,
) -> list[DepthItem]:
    items: list[DepthItem] = []
    body = _sphere_item(camera, sun.position(), sun.radius, sun.color, eye)
    if body is None:
        return items
    items.append(body)

    # A surface spot on the equator makes the spin visible
    spot = np.array(
        [
            sun.radius * math.cos(sun.spin_angle),
            0.0,
            sun.radius * math.sin(sun.spin_angle),
        ]
    )
    spot_item = _sphere_item(camera, spot, sun.radius * 0.25, render_cfg.sun_spot_color, eye)
    if spot_item is not None and spot_item.depth < body.depth:
        items.append(spot_item)
    return items


def planet_items(
    camera: FirstPersonCamera,
    bodies: Sequence[OrbitingBody],
    *,
    eye: np.ndarray | None = None,
) -> list[DepthItem]:
    items: list[DepthItem] = []
    for body in bodies:
        item = _sphere_item(camera, body.position(), body.radius, body.color, eye, min_pixels=2)
        if item is not None:
            items.append(item)
    return items


def ship_items(
    camera: FirstPersonCamera,
    observer_eye: np.ndarray,
    *,
    render_cfg: RenderCfg,
    eye: np.ndarray | None = None,
) -> list[DepthItem]:
    hull_center = observer_eye + np.array(render_cfg.ship_offset, dtype=float)
    wing_offset = np.array([render_cfg.ship_hull_radius, 0.0, 0.0])
    candidates = [
        _sphere_item(camera, hull_center, render_cfg.ship_hull_radius, render_cfg.ship_hull_color, eye),
        _flat_box_item(camera, hull_center - wing_offset, render_cfg.ship_wing_size, render_cfg.ship_wing_color, eye),
        _flat_box_item(camera, hull_center + wing_offset, render_cfg.ship_wing_size, render_cfg.ship_wing_color, eye),
    ]
    return [item for item in candidates if item is not None]


def paint_depth_sorted(surface: pygame.Surface, items: Iterable[DepthItem]) -> None:
    """Painter's algorithm: far items first."""

    for item in sorted(items, key=lambda it: it.depth, reverse=True):
        item.paint(surface)


def draw_progress_bar(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fraction: float,
    *,
    color: tuple[int, int, int],
    track_color: tuple[int, int, int, int],
) -> None:
    fraction = max(0.0, min(1.0, fraction))
    track = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(track, track_color, track.get_rect(), border_radius=rect.height // 2)
    surface.blit(track, rect.topleft)
    fill_width = int(rect.width * fraction)
    if fill_width > 0:
        pygame.draw.rect(
            surface,
            color,
            pygame.Rect(rect.left, rect.top, fill_width, rect.height),
            border_radius=rect.height // 2,
        )


__all__ = [
    "DepthItem",
    "draw_progress_bar",
    "draw_starfield",
    "generate_starfield",
    "orbit_marker_items",
    "paint_depth_sorted",
    "planet_items",
    "ship_items",
    "sun_items",
]
