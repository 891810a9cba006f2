"""
Solar System Flight - first-person tour of a kinematic solar system
===================================================================

The pygame loop owns the window, the camera and input polling. Each frame it
hands the camera viewpoint and the warp key to :func:`step_world`, then syncs
the camera back from the navigator and draws the scene.
"""
from __future__ import annotations

import logging
import random
import sys

import pygame
from pygame.locals import DOUBLEBUF

from solar_nav.core.config import NAV_CFG, RENDER_CFG, NavigationCfg, RenderCfg
from solar_nav.core.controls import FrameControls
from solar_nav.core.logging_utils import RunLogger, setup_logging
from solar_nav.core.simulation import World, build_world, step_world
from solar_nav.core.telemetry import build_meta, record_tick
from solar_nav.core.timekeeping import FpsMeter, FrameTimer
from solar_nav.data.solar_system import SUN_DEFINITION, create_bodies, create_waypoint_catalog
from solar_nav.render import (
    HELP_TEXT,
    FirstPersonCamera,
    build_text_panel,
    draw_progress_bar,
    draw_starfield,
    generate_starfield,
    get_text_surface,
    hud_lines,
    load_font,
    orbit_marker_items,
    paint_depth_sorted,
    planet_items,
    ship_items,
    sun_items,
)

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    "forward": (pygame.K_w, pygame.K_UP),
    "back": (pygame.K_s, pygame.K_DOWN),
    "left": (pygame.K_a, pygame.K_LEFT),
    "right": (pygame.K_d, pygame.K_RIGHT),
    "down": (pygame.K_q,),
    "up": (pygame.K_e,),
}


def _axis(keys, positive: str, negative: str) -> float:
    value = 0.0
    if any(keys[k] for k in MOVE_KEYS[positive]):
        value += 1.0
    if any(keys[k] for k in MOVE_KEYS[negative]):
        value -= 1.0
    return value


def create_world(cfg: NavigationCfg = NAV_CFG) -> World:
    return build_world(
        create_bodies(),
        create_waypoint_catalog(),
        sun=SUN_DEFINITION.create(),
        cfg=cfg,
    )


def main(cfg: NavigationCfg = NAV_CFG, render_cfg: RenderCfg = RENDER_CFG) -> None:
    setup_logging(logging.INFO)
    pygame.init()
    pygame.display.set_caption(render_cfg.window_title)
    screen = pygame.display.set_mode((render_cfg.width, render_cfg.height), DOUBLEBUF)

    clock = pygame.time.Clock()
    font = load_font(["consolas", "dejavusansmono", "couriernew"], 16)
    help_font = load_font(["consolas", "dejavusansmono", "couriernew"], 13)

    world = create_world(cfg)
    camera = FirstPersonCamera(
        world.navigator.viewpoint,
        screen.get_size(),
        fov_deg=render_cfg.fov_deg,
        near=render_cfg.near_plane,
        move_step=cfg.move_step,
    )
    camera.sync(world.navigator.viewpoint, world.navigator.revision)

    stars = generate_starfield(
        render_cfg.star_count,
        size=render_cfg.skybox_size,
        rng=random.Random(render_cfg.star_seed),
    )
    orbit_paths = [body.orbit_path(render_cfg.orbit_segments) for body in world.bodies]

    run_logger: RunLogger | None = None
    if cfg.record_flight:
        run_logger = RunLogger(cfg.runs_dir)
        run_logger.write_meta(build_meta(world, cfg))
        logger.info("Recording flight to %s", run_logger.run_dir)

    timer = FrameTimer()
    fps_meter = FpsMeter()
    show_hud = True
    collision_message: str | None = None
    collision_flash_left = 0.0
    running = True

    try:
        while running:
            dt = timer.tick()
            fps = fps_meter.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_h:
                        show_hud = not show_hud
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    camera.begin_drag(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    camera.end_drag()
                elif event.type == pygame.MOUSEMOTION and not world.warp.is_warping:
                    camera.drag(event.pos, render_cfg.mouse_sensitivity)
            if not running:
                break

            keys = pygame.key.get_pressed()
            proposal = None
            if not world.warp.is_warping:
                camera.move(
                    forward=_axis(keys, "forward", "back"),
                    strafe=_axis(keys, "right", "left"),
                    rise=_axis(keys, "up", "down"),
                )
                proposal = camera.viewpoint()

            report = step_world(
                world,
                FrameControls(activate_warp=bool(keys[pygame.K_SPACE]), viewpoint=proposal),
            )
            camera.sync(world.navigator.viewpoint, world.navigator.revision)

            if report.collision is not None:
                collision_message = f"Too close to {report.collision.body.name}"
                collision_flash_left = render_cfg.collision_flash_duration
            elif collision_flash_left > 0.0:
                collision_flash_left -= dt
                if collision_flash_left <= 0.0:
                    collision_message = None

            if run_logger is not None:
                record_tick(run_logger, world, report, cfg.log_every_ticks)

            view_eye = None
            if cfg.interpolate_warp and world.warp.is_warping:
                view_eye = world.warp.interpolated_eye()
            observer_eye = world.navigator.eye if view_eye is None else view_eye

            screen.fill(render_cfg.background_color)
            draw_starfield(screen, camera, stars, color=render_cfg.star_color, eye=view_eye)
            items = []
            items.extend(orbit_marker_items(camera, orbit_paths, render_cfg=render_cfg, eye=view_eye))
            if world.sun is not None:
                items.extend(sun_items(camera, world.sun, render_cfg=render_cfg, eye=view_eye))
            items.extend(planet_items(camera, world.bodies, eye=view_eye))
            items.extend(ship_items(camera, observer_eye, render_cfg=render_cfg, eye=view_eye))
            paint_depth_sorted(screen, items)

            if show_hud:
                lines = hud_lines(world, fps, render_cfg=render_cfg, collision_message=collision_message)
                panel = build_text_panel(font, lines, background_color=render_cfg.hud_background_color)
                screen.blit(panel, (16, 16))
                if world.warp.is_warping:
                    bar_w, bar_h = render_cfg.warp_bar_size
                    bar_rect = pygame.Rect(0, 0, bar_w, bar_h)
                    bar_rect.midbottom = (screen.get_width() // 2, screen.get_height() - 48)
                    draw_progress_bar(
                        screen,
                        bar_rect,
                        world.warp.progress,
                        color=render_cfg.warp_bar_color,
                        track_color=render_cfg.warp_bar_track_color,
                    )
                help_surf = get_text_surface(help_font, HELP_TEXT, render_cfg.hud_muted_color)
                screen.blit(help_surf, (16, screen.get_height() - help_surf.get_height() - 12))

            pygame.display.flip()
            clock.tick(render_cfg.fps_cap)
    finally:
        if run_logger is not None:
            run_logger.close()
        pygame.quit()


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit()


if __name__ == "__main__":
    run()
