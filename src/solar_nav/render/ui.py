from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import pygame

from solar_nav.core.model import WarpInProgress

from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from solar_nav.core.config import RenderCfg
    from solar_nav.core.simulation import World


HELP_TEXT = "WASD/arrows move  Q/E down/up  drag look  SPACE warp  H hud  ESC quit"


def hud_lines(
    world: World,
    fps: float,
    *,
    render_cfg: RenderCfg,
    collision_message: str | None = None,
) -> list[tuple[str, tuple[int, int, int]]]:
    """Text rows for the heads-up panel, top to bottom."""

    eye = world.navigator.eye
    nearest = world.catalog.nearest_to(eye)
    distance = world.catalog.distance_to(eye)
    lines = [
        (f"Position  x={eye[0]:7.2f}  y={eye[1]:7.2f}  z={eye[2]:7.2f}", render_cfg.hud_text_color),
        (f"Nearest waypoint  {nearest.name} ({distance:.2f})", render_cfg.hud_text_color),
    ]
    state = world.warp.state
    if isinstance(state, WarpInProgress):
        lines.append(
            (f"Warping to {state.destination_name}  {state.progress * 100:5.1f}%", render_cfg.warp_bar_color)
        )
    else:
        lines.append(("Warp drive ready", render_cfg.hud_muted_color))
    if collision_message:
        lines.append((collision_message, render_cfg.hud_warning_color))
    lines.append((f"FPS {fps:5.1f}", render_cfg.hud_muted_color))
    return lines


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
    alpha: int | None = None,
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=12,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        if alpha is not None and alpha < 255:
            text_surf = text_surf.copy()
            text_surf.set_alpha(alpha)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    if alpha is not None and alpha < 255:
        panel_surface.set_alpha(alpha)
    return panel_surface


__all__ = ["HELP_TEXT", "build_text_panel", "hud_lines"]
