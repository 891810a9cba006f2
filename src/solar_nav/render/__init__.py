"""Rendering helpers for the solar system flight simulator."""

from .camera import FirstPersonCamera
from .assets import (
    get_text_surface,
    load_font,
)
from .draw import (
    DepthItem,
    draw_progress_bar,
    draw_starfield,
    generate_starfield,
    orbit_marker_items,
    paint_depth_sorted,
    planet_items,
    ship_items,
    sun_items,
)
from .ui import (
    HELP_TEXT,
    build_text_panel,
    hud_lines,
)

__all__ = [
    "DepthItem",
    "FirstPersonCamera",
    "HELP_TEXT",
    "build_text_panel",
    "draw_progress_bar",
    "draw_starfield",
    "generate_starfield",
    "get_text_surface",
    "hud_lines",
    "load_font",
    "orbit_marker_items",
    "paint_depth_sorted",
    "planet_items",
    "ship_items",
    "sun_items",
]
