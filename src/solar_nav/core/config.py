"""Configuration dataclasses for the solar system flight simulator."""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class NavigationCfg:
    safety_margin: float = 1.0
    warp_progress_step: float = 0.02
    move_step: float = 0.5
    start_eye: np.ndarray = field(
        default_factory=lambda: np.array([0.0, 10.0, -20.0], dtype=float)
    )
    start_look_at: np.ndarray = field(
        default_factory=lambda: np.zeros(3, dtype=float)
    )
    interpolate_warp: bool = False
    record_flight: bool = False
    runs_dir: str = "data/runs"
    log_every_ticks: int = 10


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1000
    height: int = 800
    window_title: str = "Solar System"
    fps_cap: int = 60
    fov_deg: float = 45.0
    near_plane: float = 0.1
    background_color: tuple[int, int, int] = (0, 0, 26)
    star_count: int = 1000
    skybox_size: float = 1000.0
    star_seed: int = 42
    star_color: tuple[int, int, int] = (255, 255, 255)
    sun_color: tuple[int, int, int] = (255, 179, 0)
    sun_spot_color: tuple[int, int, int] = (214, 110, 0)
    orbit_segments: int = 100
    orbit_marker_radius: float = 0.05
    orbit_marker_color: tuple[int, int, int] = (128, 128, 128)
    ship_offset: tuple[float, float, float] = (0.0, -2.0, 3.0)
    ship_hull_radius: float = 0.5
    ship_hull_color: tuple[int, int, int] = (179, 179, 179)
    ship_wing_size: tuple[float, float, float] = (0.5, 0.1, 0.25)
    ship_wing_color: tuple[int, int, int] = (153, 153, 153)
    mouse_sensitivity: float = 0.005
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_muted_color: tuple[int, int, int] = (180, 198, 228)
    hud_warning_color: tuple[int, int, int] = (255, 176, 120)
    hud_background_color: tuple[int, int, int, int] = (12, 18, 30, int(255 * 0.55))
    warp_bar_size: tuple[int, int] = (260, 12)
    warp_bar_color: tuple[int, int, int] = (118, 180, 255)
    warp_bar_track_color: tuple[int, int, int, int] = (255, 255, 255, 50)
    collision_flash_duration: float = 1.6


NAV_CFG = NavigationCfg()
RENDER_CFG = RenderCfg()


__all__ = ["NAV_CFG", "RENDER_CFG", "NavigationCfg", "RenderCfg"]
