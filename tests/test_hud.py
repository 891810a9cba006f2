from solar_nav.core.config import RENDER_CFG
from solar_nav.core.controls import FrameControls
from solar_nav.core.simulation import build_world, step_world
from solar_nav.data.solar_system import create_bodies, create_waypoint_catalog
from solar_nav.render.ui import hud_lines


def test_hud_reports_position_waypoint_and_warp() -> None:
    world = build_world(create_bodies(), create_waypoint_catalog())
    lines = [text for text, _ in hud_lines(world, 60.0, render_cfg=RENDER_CFG)]
    assert lines[0].startswith("Position")
    assert "Sun" in lines[1]
    assert lines[2] == "Warp drive ready"

    step_world(world, FrameControls(activate_warp=True))
    lines = [text for text, _ in hud_lines(world, 60.0, render_cfg=RENDER_CFG, collision_message="Too close")]
    assert lines[2].startswith("Warping to Sun")
    assert "Too close" in lines
    assert lines[-1].startswith("FPS")
