import math

import numpy as np

from solar_nav.core.model import Viewpoint
from solar_nav.render.camera import FirstPersonCamera


def _camera(eye=(0, 0, 0), look_at=(0, 0, 1)) -> FirstPersonCamera:
    return FirstPersonCamera(Viewpoint.from_points(eye, look_at), (1000, 800), fov_deg=45.0, move_step=0.5)


def test_orientation_from_look_at() -> None:
    camera = _camera(eye=(0, 10, -20), look_at=(0, 0, 0))
    assert math.isclose(camera.yaw, 0.0, abs_tol=1e-12)
    assert camera.pitch < 0.0
    expected = np.array([0.0, -10.0, 20.0]) / math.sqrt(500.0)
    assert np.allclose(camera.forward, expected)


def test_point_ahead_projects_to_screen_centre() -> None:
    camera = _camera()
    screen, depth, visible = camera.project(np.array([[0.0, 0.0, 10.0]]))
    assert visible[0]
    assert math.isclose(depth[0], 10.0)
    assert np.allclose(screen[0], [500.0, 400.0])


def test_point_behind_is_not_visible() -> None:
    camera = _camera()
    _, _, visible = camera.project(np.array([[0.0, 0.0, -5.0], [0.0, 0.0, 0.05]]))
    assert not visible.any()


def test_right_and_up_map_to_screen_axes() -> None:
    camera = _camera()
    points = np.array([camera.right * 1.0 + [0, 0, 10], [0.0, 1.0, 10.0]])
    screen, _, _ = camera.project(points)
    assert screen[0][0] > 500.0
    assert screen[1][1] < 400.0


def test_move_uses_step_and_view_axes() -> None:
    camera = _camera()
    camera.move(forward=1.0)
    assert np.allclose(camera.eye, [0.0, 0.0, 0.5])
    camera.move(rise=-1.0)
    assert np.allclose(camera.eye, [0.0, -0.5, 0.5])


def test_turning_right_swings_forward_towards_right() -> None:
    camera = _camera()
    right = camera.right.copy()
    camera.rotate(0.3, 0.0)
    assert float(camera.forward @ right) > 0.0


def test_pitch_is_clamped() -> None:
    camera = _camera()
    camera.rotate(0.0, 10.0)
    assert camera.pitch < math.pi / 2.0
    assert np.isfinite(camera.right).all()


def test_sync_only_adopts_new_revisions() -> None:
    camera = _camera()
    assert camera.sync(Viewpoint.from_points((0, 0, 0), (0, 0, 1)), 0)
    camera.move(forward=2.0)
    assert not camera.sync(Viewpoint.from_points((0, 0, 0), (0, 0, 1)), 0)
    assert np.allclose(camera.eye, [0.0, 0.0, 1.0])

    assert camera.sync(Viewpoint.from_points((7, 0, 7), (0, 0, 0)), 1)
    assert np.allclose(camera.eye, [7.0, 0.0, 7.0])
    assert float(camera.forward @ np.array([-1.0, 0.0, -1.0])) > 0.0


def test_degenerate_look_at_keeps_heading() -> None:
    camera = _camera(eye=(0, 0, -5), look_at=(1, 0, -5))
    yaw = camera.yaw
    camera.set_viewpoint(Viewpoint.from_points((0, 0, 0), (0, 0, 0)))
    assert np.allclose(camera.eye, [0.0, 0.0, 0.0])
    assert camera.yaw == yaw


def test_viewpoint_looks_one_unit_ahead() -> None:
    camera = _camera(eye=(1, 2, 3), look_at=(1, 2, 10))
    viewpoint = camera.viewpoint()
    assert np.allclose(viewpoint.eye, [1.0, 2.0, 3.0])
    assert np.allclose(viewpoint.look_at, [1.0, 2.0, 4.0])


def test_projected_radius_shrinks_with_depth() -> None:
    camera = _camera()
    assert camera.projected_radius(1.0, 10.0) > camera.projected_radius(1.0, 20.0)
    assert camera.projected_radius(1.0, 0.0) == 0.0
