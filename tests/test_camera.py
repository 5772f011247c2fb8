import math

import numpy as np
import pytest

from voxelterrain.camera import CameraFPS, look_at, perspective
from voxelterrain.types import Input


def _ndc(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]


def test_perspective_shape_invariants():
    m = perspective(math.radians(60), 2.0, 0.5, 100.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert m[0, 0] * 2.0 == pytest.approx(m[1, 1])
    assert m[1, 1] == pytest.approx(1.0 / math.tan(math.radians(30)))


def test_perspective_maps_near_and_far_to_zero_and_one():
    near, far = 0.5, 100.0
    m = perspective(math.radians(45), 1.0, near, far)
    assert _ndc(m, (0, 0, -near))[2] == pytest.approx(0.0, abs=1e-9)
    assert _ndc(m, (0, 0, -far))[2] == pytest.approx(1.0)


def test_look_at_moves_eye_to_origin_and_target_ahead():
    eye = (3.0, 4.0, 5.0)
    center = (3.0, 4.0, -5.0)
    m = look_at(eye, center, (0, 1, 0))
    assert np.allclose(m @ np.array([*eye, 1.0]), [0, 0, 0, 1])
    assert np.allclose(m @ np.array([*center, 1.0]), [0, 0, -10, 1])


def test_look_at_rotation_is_orthonormal():
    m = look_at((1, 2, 3), (4, -1, 7), (0, 1, 0))
    rot = m[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))


def test_camera_centres_point_ahead():
    cam = CameraFPS(800, 600, (32.0, 150.0, 32.0))
    vp = cam.view_projection_matrix()
    ndc = _ndc(vp, cam.position + cam.forward * 10.0)
    assert ndc[0] == pytest.approx(0.0, abs=1e-9)
    assert ndc[1] == pytest.approx(0.0, abs=1e-9)
    assert 0.0 < ndc[2] < 1.0


def test_camera_flips_y_and_keeps_x():
    cam = CameraFPS(800, 600, (0.0, 0.0, 0.0))
    vp = cam.view_projection_matrix()
    ahead = cam.position + cam.forward * 10.0
    assert _ndc(vp, ahead + cam.up)[1] < 0.0
    assert _ndc(vp, ahead + cam.right)[0] > 0.0


def test_clip_planes_map_to_depth_range():
    cam = CameraFPS(800, 600, (1.0, 2.0, 3.0))
    vp = cam.view_projection_matrix()
    near = _ndc(vp, cam.position + cam.forward * cam.near_clip)[2]
    far = _ndc(vp, cam.position + cam.forward * cam.far_clip)[2]
    assert near == pytest.approx(0.0, abs=1e-6)
    assert far == pytest.approx(1.0)


def test_set_size_updates_aspect():
    cam = CameraFPS(800, 600, (0, 0, 0))
    cam.set_size(1920, 1080)
    assert (cam.width, cam.height) == (1920, 1080)
    assert cam.aspect == pytest.approx(1920 / 1080)


def test_forward_movement_uses_speed_and_dt():
    cam = CameraFPS(800, 600, (0.0, 0.0, 0.0))
    start = cam.position.copy()
    cam.process_input(Input(w_pressed=True), 0.5)
    assert np.allclose(cam.position, start + cam.forward * cam.movement_speed * 0.5)


def test_opposite_keys_cancel():
    cam = CameraFPS(800, 600, (5.0, 6.0, 7.0))
    cam.process_input(
        Input(w_pressed=True, s_pressed=True, a_pressed=True, d_pressed=True,
              e_pressed=True, q_pressed=True),
        1.0,
    )
    assert np.allclose(cam.position, [5.0, 6.0, 7.0])


def test_pitch_is_clamped_and_basis_stays_orthonormal():
    cam = CameraFPS(800, 600, (0, 0, 0))
    cam.process_input(Input(mouse_y=100000), 0.0)
    assert cam.pitch == 89.0
    cam.process_input(Input(mouse_y=-100000), 0.0)
    assert cam.pitch == -89.0
    assert np.linalg.norm(cam.forward) == pytest.approx(1.0)
    assert np.dot(cam.forward, cam.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(cam.forward, cam.up) == pytest.approx(0.0, abs=1e-9)


def test_mouse_yaw_turns_camera():
    cam = CameraFPS(800, 600, (0, 0, 0))
    cam.process_input(Input(mouse_x=900), 0.0)
    assert cam.yaw == pytest.approx(0.0, abs=1e-9)
    assert np.allclose(cam.forward, [1.0, 0.0, 0.0])


def test_no_mouse_motion_keeps_orientation():
    cam = CameraFPS(800, 600, (0, 0, 0))
    before = cam.forward.copy()
    cam.process_input(Input(d_pressed=True), 0.1)
    assert np.array_equal(cam.forward, before)
    assert cam.yaw == -90.0