import numpy as np
import pytest

from blockworld.camera import PITCH_LIMIT, Camera, CameraOptions


def _to_ndc(camera, point):
    clip = camera.projection_matrix @ camera.view_matrix @ np.array([*point, 1.0])
    return clip[:3] / clip[3]


def test_matrices_zero_until_configured():
    camera = Camera(CameraOptions(pos=(1.0, 2.0, 3.0)))
    assert not camera.view_matrix.any()
    assert not camera.projection_matrix.any()
    assert camera.position == (1.0, 2.0, 3.0)


def test_default_options():
    options = Camera().options
    assert options.fov == 45.0
    assert options.near == pytest.approx(0.1)
    assert options.far == 1000.0


def test_pitch_is_clamped():
    camera = Camera()
    camera.configure(CameraOptions(pitch=120.0))
    assert camera.options.pitch == PITCH_LIMIT
    camera.configure(CameraOptions(pitch=-120.0))
    assert camera.options.pitch == -PITCH_LIMIT


def test_yaw_wraps():
    camera = Camera()
    camera.configure(CameraOptions(yaw=400.0))
    assert camera.options.yaw == 0.0
    camera.configure(CameraOptions(yaw=-10.0))
    assert camera.options.yaw == 360.0
    camera.configure(CameraOptions(yaw=270.0))
    assert camera.options.yaw == 270.0


def test_forward_follows_yaw_and_ignores_pitch():
    camera = Camera()
    camera.configure(CameraOptions(yaw=0.0, pitch=45.0))
    assert np.allclose(camera.forward, (1.0, 0.0, 0.0))
    camera.configure(CameraOptions(yaw=90.0))
    assert np.allclose(camera.forward, (0.0, 0.0, 1.0))
    assert np.linalg.norm(camera.forward) == pytest.approx(1.0)


def test_view_matrix_moves_eye_to_origin():
    camera = Camera()
    camera.configure(CameraOptions(pos=(5.0, 10.0, -3.0), yaw=30.0, pitch=-15.0))
    eye = camera.view_matrix @ np.array([5.0, 10.0, -3.0, 1.0])
    assert np.allclose(eye, (0.0, 0.0, 0.0, 1.0))


def test_point_ahead_is_in_front_of_camera():
    camera = Camera()
    camera.configure(CameraOptions(pos=(1.0, 2.0, 3.0), yaw=90.0))
    ahead = camera.view_matrix @ np.array([1.0, 2.0, 13.0, 1.0])
    assert ahead[2] < 0
    assert np.allclose(ahead[:2], (0.0, 0.0))


def test_near_and_far_planes_map_to_ndc_bounds():
    options = CameraOptions()
    camera = Camera()
    camera.configure(options)
    assert _to_ndc(camera, (options.near, 0.0, 0.0))[2] == pytest.approx(-1.0)
    assert _to_ndc(camera, (options.far, 0.0, 0.0))[2] == pytest.approx(1.0)
    assert camera.projection_matrix[3, 2] == -1.0


def test_options_copy_does_not_alias():
    camera = Camera()
    camera.configure(CameraOptions(yaw=10.0))
    options = camera.options
    options.yaw = 50.0
    assert camera.options.yaw == 10.0