import numpy as np
import pytest

from gameball.camera import ThirdPersonCamera


def test_defaults_before_interpolation():
    camera = ThirdPersonCamera()
    camera.set_distance(20.0)
    camera.set_fov_y(60.0)
    assert camera.current_distance() == 10.0
    assert camera.current_fov_y() == 30.0
    assert camera.current_pitch_yaw() == (0.0, 0.0)


def test_full_interpolation_reaches_targets():
    camera = ThirdPersonCamera()
    camera.set_center((1.0, 2.0, 3.0))
    camera.set_distance(20.0)
    camera.set_fov_y(60.0)
    camera.set_pitch_yaw(15.0, 25.0)
    camera.interpolation_factor = 1.0
    assert np.allclose(camera.current_center(), [1.0, 2.0, 3.0])
    assert camera.current_distance() == pytest.approx(20.0)
    assert camera.current_fov_y() == pytest.approx(60.0)
    assert camera.current_pitch_yaw() == pytest.approx((15.0, 25.0))


def test_yaw_takes_short_way_round():
    camera = ThirdPersonCamera()
    camera.set_pitch_yaw(0.0, 350.0)
    camera.interpolation_factor = 1.0
    assert camera.current_pitch_yaw()[1] == pytest.approx(-10.0)


def test_partial_interpolation_lies_between():
    camera = ThirdPersonCamera()
    camera.set_distance(20.0)
    camera.interpolation_factor = 0.3
    assert 10.0 < camera.current_distance() < 20.0


def test_store_current_state_keeps_blended_pose():
    camera = ThirdPersonCamera()
    camera.set_center((4.0, 0.0, -2.0))
    camera.set_distance(16.0)
    camera.set_pitch_yaw(20.0, 40.0)
    camera.interpolation_factor = 0.5
    center = camera.current_center()
    distance = camera.current_distance()
    pitch_yaw = camera.current_pitch_yaw()
    camera.store_current_state()
    camera.interpolation_factor = 0.0
    assert np.allclose(camera.current_center(), center)
    assert camera.current_distance() == pytest.approx(distance)
    assert camera.current_pitch_yaw() == pytest.approx(pitch_yaw)


def test_update_clamps_factor():
    camera = ThirdPersonCamera()
    camera.update(10.0)
    assert camera.interpolation_factor == 1.0
    camera.interpolation_factor = 0.0
    camera.update(-5.0)
    assert camera.interpolation_factor == 0.0


def test_view_places_center_in_front():
    camera = ThirdPersonCamera(aspect=1.5)
    camera.set_center((1.0, 2.0, 3.0))
    camera.set_distance(5.0)
    camera.set_pitch_yaw(30.0, 45.0)
    data = camera.update(10.0)
    mapped = data.view @ np.array([1.0, 2.0, 3.0, 1.0])
    assert np.allclose(mapped, [0.0, 0.0, -5.0, 1.0], atol=1e-9)
    rotation = data.view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.eye(3), atol=1e-9)


def test_projection_and_callback():
    received = []
    camera = ThirdPersonCamera(aspect=2.0, on_update=received.append)
    data = camera.update(0.1)
    assert received == [data]
    assert camera.camera_data is data
    assert data.projection[3, 2] == -1.0
    assert data.projection[3, 3] == 0.0
    assert data.projection[1, 1] == pytest.approx(2.0 * data.projection[0, 0])


def test_cursor_move_clamps_pitch():
    camera = ThirdPersonCamera()
    camera.cursor_move(0.0, 10000.0)
    camera.interpolation_factor = 1.0
    assert camera.current_pitch_yaw()[0] == pytest.approx(89.0)
    camera.cursor_move(0.0, -100000.0)
    assert camera.current_pitch_yaw()[0] == pytest.approx(-89.0)


def test_cursor_move_turns_yaw():
    camera = ThirdPersonCamera()
    camera.cursor_move(10.0, 0.0)
    camera.interpolation_factor = 1.0
    assert camera.current_pitch_yaw()[1] == pytest.approx(1.0)