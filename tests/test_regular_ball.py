import math
import random

import numpy as np
import pytest

from gameball.block import Block
from gameball.player import PlayerInput
from gameball.regular_ball import RegularBall
from gameball.world import World

MAX_TICK = 500


def _scenario(seed=0):
    world = World(rng=random.Random(seed))
    player = world.create_player()
    unit = world.create_unit(RegularBall, player.player_id, (0.0, 1.0, 0.0), 1.0, 1.0)
    player.primary_unit_id = unit.unit_id
    world.create_obstacle(Block, (0.0, -50.0, 0.0), math.inf, False, 100.0)
    return world, player.player_id, unit.unit_id


def _closest_approach(player_input, expected_position):
    """Drive the ball with the input and return the smallest distance reached."""
    world, player_id, unit_id = _scenario()
    closest = math.inf
    for _ in range(MAX_TICK):
        player = world.get_player(player_id)
        assert player is not None
        player.input = PlayerInput(
            move_forward=player_input.move_forward,
            move_backward=player_input.move_backward,
            move_left=player_input.move_left,
            move_right=player_input.move_right,
            brake=player_input.brake,
            orientation=player_input.orientation,
        )
        world.update_tick()
        unit = world.get_unit(unit_id)
        assert isinstance(unit, RegularBall)
        distance = float(np.linalg.norm(unit.position - expected_position))
        closest = min(closest, distance)
        if closest < 0.2:
            break
    return closest


@pytest.mark.parametrize(
    "yaw, forward_on, backward_on, left_on, right_on",
    [
        (0.0, False, False, False, False),
        (30.0, True, False, False, False),
        (120.0, False, True, False, False),
        (200.0, False, False, True, False),
        (300.0, False, False, False, True),
        (45.0, True, False, False, True),
        (250.0, True, True, True, False),
        (10.0, False, True, True, False),
        (90.0, True, True, False, False),
    ],
)
def test_player_input_moves_ball(yaw, forward_on, backward_on, left_on, right_on):
    forward = np.array([math.cos(math.radians(yaw)), 0.0, math.sin(math.radians(yaw))])
    forward = forward / np.linalg.norm(forward)
    right = np.cross(forward, [0.0, 1.0, 0.0])
    right = right / np.linalg.norm(right)
    player_input = PlayerInput(
        move_forward=forward_on,
        move_backward=backward_on,
        move_left=left_on,
        move_right=right_on,
        orientation=tuple(forward),
    )

    combined = np.zeros(2)
    if forward_on:
        combined += [0.0, 1.0]
    if backward_on:
        combined += [0.0, -1.0]
    if left_on:
        combined += [-1.0, 0.0]
    if right_on:
        combined += [1.0, 0.0]
    expected = np.array([0.0, 1.0, 0.0])
    if np.linalg.norm(combined) > 0.0:
        combined = combined / np.linalg.norm(combined)
        expected = expected + (combined[0] * right + combined[1] * forward) * 20.0

    assert _closest_approach(player_input, expected) < 0.2


def test_sphere_is_configured_from_constructor():
    world = World(rng=random.Random(1))
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (1.0, 2.0, 3.0), 2.0, 3.0)
    sphere = ball.sphere
    assert np.allclose(sphere.position, [1.0, 2.0, 3.0])
    assert sphere.radius == 2.0
    assert sphere.mass == 3.0
    assert sphere.elasticity == 1.0
    assert sphere.friction == 10.0
    assert np.allclose(sphere.gravity, [0.0, -9.8, 0.0])
    assert ball.player_id == player.player_id


def test_set_motion_round_trip():
    world = World(rng=random.Random(2))
    ball = world.create_unit(RegularBall, 1, (0.0, 0.0, 0.0))
    momentum = np.array([0.4, 0.0, -0.8])
    ball.set_motion((5.0, 6.0, 7.0), (1.0, 0.0, 0.0), np.eye(3), momentum)
    assert np.allclose(ball.position, [5.0, 6.0, 7.0])
    assert np.allclose(ball.sphere.position, [5.0, 6.0, 7.0])
    assert np.allclose(ball.sphere.velocity, [1.0, 0.0, 0.0])
    assert np.allclose(ball.angular_momentum, momentum)
    assert np.allclose(ball.sphere.inertia @ ball.sphere.angular_velocity, momentum)


def test_update_tick_reports_momentum_from_inertia():
    world = World(rng=random.Random(3))
    ball = world.create_unit(RegularBall, 99, (0.0, 10.0, 0.0))
    ball.sphere.angular_velocity = np.array([1.0, 2.0, 3.0])
    ball.update_tick()
    assert np.allclose(ball.angular_momentum, ball.sphere.inertia @ ball.sphere.angular_velocity)
    assert np.linalg.norm(ball.sphere.angular_velocity) < np.linalg.norm([1.0, 2.0, 3.0])


def test_brake_stops_spin():
    world = World(rng=random.Random(4))
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 10.0, 0.0))
    player.primary_unit_id = ball.unit_id
    ball.sphere.angular_velocity = np.array([3.0, 0.0, 3.0])
    player.input = PlayerInput(move_forward=True, brake=True)
    ball.update_tick()
    assert np.allclose(ball.sphere.angular_velocity, 0.0)
    assert player.input == PlayerInput()


def test_input_ignored_when_not_primary_unit():
    world = World(rng=random.Random(5))
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 10.0, 0.0))
    player.primary_unit_id = ball.unit_id + 1
    player.input = PlayerInput(move_forward=True)
    ball.update_tick()
    assert player.input.move_forward is True
    assert np.allclose(ball.sphere.angular_velocity, 0.0)


def test_set_radius_and_mass():
    world = World(rng=random.Random(6))
    ball = world.create_unit(RegularBall, 1, (0.0, 0.0, 0.0), 1.0, 2.0)
    ball.set_radius(3.0)
    assert ball.sphere.radius == 3.0
    assert ball.sphere.mass == 2.0
    ball.set_mass(5.0)
    assert ball.sphere.mass == 5.0
    assert ball.sphere.radius == 3.0
    assert (ball.radius, ball.mass) == (3.0, 5.0)


def test_set_gravity():
    world = World(rng=random.Random(7))
    ball = world.create_unit(RegularBall, 1, (0.0, 0.0, 0.0))
    ball.set_gravity((0.0, 0.0, -2.0))
    assert np.allclose(ball.sphere.gravity, [0.0, 0.0, -2.0])