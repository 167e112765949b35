import random

import numpy as np

from gameball.block import Block
from gameball.events import (
    event_create_obstacle,
    event_create_player,
    event_create_unit,
    event_remove_obstacle,
    event_remove_player,
    event_remove_unit,
)
from gameball.regular_ball import RegularBall
from gameball.world import World


def _world():
    return World(rng=random.Random(0))


def _run_events(world):
    results = []
    while world.events:
        results.append(world.events.popleft()())
    return results


def test_remove_player_is_deferred():
    world = _world()
    player = world.create_player()
    event_remove_player(world, player.player_id)
    assert world.get_player(player.player_id) is player
    assert _run_events(world) == [True]
    assert world.get_player(player.player_id) is None


def test_remove_missing_player_reports_false():
    world = _world()
    event_remove_player(world, 42)
    assert _run_events(world) == [False]


def test_create_player_event():
    world = _world()
    event_create_player(world)
    assert world.get_player(1) is None
    (player,) = _run_events(world)
    assert world.get_player(1) is player


def test_create_and_remove_unit_events():
    world = _world()
    event_create_unit(world, RegularBall, 7, (0.0, 3.0, 0.0), 2.0, 1.0)
    (ball,) = _run_events(world)
    assert isinstance(ball, RegularBall)
    assert ball.player_id == 7
    assert ball.sphere.radius == 2.0
    assert np.allclose(ball.position, [0.0, 3.0, 0.0])
    event_remove_unit(world, ball.unit_id)
    assert _run_events(world) == [True]
    assert world.get_unit(ball.unit_id) is None


def test_create_and_remove_obstacle_events():
    world = _world()
    event_create_obstacle(world, Block, (1.0, 1.0, 1.0), 5.0, False, 2.0)
    (block,) = _run_events(world)
    assert isinstance(block, Block)
    assert block.cube.side_length == 2.0
    event_remove_obstacle(world, block.obstacle_id)
    assert _run_events(world) == [True]
    assert world.get_obstacle(block.obstacle_id) is None


def test_events_run_in_order():
    world = _world()
    event_create_player(world)
    event_remove_player(world, 1)
    results = _run_events(world)
    assert results[1] is True
    assert world.get_player(1) is None