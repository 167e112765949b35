"""The game logic world: registries of objects, units, obstacles and players."""

from __future__ import annotations

import random
from collections import deque
from typing import Callable, TypeVar

from gameball.entities import GameObject, Obstacle, Unit
from gameball.physics_world import PhysicsWorld
from gameball.player import Player

TICK_DELTA_T = 1.0 / 64.0

UnitT = TypeVar("UnitT", bound=Unit)
ObstacleT = TypeVar("ObstacleT", bound=Obstacle)


class World:
    """Holds every game entity under its own id sequence, each starting at 1."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._physics_world = PhysicsWorld(rng)
        self._objects: dict[int, GameObject] = {}
        self._units: dict[int, Unit] = {}
        self._obstacles: dict[int, Obstacle] = {}
        self._players: dict[int, Player] = {}
        self._next_object_id = 1
        self._next_unit_id = 1
        self._next_obstacle_id = 1
        self._next_player_id = 1
        self._version = 1
        self.events: deque[Callable[[], object]] = deque()

    @property
    def physics_world(self) -> PhysicsWorld:
        return self._physics_world

    @property
    def version(self) -> int:
        """Number of ticks simulated so far, plus one."""
        return self._version

    @property
    def tick_delta_t(self) -> float:
        return TICK_DELTA_T

    def register_object(self, obj: GameObject) -> int:
        object_id = self._next_object_id
        self._next_object_id += 1
        self._objects.setdefault(object_id, obj)
        return object_id

    def unregister_object(self, object_id: int) -> None:
        self._objects.pop(object_id, None)

    def register_unit(self, unit: Unit) -> int:
        unit_id = self._next_unit_id
        self._next_unit_id += 1
        self._units.setdefault(unit_id, unit)
        return unit_id

    def unregister_unit(self, unit_id: int) -> None:
        self._units.pop(unit_id, None)

    def register_obstacle(self, obstacle: Obstacle) -> int:
        obstacle_id = self._next_obstacle_id
        self._next_obstacle_id += 1
        self._obstacles.setdefault(obstacle_id, obstacle)
        return obstacle_id

    def unregister_obstacle(self, obstacle_id: int) -> None:
        self._obstacles.pop(obstacle_id, None)

    def register_player(self, player: Player) -> int:
        player_id = self._next_player_id
        self._next_player_id += 1
        self._players.setdefault(player_id, player)
        return player_id

    def unregister_player(self, player_id: int) -> None:
        self._players.pop(player_id, None)

    def get_object(self, object_id: int) -> GameObject | None:
        return self._objects.get(object_id)

    def get_unit(self, unit_id: int) -> Unit | None:
        return self._units.get(unit_id)

    def get_obstacle(self, obstacle_id: int) -> Obstacle | None:
        return self._obstacles.get(obstacle_id)

    def get_player(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def create_unit(self, unit_type: type[UnitT], player_id: int, *args, **kwargs) -> UnitT:
        return unit_type(self, player_id, *args, **kwargs)

    def create_obstacle(self, obstacle_type: type[ObstacleT], *args, **kwargs) -> ObstacleT:
        return obstacle_type(self, *args, **kwargs)

    def create_player(self) -> Player:
        return Player(self)

    def remove_player(self, player_id: int) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        player.destroy()
        return True

    def remove_unit(self, unit_id: int) -> bool:
        unit = self.get_unit(unit_id)
        if unit is None:
            return False
        unit.destroy()
        return True

    def remove_obstacle(self, obstacle_id: int) -> bool:
        obstacle = self.get_obstacle(obstacle_id)
        if obstacle is None:
            return False
        obstacle.destroy()
        return True

    def push_event(self, event: Callable[[], object]) -> None:
        """Queue a deferred action on the world."""
        self.events.append(event)

    def update_tick(self) -> None:
        """Advance physics and every object by one tick."""
        dt = self.tick_delta_t
        self._physics_world.apply_gravity(dt)
        self._physics_world.solve_collisions()
        for obj in list(self._objects.values()):
            obj.update_tick()
        self._physics_world.solve_collisions()
        self._physics_world.update(dt)
        self._version += 1