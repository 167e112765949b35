"""A cube-shaped obstacle backed by a physics cube."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.entities import Obstacle
from gameball.rigid_body import DEFAULT_GRAVITY, Cube

if TYPE_CHECKING:
    from gameball.world import World


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


class Block(Obstacle):
    """A cube obstacle; an infinite mass makes it immovable."""

    def __init__(
        self,
        world: World,
        position,
        mass: float = math.inf,
        gravity: bool = False,
        side_length: float = 1.0,
    ) -> None:
        super().__init__(world)
        self._position = _vector(position)
        self._side_length = float(side_length)
        self._gravity = _vector(DEFAULT_GRAVITY) if gravity else np.zeros(3)
        self._mass = float(mass)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)
        self._inertia = np.eye(3)

        self._cube_id = world.physics_world.create_cube()
        self.set_gravity(self._gravity)
        self.set_mass(self._mass)
        self.set_side_length(self._side_length)
        self.set_motion(self._position, self._velocity, self._orientation, self._angular_momentum)
        cube = self.cube
        cube.elasticity = 0.25
        cube.friction = 0.5

    @property
    def cube(self) -> Cube:
        """The physics cube that simulates this block."""
        return self.world.physics_world.get_cube(self._cube_id)

    @property
    def cube_id(self) -> int:
        return self._cube_id

    @property
    def side_length(self) -> float:
        return self._side_length

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def gravity(self) -> np.ndarray:
        return self._gravity

    @property
    def inertia(self) -> np.ndarray:
        return self._inertia

    @property
    def position(self) -> np.ndarray:
        return self._position

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity

    @property
    def orientation(self) -> np.ndarray:
        return self._orientation

    @property
    def angular_momentum(self) -> np.ndarray:
        return self._angular_momentum

    def set_mass(self, mass: float) -> None:
        cube = self.cube
        self._mass = float(mass)
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_gravity(self, gravity) -> None:
        self._gravity = _vector(gravity)
        self.cube.gravity = self._gravity.copy()

    def set_side_length(self, side_length: float) -> None:
        self._side_length = float(side_length)
        cube = self.cube
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_motion(self, position, velocity, orientation, angular_momentum) -> None:
        cube = self.cube
        self._orientation = np.array(orientation, dtype=float).reshape(3, 3)
        self._position = _vector(position)
        self._velocity = _vector(velocity)
        self._angular_momentum = _vector(angular_momentum)

        cube.position = self._position.copy()
        cube.velocity = self._velocity.copy()
        cube.orientation = self._orientation.copy()
        cube.angular_velocity = cube.inertia_inv @ self._angular_momentum

    def update_tick(self) -> None:
        """Copy the cube's simulated state into the block."""
        cube = self.cube
        self._position = cube.position.copy()
        self._velocity = cube.velocity.copy()
        self._orientation = cube.orientation.copy()
        with np.errstate(invalid="ignore"):
            self._angular_momentum = cube.inertia @ cube.angular_velocity