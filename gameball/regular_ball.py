"""A player-controlled ball that rolls under its owner's input."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.entities import Unit
from gameball.rigid_body import DEFAULT_GRAVITY, Sphere

if TYPE_CHECKING:
    from gameball.world import World

ANGULAR_ACCELERATION = math.radians(2880.0)
LINEAR_DAMPING = 0.5
ANGULAR_DAMPING = 0.2
_UP = np.array([0.0, 1.0, 0.0])


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _normalize(v: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


class RegularBall(Unit):
    """A ball backed by a physics sphere; the primary unit of its owner obeys input."""

    def __init__(
        self,
        world: World,
        player_id: int,
        position,
        radius: float = 1.0,
        mass: float = 1.0,
    ) -> None:
        super().__init__(world, player_id)
        self._radius = float(radius)
        self._mass = float(mass)
        self._position = _vector(position)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)
        self._sphere_id = world.physics_world.create_sphere()
        sphere = self.sphere
        sphere.position = self._position.copy()
        sphere.set_radius_mass(self._radius, self._mass)
        sphere.orientation = self._orientation.copy()
        sphere.velocity = self._velocity.copy()
        sphere.angular_velocity = np.zeros(3)
        sphere.elasticity = 1.0
        sphere.friction = 10.0
        sphere.gravity = _vector(DEFAULT_GRAVITY)

    @property
    def sphere(self) -> Sphere:
        """The physics sphere that simulates this ball."""
        return self.world.physics_world.get_sphere(self._sphere_id)

    @property
    def sphere_id(self) -> int:
        return self._sphere_id

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def mass(self) -> float:
        return self._mass

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

    def _apply_input(self, sphere: Sphere, delta_time: float) -> None:
        owner = self.world.get_player(self.player_id)
        if owner is None or self.unit_id != owner.primary_unit_id:
            return
        player_input = owner.take_input()
        forward = _normalize(_vector(player_input.orientation))
        right = _normalize(np.cross(forward, _UP))

        moving_direction = np.zeros(3)
        if player_input.move_forward:
            moving_direction = moving_direction - right
        if player_input.move_backward:
            moving_direction = moving_direction + right
        if player_input.move_left:
            moving_direction = moving_direction - forward
        if player_input.move_right:
            moving_direction = moving_direction + forward

        if np.linalg.norm(moving_direction) > 0.0:
            moving_direction = _normalize(moving_direction)
            sphere.angular_velocity = (
                sphere.angular_velocity + moving_direction * ANGULAR_ACCELERATION * delta_time
            )

        if player_input.brake:
            sphere.angular_velocity = np.zeros(3)

    def update_tick(self) -> None:
        """Apply the owner's input and damping, then copy the sphere's state."""
        delta_time = self.world.tick_delta_t
        sphere = self.sphere
        self._apply_input(sphere, delta_time)
        sphere.velocity = sphere.velocity * LINEAR_DAMPING**delta_time
        sphere.angular_velocity = sphere.angular_velocity * ANGULAR_DAMPING**delta_time

        self._position = sphere.position.copy()
        self._velocity = sphere.velocity.copy()
        self._orientation = sphere.orientation.copy()
        self._angular_momentum = sphere.inertia @ sphere.angular_velocity

    def set_mass(self, mass: float) -> None:
        self.sphere.set_radius_mass(self._radius, mass)
        self._mass = float(mass)

    def set_gravity(self, gravity) -> None:
        self.sphere.gravity = _vector(gravity)

    def set_radius(self, radius: float) -> None:
        self.sphere.set_radius_mass(radius, self._mass)
        self._radius = float(radius)

    def set_motion(
        self,
        position=(0.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=None,
        angular_momentum=(0.0, 0.0, 0.0),
    ) -> None:
        """Place the ball and set its motion; the orientation defaults to identity."""
        position = _vector(position)
        velocity = _vector(velocity)
        orientation = np.eye(3) if orientation is None else np.array(orientation, dtype=float).reshape(3, 3)
        angular_momentum = _vector(angular_momentum)

        sphere = self.sphere
        sphere.position = position.copy()
        sphere.velocity = velocity.copy()
        sphere.orientation = orientation.copy()
        sphere.angular_velocity = sphere.inertia_inv @ angular_momentum
        self._position = position
        self._velocity = velocity
        self._orientation = orientation
        self._angular_momentum = angular_momentum