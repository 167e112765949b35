"""Rigid bodies and the simple shapes used by the physics simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

DEFAULT_GRAVITY = (0.0, -9.8, 0.0)


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _matrix(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3, 3)


def _scalar_matrix(value: float) -> np.ndarray:
    """A diagonal matrix with ``value`` on the diagonal and exact zeros elsewhere."""
    return np.diag(np.full(3, float(value)))


def _scalar_inverse(value: float) -> np.ndarray:
    with np.errstate(divide="ignore"):
        return np.diag(np.full(3, np.float64(1.0) / np.float64(value)))


def rotation_matrix(rotation_vector) -> np.ndarray:
    """Rotation matrix for a rotation vector (axis times angle in radians)."""
    v = _vector(rotation_vector)
    angle = float(np.linalg.norm(v))
    if angle == 0.0:
        return np.eye(3)
    kx, ky, kz = v / angle
    k = np.array([[0.0, -kz, ky], [kz, 0.0, -kx], [-ky, kx, 0.0]])
    return np.eye(3) + np.sin(angle) * k + (1.0 - np.cos(angle)) * (k @ k)


@dataclass(eq=False)
class RigidBody:
    """State of a rigid body; inertia tensors are given in the body frame."""

    mass: float = 1.0
    inertia: np.ndarray = field(default_factory=lambda: np.eye(3))
    inertia_inv: np.ndarray = field(default_factory=lambda: np.eye(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))
    gravity: np.ndarray = field(default_factory=lambda: _vector(DEFAULT_GRAVITY))
    friction: float = 0.0
    elasticity: float = 0.0

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.inertia = _matrix(self.inertia)
        self.inertia_inv = _matrix(self.inertia_inv)
        self.position = _vector(self.position)
        self.velocity = _vector(self.velocity)
        self.angular_velocity = _vector(self.angular_velocity)
        self.orientation = _matrix(self.orientation)
        self.gravity = _vector(self.gravity)

    def update(self, delta_time: float) -> None:
        """Integrate position and orientation over ``delta_time`` seconds."""
        self.position = self.position + self.velocity * delta_time
        self.orientation = rotation_matrix(self.angular_velocity * delta_time) @ self.orientation


class Sphere(RigidBody):
    """A solid sphere."""

    def __init__(self, radius: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.radius = 1.0
        self.set_radius_mass(radius, mass)

    def set_radius_mass(self, radius: float = 1.0, mass: float = 1.0) -> None:
        self.radius = float(radius)
        self.mass = float(mass)
        moment = 0.4 * self.mass * self.radius * self.radius
        self.inertia = _scalar_matrix(moment)
        self.inertia_inv = _scalar_inverse(moment)


class Cube(RigidBody):
    """A solid cube; an infinite mass makes it immovable."""

    def __init__(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        super().__init__()
        self.side_length = 1.0
        self.set_side_length_mass(side_length, mass)

    def set_side_length_mass(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        self.side_length = float(side_length)
        self.mass = float(mass)
        if np.isinf(self.mass):
            self.inertia = _scalar_matrix(self.mass)
            self.inertia_inv = np.zeros((3, 3))
        else:
            moment = self.mass * self.side_length * self.side_length / 6.0
            self.inertia = _scalar_matrix(moment)
            self.inertia_inv = _scalar_inverse(moment)