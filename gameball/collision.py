"""Collision detection between spheres and cubes, and impulse-based resolution."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gameball.rigid_body import Cube, RigidBody, Sphere

_EPSILON = 0.0001


@dataclass(eq=False)
class Collision:
    """A contact: point, unit normal pointing from the first body to the second, depth."""

    point: np.ndarray
    normal: np.ndarray
    penetration: float


def detect_sphere_sphere(sphere1: Sphere, sphere2: Sphere) -> Collision | None:
    """Return the contact between two spheres, or None if they do not touch."""
    distance = sphere2.position - sphere1.position
    distance_length = float(np.linalg.norm(distance))
    penetration = sphere1.radius + sphere2.radius - distance_length
    if penetration < 0.0:
        return None
    if distance_length < _EPSILON:
        return Collision(sphere1.position.copy(), np.array([1.0, 0.0, 0.0]), penetration)
    point = sphere1.position + distance * (sphere1.radius - penetration / 2.0) / distance_length
    return Collision(point, distance / distance_length, penetration)


def detect_sphere_cube(sphere: Sphere, cube: Cube) -> Collision | None:
    """Return the contact between a sphere and a cube, or None if they do not touch."""
    cube_to_sphere = sphere.position - cube.position
    half = cube.side_length / 2.0
    closest_point = cube.position.copy()
    for axis in cube.orientation.T:
        offset = float(np.clip(np.dot(cube_to_sphere, axis), -half, half))
        closest_point = closest_point + offset * axis

    to_closest = closest_point - sphere.position
    distance = float(np.linalg.norm(to_closest))
    penetration = sphere.radius - distance
    if penetration < 0.0:
        return None
    if distance < _EPSILON:
        return Collision(sphere.position.copy(), np.array([1.0, 0.0, 0.0]), penetration)
    point = sphere.position + to_closest * (sphere.radius - penetration / 2.0) / distance
    return Collision(point, to_closest / distance, penetration)


def _world_inverse_inertia(body: RigidBody) -> np.ndarray:
    return body.orientation @ body.inertia_inv @ body.orientation.T


def _effective_mass_term(direction, r1, r2, inv1, inv2) -> float:
    return float(
        np.dot(
            direction,
            np.cross(inv1 @ np.cross(r1, direction), r1) + np.cross(inv2 @ np.cross(r2, direction), r2),
        )
    )


def solve_collision(body1: RigidBody, body2: RigidBody, collision: Collision) -> bool:
    """Apply contact and friction impulses; return True if the bodies were approaching."""
    normal = collision.normal
    r1 = collision.point - body1.position
    r2 = collision.point - body2.position
    relative_velocity = (
        body2.velocity
        + np.cross(body2.angular_velocity, r2)
        - body1.velocity
        - np.cross(body1.angular_velocity, r1)
    )
    velocity_along_normal = float(np.dot(relative_velocity, normal))
    if velocity_along_normal > -_EPSILON:
        return False

    inv1 = _world_inverse_inertia(body1)
    inv2 = _world_inverse_inertia(body2)

    alpha = sum(1.0 / body.mass for body in (body1, body2) if not np.isinf(body.mass))

    e = min(body1.elasticity, body2.elasticity)
    j = -(1.0 + e) * velocity_along_normal / (alpha + _effective_mass_term(normal, r1, r2, inv1, inv2))

    impulse = j * normal
    body1.velocity = body1.velocity - impulse / body1.mass
    body1.angular_velocity = body1.angular_velocity - inv1 @ np.cross(r1, impulse)
    body2.velocity = body2.velocity + impulse / body2.mass
    body2.angular_velocity = body2.angular_velocity + inv2 @ np.cross(r2, impulse)

    friction = float(np.hypot(body1.friction, body2.friction))
    tangent = relative_velocity - np.dot(relative_velocity, normal) * normal
    tangent_length = float(np.linalg.norm(tangent))
    if tangent_length > _EPSILON:
        tangent = tangent / tangent_length
        jt = -float(np.dot(relative_velocity, tangent)) / (
            alpha + _effective_mass_term(tangent, r1, r2, inv1, inv2)
        )
        limit = j * friction
        if jt > limit:
            jt = limit
        elif jt < -limit:
            jt = -limit
        friction_impulse = jt * tangent
        body1.velocity = body1.velocity - friction_impulse / body1.mass
        body1.angular_velocity = body1.angular_velocity - inv1 @ np.cross(r1, friction_impulse)
        body2.velocity = body2.velocity + friction_impulse / body2.mass
        body2.angular_velocity = body2.angular_velocity + inv2 @ np.cross(r2, friction_impulse)

    return True