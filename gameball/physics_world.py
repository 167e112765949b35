"""A container of spheres and cubes stepped together."""

from __future__ import annotations

import random

from gameball.collision import Collision, detect_sphere_cube, detect_sphere_sphere, solve_collision
from gameball.rigid_body import Cube, RigidBody, Sphere


class PhysicsWorld:
    """Holds spheres and cubes under integer ids that start at 1."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._spheres: dict[int, Sphere] = {}
        self._cubes: dict[int, Cube] = {}
        self._next_sphere_id = 1
        self._next_cube_id = 1
        self._rng = rng if rng is not None else random.Random()

    def update(self, delta_time: float) -> None:
        """Integrate every body over ``delta_time`` seconds."""
        for sphere in self._spheres.values():
            sphere.update(delta_time)
        for cube in self._cubes.values():
            cube.update(delta_time)

    def create_sphere(self, radius: float = 1.0, mass: float = 1.0) -> int:
        sphere_id = self._next_sphere_id
        self._next_sphere_id += 1
        self._spheres[sphere_id] = Sphere(radius, mass)
        return sphere_id

    def create_cube(self, side_length: float = 1.0, mass: float = 1.0) -> int:
        cube_id = self._next_cube_id
        self._next_cube_id += 1
        self._cubes[cube_id] = Cube(side_length, mass)
        return cube_id

    def get_sphere(self, sphere_id: int) -> Sphere:
        """Return the sphere with this id; raises KeyError if there is none."""
        return self._spheres[sphere_id]

    def get_cube(self, cube_id: int) -> Cube:
        """Return the cube with this id; raises KeyError if there is none."""
        return self._cubes[cube_id]

    def _contacts(self) -> list[tuple[RigidBody, RigidBody, Collision]]:
        contacts = []
        for id1, sphere1 in self._spheres.items():
            for id2, sphere2 in self._spheres.items():
                if id1 >= id2:
                    continue
                collision = detect_sphere_sphere(sphere1, sphere2)
                if collision is not None:
                    contacts.append((sphere1, sphere2, collision))
            for cube in self._cubes.values():
                collision = detect_sphere_cube(sphere1, cube)
                if collision is not None:
                    contacts.append((sphere1, cube, collision))
        return contacts

    def solve_collisions(self) -> None:
        """Resolve every current contact, repeating until none is approaching."""
        contacts = self._contacts()
        self._rng.shuffle(contacts)
        solved = True
        while solved:
            solved = False
            for body1, body2, collision in contacts:
                if solve_collision(body1, body2, collision):
                    solved = True

    def apply_gravity(self, delta_time: float) -> None:
        for body in (*self._spheres.values(), *self._cubes.values()):
            body.velocity = body.velocity + body.gravity * delta_time