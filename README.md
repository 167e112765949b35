# gameball

Game logic for a ball-rolling game, built on a small rigid-body physics engine.
It simulates the game world at a fixed tick rate of 1/64 s.

## What it provides

### Physics

- `gameball.rigid_body`: `RigidBody` holds mass, body-frame inertia and its
  inverse, position, velocity, angular velocity, orientation, gravity, friction
  and elasticity. `RigidBody.update(delta_time)` integrates position and
  orientation. `Sphere(radius, mass)` and `Cube(side_length, mass)` set their
  inertia from their size and mass; a cube with infinite mass gets a zero inverse
  inertia and cannot be moved. `rotation_matrix(rotation_vector)` turns an
  axis-times-angle vector into a 3x3 rotation matrix.
- `gameball.collision`: `detect_sphere_sphere` and `detect_sphere_cube` return a
  `Collision` (point, unit normal from the first body to the second, penetration
  depth) or `None`. `solve_collision(body1, body2, collision)` applies a contact
  impulse, using the lower elasticity of the two bodies, and a friction impulse
  bounded by the combined friction. It returns `True` only if the bodies were
  moving towards each other.
- `gameball.physics_world`: `PhysicsWorld` stores spheres and cubes under ids
  that start at 1 (`create_sphere`, `create_cube`, `get_sphere`, `get_cube`; the
  getters raise `KeyError` for an unknown id). `apply_gravity`, `solve_collisions`
  and `update` step the world. Only sphere–sphere and sphere–cube contacts are
  detected. Contacts are shuffled before they are solved; pass a `random.Random`
  to the constructor to make the order reproducible.

### Game logic

- `gameball.world`: `World` keeps players, objects, units and obstacles, each
  under its own id sequence starting at 1. It offers `create_player`,
  `create_unit`, `create_obstacle`, the `get_*` lookups (which return `None` for
  unknown ids) and the `remove_*` calls (which return `False` for unknown ids).
  `update_tick()` applies gravity, resolves collisions, calls `update_tick` on
  every object, resolves collisions again, integrates the physics by
  `tick_delta_t`, and increments `version`. The world also takes an optional
  `random.Random`.
- `gameball.player`: `Player` registers itself with the world and has
  `player_id`, `primary_unit_id` and `input`. `take_input()` returns the pending
  `PlayerInput` and resets it to the default. `PlayerInput` holds the movement
  flags `move_forward`, `move_backward`, `move_left`, `move_right` and `brake`,
  and a facing `orientation`.
- `gameball.entities`: `GameObject`, `Unit` (owned by a player) and `Obstacle`
  are the base classes. Each one registers itself on creation, and its
  `destroy()` removes it again.
- `gameball.regular_ball.RegularBall`: a unit backed by a physics sphere with
  elasticity 1 and friction 10. If it is its owner's primary unit, each tick it
  takes the owner's input and spins the sphere towards the requested direction,
  or stops the spin when `brake` is set. Linear and angular velocity are damped
  every tick.
- `gameball.block.Block`: a cube obstacle backed by a physics cube with
  elasticity 0.25 and friction 0.5. By default it has infinite mass and no
  gravity.
- `gameball.events`: `event_create_player`, `event_create_unit`,
  `event_create_obstacle`, `event_remove_player`, `event_remove_unit` and
  `event_remove_obstacle` queue the matching world call as a callable in
  `World.events`. The world does not run these callables by itself: the caller
  pops them and calls them.

### Camera

`gameball.camera.ThirdPersonCamera` orbits a centre point. Its target pose is set
with `set_center`, `set_pitch_yaw`, `set_distance`, `set_fov_y` and
`cursor_move`; pitch is held within ±89°. `update(delta_time)` moves
`interpolation_factor` towards 1 at a rate of 2 per second, blends from the
stored pose to the target pose, and returns `CameraData` with 4x4 view and
projection matrices. The projection maps depth to [0, 1], with near plane 0.1
and far plane 100. The result is also kept in `camera_data` and passed to the
optional `on_update` callback. `store_current_state()` makes the blended pose
the new starting pose.

## What it does not do

The package has no window, renderer, asset loading or keyboard and mouse
handling. There is no command to run a game. Drawing the world and collecting
player input are left to the program that uses the package: it sets
`Player.input` before each tick and reads positions and orientations back from
units and obstacles.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import math

from gameball.block import Block
from gameball.player import PlayerInput
from gameball.regular_ball import RegularBall
from gameball.world import World

world = World()
player = world.create_player()
ball = world.create_unit(RegularBall, player.player_id, (0.0, 1.0, 0.0), 1.0, 1.0)
player.primary_unit_id = ball.unit_id
world.create_obstacle(Block, (0.0, -50.0, 0.0), math.inf, False, 100.0)

for _ in range(200):
    player.input = PlayerInput(move_forward=True, orientation=(1.0, 0.0, 0.0))
    world.update_tick()

print(ball.position)
```

On each tick the ball takes its owner's input and spins in the requested
direction. Friction against the floor block turns that spin into rolling.