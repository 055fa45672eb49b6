# particlesim

particlesim is a small particle physics playground written in pure Python. It needs nothing outside the standard library.

## Modules

### `particlesim.vector`

`Vector` is a fixed-length numeric vector.

- Create one with `Vector(1, 2, 3)`, or with `Vector.filled(size, value)` to give every component the same value.
- `+` and `-` work component by component. Unary `-` negates every component.
- `*` and `/` take either another vector or a scalar. The in-place forms `+=`, `-=`, `*=` and `/=` are also supported.
- Where a vector is divided by another vector that has a zero component:
  - `a / b` gives 0 for that component.
  - `a /= b` leaves that component unchanged.
- Combining two vectors of different lengths raises `ValueError`.
- `str(Vector(1.5, 2.0))` gives `(1.5, 2)`.

### `particlesim.body`

`Body` holds a three-component `position` and `velocity`.

- It supports the same component-wise `+`, `-`, `*` and `/` as `Vector`, with their in-place forms. Each operation applies to the position and the velocity.
- `Body.filled(value)` gives a body whose components all equal `value`.
- `demo_lines()` returns the lines of a short demonstration.
- `main()` prints those lines.

### `particlesim.bouncing`

`BouncingBall` is a single ball under constant acceleration.

- The default acceleration is gravity of -0.0008 per step in y.
- The ball bounces without losing energy inside a box that spans -0.8 to 0.8.
- `BouncingBall.with_random_velocity(rng)` starts a ball at the origin with a random velocity.
- `update()` advances the ball by one step.
- `circle_points(cx, cy, radius, segments=100)` returns polygon vertices approximating a circle.

### `particlesim.particles`

`Particle` is a dataclass with position, velocity, radius and an RGB colour.

`ParticleSystem(rng=None, capacity=1000)` holds up to `capacity` particles.

- `spawn(x, y)` adds a particle with a random depth, velocity and colour, and returns it.
- When the system is full, `spawn` returns `None`.

### `particlesim.physics`

These functions work on any iterable of particles:

- `update(particles)` applies gravity, moves each particle and bounces it off the box walls with damping (-0.5). After each particle moves, it applies pairwise repulsion.
- `repulsion(particles)` pushes every pair apart with a force of `0.001 / dist**3`. Coincident pairs are skipped.
- `handle_collisions(particles)` separates overlapping particles and exchanges an elastic impulse between approaching ones.

### `particlesim.camera`

`Camera` is a free-look camera.

- `mouse_motion(x, y)` changes yaw and pitch. Pitch is clamped to ±89°.
- `update_direction()` recomputes and returns the view direction.
- `keyboard(key)` moves the camera: `w` and `s` along the view direction, `a` and `d` sideways.
- `zoom(button, pressed)` moves the camera forward on button 3 and backward on button 4.

The module also provides these functions:

- `screen_to_gl(x, y, width, height)` maps window pixels to the range [-1, 1], with y pointing up.
- `handle_mouse(camera, system, button, pressed, x, y, width, height, rng=None)` does two things:
  - On a left click (button 0), it spawns 50 particles near the click.
  - It passes scroll buttons on to `zoom`.
- `grid_lines(size=10, step=0.2)` returns the line segments of a floor grid on the y = 0 plane.

## What it does not do

The package opens no window and draws nothing, and it has no event loop or timer.

- The camera, the input helpers, `circle_points` and `grid_lines` compute state and geometry only.
- Displaying the results is left to the caller.

## Installing

```
pip install .
```

## Demo

```
particlesim-demo
```

The demo prints a few bodies and the component-wise sum of two of them. In the sum, the velocity is scaled by 10.

## Example

```python
import random
from particlesim.particles import ParticleSystem
from particlesim.physics import update

system = ParticleSystem(random.Random(1))
system.spawn(0.0, 0.2)
system.spawn(0.1, -0.2)
for _ in range(60):
    update(list(system))
for p in system:
    print(p.x, p.y, p.z)
```

## Tests

```
pip install .[test]
pytest
```