"""A free-look camera, its input handling and the floor grid."""

from __future__ import annotations

import math
import random

from .particles import ParticleSystem

PI = 3.14159265
MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = 89.0
KEY_SPEED = 0.1
ZOOM_SPEED = 0.2

LEFT_BUTTON = 0
SCROLL_UP = 3
SCROLL_DOWN = 4
PARTICLES_PER_CLICK = 50


class Camera:
    """Position, view angles and view direction of the observer."""

    def __init__(self) -> None:
        self.x, self.y, self.z = 0.0, 0.0, 2.0
        self.dir_x, self.dir_y, self.dir_z = 0.0, 0.0, 0.0
        self.yaw = -90.0
        self.pitch = 0.0
        self.last_x, self.last_y = 400.0, 300.0
        self.first_mouse = True

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def direction(self) -> tuple[float, float, float]:
        return (self.dir_x, self.dir_y, self.dir_z)

    def mouse_motion(self, x: float, y: float) -> None:
        """Turn the camera by the mouse movement since the last event."""
        if self.first_mouse:
            self.last_x, self.last_y = x, y
            self.first_mouse = False
        offset_x = (x - self.last_x) * MOUSE_SENSITIVITY
        offset_y = (self.last_y - y) * MOUSE_SENSITIVITY
        self.last_x, self.last_y = x, y
        self.yaw += offset_x
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch + offset_y))

    def update_direction(self) -> tuple[float, float, float]:
        """Recompute the view direction from yaw and pitch and return it."""
        yaw = self.yaw * PI / 180.0
        pitch = self.pitch * PI / 180.0
        self.dir_x = math.cos(yaw) * math.cos(pitch)
        self.dir_y = math.sin(pitch)
        self.dir_z = math.sin(yaw) * math.cos(pitch)
        return self.direction

    def _move(self, amount: float) -> None:
        self.x += self.dir_x * amount
        self.y += self.dir_y * amount
        self.z += self.dir_z * amount

    def keyboard(self, key: str) -> None:
        """Move with w/s along the view and a/d sideways; other keys do nothing."""
        if key == "w":
            self._move(KEY_SPEED)
        elif key == "s":
            self._move(-KEY_SPEED)
        elif key == "a":
            self.x -= self.dir_z * KEY_SPEED
            self.z += self.dir_x * KEY_SPEED
        elif key == "d":
            self.x += self.dir_z * KEY_SPEED
            self.z -= self.dir_x * KEY_SPEED

    def zoom(self, button: int, pressed: bool) -> None:
        """Move forward on scroll up and backward on scroll down."""
        if not pressed:
            return
        if button == SCROLL_UP:
            self._move(ZOOM_SPEED)
        elif button == SCROLL_DOWN:
            self._move(-ZOOM_SPEED)


def screen_to_gl(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map window pixel coordinates to the [-1, 1] range with y pointing up."""
    fx = (x / float(width)) * 2.0 - 1.0
    fy = -((y / float(height)) * 2.0 - 1.0)
    return fx, fy


def handle_mouse(
    camera: Camera,
    system: ParticleSystem,
    button: int,
    pressed: bool,
    x: float,
    y: float,
    width: int,
    height: int,
    rng: random.Random | None = None,
) -> None:
    """Spawn a burst of particles on left click, and zoom on scroll."""
    if button == LEFT_BUTTON and pressed:
        rng = rng or random.Random()
        fx, fy = screen_to_gl(x, y, width, height)
        for _ in range(PARTICLES_PER_CLICK):
            system.spawn(fx + 2 * rng.random(), fy + 2 * rng.random())
    camera.zoom(button, pressed)


def grid_lines(
    size: int = 10, step: float = 0.2
) -> list[tuple[tuple[float, float, float], tuple[float, float, float]]]:
    """Return the line segments of a square grid on the y = 0 plane."""
    extent = size * step
    lines = []
    for i in range(-size, size + 1):
        lines.append(((i * step, 0.0, -extent), (i * step, 0.0, extent)))
        lines.append(((-extent, 0.0, i * step), (extent, 0.0, i * step)))
    return lines