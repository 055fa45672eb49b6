"""A single ball bouncing inside a square box under constant acceleration."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

BOUND = 0.8
"""Half the side of the box the ball bounces in."""

BALL_RADIUS = 0.02
GRAVITY = -0.0008
CIRCLE_SEGMENTS = 100
_PI = 3.14159


@dataclass
class BouncingBall:
    """A ball that bounces off the box walls without losing energy."""

    vel_x: float
    vel_y: float
    pos_x: float = 0.0
    pos_y: float = 0.0
    radius: float = BALL_RADIUS
    acc_x: float = 0.0
    acc_y: float = GRAVITY

    @classmethod
    def with_random_velocity(cls, rng: random.Random | None = None) -> "BouncingBall":
        """Return a ball at the origin with a random velocity in [-0.02, 0.0198]."""
        rng = rng or random.Random()
        vel_x = (rng.randrange(200) - 100) / 5000.0
        vel_y = (rng.randrange(200) - 100) / 5000.0
        return cls(vel_x, vel_y)

    def update(self) -> None:
        """Advance the ball by one step and reflect it off the walls."""
        self.vel_y += self.acc_y
        self.vel_x += self.acc_x

        self.pos_y += self.vel_y
        self.pos_x += self.vel_x

        if self.pos_y - self.radius < -BOUND:
            self.pos_y = -BOUND + self.radius
            self.vel_y = -self.vel_y
        if self.pos_y + self.radius > BOUND:
            self.pos_y = BOUND - self.radius
            self.vel_y = -self.vel_y
        if self.pos_x + self.radius > BOUND:
            self.pos_x = BOUND - self.radius
            self.vel_x = -self.vel_x
        if self.pos_x - self.radius < -BOUND:
            self.pos_x = -BOUND + self.radius
            self.vel_x = -self.vel_x


def circle_points(
    cx: float, cy: float, radius: float, segments: int = CIRCLE_SEGMENTS
) -> list[tuple[float, float]]:
    """Return the vertices of a polygon approximating a circle."""
    if segments <= 0:
        raise ValueError("segments must be positive")
    points = []
    for i in range(segments):
        angle = 2 * _PI * i / segments
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points