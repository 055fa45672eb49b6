"""Coloured particles and a bounded collection that spawns them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

MAX_PARTICLES = 1000
DOT_RADIUS = 0.05


@dataclass
class Particle:
    """A sphere with position, velocity, radius and an RGB colour."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    radius: float = DOT_RADIUS
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class ParticleSystem:
    """Holds up to ``capacity`` particles; spawning beyond that is ignored."""

    def __init__(
        self, rng: random.Random | None = None, capacity: int = MAX_PARTICLES
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.rng = rng or random.Random()
        self.capacity = capacity
        self.particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def spawn(self, x: float, y: float) -> Particle | None:
        """Add a particle at (x, y) with random depth, velocity and colour.

        Returns the new particle, or None when the system is full.
        """
        if len(self.particles) >= self.capacity:
            return None
        rng = self.rng
        particle = Particle(
            x=x,
            y=y,
            z=(rng.randrange(160) - 80) / 100.0,
            vx=(rng.randrange(200) - 100) / 5000.0,
            vy=(rng.randrange(200) - 100) / 5000.0,
            vz=(rng.randrange(200) - 100) / 5000.0,
            radius=DOT_RADIUS,
        )
        particle.r = rng.randrange(100) / 100.0
        particle.g = rng.randrange(100) / 100.0
        particle.b = rng.randrange(100) / 100.0
        self.particles.append(particle)
        return particle