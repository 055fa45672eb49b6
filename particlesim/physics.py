"""Forces, collisions and integration for a set of particles."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable

from .particles import DOT_RADIUS, Particle

GRAVITY = -0.0008
DAMPING = -0.5
BOUND = 0.8
REPULSION_STRENGTH = 0.001
ELASTICITY = 1.0


def repulsion(particles: Iterable[Particle]) -> None:
    """Push every pair of particles apart with an inverse-square force.

    Pairs at exactly the same point have no defined direction and are skipped.
    """
    for p1, p2 in combinations(list(particles), 2):
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        dz = p1.z - p2.z
        dist = math.sqrt(dx * dx + dy * dy + dz * dz)
        if dist == 0.0:
            continue
        force = REPULSION_STRENGTH / dist**3
        dvx, dvy, dvz = force * dx / dist, force * dy / dist, force * dz / dist
        p1.vx += dvx
        p1.vy += dvy
        p1.vz += dvz
        p2.vx -= dvx
        p2.vy -= dvy
        p2.vz -= dvz


def handle_collisions(particles: Iterable[Particle]) -> None:
    """Separate overlapping particles and bounce approaching ones off each other."""
    for p1, p2 in combinations(list(particles), 2):
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        dz = p2.z - p1.z
        dist = math.sqrt(dx * dx + dy * dy + dz * dz)
        min_dist = p1.radius + p2.radius
        if not 0.0 < dist < min_dist:
            continue

        nx, ny, nz = dx / dist, dy / dist, dz / dist
        half = (min_dist - dist) * 0.5
        p1.x -= nx * half
        p1.y -= ny * half
        p1.z -= nz * half
        p2.x += nx * half
        p2.y += ny * half
        p2.z += nz * half

        vel_along_normal = (
            (p2.vx - p1.vx) * nx + (p2.vy - p1.vy) * ny + (p2.vz - p1.vz) * nz
        )
        if vel_along_normal > 0:
            continue

        # Equal masses share the impulse evenly.
        impulse = -(1 + ELASTICITY) * vel_along_normal / 2.0
        ix, iy, iz = impulse * nx, impulse * ny, impulse * nz
        p1.vx -= ix
        p1.vy -= iy
        p1.vz -= iz
        p2.vx += ix
        p2.vy += iy
        p2.vz += iz


def _bounce(position: float, velocity: float) -> tuple[float, float]:
    if position - DOT_RADIUS < -BOUND:
        position = -BOUND + DOT_RADIUS
        velocity *= DAMPING
    if position + DOT_RADIUS > BOUND:
        position = BOUND - DOT_RADIUS
        velocity *= DAMPING
    return position, velocity


def update(particles: Iterable[Particle]) -> None:
    """Advance every particle one step: gravity, motion, damped wall bounces.

    Repulsion between all particles is applied after each particle moves.
    """
    bodies = list(particles)
    for p in bodies:
        p.vy += GRAVITY
        p.x += p.vx
        p.y += p.vy
        p.z += p.vz
        p.y, p.vy = _bounce(p.y, p.vy)
        p.x, p.vx = _bounce(p.x, p.vx)
        p.z, p.vz = _bounce(p.z, p.vz)
        repulsion(bodies)