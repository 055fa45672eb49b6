import random

import pytest

from particlesim.particles import DOT_RADIUS, MAX_PARTICLES, Particle, ParticleSystem


def test_spawn_places_particle_and_counts():
    system = ParticleSystem(random.Random(1))
    particle = system.spawn(0.25, -0.5)
    assert len(system) == 1
    assert (particle.x, particle.y) == (0.25, -0.5)
    assert particle.radius == DOT_RADIUS


def test_spawned_values_are_in_range():
    system = ParticleSystem(random.Random(5))
    for _ in range(200):
        p = system.spawn(0.0, 0.0)
        assert -0.8 <= p.z <= 0.79
        for v in (p.vx, p.vy, p.vz):
            assert -100 / 5000 <= v <= 99 / 5000
        for c in (p.r, p.g, p.b):
            assert 0.0 <= c <= 0.99


def test_capacity_limits_spawning():
    system = ParticleSystem(random.Random(0), capacity=2)
    assert system.spawn(0, 0) is not None
    assert system.spawn(1, 1) is not None
    assert system.spawn(2, 2) is None
    assert len(system) == 2


def test_default_capacity():
    assert ParticleSystem().capacity == MAX_PARTICLES


def test_same_seed_gives_same_particles():
    a = ParticleSystem(random.Random(9))
    b = ParticleSystem(random.Random(9))
    for system in (a, b):
        system.spawn(0.1, 0.2)
        system.spawn(0.3, 0.4)
    assert list(a) == list(b)


def test_iteration_follows_spawn_order():
    system = ParticleSystem(random.Random(2))
    for x in (0.1, 0.2, 0.3):
        system.spawn(x, 0.0)
    assert [p.x for p in system] == [0.1, 0.2, 0.3]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ParticleSystem(capacity=-1)


def test_particle_defaults():
    p = Particle()
    assert p.radius == DOT_RADIUS
    assert (p.x, p.vx, p.r) == (0.0, 0.0, 0.0)