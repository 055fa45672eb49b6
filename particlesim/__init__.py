"""Particle physics playground: vectors, bodies, a bouncing ball, particle systems and a free-look camera."""

__version__ = "0.1.0"
__all__ = ["vector", "body", "bouncing", "particles", "physics", "camera"]