"""A point body with a three-dimensional position and velocity."""

from __future__ import annotations

import sys
from numbers import Number
from typing import Iterable, Sequence

from .vector import Vector, format_number

DIMENSIONS = 3


def _as_vector(values: Iterable[Number]) -> Vector:
    vector = values if isinstance(values, Vector) else Vector(*values)
    if len(vector) != DIMENSIONS:
        raise ValueError(f"expected {DIMENSIONS} components, got {len(vector)}")
    return Vector(*vector)


class Body:
    """A position and velocity pair; arithmetic applies to both component-wise."""

    __hash__ = None  # mutable

    def __init__(self, position: Iterable[Number], velocity: Iterable[Number]) -> None:
        self.position = _as_vector(position)
        self.velocity = _as_vector(velocity)

    @classmethod
    def filled(cls, value: Number = 0) -> "Body":
        """Return a body whose position and velocity components all equal ``value``."""
        return cls(Vector.filled(DIMENSIONS, value), Vector.filled(DIMENSIONS, value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return self.position == other.position and self.velocity == other.velocity

    def __repr__(self) -> str:
        return f"Body({self.position!r}, {self.velocity!r})"

    def __add__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        return Body(self.position + other.position, self.velocity + other.velocity)

    def __sub__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        return Body(self.position - other.position, self.velocity - other.velocity)

    def __mul__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        return Body(self.position * other.position, self.velocity * other.velocity)

    def __truediv__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        return Body(self.position / other.position, self.velocity / other.velocity)

    def __iadd__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        self.position += other.position
        self.velocity += other.velocity
        return self

    def __isub__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        self.position -= other.position
        self.velocity -= other.velocity
        return self

    def __imul__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        self.position *= other.position
        self.velocity *= other.velocity
        return self

    def __itruediv__(self, other: "Body") -> "Body":
        if not isinstance(other, Body):
            return NotImplemented
        self.position /= other.position
        self.velocity /= other.velocity
        return self

    def __str__(self) -> str:
        pos = "".join(format_number(v) + " " for v in self.position)
        vel = "".join(format_number(v) + " " for v in self.velocity)
        return f"Pos: [ {pos}] | Vel: [ {vel}]"


def demo_lines() -> list[str]:
    """Return the lines of the demonstration output."""
    first = Body((1.0, 2.0, 3.0), (3.0, 3.0, 3.0))
    second = Body((0.0, 2.0, 4.0), (1.0, 2.0, -1.0))
    combined = first + second
    combined.velocity *= 10
    return [
        f"P0- {Body.filled()}",
        "",
        f"P1- {first}",
        "",
        f"P2- {second}",
        "",
        f"P3- {combined}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration output."""
    for line in demo_lines():
        sys.stdout.write(line + "\n")
    return 0