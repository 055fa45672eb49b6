"""Fixed-length numeric vectors with element-wise arithmetic."""

from __future__ import annotations

from numbers import Number
from typing import Iterator


def format_number(value: Number) -> str:
    """Format a number the way a default stream prints it (six significant digits)."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class Vector:
    """A fixed-length sequence of numbers supporting element-wise arithmetic.

    Division by another vector treats a zero divisor specially: ``a / b``
    yields 0 for that component, while ``a /= b`` leaves it unchanged.
    """

    __slots__ = ("_values",)
    __hash__ = None  # mutable

    def __init__(self, *args: Number) -> None:
        self._values = list(args)

    @classmethod
    def filled(cls, size: int, value: Number) -> "Vector":
        """Return a vector of ``size`` components, each set to ``value``."""
        if size < 0:
            raise ValueError("size must not be negative")
        return cls(*([value] * size))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Number:
        return self._values[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._values[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Vector({', '.join(map(repr, self._values))})"

    def _components(self, other: "Vector") -> zip:
        if len(other) != len(self):
            raise ValueError(
                f"length mismatch: {len(self)} and {len(other)} components"
            )
        return zip(self._values, other._values)

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a + b for a, b in self._components(other)))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(a - b for a, b in self._components(other)))

    def __neg__(self) -> "Vector":
        return Vector(*(-a for a in self._values))

    def __mul__(self, other: "Vector | Number") -> "Vector":
        if isinstance(other, Vector):
            return Vector(*(a * b for a, b in self._components(other)))
        if isinstance(other, Number):
            return Vector(*(a * other for a in self._values))
        return NotImplemented

    def __rmul__(self, other: Number) -> "Vector":
        if isinstance(other, Number):
            return Vector(*(other * a for a in self._values))
        return NotImplemented

    def __truediv__(self, other: "Vector | Number") -> "Vector":
        if isinstance(other, Vector):
            return Vector(*(a / b if b != 0 else 0 for a, b in self._components(other)))
        if isinstance(other, Number):
            return Vector(*(a / other for a in self._values))
        return NotImplemented

    def __iadd__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._values = [a + b for a, b in self._components(other)]
        return self

    def __isub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._values = [a - b for a, b in self._components(other)]
        return self

    def __imul__(self, other: "Vector | Number") -> "Vector":
        if isinstance(other, Vector):
            self._values = [a * b for a, b in self._components(other)]
        elif isinstance(other, Number):
            self._values = [a * other for a in self._values]
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: "Vector | Number") -> "Vector":
        if isinstance(other, Vector):
            self._values = [a / b if b != 0 else a for a, b in self._components(other)]
        elif isinstance(other, Number):
            self._values = [a / other for a in self._values]
        else:
            return NotImplemented
        return self

    def __str__(self) -> str:
        return "(" + ", ".join(format_number(v) for v in self._values) + ")"