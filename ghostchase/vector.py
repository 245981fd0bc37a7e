"""Two-dimensional vector arithmetic used for positions and velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional, Union

_EPSILON = 1e-6

Operand = Union["Vector2D", float, int]


@dataclass
class Vector2D:
    """A mutable 2D vector; scalars are treated as vectors with equal components."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @staticmethod
    def filled(value: float) -> "Vector2D":
        """Return a vector whose components both equal ``value``."""
        return Vector2D(value, value)

    @staticmethod
    def _coerce(other: object) -> Optional["Vector2D"]:
        if isinstance(other, Vector2D):
            return other
        if isinstance(other, Real):
            return Vector2D.filled(float(other))
        return None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Vector2D(self.x + o.x, self.y + o.y)

    __radd__ = __add__

    def __iadd__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self.x += o.x
        self.y += o.y
        return self

    def __sub__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Vector2D(self.x - o.x, self.y - o.y)

    def __rsub__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __isub__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self.x -= o.x
        self.y -= o.y
        return self

    def __mul__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Vector2D(self.x * o.x, self.y * o.y)

    __rmul__ = __mul__

    def __imul__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        self.x *= o.x
        self.y *= o.y
        return self

    def __truediv__(self, other: Operand) -> "Vector2D":
        """Component-wise division; a near-zero divisor yields the zero vector."""
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if abs(o.x) < _EPSILON or abs(o.y) < _EPSILON:
            return Vector2D()
        return Vector2D(self.x / o.x, self.y / o.y)

    def __itruediv__(self, other: Operand) -> "Vector2D":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if abs(o.x) < _EPSILON or abs(o.y) < _EPSILON:
            self.x = 0.0
            self.y = 0.0
        else:
            self.x /= o.x
            self.y /= o.y
        return self

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def to_int(self) -> tuple[int, int]:
        """Return the components truncated toward zero."""
        return int(self.x), int(self.y)

    def sqr_length(self) -> float:
        return Vector2D.dot(self)

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def normalize(self) -> "Vector2D":
        """Return the unit vector; the zero vector stays zero."""
        return self / self.length()

    @staticmethod
    def dot(a: "Vector2D", b: Optional["Vector2D"] = None) -> float:
        """Dot product of ``a`` and ``b``; with one argument, of ``a`` with itself."""
        if b is None:
            b = a
        return a.x * b.x + a.y * b.y

    @staticmethod
    def cross(a: "Vector2D", b: "Vector2D") -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def lerp(a: "Vector2D", b: "Vector2D", t: float) -> "Vector2D":
        return a + (b - a) * t

    @staticmethod
    def distance(a: "Vector2D", b: "Vector2D") -> float:
        """Squared distance between two points."""
        return (a - b).sqr_length()