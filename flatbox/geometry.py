from __future__ import annotations

from math import sqrt

from attr import define

from flatbox.mathutils import clamp


@define
class Vector2:
    """
    A mutable 2D point or vector.

    Operators (`+`, `-`, `*`, `/`) and the `*_vectors` combinators return
    new vectors. Named mutators (`set`, `add`, `clamp`, ...) change the
    vector in place and return it, so they can be chained:

        Vector2().copy(point).clamp(lo, hi).sub(point).length()
    """

    x: float = 0.0
    y: float = 0.0

    def dot_product(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    @staticmethod
    def add_vectors(a: Vector2, b: Vector2) -> Vector2:
        return Vector2(a.x + b.x, a.y + b.y)

    @staticmethod
    def sub_vectors(a: Vector2, b: Vector2) -> Vector2:
        return Vector2(a.x - b.x, a.y - b.y)

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2.add_vectors(self, other)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2.sub_vectors(self, other)

    def __mul__(self, other: float) -> Vector2:
        return Vector2(self.x * other, self.y * other)

    def __truediv__(self, other: float) -> Vector2:
        return self * (1 / other)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x**2 + self.y**2

    def length(self) -> float:
        return sqrt(self.x**2 + self.y**2)

    def distance_to(self, other: Vector2) -> float:
        return (self - other).length()

    def normal(self) -> Vector2:
        if self.x == self.y == 0:
            return self.clone()
        return self * (1 / self.length())

    def clone(self) -> Vector2:
        return Vector2(self.x, self.y)

    def equals(self, other: Vector2) -> bool:
        """Exact componentwise comparison, no tolerance"""
        return self.x == other.x and self.y == other.y

    # In-place operations

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def copy(self, other: Vector2) -> Vector2:
        return self.set(other.x, other.y)

    def min(self, other: Vector2) -> Vector2:
        return self.set(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vector2) -> Vector2:
        return self.set(max(self.x, other.x), max(self.y, other.y))

    def add(self, other: Vector2) -> Vector2:
        return self.set(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return self.set(self.x - other.x, self.y - other.y)

    def add_scalar(self, scalar: float) -> Vector2:
        return self.set(self.x + scalar, self.y + scalar)

    def multiply_scalar(self, scalar: float) -> Vector2:
        return self.set(self.x * scalar, self.y * scalar)

    def clamp(self, lo: Vector2, hi: Vector2) -> Vector2:
        """Clamp each component into the matching `[lo, hi]` range"""
        return self.set(clamp(self.x, lo.x, hi.x), clamp(self.y, lo.y, hi.y))

    def __str__(self) -> str:
        return f"<{self.x:.2f}; {self.y:.2f}>"
