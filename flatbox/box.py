from __future__ import annotations

import logging
from typing import Iterable

from flatbox.geometry import Vector2
from flatbox.mathutils import (
    EPSILON,
    INF
)


logger = logging.getLogger(__name__)


class Box2:
    """
    Axis-aligned rectangle stored as its `min` and `max` corners.

    An empty box has `min = (+inf, +inf)` and `max = (-inf, -inf)`. More
    generally, any box whose `max` is below its `min` on either axis is
    empty; see `empty()`. Operations that invert the bounds (disjoint
    `intersect`, negative `expand_by_scalar`) quietly produce such a box.

    Mutators return `self`:

        Box2().set_from_points(points).expand_by_scalar(0.5).center()
    """

    __slots__ = ("min", "max")

    def __init__(self, min_: Vector2 | None = None, max_: Vector2 | None = None, /) -> None:
        self.min = Vector2(INF, INF)
        self.max = Vector2(-INF, -INF)
        if (min_ is None) != (max_ is None):
            raise TypeError("Box2 takes either both corners or none")
        if min_ is not None and max_ is not None:
            self.set(min_, max_)

    @classmethod
    def from_points(cls, points: Iterable[Vector2]) -> Box2:
        return cls().set_from_points(points)

    def set(self, min_: Vector2, max_: Vector2) -> Box2:
        """Copy the corners as given. Inverted corners make an empty box."""
        self.min.copy(min_)
        self.max.copy(max_)
        return self

    def copy(self, box: Box2) -> Box2:
        return self.set(box.min, box.max)

    def make_empty(self) -> Box2:
        self.min.set(INF, INF)
        self.max.set(-INF, -INF)
        return self

    def set_from_center_and_size(self, center: Vector2, size: Vector2) -> Box2:
        half_size = size * 0.5
        self.min.copy(center).sub(half_size)
        self.max.copy(center).add(half_size)
        return self

    def set_from_points(self, points: Iterable[Vector2]) -> Box2:
        it = iter(points)
        first = next(it, None)
        if first is None:
            logger.debug("No points given, %r is left empty", self)
            return self.make_empty()

        lo = self.min.copy(first)
        hi = self.max.copy(first)
        # Both bounds start at the first point, so each axis moves at most one of them per point.
        for point in it:
            if point.x < lo.x:
                lo.x = point.x
            elif point.x > hi.x:
                hi.x = point.x

            if point.y < lo.y:
                lo.y = point.y
            elif point.y > hi.y:
                hi.y = point.y
        return self

    # Algebra

    def expand_by_point(self, point: Vector2) -> Box2:
        self.min.min(point)
        self.max.max(point)
        return self

    def expand_by_vector(self, vector: Vector2) -> Box2:
        self.min.sub(vector)
        self.max.add(vector)
        return self

    def expand_by_scalar(self, scalar: float) -> Box2:
        self.min.add_scalar(-scalar)
        self.max.add_scalar(scalar)
        return self

    def intersect(self, box: Box2) -> Box2:
        self.min.max(box.min)
        self.max.min(box.max)
        return self

    def union_box(self, box: Box2) -> Box2:
        self.min.min(box.min)
        self.max.max(box.max)
        return self

    def translate(self, offset: float) -> Box2:
        """Shift both corners by `offset` along both axes"""
        self.min.add_scalar(offset)
        self.max.add_scalar(offset)
        return self

    # Queries

    def empty(self) -> bool:
        return self.max.x < self.min.x or self.max.y < self.min.y

    def center(self, target: Vector2 | None = None) -> Vector2:
        result = target if target is not None else Vector2()
        return result.copy(self.min).add(self.max).multiply_scalar(0.5)

    def size(self, target: Vector2 | None = None) -> Vector2:
        result = target if target is not None else Vector2()
        return result.copy(self.max).sub(self.min)

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def corners(self) -> tuple[Vector2, Vector2, Vector2, Vector2]:
        """`min`, `max`, then the two mixed corners (max.x, min.y) and (min.x, max.y)"""
        return (
            self.min.clone(),
            self.max.clone(),
            Vector2(self.max.x, self.min.y),
            Vector2(self.min.x, self.max.y),
        )

    def contains_point(self, point: Vector2) -> bool:
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def contains_box(self, box: Box2) -> bool:
        return (
            self.min.x <= box.min.x
            and box.max.x <= self.max.x
            and self.min.y <= box.min.y
            and box.max.y <= self.max.y
        )

    def is_intersection_box(self, box: Box2) -> bool:
        # Touching edges count as an intersection.
        return not (
            box.max.x < self.min.x
            or box.min.x > self.max.x
            or box.max.y < self.min.y
            or box.min.y > self.max.y
        )

    def clamp_point(self, point: Vector2, target: Vector2 | None = None) -> Vector2:
        result = target if target is not None else Vector2()
        return result.copy(point).clamp(self.min, self.max)

    def distance_to_point(self, point: Vector2) -> float:
        return self.clamp_point(point).sub(point).length()

    def get_parameter(self, point: Vector2, target: Vector2 | None = None) -> Vector2:
        """
        Position of `point` as a fraction of the box extent on each axis,
        (0, 0) at `min` and (1, 1) at `max`.

        A zero component is reported as `EPSILON`. So is any component along
        an axis where the box has no extent.
        """
        result = target if target is not None else Vector2()
        return result.set(
            self._axis_parameter(point.x, self.min.x, self.max.x),
            self._axis_parameter(point.y, self.min.y, self.max.y),
        )

    def _axis_parameter(self, value: float, lo: float, hi: float) -> float:
        extent = hi - lo
        if extent == 0:
            logger.debug("Parameter along a zero-extent axis of %r", self)
            return EPSILON
        ratio = (value - lo) / extent
        if ratio == 0:
            return EPSILON
        return ratio

    def equals(self, box: Box2) -> bool:
        return self.min.equals(box.min) and self.max.equals(box.max)

    def clone(self) -> Box2:
        return Box2(self.min, self.max)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box2):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Box2({self.min!r}, {self.max!r})"

    def __str__(self) -> str:
        return f"Box2({self.min}, {self.max})"
