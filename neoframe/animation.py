"""Easing curves and the small geometry types used by animations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

F32_EPSILON = 2.0**-23

EaseFunc = Callable[[float], float]


@dataclass(frozen=True)
class Point:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Point:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            return Point(0.0, 0.0)
        return Point(self.x / length, self.y / length)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    @classmethod
    def from_point_and_size(cls, point: Point, width: float, height: float) -> Rect:
        return cls.from_xywh(point.x, point.y, width, height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    def contains(self, x: float, y: float) -> bool:
        """True when (x, y) lies inside; right and bottom edges are exclusive."""
        return self.left <= x < self.right and self.top <= y < self.bottom

    def offset(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)


def ease_linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return -t * (t - 2.0)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    n = t * 2.0 - 1.0
    return -0.5 * (n * (n - 2.0) - 1.0)


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    n = t - 1.0
    return n * n * n + 1.0


def ease_in_out_cubic(t: float) -> float:
    n = 2.0 * t
    if n < 1.0:
        return 0.5 * n * n * n
    n -= 2.0
    return 0.5 * (n * n * n + 2.0)


def ease_in_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * (t - 1.0))


def ease_out_expo(t: float) -> float:
    if abs(t - 1.0) < F32_EPSILON:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def ease(ease_func: EaseFunc, start: float, end: float, t: float) -> float:
    return lerp(start, end, ease_func(t))


def ease_point(ease_func: EaseFunc, start: Point, end: Point, t: float) -> Point:
    return Point(
        ease(ease_func, start.x, end.x, t),
        ease(ease_func, start.y, end.y, t),
    )