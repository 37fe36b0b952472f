"""Undirected line segments between two :class:`~hatchtile.point.Point` objects."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .constants import PI, ZERO_TOL
from .point import Point

_U_AXIS = np.array([1.0, 0.0], dtype=float)


class LineIntersectionError(ArithmeticError):
    """Raised when two lines are parallel or coincident."""


def _canonical(start: Point, end: Point) -> Tuple[Point, Point]:
    # first argument wins on a V tie
    return (start, end) if start.v <= end.v else (end, start)


def _det(a: Point, b: Point) -> float:
    return a.u * b.v - a.v * b.u


class Line:
    """Segment ordered so that ``start.v <= end.v``.

    Endpoints are held by reference; :meth:`rotate` moves them in place and
    derived values (angle, length, centre) are always computed from the live
    endpoints.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Point, end: Point) -> None:
        self._start, self._end = _canonical(start, end)

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    def __repr__(self) -> str:
        return f"Line(start={self._start!r}, end={self._end!r})"

    @property
    def direction(self) -> Point:
        return Point(self._end.u - self._start.u, self._end.v - self._start.v)

    @property
    def angle(self) -> float:
        """Non-negative angle to the U axis in ``[0, pi)``."""

        vec = np.array(self.direction.as_tuple(), dtype=float)
        norm = float(np.linalg.norm(vec))
        if norm == 0.0:
            return 0.0
        cos_angle = float(np.clip(np.dot(vec, _U_AXIS) / norm, -1.0, 1.0))
        angle = float(np.arccos(cos_angle))
        # a tie-ordered horizontal line may point along -U
        return angle if angle < PI else 0.0

    @property
    def center_point(self) -> Point:
        return Point((self._end.u + self._start.u) / 2.0, (self._end.v + self._start.v) / 2.0)

    @property
    def length(self) -> float:
        direction = self.direction
        return math.hypot(direction.u, direction.v)

    def collinear_mask(self, coords: Sequence[Sequence[float]], tolerance: float = ZERO_TOL) -> np.ndarray:
        """Return a boolean mask of ``coords`` lying on the infinite line.

        Uses the cross-product collinearity measure, so segment containment is
        not checked.
        """

        pts = np.asarray(coords, dtype=float).reshape(-1, 2)
        a, b = self._start, self._end
        cross = (a.u - pts[:, 0]) * (b.v - pts[:, 1]) - (a.v - pts[:, 1]) * (b.u - pts[:, 0])
        return np.abs(cross) <= tolerance

    def point_on_line(self, point: Point, tolerance: float = ZERO_TOL) -> bool:
        return bool(self.collinear_mask([point.as_tuple()], tolerance)[0])

    def intersect(self, other: "Line") -> Point:
        xdiff = Point(self._start.u - self._end.u, other._start.u - other._end.u)
        ydiff = Point(self._start.v - self._end.v, other._start.v - other._end.v)

        div = _det(xdiff, ydiff)
        if div == 0:
            raise LineIntersectionError("Lines do not intersect.")

        d = Point(_det(self._start, self._end), _det(other._start, other._end))
        return Point(_det(d, xdiff) / div, _det(d, ydiff) / div)

    def rotate(self, angle: float, origin: Optional[Point] = None) -> None:
        self._start.rotate(angle, origin)
        self._end.rotate(angle, origin)
        self._start, self._end = _canonical(self._start, self._end)


__all__ = ["Line", "LineIntersectionError"]
