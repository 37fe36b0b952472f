"""Tolerance-rounded 2D points in domain-local (U, V) axes."""

from __future__ import annotations

import math
from typing import Iterator, Optional, Tuple

import numpy as np

from .constants import COORD_RESOLUTION, ZERO_TOL


def round_coord(value: float) -> float:
    """Collapse near-zero values and round to the coordinate resolution."""

    value = float(value)
    value = value if abs(value) > ZERO_TOL else 0.0
    return round(value, COORD_RESOLUTION)


def _rotation_matrix(angle: float) -> np.ndarray:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)


class Point:
    """Point whose equality and hash are defined on rounded coordinates.

    Points behave as values except for :meth:`rotate`, which mutates the
    instance in place so that lines holding the point follow the rotation.
    """

    __slots__ = ("_u", "_v")

    def __init__(self, u: float, v: float) -> None:
        self._u = round_coord(u)
        self._v = round_coord(v)

    @property
    def u(self) -> float:
        return self._u

    @property
    def v(self) -> float:
        return self._v

    def as_tuple(self) -> Tuple[float, float]:
        return (self._u, self._v)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        return f"Point(u={self._u!r}, v={self._v!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._u == other._u and self._v == other._v

    def __hash__(self) -> int:
        return hash((self._u, self._v))

    def __add__(self, other: "Point") -> "Point":
        return Point(self._u + other._u, self._v + other._v)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self._u - other._u, self._v - other._v)

    def distance_to(self, point: "Point") -> float:
        return math.hypot(point._u - self._u, point._v - self._v)

    def rotate(self, angle: float, origin: Optional["Point"] = None) -> bool:
        """Rotate around ``origin`` (default ``(0, 0)``) by ``angle`` radians."""

        origin = origin if origin is not None else Point(0.0, 0.0)
        rel = np.array([self._u - origin._u, self._v - origin._v], dtype=float)
        du, dv = _rotation_matrix(angle) @ rel
        self._u = round_coord(origin._u + du)
        self._v = round_coord(origin._v + dv)
        return True


__all__ = ["Point", "round_coord"]
