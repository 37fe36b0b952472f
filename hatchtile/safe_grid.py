"""Safe grid candidates: hatch orientations that close exactly on a domain lattice.

A candidate is described by a pair of tile multiples ``(u_tiles, v_tiles)``.
Its axis runs from the domain origin to the lattice point
``(bounds_u * u_tiles, bounds_v * v_tiles)``; the mirrored (``flipped``)
variant reflects that axis across the V axis.  Offset and shift are always
evaluated in a "shallow axis" frame where the axis angle does not exceed the
domain diagonal, swapping the roles of U and V for steep candidates.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional, Tuple

import numpy as np

from .constants import HALF_PI, PI, ZERO_TOL
from .line import Line
from .point import Point


class ShallowFrame(NamedTuple):
    angle: float
    u_tiles: int
    v_tiles: int
    domain_u: float
    domain_v: float
    offset_direction: float


def shallow_frame(
    axis_angle: float,
    diag_angle: float,
    bounds: Tuple[float, float],
    u_tiles: int,
    v_tiles: int,
    flipped: bool,
) -> ShallowFrame:
    """Return the canonical frame for a candidate axis."""

    bounds_u, bounds_v = bounds
    if axis_angle <= diag_angle:
        return ShallowFrame(
            angle=axis_angle,
            u_tiles=u_tiles,
            v_tiles=v_tiles,
            domain_u=bounds_u,
            domain_v=bounds_v,
            offset_direction=1.0 if flipped else -1.0,
        )
    return ShallowFrame(
        angle=axis_angle - HALF_PI if flipped else HALF_PI - axis_angle,
        u_tiles=v_tiles,
        v_tiles=u_tiles,
        domain_u=bounds_v,
        domain_v=bounds_u,
        offset_direction=-1.0 if flipped else 1.0,
    )


class SafeGrid:
    """One tile-multiple candidate and its derived tiling parameters.

    ``shift`` is resolved once at construction.  When no lattice point lies on
    the offset copy of the axis the shift is ``None`` and the candidate is
    invalid.
    """

    def __init__(
        self,
        bounds: Tuple[float, float],
        diag_angle: float,
        u_tiles: int,
        v_tiles: int,
        flipped: bool = False,
        *,
        tolerance: float = ZERO_TOL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._bounds = (float(bounds[0]), float(bounds[1]))
        self._u_tiles = int(u_tiles)
        self._v_tiles = int(v_tiles)
        self._flipped = bool(flipped)
        self._tolerance = tolerance
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._axis_line = Line(
            Point(0.0, 0.0),
            Point(self._bounds[0] * self._u_tiles, self._bounds[1] * self._v_tiles),
        )
        self._frame = shallow_frame(
            self._axis_line.angle,
            diag_angle,
            self._bounds,
            self._u_tiles,
            self._v_tiles,
            self._flipped,
        )
        self._shift = self._resolve_shift()

    def __repr__(self) -> str:
        frame = self._frame
        return (
            f"SafeGrid(grid_angle={self.grid_angle!r}, angle={frame.angle!r}, "
            f"u_tiles={frame.u_tiles}, v_tiles={frame.v_tiles}, "
            f"domain_u={frame.domain_u!r}, domain_v={frame.domain_v!r}, "
            f"offset_dir={frame.offset_direction!r}, span={self.span!r}, "
            f"offset={self.offset!r}, shift={self._shift!r})"
        )

    @property
    def u_tiles(self) -> int:
        return self._u_tiles

    @property
    def v_tiles(self) -> int:
        return self._v_tiles

    @property
    def flipped(self) -> bool:
        return self._flipped

    @property
    def frame(self) -> ShallowFrame:
        return self._frame

    @property
    def axis_line(self) -> Line:
        return self._axis_line

    @property
    def grid_angle(self) -> float:
        axis_angle = self._axis_line.angle
        return PI - axis_angle if self._flipped else axis_angle

    @property
    def span(self) -> float:
        return self._axis_line.length

    @property
    def offset(self) -> float:
        frame = self._frame
        if frame.angle == 0.0:
            return frame.domain_v * frame.offset_direction
        return abs(frame.domain_u * math.sin(frame.angle) / frame.v_tiles) * frame.offset_direction

    @property
    def shift(self) -> Optional[float]:
        return self._shift

    def is_valid(self) -> bool:
        return self._shift is not None

    def _resolve_shift(self) -> Optional[float]:
        frame = self._frame
        if frame.angle == 0.0:
            return 0.0
        if frame.u_tiles == 1 and frame.v_tiles == 1:
            return abs(frame.domain_u * math.cos(frame.angle))

        offset = self.offset
        offset_vector = Point(
            abs(offset * math.sin(frame.angle)),
            -abs(offset * math.cos(frame.angle)),
        )
        axis_end = Point(frame.domain_u * frame.u_tiles, frame.domain_v * frame.v_tiles)
        offset_axis = Line(Point(0.0, 0.0) + offset_vector, axis_end + offset_vector)

        grid_point = self._next_grid_point(offset_axis)
        if grid_point is None:
            return None
        return offset_axis.start.distance_to(grid_point)

    def _next_grid_point(self, offset_axis: Line) -> Optional[Point]:
        frame = self._frame
        # "ij" indexing keeps u as the outer loop once flattened
        u_idx, v_idx = np.meshgrid(
            np.arange(frame.u_tiles), np.arange(frame.v_tiles), indexing="ij"
        )
        coords = np.column_stack(
            (frame.domain_u * u_idx.ravel(), frame.domain_v * v_idx.ravel())
        )
        hits = np.flatnonzero(offset_axis.collinear_mask(coords, self._tolerance))
        if hits.size == 0:
            self._logger.warning(
                "Can not determine next repeating grid (u_tiles=%d, v_tiles=%d)",
                self._u_tiles,
                self._v_tiles,
            )
            return None
        grid_u, grid_v = coords[hits[0]]
        return Point(grid_u, grid_v)


__all__ = ["SafeGrid", "ShallowFrame", "shallow_frame"]
