"""Binding of one pattern line to its closest safe grid."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .domain import Domain
from .line import Line
from .point import Point
from .safe_grid import SafeGrid


class Grid:
    """Input line rotated onto the closest safe angle of ``domain``.

    The caller's line is rotated in place about its centre and kept as the
    first segment line.
    """

    def __init__(self, domain: Domain, init_line: Line, *, logger: Optional[logging.Logger] = None) -> None:
        self._domain = domain
        self._logger = logger if logger is not None else logging.getLogger(__name__)

        self._safe_grid = domain.get_best_angle(init_line.angle)
        self._logger.info("Closest safe angle is: %r", self._safe_grid)

        self._angle = self._safe_grid.grid_angle
        self._span = self._safe_grid.span
        self._offset = self._safe_grid.offset
        self._shift = float(self._safe_grid.shift)

        init_line.rotate(self._angle - init_line.angle, init_line.center_point)
        self._segment_lines: List[Line] = [init_line]

    def __repr__(self) -> str:
        return (
            f"Grid(angle={self._angle!r}, span={self._span!r}, "
            f"offset={self._offset!r}, shift={self._shift!r})"
        )

    @property
    def safe_grid(self) -> SafeGrid:
        return self._safe_grid

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def span(self) -> float:
        return self._span

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def shift(self) -> float:
        return self._shift

    @property
    def origin(self) -> Point:
        anchor = self._domain.grid_anchor(self._angle)
        points = [point for line in self._segment_lines for point in (line.start, line.end)]
        return min(points, key=anchor.distance_to)

    @property
    def segments(self) -> List[float]:
        """Pen-down length followed by the gap completing one span."""

        pen_down = self._segment_lines[0].length
        return [pen_down, self._span - pen_down]

    @property
    def segments_as_lines(self) -> List[Line]:
        return list(self._segment_lines)

    def adopt_line(self, line: Line) -> bool:
        # TODO: merge overlapping co-linear lines into this grid instead of one grid per line
        return False

    def as_dict(self) -> Dict[str, Any]:
        origin = self.origin
        return {
            "angle": self._angle,
            "span": self._span,
            "offset": self._offset,
            "shift": self._shift,
            "origin": (origin.u, origin.v),
            "segments": self.segments,
        }


__all__ = ["Grid"]
