"""Tiling domain and its cache of safe grid candidates."""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

import numpy as np

from .config import TilingConfig, get_tiling_config
from .constants import HALF_PI
from .line import Line
from .point import Point
from .safe_grid import SafeGrid


class ZeroDomainError(ValueError):
    """Raised when a domain has no extent along one of its axes."""


class Domain:
    """Bounded rectangle that answers "closest safe angle" queries.

    The candidate list is rebuilt only by :meth:`recompute_safe_grids` (called
    on construction and by :meth:`expand`), so a single domain should be shared
    by all the lines of one pattern and not used concurrently.
    """

    def __init__(
        self,
        start_u: float,
        start_v: float,
        end_u: float,
        end_v: float,
        model_pattern: bool = True,
        expandable: bool = False,
        *,
        config: Optional[TilingConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config if config is not None else get_tiling_config()
        self._logger = logger if logger is not None else logging.getLogger(__name__)

        self._origin = Point(min(start_u, end_u), min(start_v, end_v))
        self._corner = Point(max(start_u, end_u), max(start_v, end_v))
        self._bounds = self._corner - self._origin
        if self._bounds.u == 0 or self._bounds.v == 0:
            raise ZeroDomainError("Can not process zero domain.")

        self._model_pattern = bool(model_pattern)
        self._expandable = bool(expandable)
        self._max_extent = self._config.max_extent(self._model_pattern)
        self._target_extent = self._max_extent
        self._diagonal = Line(Point(0.0, 0.0), Point(self._bounds.u, self._bounds.v))

        self._safe_grids: List[SafeGrid] = []
        self._grid_angles = np.empty(0, dtype=float)
        self.recompute_safe_grids()

    def __repr__(self) -> str:
        return (
            f"Domain(u={self._bounds.u!r}, v={self._bounds.v!r}, "
            f"target_extent={self._target_extent!r}, safe_grids={len(self._safe_grids)})"
        )

    @property
    def model_pattern(self) -> bool:
        return self._model_pattern

    @property
    def expandable(self) -> bool:
        return self._expandable

    @property
    def max_extent(self) -> float:
        return self._max_extent

    @property
    def target_extent(self) -> float:
        return self._target_extent

    @property
    def safe_grids(self) -> Tuple[SafeGrid, ...]:
        return tuple(self._safe_grids)

    def _candidate(self, u_tiles: int, v_tiles: int, flipped: bool = False) -> SafeGrid:
        return SafeGrid(
            self._bounds.as_tuple(),
            self._diagonal.angle,
            u_tiles,
            v_tiles,
            flipped,
            tolerance=self._config.lattice_tolerance,
            logger=self._logger,
        )

    def recompute_safe_grids(self) -> Tuple[SafeGrid, ...]:
        """Enumerate every safe grid reachable within the target extent.

        The domain edges and diagonal are always present.  Further tile
        multiples are accepted once per rounded ``v_tiles / u_tiles`` ratio and
        only when both the normal and the mirrored candidate are valid.
        """

        grids = [
            self._candidate(1, 0),
            self._candidate(1, 0, flipped=True),
            self._candidate(1, 1),
            self._candidate(1, 1, flipped=True),
            self._candidate(0, 1),
        ]
        consumed: Set[float] = {1.0}
        limit = self._target_extent / 2.0

        u_tiles = 1
        while self._bounds.u * u_tiles <= limit:
            v_tiles = 1
            while self._bounds.v * v_tiles <= limit:
                ratio = round(v_tiles / u_tiles, self._config.ratio_resolution)
                if ratio not in consumed:
                    normal = self._candidate(u_tiles, v_tiles)
                    mirrored = self._candidate(u_tiles, v_tiles, flipped=True)
                    if normal.is_valid() and mirrored.is_valid():
                        grids.extend((normal, mirrored))
                        consumed.add(ratio)
                    else:
                        self._logger.debug(
                            "Skipping safe angle for grid point U:%d V:%d", u_tiles, v_tiles
                        )
                v_tiles += 1
            u_tiles += 1

        self._safe_grids = grids
        self._grid_angles = np.array([grid.grid_angle for grid in grids], dtype=float)
        self._logger.debug(
            "Computed %d safe grids for target extent %s", len(grids), self._target_extent
        )
        return tuple(grids)

    def expand(self) -> bool:
        """Grow the target extent by half the class maximum and re-enumerate."""

        if self._target_extent > self._max_extent * self._config.max_domain_mult:
            return False
        self._target_extent += self._max_extent / 2.0
        self._logger.debug("Expanding domain target extent to %s", self._target_extent)
        self.recompute_safe_grids()
        return True

    def get_domain_coords(self, line: Line) -> Line:
        return Line(line.start - self._origin, line.end - self._origin)

    def get_grid_params(self, axis_angle: float) -> SafeGrid:
        # argmin keeps the first candidate on ties
        index = int(np.argmin(np.abs(self._grid_angles - axis_angle)))
        return self._safe_grids[index]

    def get_required_correction(self, axis_angle: float) -> float:
        return abs(axis_angle - self.get_grid_params(axis_angle).grid_angle)

    def get_best_angle(self, axis_angle: float) -> SafeGrid:
        """Return the closest safe grid, expanding the search when allowed."""

        if self._expandable:
            while self.get_required_correction(axis_angle) >= self._config.angle_correction:
                if not self.expand():
                    self._logger.warning(
                        "Safe angle search exhausted at extent %s; correction %.6f rad remains for angle %.6f",
                        self._target_extent,
                        self.get_required_correction(axis_angle),
                        axis_angle,
                    )
                    break
        return self.get_grid_params(axis_angle)

    def grid_anchor(self, grid_angle: float) -> Point:
        """Domain corner used to anchor a grid drawn at ``grid_angle``."""

        if grid_angle <= HALF_PI:
            return Point(0.0, 0.0)
        return Point(self._bounds.u, 0.0)


__all__ = ["Domain", "ZeroDomainError"]
