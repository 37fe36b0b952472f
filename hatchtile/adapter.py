"""Conversion of a :class:`PatternDefinition` into a domain and its grids."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import TilingConfig
from .domain import Domain
from .grid import Grid
from .line import Line
from .logging_utils import debug_log_call
from .pattern import LineGroup, PatternDefinition
from .point import Point

logger = logging.getLogger(__name__)

_DEFAULT_LENGTH = 10.0
_MIN_SEGMENT = 1.0
_MAX_SEGMENT = 1000.0


@dataclass(frozen=True)
class ConvertedPattern:
    source: PatternDefinition
    domain: Domain
    grids: Tuple[Grid, ...]


def _clamp_length(length: float) -> float:
    return min(max(length, _MIN_SEGMENT), _MAX_SEGMENT)


def estimate_segment_length(group: LineGroup) -> float:
    """Return the drawn length used to seed the grid of ``group``."""

    dashes = group.positive_dashes
    if dashes:
        return _clamp_length(sum(dashes))
    delta = math.hypot(group.delta_x, group.delta_y)
    if delta > 1e-6:
        return _clamp_length(delta)
    return _DEFAULT_LENGTH


def _group_extent(group: LineGroup) -> Tuple[float, float]:
    dx = abs(group.delta_x)
    dy = abs(group.delta_y)
    if dx < 1e-6 and dy < 1e-6:
        dash = (group.positive_dashes or (_DEFAULT_LENGTH,))[0]
        angle = math.radians(group.angle_deg)
        dx = abs(dash * math.cos(angle))
        dy = abs(dash * math.sin(angle))
        if dx < 1e-3:
            dx = dash
        if dy < 1e-3:
            dy = dash
    return dx, dy


def domain_extent(definition: PatternDefinition) -> Tuple[float, float]:
    """Bounding size of the tile that all line groups must close on."""

    max_x = 0.0
    max_y = 0.0
    for group in definition.line_groups:
        dx, dy = _group_extent(group)
        max_x = max(max_x, dx)
        max_y = max(max_y, dy)
    if max_x < 1e-6:
        max_x = _DEFAULT_LENGTH
    if max_y < 1e-6:
        max_y = _DEFAULT_LENGTH
    return max_x, max_y


def _group_line(group: LineGroup) -> Line:
    length = estimate_segment_length(group)
    angle = math.radians(group.angle_deg)
    start = Point(group.origin_x, group.origin_y)
    end = Point(group.origin_x + math.cos(angle) * length, group.origin_y + math.sin(angle) * length)
    return Line(start, end)


@debug_log_call(logger)
def build_pattern(
    definition: PatternDefinition,
    force_model: bool = False,
    *,
    config: Optional[TilingConfig] = None,
) -> ConvertedPattern:
    if not definition.line_groups:
        raise ValueError("PatternDefinition has no line groups.")

    max_x, max_y = domain_extent(definition)
    domain = Domain(
        0.0,
        0.0,
        max_x,
        max_y,
        model_pattern=force_model or definition.is_model,
        expandable=False,
        config=config,
    )
    grids = tuple(Grid(domain, _group_line(group)) for group in definition.line_groups)

    logger.info(
        "Converted pattern %r: %d line group(s) on %r", definition.name, len(grids), domain
    )
    return ConvertedPattern(source=definition, domain=domain, grids=grids)


__all__ = ["ConvertedPattern", "build_pattern", "domain_extent", "estimate_segment_length"]
