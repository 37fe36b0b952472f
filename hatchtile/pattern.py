"""Plain records describing a parsed fill pattern."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class LineGroup:
    """One family of parallel lines.

    ``dash_pattern`` holds drawn lengths as positive values, gaps as negative
    values and dots as zero.
    """

    angle_deg: float
    origin_x: float
    origin_y: float
    delta_x: float
    delta_y: float
    dash_pattern: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dash_pattern", tuple(float(d) for d in self.dash_pattern))

    @property
    def positive_dashes(self) -> Tuple[float, ...]:
        return tuple(d for d in self.dash_pattern if d > 0)


@dataclass(frozen=True)
class PatternDefinition:
    name: str
    description: Optional[str] = None
    is_model: bool = False
    line_groups: Sequence[LineGroup] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_groups", tuple(self.line_groups))


__all__ = ["LineGroup", "PatternDefinition"]
