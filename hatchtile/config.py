"""Configuration helpers for the safe-angle search."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .constants import (
    ANGLE_CORR_RATIO,
    MAX_DETAIL_DOMAIN,
    MAX_DOMAIN_MULT,
    MAX_MODEL_DOMAIN,
    RATIO_RESOLUTION,
    ZERO_TOL,
)


@dataclass
class TilingConfig:
    """Tunables used by :class:`~hatchtile.domain.Domain` and its safe grids."""

    max_model_domain: float = MAX_MODEL_DOMAIN
    detail_domain_ratio: float = MAX_DETAIL_DOMAIN / MAX_MODEL_DOMAIN
    max_domain_mult: int = MAX_DOMAIN_MULT
    ratio_resolution: int = RATIO_RESOLUTION
    angle_correction: float = ANGLE_CORR_RATIO
    lattice_tolerance: float = ZERO_TOL

    @property
    def max_detail_domain(self) -> float:
        return self.max_model_domain * self.detail_domain_ratio

    def max_extent(self, model_pattern: bool) -> float:
        return self.max_model_domain if model_pattern else self.max_detail_domain


_TILING_CONFIG = TilingConfig()


def get_tiling_config() -> TilingConfig:
    return copy.deepcopy(_TILING_CONFIG)


def set_tiling_config(config: TilingConfig) -> None:
    global _TILING_CONFIG
    _TILING_CONFIG = copy.deepcopy(config)
