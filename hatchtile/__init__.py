from .point import Point, round_coord
from .line import Line, LineIntersectionError
from .safe_grid import SafeGrid, ShallowFrame, shallow_frame
from .domain import Domain, ZeroDomainError
from .grid import Grid
from .pattern import LineGroup, PatternDefinition
from .adapter import ConvertedPattern, build_pattern, domain_extent, estimate_segment_length
from .config import TilingConfig, get_tiling_config, set_tiling_config

__all__ = [
    'Point',
    'round_coord',
    'Line',
    'LineIntersectionError',
    'SafeGrid',
    'ShallowFrame',
    'shallow_frame',
    'Domain',
    'ZeroDomainError',
    'Grid',
    'LineGroup',
    'PatternDefinition',
    'ConvertedPattern',
    'build_pattern',
    'domain_extent',
    'estimate_segment_length',
    'TilingConfig',
    'get_tiling_config',
    'set_tiling_config',
]
