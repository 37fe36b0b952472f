"""Numeric constants shared by the tiling engine."""

from __future__ import annotations

import math

PI = math.pi
HALF_PI = PI / 2.0

# Values below this magnitude collapse to zero.
ZERO_TOL = 5e-06
COORD_RESOLUTION = 15

MAX_MODEL_DOMAIN = 100.0
MAX_DETAIL_DOMAIN = MAX_MODEL_DOMAIN / 10.0
MAX_DOMAIN_MULT = 8

RATIO_RESOLUTION = 2
ANGLE_CORR_RATIO = 0.01
