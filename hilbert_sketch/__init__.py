"""Hilbert curve generation and rendering.

The package exposes the pure index-to-coordinate mapping alongside the
controller and drawing helpers used by the interactive viewer.
"""

import logging

from .curve import (
    BASE_PATTERN,
    CurvePath,
    GridCoord,
    compute_coordinate,
    compute_coordinates,
    generate_path,
    grid_side,
    point_count,
)
from .errors import HilbertError, IndexOutOfRangeError, InvalidOrderError
from .config import Settings, build_settings, clamp_order
from .state import CurveController

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BASE_PATTERN",
    "CurvePath",
    "GridCoord",
    "compute_coordinate",
    "compute_coordinates",
    "generate_path",
    "grid_side",
    "point_count",
    "HilbertError",
    "IndexOutOfRangeError",
    "InvalidOrderError",
    "Settings",
    "build_settings",
    "clamp_order",
    "CurveController",
]
