"""
Canvas-independent drawing primitives for a curve path.

Grid coordinates are scaled to pixel centres, each segment is coloured by its
position along the path (one full turn of the hue wheel across the path), and
runs of consecutive segments sharing a colour are merged into a single
polyline so a canvas only has to hold a few hundred items even for
million-point curves.
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .curve import CurvePath

HUE_RANGE = 360.0


@dataclass(frozen=True)
class Polyline:
    """Connected run of segments drawn with one colour."""

    coords: Tuple[float, ...]
    color: str

    @property
    def segment_count(self) -> int:
        return len(self.coords) // 2 - 1


def cell_size(order: int, canvas_size: float) -> float:
    """Return the pixel length of one grid cell."""
    return canvas_size / float(1 << order)


def to_pixels(path: CurvePath, canvas_size: float) -> np.ndarray:
    """Map grid coordinates to the centres of their cells in pixel space."""

    cell = cell_size(path.order, canvas_size)
    return path.as_array().astype(np.float64) * cell + cell / 2.0


def segment_hues(point_count: int) -> np.ndarray:
    """Hue in degrees for each segment; segment ``k`` ends at point ``k + 1``."""

    if point_count < 2:
        return np.zeros(0, dtype=np.float64)
    ends = np.arange(1, point_count, dtype=np.float64)
    return ends * HUE_RANGE / point_count


def hue_to_hex(hue: float) -> str:
    """Fully saturated, full brightness colour for ``hue`` degrees."""

    r, g, b = colorsys.hsv_to_rgb((hue % HUE_RANGE) / HUE_RANGE, 1.0, 1.0)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def build_polylines(pixels: np.ndarray, hues: np.ndarray) -> List[Polyline]:
    """
    Merge consecutive segments whose hues round down to the same degree.

    Args:
        pixels: ``(n, 2)`` point positions.
        hues: ``(n - 1,)`` segment hues from :func:`segment_hues`.

    Returns:
        Polylines in path order. Adjacent polylines share their boundary point.
    """
    if len(hues) != max(len(pixels) - 1, 0):
        raise ValueError(f"expected {max(len(pixels) - 1, 0)} hues, got {len(hues)}")
    if len(hues) == 0:
        return []

    keys = np.floor(hues).astype(np.int64)
    breaks = np.flatnonzero(np.diff(keys)) + 1
    starts = np.concatenate(([0], breaks))
    stops = np.concatenate((breaks, [len(keys)]))

    polylines: List[Polyline] = []
    for start, stop in zip(starts.tolist(), stops.tolist()):
        run = pixels[start : stop + 1]
        polylines.append(Polyline(coords=tuple(run.ravel().tolist()), color=hue_to_hex(int(keys[start]))))
    return polylines


def render_path(path: CurvePath, canvas_size: float) -> List[Polyline]:
    """Full pipeline from a path to coloured polylines for a square canvas."""
    return build_polylines(to_pixels(path, canvas_size), segment_hues(len(path)))


__all__ = [
    "HUE_RANGE",
    "Polyline",
    "cell_size",
    "to_pixels",
    "segment_hues",
    "hue_to_hex",
    "build_polylines",
    "render_path",
]
