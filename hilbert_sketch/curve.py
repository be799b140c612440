"""
Hilbert curve generation for square grids.

This module maps a linear position along the Hilbert curve of a given order
to the grid cell it visits. The order-1 curve is the U-shaped pattern
``(0,0) -> (0,1) -> (1,1) -> (1,0)``; every further order replaces each cell
by a rotated or mirrored copy of the previous curve so that consecutive
indices always land on adjacent cells.

Two entry points are provided: :func:`compute_coordinate` for a single index
and :func:`compute_coordinates` which applies the same fold to a numpy array
of indices. :func:`generate_path` assembles the full traversal.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from .errors import IndexOutOfRangeError, InvalidOrderError


class GridCoord(NamedTuple):
    """Cell of the ``2**order x 2**order`` grid."""

    x: int
    y: int


# Order-1 traversal, indexed by the two lowest bits of the curve index.
BASE_PATTERN: Tuple[GridCoord, ...] = (
    GridCoord(0, 0),
    GridCoord(0, 1),
    GridCoord(1, 1),
    GridCoord(1, 0),
)

_BASE_X = np.array([c.x for c in BASE_PATTERN], dtype=np.int64)
_BASE_Y = np.array([c.y for c in BASE_PATTERN], dtype=np.int64)

# 4**order must fit in a signed 64-bit index array.
MAX_VECTOR_ORDER = 31


def _check_integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def _check_order(order) -> int:
    order = _check_integer("order", order)
    if order < 1:
        raise InvalidOrderError(order)
    return order


def grid_side(order: int) -> int:
    """Return the number of cells along one side of the grid."""
    return 1 << _check_order(order)


def point_count(order: int) -> int:
    """Return the number of points on the curve of ``order``."""
    return 1 << (2 * _check_order(order))


def _fold_level(coord: GridCoord, quadrant: int, level: int) -> GridCoord:
    """Place ``coord`` from a ``2**level`` sub-square into the next one up.

    ``quadrant`` holds the two index bits for this level. The rotation or
    mirror is applied to the incoming coordinate first, then the quadrant
    offset is added.
    """
    b1 = quadrant & 1
    b2 = (quadrant >> 1) & 1
    side = 1 << level
    x, y = coord

    if b1 + b2 == 0:
        x, y = y, x
    elif b1 + b2 == 2:
        x, y = side - 1 - y, side - 1 - x

    if b1 != b2:
        y += side
    if b2:
        x += side
    return GridCoord(x, y)


def compute_coordinate(order: int, index: int) -> GridCoord:
    """
    Convert a Hilbert curve index to its grid coordinate.

    Args:
        order: Curve order, ``>= 1``. The grid has ``2**order`` cells per side.
        index: Position along the curve in ``[0, 4**order - 1]``.

    Returns:
        ``GridCoord(x, y)`` with ``0 <= x, y < 2**order``.

    Raises:
        InvalidOrderError: ``order`` is smaller than one.
        IndexOutOfRangeError: ``index`` lies outside the curve.
        TypeError: either argument is not an integer.
    """
    order = _check_order(order)
    index = _check_integer("index", index)
    if not 0 <= index < (1 << (2 * order)):
        raise IndexOutOfRangeError(index, order)

    coord = BASE_PATTERN[index & 3]
    for level in range(1, order):
        coord = _fold_level(coord, (index >> (2 * level)) & 3, level)
    return coord


def compute_coordinates(order: int, indices) -> np.ndarray:
    """
    Vectorised :func:`compute_coordinate` over an array of indices.

    Args:
        order: Curve order, between 1 and ``MAX_VECTOR_ORDER``.
        indices: Integer array-like of curve indices; flattened before use.

    Returns:
        ``int64`` array of shape ``(len(indices), 2)`` holding ``(x, y)`` rows.
    """
    order = _check_order(order)
    if order > MAX_VECTOR_ORDER:
        raise ValueError(
            f"vectorised generation supports order <= {MAX_VECTOR_ORDER}, got {order}"
        )

    idx = np.ravel(np.asarray(indices))
    if idx.size and idx.dtype.kind not in "iu":
        raise TypeError(f"indices must be integers, got dtype {idx.dtype}")
    idx = idx.astype(np.int64, copy=False)

    invalid = (idx < 0) | (idx >= (1 << (2 * order)))
    if invalid.any():
        raise IndexOutOfRangeError(int(idx[invalid][0]), order)

    x = _BASE_X[idx & 3]
    y = _BASE_Y[idx & 3]
    for level in range(1, order):
        quadrant = (idx >> (2 * level)) & 3
        b1 = quadrant & 1
        b2 = (quadrant >> 1) & 1
        side = 1 << level
        swap = (b1 + b2) == 0
        mirror = (b1 + b2) == 2

        new_x = np.where(swap, y, np.where(mirror, side - 1 - y, x))
        new_y = np.where(swap, x, np.where(mirror, side - 1 - x, y))
        x = new_x + side * b2
        y = new_y + side * (b1 ^ b2)

    return np.stack([x, y], axis=-1)


@dataclass(frozen=True, eq=False)
class CurvePath:
    """Complete, read-only traversal of the curve for one order."""

    order: int
    coords: np.ndarray

    def __post_init__(self) -> None:
        coords = np.array(self.coords, dtype=np.int64).reshape(-1, 2)
        expected = point_count(self.order)
        if len(coords) != expected:
            raise ValueError(
                f"path for order {self.order} needs {expected} points, got {len(coords)}"
            )
        coords.setflags(write=False)
        object.__setattr__(self, "coords", coords)

    @property
    def side(self) -> int:
        return grid_side(self.order)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index: int) -> GridCoord:
        x, y = self.coords[index]
        return GridCoord(int(x), int(y))

    def __iter__(self) -> Iterator[GridCoord]:
        for x, y in self.coords.tolist():
            yield GridCoord(x, y)

    @property
    def points(self) -> Tuple[GridCoord, ...]:
        return tuple(self)

    def as_array(self) -> np.ndarray:
        """Return the coordinates as a read-only ``(4**order, 2)`` array."""
        return self.coords


def generate_path(order: int) -> CurvePath:
    """Generate every coordinate of the curve in increasing index order."""
    order = _check_order(order)
    coords = compute_coordinates(order, np.arange(point_count(order), dtype=np.int64))
    return CurvePath(order=order, coords=coords)


__all__ = [
    "GridCoord",
    "BASE_PATTERN",
    "MAX_VECTOR_ORDER",
    "CurvePath",
    "grid_side",
    "point_count",
    "compute_coordinate",
    "compute_coordinates",
    "generate_path",
]
