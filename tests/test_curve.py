"""Tests for the Hilbert index-to-coordinate mapping."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hilbert_sketch.curve import (
    BASE_PATTERN,
    CurvePath,
    GridCoord,
    compute_coordinate,
    compute_coordinates,
    generate_path,
    grid_side,
    point_count,
)
from hilbert_sketch.errors import HilbertError, IndexOutOfRangeError, InvalidOrderError

ORDER_2 = [
    (0, 0), (1, 0), (1, 1), (0, 1),
    (0, 2), (0, 3), (1, 3), (1, 2),
    (2, 2), (2, 3), (3, 3), (3, 2),
    (3, 1), (2, 1), (2, 0), (3, 0),
]


@st.composite
def order_and_index(draw, max_order: int = 12):
    order = draw(st.integers(min_value=1, max_value=max_order))
    index = draw(st.integers(min_value=0, max_value=4 ** order - 1))
    return order, index


def _curve(order: int):
    return [compute_coordinate(order, i) for i in range(4 ** order)]


def test_base_case() -> None:
    assert _curve(1) == [(0, 0), (0, 1), (1, 1), (1, 0)]
    assert list(BASE_PATTERN) == _curve(1)


def test_order_two_sequence() -> None:
    """First block is the base pattern transposed; the rest are offset copies."""
    assert _curve(2) == ORDER_2


def test_returns_grid_coord() -> None:
    coord = compute_coordinate(3, 17)
    assert isinstance(coord, GridCoord)
    assert coord == (coord.x, coord.y)


@pytest.mark.parametrize("order", range(1, 7))
def test_bijective_onto_grid(order: int) -> None:
    side = 2 ** order
    cells = set(_curve(order))
    assert len(cells) == 4 ** order
    assert cells == {(x, y) for x in range(side) for y in range(side)}


@pytest.mark.parametrize("order", range(1, 7))
def test_consecutive_points_are_adjacent(order: int) -> None:
    points = _curve(order)
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        assert abs(x0 - x1) + abs(y0 - y1) == 1


@given(order_and_index())
@settings(max_examples=200, deadline=None)
def test_coordinates_within_bounds(case) -> None:
    order, index = case
    x, y = compute_coordinate(order, index)
    assert 0 <= x < 2 ** order
    assert 0 <= y < 2 ** order


@given(order_and_index(max_order=16))
@settings(max_examples=200, deadline=None)
def test_locality_for_large_orders(case) -> None:
    order, index = case
    if index == 4 ** order - 1:
        index -= 1
    x0, y0 = compute_coordinate(order, index)
    x1, y1 = compute_coordinate(order, index + 1)
    assert abs(x0 - x1) + abs(y0 - y1) == 1


@given(order_and_index())
@settings(max_examples=50, deadline=None)
def test_deterministic(case) -> None:
    order, index = case
    assert compute_coordinate(order, index) == compute_coordinate(order, index)


@pytest.mark.parametrize("order", range(1, 6))
def test_quadrants_reproduce_previous_order(order: int) -> None:
    """Each quarter of the next order is a transformed copy of this order."""
    side = 2 ** order
    block = 4 ** order
    previous = _curve(order)

    def place(quadrant: int, x: int, y: int):
        if quadrant == 0:
            return (y, x)
        if quadrant == 1:
            return (x, y + side)
        if quadrant == 2:
            return (x + side, y + side)
        return (side - 1 - y + side, side - 1 - x)

    for quadrant in range(4):
        for k, (x, y) in enumerate(previous):
            assert compute_coordinate(order + 1, quadrant * block + k) == place(quadrant, x, y)


def test_curve_starts_and_ends_on_bottom_corners() -> None:
    for order in range(1, 8):
        side = 2 ** order
        assert compute_coordinate(order, 0) == (0, 0)
        assert compute_coordinate(order, 4 ** order - 1) == (side - 1, 0)


@pytest.mark.parametrize("order", [0, -1, -5])
def test_invalid_order(order: int) -> None:
    with pytest.raises(InvalidOrderError):
        compute_coordinate(order, 0)
    with pytest.raises(InvalidOrderError):
        generate_path(order)


@pytest.mark.parametrize("order,index", [(1, 4), (1, -1), (2, 16), (3, 10_000)])
def test_index_out_of_range(order: int, index: int) -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        compute_coordinate(order, index)
    assert excinfo.value.index == index
    assert excinfo.value.order == order


def test_errors_are_value_errors() -> None:
    assert issubclass(InvalidOrderError, HilbertError)
    assert issubclass(IndexOutOfRangeError, ValueError)


def test_type_checks() -> None:
    with pytest.raises(TypeError):
        compute_coordinate(2.0, 1)
    with pytest.raises(TypeError):
        compute_coordinate(2, "1")
    with pytest.raises(TypeError):
        compute_coordinate(True, 0)


def test_accepts_numpy_integers() -> None:
    assert compute_coordinate(np.int64(2), np.int32(5)) == (0, 3)


def test_grid_side_and_point_count() -> None:
    assert grid_side(3) == 8
    assert point_count(3) == 64
    with pytest.raises(InvalidOrderError):
        point_count(0)


@pytest.mark.parametrize("order", range(1, 8))
def test_vectorised_matches_scalar(order: int) -> None:
    coords = compute_coordinates(order, np.arange(4 ** order))
    assert coords.shape == (4 ** order, 2)
    assert [tuple(row) for row in coords.tolist()] == [tuple(c) for c in _curve(order)]


@given(order_and_index(max_order=20))
@settings(max_examples=100, deadline=None)
def test_vectorised_matches_scalar_sampled(case) -> None:
    order, index = case
    (x, y), = compute_coordinates(order, [index]).tolist()
    assert (x, y) == compute_coordinate(order, index)


def test_vectorised_validation() -> None:
    with pytest.raises(IndexOutOfRangeError) as excinfo:
        compute_coordinates(2, [0, 3, 16, -1])
    assert excinfo.value.index == 16
    with pytest.raises(TypeError):
        compute_coordinates(2, [0.5, 1.0])
    with pytest.raises(ValueError):
        compute_coordinates(40, [0])
    assert compute_coordinates(3, []).shape == (0, 2)


def test_generate_path() -> None:
    path = generate_path(2)
    assert isinstance(path, CurvePath)
    assert path.order == 2
    assert path.side == 4
    assert len(path) == 16
    assert list(path) == ORDER_2
    assert path.points == tuple(ORDER_2)
    assert path[5] == (0, 3)


def test_path_is_read_only() -> None:
    path = generate_path(3)
    with pytest.raises(ValueError):
        path.as_array()[0, 0] = 7
    with pytest.raises(AttributeError):
        path.order = 4


def test_path_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        CurvePath(order=2, coords=np.zeros((4, 2), dtype=np.int64))
