"""Shared test fixtures."""

from __future__ import annotations

import pytest


UNIT_SQUARE = [[[0, 0], [0, 1], [1, 1], [1, 0]]]

# 10x10 square with a 2x2 hole over its center
SQUARE_WITH_HOLE = [
    [[0, 0], [0, 10], [10, 10], [10, 0]],
    [[4, 4], [4, 6], [6, 6], [6, 4]],
]

# Arms are 2 wide; the vertex average (4, 4) falls outside the shape
L_SHAPE = [[[0, 0], [0, 10], [2, 10], [2, 2], [10, 2], [10, 0]]]

COLLINEAR = [[[0, 0], [1, 0], [2, 0]]]

RECTANGLE_2X1 = [[[0, 0], [0, 1], [2, 1], [2, 0]]]

# Concave "C" with a notch, outer ring closed explicitly (first == last)
NOTCHED = [[[0, 0], [0, 8], [8, 8], [8, 5], [3, 5], [3, 3], [8, 3], [8, 0], [0, 0]]]


@pytest.fixture
def unit_square() -> list:
    return UNIT_SQUARE


@pytest.fixture
def square_with_hole() -> list:
    return SQUARE_WITH_HOLE


@pytest.fixture
def l_shape() -> list:
    return L_SHAPE
