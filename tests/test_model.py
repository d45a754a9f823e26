import dataclasses

import numpy as np
import pytest

from asciicanvas.model import SampledCell, SampledGrid


def make_grid():
    rgba = np.array(
        [
            [[255, 0, 0, 255], [0, 255, 0, 128]],
            [[0, 0, 255, 0], [255, 255, 255, 255]],
            [[10, 20, 30, 40], [0, 0, 0, 255]],
        ],
        dtype=np.uint8,
    )
    lum = np.array([[0.2126, 0.7152], [0.0722, 1.0], [0.07, 0.0]])
    return SampledGrid(rgba=rgba, luminance=lum, unit=4)


def test_shape():
    grid = make_grid()
    assert grid.rows == 3
    assert grid.cols == 2
    assert grid.shape == (3, 2)
    assert len(grid) == 3


def test_cell_values_are_python_ints():
    cell = make_grid().cell(0, 1)
    assert cell == SampledCell(r=0, g=255, b=0, a=128, luminance=0.7152)
    assert type(cell.r) is int
    assert type(cell.luminance) is float


def test_iteration_is_row_major():
    rows = list(make_grid())
    assert len(rows) == 3
    assert [len(row) for row in rows] == [2, 2, 2]
    assert rows[1][0].rgba == (0, 0, 255, 0)
    assert rows[2][1].luminance == 0.0


def test_cells_are_immutable():
    cell = make_grid().cell(0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cell.r = 1


def test_rejects_mismatched_luminance():
    rgba = np.zeros((2, 2, 4), dtype=np.uint8)
    with pytest.raises(ValueError):
        SampledGrid(rgba=rgba, luminance=np.zeros((2, 3)), unit=1)


def test_rejects_non_rgba_array():
    with pytest.raises(ValueError):
        SampledGrid(rgba=np.zeros((2, 2, 3), dtype=np.uint8), luminance=np.zeros((2, 2)), unit=1)


def test_arrays_are_read_only():
    grid = make_grid()
    with pytest.raises(ValueError):
        grid.rgba[0, 0, 0] = 1
    with pytest.raises(ValueError):
        grid.luminance[0, 0] = 0.5
