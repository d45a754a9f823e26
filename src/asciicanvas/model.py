from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SampledCell:
    r: int
    g: int
    b: int
    a: int
    luminance: float  # 0-1

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class SampledGrid:
    """Block-averaged view of a surface, row-major in scan order.

    `rgba` is a (rows, cols, 4) uint8 array, `luminance` a (rows, cols) float
    array, and `unit` the side length in pixels of each averaged block.
    """

    rgba: np.ndarray
    luminance: np.ndarray
    unit: int

    def __post_init__(self):
        if self.rgba.ndim != 3 or self.rgba.shape[2] != 4:
            raise ValueError(f"Expected (rows, cols, 4) colour array, got shape {self.rgba.shape}")
        if self.luminance.shape != self.rgba.shape[:2]:
            raise ValueError(f"Luminance shape {self.luminance.shape} does not match grid {self.rgba.shape[:2]}")
        self.rgba.setflags(write=False)
        self.luminance.setflags(write=False)

    @property
    def rows(self) -> int:
        return self.rgba.shape[0]

    @property
    def cols(self) -> int:
        return self.rgba.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def cell(self, row: int, col: int) -> SampledCell:
        r, g, b, a = (int(v) for v in self.rgba[row, col])
        return SampledCell(r=r, g=g, b=b, a=a, luminance=float(self.luminance[row, col]))

    def row(self, row: int) -> list[SampledCell]:
        return [self.cell(row, col) for col in range(self.cols)]

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[list[SampledCell]]:
        for row in range(self.rows):
            yield self.row(row)
