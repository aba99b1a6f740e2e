"""
terrain.py
Terrain height sampling.

The generator only needs one question answered: how high is the ground
under a footprint?  Anything with an ``elevation_at(x, z)`` method can be
used as a sampler; two simple ones are provided.
"""

from __future__ import annotations
from typing import Protocol, Tuple

import numpy as np

from ChurchGen.layout.rect import Rect


class HeightSampler(Protocol):
    def elevation_at(self, x: int, z: int) -> float:
        ...


class FlatHeightSampler:
    def __init__(self, height: float = 64.0) -> None:
        self.height = float(height)

    def elevation_at(self, x: int, z: int) -> float:
        return self.height


class GridHeightSampler:
    """
    Height map stored as a 2-D numpy array indexed ``[z, x]``.

    Parameters
    ----------
    heights : array-like
        Surface elevation per block.
    origin : (x, z), default (0, 0)
        World coordinate of ``heights[0, 0]``.
    """

    def __init__(self, heights, origin: Tuple[int, int] = (0, 0)) -> None:
        self.heights = np.asarray(heights, dtype=float)
        if self.heights.ndim != 2:
            raise ValueError("Height map must be 2-D.")
        self.origin = (int(origin[0]), int(origin[1]))

    def elevation_at(self, x: int, z: int) -> float:
        col = x - self.origin[0]
        row = z - self.origin[1]
        rows, cols = self.heights.shape
        # numpy would wrap negative indices silently
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"No terrain data at ({x}, {z}).")
        return float(self.heights[row, col])


def max_height_under(rc: Rect, sampler: HeightSampler) -> int:
    """Highest terrain block (floored) under every cell of *rc*."""
    max_height = None
    for x, z in rc.cells():
        height = int(np.floor(sampler.elevation_at(x, z)))
        if max_height is None or height > max_height:
            max_height = height
    if max_height is None:
        raise ValueError(f"Cannot sample an empty rectangle {rc}.")
    return max_height
