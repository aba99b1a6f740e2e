"""
rect.py
Inclusive integer rectangles on the block grid and helpers for their edges.

A ``Rect`` covers every block from (min_x, min_y) to (max_x, max_y), both
ends included, so a 1×1 rectangle has ``min == max``.  ``to_polygon`` gives
the shapely box that covers those blocks (upper bounds + 1).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from shapely.geometry import LineString, box

from ChurchGen.layout.orientation import Orientation

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    # ───────── construction ─────────────────────────────────────────
    @classmethod
    def from_min_and_size(cls, x: int, y: int, width: int, height: int) -> "Rect":
        return cls(x, y, x + width - 1, y + height - 1)

    @classmethod
    def from_corners(cls, a: Cell, b: Cell) -> "Rect":
        """Smallest rectangle that contains both cells *a* and *b*."""
        (x1, y1), (x2, y2) = a, b
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @classmethod
    def from_polygon(cls, geom) -> "Rect":
        """
        Integer block rectangle covered by a shapely geometry's bounds.

        The inverse of :meth:`to_polygon` for grid-aligned boxes; for other
        shapes, the blocks wholly inside the bounding box.
        """
        minx, miny, maxx, maxy = geom.bounds
        return cls(
            int(math.ceil(minx)),
            int(math.ceil(miny)),
            int(math.floor(maxx)) - 1,
            int(math.floor(maxy)) - 1,
        )

    # ───────── size ─────────────────────────────────────────────────
    @property
    def width(self) -> int:
        """Number of blocks along x."""
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        """Number of blocks along y (world z)."""
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    # ───────── derived rectangles ───────────────────────────────────
    def expand(self, dx: int, dy: int) -> "Rect":
        """Grow every side by *dx* / *dy* blocks (negative values shrink)."""
        return Rect(self.min_x - dx, self.min_y - dy, self.max_x + dx, self.max_y + dy)

    def grow(self, side: Orientation, delta: int) -> "Rect":
        """Move only the side facing *side* outward by *delta* blocks."""
        if side is Orientation.NORTH:
            return Rect(self.min_x, self.min_y - delta, self.max_x, self.max_y)
        if side is Orientation.SOUTH:
            return Rect(self.min_x, self.min_y, self.max_x, self.max_y + delta)
        if side is Orientation.EAST:
            return Rect(self.min_x, self.min_y, self.max_x + delta, self.max_y)
        return Rect(self.min_x - delta, self.min_y, self.max_x, self.max_y)

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        rc = Rect(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )
        return None if rc.is_empty() else rc

    def contains(self, other: "Rect") -> bool:
        return (self.min_x <= other.min_x and other.max_x <= self.max_x
                and self.min_y <= other.min_y and other.max_y <= self.max_y)

    def cells(self) -> Iterator[Cell]:
        """Every block, row by row (y outer, x inner)."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield x, y

    # ───────── interop ──────────────────────────────────────────────
    def to_polygon(self):
        return box(self.min_x, self.min_y, self.max_x + 1, self.max_y + 1)

    def stable_hash(self) -> int:
        """
        Structural hash of the four coordinates.

        Unlike ``hash()`` this is part of the seeding contract: it must not
        change between runs, interpreters or platforms.
        """
        h = 1
        for v in (self.min_x, self.min_y, self.max_x, self.max_y):
            h = (31 * h + v) & 0xFFFFFFFF
        return h


# ─────────────────────────────────────────────────────────────────────────────
# Edges
# ─────────────────────────────────────────────────────────────────────────────
def edge_center(rc: Rect, side: Orientation) -> Cell:
    """Block in the middle of the side of *rc* that faces *side*."""
    if side is Orientation.NORTH:
        return rc.min_x + rc.width // 2, rc.min_y
    if side is Orientation.SOUTH:
        return rc.min_x + rc.width // 2, rc.max_y
    if side is Orientation.EAST:
        return rc.max_x, rc.min_y + rc.height // 2
    return rc.min_x, rc.min_y + rc.height // 2


def edge_segment(rc: Rect, side: Orientation) -> LineString:
    """Line through the block centres of the side facing *side*."""
    if side is Orientation.NORTH:
        pts = [(rc.min_x, rc.min_y), (rc.max_x, rc.min_y)]
    elif side is Orientation.SOUTH:
        pts = [(rc.min_x, rc.max_y), (rc.max_x, rc.max_y)]
    elif side is Orientation.EAST:
        pts = [(rc.max_x, rc.min_y), (rc.max_x, rc.max_y)]
    else:
        pts = [(rc.min_x, rc.min_y), (rc.min_x, rc.max_y)]
    return LineString(pts)


def round_half_up(v: float) -> int:
    # round() would use banker's rounding
    return int(math.floor(v + 0.5))


def edge_midpoint(rc: Rect, side: Orientation) -> Cell:
    """Centre block of an edge, interpolated at 50 % and rounded half-up."""
    seg = edge_segment(rc, side)
    if seg.length == 0:
        x, y = seg.coords[0]
    else:
        mid = seg.interpolate(0.5, normalized=True)
        x, y = mid.x, mid.y
    return round_half_up(x), round_half_up(y)
