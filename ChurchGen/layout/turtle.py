"""
turtle.py
A position + heading cursor that turns "forward / sideways" requests into
absolute grid rectangles.

Code that places parts of a building talks about *forward* and *right*
only; the turtle maps that onto x / z for whatever way the building faces.
Turtles are values: ``rotate`` and ``set_position`` hand back a new turtle
and never touch the old one, so each part of a building can be given its
own cursor.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple

from ChurchGen.errors import LayoutError
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Cell, Rect


@dataclass(frozen=True)
class Turtle:
    position: Cell
    heading: Orientation

    # ───────── moving the cursor ────────────────────────────────────
    def rotate(self, degrees: int) -> "Turtle":
        """Turn clockwise by *degrees* (negative turns left)."""
        return replace(self, heading=self.heading.rotated(degrees))

    def set_position(self, position: Tuple[int, int]) -> "Turtle":
        x, y = position
        return replace(self, position=(int(x), int(y)))

    # ───────── measuring ────────────────────────────────────────────
    def length(self, rc: Rect) -> int:
        """Extent of *rc* along the heading."""
        return rc.width if self.heading.is_east_west() else rc.height

    def width(self, rc: Rect) -> int:
        """Extent of *rc* across the heading."""
        return rc.height if self.heading.is_east_west() else rc.width

    # ───────── relative → absolute ──────────────────────────────────
    def transform(self, right: int, forward: int) -> Cell:
        """Block *right* to the side and *forward* ahead of the cursor."""
        fx, fy = self.heading.direction
        rx, ry = self.heading.rotated(90).direction
        x, y = self.position
        return x + right * rx + forward * fx, y + right * ry + forward * fy

    def rect(self, right: int, forward: int, width: int, length: int) -> Rect:
        """
        Rectangle spanning the lateral offsets ``right .. right+width-1``
        and the forward offsets ``forward .. forward+length-1``.

        Parameters
        ----------
        right
            Sideways offset of the first column; negative is to the left.
        forward
            Offset of the first row along the heading.
        width, length
            Size across and along the heading, in blocks.
        """
        if width <= 0 or length <= 0:
            raise LayoutError(f"Degenerate footprint {width}×{length} (width×length).")
        first = self.transform(right, forward)
        last = self.transform(right + width - 1, forward + length - 1)
        return Rect.from_corners(first, last)

    def rect_centered(self, forward: int, width: int, length: int) -> Rect:
        """Like :meth:`rect`, centred on the cursor's line (odd widths centre exactly)."""
        return self.rect(-(width // 2), forward, width, length)

    def adjust_rect(self, rc: Rect, front: int, back: int, left: int, right: int) -> Rect:
        """
        Move each side of *rc* outward by the given number of blocks;
        the sides are named relative to the heading.
        """
        h = self.heading
        rc = rc.grow(h, front)
        rc = rc.grow(h.opposite(), back)
        rc = rc.grow(h.rotated(-90), left)
        return rc.grow(h.rotated(90), right)
