"""
roofs.py
Roof shape descriptors.

A roof here is only *what* to build: the rectangle it covers, the height
it rests on and the few numbers that define its slope.  Turning that into
blocks is the renderer's job.  The slope maths is the same layer-by-layer
scheme as the gable builder: one layer per block stepped in from the eave,
``⌈span / 2⌉`` layers up to the ridge.

Three variants
  • SaddleRoof – two slopes, ridge along ``orientation``, gables at the ends
  • HipRoof    – four slopes meeting in a ridge / apex
  • PentRoof   – a single slope rising towards ``orientation``
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar, Union

from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect


def _slope_depth(span: int) -> int:
    return (span + 1) // 2        # ⌈span / 2⌉


# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SaddleRoof:
    """
    Classic gable roof.

    Parameters
    ----------
    rect
        Area covered, eaves included.
    base_height
        Y of the first slope layer (top of the walls).
    orientation
        Direction the ridge runs in (either end of the ridge works).
    gable_style
        Rise per layer; ``1`` gives the plain 45° gable.
    """

    kind: ClassVar[str] = "saddle"

    rect: Rect
    base_height: int
    orientation: Orientation
    gable_style: int = 1

    @property
    def ridge_axis(self) -> str:
        return "x" if self.orientation.is_east_west() else "z"

    @property
    def slope_span(self) -> int:
        return self.rect.height if self.ridge_axis == "x" else self.rect.width

    @property
    def slope_depth(self) -> int:
        return _slope_depth(self.slope_span)

    @property
    def top_height(self) -> int:
        return self.base_height + self.slope_depth * self.gable_style


@dataclass(frozen=True)
class HipRoof:
    """Hipped (tented on square footprints) roof."""

    kind: ClassVar[str] = "hip"

    rect: Rect
    base_height: int
    pitch: int = 1

    @property
    def ridge_axis(self) -> str:
        # ridge follows the long side, a square gives a single apex
        return "x" if self.rect.width >= self.rect.height else "z"

    @property
    def slope_span(self) -> int:
        return min(self.rect.width, self.rect.height)

    @property
    def slope_depth(self) -> int:
        return _slope_depth(self.slope_span)

    @property
    def top_height(self) -> int:
        return self.base_height + self.slope_depth * self.pitch


@dataclass(frozen=True)
class PentRoof:
    """Lean-to roof, high side towards ``orientation``."""

    kind: ClassVar[str] = "pent"

    rect: Rect
    base_height: int
    orientation: Orientation
    rise_ratio: float = 0.5

    @property
    def ridge_axis(self) -> str:
        # the high edge runs across the slope direction
        return "z" if self.orientation.is_east_west() else "x"

    @property
    def slope_span(self) -> int:
        return self.rect.width if self.orientation.is_east_west() else self.rect.height

    @property
    def top_height(self) -> int:
        return self.base_height + int(math.floor(self.slope_span * self.rise_ratio))


Roof = Union[SaddleRoof, HipRoof, PentRoof]
