"""
openings.py
Door and window openings cut into the walls of a building part.

An opening is a rectangle on the ground plane (the wall blocks it replaces),
the side of the wall it faces and the vertical range ``[base_height,
top_height]`` it spans.  Windows also carry the block id that fills them;
``AIR`` leaves the hole open (belfry style).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from ChurchGen.errors import LayoutError
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect

AIR = "minecraft:air"
GLASS_PANE = "minecraft:glass_pane"


def _check_range(kind: str, base_height: int, top_height: int) -> None:
    if base_height >= top_height:
        raise LayoutError(
            f"{kind} bottom must be below top, got [{base_height}, {top_height}]."
        )


@dataclass(frozen=True)
class Door:
    orientation: Orientation
    rect: Rect
    base_height: int
    top_height: int

    def __post_init__(self) -> None:
        _check_range("Door", self.base_height, self.top_height)

    @property
    def height(self) -> int:
        return self.top_height - self.base_height


@dataclass(frozen=True)
class Window:
    orientation: Orientation
    rect: Rect
    base_height: int
    top_height: int
    block: str = GLASS_PANE

    def __post_init__(self) -> None:
        _check_range("Window", self.base_height, self.top_height)

    @property
    def height(self) -> int:
        return self.top_height - self.base_height

    @property
    def is_open(self) -> bool:
        return self.block == AIR


Opening = Union[Door, Window]
