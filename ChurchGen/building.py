"""
building.py
Composite building model: a building is an orientation plus an ordered
list of rectangular parts, each with its own walls, roof and openings.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from shapely.ops import unary_union

from ChurchGen.detail.openings import Door, Opening, Window
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect
from ChurchGen.roof.roofs import Roof


@dataclass
class RectBuildingPart:
    """
    One box-shaped section of a building.

    ``footprint`` is the wall outline; ``base_height`` is the floor level and
    the walls reach ``base_height + wall_height`` where the roof starts.
    """

    name: str
    footprint: Rect
    roof: Roof
    base_height: int
    wall_height: int
    doors: List[Door] = field(default_factory=list)
    windows: List[Window] = field(default_factory=list)

    def add_door(self, door: Door) -> None:
        self.doors.append(door)

    def add_window(self, window: Window) -> None:
        self.windows.append(window)

    @property
    def top_height(self) -> int:
        return self.base_height + self.wall_height

    @property
    def openings(self) -> List[Opening]:
        return [*self.doors, *self.windows]


@dataclass
class Building:
    orientation: Orientation
    parts: List[RectBuildingPart] = field(default_factory=list)

    def add_part(self, part: RectBuildingPart) -> None:
        self.parts.append(part)

    def part(self, name: str) -> Optional[RectBuildingPart]:
        for p in self.parts:
            if p.name == name:
                return p
        return None

    def silhouette(self):
        """Ground outline of the whole building as one shapely geometry."""
        return unary_union([p.footprint.to_polygon() for p in self.parts])

    def describe(self) -> str:
        lines = [f"Building facing {self.orientation.name}"]
        for p in self.parts:
            fp = p.footprint
            lines.append(
                f"  {p.name:<12} ({fp.min_x}, {fp.min_y})-({fp.max_x}, {fp.max_y}) "
                f"{fp.width}×{fp.height}, y {p.base_height}..{p.top_height}, "
                f"{p.roof.kind} roof, {len(p.doors)} door(s), {len(p.windows)} window(s)"
            )
        return "\n".join(lines)
