"""
church.py
Lay out a simple church on a rectangular lot.

                 aisle (left)
        ┌────────────────────────┐
  ┌─────┴────────────────────────┴──────┬───────┐
  │  entrance          nave             │ tower │   → heading
  └─────┬────────────────────────┬──────┴───────┘
        └────────────────────────┘
                 aisle (right)

The long axis follows the long side of the lot and the entrance side is
picked by a coin toss seeded from the generator seed and the lot shape, so
the same seed and lot always give the same church.  Neighbouring parts
overlap by one block where they share a wall.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Tuple

from ChurchGen.building import Building, RectBuildingPart
from ChurchGen.detail.openings import AIR, Door, Window
from ChurchGen.errors import LayoutError
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect, edge_center, edge_midpoint
from ChurchGen.layout.turtle import Turtle
from ChurchGen.roof.roofs import HipRoof, PentRoof, SaddleRoof
from ChurchGen.terrain import HeightSampler, max_height_under

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChurchLayout:
    """Every quantity the planner derives before any part is built."""

    turtle: Turtle
    length: int
    width: int
    tower_size: int
    nave_width: int
    nave_length: int
    side_length: int
    entrance: Rect
    nave: Rect
    tower: Rect
    aisle_left: Rect
    aisle_right: Rect
    base_height: int

    @property
    def heading(self) -> Orientation:
        return self.turtle.heading


class SimpleChurchGenerator:
    """
    Creates building models of a simple church: nave, tower and two aisles.

    Proportions and heights are class constants; subclass to restyle.
    """

    TOWER_RATIO = 5           # tower = ⌈length / TOWER_RATIO⌉
    NAVE_RATIO = 2.0          # nave width ≤ tower size × NAVE_RATIO
    SIDE_OFFSET = 3           # aisles start/end this far inside the nave
    SIDE_WIDTH = 5
    ENTRANCE_WIDTH = 3        # odd, so it centres

    HALL_HEIGHT = 9
    ENTRANCE_HEIGHT = 4
    TOWER_HEIGHT = 22
    TOWER_DOOR_HEIGHT = 5
    TOWER_ROOF_PITCH = 2
    AISLE_WALL_HEIGHT = 4
    AISLE_ROOF_RISE = 0.5
    AISLE_DOOR_WIDTH = 3

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)

    # ───────── planning ─────────────────────────────────────────────
    def plan(self, lot, hm: HeightSampler) -> ChurchLayout:
        """
        Work out orientation, footprints and floor level for *lot*.

        Raises
        ------
        LayoutError
            If the lot is too small for a tower, a nave with a centred
            entrance and aisles with three doors each.
        """
        shape: Rect = lot.shape
        rand = random.Random(self.seed ^ shape.stable_hash())

        # make build-able area 1 block smaller, so the roof stays inside
        lot_rc = shape.expand(-1, -1)
        length, width, tower_size, nave_width, nave_length, side_length = self.proportions(shape)

        o = Orientation.EAST if lot_rc.width > lot_rc.height else Orientation.NORTH
        if rand.random() < 0.5:
            o = o.opposite()

        turtle = Turtle(edge_center(lot_rc, o.opposite()), o)

        entrance = turtle.rect_centered(0, self.ENTRANCE_WIDTH, 1)
        nave = turtle.rect_centered(0, nave_width, nave_length)
        tower = turtle.rect_centered(nave_length - 1, tower_size, tower_size)

        half = nave_width // 2
        aisle_left = turtle.rect(-half - self.SIDE_WIDTH + 1, self.SIDE_OFFSET,
                                 self.SIDE_WIDTH, side_length)
        aisle_right = turtle.rect(half, self.SIDE_OFFSET, self.SIDE_WIDTH, side_length)

        for name, rc in (("nave", nave), ("tower", tower),
                         ("aisle_left", aisle_left), ("aisle_right", aisle_right)):
            if not lot_rc.contains(rc):
                raise LayoutError(f"Lot {shape}: {name} {rc} does not fit inside {lot_rc}.")

        base_height = max_height_under(entrance, hm) + 1   # 0 == terrain

        logger.debug(
            "church on %s: heading=%s length=%d width=%d tower=%d nave=%dx%d aisle=%d base=%d",
            shape, o.name, length, width, tower_size, nave_width, nave_length,
            side_length, base_height,
        )
        return ChurchLayout(
            turtle=turtle,
            length=length,
            width=width,
            tower_size=tower_size,
            nave_width=nave_width,
            nave_length=nave_length,
            side_length=side_length,
            entrance=entrance,
            nave=nave,
            tower=tower,
            aisle_left=aisle_left,
            aisle_right=aisle_right,
            base_height=base_height,
        )

    def proportions(self, shape: Rect) -> Tuple[int, int, int, int, int, int]:
        """
        Sizes along / across the church for a lot, independent of which
        end the entrance ends up on.

        Returns
        -------
        (length, width, tower_size, nave_width, nave_length, side_length)

        Raises
        ------
        LayoutError
            If the lot cannot hold a tower, a nave with a centred entrance
            and aisles with three doors each.
        """
        lot_rc = shape.expand(-1, -1)
        if lot_rc.is_empty():
            raise LayoutError(f"Lot {shape} leaves no room after the roof margin.")

        if lot_rc.width > lot_rc.height:
            length, width = lot_rc.width, lot_rc.height
        else:
            length, width = lot_rc.height, lot_rc.width

        tower_size = -(-length // self.TOWER_RATIO)
        # odd, so the tented roof ends in a single block
        if tower_size % 2 == 0:
            tower_size += 1

        nave_length = length - tower_size
        nave_width = int(min(width - 2 * self.SIDE_WIDTH, tower_size * self.NAVE_RATIO))
        side_length = nave_length - 2 * self.SIDE_OFFSET

        # odd as well, but rounded down to stay below the tower
        if nave_width % 2 == 0:
            nave_width -= 1

        if tower_size < 3:
            raise LayoutError(f"Lot {shape} too short: tower would be {tower_size} wide.")
        if tower_size > width:
            raise LayoutError(f"Lot {shape} too narrow: tower {tower_size} wider than {width}.")
        if nave_width < self.ENTRANCE_WIDTH:
            raise LayoutError(f"Lot {shape} too narrow: nave would be {nave_width} wide.")
        if side_length // 2 - 2 < 1:
            raise LayoutError(f"Lot {shape} too short: aisles would be {side_length} long.")
        return length, width, tower_size, nave_width, nave_length, side_length

    def fits(self, shape: Rect) -> bool:
        """True if a church can be laid out on a lot of this shape."""
        try:
            self.proportions(shape)
        except LayoutError:
            return False
        return True

    def apply(self, lot, hm: HeightSampler) -> Building:
        """
        Parameters
        ----------
        lot
            Anything with a ``shape`` :class:`Rect`.
        hm
            Height sampler that defines the floor level.

        Returns
        -------
        Building
            Parts in the order nave, tower, left aisle, right aisle.
        """
        plan = self.plan(lot, hm)
        turtle = plan.turtle
        base = plan.base_height

        church = Building(turtle.heading)
        church.add_part(self.create_nave(turtle, plan.nave, plan.entrance, base))
        church.add_part(self.create_tower(turtle, plan.tower, base))
        church.add_part(self.create_aisle(turtle.rotate(-90), plan.aisle_left, base, "aisle_left"))
        church.add_part(self.create_aisle(turtle.rotate(90), plan.aisle_right, base, "aisle_right"))
        return church

    # ───────── parts ────────────────────────────────────────────────
    def create_nave(self, cur: Turtle, nave_rc: Rect, door_rc: Rect,
                    base_height: int) -> RectBuildingPart:
        roof = SaddleRoof(nave_rc.expand(1, 1), base_height + self.HALL_HEIGHT, cur.heading, 1)
        nave = RectBuildingPart("nave", nave_rc, roof, base_height, self.HALL_HEIGHT)
        nave.add_door(Door(cur.heading, door_rc, base_height, base_height + self.ENTRANCE_HEIGHT))
        return nave

    def create_tower(self, turtle: Turtle, rc: Rect, base_height: int) -> RectBuildingPart:
        height = self.TOWER_HEIGHT
        d = turtle.heading
        roof = HipRoof(rc.expand(1, 1), base_height + height, self.TOWER_ROOF_PITCH)
        tower = RectBuildingPart("tower", rc, roof, base_height, height)

        # door in the wall shared with the nave
        turtle = turtle.set_position(edge_center(rc, d.opposite()))
        door_rc = turtle.rect_centered(0, turtle.width(rc) - 2, 1)
        tower.add_door(Door(d, door_rc, base_height, base_height + self.TOWER_DOOR_HEIGHT))

        # belfry openings on the three free sides: left, front, right
        for i in range(3):
            side = d.rotated(90 * (i - 1))
            x, y = edge_midpoint(rc, side)
            tower.add_window(Window(
                side,
                Rect.from_min_and_size(x, y, 1, 1),
                base_height + height - 3,
                base_height + height - 1,
                AIR,
            ))
        return tower

    def create_aisle(self, turtle: Turtle, rc: Rect, base_height: int,
                     name: str = "aisle") -> RectBuildingPart:
        # pull the back in by one so the roof stays clear of the nave wall
        roof_rc = turtle.adjust_rect(rc, front=1, back=-1, left=1, right=1)

        wall_height = self.AISLE_WALL_HEIGHT
        door_height = wall_height - 1
        d = turtle.heading
        roof = PentRoof(roof_rc, base_height + wall_height, d.opposite(), self.AISLE_ROOF_RISE)
        aisle = RectBuildingPart(name, rc, roof, base_height, wall_height)

        turtle = turtle.set_position(edge_center(rc, d.opposite()))

        w = self.AISLE_DOOR_WIDTH
        half = turtle.width(rc) // 2 - 2
        for right in (-half + 1, -1, half - 3):
            aisle.add_door(Door(d, turtle.rect(right, 0, w, 1), base_height, base_height + door_height))
        return aisle
