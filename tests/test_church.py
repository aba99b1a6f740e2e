"""
Tests for the simple church generator.
"""

from __future__ import annotations

import numpy as np
import pytest

from ChurchGen.church import SimpleChurchGenerator
from ChurchGen.detail.openings import AIR
from ChurchGen.errors import LayoutError
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect
from ChurchGen.roof.roofs import HipRoof, PentRoof, SaddleRoof
from ChurchGen.terrain import FlatHeightSampler, GridHeightSampler
from CityPlan.lots import Lot

from conftest import seed_facing

# expected footprints on the 30×20 lot, per entrance direction
FOOTPRINTS = {
    Orientation.EAST: {
        "entrance": Rect(1, 9, 1, 11),
        "nave": Rect(1, 7, 21, 13),
        "tower": Rect(21, 7, 27, 13),
        "aisle_left": Rect(4, 3, 18, 7),
        "aisle_right": Rect(4, 13, 18, 17),
    },
    Orientation.WEST: {
        "entrance": Rect(28, 9, 28, 11),
        "nave": Rect(8, 7, 28, 13),
        "tower": Rect(2, 7, 8, 13),
        "aisle_left": Rect(11, 13, 25, 17),
        "aisle_right": Rect(11, 3, 25, 7),
    },
}


class TestPlan:
    def test_village_lot_proportions(self, village_lot, flat) -> None:
        plan = SimpleChurchGenerator(42).plan(village_lot, flat)

        assert plan.heading in (Orientation.EAST, Orientation.WEST)
        assert plan.length == 28
        assert plan.width == 18
        assert plan.tower_size == 7
        assert plan.nave_width == 7
        assert plan.nave_length == 21
        assert plan.side_length == 15
        assert plan.base_height == 65

    @pytest.mark.parametrize("heading", [Orientation.EAST, Orientation.WEST])
    def test_village_lot_footprints(self, village_lot, flat, heading) -> None:
        plan = SimpleChurchGenerator(seed_facing(village_lot, heading)).plan(village_lot, flat)
        expected = FOOTPRINTS[heading]

        assert plan.heading is heading
        assert plan.entrance == expected["entrance"]
        assert plan.nave == expected["nave"]
        assert plan.tower == expected["tower"]
        assert plan.aisle_left == expected["aisle_left"]
        assert plan.aisle_right == expected["aisle_right"]

    def test_tall_lot_faces_north_or_south(self, flat) -> None:
        lot = Lot(Rect(100, -40, 119, -11))
        plan = SimpleChurchGenerator(7).plan(lot, flat)
        assert plan.heading in (Orientation.NORTH, Orientation.SOUTH)
        assert plan.length == 28
        assert plan.width == 18

    def test_square_lot_faces_north_or_south(self, flat) -> None:
        plan = SimpleChurchGenerator(3).plan(Lot(Rect(0, 0, 39, 39)), flat)
        assert plan.heading in (Orientation.NORTH, Orientation.SOUTH)

    @pytest.mark.parametrize("w", range(14, 60, 5))
    @pytest.mark.parametrize("h", range(14, 60, 7))
    def test_odd_tower_and_nave(self, flat, w, h) -> None:
        lot = Lot(Rect.from_min_and_size(0, 0, w, h))
        try:
            plan = SimpleChurchGenerator(1).plan(lot, flat)
        except LayoutError:
            return
        assert plan.tower_size % 2 == 1
        assert plan.nave_width % 2 == 1
        assert plan.nave_width <= 2 * plan.tower_size

    @pytest.mark.parametrize("size", [(7, 7), (30, 12), (12, 30), (16, 16)])
    def test_small_lots_rejected(self, flat, size) -> None:
        lot = Lot(Rect.from_min_and_size(0, 0, *size))
        with pytest.raises(LayoutError):
            SimpleChurchGenerator(42).plan(lot, flat)

    def test_tiny_lot_rejected(self, flat) -> None:
        with pytest.raises(LayoutError):
            SimpleChurchGenerator(0).apply(Lot(Rect(0, 0, 1, 1)), flat)

    @pytest.mark.parametrize("shape", [Rect(0, 0, 99, 15), Rect(0, 0, 15, 99)])
    def test_tower_wider_than_long_narrow_lot_rejected(self, shape) -> None:
        # 98×14 inside the margin: the tower would be 21 wide
        with pytest.raises(LayoutError, match="too narrow"):
            SimpleChurchGenerator(1).apply(Lot(shape), FlatHeightSampler(0.0))

    def test_fits(self) -> None:
        gen = SimpleChurchGenerator(0)
        assert gen.fits(Rect(0, 0, 29, 19))
        assert gen.fits(Rect(0, 0, 19, 29))
        assert not gen.fits(Rect(0, 0, 99, 15))
        assert not gen.fits(Rect(0, 0, 15, 15))
        assert not gen.fits(Rect(0, 0, 1, 1))

    def test_proportions_ignore_orientation(self) -> None:
        gen = SimpleChurchGenerator(0)
        assert gen.proportions(Rect(0, 0, 29, 19)) == (28, 18, 7, 7, 21, 15)
        assert gen.proportions(Rect(5, 5, 24, 34)) == (28, 18, 7, 7, 21, 15)

    def test_seed_changes_entrance_side(self, village_lot, flat) -> None:
        headings = [SimpleChurchGenerator(s).plan(village_lot, flat).heading for s in range(400)]
        west = headings.count(Orientation.WEST)
        assert set(headings) == {Orientation.EAST, Orientation.WEST}
        assert 140 < west < 260


class TestApply:
    def test_deterministic(self, village_lot) -> None:
        hm = GridHeightSampler(np.arange(600, dtype=float).reshape(20, 30) / 37.0)
        a = SimpleChurchGenerator(42).apply(village_lot, hm)
        b = SimpleChurchGenerator(42).apply(village_lot, hm)
        assert a == b

    def test_part_order_and_shared_base(self, village_lot, flat) -> None:
        church = SimpleChurchGenerator(42).apply(village_lot, flat)
        assert [p.name for p in church.parts] == ["nave", "tower", "aisle_left", "aisle_right"]
        assert {p.base_height for p in church.parts} == {65}
        assert church.orientation is church.parts[0].roof.orientation

    def test_base_height_from_entrance_terrain(self, village_lot) -> None:
        heights = np.full((20, 30), 60.0)
        heights[9:12, 1] = 70.4        # entrance facing east
        heights[9:12, 28] = 70.4       # entrance facing west
        heights[0, 0] = 99.0           # outside the entrance, ignored
        church = SimpleChurchGenerator(42).apply(village_lot, GridHeightSampler(heights))
        assert {p.base_height for p in church.parts} == {71}

    def test_missing_terrain_propagates(self, village_lot) -> None:
        hm = GridHeightSampler(np.zeros((5, 5)))
        with pytest.raises(IndexError):
            SimpleChurchGenerator(42).apply(village_lot, hm)

    def test_footprints_inside_shrunk_lot(self, village_lot, flat) -> None:
        inner = village_lot.shape.expand(-1, -1)
        for seed in range(20):
            church = SimpleChurchGenerator(seed).apply(village_lot, flat)
            for part in church.parts:
                assert inner.contains(part.footprint), part.name

    @pytest.mark.parametrize("long_side", [12, 20, 31, 46, 64, 90, 130])
    @pytest.mark.parametrize("ratio", [1.0, 1.3, 2.0, 3.5, 5.0, 6.5, 9.0])
    @pytest.mark.parametrize("east_west", [True, False])
    def test_footprints_inside_any_lot(self, flat, long_side, ratio, east_west) -> None:
        short_side = max(1, int(long_side / ratio))
        w, h = (long_side, short_side) if east_west else (short_side, long_side)
        lot = Lot(Rect.from_min_and_size(-7, 3, w, h))
        gen = SimpleChurchGenerator(long_side * 31 + h)
        try:
            church = gen.apply(lot, flat)
        except LayoutError:
            assert not gen.fits(lot.shape)
            return
        assert gen.fits(lot.shape)
        inner = lot.shape.expand(-1, -1)
        outside = [(p.name, p.footprint) for p in church.parts if not inner.contains(p.footprint)]
        assert outside == []

    @pytest.mark.parametrize("seed", range(8))
    def test_shared_walls_overlap_one_block(self, seed) -> None:
        lot = Lot(Rect(-50, 10, -10, 38))
        church = SimpleChurchGenerator(seed).apply(lot, FlatHeightSampler(12.5))
        plan = SimpleChurchGenerator(seed).plan(lot, FlatHeightSampler(12.5))
        nave = church.part("nave").footprint.to_polygon()

        tower = church.part("tower").footprint.to_polygon()
        # one row across the narrower of the two
        assert nave.intersection(tower).area == min(plan.nave_width, plan.tower_size)
        assert plan.nave.intersection(plan.tower).area in (plan.nave_width, plan.tower_size)
        assert plan.turtle.length(plan.nave.intersection(plan.tower)) == 1

        for name in ("aisle_left", "aisle_right"):
            aisle = church.part(name).footprint.to_polygon()
            assert nave.intersection(aisle).area == plan.side_length
            assert tower.intersection(aisle).area == 0

        silhouette = church.silhouette()
        assert silhouette.geom_type == "Polygon"

    def test_openings_within_bounds(self, flat) -> None:
        for seed in range(10):
            church = SimpleChurchGenerator(seed).apply(Lot(Rect(0, 0, 44, 30)), flat)
            for part in church.parts:
                for opening in part.openings:
                    assert opening.base_height >= part.base_height
                    assert opening.base_height < opening.top_height


class TestParts:
    def test_nave(self, village_lot, flat) -> None:
        gen = SimpleChurchGenerator(seed_facing(village_lot, Orientation.EAST))
        nave = gen.apply(village_lot, flat).part("nave")

        assert nave.wall_height == 9
        assert nave.roof == SaddleRoof(Rect(0, 6, 22, 14), 74, Orientation.EAST, 1)
        assert nave.roof.ridge_axis == "x"
        assert nave.roof.top_height == 79
        assert len(nave.doors) == 1
        door = nave.doors[0]
        assert door.rect == Rect(1, 9, 1, 11)
        assert (door.base_height, door.top_height) == (65, 69)
        assert nave.windows == []

    def test_tower_east(self, village_lot, flat) -> None:
        gen = SimpleChurchGenerator(seed_facing(village_lot, Orientation.EAST))
        tower = gen.apply(village_lot, flat).part("tower")

        assert tower.wall_height == 22
        assert tower.roof == HipRoof(Rect(20, 6, 28, 14), 87, 2)
        assert tower.roof.top_height == 97
        assert [d.rect for d in tower.doors] == [Rect(21, 8, 21, 12)]
        assert (tower.doors[0].base_height, tower.doors[0].top_height) == (65, 70)

        windows = {w.orientation: w for w in tower.windows}
        assert windows[Orientation.NORTH].rect == Rect(24, 7, 24, 7)
        assert windows[Orientation.EAST].rect == Rect(27, 10, 27, 10)
        assert windows[Orientation.SOUTH].rect == Rect(24, 13, 24, 13)
        for w in tower.windows:
            assert (w.base_height, w.top_height) == (84, 86)
            assert w.block == AIR
            assert w.is_open

    def test_tower_west(self, village_lot, flat) -> None:
        gen = SimpleChurchGenerator(seed_facing(village_lot, Orientation.WEST))
        tower = gen.apply(village_lot, flat).part("tower")

        assert [d.rect for d in tower.doors] == [Rect(8, 8, 8, 12)]
        windows = {w.orientation: w.rect for w in tower.windows}
        assert windows == {
            Orientation.SOUTH: Rect(5, 13, 5, 13),
            Orientation.WEST: Rect(2, 10, 2, 10),
            Orientation.NORTH: Rect(5, 7, 5, 7),
        }

    def test_aisles_east(self, village_lot, flat) -> None:
        gen = SimpleChurchGenerator(seed_facing(village_lot, Orientation.EAST))
        church = gen.apply(village_lot, flat)
        left = church.part("aisle_left")
        right = church.part("aisle_right")

        assert left.wall_height == right.wall_height == 4
        assert left.roof == PentRoof(Rect(3, 2, 19, 6), 69, Orientation.SOUTH, 0.5)
        assert right.roof == PentRoof(Rect(3, 14, 19, 18), 69, Orientation.NORTH, 0.5)

        assert [d.rect for d in left.doors] == [
            Rect(7, 7, 9, 7), Rect(10, 7, 12, 7), Rect(13, 7, 15, 7),
        ]
        assert [d.rect for d in right.doors] == [
            Rect(13, 13, 15, 13), Rect(10, 13, 12, 13), Rect(7, 13, 9, 13),
        ]
        assert {d.orientation for d in left.doors} == {Orientation.NORTH}
        assert {d.orientation for d in right.doors} == {Orientation.SOUTH}
        for d in left.doors + right.doors:
            assert (d.base_height, d.top_height) == (65, 68)

    def test_aisles_west(self, village_lot, flat) -> None:
        gen = SimpleChurchGenerator(seed_facing(village_lot, Orientation.WEST))
        church = gen.apply(village_lot, flat)
        left = church.part("aisle_left")
        right = church.part("aisle_right")

        assert left.roof.rect == Rect(10, 14, 26, 18)
        assert right.roof.rect == Rect(10, 2, 26, 6)
        assert sorted(d.rect.min_x for d in left.doors) == [14, 17, 20]
        assert sorted(d.rect.min_x for d in right.doors) == [14, 17, 20]
        assert {d.rect.min_y for d in left.doors} == {13}
        assert {d.rect.min_y for d in right.doors} == {7}

    def test_aisles_mirror_each_other(self, flat) -> None:
        lot = Lot(Rect(0, 0, 41, 27))
        church = SimpleChurchGenerator(5).apply(lot, flat)
        nave = church.part("nave").footprint
        left = church.part("aisle_left")
        right = church.part("aisle_right")
        if church.orientation.is_east_west():
            axis = (nave.min_y + nave.max_y) / 2
            mirror = [(d.rect.min_x, 2 * axis - d.rect.min_y) for d in left.doors]
            assert sorted(mirror) == sorted((d.rect.min_x, d.rect.min_y) for d in right.doors)
        else:
            axis = (nave.min_x + nave.max_x) / 2
            mirror = [(2 * axis - d.rect.min_x, d.rect.min_y) for d in left.doors]
            assert sorted(mirror) == sorted((d.rect.min_x, d.rect.min_y) for d in right.doors)
