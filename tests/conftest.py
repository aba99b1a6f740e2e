from __future__ import annotations

import pytest

from ChurchGen.church import SimpleChurchGenerator
from ChurchGen.layout.orientation import Orientation
from ChurchGen.layout.rect import Rect
from ChurchGen.terrain import FlatHeightSampler
from CityPlan.lots import Lot


@pytest.fixture
def village_lot() -> Lot:
    """30×20 lot, long side east-west."""
    return Lot(Rect(0, 0, 29, 19))


@pytest.fixture
def flat() -> FlatHeightSampler:
    return FlatHeightSampler(64.0)


def seed_facing(lot: Lot, heading: Orientation, limit: int = 1000) -> int:
    """First seed whose church on *lot* faces *heading*."""
    for seed in range(limit):
        plan = SimpleChurchGenerator(seed).plan(lot, FlatHeightSampler(0.0))
        if plan.heading is heading:
            return seed
    raise AssertionError(f"no seed below {limit} faces {heading.name}")
