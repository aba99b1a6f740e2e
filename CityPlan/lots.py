"""
lots.py
Church lots and a packer that carves them out of a settlement outline.

Lots are rectangles with the long side about ``aspect`` times the short
one, laid along x or z, and only shapes the church generator can build
on are handed out.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from shapely.geometry import Polygon

from ChurchGen.church import SimpleChurchGenerator
from ChurchGen.layout.rect import Rect

Coord = Tuple[float, float]


@dataclass(frozen=True)
class Lot:
    """A rectangular building plot on the block grid."""

    shape: Rect


def _candidates(x: int, y: int, min_length: int, max_length: int,
                aspect: float) -> Iterator[Rect]:
    """Lot shapes anchored at (x, y), biggest first, long side along x then z."""
    for length in range(max_length, min_length - 1, -1):
        width = int(round(length / aspect))
        yield Rect.from_min_and_size(x, y, length, width)
        yield Rect.from_min_and_size(x, y, width, length)


def pack_lots(
    outline: Sequence[Coord],
    generator: SimpleChurchGenerator,
    min_length: int = 24,
    max_length: int = 48,
    aspect: float = 1.5,
    gap: int = 0,
) -> List[Lot]:
    """
    Greedy row-by-row fill of *outline* with church lots.

    Parameters
    ----------
    outline
        Settlement boundary as a ring of (x, z) points.
    generator
        Only lots this generator ``fits`` are kept.
    min_length, max_length
        Range of the lot's long side, in blocks.
    aspect
        Long side / short side.
    gap
        Free blocks left between neighbouring lots; 0 packs them flush
        (touching lots do not count as overlapping).
    """
    poly = Polygon(outline)
    area = Rect.from_polygon(poly)
    placed: List[Rect] = []

    y = area.min_y
    while y <= area.max_y:
        x = area.min_x
        while x <= area.max_x:
            for rc in _candidates(x, y, min_length, max_length, aspect):
                if not area.contains(rc):
                    continue
                grown = rc.expand(gap, gap)
                if any(grown.intersection(p) is not None for p in placed):
                    continue
                if not generator.fits(rc) or not poly.contains(rc.to_polygon()):
                    continue
                placed.append(rc)
                x += rc.width + gap
                break
            else:
                x += 1
        y += 1
    return [Lot(rc) for rc in placed]
