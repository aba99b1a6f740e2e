"""
main.py
Pack church lots into a village outline, generate a church on each and
print / preview the result.

Usage example (run from shell):
    python main.py
"""

from __future__ import annotations
import logging

import numpy as np

from ChurchGen.church import SimpleChurchGenerator
from ChurchGen.terrain import GridHeightSampler
from CityPlan.lots import pack_lots
from CityPlan.preview import plot_buildings

logger = logging.getLogger(__name__)

SEED = 42


def rolling_hills(size: int = 128, base: float = 64.0, amplitude: float = 4.0) -> np.ndarray:
    """Smooth test terrain, indexed [z, x]."""
    z, x = np.mgrid[0:size, 0:size]
    return base + amplitude * np.sin(x / 17.0) * np.cos(z / 23.0)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    outline = [(0, 0), (120, 0), (120, 90), (0, 90), (0, 0)]
    hm = GridHeightSampler(rolling_hills())
    gen = SimpleChurchGenerator(SEED)
    lots = pack_lots(outline, gen, min_length=24, max_length=45, gap=2)

    churches = []
    for lot in lots:
        church = gen.apply(lot, hm)
        churches.append(church)
        print(church.describe())

    logger.info("%d churches on %d lots", len(churches), len(lots))
    plot_buildings(churches, lots)


if __name__ == "__main__":
    main()
