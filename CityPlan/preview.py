"""
preview.py
Top-down footprint preview of generated buildings (debugging aid only).
"""

from __future__ import annotations
from typing import Iterable, Optional

PART_COLORS = {
    "nave": "salmon",
    "tower": "gray",
    "aisle_left": "khaki",
    "aisle_right": "khaki",
}


def plot_buildings(buildings: Iterable, lots: Optional[Iterable] = None, ax=None, show: bool = True):
    """
    Draw lot outlines and every part footprint; doors in blue, windows in
    skyblue.  Returns the Matplotlib axes.
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(12, 12))

    for lot in lots or []:
        xs, ys = lot.shape.to_polygon().exterior.xy
        ax.plot(xs, ys, color="black", linewidth=1)

    for bldg in buildings:
        for part in bldg.parts:
            xs, ys = part.footprint.to_polygon().exterior.xy
            ax.fill(xs, ys, alpha=0.5, edgecolor="blue",
                    color=PART_COLORS.get(part.name, "lightgreen"))
            for door in part.doors:
                xs, ys = door.rect.to_polygon().exterior.xy
                ax.fill(xs, ys, color="blue")
            for window in part.windows:
                xs, ys = window.rect.to_polygon().exterior.xy
                ax.fill(xs, ys, color="skyblue")

    ax.set_aspect("equal", adjustable="box")
    ax.invert_yaxis()           # north (−z) up
    if show:
        plt.show()
    return ax
