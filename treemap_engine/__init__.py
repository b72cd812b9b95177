"""
Treemap layout algorithms.

Partitions a rectangle into sub-rectangles whose areas are proportional
to item weights.  Four algorithms share one call shape::

    algorithm(container, items, weight_of, assign, **options)

Items are never inspected: ``weight_of(item)`` reads a weight and
``assign(item, rect)`` receives the result.
"""

import logging

from .api import Algorithm, layout, subdivide
from .binary import binary
from .errors import (
    InvalidRectError,
    InvalidWeightError,
    TreemapError,
    UnknownAlgorithmError,
    UnsortedWeightsError,
)
from .ordered import (
    PivotStrategy,
    ordered_pivot,
    ordered_pivot_by_middle,
    ordered_pivot_by_size,
)
from .rect import Rect
from .slice_dice import Axis, dice_layout, slice_and_dice, slice_layout
from .squarified import squarify
from .tiles import Tile, assign_tile, tile_weight

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Algorithm",
    "Axis",
    "InvalidRectError",
    "InvalidWeightError",
    "PivotStrategy",
    "Rect",
    "Tile",
    "TreemapError",
    "UnknownAlgorithmError",
    "UnsortedWeightsError",
    "assign_tile",
    "binary",
    "dice_layout",
    "layout",
    "ordered_pivot",
    "ordered_pivot_by_middle",
    "ordered_pivot_by_size",
    "slice_and_dice",
    "slice_layout",
    "squarify",
    "subdivide",
    "tile_weight",
]
