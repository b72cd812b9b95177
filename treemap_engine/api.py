"""
Name-based access to the layout algorithms.
"""

from enum import Enum
from typing import Callable, Dict, List, Sequence

from . import config
from .base import AssignFn, WeightFn
from .binary import binary
from .errors import UnknownAlgorithmError
from .ordered import ordered_pivot
from .rect import Rect
from .slice_dice import slice_and_dice
from .squarified import squarify


class Algorithm(str, Enum):
    SLICE_AND_DICE = "slice_and_dice"
    BINARY = "binary"
    SQUARIFIED = "squarified"
    ORDERED = "ordered"


_ALGORITHMS: Dict[Algorithm, Callable[..., None]] = {
    Algorithm.SLICE_AND_DICE: slice_and_dice,
    Algorithm.BINARY: binary,
    Algorithm.SQUARIFIED: squarify,
    Algorithm.ORDERED: ordered_pivot,
}


def coerce_algorithm(algorithm) -> Algorithm:
    """Resolve an algorithm or its name; ``None`` means the configured default."""
    if algorithm is None:
        algorithm = config.DEFAULT_ALGORITHM
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise UnknownAlgorithmError(algorithm, [a.value for a in Algorithm]) from None


def layout(container: Rect, items: Sequence, weight_of: WeightFn,
           assign: AssignFn, algorithm=None, **options) -> None:
    """
    Run the layout algorithm named by *algorithm*.

    Extra keyword arguments go to the algorithm: ``axis`` / ``depth``
    for slice-and-dice, ``check_sorted`` for squarified, ``pivot`` for
    ordered, and ``dtype`` for all of them.
    """
    _ALGORITHMS[coerce_algorithm(algorithm)](container, items, weight_of,
                                             assign, **options)


def subdivide(container: Rect, weights: Sequence[float], algorithm=None,
              sort: bool = False, **options) -> List[Rect]:
    """
    Partition *container* for a plain list of weights.

    Parameters
    ----------
    container : Rect
        Rectangle to fill.
    weights : sequence of float
        One weight per output rectangle.
    algorithm : Algorithm or str, optional
        Defaults to ``config.DEFAULT_ALGORITHM``.
    sort : bool
        Lay weights out largest first (what squarified expects).  The
        result is still returned in input order.

    Returns
    -------
    list[Rect]
        ``result[i]`` is the rectangle for ``weights[i]``.
    """
    rects: List[Rect] = [None] * len(weights)
    order = list(range(len(weights)))
    if sort:
        order.sort(key=lambda i: weights[i], reverse=True)

    def assign(i, r):
        rects[i] = r

    layout(container, order, weights.__getitem__, assign, algorithm, **options)
    return rects
