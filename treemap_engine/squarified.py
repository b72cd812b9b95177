"""
Squarified treemap layout.

Bruls, Huizing and van Wijk (2000): fill the remaining rectangle one row
at a time along its shorter side, growing each row for as long as that
keeps its rectangles close to square.

Items must be sorted by descending weight for the aspect-ratio test to
be meaningful.  The order is not checked unless ``check_sorted`` is set.
"""

import logging
from typing import Optional, Sequence

from . import config
from .base import AssignFn, WeightFn, collapse, prepare
from .errors import UnsortedWeightsError
from .numeric import div, ratio
from .rect import Rect
from .slice_dice import Axis, stack_run

log = logging.getLogger(__name__)


def _check_descending(weights: Sequence) -> None:
    for i in range(1, len(weights)):
        if weights[i] > weights[i - 1]:
            raise UnsortedWeightsError(i, weights[i - 1], weights[i])


def _row_end(sizes: Sequence, start: int, stop: int, side_squared, num):
    """
    Index one past the last item of the row starting at *start*.

    Returns ``(end, row_total)``.  Each candidate is scored by the
    aspect ratio of the item just added; the row keeps growing while
    that ratio improves or stays equal.
    """
    total = num(0)
    numer0, denom0 = num(1), num(0)
    for i in range(start, stop):
        size = sizes[i]
        numer1, denom1 = ratio(side_squared, total + size, size)
        if numer1 * denom0 > numer0 * denom1:
            return i, total
        total = total + size
        numer0, denom0 = numer1, denom1
    return stop, total


def squarify(container: Rect, items: Sequence, weight_of: WeightFn,
             assign: AssignFn, *, check_sorted: Optional[bool] = None,
             dtype=None) -> None:
    """
    Lay *items* out in *container* with the squarified algorithm.

    Parameters
    ----------
    check_sorted : bool, optional
        Raise :class:`UnsortedWeightsError` when weights are not in
        descending order.  Defaults to ``config.CHECK_SORTED``.
    """
    if not len(items):
        return
    data = prepare(container, items, weight_of, dtype)
    if check_sorted is None:
        check_sorted = config.CHECK_SORTED
    if check_sorted:
        _check_descending(data.weights)
    if data.degenerate:
        collapse(data.rect, items, assign)
        return

    def emit(i, r):
        assign(items[i], r)

    sizes = data.scaled()
    rect = data.rect
    start, stop = 0, len(items)
    rows = 0
    while start < stop:
        side = rect.short_side
        end, row_total = _row_end(sizes, start, stop, side * side, data.num)
        if rect.is_wide:
            # Vertical strip on the left; the last row takes all that is left.
            width = div(row_total, side) if end < stop else rect.w
            row, rect = rect.split_x(width)
            stack_run(row, sizes, start, end, emit, Axis.Y)
        else:
            height = div(row_total, side) if end < stop else rect.h
            row, rect = rect.split_y(height)
            stack_run(row, sizes, start, end, emit, Axis.X)
        start = end
        rows += 1
    log.debug("squarified %d items into %d rows", stop, rows)
