"""
Ordered (pivot) treemap layout.

Shneiderman and Wattenberg's ordered treemap keeps items in input order
so neighbouring items stay neighbours when the data changes.  For each
range a pivot is chosen and the rectangle is divided into four areas
along the long axis:

    L1 | pivot | L3
       | L2    |

L1 holds the items before the pivot.  The pivot and L2 (a prefix of
the items after it) share one strip, with L2's length picked to keep
its rectangles square.  L3 takes the rest.  Each area is laid out the
same way until it holds a single item.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Sequence

from . import config
from .base import AssignFn, WeightFn, collapse, prepare
from .errors import UnknownAlgorithmError
from .numeric import div, ratio
from .rect import Rect

log = logging.getLogger(__name__)


class PivotStrategy(str, Enum):
    """How the pivot of a range is chosen."""

    BY_MIDDLE = "by_middle"      # cumulative-weight midpoint closest to half
    BY_SIZE = "by_size"          # largest weight
    BY_POSITION = "by_position"  # middle index


# ---------------------------------------------------------------------------
# Pivot selection.  Each returns an index in [start, stop); ties go to the
# earliest item.
# ---------------------------------------------------------------------------

def _pivot_by_middle(sizes: Sequence, start: int, stop: int) -> int:
    total = sum(sizes[start:stop])
    prefix = sizes[start] - sizes[start]
    best, best_dist = start, None
    for i in range(start, stop):
        # Twice the distance from the item's centre to half the total.
        dist = abs(prefix + prefix + sizes[i] - total)
        if best_dist is None or dist < best_dist:
            best, best_dist = i, dist
        prefix = prefix + sizes[i]
    return best


def _pivot_by_size(sizes: Sequence, start: int, stop: int) -> int:
    best = start
    for i in range(start + 1, stop):
        if sizes[i] > sizes[best]:
            best = i
    return best


def _pivot_by_position(sizes: Sequence, start: int, stop: int) -> int:
    return start + (stop - start) // 2


_PIVOTS: Dict[PivotStrategy, Callable[[Sequence, int, int], int]] = {
    PivotStrategy.BY_MIDDLE: _pivot_by_middle,
    PivotStrategy.BY_SIZE: _pivot_by_size,
    PivotStrategy.BY_POSITION: _pivot_by_position,
}


def coerce_pivot(pivot) -> PivotStrategy:
    """Resolve a strategy or its name; ``None`` means the configured default."""
    if pivot is None:
        pivot = config.DEFAULT_PIVOT
    try:
        return PivotStrategy(pivot)
    except ValueError:
        raise UnknownAlgorithmError(pivot, [s.value for s in PivotStrategy]) from None


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def _split_range(rect: Rect, sizes: Sequence, start: int, stop: int,
                 pivot_of, num) -> list:
    """
    Divide ``items[start:stop]`` around its pivot.

    Returns ``(rect, start, stop)`` tasks in item order; empty groups are
    left out.
    """
    p = pivot_of(sizes, start, stop)
    is_wide = rect.w >= rect.h
    side = rect.h if is_wide else rect.w
    side_squared = side * side
    tasks = []

    if p > start:
        thickness = div(sum(sizes[start:p], num(0)), side)
        if is_wide:
            r1, rect = rect.split_x(thickness)
        else:
            r1, rect = rect.split_y(thickness)
        tasks.append((r1, start, p))

    rest = p + 1
    if rest == stop:
        tasks.append((rect, p, stop))
        return tasks

    # L2 ends where the ratio of its last item is best.
    total = sizes[p]
    best, strip_total = rest, sizes[p]
    numer_b, denom_b = num(1), num(0)
    for i in range(rest, stop):
        total = total + sizes[i]
        numer, denom = ratio(side_squared, total, sizes[i])
        if numer * denom_b < numer_b * denom:
            numer_b, denom_b = numer, denom
            best, strip_total = i, total

    thickness = div(strip_total, side)
    if is_wide:
        strip, r3 = rect.split_x(thickness)
        rp, r2 = strip.split_y(div(sizes[p], thickness))
    else:
        strip, r3 = rect.split_y(thickness)
        rp, r2 = strip.split_x(div(sizes[p], thickness))
    tasks.append((rp, p, rest))
    tasks.append((r2, rest, best + 1))
    if best + 1 < stop:
        tasks.append((r3, best + 1, stop))
    return tasks


def ordered_pivot(container: Rect, items: Sequence, weight_of: WeightFn,
                  assign: AssignFn, *, pivot=None, dtype=None) -> None:
    """
    Lay *items* out in *container* with the ordered (pivot) algorithm.

    Parameters
    ----------
    pivot : PivotStrategy or str, optional
        ``"by_middle"``, ``"by_size"`` or ``"by_position"``.  Defaults to
        ``config.DEFAULT_PIVOT``.

    ``assign`` is called once per item in index order.
    """
    strategy = coerce_pivot(pivot)
    if not len(items):
        return
    data = prepare(container, items, weight_of, dtype)
    if data.degenerate:
        collapse(data.rect, items, assign)
        return

    sizes = data.scaled()
    pivot_of = _PIVOTS[strategy]
    stack = [(data.rect, 0, len(items))]
    while stack:
        rect, start, stop = stack.pop()
        if stop - start == 1:
            assign(items[start], rect)
            continue
        stack.extend(reversed(_split_range(rect, sizes, start, stop, pivot_of, data.num)))
    log.debug("ordered layout of %d items (%s)", len(items), strategy.value)


def ordered_pivot_by_middle(container: Rect, items: Sequence, weight_of: WeightFn,
                            assign: AssignFn, *, dtype=None) -> None:
    """:func:`ordered_pivot` with :attr:`PivotStrategy.BY_MIDDLE`."""
    ordered_pivot(container, items, weight_of, assign,
                  pivot=PivotStrategy.BY_MIDDLE, dtype=dtype)


def ordered_pivot_by_size(container: Rect, items: Sequence, weight_of: WeightFn,
                          assign: AssignFn, *, dtype=None) -> None:
    """:func:`ordered_pivot` with :attr:`PivotStrategy.BY_SIZE`."""
    ordered_pivot(container, items, weight_of, assign,
                  pivot=PivotStrategy.BY_SIZE, dtype=dtype)
