"""
Binary (balanced bisection) layout.

Splits the item range in two where the cumulative weight crosses half of
the range total, cuts the rectangle across its long side in the same
proportion, and repeats on both halves.  Input order is kept; sorting
items by descending weight beforehand gives squarer rectangles.
"""

from bisect import bisect_right
from itertools import accumulate
from typing import Sequence

from .base import AssignFn, WeightFn, collapse, prepare
from .rect import Rect


def binary(container: Rect, items: Sequence, weight_of: WeightFn,
           assign: AssignFn, *, dtype=None) -> None:
    """
    Lay *items* out in *container* by recursive weight bisection.

    The left group of a range is every leading item whose cumulative
    weight does not exceed half the range total, but at least one item
    and never all of them.  ``assign`` is called once per item in index
    order.
    """
    if not len(items):
        return
    data = prepare(container, items, weight_of, dtype)
    if data.degenerate:
        collapse(data.rect, items, assign)
        return

    two = data.num(2)
    sums = list(accumulate(data.scaled()))

    # (rect, start, stop, offset, value): offset is the cumulative size
    # before ``start`` and value the size of items[start:stop]; sizes are
    # weights scaled to the container area.
    stack = [(data.rect, 0, len(items), data.num(0), sums[-1])]
    while stack:
        rect, start, stop, offset, value = stack.pop()
        if value == 0:
            collapse(rect, [items[i] for i in range(start, stop)], assign)
            continue
        if stop - start == 1:
            assign(items[start], rect)
            continue

        target = value / two + offset
        mid = bisect_right(sums, target, start + 1, stop - 1)
        left = sums[mid - 1] - offset
        right = value - left

        if rect.is_wide:
            at = (rect.x * right + (rect.x + rect.w) * left) / value
            lrect, rrect = rect.cut_x(at)
        else:
            at = (rect.y * right + (rect.y + rect.h) * left) / value
            lrect, rrect = rect.cut_y(at)

        # Right pushed first so the left half is assigned first.
        stack.append((rrect, mid, stop, sums[mid - 1], right))
        stack.append((lrect, start, mid, offset, left))
