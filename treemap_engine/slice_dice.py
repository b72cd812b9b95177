"""
Slice-and-dice layout.

The simplest treemap: items are laid side by side along one axis in
input order, each taking a share of the container proportional to its
weight.  Skewed weights produce arbitrarily thin rectangles; that is the
expected behaviour of this layout.
"""

from enum import Enum
from typing import Callable, Optional, Sequence

from .base import AssignFn, WeightFn, collapse, prepare
from .numeric import div
from .rect import Rect


class Axis(str, Enum):
    """Direction in which consecutive items are placed."""

    X = "x"  # left to right, full height
    Y = "y"  # top to bottom, full width


def stack_run(rect: Rect, sizes: Sequence, start: int, stop: int,
              emit: Callable[[int, Rect], None], axis: Axis) -> None:
    """
    Lay ``sizes[start:stop]`` out as one run across *rect*.

    *sizes* are areas already scaled to *rect*.  The last item of the
    run takes whatever is left so the run closes exactly on the far
    edge of *rect*.
    """
    rest = rect
    for i in range(start, stop - 1):
        if axis is Axis.X:
            piece, rest = rest.split_x(div(sizes[i], rect.h))
        else:
            piece, rest = rest.split_y(div(sizes[i], rect.w))
        emit(i, piece)
    emit(stop - 1, rest)


def _layout(container, items, weight_of, assign, axis, dtype):
    if not len(items):
        return
    data = prepare(container, items, weight_of, dtype)
    if data.degenerate:
        collapse(data.rect, items, assign)
        return

    def emit(i, r):
        assign(items[i], r)

    stack_run(data.rect, data.scaled(), 0, len(items), emit, axis)


def slice_layout(container: Rect, items: Sequence, weight_of: WeightFn,
                 assign: AssignFn, *, dtype=None) -> None:
    """Stack items top to bottom, each spanning the full container width."""
    _layout(container, items, weight_of, assign, Axis.Y, dtype)


def dice_layout(container: Rect, items: Sequence, weight_of: WeightFn,
                assign: AssignFn, *, dtype=None) -> None:
    """Place items left to right, each spanning the full container height."""
    _layout(container, items, weight_of, assign, Axis.X, dtype)


def slice_and_dice(container: Rect, items: Sequence, weight_of: WeightFn,
                   assign: AssignFn, *, axis: Optional[Axis] = None,
                   depth: int = 0, dtype=None) -> None:
    """
    Slice-and-dice with a fixed or depth-alternating axis.

    Parameters
    ----------
    axis : Axis or str, optional
        Fixed placement direction.  Takes precedence over *depth*.
    depth : int
        Tree depth of this call.  Without *axis*, even depths place
        items along x and odd depths along y, which gives the classic
        alternating slice-and-dice when called once per tree level.
    """
    if axis is None:
        axis = Axis.X if depth % 2 == 0 else Axis.Y
    _layout(container, items, weight_of, assign, Axis(axis), dtype)
