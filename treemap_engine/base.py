"""
Input handling shared by the layout algorithms.

Every algorithm goes through the same steps before computing geometry:
resolve the float type, validate the container, read each weight once
and reject anything that is not a non-negative finite number.  Inputs
that leave nothing to divide (zero total weight, zero-area container)
collapse to zero-area rectangles.
"""

import logging
import math
from typing import Any, Callable, List, NamedTuple, Sequence

import numpy as np

from .errors import InvalidWeightError
from .numeric import div, resolve_dtype
from .rect import Rect, as_container

log = logging.getLogger(__name__)

WeightFn = Callable[[Any], float]
AssignFn = Callable[[Any, Rect], None]


class LayoutInput(NamedTuple):
    """Validated container and weights, all in the float type ``num``."""

    rect: Rect
    weights: List[Any]
    total: Any
    num: type

    @property
    def degenerate(self) -> bool:
        return self.total == 0 or self.rect.area == 0

    def scaled(self) -> List[Any]:
        """Weights scaled so they sum to the container area."""
        area = self.rect.area
        return [div(w, self.total) * area for w in self.weights]


def read_weights(items: Sequence, weight_of: WeightFn, num) -> List[Any]:
    """
    Read the weight of every item, cast to *num*.

    Raises
    ------
    InvalidWeightError
        For the first weight that is not a number, not finite, or negative.
    """
    weights = []
    for index, item in enumerate(items):
        raw = weight_of(item)
        if isinstance(raw, (str, bytes)):
            raise InvalidWeightError(index, raw, "not a number")
        try:
            with np.errstate(over="ignore"):
                value = num(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidWeightError(index, raw, "not a number") from exc
        if not math.isfinite(value):
            raise InvalidWeightError(index, raw, "not finite")
        if value < 0:
            raise InvalidWeightError(index, raw, "negative")
        weights.append(value)
    return weights


def sum_weights(weights: Sequence, num):
    """
    Total of *weights* in *num*.

    Raises
    ------
    InvalidWeightError
        At the first weight that pushes the running total past the
        largest finite *num*.
    """
    total = num(0)
    with np.errstate(over="ignore"):
        for index, weight in enumerate(weights):
            total = total + weight
            if not math.isfinite(total):
                raise InvalidWeightError(
                    index, weight, f"too large, total overflows {num.__name__}"
                )
    return total


def prepare(container: Rect, items: Sequence, weight_of: WeightFn,
            dtype=None) -> LayoutInput:
    """Validate a layout call's inputs.  Nothing is assigned yet."""
    num = resolve_dtype(dtype)
    rect = as_container(container, num)
    weights = read_weights(items, weight_of, num)
    total = sum_weights(weights, num)
    log.debug("layout of %d items in %r (total=%s, dtype=%s)",
              len(weights), rect, total, num.__name__)
    return LayoutInput(rect, weights, total, num)


def collapse(rect: Rect, items: Sequence, assign: AssignFn) -> None:
    """Assign every item a zero-area rectangle at the container origin."""
    empty = Rect(rect.x, rect.y, rect.w - rect.w, rect.h - rect.h)
    for item in items:
        assign(item, empty)
