"""
Float-type handling shared by the layout algorithms.

Layouts run entirely in one numpy scalar type (``float32`` or
``float64``) so single- and double-precision callers get reproducible
results in their own precision.
"""

from typing import Tuple

import numpy as np

from . import config
from .errors import TreemapError


def resolve_dtype(dtype=None):
    """
    Return the numpy scalar type for *dtype*.

    Accepts ``None`` (the configured default), ``float``, a numpy dtype
    or scalar type, or a name such as ``"float32"``.
    """
    if dtype is None:
        dtype = config.DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise TreemapError(f"Unsupported float type: {dtype!r}") from exc
    if resolved.kind != "f":
        raise TreemapError(
            f"Layout float type must be floating point, got {resolved.name}"
        )
    return resolved.type


def div(numer, denom):
    """``numer / denom``, or zero of the same type when *denom* is zero."""
    if denom == 0:
        return numer - numer
    return numer / denom


def ratio(side_squared, size_total, size_item) -> Tuple:
    """
    Aspect ratio of an item in a row, as an unreduced fraction.

    The row spans a side of length ``sqrt(side_squared)`` and holds
    ``size_total`` area; the item has area ``size_item``.  Returns
    ``(numer, denom)`` with ``numer >= denom`` so two ratios compare
    by cross-multiplication without dividing.
    """
    a = size_total * size_total
    b = side_squared * size_item
    if a >= b:
        return a, b
    return b, a
