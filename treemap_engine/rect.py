"""
Axis-aligned rectangle used by every layout algorithm.

A ``Rect`` is an immutable ``{x, y, w, h}`` value.  The split helpers
always return two rectangles that cover the original with no gap or
overlap.
"""

import math
from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np
from shapely.geometry import Polygon, box

from .errors import InvalidRectError


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle: origin ``(x, y)`` plus width and height."""

    x: float
    y: float
    w: float
    h: float

    @staticmethod
    def from_size(w: float, h: float) -> "Rect":
        """Create a rectangle at the origin."""
        return Rect(0.0, 0.0, w, h)

    # --- queries ----------------------------------------------------------

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def is_wide(self) -> bool:
        return self.w > self.h

    @property
    def short_side(self) -> float:
        return self.h if self.is_wide else self.w

    @property
    def long_side(self) -> float:
        return self.w if self.is_wide else self.h

    @property
    def aspect_ratio(self) -> float:
        """``max(w/h, h/w)``; 1.0 is a square, a zero extent gives ``inf``."""
        if self.w == 0 or self.h == 0:
            return math.inf
        return float(max(self.w / self.h, self.h / self.w))

    # --- splitting --------------------------------------------------------

    def split_x(self, offset: float) -> Tuple["Rect", "Rect"]:
        """
        Split with a vertical line so the left piece is *offset* wide.

        *offset* is clamped to ``[0, w]`` so neither piece gets a
        negative width from rounding.
        """
        offset = min(max(offset, self.w - self.w), self.w)
        left = replace(self, w=offset)
        right = replace(self, x=self.x + offset, w=self.w - offset)
        return left, right

    def split_y(self, offset: float) -> Tuple["Rect", "Rect"]:
        """Split with a horizontal line so the first piece is *offset* tall."""
        offset = min(max(offset, self.h - self.h), self.h)
        first = replace(self, h=offset)
        second = replace(self, y=self.y + offset, h=self.h - offset)
        return first, second

    def cut_x(self, at: float) -> Tuple["Rect", "Rect"]:
        """Split with a vertical line at the absolute coordinate *at*."""
        end = self.x + self.w
        at = min(max(at, self.x), end)
        return replace(self, w=at - self.x), replace(self, x=at, w=end - at)

    def cut_y(self, at: float) -> Tuple["Rect", "Rect"]:
        """Split with a horizontal line at the absolute coordinate *at*."""
        end = self.y + self.h
        at = min(max(at, self.y), end)
        return replace(self, h=at - self.y), replace(self, y=at, h=end - at)

    # --- transforms -------------------------------------------------------

    def flip_h(self, container_w: float) -> "Rect":
        """Mirror horizontally inside a container of width *container_w*."""
        return replace(self, x=container_w - self.x - self.w)

    def flip_v(self, container_h: float) -> "Rect":
        """Mirror vertically inside a container of height *container_h*."""
        return replace(self, y=container_h - self.y - self.h)

    def astype(self, num) -> "Rect":
        """Cast every field to the scalar type *num* (e.g. ``np.float32``)."""
        return Rect(num(self.x), num(self.y), num(self.w), num(self.h))

    # --- conversion -------------------------------------------------------

    def to_polygon(self) -> Polygon:
        """Convert to a Shapely Polygon."""
        return box(float(self.x), float(self.y),
                   float(self.x + self.w), float(self.y + self.h))

    def to_dict(self) -> dict:
        return {"x": float(self.x), "y": float(self.y),
                "w": float(self.w), "h": float(self.h)}

    def __repr__(self) -> str:
        return (
            f"Rect(x={float(self.x)!r}, y={float(self.y)!r}, "
            f"w={float(self.w)!r}, h={float(self.h)!r})"
        )


def as_container(rect: Rect, num) -> Rect:
    """
    Validate a caller-supplied container and cast it to *num*.

    Raises
    ------
    InvalidRectError
        If a field is not finite, an extent is negative, or the area
        does not fit in *num*.
    """
    try:
        fields = [float(v) for v in (rect.x, rect.y, rect.w, rect.h)]
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidRectError(f"Not a rectangle: {rect!r}") from exc
    if not all(math.isfinite(v) for v in fields):
        raise InvalidRectError(f"Container has a non-finite field: {rect!r}")
    if fields[2] < 0 or fields[3] < 0:
        raise InvalidRectError(f"Container has a negative extent: {rect!r}")
    with np.errstate(over="ignore"):
        cast = Rect(*fields).astype(num)
        area = cast.area
    if not all(math.isfinite(v) for v in (cast.x, cast.y, cast.w, cast.h, area)):
        raise InvalidRectError(
            f"Container does not fit in {num.__name__}: {rect!r}"
        )
    return cast
