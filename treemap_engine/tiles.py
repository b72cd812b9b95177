"""
Ready-made item type for callers without their own.

Any object works as a layout item; ``Tile`` just bundles a weight, a
label and the assigned rectangle, and ``tile_weight`` / ``assign_tile``
are the two capabilities the algorithms need.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from shapely.geometry import Polygon

from .rect import Rect


@dataclass
class Tile:
    """A weighted item and the rectangle it was given."""

    weight: float
    label: Optional[str] = None
    rect: Optional[Rect] = None

    @property
    def area(self) -> float:
        """Assigned area, 0.0 before layout."""
        if self.rect is None:
            return 0.0
        return float(self.rect.area)

    @property
    def aspect_ratio(self) -> float:
        if self.rect is None:
            return float("inf")
        return self.rect.aspect_ratio

    def to_polygon(self) -> Polygon:
        """Convert the assigned rectangle to a Shapely Polygon."""
        if self.rect is None:
            raise ValueError(f"Tile {self.label!r} has not been laid out")
        return self.rect.to_polygon()

    def to_dict(self) -> dict:
        """Serialize the tile to a dictionary."""
        return {
            "label": self.label,
            "weight": float(self.weight),
            "rect": self.rect.to_dict() if self.rect is not None else None,
            "area": round(self.area, 6),
        }

    @staticmethod
    def from_weights(weights: Iterable[float],
                     labels: Optional[Iterable[str]] = None) -> List["Tile"]:
        """Create one tile per weight, optionally labelled."""
        weights = list(weights)
        labels = list(labels) if labels is not None else [None] * len(weights)
        if len(labels) != len(weights):
            raise ValueError(
                f"Got {len(labels)} labels for {len(weights)} weights"
            )
        return [Tile(weight=w, label=l) for w, l in zip(weights, labels)]

    def __repr__(self) -> str:
        return f"Tile(label={self.label!r}, weight={self.weight}, rect={self.rect!r})"


def tile_weight(tile: Tile) -> float:
    return tile.weight


def assign_tile(tile: Tile, rect: Rect) -> None:
    tile.rect = rect
