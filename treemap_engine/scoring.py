"""
Quality metrics for a computed layout.

Evaluates layouts on three axes:
  1. **Shape**: aspect ratios of the rectangles (1.0 is a square).
  2. **Area accuracy**: how close each area is to its weight share.
  3. **Coverage / overlap**: how much of the container is filled, and
     how much rectangles intersect (should be none).

Geometry goes through Shapely.
"""

from typing import Dict, List, Sequence

from shapely.ops import unary_union
from shapely.strtree import STRtree

from .rect import Rect


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

def aspect_ratios(rects: Sequence[Rect]) -> List[float]:
    """Aspect ratio of every rectangle with a positive area."""
    return [r.aspect_ratio for r in rects if r.area > 0]


def mean_aspect_ratio(rects: Sequence[Rect]) -> float:
    ratios = aspect_ratios(rects)
    if not ratios:
        return 1.0
    return sum(ratios) / len(ratios)


def worst_aspect_ratio(rects: Sequence[Rect]) -> float:
    ratios = aspect_ratios(rects)
    if not ratios:
        return 1.0
    return max(ratios)


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------

def area_accuracy_score(rects: Sequence[Rect], weights: Sequence[float],
                        container: Rect) -> float:
    """
    Score ∈ [0, 1].  1.0 means every rectangle has exactly its weight's
    share of the container.

    Uses: ``1 - mean(|actual - expected| / expected)`` over items with a
    positive weight, each error capped at 100 %.
    """
    total = float(sum(weights))
    if total <= 0 or not rects:
        return 1.0
    container_area = float(container.area)
    errors = []
    for r, w in zip(rects, weights):
        expected = float(w) / total * container_area
        if expected <= 0:
            continue
        err = abs(float(r.area) - expected) / expected
        errors.append(min(err, 1.0))
    if not errors:
        return 1.0
    return max(0.0, 1.0 - (sum(errors) / len(errors)))


def coverage(container: Rect, rects: Sequence[Rect]) -> float:
    """
    Fraction ∈ [0, 1] of the container covered by the union of *rects*.
    """
    boundary = container.to_polygon()
    if boundary.area <= 0:
        return 1.0
    polys = [r.to_polygon() for r in rects if r.area > 0]
    if not polys:
        return 0.0
    covered = unary_union(polys).intersection(boundary).area
    return max(0.0, min(1.0, covered / boundary.area))


def overlap_area(rects: Sequence[Rect]) -> float:
    """Summed area of all pairwise intersections."""
    polys = [r.to_polygon() for r in rects if r.area > 0]
    if len(polys) < 2:
        return 0.0
    tree = STRtree(polys)
    total = 0.0
    for i, poly in enumerate(polys):
        for j in tree.query(poly):
            if j > i:
                total += poly.intersection(polys[j]).area
    return total


# ---------------------------------------------------------------------------
# Combined score
# ---------------------------------------------------------------------------

def score_layout(container: Rect, rects: Sequence[Rect],
                 weights: Sequence[float]) -> Dict[str, float]:
    """
    Compute all metrics for one layout.

    Returns
    -------
    dict
        ``coverage``, ``overlap``, ``area``, ``mean_aspect``,
        ``worst_aspect``.
    """
    return {
        "coverage": round(coverage(container, rects), 4),
        "overlap": round(overlap_area(rects), 4),
        "area": round(area_accuracy_score(rects, weights, container), 4),
        "mean_aspect": round(mean_aspect_ratio(rects), 4),
        "worst_aspect": round(worst_aspect_ratio(rects), 4),
    }
