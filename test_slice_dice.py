"""
Tests for the slice-and-dice layout.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))

from treemap_engine import Axis, Rect, dice_layout, slice_and_dice, slice_layout
from treemap_engine.scoring import worst_aspect_ratio


def run(fn, weights, container=Rect(0, 0, 6, 4), **kwargs):
    out = [None] * len(weights)

    def assign(i, r):
        out[i] = r

    fn(container, list(range(len(weights))), weights.__getitem__, assign, **kwargs)
    return out


def assert_rects(actual, expected, tol=1e-6):
    assert len(actual) == len(expected)
    for got, (x, y, w, h) in zip(actual, expected):
        assert (got.x, got.y, got.w, got.h) == pytest.approx((x, y, w, h), abs=tol)


# ============================================================================
# Fixed axis
# ============================================================================

class TestFixedAxis:
    def test_dice_left_to_right(self):
        rects = run(dice_layout, [1, 2, 3])
        assert_rects(rects, [(0, 0, 1, 4), (1, 0, 2, 4), (3, 0, 3, 4)])

    def test_slice_top_to_bottom(self):
        rects = run(slice_layout, [1, 2, 3])
        assert_rects(rects, [(0, 0, 6, 2 / 3), (0, 2 / 3, 6, 4 / 3), (0, 2, 6, 2)])

    def test_offset_container(self):
        rects = run(dice_layout, [1, 1], container=Rect(10, 20, 4, 2))
        assert_rects(rects, [(10, 20, 2, 2), (12, 20, 2, 2)])

    def test_last_item_closes_on_edge(self):
        rects = run(dice_layout, [1, 1, 1], container=Rect(0, 0, 1, 1))
        last = rects[-1]
        assert last.x + last.w == pytest.approx(1, abs=1e-15)

    def test_input_order_kept(self):
        weights = [3, 1, 4, 1, 5, 9, 2, 6]
        rects = run(dice_layout, weights)
        xs = [r.x for r in rects]
        assert xs == sorted(xs)
        assert len(set(xs)) == len(xs)

    def test_skewed_weights_give_thin_rectangles(self):
        rects = run(dice_layout, [1000, 1])
        assert rects[1].w == pytest.approx(6 / 1001)
        assert worst_aspect_ratio(rects) > 600


# ============================================================================
# Axis selection
# ============================================================================

class TestAxisSelection:
    def test_even_depth_dices(self):
        assert run(slice_and_dice, [1, 3], depth=0) == run(dice_layout, [1, 3])
        assert run(slice_and_dice, [1, 3], depth=2) == run(dice_layout, [1, 3])

    def test_odd_depth_slices(self):
        assert run(slice_and_dice, [1, 3], depth=1) == run(slice_layout, [1, 3])

    def test_explicit_axis_wins(self):
        assert run(slice_and_dice, [1, 3], axis=Axis.Y, depth=0) == run(slice_layout, [1, 3])
        assert run(slice_and_dice, [1, 3], axis="x", depth=1) == run(dice_layout, [1, 3])

    def test_bad_axis(self):
        with pytest.raises(ValueError):
            run(slice_and_dice, [1, 3], axis="z")
