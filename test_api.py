"""
Tests for the name-based entry points, the Tile item type and the
numeric helpers.
"""
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(__file__))

from treemap_engine import (
    Algorithm,
    InvalidRectError,
    Rect,
    Tile,
    TreemapError,
    UnknownAlgorithmError,
    assign_tile,
    binary,
    config,
    layout,
    squarify,
    subdivide,
    tile_weight,
)
from treemap_engine.numeric import div, ratio, resolve_dtype

WEIGHTS = [6, 6, 4, 3, 2, 2, 1]
CONTAINER = Rect(0, 0, 6, 4)


# ============================================================================
# layout() dispatch
# ============================================================================

class TestLayout:
    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_every_algorithm_by_name(self, algorithm):
        tiles = Tile.from_weights(WEIGHTS)
        layout(CONTAINER, tiles, tile_weight, assign_tile, algorithm.value)
        assert sum(t.area for t in tiles) == pytest.approx(24)

    def test_matches_direct_call(self):
        direct = Tile.from_weights(WEIGHTS)
        binary(CONTAINER, direct, tile_weight, assign_tile)
        named = Tile.from_weights(WEIGHTS)
        layout(CONTAINER, named, tile_weight, assign_tile, "binary")
        assert [t.rect for t in direct] == [t.rect for t in named]

    def test_options_forwarded(self):
        tiles = Tile.from_weights(WEIGHTS)
        layout(CONTAINER, tiles, tile_weight, assign_tile, Algorithm.ORDERED, pivot="by_size")
        assert tiles[4].rect.h == pytest.approx(0.8333334, abs=1e-5)

    def test_default_algorithm_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_ALGORITHM", "slice_and_dice")
        tiles = Tile.from_weights([1, 1])
        layout(CONTAINER, tiles, tile_weight, assign_tile)
        assert tiles[1].rect == Rect(3, 0, 3, 4)

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError) as exc:
            layout(CONTAINER, [], tile_weight, assign_tile, "voronoi")
        assert "squarified" in str(exc.value)

    def test_invalid_container(self):
        with pytest.raises(InvalidRectError):
            layout(Rect(0, 0, -1, 4), Tile.from_weights([1]), tile_weight, assign_tile)


# ============================================================================
# subdivide()
# ============================================================================

class TestSubdivide:
    def test_returns_rects_in_input_order(self):
        rects = subdivide(CONTAINER, [1, 3], algorithm="binary")
        assert rects[0].area == pytest.approx(6)
        assert rects[1].area == pytest.approx(18)

    def test_sort_for_squarified(self):
        weights = [1, 2, 2, 6, 3, 4, 6]
        rects = subdivide(CONTAINER, weights, algorithm="squarified", sort=True, check_sorted=True)
        for r, w in zip(rects, weights):
            assert r.area == pytest.approx(w)
        # The two largest weights land where the reference puts them.
        assert (rects[3].x, rects[3].y) == (0, 0)
        assert (rects[6].x, rects[6].y) == (0, 2)

    def test_unsorted_without_sort_flag(self):
        with pytest.raises(TreemapError):
            subdivide(CONTAINER, [1, 2], algorithm="squarified", check_sorted=True)

    def test_empty(self):
        assert subdivide(CONTAINER, []) == []


# ============================================================================
# Tile
# ============================================================================

class TestTile:
    def test_before_layout(self):
        t = Tile(weight=2, label="a")
        assert t.area == 0.0
        assert t.aspect_ratio == float("inf")
        with pytest.raises(ValueError):
            t.to_polygon()

    def test_after_layout(self):
        tiles = Tile.from_weights(WEIGHTS, labels="abcdefg")
        squarify(CONTAINER, tiles, tile_weight, assign_tile)
        assert tiles[0].rect == Rect(0, 0, 3, 2)
        assert tiles[0].aspect_ratio == pytest.approx(1.5)
        assert tiles[0].to_polygon().area == pytest.approx(6)
        d = tiles[0].to_dict()
        assert d["label"] == "a"
        assert d["rect"] == {"x": 0.0, "y": 0.0, "w": 3.0, "h": 2.0}
        assert d["area"] == 6.0

    def test_label_count_mismatch(self):
        with pytest.raises(ValueError):
            Tile.from_weights([1, 2], labels=["a"])


# ============================================================================
# Numeric helpers
# ============================================================================

class TestNumeric:
    @pytest.mark.parametrize("spec, expected", [
        ("float32", np.float32),
        (np.float32, np.float32),
        (np.dtype("float64"), np.float64),
        (float, np.float64),
    ])
    def test_resolve_dtype(self, spec, expected):
        assert resolve_dtype(spec) is expected

    def test_resolve_default(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_DTYPE", "float32")
        assert resolve_dtype() is np.float32

    @pytest.mark.parametrize("spec", ["int32", int, "not-a-type"])
    def test_resolve_rejects_non_float(self, spec):
        with pytest.raises(TreemapError):
            resolve_dtype(spec)

    def test_div_by_zero_is_zero(self):
        assert div(3.0, 0.0) == 0.0
        assert type(div(np.float32(3), np.float32(0))) is np.float32
        assert div(3.0, 2.0) == 1.5

    def test_ratio_orders_fraction(self):
        assert ratio(16, 6, 6) == (96, 36)
        assert ratio(16, 12, 6) == (144, 96)
