"""
Softmax Classifier and Geometry Tests.

Tests for:
- Stable softmax and arg-max classification
- Pairwise boundary segments
- Liang-Barsky clipping and region grids
"""

import os
import sys

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from discriminants import (
    Domain,
    LinearBoundary,
    SoftmaxClassifier,
    clip_segment,
    region_grid,
    stable_softmax,
)

WEIGHTS = (
    (-2.0, -1.5, 1.2),
    (-2.0, 1.5, 1.2),
    (2.0, 0.0, -1.8),
)


def test_stable_softmax():
    """Probabilities sum to 1 even for huge scores."""
    print("=" * 60)
    print("TEST: Stable Softmax")
    print("=" * 60)

    p = stable_softmax(np.array([1000.0, 1000.0, -1000.0]))
    print(f"  p = {p}")
    assert np.all(np.isfinite(p))
    assert p.sum() == pytest.approx(1.0)
    assert p[0] == pytest.approx(0.5)


def test_classify_cluster_centres():
    """Each cluster centre lands in its own class."""
    print("\n" + "=" * 60)
    print("TEST: Softmax Classify")
    print("=" * 60)

    clf = SoftmaxClassifier(WEIGHTS)
    assert clf.classify(2.5, 7.0) == 0
    assert clf.classify(7.5, 7.0) == 1
    assert clf.classify(5.0, 2.5) == 2

    X = np.array([[2.5, 7.0], [7.5, 7.0], [5.0, 2.5]])
    np.testing.assert_array_equal(clf.predict(X), [0, 1, 2])
    assert clf.predict_proba(5.0, 2.5).sum() == pytest.approx(1.0)


def test_first_class_wins_ties():
    clf = SoftmaxClassifier([(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)])
    assert clf.classify(3.0, 3.0) == 0


def test_pairwise_segments():
    """One clipped segment per class pair, in pair order."""
    print("\n" + "=" * 60)
    print("TEST: Pairwise Segments")
    print("=" * 60)

    clf = SoftmaxClassifier(WEIGHTS)
    segments = clf.boundary_segments(Domain())
    for s in segments:
        print(f"  {s.class_pair}: ({s.x1:.4f}, {s.y1:.4f}) -> ({s.x2:.4f}, {s.y2:.4f})")

    assert [s.class_pair for s in segments] == [(0, 1), (0, 2), (1, 2)]

    vertical = segments[0]
    assert (vertical.x1, vertical.y1, vertical.x2, vertical.y2) == (5.0, 0.0, 5.0, 10.0)

    s02 = segments[1]
    assert s02.x1 == pytest.approx(0.0)
    assert s02.y1 == pytest.approx(3.8333333, abs=1e-6)
    assert s02.x2 == pytest.approx(10.0)
    assert s02.y2 == pytest.approx(8.8333333, abs=1e-6)

    s12 = segments[2]
    assert s12.y1 == pytest.approx(8.8333333, abs=1e-6)
    assert s12.y2 == pytest.approx(3.8333333, abs=1e-6)


def test_segment_symmetric_in_class_order():
    """Swapping two classes' weights gives the same line."""
    swapped = SoftmaxClassifier([WEIGHTS[1], WEIGHTS[0], WEIGHTS[2]])
    original = SoftmaxClassifier(WEIGHTS)

    a = original.pair_boundary(0, 1, Domain())
    b = swapped.pair_boundary(0, 1, Domain())
    assert (a.x1, a.y1, a.x2, a.y2) == pytest.approx((b.x1, b.y1, b.x2, b.y2))


def test_identical_rows_have_no_boundary():
    clf = SoftmaxClassifier([(1.0, 2.0, 3.0), (1.0, 2.0, 3.0)])
    assert clf.boundary_segments(Domain()) == []


def test_bad_weight_shape():
    with pytest.raises(ValueError):
        SoftmaxClassifier([(1.0, 2.0)])


def test_clip_segment():
    """Liang-Barsky keeps, trims or drops segments."""
    print("\n" + "=" * 60)
    print("TEST: Segment Clipping")
    print("=" * 60)

    domain = Domain()

    inside = clip_segment(1, 1, 9, 9, domain)
    assert (inside.x1, inside.y1, inside.x2, inside.y2) == (1, 1, 9, 9)

    assert clip_segment(11, 11, 12, 15, domain) is None

    trimmed = clip_segment(-5, 5, 15, 5, domain)
    assert (trimmed.x1, trimmed.y1, trimmed.x2, trimmed.y2) == pytest.approx((0, 5, 10, 5))

    # Parallel to an edge and outside it
    assert clip_segment(-1, 2, -1, 8, domain) is None


def test_linear_boundary_endpoints():
    """Lines are clipped to the domain; a line that misses it gives None."""
    domain = Domain()

    diag = LinearBoundary(0.0, 1.0, -1.0).endpoints(domain)
    assert (diag.x1, diag.y1, diag.x2, diag.y2) == pytest.approx((0, 0, 10, 10))

    assert LinearBoundary(-50.0, 1.0, 1.0).endpoints(domain) is None
    assert LinearBoundary(1.0, 0.0, 0.0).endpoints(domain) is None


def test_region_grid_orientation():
    """Row j counts cells from the bottom, column i from the left."""
    grid = region_grid(LinearBoundary(-5.0, 0.0, 1.0).classify, Domain(), resolution=10)

    assert grid.shape == (10, 10)
    assert np.all(grid[:5] == 0)
    assert np.all(grid[5:] == 1)

    with pytest.raises(ValueError):
        region_grid(lambda x, y: 0, Domain(), resolution=0)
