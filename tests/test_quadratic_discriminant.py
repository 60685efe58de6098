"""
Quadratic Discriminant Tests.

Tests for:
- Mahalanobis + log-determinant scoring
- Lowest-score classification and tie-breaking
- Boundary roots and sampled curves
"""

import math
import os
import sys

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from discriminants import DegenerateMatrixError, Domain, GaussianClass, QuadraticDiscriminant

MEANS = ((3.5, 4.0), (6.5, 6.5))
COVS = (((1.0, 0.0), (0.0, 1.0)), ((2.2, 1.4), (1.4, 1.6)))


def make_qda():
    return QuadraticDiscriminant([GaussianClass(m, c) for m, c in zip(MEANS, COVS)])


def test_gaussian_class_score():
    """Score at the mean is ln|Sigma|."""
    print("=" * 60)
    print("TEST: Gaussian Class Score")
    print("=" * 60)

    g = GaussianClass(MEANS[1], COVS[1])
    det = 2.2 * 1.6 - 1.4 * 1.4
    print(f"  log|Sigma| = {g.log_det:.6f}")

    assert g.log_det == pytest.approx(math.log(det))
    assert g.score(6.5, 6.5) == pytest.approx(math.log(det))

    X = np.array([[1.0, 2.0], [6.5, 6.5], [8.0, 3.0]])
    expected = [g.score(x, y) for x, y in X]
    np.testing.assert_allclose(g.score_array(X), expected)


def test_rejects_non_positive_definite():
    """Singular or indefinite covariances raise DegenerateMatrixError."""
    with pytest.raises(DegenerateMatrixError):
        GaussianClass((0.0, 0.0), ((1.0, 2.0), (2.0, 1.0)))
    with pytest.raises(DegenerateMatrixError):
        GaussianClass((0.0, 0.0), ((1.0, 1.0), (1.0, 1.0)))
    with pytest.raises(DegenerateMatrixError):
        GaussianClass((0.0, 0.0), ((-1.0, 0.0), (0.0, -1.0)))


def test_classify_means():
    """Each class mean is classified as its own class."""
    print("\n" + "=" * 60)
    print("TEST: QDA Classify Means")
    print("=" * 60)

    qda = make_qda()
    assert qda.classify(3.5, 4.0) == 0
    assert qda.classify(6.5, 6.5) == 1

    X = np.array([[3.5, 4.0], [6.5, 6.5]])
    np.testing.assert_array_equal(qda.predict(X), [0, 1])


def test_tie_goes_to_first_class():
    """Equal scores resolve to the lower index."""
    cov = ((1.0, 0.0), (0.0, 1.0))
    qda = QuadraticDiscriminant([GaussianClass((2.0, 5.0), cov),
                                 GaussianClass((8.0, 5.0), cov)])
    assert qda.classify(5.0, 5.0) == 0
    assert qda.classify(5.0001, 5.0) == 1


def test_boundary_roots_equalize_scores():
    """Every boundary root makes the two class scores equal."""
    print("\n" + "=" * 60)
    print("TEST: QDA Boundary Roots")
    print("=" * 60)

    qda = make_qda()
    checked = 0
    for x in np.linspace(0.0, 10.0, 21):
        for yv in qda.boundary_y(float(x)):
            s0, s1 = qda.scores(float(x), yv)
            assert abs(s0 - s1) < 1e-6
            checked += 1
    print(f"  Checked {checked} roots")
    assert checked > 0


def test_boundary_roots_filtered_to_domain():
    """A domain keeps only roots inside its y range."""
    qda = make_qda()
    domain = Domain()
    for x in np.linspace(0.0, 10.0, 11):
        for yv in qda.boundary_y(float(x), domain):
            assert domain.y_min <= yv <= domain.y_max


def test_shared_covariance_is_linear():
    """With one covariance the y^2 terms cancel: at most one root per x."""
    shared = QuadraticDiscriminant.with_shared_covariance(MEANS, ((1.6, 0.7), (0.7, 1.3)))
    for x in np.linspace(0.0, 10.0, 11):
        assert len(shared.boundary_y(float(x))) <= 1

    curves = shared.boundary_curves(Domain(), steps=50)
    assert len(curves) == 1
    xs = [p[0] for p in curves[0]]
    assert xs == sorted(xs)


def test_boundary_curves_inside_domain():
    """Sampled curves stay in the domain; short branches are dropped."""
    print("\n" + "=" * 60)
    print("TEST: QDA Boundary Curves")
    print("=" * 60)

    qda = make_qda()
    domain = Domain()
    curves = qda.boundary_curves(domain, steps=200)
    print(f"  {len(curves)} branch(es), sizes {[len(c) for c in curves]}")

    assert 1 <= len(curves) <= 2
    for branch in curves:
        assert len(branch) >= 2
        for x, yv in branch:
            assert domain.contains(x, yv)


def test_needs_two_classes():
    with pytest.raises(ValueError):
        QuadraticDiscriminant([GaussianClass((0.0, 0.0), ((1.0, 0.0), (0.0, 1.0)))])


def test_vertical_shared_boundary():
    """Means side by side with a shared covariance give the line x = 5."""
    print("\n" + "=" * 60)
    print("TEST: Vertical QDA Boundary")
    print("=" * 60)

    shared = QuadraticDiscriminant.with_shared_covariance(
        [(2.0, 5.0), (8.0, 5.0)], ((1.0, 0.0), (0.0, 1.0)))
    domain = Domain()

    assert shared.boundary_y(5.0) == []
    assert shared.boundary_x(domain) == pytest.approx([5.0])

    curves = shared.boundary_curves(domain, steps=50)
    print(f"  {curves}")
    assert len(curves) == 1
    (x1, y1), (x2, y2) = curves[0]
    assert (x1, x2) == pytest.approx((5.0, 5.0))
    assert (y1, y2) == (0.0, 10.0)


def test_boundary_x_empty_when_not_vertical():
    assert make_qda().boundary_x(Domain()) == []
