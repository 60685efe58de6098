"""
Hyperparameter Boundary Tests.

Tests for:
- Regularized logistic boundary as a function of C
- Ridge alpha table and key canonicalization
- Perceptron epoch schedule
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from discriminants import (
    BoundaryTable,
    EpochSchedule,
    LinearBoundary,
    RegularizedLogistic,
    hyperparameter_key,
    sigmoid,
    sigmoid_curve,
)


def test_logistic_boundary_c1():
    """C = 1 halves the base coefficients."""
    print("=" * 60)
    print("TEST: Logistic Boundary (C=1)")
    print("=" * 60)

    b = RegularizedLogistic().boundary(1.0)
    print(f"  {b}")
    assert (b.w0, b.w1, b.w2) == pytest.approx((-2.5, 1.0, -0.5))


def test_logistic_pivot_on_every_boundary():
    """Every C gives a line through the pivot."""
    logistic = RegularizedLogistic(pivot=(5.0, 5.0))
    for C in (0.01, 0.1, 1.0, 10.0, 100.0):
        b = logistic.boundary(C)
        assert b.decision_function(5.0, 5.0) == pytest.approx(0.0, abs=1e-12)


def test_logistic_scale_monotone():
    """Less regularization, steeper coefficients."""
    scales = [RegularizedLogistic.scale(C) for C in (0.0, 0.1, 1.0, 10.0, 1000.0)]
    assert scales[0] == 0.0
    assert scales == sorted(scales)
    assert scales[-1] < 1.0


def test_logistic_negative_c():
    """Negative C is treated as no coefficient at all."""
    assert RegularizedLogistic.scale(-3.0) == 0.0


def test_logistic_probability():
    logistic = RegularizedLogistic()
    assert logistic.predict_proba(5.0, 5.0, 1.0) == pytest.approx(0.5)
    assert logistic.predict_proba(9.0, 1.0, 10.0) > 0.5


def test_hyperparameter_key():
    """Numeric spellings of the same value share a key."""
    print("\n" + "=" * 60)
    print("TEST: Hyperparameter Keys")
    print("=" * 60)

    assert hyperparameter_key(1) == "1"
    assert hyperparameter_key(1.0) == "1"
    assert hyperparameter_key("1") == "1"
    assert hyperparameter_key("1.0") == "1"
    assert hyperparameter_key("0.10") == "0.1"
    assert hyperparameter_key(0.01) == "0.01"
    assert hyperparameter_key(" abc ") == "abc"


def make_table():
    return BoundaryTable({
        '0.1': LinearBoundary(-7.5, 0.82, 0.72),
        '1': LinearBoundary(-7.0, 0.78, 0.68),
        '10': LinearBoundary(-6.2, 0.70, 0.62),
    }, default_key="1")


def test_table_lookup():
    """Known keys return their entry in any numeric spelling."""
    print("\n" + "=" * 60)
    print("TEST: Ridge Table")
    print("=" * 60)

    table = make_table()
    assert table.keys == ['0.1', '1', '10']
    assert table.boundary("10").w0 == -6.2
    assert table.boundary(10).w0 == -6.2
    assert table.boundary("0.10").w0 == -7.5
    assert table.boundary(1.0) is table.boundary("1")


def test_table_unknown_key_falls_back():
    """Unknown keys return the default entry itself."""
    table = make_table()
    assert table.boundary("999") is table.boundary("1")
    assert table.boundary("abc") is table.boundary("1")
    assert table.classifier("999")(9.0, 9.0) == 1


def test_table_requires_default():
    with pytest.raises(ValueError):
        BoundaryTable({'1': LinearBoundary(0.0, 1.0, 1.0)}, default_key="5")


def test_epoch_schedule_clamps():
    """Out-of-range epochs clamp to the first or last snapshot."""
    print("\n" + "=" * 60)
    print("TEST: Epoch Schedule")
    print("=" * 60)

    snapshots = [LinearBoundary(-1.5, 0.3, 0.1), LinearBoundary(-7.5, 0.82, 0.72)]
    schedule = EpochSchedule(snapshots)

    assert len(schedule) == 2
    assert schedule.boundary(100) is snapshots[-1]
    assert schedule.boundary(-4) is snapshots[0]
    assert schedule.clamp(1) == 1
    assert schedule.classifier(1)(5.0, 5.0) == 1
    assert len(schedule.to_list()) == 2

    with pytest.raises(ValueError):
        EpochSchedule([])


def test_sigmoid_curve():
    """121 samples from -6 to 6, centred on 0.5."""
    curve = sigmoid_curve()
    assert len(curve) == 121
    assert curve[0][0] == -6.0
    assert curve[-1][0] == 6.0
    assert curve[60] == (0.0, 0.5)
    assert sigmoid(1000.0) == pytest.approx(1.0)
    assert sigmoid(-1000.0) == pytest.approx(0.0)


def test_logistic_non_finite_c():
    """NaN or infinite C cannot produce a boundary."""
    from synthetic import ConfigurationError

    for C in (float('nan'), float('inf'), float('-inf')):
        with pytest.raises(ConfigurationError):
            RegularizedLogistic().boundary(C)
