"""
Seeded PRNG Tests.

Tests for:
- Park-Miller LCG state sequence
- Uniform range and reproducibility
- Box-Muller Gaussian draws
"""

import os
import sys

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from synthetic import ConfigurationError, LCGRandom


def test_lcg_state_sequence():
    """Seed 1 walks the published minimal-standard sequence."""
    print("=" * 60)
    print("TEST: LCG State Sequence")
    print("=" * 60)

    rng = LCGRandom(1)
    states = []
    for _ in range(5):
        rng.random()
        states.append(rng.state)
    print(f"  States: {states}")

    assert states == [16807, 282475249, 1622650073, 984943658, 1144108930]
    assert rng.draws == 5


def test_lcg_seed_42():
    """First outputs for seed 42 (the logistic scene)."""
    print("\n" + "=" * 60)
    print("TEST: LCG Seed 42")
    print("=" * 60)

    rng = LCGRandom(42)
    u1 = rng.random()
    assert rng.state == 705894
    assert u1 == pytest.approx((705894 - 1) / 2147483646)

    rng.random()
    assert rng.state == 1126542223


def test_uniform_range():
    """Uniform draws stay in [0, 1)."""
    print("\n" + "=" * 60)
    print("TEST: Uniform Range")
    print("=" * 60)

    rng = LCGRandom(12345)
    values = [rng.random() for _ in range(5000)]
    print(f"  min={min(values):.6f} max={max(values):.6f}")

    assert min(values) >= 0.0
    assert max(values) < 1.0


def test_reproducibility_and_reset():
    """Same seed, same stream; reset() restarts it."""
    print("\n" + "=" * 60)
    print("TEST: Reproducibility")
    print("=" * 60)

    a = LCGRandom(66)
    b = LCGRandom(66)
    first = [a.gauss() for _ in range(20)]
    assert first == [b.gauss() for _ in range(20)]

    a.reset()
    assert a.draws == 0
    assert [a.gauss() for _ in range(20)] == first


def test_uniforms_generator_continues_stream():
    """uniforms() yields the same values as repeated random() calls."""
    a = LCGRandom(7)
    b = LCGRandom(7)
    stream = a.uniforms()
    lazy = [next(stream) for _ in range(10)]
    assert lazy == [b.random() for _ in range(10)]


def test_gauss_moments():
    """Box-Muller draws have roughly zero mean and unit variance."""
    print("\n" + "=" * 60)
    print("TEST: Gaussian Moments")
    print("=" * 60)

    samples = LCGRandom(42).normal(10000)
    print(f"  mean={samples.mean():.4f} var={samples.var():.4f}")

    assert samples.shape == (10000,)
    assert np.all(np.isfinite(samples))
    assert abs(samples.mean()) < 0.05
    assert abs(samples.var() - 1.0) < 0.05


def test_gauss_consumes_two_uniforms():
    """u is drawn before v; one normal uses two uniforms."""
    rng = LCGRandom(77)
    rng.gauss()
    assert rng.draws == 2


def test_zero_seed_rejected():
    """A seed that reduces to 0 would freeze the generator."""
    with pytest.raises(ConfigurationError):
        LCGRandom(0)
    with pytest.raises(ConfigurationError):
        LCGRandom(2147483647)


def test_seed_is_reduced():
    """Seeds above the modulus are reduced."""
    rng = LCGRandom(2147483647 + 5)
    assert rng.seed == 5
    assert "seed=5" in repr(rng)
