"""
Gaussian cluster sampling for labeled 2D scenes.

A cluster is a Gaussian blob described by its mean, a 2x2 mixing matrix
applied to two independent standard normals, and an optional rotation.
Samples are clamped into the sampling bounds and rounded to 2 decimals
so that the scenes stay stable for display.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from config import COORD_DECIMALS
from .rng import ConfigurationError, LCGRandom

logger = logging.getLogger(__name__)

Matrix2 = Tuple[Tuple[float, float], Tuple[float, float]]

IDENTITY: Matrix2 = ((1.0, 0.0), (0.0, 1.0))


@dataclass(frozen=True)
class Point:
    """Single labeled sample. `label` indexes the class palette."""
    x: float
    y: float
    label: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {'x': self.x, 'y': self.y, 'class': self.label}


@dataclass(frozen=True)
class ClusterSpec:
    """
    Generative description of one Gaussian cluster.

    For independent standard normals u, v (u drawn first):

        unrotated:  x = mean_x + a*u + b*v
                    y = mean_y + c*u + d*v

        rotated:    su, sv = u*a, v*d
                    x = mean_x + su*cos(t) - sv*sin(t)
                    y = mean_y + su*sin(t) + sv*cos(t)

    where mixing = ((a, b), (c, d)) and t = rotation.
    """
    mean_x: float
    mean_y: float
    count: int
    label: int
    mixing: Matrix2 = IDENTITY
    rotation: Optional[float] = None

    def __post_init__(self):
        self.validate()

    @classmethod
    def axis_aligned(cls, mean: Tuple[float, float], count: int, label: int,
                     scale: Tuple[float, float] = (1.0, 1.0)) -> 'ClusterSpec':
        """Independent x / y noise with per-axis standard deviations."""
        sx, sy = scale
        return cls(mean[0], mean[1], count, label, mixing=((sx, 0.0), (0.0, sy)))

    @classmethod
    def correlated(cls, mean: Tuple[float, float], count: int, label: int,
                   mixing: Matrix2) -> 'ClusterSpec':
        """Correlated noise through a full mixing matrix."""
        return cls(mean[0], mean[1], count, label, mixing=mixing)

    @classmethod
    def rotated(cls, mean: Tuple[float, float], count: int, label: int,
                scale: Tuple[float, float], angle: float) -> 'ClusterSpec':
        """Axis-scaled noise rotated by `angle` radians before translation."""
        sx, sy = scale
        return cls(mean[0], mean[1], count, label,
                   mixing=((sx, 0.0), (0.0, sy)), rotation=angle)

    def validate(self):
        """Reject clusters that cannot be sampled."""
        if not isinstance(self.count, (int, np.integer)) or isinstance(self.count, bool):
            raise ConfigurationError(f"Cluster count must be an int, got {self.count!r}")
        if self.count <= 0:
            raise ConfigurationError(
                f"Cluster for class {self.label} requests {self.count} points; need > 0"
            )
        if self.label < 0:
            raise ConfigurationError(f"Class label must be non-negative, got {self.label}")

        values = [self.mean_x, self.mean_y, *self.mixing[0], *self.mixing[1]]
        if self.rotation is not None:
            values.append(self.rotation)
        if not all(math.isfinite(v) for v in values):
            raise ConfigurationError(f"Cluster for class {self.label} has non-finite parameters")

    @property
    def covariance(self) -> np.ndarray:
        """Covariance implied by the mixing matrix (and rotation)."""
        A = np.array(self.mixing, dtype=np.float64)
        if self.rotation is not None:
            A = np.diag(np.diag(A))
            c, s = math.cos(self.rotation), math.sin(self.rotation)
            A = np.array([[c, -s], [s, c]]) @ A
        return A @ A.T

    def draw(self, rng: LCGRandom) -> Tuple[float, float]:
        """Draw one raw (unclamped) sample."""
        u = rng.gauss()
        v = rng.gauss()
        (a, b), (c, d) = self.mixing

        if self.rotation is None:
            return self.mean_x + a * u + b * v, self.mean_y + c * u + d * v

        su = u * a
        sv = v * d
        cos_t = math.cos(self.rotation)
        sin_t = math.sin(self.rotation)
        rx = su * cos_t - sv * sin_t
        ry = su * sin_t + sv * cos_t
        return self.mean_x + rx, self.mean_y + ry


def clamp_round(value: float, lo: float, hi: float,
                decimals: int = COORD_DECIMALS) -> float:
    """
    Clamp into [lo, hi] then round half-up to `decimals` places.

    Half-up (not banker's) rounding keeps coordinates identical to the
    reference scenes.
    """
    clamped = max(lo, min(hi, value))
    factor = 10 ** decimals
    return math.floor(clamped * factor + 0.5) / factor


def sample_clusters(rng: LCGRandom, specs: Sequence[ClusterSpec],
                    bounds: Tuple[float, float]) -> List[Point]:
    """
    Sample every cluster in order, all of one cluster before the next.

    Args:
        rng: Generator owned by the caller; consumed monotonically
        specs: Cluster descriptions
        bounds: (lo, hi) clamp applied to both coordinates

    Returns:
        Flat list of Points
    """
    lo, hi = bounds
    if not lo < hi:
        raise ConfigurationError(f"Sampling bounds must satisfy lo < hi, got {bounds}")
    if not specs:
        raise ConfigurationError("At least one cluster is required")

    # Validate everything before the first draw
    for spec in specs:
        spec.validate()

    points: List[Point] = []
    for spec in specs:
        for _ in range(spec.count):
            x, y = spec.draw(rng)
            points.append(Point(clamp_round(x, lo, hi), clamp_round(y, lo, hi), spec.label))
        logger.debug("Sampled %d points for class %d around (%.2f, %.2f)",
                     spec.count, spec.label, spec.mean_x, spec.mean_y)

    return points


def points_to_arrays(points: Sequence[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert points to solver-ready arrays.

    Returns:
        X: Coordinates (n_samples, 2)
        y: Labels (n_samples,)
    """
    X = np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)
    y = np.array([p.label for p in points], dtype=np.int64)
    return X, y


def class_counts(points: Sequence[Point]) -> Dict[int, int]:
    """Number of points per class label."""
    counts: Dict[int, int] = {}
    for p in points:
        counts[p.label] = counts.get(p.label, 0) + 1
    return dict(sorted(counts.items()))
