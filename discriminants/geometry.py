"""
Boundary geometry shared by all solvers.

Value objects for the plotting domain, linear boundaries, boundary
segments and projection directions, plus parametric segment clipping
and dense region evaluation.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from config import CLIP_EPSILON, COEF_EPSILON, REGION_RESOLUTION, X_DOMAIN, Y_DOMAIN

ClassifyFn = Callable[[float, float], int]


@dataclass(frozen=True)
class Domain:
    """Axis-aligned plotting rectangle."""
    x_min: float = X_DOMAIN[0]
    x_max: float = X_DOMAIN[1]
    y_min: float = Y_DOMAIN[0]
    y_max: float = Y_DOMAIN[1]

    def __post_init__(self):
        if not (self.x_min < self.x_max and self.y_min < self.y_max):
            raise ValueError(f"Empty domain: {self}")

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2

    @property
    def x_range(self) -> Tuple[float, float]:
        return self.x_min, self.x_max

    @property
    def y_range(self) -> Tuple[float, float]:
        return self.y_min, self.y_max

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def to_dict(self) -> dict:
        return {'xMin': self.x_min, 'xMax': self.x_max,
                'yMin': self.y_min, 'yMax': self.y_max}


@dataclass(frozen=True)
class Direction:
    """Unit vector, used for the LDA projection axis."""
    dx: float
    dy: float

    def to_dict(self) -> dict:
        return {'dx': self.dx, 'dy': self.dy}


@dataclass(frozen=True)
class Segment:
    """Boundary segment between two competing classes."""
    x1: float
    y1: float
    x2: float
    y2: float
    class_pair: Tuple[int, int] = (0, 1)

    def to_dict(self) -> dict:
        return {'x1': self.x1, 'y1': self.y1, 'x2': self.x2, 'y2': self.y2,
                'classPair': list(self.class_pair)}


@dataclass(frozen=True)
class LinearBoundary:
    """
    Linear decision boundary w0 + w1*x + w2*y = 0.

    Points with a non-negative score are class 1, the rest class 0.
    """
    w0: float
    w1: float
    w2: float

    def decision_function(self, x, y):
        """Signed score; works on scalars and numpy arrays."""
        return self.w0 + self.w1 * x + self.w2 * y

    def classify(self, x: float, y: float) -> int:
        return 1 if self.decision_function(x, y) >= 0 else 0

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Vectorized classify over rows of X (n_samples, 2)."""
        X = np.asarray(X, dtype=np.float64)
        return (self.decision_function(X[:, 0], X[:, 1]) >= 0).astype(int)

    def endpoints(self, domain: Domain) -> Optional[Segment]:
        """
        The part of the line inside `domain`.

        Solves for y across the x range; when w2 vanishes the line is
        vertical at x = -w0/w1. Returns None if both slopes vanish or the
        line misses the domain.
        """
        if abs(self.w2) > COEF_EPSILON:
            xa, xb = domain.x_min, domain.x_max
            ya = -(self.w0 + self.w1 * xa) / self.w2
            yb = -(self.w0 + self.w1 * xb) / self.w2
            return clip_segment(xa, ya, xb, yb, domain)

        if abs(self.w1) > COEF_EPSILON:
            xv = -self.w0 / self.w1
            if domain.x_min <= xv <= domain.x_max:
                return Segment(xv, domain.y_min, xv, domain.y_max)

        return None

    def to_dict(self) -> dict:
        return {'w0': self.w0, 'w1': self.w1, 'w2': self.w2}


def clip_segment(x1: float, y1: float, x2: float, y2: float, domain: Domain,
                 class_pair: Tuple[int, int] = (0, 1)) -> Optional[Segment]:
    """
    Parametric (Liang-Barsky) clipping of a segment to `domain`.

    The segment is P(t) = P1 + t*(P2 - P1), t in [0, 1]. Each of the four
    edges narrows [tmin, tmax]; an empty interval means no visible part.

    Returns:
        Clipped Segment, or None if it lies entirely outside
    """
    dx = x2 - x1
    dy = y2 - y1
    tmin, tmax = 0.0, 1.0

    # (p, q) per edge: left, right, bottom, top
    edges = (
        (-dx, x1 - domain.x_min),
        (dx, domain.x_max - x1),
        (-dy, y1 - domain.y_min),
        (dy, domain.y_max - y1),
    )
    for p, q in edges:
        if abs(p) < CLIP_EPSILON:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > tmax:
                return None
            if r > tmin:
                tmin = r
        else:
            if r < tmin:
                return None
            if r < tmax:
                tmax = r

    return Segment(x1 + tmin * dx, y1 + tmin * dy,
                   x1 + tmax * dx, y1 + tmax * dy, class_pair)


def region_grid(classify: ClassifyFn, domain: Domain,
                resolution: int = REGION_RESOLUTION) -> np.ndarray:
    """
    Evaluate `classify` at the centre of each cell of a square grid.

    Returns:
        Integer array (resolution, resolution); row j is the j-th cell
        from the bottom, column i the i-th from the left
    """
    if resolution <= 0:
        raise ValueError(f"Resolution must be positive, got {resolution}")

    step_x = (domain.x_max - domain.x_min) / resolution
    step_y = (domain.y_max - domain.y_min) / resolution
    grid = np.zeros((resolution, resolution), dtype=np.int64)

    for i in range(resolution):
        cx = domain.x_min + (i + 0.5) * step_x
        for j in range(resolution):
            cy = domain.y_min + (j + 0.5) * step_y
            grid[j, i] = classify(cx, cy)

    return grid


def project_onto(points: Sequence, direction: Direction,
                 origin: Tuple[float, float]) -> List[Tuple[float, float]]:
    """
    Orthogonal projection of each point onto the axis through `origin`.

    Args:
        points: Objects with x and y attributes
        direction: Axis direction (renormalized here)
        origin: A point on the axis

    Returns:
        Projected (x, y) for each point
    """
    length = math.hypot(direction.dx, direction.dy)
    ux, uy = direction.dx / length, direction.dy / length
    cx, cy = origin

    feet = []
    for p in points:
        scalar = (p.x - cx) * ux + (p.y - cy) * uy
        feet.append((cx + scalar * ux, cy + scalar * uy))
    return feet
