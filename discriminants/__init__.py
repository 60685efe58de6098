"""
Decision-boundary solvers for the classifier zoo.

All solvers are closed-form and work on 2D points:

Geometry:
- Domain, LinearBoundary, Segment, Direction
- clip_segment: Liang-Barsky clipping to the plotting domain
- region_grid: dense classify evaluation for filled regions

Solvers:
- PooledLinearDiscriminant: Fisher LDA from pooled within-class scatter
- QuadraticDiscriminant: per-class Mahalanobis + log-determinant scoring
- SoftmaxClassifier: fixed weight table, pairwise boundary segments
- RegularizedLogistic, BoundaryTable, EpochSchedule: hyperparameter-driven lines
"""

from .linear_algebra import DegenerateMatrixError, det2, inv2, mahalanobis_sq
from .geometry import (
    Domain,
    Direction,
    LinearBoundary,
    Segment,
    clip_segment,
    region_grid,
    project_onto,
)
from .linear_discriminant import PooledLinearDiscriminant
from .quadratic_discriminant import GaussianClass, QuadraticDiscriminant
from .softmax import SoftmaxClassifier, stable_softmax
from .parametrized import (
    RegularizedLogistic,
    BoundaryTable,
    EpochSchedule,
    hyperparameter_key,
    sigmoid,
    sigmoid_curve,
)

__all__ = [
    # Linear algebra
    'DegenerateMatrixError',
    'det2',
    'inv2',
    'mahalanobis_sq',

    # Geometry
    'Domain',
    'Direction',
    'LinearBoundary',
    'Segment',
    'clip_segment',
    'region_grid',
    'project_onto',

    # Solvers
    'PooledLinearDiscriminant',
    'GaussianClass',
    'QuadraticDiscriminant',
    'SoftmaxClassifier',
    'stable_softmax',
    'RegularizedLogistic',
    'BoundaryTable',
    'EpochSchedule',
    'hyperparameter_key',
    'sigmoid',
    'sigmoid_curve',
]
