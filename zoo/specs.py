"""
Declarative descriptions of the six zoo models.

A ModelSpec pairs the clusters to sample with a solver tag. The tag
classes carry only constants; zoo.generator turns them into
classifiers and boundaries.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from config import (
    DEFAULT_BOUNDS,
    DOMAIN_CENTER,
    LDA_SEED,
    LOGISTIC_SEED,
    MULTINOMIAL_SEED,
    PERCEPTRON_BOUNDS,
    PERCEPTRON_SEED,
    QDA_SEED,
    RIDGE_BOUNDS,
    RIDGE_SEED,
)
from discriminants import Domain
from synthetic import ClusterSpec

Coefficients = Tuple[float, float, float]  # (w0, w1, w2)
Matrix2 = Tuple[Tuple[float, float], Tuple[float, float]]


# =============================================================================
# SOLVER TAGS
# =============================================================================

@dataclass(frozen=True)
class LinearSolver:
    """Fisher LDA fitted on the sampled points."""


@dataclass(frozen=True)
class QuadraticSolver:
    """Fixed per-class Gaussians, plus a shared covariance for comparison."""
    means: Tuple[Tuple[float, float], ...]
    covariances: Tuple[Matrix2, ...]
    shared_covariance: Optional[Matrix2] = None


@dataclass(frozen=True)
class SoftmaxSolver:
    """Fixed [bias, w1, w2] weight rows, one per class."""
    weights: Tuple[Coefficients, ...]
    center: Tuple[float, float] = DOMAIN_CENTER


@dataclass(frozen=True)
class ScaledSolver:
    """Boundary coefficients shrunk by the regularization constant C."""
    base_w1: float
    base_w2: float
    pivot: Tuple[float, float] = DOMAIN_CENTER
    default_c: float = 1.0


@dataclass(frozen=True)
class TableSolver:
    """Exact boundary per discrete hyperparameter value (ridge alpha)."""
    entries: Tuple[Tuple[str, Coefficients], ...]
    default_key: str = "1"


@dataclass(frozen=True)
class EpochSolver:
    """Boundary snapshot per training epoch (perceptron)."""
    snapshots: Tuple[Coefficients, ...]
    default_epoch: int = -1  # -1 selects the last snapshot


SolverSpec = Union[LinearSolver, QuadraticSolver, SoftmaxSolver,
                   ScaledSolver, TableSolver, EpochSolver]


@dataclass(frozen=True)
class ModelSpec:
    """Everything needed to regenerate one model's scene."""
    name: str
    title: str
    seed: int
    clusters: Tuple[ClusterSpec, ...]
    solver: SolverSpec
    bounds: Tuple[float, float] = DEFAULT_BOUNDS
    domain: Domain = field(default_factory=Domain)


# =============================================================================
# MODEL CATALOGUE
# =============================================================================

LOGISTIC = ModelSpec(
    name='logistic',
    title='Logistic Regression',
    seed=LOGISTIC_SEED,
    clusters=(
        ClusterSpec.axis_aligned((3.0, 6.0), 25, 0, scale=(1.3, 1.5)),
        ClusterSpec.axis_aligned((7.0, 4.0), 25, 1, scale=(1.3, 1.5)),
    ),
    # Classes centred at (3, 6) and (7, 4): direction ~ (4, -2), pivot at the midpoint
    solver=ScaledSolver(base_w1=2.0, base_w2=-1.0, pivot=(5.0, 5.0), default_c=1.0),
)

MULTINOMIAL = ModelSpec(
    name='multinomial',
    title='Multinomial Logistic Regression',
    seed=MULTINOMIAL_SEED,
    clusters=(
        ClusterSpec.axis_aligned((2.5, 7.0), 20, 0, scale=(1.1, 1.1)),
        ClusterSpec.axis_aligned((7.5, 7.0), 20, 1, scale=(1.1, 1.1)),
        ClusterSpec.axis_aligned((5.0, 2.5), 20, 2, scale=(1.1, 1.1)),
    ),
    solver=SoftmaxSolver(weights=(
        (-2.0, -1.5, 1.2),   # class 0: low x, high y
        (-2.0, 1.5, 1.2),    # class 1: high x, high y
        (2.0, 0.0, -1.8),    # class 2: mid x, low y
    )),
)

QDA = ModelSpec(
    name='qda',
    title='Quadratic Discriminant Analysis',
    seed=QDA_SEED,
    clusters=(
        ClusterSpec.axis_aligned((3.5, 4.0), 25, 0, scale=(1.0, 1.0)),
        ClusterSpec.rotated((6.5, 6.5), 25, 1, scale=(2.0, 0.6), angle=0.7),
    ),
    solver=QuadraticSolver(
        means=((3.5, 4.0), (6.5, 6.5)),
        covariances=(
            ((1.0, 0.0), (0.0, 1.0)),
            ((2.2, 1.4), (1.4, 1.6)),   # elongated, rotated
        ),
        shared_covariance=((1.6, 0.7), (0.7, 1.3)),
    ),
)

LDA = ModelSpec(
    name='lda',
    title='Linear Discriminant Analysis',
    seed=LDA_SEED,
    clusters=(
        ClusterSpec.correlated((3.0, 3.5), 25, 0, mixing=((1.2, 0.4), (0.4, 1.2))),
        ClusterSpec.correlated((7.0, 6.5), 25, 1, mixing=((1.2, 0.4), (0.4, 1.2))),
    ),
    solver=LinearSolver(),
)

PERCEPTRON = ModelSpec(
    name='perceptron',
    title='Perceptron',
    seed=PERCEPTRON_SEED,
    clusters=(
        ClusterSpec.axis_aligned((3.0, 3.0), 20, 0, scale=(1.2, 1.2)),
        ClusterSpec.axis_aligned((7.0, 7.0), 20, 1, scale=(1.2, 1.2)),
    ),
    solver=EpochSolver(snapshots=(
        (-1.5, 0.3, 0.1),
        (-3.0, 0.5, 0.3),
        (-4.5, 0.6, 0.5),
        (-5.5, 0.7, 0.6),
        (-6.2, 0.75, 0.65),
        (-6.8, 0.78, 0.68),
        (-7.2, 0.80, 0.70),
        (-7.4, 0.81, 0.71),
        (-7.5, 0.82, 0.72),
        (-7.5, 0.82, 0.72),
    ), default_epoch=9),
    bounds=PERCEPTRON_BOUNDS,
)

RIDGE = ModelSpec(
    name='ridge',
    title='Ridge Classifier',
    seed=RIDGE_SEED,
    clusters=(
        ClusterSpec.axis_aligned((3.5, 3.5), 25, 0, scale=(1.5, 1.5)),
        ClusterSpec.axis_aligned((6.5, 6.5), 25, 1, scale=(1.5, 1.5)),
    ),
    solver=TableSolver(entries=(
        ('0.01', (-7.8, 0.85, 0.75)),
        ('0.1', (-7.5, 0.82, 0.72)),
        ('1', (-7.0, 0.78, 0.68)),
        ('10', (-6.2, 0.70, 0.62)),
        ('100', (-5.5, 0.60, 0.55)),
    ), default_key="1"),
    bounds=RIDGE_BOUNDS,
)

MODEL_SPECS: Dict[str, ModelSpec] = {
    spec.name: spec for spec in (LOGISTIC, MULTINOMIAL, QDA, LDA, PERCEPTRON, RIDGE)
}
