"""
Quadratic Discriminant scoring with fixed per-class Gaussians.

Each class k has a mean mu_k and covariance Sigma_k. A point is scored
per class by

    g_k(x) = (x - mu_k)^T Sigma_k^(-1) (x - mu_k) + ln|Sigma_k|

and assigned to the class with the LOWEST score. With one shared
covariance the boundary becomes linear, which gives the LDA comparison.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import COEF_EPSILON
from .geometry import Domain
from .linear_algebra import check_positive_definite, inv2, mahalanobis_sq


@dataclass(frozen=True)
class GaussianClass:
    """Mean and covariance of one class; covariance must be positive definite."""
    mean: Tuple[float, float]
    covariance: Tuple[Tuple[float, float], Tuple[float, float]]
    precision: np.ndarray = field(init=False, repr=False, compare=False)
    log_det: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cov = check_positive_definite(self.covariance)
        object.__setattr__(self, 'precision', inv2(cov))
        object.__setattr__(self, 'log_det',
                           math.log(cov[0, 0] * cov[1, 1] - cov[0, 1] * cov[1, 0]))

    def score(self, x: float, y: float) -> float:
        """Mahalanobis term plus log-determinant."""
        return mahalanobis_sq((x, y), self.mean, self.precision) + self.log_det

    def score_array(self, X: np.ndarray) -> np.ndarray:
        """Vectorized score over rows of X (n_samples, 2)."""
        D = np.asarray(X, dtype=np.float64) - np.asarray(self.mean)
        return np.einsum('ni,ij,nj->n', D, self.precision, D) + self.log_det

    def to_dict(self) -> dict:
        return {'mean': list(self.mean), 'covariance': [list(r) for r in self.covariance]}


class QuadraticDiscriminant:
    """
    Minimum-score classifier over fixed Gaussian classes.

    Ties go to the lower class index.

    Attributes:
        classes: GaussianClass per label, in label order
    """

    def __init__(self, classes: Sequence[GaussianClass]):
        """
        Initialize the discriminant.

        Args:
            classes: One GaussianClass per label (at least two)
        """
        if len(classes) < 2:
            raise ValueError("Quadratic discriminant needs at least two classes")
        self.classes: List[GaussianClass] = list(classes)

    @classmethod
    def with_shared_covariance(cls, means: Sequence[Tuple[float, float]],
                               covariance) -> 'QuadraticDiscriminant':
        """Same means, one covariance for every class (linear boundary)."""
        cov = tuple(tuple(float(v) for v in row) for row in covariance)
        return cls([GaussianClass(tuple(m), cov) for m in means])

    @property
    def n_classes(self) -> int:
        return len(self.classes)

    def scores(self, x: float, y: float) -> List[float]:
        """Score of every class at (x, y)."""
        return [c.score(x, y) for c in self.classes]

    def classify(self, x: float, y: float) -> int:
        """Index of the lowest score; the earlier class wins ties."""
        scores = self.scores(x, y)
        best = 0
        for k in range(1, len(scores)):
            if scores[k] < scores[best]:
                best = k
        return best

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Vectorized classify over rows of X."""
        S = np.column_stack([c.score_array(X) for c in self.classes])
        return np.argmin(S, axis=1)

    def _y_coefficients(self, x: float, pair: Tuple[int, int]) -> np.ndarray:
        """(a, b, c) of g_i - g_j = a*y^2 + b*y + c at a fixed x."""
        coeffs = np.zeros(3)
        for sign, k in ((1.0, pair[0]), (-1.0, pair[1])):
            cls = self.classes[k]
            (p, q), (r, s) = cls.precision
            mx, my = cls.mean
            dx = x - mx
            cross = q + r
            coeffs += sign * np.array([
                s,
                cross * dx - 2 * s * my,
                p * dx * dx - cross * dx * my + s * my * my + cls.log_det,
            ])
        return coeffs

    def _is_vertical(self, domain: Domain, pair: Tuple[int, int]) -> bool:
        """True when the y terms cancel across the whole x range."""
        # a is constant in x and b is linear, so both ends decide it
        for x in domain.x_range:
            a, b, _ = self._y_coefficients(x, pair)
            if abs(a) > COEF_EPSILON or abs(b) > COEF_EPSILON:
                return False
        return True

    def boundary_x(self, domain: Domain, pair: Tuple[int, int] = (0, 1)) -> List[float]:
        """
        Vertical boundary lines x = const, for when the scores do not depend on y.

        The remaining term c(x) has degree at most two in x; it is
        recovered from three samples and solved directly.

        Returns:
            Sorted x values inside the domain (empty if the boundary is
            not vertical)
        """
        if not self._is_vertical(domain, pair):
            return []

        c0, c1, c2 = (self._y_coefficients(x, pair)[2] for x in (0.0, 1.0, 2.0))
        qa = (c2 - 2 * c1 + c0) / 2
        qb = c1 - c0 - qa
        qc = c0

        if abs(qa) <= COEF_EPSILON:
            if abs(qb) <= COEF_EPSILON:
                return []
            roots = [-qc / qb]
        else:
            disc = qb * qb - 4 * qa * qc
            if disc < 0:
                return []
            sq = math.sqrt(disc)
            roots = sorted({(-qb - sq) / (2 * qa), (-qb + sq) / (2 * qa)})

        return [float(v) for v in roots if domain.x_min <= v <= domain.x_max]

    def boundary_y(self, x: float, domain: Optional[Domain] = None,
                   pair: Tuple[int, int] = (0, 1)) -> List[float]:
        """
        Solve g_i(x, y) = g_j(x, y) for y at a fixed x.

        For each class the score is quadratic in y:
            s*y^2 + [(q + r)*dx - 2*s*my]*y + [p*dx^2 - (q + r)*dx*my + s*my^2 + ln|S|]
        with precision [[p, q], [r, s]], dx = x - mx. The difference of
        two such polynomials is solved directly; when the y^2 term
        cancels the equation is linear.

        Args:
            x: Abscissa
            domain: If given, only roots within its y range are kept
            pair: Classes whose scores are equated

        Returns:
            Sorted y values on the boundary
        """
        a, b, c = self._y_coefficients(x, pair)
        if abs(a) <= COEF_EPSILON:
            if abs(b) <= COEF_EPSILON:
                return []
            roots = [-c / b]
        else:
            disc = b * b - 4 * a * c
            if disc < 0:
                return []
            sq = math.sqrt(disc)
            roots = sorted({(-b - sq) / (2 * a), (-b + sq) / (2 * a)})

        if domain is not None:
            roots = [v for v in roots if domain.y_min <= v <= domain.y_max]
        return roots

    def boundary_curves(self, domain: Domain, steps: int = 200,
                        pair: Tuple[int, int] = (0, 1)) -> List[List[Tuple[float, float]]]:
        """
        Sample the boundary across the x range of `domain`.

        Returns:
            One polyline per root branch (lower branch first); branches
            with fewer than two points are dropped. A boundary that does
            not depend on y comes back as vertical two-point lines.
        """
        if self._is_vertical(domain, pair):
            return [[(xv, domain.y_min), (xv, domain.y_max)]
                    for xv in self.boundary_x(domain, pair)]

        branches: List[List[Tuple[float, float]]] = [[], []]
        for i in range(steps + 1):
            x = domain.x_min + (domain.x_max - domain.x_min) * i / steps
            for idx, yv in enumerate(self.boundary_y(x, None, pair)[:2]):
                if domain.y_min <= yv <= domain.y_max:
                    branches[idx].append((x, yv))
        return [b for b in branches if len(b) >= 2]

    def to_dict(self) -> dict:
        return {'classes': [c.to_dict() for c in self.classes]}
