"""
Two-class Linear Discriminant with a closed-form 2x2 solution.

Implements:
- Class means and pooled within-class scatter
- Fisher direction w = S_W^(-1) * (mu_1 - mu_0), unit length
- Linear boundary through the midpoint of the means, perpendicular to w

Fisher's LDA finds the projection that best separates the two classes.
"""

import logging
from typing import Optional

import numpy as np

from .geometry import Direction, LinearBoundary
from .linear_algebra import DegenerateMatrixError, inv2, normalize2

logger = logging.getLogger(__name__)


class PooledLinearDiscriminant:
    """
    Fisher's Linear Discriminant on 2D points with labels {0, 1}.

    Finds the projection w that maximizes:
        J(w) = (w^T * S_B * w) / (w^T * S_W * w)

    Where:
        S_W = sum over classes of sum (x - mu_k)(x - mu_k)^T   (not / N)

    Solution: w = S_W^(-1) * (mu_1 - mu_0), then normalized.

    The boundary is perpendicular to w through (mu_0 + mu_1) / 2:
        w0 = -(w . mid),  w1 = w_x,  w2 = w_y

    Attributes:
        mean_0_, mean_1_: Class means
        scatter_: Pooled within-class scatter matrix (2, 2)
        direction_: Unit projection direction
        boundary_: LinearBoundary
        degenerate_: True if S_W was singular and the fallback was used
    """

    def __init__(self):
        """Initialize the discriminant."""
        self.mean_0_: Optional[np.ndarray] = None
        self.mean_1_: Optional[np.ndarray] = None
        self.scatter_: Optional[np.ndarray] = None
        self.direction_: Optional[Direction] = None
        self.boundary_: Optional[LinearBoundary] = None
        self.degenerate_: bool = False

    def fit(self, X: np.ndarray, y: np.ndarray) -> 'PooledLinearDiscriminant':
        """
        Fit the discriminant.

        Args:
            X: Points (n_samples, 2)
            y: Labels in {0, 1} (n_samples,)

        Returns:
            self
        """
        X = np.array(X, dtype=np.float64)
        y = np.array(y)

        if X.ndim != 2 or X.shape[1] != 2:
            raise ValueError(f"Expected points of shape (n, 2), got {X.shape}")

        X0 = X[y == 0]
        X1 = X[y == 1]
        if len(X0) == 0 or len(X1) == 0:
            raise ValueError("Linear discriminant requires points of both class 0 and class 1")

        # Class means
        self.mean_0_ = X0.mean(axis=0)
        self.mean_1_ = X1.mean(axis=0)

        # Pooled within-class scatter (sum of outer products, no normalization)
        D0 = X0 - self.mean_0_
        D1 = X1 - self.mean_1_
        self.scatter_ = D0.T @ D0 + D1.T @ D1

        mean_diff = self.mean_1_ - self.mean_0_

        try:
            S_W_inv = inv2(self.scatter_)
            w = S_W_inv @ mean_diff
            wx, wy = normalize2(w[0], w[1])
            self.degenerate_ = False
        except DegenerateMatrixError as exc:
            # Identity-covariance direction: perpendicular bisector of the means
            logger.warning("LDA scatter is degenerate (%s); using mean difference direction", exc)
            self.degenerate_ = True
            try:
                wx, wy = normalize2(mean_diff[0], mean_diff[1])
            except DegenerateMatrixError:
                logger.warning("LDA class means coincide; using a vertical boundary")
                wx, wy = 1.0, 0.0

        self.direction_ = Direction(wx, wy)

        mid = (self.mean_0_ + self.mean_1_) / 2
        self.boundary_ = LinearBoundary(
            w0=-(wx * mid[0] + wy * mid[1]),
            w1=wx,
            w2=wy,
        )

        logger.debug("LDA fitted: direction=(%.4f, %.4f) boundary=%s", wx, wy, self.boundary_)
        return self

    def _check_fitted(self):
        if self.boundary_ is None:
            raise ValueError("Not fitted. Call fit() first.")

    def transform(self, X: np.ndarray) -> np.ndarray:
        """
        Project points onto the discriminant direction.

        Args:
            X: Points (n_samples, 2)

        Returns:
            Projected values (n_samples,)
        """
        self._check_fitted()
        X = np.array(X, dtype=np.float64)
        return X @ np.array([self.direction_.dx, self.direction_.dy])

    def decision_function(self, X: np.ndarray) -> np.ndarray:
        """Signed distance to the boundary (unit normal)."""
        self._check_fitted()
        X = np.array(X, dtype=np.float64)
        return self.boundary_.decision_function(X[:, 0], X[:, 1])

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Class 1 where the score is non-negative, else 0."""
        return (self.decision_function(X) >= 0).astype(int)

    def classify(self, x: float, y: float) -> int:
        self._check_fitted()
        return self.boundary_.classify(x, y)

    def score(self, X: np.ndarray, y: np.ndarray) -> float:
        """Calculate accuracy."""
        return float(np.mean(self.predict(X) == np.asarray(y)))

    def get_discriminant_ratio(self, X: np.ndarray, y: np.ndarray) -> float:
        """
        Fisher's criterion (between / within variance) along the learned direction.

        Args:
            X: Points
            y: Labels

        Returns:
            J(w) for the fitted projection
        """
        projections = self.transform(X)
        y = np.asarray(y)

        proj_0 = projections[y == 0]
        proj_1 = projections[y == 1]

        overall_mean = np.mean(projections)
        s_b = len(proj_0) * (np.mean(proj_0) - overall_mean) ** 2 + \
              len(proj_1) * (np.mean(proj_1) - overall_mean) ** 2

        s_w = np.sum((proj_0 - np.mean(proj_0)) ** 2) + \
              np.sum((proj_1 - np.mean(proj_1)) ** 2)

        return float(s_b / (s_w + 1e-10))
