"""
Closed-form 2x2 linear algebra used by the discriminant solvers.

All inverses are explicit:
    [[a, b], [c, d]]^-1 = 1/(ad - bc) * [[d, -b], [-c, a]]

A determinant within DET_EPSILON of zero is reported as a
DegenerateMatrixError instead of being divided through.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from config import DET_EPSILON


class DegenerateMatrixError(ValueError):
    """Raised for singular or non positive-definite 2x2 matrices."""


def as_matrix2(matrix) -> np.ndarray:
    """Coerce to a float (2, 2) array."""
    M = np.array(matrix, dtype=np.float64)
    if M.shape != (2, 2):
        raise ValueError(f"Expected a 2x2 matrix, got shape {M.shape}")
    return M


def det2(matrix) -> float:
    """Determinant ad - bc."""
    M = as_matrix2(matrix)
    return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])


def inv2(matrix, eps: float = DET_EPSILON) -> np.ndarray:
    """
    Closed-form 2x2 inverse.

    Args:
        matrix: 2x2 matrix
        eps: Smallest |det| accepted

    Returns:
        Inverse matrix (2, 2)

    Raises:
        DegenerateMatrixError: If |det| <= eps
    """
    M = as_matrix2(matrix)
    det = M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0]
    if not math.isfinite(det) or abs(det) <= eps:
        raise DegenerateMatrixError(f"Matrix is singular (det={det:.3e})")
    return np.array([
        [M[1, 1] / det, -M[0, 1] / det],
        [-M[1, 0] / det, M[0, 0] / det],
    ])


def check_positive_definite(matrix, eps: float = DET_EPSILON) -> np.ndarray:
    """
    Validate a 2x2 covariance (leading minor and determinant positive).

    Returns:
        The matrix as an array
    """
    M = as_matrix2(matrix)
    det = det2(M)
    if M[0, 0] <= 0 or det <= eps:
        raise DegenerateMatrixError(
            f"Covariance {M.tolist()} is not positive definite (det={det:.3e})"
        )
    return M


def mahalanobis_sq(point: Sequence[float], mean: Sequence[float],
                   precision: np.ndarray) -> float:
    """
    Squared Mahalanobis distance d^T P d with P = Sigma^-1.

    Args:
        point: (x, y)
        mean: (mx, my)
        precision: Inverse covariance

    Returns:
        d^T P d
    """
    dx = point[0] - mean[0]
    dy = point[1] - mean[1]
    return float(dx * (precision[0, 0] * dx + precision[0, 1] * dy) +
                 dy * (precision[1, 0] * dx + precision[1, 1] * dy))


def normalize2(vx: float, vy: float) -> Tuple[float, float]:
    """Scale (vx, vy) to unit length."""
    length = math.sqrt(vx * vx + vy * vy)
    if length <= DET_EPSILON:
        raise DegenerateMatrixError("Cannot normalize a zero-length vector")
    return vx / length, vy / length
