"""
Multinomial (softmax) classifier with fixed weight vectors.

Each class k has a weight vector [bias, w1, w2] and scores a point by

    s_k(x, y) = bias_k + w1_k * (x - cx) + w2_k * (y - cy)

where (cx, cy) is the domain centre. Probabilities come from a
numerically stable softmax; the predicted class is the arg-max.
Pairwise boundaries are the lines s_i = s_j, clipped to the domain.
"""

from itertools import combinations
from typing import List, Sequence, Tuple

import numpy as np

from config import COEF_EPSILON, DOMAIN_CENTER
from .geometry import Domain, Segment, clip_segment


def stable_softmax(Z: np.ndarray) -> np.ndarray:
    """Softmax along the last axis, shifting by the max to avoid overflow."""
    Z = np.asarray(Z, dtype=np.float64)
    exp_Z = np.exp(Z - np.max(Z, axis=-1, keepdims=True))
    return exp_Z / np.sum(exp_Z, axis=-1, keepdims=True)


class SoftmaxClassifier:
    """
    Softmax scoring over a fixed weight table.

    Attributes:
        weights: Array (n_classes, 3) of [bias, w1, w2]
        center: Point the features are centred on
    """

    def __init__(self, weights: Sequence[Sequence[float]],
                 center: Tuple[float, float] = DOMAIN_CENTER):
        """
        Initialize the classifier.

        Args:
            weights: One [bias, w1, w2] row per class
            center: Centre subtracted from (x, y) before scoring
        """
        W = np.array(weights, dtype=np.float64)
        if W.ndim != 2 or W.shape[1] != 3 or W.shape[0] < 2:
            raise ValueError(f"Expected weights of shape (n_classes >= 2, 3), got {W.shape}")
        self.weights = W
        self.center = (float(center[0]), float(center[1]))

    @property
    def n_classes(self) -> int:
        return self.weights.shape[0]

    def scores(self, x: float, y: float) -> np.ndarray:
        """Raw linear score of every class at (x, y)."""
        cx, cy = self.center
        W = self.weights
        return W[:, 0] + W[:, 1] * (x - cx) + W[:, 2] * (y - cy)

    def predict_proba(self, x: float, y: float) -> np.ndarray:
        """Class probabilities at (x, y)."""
        return stable_softmax(self.scores(x, y))

    def classify(self, x: float, y: float) -> int:
        """Arg-max probability; the earlier class wins ties."""
        probs = self.predict_proba(x, y)
        best = 0
        for k in range(1, len(probs)):
            if probs[k] > probs[best]:
                best = k
        return best

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Vectorized classify over rows of X."""
        X = np.asarray(X, dtype=np.float64)
        cx, cy = self.center
        Z = self.weights[:, 0] + np.outer(X[:, 0] - cx, self.weights[:, 1]) + \
            np.outer(X[:, 1] - cy, self.weights[:, 2])
        return np.argmax(stable_softmax(Z), axis=1)

    def pair_boundary(self, a: int, b: int, domain: Domain):
        """
        The line s_a = s_b inside `domain`.

        With db = bias_a - bias_b and dw1, dw2 the weight differences:
            db + dw1*(x - cx) + dw2*(y - cy) = 0
        Solved for y when dw2 is non-zero, otherwise the vertical line
        x = cx - db/dw1. Identical weight rows give no boundary.

        Returns:
            Segment, or None
        """
        cx, cy = self.center
        db, dw1, dw2 = self.weights[a] - self.weights[b]

        if abs(dw2) > COEF_EPSILON:
            x_start, x_end = domain.x_min, domain.x_max
            y_start = cy - (db + dw1 * (x_start - cx)) / dw2
            y_end = cy - (db + dw1 * (x_end - cx)) / dw2
            return clip_segment(x_start, y_start, x_end, y_end, domain, (a, b))

        if abs(dw1) > COEF_EPSILON:
            xv = cx - db / dw1
            if domain.x_min <= xv <= domain.x_max:
                return Segment(float(xv), domain.y_min, float(xv), domain.y_max, (a, b))

        return None

    def boundary_segments(self, domain: Domain) -> List[Segment]:
        """Clipped boundary for every class pair (i < j), in pair order."""
        segments = []
        for a, b in combinations(range(self.n_classes), 2):
            seg = self.pair_boundary(a, b, domain)
            if seg is not None:
                segments.append(seg)
        return segments

    def to_dict(self) -> dict:
        return {'W': self.weights.tolist(), 'center': list(self.center)}
