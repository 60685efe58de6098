"""
Scene metrics - how well a scene's classifier separates its own points.

Classification Metrics:
- Confusion Matrix
- Accuracy
- Per-scene report (counts, accuracy, boundary summary)

All metrics are implemented with NumPy only.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from synthetic import class_counts, points_to_arrays


# =============================================================================
# CLASSIFICATION METRICS
# =============================================================================

def confusion_matrix(y_true: np.ndarray, y_pred: np.ndarray,
                     n_classes: Optional[int] = None) -> np.ndarray:
    """
    Compute confusion matrix.

    Parameters
    ----------
    y_true : np.ndarray
        Ground truth labels.
    y_pred : np.ndarray
        Predicted labels.
    n_classes : int, optional
        Number of classes. If None, inferred from data.

    Returns
    -------
    np.ndarray
        Matrix of shape (n_classes, n_classes); row i, column j counts
        samples of true class i predicted as class j.

    Example
    -------
    >>> confusion_matrix([0, 0, 1, 2], [0, 1, 1, 2])
    array([[1, 1, 0],
           [0, 1, 0],
           [0, 0, 1]])
    """
    y_true = np.asarray(y_true, dtype=np.int64).ravel()
    y_pred = np.asarray(y_pred, dtype=np.int64).ravel()

    if len(y_true) != len(y_pred):
        raise ValueError(f"Length mismatch: {len(y_true)} labels vs {len(y_pred)} predictions")

    if n_classes is None:
        n_classes = int(max(y_true.max(initial=-1), y_pred.max(initial=-1))) + 1

    cm = np.zeros((n_classes, n_classes), dtype=np.int64)
    np.add.at(cm, (y_true, y_pred), 1)
    return cm


def accuracy_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Fraction of predictions equal to the ground truth.

    Returns 0.0 for empty input.
    """
    y_true = np.asarray(y_true).ravel()
    y_pred = np.asarray(y_pred).ravel()

    if len(y_true) == 0:
        return 0.0

    return float(np.mean(y_true == y_pred))


def format_confusion_matrix(cm: np.ndarray, title: str = "Confusion Matrix") -> str:
    """ASCII rendering of a confusion matrix (rows = actual)."""
    n_classes = cm.shape[0]
    names = [f"C{i}" for i in range(n_classes)]
    width = max(len(str(int(np.max(cm)))) if cm.size else 1, 4)

    header = "actual\\pred " + " ".join(f"{n:>{width}}" for n in names)
    lines = [title, "=" * len(header), header, "-" * len(header)]
    for i, name in enumerate(names):
        row = " ".join(f"{int(cm[i, j]):>{width}}" for j in range(n_classes))
        lines.append(f"{name:>11} {row}")
    lines.append("=" * len(header))
    return "\n".join(lines)


# =============================================================================
# SCENE REPORT
# =============================================================================

@dataclass
class SceneReport:
    """Summary of one generated scene."""
    name: str
    n_points: int
    class_counts: Dict[int, int]
    accuracy: float
    confusion: np.ndarray
    boundary: Optional[dict] = None
    segments: List[dict] = field(default_factory=list)
    parameter: Optional[object] = None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'n_points': self.n_points,
            'class_counts': {str(k): v for k, v in self.class_counts.items()},
            'accuracy': self.accuracy,
            'confusion': self.confusion.tolist(),
            'boundary': self.boundary,
            'segments': self.segments,
            'parameter': self.parameter,
        }


def scene_report(scene) -> SceneReport:
    """
    Evaluate `scene.classify` on the scene's own points.

    Parameters
    ----------
    scene : zoo.Scene
        Generated scene.

    Returns
    -------
    SceneReport
    """
    X, y = points_to_arrays(scene.points)
    y_pred = np.array([scene.classify(px, py) for px, py in X], dtype=np.int64)
    n_classes = int(max(y.max(initial=0), y_pred.max(initial=0))) + 1

    return SceneReport(
        name=scene.name,
        n_points=len(scene.points),
        class_counts=class_counts(scene.points),
        accuracy=accuracy_score(y, y_pred),
        confusion=confusion_matrix(y, y_pred, n_classes),
        boundary=scene.boundary.to_dict() if scene.boundary is not None else None,
        segments=[s.to_dict() for s in scene.segments] if scene.segments else [],
        parameter=scene.parameter,
    )
