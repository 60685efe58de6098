"""
Hyperparameter-driven linear boundaries.

Implements:
- RegularizedLogistic: coefficients shrink smoothly with the inverse
  regularization strength C
- BoundaryTable: exact boundaries per discrete hyperparameter value
  (ridge alpha), with a documented fallback entry
- EpochSchedule: one boundary snapshot per training epoch (perceptron)
- sigmoid_curve: the logistic link for side charts
"""

import logging
import math
from typing import Callable, Dict, List, Mapping, Sequence, Tuple, Union

from config import DOMAIN_CENTER
from synthetic import ConfigurationError
from .geometry import LinearBoundary

logger = logging.getLogger(__name__)

ClassifyFn = Callable[[float, float], int]


class RegularizedLogistic:
    """
    Logistic-regression boundary as a function of C.

    Higher C = less regularization = steeper coefficients:
        scale = 1 - 1 / (1 + C)        (0 at C = 0, -> 1 as C grows)
        w1 = base_w1 * scale
        w2 = base_w2 * scale
        w0 = -(w1 * px + w2 * py)      (line passes through the pivot)
    """

    def __init__(self, base_w1: float = 2.0, base_w2: float = -1.0,
                 pivot: Tuple[float, float] = DOMAIN_CENTER):
        """
        Initialize the boundary family.

        Args:
            base_w1: x coefficient as C -> infinity
            base_w2: y coefficient as C -> infinity
            pivot: Point every boundary passes through
        """
        self.base_w1 = base_w1
        self.base_w2 = base_w2
        self.pivot = pivot

    @staticmethod
    def scale(C: float) -> float:
        """Coefficient shrinkage factor for C (negative C treated as 0)."""
        if not math.isfinite(C):
            raise ConfigurationError(f"Regularization C must be finite, got {C}")
        if C < 0:
            logger.warning("Regularization C=%s is negative; using C=0", C)
            C = 0.0
        return 1 - 1 / (1 + C)

    def boundary(self, C: float) -> LinearBoundary:
        scale = self.scale(C)
        w1 = self.base_w1 * scale
        w2 = self.base_w2 * scale
        w0 = -(w1 * self.pivot[0] + w2 * self.pivot[1])
        return LinearBoundary(w0, w1, w2)

    def classifier(self, C: float) -> ClassifyFn:
        return self.boundary(C).classify

    def predict_proba(self, x: float, y: float, C: float) -> float:
        """P(class = 1) = sigmoid(w0 + w1*x + w2*y)."""
        return sigmoid(self.boundary(C).decision_function(x, y))


def hyperparameter_key(value: Union[str, int, float]) -> str:
    """
    Canonical string key for a hyperparameter value.

    Integral numbers drop their fractional part so 1, 1.0, "1" and "1.0"
    all map to "1"; other floats use their shortest repr ("0.1", "0.01").
    Non-numeric strings are kept as given.
    """
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return value.strip()
    else:
        number = float(value)
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    return repr(number)


class BoundaryTable:
    """
    Exact boundary per discrete hyperparameter value.

    Unknown keys fall back to the default entry (the same object).
    """

    def __init__(self, entries: Mapping[str, LinearBoundary], default_key: str = "1"):
        """
        Initialize the table.

        Args:
            entries: Boundary per hyperparameter key
            default_key: Entry returned for unrecognized keys
        """
        self.entries: Dict[str, LinearBoundary] = {
            hyperparameter_key(k): v for k, v in entries.items()
        }
        self.default_key = hyperparameter_key(default_key)
        if self.default_key not in self.entries:
            raise ValueError(f"Default key {default_key!r} missing from boundary table")

    @property
    def keys(self) -> List[str]:
        return list(self.entries)

    def boundary(self, value: Union[str, int, float]) -> LinearBoundary:
        key = hyperparameter_key(value)
        entry = self.entries.get(key)
        if entry is None:
            logger.info("No boundary for %r; falling back to %r", key, self.default_key)
            return self.entries[self.default_key]
        return entry

    def classifier(self, value: Union[str, int, float]) -> ClassifyFn:
        return self.boundary(value).classify

    def to_dict(self) -> dict:
        return {k: b.to_dict() for k, b in self.entries.items()}


class EpochSchedule:
    """
    Boundary snapshots of a training run, one per epoch.

    Indices past the last epoch return the converged snapshot; negative
    indices return the first.
    """

    def __init__(self, snapshots: Sequence[LinearBoundary]):
        if not snapshots:
            raise ValueError("Epoch schedule needs at least one snapshot")
        self.snapshots: Tuple[LinearBoundary, ...] = tuple(snapshots)

    def __len__(self) -> int:
        return len(self.snapshots)

    def clamp(self, epoch: int) -> int:
        return max(0, min(int(epoch), len(self.snapshots) - 1))

    def boundary(self, epoch: int) -> LinearBoundary:
        return self.snapshots[self.clamp(epoch)]

    def classifier(self, epoch: int) -> ClassifyFn:
        return self.boundary(epoch).classify

    def to_list(self) -> List[dict]:
        return [b.to_dict() for b in self.snapshots]


def sigmoid(z: float) -> float:
    """Logistic function, clipped to avoid overflow."""
    z = max(-500.0, min(500.0, z))
    return 1 / (1 + math.exp(-z))


def sigmoid_curve(t_min: int = -60, t_max: int = 60,
                  step_divisor: int = 10) -> List[Tuple[float, float]]:
    """(t, sigma(t)) for t = i / step_divisor, i in [t_min, t_max]."""
    return [(i / step_divisor, sigmoid(i / step_divisor)) for i in range(t_min, t_max + 1)]
