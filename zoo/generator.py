"""
Scene generation: PRNG -> cluster sampler -> boundary solver.

Every call builds a fresh LCGRandom from the model's seed, so scenes
are reproducible and never share state. The solver tag on the
ModelSpec picks how the classifier and boundary are derived.
"""

import copy
import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from config import CURVE_STEPS, REGION_RESOLUTION, DiagramConfig
from discriminants import (
    BoundaryTable,
    Direction,
    Domain,
    EpochSchedule,
    GaussianClass,
    LinearBoundary,
    PooledLinearDiscriminant,
    QuadraticDiscriminant,
    RegularizedLogistic,
    Segment,
    SoftmaxClassifier,
    hyperparameter_key,
    region_grid,
    sigmoid_curve,
)
from synthetic import ConfigurationError, LCGRandom, Point, points_to_arrays, sample_clusters
from .specs import (
    MODEL_SPECS,
    EpochSolver,
    LinearSolver,
    ModelSpec,
    QuadraticSolver,
    ScaledSolver,
    SoftmaxSolver,
    TableSolver,
)

logger = logging.getLogger(__name__)

ClassifyFn = Callable[[float, float], int]
Parameter = Union[None, str, int, float]


@dataclass(frozen=True)
class Scene:
    """
    Everything a renderer needs for one model configuration.

    Exactly one of `boundary` / `segments` is set for linear and
    softmax models; QDA scenes carry only `classify` plus sampled
    curves in `extras`. `direction` is set for LDA only.
    """
    name: str
    title: str
    points: Tuple[Point, ...]
    domain: Domain
    classify: ClassifyFn
    boundary: Optional[LinearBoundary] = None
    segments: Optional[Tuple[Segment, ...]] = None
    direction: Optional[Direction] = None
    comparison_classify: Optional[ClassifyFn] = None
    parameter: Parameter = None
    extras: Mapping[str, Any] = field(default_factory=dict)
    config: DiagramConfig = field(default_factory=DiagramConfig)

    @property
    def n_classes(self) -> int:
        return len({p.label for p in self.points})

    def regions(self, resolution: int = REGION_RESOLUTION):
        """Dense classify grid for filled decision regions."""
        return region_grid(self.classify, self.domain, resolution)

    def to_dict(self, include_regions: bool = False,
                resolution: int = REGION_RESOLUTION) -> dict:
        """Plain-data view of the scene for JSON export."""
        data = {
            'name': self.name,
            'title': self.title,
            'config': self.config.to_dict(),
            'domain': self.domain.to_dict(),
            'parameter': self.parameter,
            'points': [p.to_dict() for p in self.points],
        }
        if self.boundary is not None:
            data['linearBoundary'] = self.boundary.to_dict()
        if self.segments is not None:
            data['segments'] = [s.to_dict() for s in self.segments]
        if self.direction is not None:
            data['direction'] = self.direction.to_dict()
        data['extras'] = dict(self.extras)
        if include_regions:
            data['regions'] = self.regions(resolution).tolist()
        return data


# =============================================================================
# Solver handlers
# =============================================================================

def _numeric_parameter(parameter: Parameter, name: str) -> float:
    """Parse a numeric hyperparameter (CLI values arrive as strings)."""
    try:
        value = float(parameter)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {parameter!r}") from None
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {parameter!r}")
    return value


def _solve_linear(solver: LinearSolver, spec: ModelSpec, points, parameter) -> dict:
    X, y = points_to_arrays(points)
    lda = PooledLinearDiscriminant().fit(X, y)
    return {
        'classify': lda.classify,
        'boundary': lda.boundary_,
        'direction': lda.direction_,
        'extras': {
            'mean0': {'x': float(lda.mean_0_[0]), 'y': float(lda.mean_0_[1])},
            'mean1': {'x': float(lda.mean_1_[0]), 'y': float(lda.mean_1_[1])},
            'Sw': lda.scatter_.tolist(),
            'degenerate': lda.degenerate_,
            'fisherRatio': lda.get_discriminant_ratio(X, y),
        },
    }


def _solve_quadratic(solver: QuadraticSolver, spec: ModelSpec, points, parameter) -> dict:
    qda = QuadraticDiscriminant([
        GaussianClass(mean, cov) for mean, cov in zip(solver.means, solver.covariances)
    ])
    result = {
        'classify': qda.classify,
        'extras': {
            'means': [{'x': m[0], 'y': m[1]} for m in solver.means],
            'curves': [[list(pt) for pt in branch]
                       for branch in qda.boundary_curves(spec.domain, CURVE_STEPS)],
        },
    }
    if solver.shared_covariance is not None:
        shared = QuadraticDiscriminant.with_shared_covariance(solver.means,
                                                              solver.shared_covariance)
        result['comparison_classify'] = shared.classify
        result['extras']['sharedCurves'] = [
            [list(pt) for pt in branch]
            for branch in shared.boundary_curves(spec.domain, CURVE_STEPS)
        ]
    return result


def _solve_softmax(solver: SoftmaxSolver, spec: ModelSpec, points, parameter) -> dict:
    softmax = SoftmaxClassifier(solver.weights, solver.center)
    return {
        'classify': softmax.classify,
        'segments': tuple(softmax.boundary_segments(spec.domain)),
        'extras': {'W': softmax.weights.tolist()},
    }


def _solve_scaled(solver: ScaledSolver, spec: ModelSpec, points, parameter) -> dict:
    C = solver.default_c if parameter is None else _numeric_parameter(parameter, "C")
    logistic = RegularizedLogistic(solver.base_w1, solver.base_w2, solver.pivot)
    boundary = logistic.boundary(C)
    return {
        'classify': boundary.classify,
        'boundary': boundary,
        'parameter': C,
        'extras': {'sigmoidData': [{'t': t, 'sigma': s} for t, s in sigmoid_curve()]},
    }


def _solve_table(solver: TableSolver, spec: ModelSpec, points, parameter) -> dict:
    table = BoundaryTable({k: LinearBoundary(*c) for k, c in solver.entries},
                          solver.default_key)
    key = solver.default_key if parameter is None else parameter
    boundary = table.boundary(key)
    return {
        'classify': boundary.classify,
        'boundary': boundary,
        'parameter': hyperparameter_key(key),
        'extras': {'alphas': table.to_dict()},
    }


def _solve_epochs(solver: EpochSolver, spec: ModelSpec, points, parameter) -> dict:
    schedule = EpochSchedule([LinearBoundary(*c) for c in solver.snapshots])
    default = solver.default_epoch if solver.default_epoch >= 0 else len(schedule) - 1
    requested = default if parameter is None else int(_numeric_parameter(parameter, "epoch"))
    epoch = schedule.clamp(requested)
    boundary = schedule.boundary(epoch)
    return {
        'classify': boundary.classify,
        'boundary': boundary,
        'parameter': epoch,
        'extras': {'epochs': schedule.to_list()},
    }


_SOLVER_HANDLERS = {
    LinearSolver: _solve_linear,
    QuadraticSolver: _solve_quadratic,
    SoftmaxSolver: _solve_softmax,
    ScaledSolver: _solve_scaled,
    TableSolver: _solve_table,
    EpochSolver: _solve_epochs,
}


# =============================================================================
# Public API
# =============================================================================

def available_models() -> List[str]:
    """Names of every registered model, in catalogue order."""
    return list(MODEL_SPECS)


def get_spec(model: Union[str, ModelSpec]) -> ModelSpec:
    """Resolve a model name (or pass a spec through)."""
    if isinstance(model, ModelSpec):
        return model
    spec = MODEL_SPECS.get(str(model).lower())
    if spec is None:
        raise ConfigurationError(
            f"Unknown model {model!r}. Available: {', '.join(available_models())}"
        )
    return spec


def generate(model: Union[str, ModelSpec], parameter: Parameter = None,
             config: Optional[DiagramConfig] = None) -> Scene:
    """
    Generate one scene.

    Args:
        model: Model name or ModelSpec
        parameter: C (logistic), alpha (ridge) or epoch (perceptron);
                   ignored by the other models
        config: Diagram settings attached to the scene

    Returns:
        A new, independent Scene

    Raises:
        ConfigurationError: Unknown model, or a non-numeric / non-finite
            C or epoch
    """
    spec = get_spec(model)
    handler = _SOLVER_HANDLERS.get(type(spec.solver))
    if handler is None:
        raise ConfigurationError(f"No solver for {type(spec.solver).__name__}")

    rng = LCGRandom(spec.seed)
    points = sample_clusters(rng, spec.clusters, spec.bounds)
    logger.debug("%s: sampled %d points with seed %d (%d draws)",
                 spec.name, len(points), spec.seed, rng.draws)

    if parameter is not None and not isinstance(spec.solver, (ScaledSolver, TableSolver, EpochSolver)):
        logger.debug("%s takes no parameter; ignoring %r", spec.name, parameter)

    result = handler(spec.solver, spec, points, parameter)

    return Scene(
        name=spec.name,
        title=spec.title,
        points=tuple(points),
        domain=spec.domain,
        classify=result['classify'],
        boundary=result.get('boundary'),
        segments=result.get('segments'),
        direction=result.get('direction'),
        comparison_classify=result.get('comparison_classify'),
        parameter=result.get('parameter'),
        extras=MappingProxyType(dict(result.get('extras', {}))),
        config=copy.deepcopy(config) if config is not None else DiagramConfig(),
    )


def generate_all(parameters: Optional[Mapping[str, Parameter]] = None,
                 config: Optional[DiagramConfig] = None) -> Dict[str, Scene]:
    """Generate every catalogue model; `parameters` maps name -> parameter."""
    parameters = parameters or {}
    return {
        name: generate(name, parameters.get(name), config)
        for name in available_models()
    }
