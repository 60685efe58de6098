"""
Model zoo: declarative model specs and the scene generator.

Models: logistic, multinomial, qda, lda, perceptron, ridge.
"""

from .specs import (
    MODEL_SPECS,
    ModelSpec,
    LinearSolver,
    QuadraticSolver,
    SoftmaxSolver,
    ScaledSolver,
    TableSolver,
    EpochSolver,
)
from .generator import Scene, available_models, generate, generate_all, get_spec

__all__ = [
    'MODEL_SPECS',
    'ModelSpec',
    'LinearSolver',
    'QuadraticSolver',
    'SoftmaxSolver',
    'ScaledSolver',
    'TableSolver',
    'EpochSolver',
    'Scene',
    'available_models',
    'generate',
    'generate_all',
    'get_spec',
]
