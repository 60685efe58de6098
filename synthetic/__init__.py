"""
Synthetic data module for the classifier zoo.

Provides deterministic scene data:
- LCGRandom: seeded uniform / Gaussian stream
- ClusterSpec, Point: Gaussian cluster description and labeled sample
- sample_clusters: clamped, rounded sampling of a list of clusters
"""

from .rng import LCGRandom, ConfigurationError
from .clusters import (
    Point,
    ClusterSpec,
    sample_clusters,
    points_to_arrays,
    class_counts,
    clamp_round,
)

__all__ = [
    'LCGRandom',
    'ConfigurationError',
    'Point',
    'ClusterSpec',
    'sample_clusters',
    'points_to_arrays',
    'class_counts',
    'clamp_round',
]
