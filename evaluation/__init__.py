"""
Evaluation module for the classifier zoo.

Provides:
- Scene metrics: confusion matrix, accuracy, per-scene report
- Diagrams: matplotlib rendering of points, regions and boundaries
"""

from .metrics import (
    confusion_matrix,
    accuracy_score,
    format_confusion_matrix,
    SceneReport,
    scene_report,
)
from .diagram import DiagramRenderer, render_scene, render_all

__all__ = [
    # Metrics
    'confusion_matrix',
    'accuracy_score',
    'format_confusion_matrix',
    'SceneReport',
    'scene_report',

    # Diagrams
    'DiagramRenderer',
    'render_scene',
    'render_all',
]
