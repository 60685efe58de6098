"""
Classifier Boundary Zoo - Global Configuration

This module contains all configuration constants for scene generation
and diagram rendering.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

# =============================================================================
# PRNG SETTINGS
# =============================================================================
LCG_MULTIPLIER = 16807
LCG_MODULUS = 2147483647  # 2^31 - 1

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================
DET_EPSILON = 1e-12        # |det| below this is a singular 2x2 matrix
COEF_EPSILON = 1e-10       # line coefficient treated as zero
CLIP_EPSILON = 1e-12       # segment parallel to a clipping edge

# =============================================================================
# PLOTTING DOMAIN
# =============================================================================
X_DOMAIN = (0.0, 10.0)
Y_DOMAIN = (0.0, 10.0)
DOMAIN_CENTER = (5.0, 5.0)  # softmax scores are centred here

# Sampling bounds (points are clamped into these, inside the plot domain)
DEFAULT_BOUNDS = (0.2, 9.8)
PERCEPTRON_BOUNDS = (0.5, 9.5)
RIDGE_BOUNDS = (0.3, 9.7)

COORD_DECIMALS = 2

# =============================================================================
# MODEL SEEDS
# =============================================================================
LOGISTIC_SEED = 42
MULTINOMIAL_SEED = 55
QDA_SEED = 66
LDA_SEED = 77
PERCEPTRON_SEED = 88
RIDGE_SEED = 33

# =============================================================================
# DIAGRAM SETTINGS
# =============================================================================
CLASS_COLORS = ['#58a6ff', '#f85149', '#3fb950', '#d29922']
BOUNDARY_COLOR = '#e3b341'
AXIS_COLOR = '#6e7681'
PROJECTION_AXIS_COLOR = '#8b949e'
ACCENT_COLOR = '#58a6ff'

DIAGRAM_WIDTH = 800
DIAGRAM_HEIGHT = 400
DIAGRAM_DPI = 100

X_LABEL = 'Feature x₁'
Y_LABEL = 'Feature x₂'

REGION_RESOLUTION = 50     # cells per axis for the filled-region grid
REGION_OPACITY = 0.12
POINT_RADIUS = 5
CURVE_STEPS = 200          # x samples for curved boundaries

# =============================================================================
# FILE PATHS
# =============================================================================
OUTPUT_DIR = "diagrams"

# =============================================================================
# DATACLASSES FOR CONFIGURATION
# =============================================================================

@dataclass
class DiagramConfig:
    """Canvas configuration shared by every model diagram."""
    width: int = DIAGRAM_WIDTH
    height: int = DIAGRAM_HEIGHT
    dpi: int = DIAGRAM_DPI
    x_domain: Tuple[float, float] = X_DOMAIN
    y_domain: Tuple[float, float] = Y_DOMAIN
    accent_color: str = ACCENT_COLOR
    x_label: str = X_LABEL
    y_label: str = Y_LABEL
    class_colors: List[str] = field(default_factory=lambda: list(CLASS_COLORS))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'width': self.width,
            'height': self.height,
            'xDomain': list(self.x_domain),
            'yDomain': list(self.y_domain),
            'accentColor': self.accent_color,
            'xLabel': self.x_label,
            'yLabel': self.y_label,
        }


@dataclass
class RegionConfig:
    """Filled decision-region configuration."""
    resolution: int = REGION_RESOLUTION
    opacity: float = REGION_OPACITY


@dataclass
class BoundaryStyle:
    """Stroke settings for boundary lines and curves."""
    color: str = BOUNDARY_COLOR
    width: float = 2.0
    dash: Tuple[float, float] = (8, 4)
    curve_steps: int = CURVE_STEPS


def get_default_config():
    """Get default configuration objects."""
    return {
        'diagram': DiagramConfig(),
        'regions': RegionConfig(),
        'boundary': BoundaryStyle(),
    }
