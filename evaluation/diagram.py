"""
Decision-boundary diagrams with matplotlib.

Draws a scene's feature space: filled decision regions, labeled points,
linear boundaries or pairwise segments, curved (quadratic) boundaries
and the LDA projection axis. Figures are built on matplotlib's
object API (no pyplot state), so rendering works headless and each
diagram is independent.
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure

from config import (
    AXIS_COLOR,
    POINT_RADIUS,
    PROJECTION_AXIS_COLOR,
    BoundaryStyle,
    DiagramConfig,
    RegionConfig,
)
from discriminants import Direction, Domain, LinearBoundary, Segment, project_onto, region_grid

logger = logging.getLogger(__name__)


class DiagramRenderer:
    """
    One 2D classification diagram.

    Parameters
    ----------
    config : DiagramConfig, optional
        Canvas size, domain, labels and class palette.
    regions : RegionConfig, optional
        Resolution and opacity of the filled decision regions.
    style : BoundaryStyle, optional
        Stroke for boundary lines and curves.
    """

    def __init__(self, config: Optional[DiagramConfig] = None,
                 regions: Optional[RegionConfig] = None,
                 style: Optional[BoundaryStyle] = None):
        self.config = config or DiagramConfig()
        self.region_config = regions or RegionConfig()
        self.style = style or BoundaryStyle()

        self.domain = Domain(self.config.x_domain[0], self.config.x_domain[1],
                             self.config.y_domain[0], self.config.y_domain[1])

        self.fig = Figure(figsize=(self.config.width / self.config.dpi,
                                   self.config.height / self.config.dpi),
                          dpi=self.config.dpi)
        self.ax = self.fig.add_subplot(1, 1, 1)
        self._setup_axes()

    def _setup_axes(self):
        """Domain limits, faint grid, axis colours and labels."""
        ax = self.ax
        ax.set_xlim(self.domain.x_min, self.domain.x_max)
        ax.set_ylim(self.domain.y_min, self.domain.y_max)
        ax.grid(True, alpha=0.08)
        ax.set_axisbelow(True)

        for spine in ax.spines.values():
            spine.set_color(AXIS_COLOR)
        ax.tick_params(colors=AXIS_COLOR)

        if self.config.x_label:
            ax.set_xlabel(self.config.x_label, color=AXIS_COLOR, fontsize=12)
        if self.config.y_label:
            ax.set_ylabel(self.config.y_label, color=AXIS_COLOR, fontsize=12)

    def _color(self, label: int) -> str:
        colors = self.config.class_colors
        return colors[label % len(colors)]

    # =========================================================================
    # Layers
    # =========================================================================

    def draw_points(self, points: Sequence, radius: float = POINT_RADIUS):
        """Scatter the labeled points, one colour per class."""
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        colors = [self._color(p.label) for p in points]
        scatter = self.ax.scatter(xs, ys, s=(radius * 1.6) ** 2, c=colors,
                                  alpha=0.8, edgecolors='#ffffff', linewidths=1,
                                  zorder=4)
        scatter.set_gid('data-points')
        return scatter

    def draw_regions(self, classify, resolution: Optional[int] = None,
                     opacity: Optional[float] = None):
        """Shade each grid cell with the colour of its predicted class."""
        resolution = resolution or self.region_config.resolution
        opacity = self.region_config.opacity if opacity is None else opacity

        grid = region_grid(classify, self.domain, resolution)
        n_colors = len(self.config.class_colors)
        image = self.ax.imshow(
            grid,
            origin='lower',
            extent=(self.domain.x_min, self.domain.x_max,
                    self.domain.y_min, self.domain.y_max),
            cmap=ListedColormap(self.config.class_colors),
            vmin=0,
            vmax=n_colors - 1,
            alpha=opacity,
            interpolation='nearest',
            aspect='auto',
            zorder=1,
        )
        image.set_gid('region-cells')
        return grid

    def draw_decision_boundary(self, boundary: Union[LinearBoundary, Sequence[Segment]],
                               color: Optional[str] = None, dashed: bool = True):
        """
        Draw a linear boundary w0 + w1*x + w2*y = 0, or a list of segments.

        Returns
        -------
        list of Segment
            What was actually drawn (lines missing the domain are skipped).
        """
        if isinstance(boundary, LinearBoundary):
            seg = boundary.endpoints(self.domain)
            if seg is None:
                logger.warning("Boundary %s does not cross the plot domain", boundary)
            segments = [seg] if seg is not None else []
        else:
            segments = list(boundary)

        for seg in segments:
            self.ax.plot([seg.x1, seg.x2], [seg.y1, seg.y2], **self._stroke(color, dashed))
        return segments

    def draw_quadratic_boundary(self, curves: Sequence[Sequence[Tuple[float, float]]],
                                color: Optional[str] = None, dashed: bool = True):
        """Draw pre-sampled boundary polylines (one per branch)."""
        drawn = 0
        for branch in curves:
            if len(branch) < 2:
                continue
            pts = np.asarray(branch, dtype=np.float64)
            self.ax.plot(pts[:, 0], pts[:, 1], **self._stroke(color, dashed))
            drawn += 1
        return drawn

    def draw_projection(self, points: Sequence, direction: Direction):
        """
        Projection axis through the domain centre, with each point joined
        to its projection on the axis.
        """
        cx, cy = self.domain.center
        length = float(np.hypot(direction.dx, direction.dy))
        ux, uy = direction.dx / length, direction.dy / length
        extent = max(self.domain.x_max - self.domain.x_min,
                     self.domain.y_max - self.domain.y_min)

        self.ax.plot([cx - ux * extent, cx + ux * extent],
                     [cy - uy * extent, cy + uy * extent],
                     color=PROJECTION_AXIS_COLOR, linewidth=1.5,
                     linestyle=(0, (4, 3)), alpha=0.5, zorder=2)

        feet = project_onto(points, direction, (cx, cy))
        for p, (px, py) in zip(points, feet):
            color = self._color(p.label)
            self.ax.plot([p.x, px], [p.y, py], color=color, linewidth=0.8,
                         alpha=0.3, zorder=2)
            self.ax.scatter([px], [py], s=(3.5 * 1.6) ** 2, c=[color],
                            edgecolors='#ffffff', linewidths=0.8, alpha=0.9, zorder=3)
        return feet

    def set_title(self, title: str):
        self.ax.set_title(title, fontsize=13, color=self.config.accent_color)

    def _stroke(self, color: Optional[str], dashed: bool) -> dict:
        style = {
            'color': color or self.style.color,
            'linewidth': self.style.width,
            'alpha': 0.85,
            'zorder': 3,
        }
        if dashed:
            style['linestyle'] = (0, tuple(self.style.dash))
        return style

    def save(self, save_path: str, fmt: Optional[str] = None) -> str:
        """Write the figure (format from the extension unless `fmt` is given)."""
        self.fig.savefig(save_path, format=fmt, bbox_inches='tight')
        logger.debug("Saved diagram to %s", save_path)
        return save_path


def render_scene(scene, save_path: Optional[str] = None,
                 show_regions: bool = True,
                 show_projection: bool = True,
                 show_comparison: bool = False,
                 config: Optional[DiagramConfig] = None) -> Figure:
    """
    Draw a complete scene.

    Parameters
    ----------
    scene : zoo.Scene
        Generated scene.
    save_path : str, optional
        Path to save the figure (.svg or .png).
    show_regions : bool
        Shade the decision regions.
    show_projection : bool
        Draw the projection axis when the scene has a direction (LDA).
    show_comparison : bool
        Draw the shared-covariance boundary too, when the scene has one (QDA).
    config : DiagramConfig, optional
        Overrides the scene's own diagram config.

    Returns
    -------
    matplotlib.figure.Figure
    """
    renderer = DiagramRenderer(config or scene.config)
    renderer.set_title(scene.title)

    if show_regions:
        renderer.draw_regions(scene.classify)

    if scene.boundary is not None:
        renderer.draw_decision_boundary(scene.boundary)
    elif scene.segments is not None:
        renderer.draw_decision_boundary(scene.segments)
    elif 'curves' in scene.extras:
        renderer.draw_quadratic_boundary(scene.extras['curves'])

    if show_comparison and 'sharedCurves' in scene.extras:
        renderer.draw_quadratic_boundary(scene.extras['sharedCurves'],
                                         color=PROJECTION_AXIS_COLOR)

    if show_projection and scene.direction is not None:
        renderer.draw_projection(scene.points, scene.direction)

    renderer.draw_points(scene.points)

    if save_path:
        renderer.save(save_path)

    return renderer.fig


def render_all(scenes, out_dir: str, fmt: str = 'svg') -> List[str]:
    """Render every scene into `out_dir`; returns the written paths."""
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for name, scene in scenes.items():
        path = os.path.join(out_dir, f"{name}.{fmt}")
        render_scene(scene, save_path=path, show_comparison=True)
        paths.append(path)
    return paths
