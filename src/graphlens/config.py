"""
Configuration for graph analysis, layout and routing.

All tunable constants live in VisualizerConfig so layout and routing
math never reads hidden globals.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class VisualizerConfig:
    """
    Tunables shared by the parser, layout engine and edge router.

    Attributes:
        max_nodes: Largest node count accepted for general graphs.
        max_tree_nodes: Largest node count accepted in tree mode.
        node_radius: Display radius of a node at zoom 1.0.
        min_radius_spacing: Node diameters' worth of arc kept between
            neighbors on the circle; drives the radius lower bound.
        phase: Angle of node 1 on the circle (radians, screen coordinates).
        level_gap: Vertical distance between tree levels.
        layered_radius_ratio: Largest node radius in layered mode as a fraction
            of the row gap or the tightest column spacing.
        zoom_steps: (max_count, zoom) pairs for the default zoom step function.
        zoom_floor: Default zoom for counts above every step.
        zoom_step: Multiplier applied per scroll tick.
        zoom_min: Lower clamp for interactive zoom.
        zoom_max: Upper clamp for interactive zoom.
        buffer: Clearance added to a node radius when testing obstruction.
        curve_ratio: Curve offset as a fraction of segment length.
        curve_max_offset: Cap on the curve offset.
        arrow_gap: Distance between the arrow tip and the target's rim.
        arrow_length: Length of each arrowhead stroke.
        arrow_angle: Angle between each stroke and the reversed direction.
        loop_radius_ratio: Self-loop radius as a fraction of the node radius.
        default_fill: Node fill when no SCC colouring applies.
    """

    max_nodes: int = 50
    max_tree_nodes: int = 20
    node_radius: float = 20.0
    min_radius_spacing: float = 2.5
    phase: float = -math.pi / 2
    level_gap: float = 120.0
    layered_radius_ratio: float = 0.4
    zoom_steps: Tuple[Tuple[int, float], ...] = (
        (10, 1.0),
        (20, 0.85),
        (30, 0.7),
        (40, 0.6),
    )
    zoom_floor: float = 0.5
    zoom_step: float = 1.1
    zoom_min: float = 0.2
    zoom_max: float = 3.0
    buffer: float = 5.0
    curve_ratio: float = 0.2
    curve_max_offset: float = 60.0
    arrow_gap: float = 2.0
    arrow_length: float = 10.0
    arrow_angle: float = math.pi / 6
    loop_radius_ratio: float = 0.6
    default_fill: str = "#2e7d32"

    def __post_init__(self):
        if self.max_nodes < 1 or self.max_tree_nodes < 1:
            raise ValueError("max_nodes and max_tree_nodes must be positive")
        if self.node_radius <= 0:
            raise ValueError("node_radius must be positive")
        if not 0 < self.layered_radius_ratio <= 0.5:
            raise ValueError("layered_radius_ratio must be in (0, 0.5]")
        if not 0 < self.zoom_min <= self.zoom_max:
            raise ValueError("zoom bounds must satisfy 0 < zoom_min <= zoom_max")
        if self.zoom_step <= 1:
            raise ValueError("zoom_step must be greater than 1")
        if self.zoom_floor <= 0:
            raise ValueError("zoom_floor must be positive")
        counts = [count for count, _ in self.zoom_steps]
        if counts != sorted(counts):
            raise ValueError("zoom_steps must be ordered by node count")
