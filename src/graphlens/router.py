"""
Edge routing module for graphlens.

Turns each edge into a drawable path in surface coordinates:
- Straight line when nothing is in the way
- Quadratic curve when the straight segment would cross another node
- Small circle for self-loops
- Two-stroke arrowheads for directed graphs
"""

import logging
import math
from typing import Dict, List, Optional, Set, Tuple

from .config import VisualizerConfig
from .graph import GraphModel
from .models import EdgeInstruction, EdgeStyle, PathType, Point, Segment

logger = logging.getLogger(__name__)


def unit(dx: float, dy: float) -> Optional[Point]:
    """Normalize (dx, dy); None for a zero-length vector."""
    length = math.hypot(dx, dy)
    if length == 0:
        return None
    return dx / length, dy / length


def segment_hits_circle(p0: Point, p1: Point, center: Point, radius: float) -> bool:
    """
    Check whether segment p0-p1 enters the circle.

    Solves |p0 + t * (p1 - p0) - center|^2 = radius^2 for t. The segment
    touches the circle if a root lies in [0, 1], or if the roots straddle
    the segment (both endpoints inside).
    """
    dx, dy = p1[0] - p0[0], p1[1] - p0[1]
    fx, fy = p0[0] - center[0], p0[1] - center[1]

    a = dx * dx + dy * dy
    c = fx * fx + fy * fy - radius * radius
    if a == 0:
        return c <= 0

    b = 2 * (fx * dx + fy * dy)
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return False

    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    if 0 <= t1 <= 1 or 0 <= t2 <= 1:
        return True
    return t1 < 0 < 1 < t2


class EdgeRouter:
    """
    Routes edges between positioned nodes.

    Attributes:
        config: Buffer, curve and arrow constants.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()

    def route(
        self,
        model: GraphModel,
        centers: Dict[int, Point],
        radii: Dict[int, float],
        bridges: Optional[Set[Tuple[int, int]]] = None,
    ) -> List[EdgeInstruction]:
        """
        Route every edge of model.

        Args:
            model: The graph.
            centers: Node id -> surface position.
            radii: Node id -> surface radius.
            bridges: Bridges as (min, max) pairs, for style tagging.

        Returns:
            One EdgeInstruction per edge, in input order.
        """
        bridges = bridges or set()
        routes: List[EdgeInstruction] = []
        curved = 0

        for source, target in model.edges:
            if source == target:
                route = self.route_self_loop(
                    source, centers[source], radii[source], model.directed
                )
            else:
                bend = self.is_obstructed(source, target, centers, radii) or (
                    model.directed and (target, source) in model.edges
                )
                route = self.route_edge(
                    source,
                    target,
                    centers[source],
                    centers[target],
                    radii[target],
                    curved=bend,
                    directed=model.directed,
                )
                curved += bend

            if (min(source, target), max(source, target)) in bridges:
                route.style = EdgeStyle.BRIDGE
            routes.append(route)

        logger.debug("Routed %d edges (%d curved)", len(routes), curved)
        return routes

    def is_obstructed(
        self,
        source: int,
        target: int,
        centers: Dict[int, Point],
        radii: Dict[int, float],
    ) -> bool:
        """True if the straight segment passes within radius + buffer of a third node."""
        p0, p1 = centers[source], centers[target]
        for node_id, center in centers.items():
            if node_id in (source, target):
                continue
            if segment_hits_circle(p0, p1, center, radii[node_id] + self.config.buffer):
                return True
        return False

    def curve_control(self, p0: Point, p1: Point) -> Point:
        """
        Control point for a quadratic curve from p0 to p1.

        The segment midpoint pushed along the left-hand normal by an offset
        proportional to the segment length, capped at curve_max_offset.
        """
        dx, dy = p1[0] - p0[0], p1[1] - p0[1]
        length = math.hypot(dx, dy)
        mid_x, mid_y = (p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2
        if length == 0:
            return mid_x, mid_y

        offset = min(length * self.config.curve_ratio, self.config.curve_max_offset)
        return mid_x - dy / length * offset, mid_y + dx / length * offset

    def arrow_strokes(self, target: Point, direction: Point, gap: float) -> List[Segment]:
        """
        Arrowhead for travel along direction ending at target.

        The tip sits gap back from target; each stroke leaves the tip at
        +/- arrow_angle from the reversed direction.
        """
        heading = unit(*direction)
        if heading is None:
            return []

        tip = (target[0] - heading[0] * gap, target[1] - heading[1] * gap)
        back = math.atan2(-heading[1], -heading[0])
        length = self.config.arrow_length
        strokes = []
        for angle in (back + self.config.arrow_angle, back - self.config.arrow_angle):
            strokes.append(
                (tip, (tip[0] + length * math.cos(angle), tip[1] + length * math.sin(angle)))
            )
        return strokes

    def route_edge(
        self,
        source: int,
        target: int,
        start: Point,
        end: Point,
        target_radius: float,
        curved: bool = False,
        directed: bool = False,
    ) -> EdgeInstruction:
        """Route a non-loop edge as a line or a quadratic curve."""
        route = EdgeInstruction(
            source=source,
            target=target,
            path=PathType.QUADRATIC if curved else PathType.LINE,
            start=start,
            end=end,
        )

        if curved:
            route.control = self.curve_control(start, end)
            # Tangent at t=1 of a quadratic Bezier: 2 * (P2 - P1)
            direction = (
                2 * (end[0] - route.control[0]),
                2 * (end[1] - route.control[1]),
            )
        else:
            direction = (end[0] - start[0], end[1] - start[1])

        if directed:
            route.arrow = self.arrow_strokes(
                end, direction, target_radius + self.config.arrow_gap
            )
        return route

    def route_self_loop(
        self, node: int, center: Point, radius: float, directed: bool = False
    ) -> EdgeInstruction:
        """
        Self-loop: a small circle sitting on top of the node.

        When directed, the arrow sits on the loop's right-most point, pointing
        down (clockwise travel on screen).
        """
        loop_radius = radius * self.config.loop_radius_ratio
        loop_center = (center[0], center[1] - radius)
        route = EdgeInstruction(
            source=node,
            target=node,
            path=PathType.LOOP,
            start=center,
            end=center,
            loop_center=loop_center,
            loop_radius=loop_radius,
        )

        if directed:
            tip = (loop_center[0] + loop_radius, loop_center[1])
            route.arrow = self.arrow_strokes(tip, (0.0, 1.0), 0.0)
        return route
