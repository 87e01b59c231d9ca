"""
Layout module for graphlens.

Places nodes in model coordinates and owns the view transform:
- Circular placement for general graphs
- Layered (BFS level) placement for trees, using networkx
- Default zoom derived from node count
- Interactive zoom, pan and node dragging
- Model <-> surface transforms and hit-testing
"""

import logging
import math
from typing import Dict, Optional, Tuple

import networkx as nx

from .config import VisualizerConfig
from .graph import GraphModel
from .models import Node, Point, ViewState

logger = logging.getLogger(__name__)

LAYOUT_MODES = ("circular", "layered")


class LayoutEngine:
    """
    Deterministic node placement plus an interactive view transform.

    The drawing area is passed in explicitly; nothing here knows about any
    particular rendering surface.

    Attributes:
        config: Shared tunables.
        width: Drawing area width.
        height: Drawing area height.
        view: Current zoom and pan.
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        width: float = 800,
        height: float = 600,
    ):
        if width <= 0 or height <= 0:
            raise ValueError("Drawing area width and height must be positive")
        self.config = config or VisualizerConfig()
        self.width = width
        self.height = height
        self.view = ViewState()

    @property
    def center(self) -> Point:
        return self.width / 2, self.height / 2

    def place(self, model: GraphModel, mode: Optional[str] = None) -> Dict[int, Node]:
        """
        Assign model coordinates to every node.

        Args:
            model: Graph to lay out.
            mode: "circular" or "layered"; defaults to layered for trees.

        Returns:
            Dictionary mapping node id to Node.
        """
        if mode is None:
            mode = "layered" if model.shape == "tree" else "circular"
        if mode not in LAYOUT_MODES:
            raise ValueError(
                f"mode must be one of {', '.join(LAYOUT_MODES)}, got {mode!r}"
            )

        if mode == "layered":
            nodes = self._place_layered(model)
        else:
            nodes = self._place_circular(model.node_count)

        logger.debug("Placed %d nodes (%s)", len(nodes), mode)
        return nodes

    def circle_radius(self, node_count: int) -> float:
        """
        Radius of the layout circle.

        Starts at 30% of the smaller dimension and grows with node count so
        neighbours keep some spacing, but never passes 40%.
        """
        smaller = min(self.width, self.height)
        crowded = (
            node_count
            * self.config.node_radius
            * self.config.min_radius_spacing
            / (2 * math.pi)
        )
        return min(0.4 * smaller, max(0.3 * smaller, crowded))

    def _place_circular(self, node_count: int) -> Dict[int, Node]:
        cx, cy = self.center
        radius = self.config.node_radius

        if node_count == 1:
            return {1: Node(1, cx, cy, radius)}

        ring = self.circle_radius(node_count)
        step = 2 * math.pi / node_count
        nodes = {}
        for i in range(1, node_count + 1):
            angle = self.config.phase + (i - 1) * step
            nodes[i] = Node(
                i, cx + ring * math.cos(angle), cy + ring * math.sin(angle), radius
            )
        return nodes

    def _place_layered(self, model: GraphModel) -> Dict[int, Node]:
        """
        One row per BFS level from the root, nodes ordered by id in each row.

        Nodes unreachable from the root (only possible outside tree mode)
        go on one extra row at the bottom. Rows are squeezed to fit the
        height, and the node radius shrinks with the tightest row or column
        spacing so deep or wide trees stay inside the area without touching.
        """
        graph = model.to_networkx().to_undirected(as_view=True)
        layers = [sorted(layer) for layer in nx.bfs_layers(graph, [model.root])]

        reached = {node for layer in layers for node in layer}
        leftover = [node for node in model.nodes() if node not in reached]
        if leftover:
            layers.append(leftover)

        gap = min(self.config.level_gap, self.height / len(layers))
        widest = max(len(layer) for layer in layers)
        radius = min(
            self.config.node_radius,
            self.config.layered_radius_ratio * gap,
            self.config.layered_radius_ratio * self.width / (widest + 1),
        )

        nodes = {}
        for level, layer in enumerate(layers):
            spacing = self.width / (len(layer) + 1)
            for index, node_id in enumerate(layer):
                nodes[node_id] = Node(
                    node_id, spacing * (index + 1), gap / 2 + level * gap, radius
                )
        return nodes

    def default_zoom(self, node_count: int) -> float:
        """Step function of node count, never below the configured floor."""
        for max_count, zoom in self.config.zoom_steps:
            if node_count <= max_count:
                return zoom
        return self.config.zoom_floor

    def reset_view(self, node_count: int) -> ViewState:
        """Restore the default zoom and clear panning; positions are untouched."""
        self.view = ViewState(zoom=self.default_zoom(node_count))
        return self.view

    def zoom_by(self, factor: float, cursor: Optional[Point] = None) -> ViewState:
        """
        Multiply zoom by factor, clamped to [zoom_min, zoom_max].

        When cursor is given the model point under it stays put.
        """
        anchor = self.to_model(*cursor) if cursor is not None else None
        self.view.zoom = min(
            self.config.zoom_max, max(self.config.zoom_min, self.view.zoom * factor)
        )

        if anchor is not None:
            cx, cy = self.center
            self.view.pan_x = cursor[0] - cx - (anchor[0] - cx) * self.view.zoom
            self.view.pan_y = cursor[1] - cy - (anchor[1] - cy) * self.view.zoom
        return self.view

    def zoom_in(self, cursor: Optional[Point] = None) -> ViewState:
        return self.zoom_by(self.config.zoom_step, cursor)

    def zoom_out(self, cursor: Optional[Point] = None) -> ViewState:
        return self.zoom_by(1 / self.config.zoom_step, cursor)

    def pan_by(self, dx: float, dy: float) -> ViewState:
        self.view.pan_x += dx
        self.view.pan_y += dy
        return self.view

    def move_node(self, node: Node, surface_x: float, surface_y: float) -> Node:
        """Drag: put node under the given surface point. Other nodes are untouched."""
        node.x, node.y = self.to_model(surface_x, surface_y)
        return node

    def to_surface(self, x: float, y: float) -> Point:
        """Scale about the area centre, then translate by the pan offset."""
        cx, cy = self.center
        zoom = self.view.zoom
        return (
            cx + (x - cx) * zoom + self.view.pan_x,
            cy + (y - cy) * zoom + self.view.pan_y,
        )

    def to_model(self, surface_x: float, surface_y: float) -> Point:
        """Inverse of to_surface()."""
        cx, cy = self.center
        zoom = self.view.zoom
        return (
            cx + (surface_x - self.view.pan_x - cx) / zoom,
            cy + (surface_y - self.view.pan_y - cy) / zoom,
        )

    def scaled_radius(self, node: Node) -> float:
        return node.radius * self.view.zoom

    def hit_test(
        self, nodes: Dict[int, Node], surface_x: float, surface_y: float
    ) -> Optional[int]:
        """
        Find the node under a surface point.

        Higher ids are drawn later, so they win when nodes overlap.

        Returns:
            Node id, or None if the point is on empty space.
        """
        x, y = self.to_model(surface_x, surface_y)
        for node_id in sorted(nodes, reverse=True):
            node = nodes[node_id]
            if math.hypot(node.x - x, node.y - y) <= node.radius:
                return node_id
        return None


def compute_layout(
    model: GraphModel,
    config: Optional[VisualizerConfig] = None,
    width: float = 800,
    height: float = 600,
) -> Tuple[Dict[int, Node], ViewState]:
    """
    Convenience function: place nodes and derive the default view.

    Returns:
        (nodes, view)
    """
    engine = LayoutEngine(config, width, height)
    nodes = engine.place(model)
    return nodes, engine.reset_view(model.node_count)
