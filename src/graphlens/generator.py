"""
Main visualizer module.

Combines parsing, analysis, layout and routing into one session object
that turns raw form input into a declarative Scene and applies pointer
and scroll interactions to it.
"""

import logging
from typing import Dict, Optional, Set, Tuple, Union

from .components import ComponentAnalyzer, ComponentResult
from .config import VisualizerConfig
from .connectivity import ConnectivityAnalyzer
from .graph import GraphModel
from .layout import LayoutEngine
from .models import Node, NodeInstruction, Point, Scene, ViewState
from .parser import ConfigConflictError, EdgeSpecParser, ValidationError
from .png_renderer import render_to_png
from .router import EdgeRouter
from .tracer import AnalysisTrace

logger = logging.getLogger(__name__)


class GraphVisualizer:
    """
    Analyze and lay out small graphs from simple text input.

    Every method runs to completion and leaves the session consistent. A
    failed load raises and keeps the previous graph and view untouched.

    Example:
        >>> visualizer = GraphVisualizer()
        >>> scene = visualizer.load(4, "1 2, 2 3, 3 1, 3 4", show_bridges=True)
        >>> scene.bridges
        {(3, 4)}
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        width: float = 800,
        height: float = 600,
    ):
        """
        Initialize the visualizer.

        Args:
            config: Tunables for parsing, layout and routing.
            width: Drawing area width.
            height: Drawing area height.
        """
        self.config = config or VisualizerConfig()
        self.parser = EdgeSpecParser(
            max_nodes=self.config.max_nodes,
            max_tree_nodes=self.config.max_tree_nodes,
        )
        self.layout_engine = LayoutEngine(self.config, width, height)
        self.router = EdgeRouter(self.config)
        self.connectivity_analyzer = ConnectivityAnalyzer()
        self.component_analyzer = ComponentAnalyzer()

        self.model: Optional[GraphModel] = None
        self.nodes: Dict[int, Node] = {}
        self.bridges: Set[Tuple[int, int]] = set()
        self.components = ComponentResult()
        self._drag_node: Optional[int] = None
        self._drag_offset: Point = (0.0, 0.0)
        self._pan_from: Optional[Point] = None
        self._trace: Optional[AnalysisTrace] = None

    @property
    def view(self) -> ViewState:
        return self.layout_engine.view

    def load(
        self,
        node_count: Union[int, str],
        edge_spec: str,
        directed: bool = False,
        show_bridges: bool = False,
        show_sccs: bool = False,
        shape: str = "general",
        root: Union[int, str] = 1,
        debug: bool = False,
    ) -> Scene:
        """
        Parse, analyze and lay out a new graph, replacing the current one.

        Args:
            node_count: Node count as int or integer text.
            edge_spec: Comma-separated "u v" pairs.
            directed: Whether edges are directed.
            show_bridges: Highlight bridges (undirected only).
            show_sccs: Colour strongly connected components (directed only).
            shape: "general" or "tree".
            root: Root node for tree validation and layered layout.
            debug: Record an AnalysisTrace, available from get_trace().

        Returns:
            Scene for the new graph at its default view.

        Raises:
            ValidationError: If the input or option combination is rejected.
        """
        trace = (
            AnalysisTrace(
                node_count=str(node_count), edge_spec=edge_spec, directed=directed
            )
            if debug
            else None
        )

        try:
            if show_bridges and directed:
                raise ConfigConflictError(
                    "Bridges can only be shown for undirected graphs"
                )
            if show_sccs and not directed:
                raise ConfigConflictError(
                    "Strongly connected components can only be shown for directed graphs"
                )

            model = GraphModel.parse(
                node_count, edge_spec, directed, shape, root, parser=self.parser
            )
        except ValidationError as e:
            logger.info("Rejected graph input: %s", e)
            raise

        if trace:
            trace.add_stage(
                "parse",
                {
                    "node_count": model.node_count,
                    "edges": list(model.edges),
                    "directed": model.directed,
                    "shape": model.shape,
                },
            )

        bridges: Set[Tuple[int, int]] = set()
        components = ComponentResult()
        if show_bridges:
            bridges = self.connectivity_analyzer.analyze(model)
        if show_sccs:
            components = self.component_analyzer.analyze(model)

        if trace:
            trace.add_stage(
                "analysis",
                {
                    "bridges": sorted(bridges),
                    "components": components.components,
                    "colors": components.colors,
                },
            )

        nodes = self.layout_engine.place(model)
        for node_id, group in components.membership.items():
            nodes[node_id].group = group

        # Commit only after every step above succeeded
        self.model = model
        self.nodes = nodes
        self.bridges = bridges
        self.components = components
        self._drag_node = None
        self._pan_from = None
        self.layout_engine.reset_view(model.node_count)

        if trace:
            trace.add_stage(
                "layout",
                {
                    "positions": {n.node_id: (n.x, n.y) for n in nodes.values()},
                    "zoom": self.view.zoom,
                },
            )

        scene = self.scene()

        if trace:
            trace.add_stage(
                "routing",
                {
                    "paths": [
                        (e.source, e.target, e.path.value, e.style.value)
                        for e in scene.edges
                    ]
                },
            )
        self._trace = trace
        return scene

    def get_trace(self) -> Optional[AnalysisTrace]:
        """Trace from the last load(debug=True), or None."""
        return self._trace

    def _require_model(self) -> GraphModel:
        if self.model is None:
            raise RuntimeError("No graph loaded; call load() first")
        return self.model

    def scene(self) -> Scene:
        """Build draw instructions for the current graph and view."""
        model = self._require_model()
        engine = self.layout_engine

        centers: Dict[int, Point] = {}
        radii: Dict[int, float] = {}
        node_instructions = []
        for node_id in sorted(self.nodes):
            node = self.nodes[node_id]
            centers[node_id] = engine.to_surface(node.x, node.y)
            radii[node_id] = engine.scaled_radius(node)

            fill = self.config.default_fill
            if node.group is not None:
                fill = self.components.colors[node.group]

            node_instructions.append(
                NodeInstruction(
                    node_id=node_id,
                    x=centers[node_id][0],
                    y=centers[node_id][1],
                    radius=radii[node_id],
                    fill=fill,
                    label=str(node_id),
                )
            )

        edges = self.router.route(model, centers, radii, self.bridges)

        return Scene(
            width=engine.width,
            height=engine.height,
            zoom=self.view.zoom,
            pan=(self.view.pan_x, self.view.pan_y),
            nodes=node_instructions,
            edges=edges,
            directed=model.directed,
            bridges=set(self.bridges),
            components=[list(c) for c in self.components.components],
        )

    # Interaction

    def scroll(self, delta: float, cursor: Optional[Point] = None) -> Scene:
        """Zoom one step: negative delta zooms in, positive zooms out."""
        self._require_model()
        if delta < 0:
            self.layout_engine.zoom_in(cursor)
        elif delta > 0:
            self.layout_engine.zoom_out(cursor)
        return self.scene()

    def pointer_down(self, x: float, y: float) -> Scene:
        """Grab the node under the pointer, or start panning on empty space."""
        self._require_model()
        node_id = self.layout_engine.hit_test(self.nodes, x, y)
        if node_id is None:
            self._drag_node = None
            self._pan_from = (x, y)
        else:
            node = self.nodes[node_id]
            sx, sy = self.layout_engine.to_surface(node.x, node.y)
            self._drag_node = node_id
            self._drag_offset = (x - sx, y - sy)
            self._pan_from = None
        return self.scene()

    def pointer_move(self, x: float, y: float) -> Scene:
        """Move the grabbed node, or pan the view."""
        self._require_model()
        if self._drag_node is not None:
            self.layout_engine.move_node(
                self.nodes[self._drag_node],
                x - self._drag_offset[0],
                y - self._drag_offset[1],
            )
        elif self._pan_from is not None:
            self.layout_engine.pan_by(x - self._pan_from[0], y - self._pan_from[1])
            self._pan_from = (x, y)
        return self.scene()

    def pointer_up(self) -> Scene:
        self._require_model()
        self._drag_node = None
        self._pan_from = None
        return self.scene()

    def double_click(self) -> Scene:
        """Reset zoom and pan; dragged node positions are kept."""
        model = self._require_model()
        self.layout_engine.reset_view(model.node_count)
        return self.scene()

    def save_png(self, filename: str, **kwargs) -> str:
        """
        Render the current scene to a PNG file.

        Args:
            filename: Output filename (should end in .png)
            **kwargs: Additional parameters for PNGRenderer

        Returns:
            Path to the saved PNG file
        """
        return render_to_png(self.scene(), filename, **kwargs)
