"""
graphlens - bridges, strongly connected components and layouts for small graphs

Parses a node count and an edge list, finds bridges (undirected) or strongly
connected components (directed), lays the nodes out and routes the edges
into a declarative Scene any 2D surface can draw.

Example:
    >>> from graphlens import GraphVisualizer
    >>> visualizer = GraphVisualizer()
    >>> scene = visualizer.load(4, "1 2, 2 3, 3 1, 3 4", show_bridges=True)
    >>> scene.bridges
    {(3, 4)}

Debug Mode Example:
    >>> visualizer.load(3, "1 2, 2 3", show_bridges=True, debug=True)
    >>> print(visualizer.get_trace().summary())
"""

from .colors import ColorAssigner, assign_colors
from .components import ComponentAnalyzer, ComponentResult, find_components
from .config import VisualizerConfig
from .connectivity import ConnectivityAnalyzer, find_bridges
from .generator import GraphVisualizer
from .graph import GraphModel, create_graph
from .layout import LayoutEngine, compute_layout
from .models import (
    EdgeInstruction,
    EdgeStyle,
    Node,
    NodeInstruction,
    PathType,
    Scene,
    ViewState,
)
from .parser import (
    ConfigConflictError,
    EdgeSpecParser,
    FormatError,
    RangeError,
    StructuralError,
    ValidationError,
)
from .png_renderer import PNGRenderer, render_to_png
from .router import EdgeRouter
from .tracer import AnalysisTrace, PipelineStage

__version__ = "0.1.0"

__all__ = [
    # Main API
    "GraphVisualizer",
    "VisualizerConfig",
    # Parsing
    "GraphModel",
    "create_graph",
    "EdgeSpecParser",
    "ValidationError",
    "RangeError",
    "FormatError",
    "StructuralError",
    "ConfigConflictError",
    # Analysis
    "ConnectivityAnalyzer",
    "find_bridges",
    "ComponentAnalyzer",
    "ComponentResult",
    "find_components",
    "ColorAssigner",
    "assign_colors",
    # Layout and routing
    "LayoutEngine",
    "compute_layout",
    "EdgeRouter",
    # Scene
    "Node",
    "ViewState",
    "Scene",
    "NodeInstruction",
    "EdgeInstruction",
    "PathType",
    "EdgeStyle",
    # Output
    "PNGRenderer",
    "render_to_png",
    # Debug/Tracing
    "AnalysisTrace",
    "PipelineStage",
]
