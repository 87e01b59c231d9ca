"""
Data models for graph layout and rendering.

This module contains the dataclasses shared between the layout engine,
the edge router and whatever draws the result. The draw instructions are
declarative: they describe what to draw in surface coordinates and leave
every drawing call to the rendering collaborator.

Classes:
    Node: A laid-out node in model coordinates.
    ViewState: Zoom factor and pan offset of the view.
    PathType: Shape of an edge path.
    EdgeStyle: Style class of an edge (bridge or normal).
    NodeInstruction: Draw instruction for one node.
    EdgeInstruction: Draw instruction for one edge.
    Scene: Everything needed to draw one frame.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


@dataclass
class Node:
    """
    A node placed by the layout engine.

    Position is in model coordinates and only changes when the node is
    dragged. The on-screen radius is radius * zoom, computed per frame.

    Attributes:
        node_id: Node number, 1-based.
        x: Model x coordinate.
        y: Model y coordinate.
        radius: Display radius at zoom 1.0.
        group: Index of the node's SCC, if components were computed.
    """

    node_id: int
    x: float = 0.0
    y: float = 0.0
    radius: float = 20.0
    group: Optional[int] = None


@dataclass
class ViewState:
    """Zoom factor and pan offset applied on top of model coordinates."""

    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0


class PathType(Enum):
    """How an edge is drawn."""

    LINE = "line"
    QUADRATIC = "quadratic"
    LOOP = "loop"


class EdgeStyle(Enum):
    """Style class of an edge; colours and widths belong to the renderer."""

    NORMAL = "normal"
    BRIDGE = "bridge"


@dataclass
class NodeInstruction:
    """Draw a filled circle with a centred label."""

    node_id: int
    x: float
    y: float
    radius: float
    fill: str
    label: str = ""


@dataclass
class EdgeInstruction:
    """
    Draw one edge.

    Attributes:
        source: Source node id.
        target: Target node id.
        path: LINE uses start/end, QUADRATIC adds control, LOOP uses
            loop_center/loop_radius.
        style: NORMAL or BRIDGE.
        start: Path start in surface coordinates.
        end: Path end in surface coordinates.
        control: Quadratic control point (QUADRATIC only).
        loop_center: Centre of the self-loop circle (LOOP only).
        loop_radius: Radius of the self-loop circle (LOOP only).
        arrow: Arrowhead strokes, empty for undirected graphs.
    """

    source: int
    target: int
    path: PathType
    style: EdgeStyle = EdgeStyle.NORMAL
    start: Point = (0.0, 0.0)
    end: Point = (0.0, 0.0)
    control: Optional[Point] = None
    loop_center: Optional[Point] = None
    loop_radius: float = 0.0
    arrow: List[Segment] = field(default_factory=list)


@dataclass
class Scene:
    """
    A complete frame.

    Attributes:
        width: Drawing area width.
        height: Drawing area height.
        zoom: Zoom factor used to build this frame.
        pan: Pan offset used to build this frame.
        nodes: Node draw instructions, in id order.
        edges: Edge draw instructions, in input order.
        directed: Whether the graph is directed.
        bridges: Bridges found, as (min, max) pairs.
        components: SCCs found, index-aligned with node group numbers.
    """

    width: float
    height: float
    zoom: float = 1.0
    pan: Point = (0.0, 0.0)
    nodes: List[NodeInstruction] = field(default_factory=list)
    edges: List[EdgeInstruction] = field(default_factory=list)
    directed: bool = False
    bridges: Set[Tuple[int, int]] = field(default_factory=set)
    components: List[List[int]] = field(default_factory=list)
