"""
Graph module for graphlens.

Provides the immutable, validated graph value that every analysis and
layout step reads from, plus the adjacency structures they derive from it.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import networkx as nx

from .parser import EdgeSpecParser

Edge = Tuple[int, int]


@dataclass(frozen=True)
class GraphModel:
    """
    Validated graph with integer node ids 1..node_count.

    Edges keep their input order. Undirected graphs still store each
    edge as entered so renderers can draw it the way the user typed it.
    """

    node_count: int
    edges: Tuple[Edge, ...] = ()
    directed: bool = False
    shape: str = "general"
    root: int = 1

    @classmethod
    def parse(
        cls,
        node_count: Union[int, str],
        edge_spec: str,
        directed: bool = False,
        shape: str = "general",
        root: Union[int, str] = 1,
        parser: Optional[EdgeSpecParser] = None,
    ) -> "GraphModel":
        """
        Parse raw form values into a GraphModel.

        Args:
            node_count: Node count as int or integer text.
            edge_spec: Comma-separated "u v" pairs.
            directed: Whether edges are directed.
            shape: "general" or "tree".
            root: Root node, validated in tree mode.
            parser: Parser carrying the configured node limits.

        Returns:
            GraphModel

        Raises:
            ValidationError: If the input is rejected.
        """
        parser = parser or EdgeSpecParser()
        n, edges, root = parser.parse(node_count, edge_spec, shape=shape, root=root)
        return cls(
            node_count=n,
            edges=tuple(edges),
            directed=bool(directed),
            shape=shape,
            root=root,
        )

    def nodes(self) -> List[int]:
        """Return all node ids in ascending order."""
        return list(range(1, self.node_count + 1))

    def _empty_adjacency(self) -> Dict[int, List[int]]:
        return {node: [] for node in range(1, self.node_count + 1)}

    def adjacency(self) -> Dict[int, List[int]]:
        """
        Adjacency in the graph's own orientation.

        Directed graphs keep one entry per edge; undirected graphs get the
        symmetric closure from undirected_adjacency().
        """
        if not self.directed:
            return self.undirected_adjacency()

        adj = self._empty_adjacency()
        for source, target in self.edges:
            adj[source].append(target)
        return adj

    def reverse_adjacency(self) -> Dict[int, List[int]]:
        """Target -> sources, used by the second SCC pass."""
        adj = self._empty_adjacency()
        for source, target in self.edges:
            adj[target].append(source)
        return adj

    def undirected_adjacency(self) -> Dict[int, List[int]]:
        """Symmetric adjacency; a self-loop is listed once, not doubled."""
        adj = self._empty_adjacency()
        for source, target in self.edges:
            adj[source].append(target)
            if source != target:
                adj[target].append(source)
        return adj

    def has_edge(self, source: int, target: int) -> bool:
        """Check for an edge, ignoring order when undirected."""
        if (source, target) in self.edges:
            return True
        return not self.directed and (target, source) in self.edges

    def serialize_edges(self) -> str:
        """Render the edges back to the "u v, u v" input format."""
        return ", ".join(f"{source} {target}" for source, target in self.edges)

    def to_networkx(self) -> nx.Graph:
        """
        Build a networkx graph with the same nodes and edges.

        Returns a MultiDiGraph or MultiGraph so parallel edges survive.
        """
        graph = nx.MultiDiGraph() if self.directed else nx.MultiGraph()
        graph.add_nodes_from(self.nodes())
        graph.add_edges_from(self.edges)
        return graph


def create_graph(
    node_count: int, edges: List[Edge], directed: bool = False
) -> GraphModel:
    """
    Create a GraphModel from already-parsed edges.

    The edges still go through range validation.

    Args:
        node_count: Number of nodes.
        edges: List of (source, target) tuples.
        directed: Whether edges are directed.

    Returns:
        GraphModel
    """
    parser = EdgeSpecParser()
    n = parser.parse_node_count(node_count)
    parser.check_range(n, edges)
    return GraphModel(node_count=n, edges=tuple(edges), directed=directed)
