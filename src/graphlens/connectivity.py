"""
Bridge detection for undirected graphs.

A bridge is an edge whose removal increases the number of connected
components. Detection is a single depth-first search per connected
component tracking discovery times and low-link values: a tree edge
(u, v) is a bridge exactly when low[v] > disc[u].

The search runs on an explicit stack so deep paths never hit the
interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from .graph import GraphModel
from .parser import ConfigConflictError

logger = logging.getLogger(__name__)

# neighbor, edge index
Incidence = Dict[int, List[Tuple[int, int]]]


@dataclass
class DFSState:
    """Mutable visitation state shared across the DFS roots of one run."""

    disc: Dict[int, int] = field(default_factory=dict)
    low: Dict[int, int] = field(default_factory=dict)
    timer: int = 0

    def visit(self, node: int) -> None:
        self.disc[node] = self.timer
        self.low[node] = self.timer
        self.timer += 1


def build_incidence(model: GraphModel) -> Incidence:
    """
    Undirected adjacency that remembers which input edge each entry came from.

    Skipping the parent by edge index rather than by node id keeps a pair
    of parallel edges from being reported as a bridge.
    """
    incidence: Incidence = {node: [] for node in model.nodes()}
    for index, (source, target) in enumerate(model.edges):
        incidence[source].append((target, index))
        if source != target:
            incidence[target].append((source, index))
    return incidence


def bridges_from(
    start: int,
    incidence: Incidence,
    state: DFSState,
    bridges: Set[Tuple[int, int]],
) -> None:
    """
    Run one DFS tree rooted at start, adding every bridge found to bridges.

    Args:
        start: Unvisited root node.
        incidence: Output of build_incidence().
        state: Discovery/low-link state, updated in place.
        bridges: Result set of (min, max) pairs, updated in place.
    """
    state.visit(start)
    stack: List[Tuple[int, int, Iterator[Tuple[int, int]]]] = [
        (start, -1, iter(incidence[start]))
    ]

    while stack:
        node, parent_edge, neighbors = stack[-1]
        descended = False

        for neighbor, edge_index in neighbors:
            if edge_index == parent_edge:
                continue
            if neighbor in state.disc:
                # Back edge (or self-loop, which changes nothing)
                state.low[node] = min(state.low[node], state.disc[neighbor])
            else:
                state.visit(neighbor)
                stack.append((neighbor, edge_index, iter(incidence[neighbor])))
                descended = True
                break

        if descended:
            continue

        stack.pop()
        if stack:
            parent = stack[-1][0]
            state.low[parent] = min(state.low[parent], state.low[node])
            if state.low[node] > state.disc[parent]:
                bridges.add((min(parent, node), max(parent, node)))


class ConnectivityAnalyzer:
    """Finds bridges in undirected graphs."""

    def analyze(self, model: GraphModel) -> Set[Tuple[int, int]]:
        """
        Find all bridges of an undirected graph.

        Disconnected graphs are handled by starting a new DFS from every
        node still unvisited, in id order.

        Args:
            model: Undirected GraphModel.

        Returns:
            Set of bridges as (min, max) node pairs.

        Raises:
            ConfigConflictError: If the graph is directed.
        """
        if model.directed:
            raise ConfigConflictError("Bridges can only be shown for undirected graphs")

        incidence = build_incidence(model)
        state = DFSState()
        bridges: Set[Tuple[int, int]] = set()

        for node in model.nodes():
            if node not in state.disc:
                bridges_from(node, incidence, state, bridges)

        logger.debug(
            "Bridge detection complete: %d bridges in %d-node graph",
            len(bridges),
            model.node_count,
        )
        return bridges


def find_bridges(model: GraphModel) -> Set[Tuple[int, int]]:
    """Convenience function wrapping ConnectivityAnalyzer.analyze()."""
    return ConnectivityAnalyzer().analyze(model)
