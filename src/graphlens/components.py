"""
Strongly connected components for directed graphs (Kosaraju).

Pass one records nodes in DFS finishing order on the forward graph.
Pass two pops that stack and floods the reverse graph; every flood from a
fresh node is one component. Both passes use explicit stacks.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .colors import ColorAssigner
from .graph import GraphModel
from .parser import ConfigConflictError

logger = logging.getLogger(__name__)

Adjacency = Dict[int, List[int]]


@dataclass
class ComponentResult:
    """
    Output of SCC detection.

    Attributes:
        components: Node groups in discovery (stack pop) order.
        colors: One colour per component, index-aligned with components.
        membership: Node id -> component index.
    """

    components: List[List[int]] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    membership: Dict[int, int] = field(default_factory=dict)


def finishing_order(
    start: int, adjacency: Adjacency, visited: Set[int], stack: List[int]
) -> None:
    """Post-order DFS from start, appending each node to stack as it finishes."""
    visited.add(start)
    frames: List[Tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]

    while frames:
        node, neighbors = frames[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                frames.append((neighbor, iter(adjacency[neighbor])))
                break
        else:
            frames.pop()
            stack.append(node)


def collect_component(
    start: int, reverse_adjacency: Adjacency, visited: Set[int]
) -> List[int]:
    """DFS over the reverse graph; returns newly visited nodes in visit order."""
    visited.add(start)
    component = [start]
    pending = [start]

    while pending:
        node = pending.pop()
        for neighbor in reverse_adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                component.append(neighbor)
                pending.append(neighbor)

    return component


def check_partition(components: List[List[int]], node_count: int) -> None:
    """Fail loudly unless components cover 1..node_count exactly once."""
    seen = [node for component in components for node in component]
    assert len(seen) == node_count and set(seen) == set(
        range(1, node_count + 1)
    ), f"SCC partition does not cover nodes 1..{node_count}: {components}"


class ComponentAnalyzer:
    """Finds strongly connected components and colours them."""

    def __init__(self, color_assigner: Optional[ColorAssigner] = None):
        self.color_assigner = color_assigner or ColorAssigner()

    def find_components(self, model: GraphModel) -> List[List[int]]:
        """
        Partition the nodes of a directed graph into SCCs.

        Args:
            model: Directed GraphModel.

        Returns:
            List of components; each node appears in exactly one.

        Raises:
            ConfigConflictError: If the graph is undirected.
        """
        if not model.directed:
            raise ConfigConflictError(
                "Strongly connected components can only be shown for directed graphs"
            )

        adjacency = model.adjacency()
        visited: Set[int] = set()
        stack: List[int] = []
        for node in model.nodes():
            if node not in visited:
                finishing_order(node, adjacency, visited, stack)

        reverse = model.reverse_adjacency()
        visited = set()
        components: List[List[int]] = []
        while stack:
            node = stack.pop()
            if node not in visited:
                components.append(collect_component(node, reverse, visited))

        check_partition(components, model.node_count)
        logger.debug(
            "SCC detection complete: %d components in %d-node graph",
            len(components),
            model.node_count,
        )
        return components

    def analyze(self, model: GraphModel) -> ComponentResult:
        """Find components and assign each a colour."""
        components = self.find_components(model)
        membership = {
            node: index
            for index, component in enumerate(components)
            for node in component
        }
        return ComponentResult(
            components=components,
            colors=self.color_assigner.assign(len(components)),
            membership=membership,
        )


def find_components(model: GraphModel) -> List[List[int]]:
    """Convenience function wrapping ComponentAnalyzer.find_components()."""
    return ComponentAnalyzer().find_components(model)
