"""
Parser module for graph input.

Handles parsing of the raw form values (node count, edge specification)
into validated integer edges, plus the extra structural checks applied
when the input must describe a tree.
"""

import logging
import re
from collections import deque
from typing import Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

SHAPES = ("general", "tree")


class ValidationError(ValueError):
    """Base class for all user-recoverable input errors."""

    pass


class RangeError(ValidationError):
    """Raised when a node count or node id is out of bounds."""

    pass


class FormatError(ValidationError):
    """Raised when an edge token cannot be parsed."""

    pass


class StructuralError(ValidationError):
    """Raised when a tree input has the wrong edge count, a cycle, or is disconnected."""

    pass


class ConfigConflictError(ValidationError):
    """Raised when requested options contradict the graph orientation or shape."""

    pass


class EdgeSpecParser:
    """Parses and validates the node count and edge list from the input form."""

    # ASCII digits only, no digit-group underscores
    INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

    def __init__(self, max_nodes: int = 50, max_tree_nodes: int = 20):
        self.max_nodes = max_nodes
        self.max_tree_nodes = max_tree_nodes

    def parse_node_count(
        self, node_count: Union[int, str], limit: Optional[int] = None
    ) -> int:
        """
        Convert the raw node count to an int and check its bounds.

        Args:
            node_count: Integer or integer text from the input form.
            limit: Maximum allowed count (defaults to max_nodes).

        Returns:
            The node count.

        Raises:
            RangeError: If the value is not a positive integer or exceeds the limit.
        """
        limit = self.max_nodes if limit is None else limit

        if isinstance(node_count, bool):
            raise RangeError("Number of nodes must be a positive integer")
        if isinstance(node_count, int):
            n = node_count
        else:
            text = str(node_count).strip()
            if not self.INTEGER_PATTERN.fullmatch(text):
                raise RangeError(
                    f"Number of nodes must be a positive integer: {node_count!r}"
                )
            n = int(text)

        if n < 1:
            raise RangeError(f"Number of nodes must be a positive integer: {n}")
        if n > limit:
            raise RangeError(f"Number of nodes exceeds maximum limit of {limit}")
        return n

    def parse_edges(self, edge_spec: str) -> List[Tuple[int, int]]:
        """
        Parse a comma-separated list of whitespace-separated integer pairs.

        Empty segments (doubled or trailing commas) are ignored.

        Args:
            edge_spec: Text such as "1 2, 2 3, 3 1"

        Returns:
            List of (source, target) tuples in input order.

        Raises:
            FormatError: If a segment is not exactly two integers.
        """
        edges: List[Tuple[int, int]] = []
        if not edge_spec or not edge_spec.strip():
            return edges

        for token in edge_spec.split(","):
            stripped = token.strip()
            if not stripped:
                continue

            parts = stripped.split()
            if len(parts) != 2:
                raise FormatError(
                    f"Edge '{stripped}' must be two node numbers separated by a space"
                )
            if not all(self.INTEGER_PATTERN.fullmatch(part) for part in parts):
                raise FormatError(f"Edge '{stripped}' contains a non-integer node")
            source, target = int(parts[0]), int(parts[1])

            edges.append((source, target))

        return edges

    def check_range(self, node_count: int, edges: List[Tuple[int, int]]) -> None:
        """Raise RangeError naming the first edge with an endpoint outside [1, n]."""
        for source, target in edges:
            for node in (source, target):
                if node < 1 or node > node_count:
                    raise RangeError(
                        f"Invalid node {node} in edge '{source} {target}': "
                        f"nodes must be between 1 and {node_count}"
                    )

    def check_tree(
        self, node_count: int, edges: List[Tuple[int, int]], root: int
    ) -> None:
        """
        Validate that edges form a tree spanning all nodes from root.

        Uses a BFS over the undirected closure. Any visited neighbor that is
        not the parent of the current node closes a cycle.

        Raises:
            RangeError: If root is outside [1, n].
            StructuralError: On wrong edge count, a cycle, or unreachable nodes.
        """
        if root < 1 or root > node_count:
            raise RangeError(f"Root must be between 1 and {node_count}")

        if len(edges) != node_count - 1:
            raise StructuralError(
                f"A tree with {node_count} nodes must have exactly "
                f"{node_count - 1} edges, got {len(edges)}"
            )

        adj: Dict[int, List[int]] = {i: [] for i in range(1, node_count + 1)}
        for u, v in edges:
            adj[u].append(v)
            adj[v].append(u)

        visited = {root}
        queue = deque([(root, 0)])
        count = 0

        while queue:
            node, parent = queue.popleft()
            count += 1

            for neighbor in adj[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, node))
                elif neighbor != parent:
                    raise StructuralError("Cycle detected in the graph")

        if count != node_count:
            raise StructuralError("Not all nodes are reachable from the root")

    def parse_root(
        self, root: Union[int, str, None], node_count: int, required: bool = False
    ) -> int:
        """
        Convert the raw root field to a node id in [1, node_count].

        A blank field falls back to node 1 unless required is set.

        Raises:
            RangeError: If the root is missing when required, not an integer,
                or outside [1, node_count].
        """
        text = "" if root is None else str(root).strip()
        if not text and not required:
            return 1

        if not self.INTEGER_PATTERN.fullmatch(text) or not (
            1 <= int(text) <= node_count
        ):
            raise RangeError(f"Root must be between 1 and {node_count}")
        return int(text)

    def parse(
        self,
        node_count: Union[int, str],
        edge_spec: str,
        shape: str = "general",
        root: Union[int, str] = 1,
    ) -> Tuple[int, List[Tuple[int, int]], int]:
        """
        Parse and validate the full input.

        Args:
            node_count: Raw node count.
            edge_spec: Raw edge specification.
            shape: "general" or "tree".
            root: Root node. Required in tree mode; blank means 1 otherwise.

        Returns:
            (node_count, edges, root)

        Raises:
            ValidationError: Any subclass describing the first problem found.
        """
        if shape not in SHAPES:
            raise ConfigConflictError(
                f"Unknown graph shape '{shape}': expected one of {', '.join(SHAPES)}"
            )

        limit = self.max_tree_nodes if shape == "tree" else self.max_nodes
        n = self.parse_node_count(node_count, limit)
        edges = self.parse_edges(edge_spec)
        self.check_range(n, edges)

        root = self.parse_root(root, n, required=shape == "tree")

        if shape == "tree":
            self.check_tree(n, edges, root)

        logger.debug("Parsed %d nodes and %d edges (%s)", n, len(edges), shape)
        return n, edges, root
