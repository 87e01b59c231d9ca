"""
Debug tracing for graphlens.

When a graph is loaded with debug=True the visualizer records a snapshot
of every pipeline stage:

1. parse - validated node count and edges
2. analysis - bridges or strongly connected components
3. layout - node positions and default view
4. routing - path type and style chosen for each edge

Usage:
    >>> visualizer = GraphVisualizer()
    >>> visualizer.load(4, "1 2, 2 3, 3 4", show_bridges=True, debug=True)
    >>> trace = visualizer.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("debug_trace.txt")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class AnalysisTrace:
    """
    Complete trace of one load.

    Attributes:
        stages: Pipeline stages in the order they ran
        node_count: Raw node count as given
        edge_spec: Raw edge specification as given
        directed: Orientation flag as given
    """

    stages: List[PipelineStage] = field(default_factory=list)
    node_count: str = ""
    edge_spec: str = ""
    directed: bool = False

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """Add a pipeline stage snapshot."""
        self.stages.append(PipelineStage(name, data.copy()))

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def summary(self) -> str:
        """Short human-readable overview: input and the stages that ran."""
        lines = [
            "=" * 60,
            "ANALYSIS TRACE SUMMARY",
            "=" * 60,
            "",
            f"Nodes: {self.node_count}",
            f"Directed: {self.directed}",
            f"Edges: {repr(self.edge_spec[:100])}"
            f"{'...' if len(self.edge_spec) > 100 else ''}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]
        for stage in self.stages:
            lines.append(f"  {stage.name} ({len(stage.data)} fields)")
        return "\n".join(lines)

    def dump(self) -> str:
        """Summary followed by every stage with its full data."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
