#!/usr/bin/env python3
"""
Demo script for the graphlens analyzer.

This script walks through bridge detection, strongly connected
components and tree validation, then offers an interactive mode.
"""

import sys

from graphlens import GraphVisualizer, ValidationError


def print_header(title):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def print_input(node_count, edge_spec):
    print("Input:")
    print("------")
    print(f"  Nodes: {node_count}")
    print(f"  Edges: {edge_spec}")


def demo_1():
    """Demo 1: Bridges on a path"""
    print_header("Demo 1: Every Edge of a Path Is a Bridge")
    print_input(4, "1 2, 2 3, 3 4")

    scene = GraphVisualizer().load(4, "1 2, 2 3, 3 4", show_bridges=True)
    print(f"\nBridges: {sorted(scene.bridges)}")


def demo_2():
    """Demo 2: Triangle with a tail"""
    print_header("Demo 2: Triangle With a Tail")
    print_input(4, "1 2, 2 3, 3 1, 3 4")

    scene = GraphVisualizer().load(4, "1 2, 2 3, 3 1, 3 4", show_bridges=True)
    print(f"\nBridges: {sorted(scene.bridges)}")
    for edge in scene.edges:
        print(f"  {edge.source} - {edge.target}: {edge.style.value}")


def demo_3():
    """Demo 3: Strongly connected components"""
    print_header("Demo 3: Two Directed Cycles")
    spec = "1 2, 2 3, 3 1, 4 5, 5 6, 6 4, 3 4"
    print_input(6, spec)

    scene = GraphVisualizer().load(6, spec, directed=True, show_sccs=True)
    fills = {n.node_id: n.fill for n in scene.nodes}
    print(f"\nComponents: {len(scene.components)}")
    for component in scene.components:
        print(f"  {sorted(component)} -> {fills[component[0]]}")


def demo_4():
    """Demo 4: Tree validation"""
    print_header("Demo 4: Tree Validation")

    visualizer = GraphVisualizer()
    for node_count, spec in ((4, "1 2, 1 3, 2 4"), (3, "1 2, 2 3, 1 3")):
        print_input(node_count, spec)
        try:
            visualizer.load(node_count, spec, shape="tree", root=1)
            levels = sorted({n.y for n in visualizer.nodes.values()})
            print(f"\nValid tree with {len(levels)} levels\n")
        except ValidationError as e:
            print(f"\nRejected: {e}\n")


def demo_5():
    """Demo 5: Routing and tracing"""
    print_header("Demo 5: Curves, Self-Loops and the Analysis Trace")
    spec = "1 1, 1 2, 2 1, 2 3"
    print_input(3, spec)

    visualizer = GraphVisualizer()
    visualizer.load(3, spec, directed=True, show_sccs=True, debug=True)
    print()
    print(visualizer.get_trace().summary())
    for source, target, path, style in visualizer.get_trace().get_stage(
        "routing"
    ).data["paths"]:
        print(f"  {source} -> {target}: {path} ({style})")


def interactive_mode():
    """Interactive mode for custom input."""
    print_header("Interactive Mode")

    node_count = input("  Number of nodes: ")
    edge_spec = input("  Edges (e.g. 1 2, 2 3): ")
    directed = input("  Directed? (y/n): ").lower().startswith("y")

    visualizer = GraphVisualizer()
    try:
        scene = visualizer.load(
            node_count,
            edge_spec,
            directed=directed,
            show_bridges=not directed,
            show_sccs=directed,
        )
    except ValidationError as e:
        print(f"Error: {e}")
        return

    if directed:
        print(f"\nComponents: {[sorted(c) for c in scene.components]}")
    else:
        print(f"\nBridges: {sorted(scene.bridges)}")

    filename = input("\nSave a PNG? Enter a filename or leave empty: ").strip()
    if filename:
        print(f"Saved to {visualizer.save_png(filename)}")


def main():
    """Main demo function."""
    demos = [
        ("Bridges on a Path", demo_1),
        ("Triangle With a Tail", demo_2),
        ("Strongly Connected Components", demo_3),
        ("Tree Validation", demo_4),
        ("Routing and Tracing", demo_5),
    ]

    print("\n" + "=" * 70)
    print("  GRAPHLENS - DEMONSTRATION")
    print("=" * 70)
    print("\nPress Enter after each demo to continue...")

    for title, demo_func in demos:
        input("\n[Press Enter to continue]")
        demo_func()

    print("\n" + "=" * 70)

    response = input("\nWould you like to try interactive mode? (y/n): ")
    if response.lower().startswith("y"):
        interactive_mode()

    print("\n" + "=" * 70)
    print("  Thank you for trying graphlens!")
    print("=" * 70)
    print()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted. Goodbye!")
        sys.exit(0)
