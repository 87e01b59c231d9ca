"""Pytest configuration and shared fixtures for graphlens tests."""

import pytest

from graphlens import (
    EdgeRouter,
    EdgeSpecParser,
    GraphModel,
    GraphVisualizer,
    LayoutEngine,
    VisualizerConfig,
)


@pytest.fixture
def config():
    """Default configuration."""
    return VisualizerConfig()


@pytest.fixture
def parser():
    """Default EdgeSpecParser instance."""
    return EdgeSpecParser()


@pytest.fixture
def layout_engine(config):
    """LayoutEngine on an 800x600 drawing area."""
    return LayoutEngine(config, 800, 600)


@pytest.fixture
def router(config):
    """Default EdgeRouter instance."""
    return EdgeRouter(config)


@pytest.fixture
def visualizer():
    """Default GraphVisualizer instance."""
    return GraphVisualizer()


@pytest.fixture
def path_graph():
    """Undirected path 1-2-3-4; every edge is a bridge."""
    return GraphModel.parse(4, "1 2, 2 3, 3 4")


@pytest.fixture
def triangle_with_tail():
    """Undirected triangle 1-2-3 with pendant edge 3-4."""
    return GraphModel.parse(4, "1 2, 2 3, 3 1, 3 4")


@pytest.fixture
def two_cycles():
    """Directed graph with two disjoint 3-cycles."""
    return GraphModel.parse(6, "1 2, 2 3, 3 1, 4 5, 5 6, 6 4", directed=True)
