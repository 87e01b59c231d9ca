"""Tests for the PNG renderer module."""

import os
import tempfile

import pytest
from PIL import Image

from graphlens import GraphVisualizer
from graphlens.png_renderer import PNGRenderer, quadratic_points, render_to_png


@pytest.fixture
def png_path():
    """Temporary PNG path, removed after the test."""
    with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
        output_path = f.name
    yield output_path
    if os.path.exists(output_path):
        os.unlink(output_path)


class TestQuadraticPoints:
    """Tests for curve sampling."""

    def test_endpoints(self):
        """Test that sampling starts and ends on the curve endpoints."""
        points = quadratic_points((0, 0), (50, 50), (100, 0), samples=4)
        assert len(points) == 5
        assert points[0] == (0, 0)
        assert points[-1] == (100, 0)

    def test_midpoint(self):
        """Test the t=0.5 point of a symmetric curve."""
        points = quadratic_points((0, 0), (50, 50), (100, 0), samples=2)
        assert points[1] == pytest.approx((50, 25))


class TestPNGRenderer:
    """Tests for PNGRenderer class."""

    def test_render_simple(self, png_path):
        """Render an undirected graph with bridges."""
        scene = GraphVisualizer().load(4, "1 2, 2 3, 3 1, 3 4", show_bridges=True)
        result = PNGRenderer().render(scene, png_path)
        assert result == png_path
        assert os.path.getsize(png_path) > 0

    def test_render_size_follows_scale(self, png_path):
        """Test that the image is the drawing area times the scale."""
        scene = GraphVisualizer(width=300, height=200).load(2, "1 2")
        PNGRenderer(scale=3).render(scene, png_path)
        with Image.open(png_path) as img:
            assert img.size == (900, 600)

    def test_render_directed_with_loops_and_curves(self, png_path):
        """Render every path type and SCC colours."""
        scene = GraphVisualizer().load(
            3, "1 1, 1 2, 2 1, 2 3", directed=True, show_sccs=True
        )
        PNGRenderer().render(scene, png_path)
        assert os.path.getsize(png_path) > 0

    def test_node_fill_drawn(self, png_path):
        """Test that a node's fill colour lands at its centre."""
        scene = GraphVisualizer().load(1, "")
        PNGRenderer(scale=1).render(scene, png_path)
        with Image.open(png_path) as img:
            # Centre pixel is covered by the label; sample off-centre inside the disc
            assert img.getpixel((400, 300 + 15)) == (46, 125, 50)

    def test_missing_font_path_falls_back(self, png_path):
        """Test that a bad font path still renders."""
        scene = GraphVisualizer().load(2, "1 2")
        PNGRenderer(font_path="/nonexistent/font.ttf").render(scene, png_path)
        assert os.path.exists(png_path)

    def test_render_to_png(self, png_path):
        """Test the convenience function."""
        scene = GraphVisualizer().load(3, "1 2, 2 3")
        assert render_to_png(scene, png_path, scale=1) == png_path

    def test_visualizer_save_png(self, png_path):
        """Test saving straight from the visualizer."""
        visualizer = GraphVisualizer()
        visualizer.load(3, "1 2, 2 3")
        assert visualizer.save_png(png_path) == png_path
        assert os.path.getsize(png_path) > 0
