"""
PNG Renderer module for graphlens.

Rasterizes a Scene with Pillow. This is a reference consumer of the draw
instructions; interactive front ends draw the same Scene themselves.
"""

import os
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .models import EdgeInstruction, EdgeStyle, NodeInstruction, PathType, Point, Scene

CURVE_SAMPLES = 24


def quadratic_points(
    start: Point, control: Point, end: Point, samples: int = CURVE_SAMPLES
) -> List[Point]:
    """Sample a quadratic Bezier curve into a polyline."""
    points = []
    for i in range(samples + 1):
        t = i / samples
        u = 1 - t
        points.append(
            (
                u * u * start[0] + 2 * u * t * control[0] + t * t * end[0],
                u * u * start[1] + 2 * u * t * control[1] + t * t * end[1],
            )
        )
    return points


class PNGRenderer:
    """Renders scenes as PNG images."""

    def __init__(
        self,
        scale: int = 2,
        font_size: int = 14,
        font_path: Optional[str] = None,
        bg_color: str = "#ffffff",
        line_color: str = "#555555",
        bridge_color: str = "#d32f2f",
        outline_color: str = "#222222",
        label_color: str = "#ffffff",
        line_width: int = 2,
        bridge_width: int = 4,
    ):
        self.scale = scale
        self.font_size = font_size
        self.font_path = font_path
        self.bg_color = bg_color
        self.line_color = line_color
        self.bridge_color = bridge_color
        self.outline_color = outline_color
        self.label_color = label_color
        self.line_width = line_width
        self.bridge_width = bridge_width
        self.font = None

    def _get_font(self) -> ImageFont.FreeTypeFont:
        """Get a font for node labels."""
        if self.font is not None:
            return self.font

        font_size = self.font_size * self.scale

        # Use custom font if provided
        if self.font_path and os.path.exists(self.font_path):
            try:
                self.font = ImageFont.truetype(self.font_path, font_size)
                return self.font
            except OSError:
                pass  # Fall through to default fonts

        font_options = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
            "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf",
        ]

        for path in font_options:
            if os.path.exists(path):
                try:
                    self.font = ImageFont.truetype(path, font_size)
                    return self.font
                except OSError:
                    continue

        # Fallback to default font
        self.font = ImageFont.load_default()
        return self.font

    def _scaled(self, point: Point) -> Tuple[float, float]:
        return point[0] * self.scale, point[1] * self.scale

    def render(self, scene: Scene, output_path: str = "graph.png") -> str:
        """
        Render the scene as a PNG image.

        Args:
            scene: Scene from GraphVisualizer.scene()
            output_path: Path to save the PNG file

        Returns:
            Path to the saved PNG file
        """
        width = max(1, int(scene.width * self.scale))
        height = max(1, int(scene.height * self.scale))
        img = Image.new("RGB", (width, height), self.bg_color)
        draw = ImageDraw.Draw(img)

        # Edges first so nodes cover their ends
        for edge in scene.edges:
            self._draw_edge(draw, edge)

        for node in scene.nodes:
            self._draw_node(draw, node)

        img.save(output_path, "PNG")
        return output_path

    def _draw_edge(self, draw: ImageDraw.ImageDraw, edge: EdgeInstruction):
        """Draw one edge path plus its arrowhead."""
        if edge.style == EdgeStyle.BRIDGE:
            color, width = self.bridge_color, self.bridge_width * self.scale
        else:
            color, width = self.line_color, self.line_width * self.scale

        if edge.path == PathType.LOOP:
            cx, cy = self._scaled(edge.loop_center)
            r = edge.loop_radius * self.scale
            draw.ellipse([cx - r, cy - r, cx + r, cy + r], outline=color, width=width)
        elif edge.path == PathType.QUADRATIC:
            points = quadratic_points(edge.start, edge.control, edge.end)
            draw.line([self._scaled(p) for p in points], fill=color, width=width)
        else:
            draw.line(
                [self._scaled(edge.start), self._scaled(edge.end)],
                fill=color,
                width=width,
            )

        for start, end in edge.arrow:
            draw.line([self._scaled(start), self._scaled(end)], fill=color, width=width)

    def _draw_node(self, draw: ImageDraw.ImageDraw, node: NodeInstruction):
        """Draw a filled circle with its centred label."""
        cx, cy = self._scaled((node.x, node.y))
        r = node.radius * self.scale
        draw.ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            fill=node.fill,
            outline=self.outline_color,
            width=max(1, self.scale),
        )

        if node.label:
            font = self._get_font()
            bbox = draw.textbbox((0, 0), node.label, font=font)
            text_w, text_h = bbox[2] - bbox[0], bbox[3] - bbox[1]
            draw.text(
                (cx - text_w / 2 - bbox[0], cy - text_h / 2 - bbox[1]),
                node.label,
                fill=self.label_color,
                font=font,
            )


def render_to_png(scene: Scene, output_path: str = "graph.png", **kwargs) -> str:
    """
    Convenience function to render a scene to PNG.

    Args:
        scene: Scene to draw
        output_path: Path to save the PNG file
        **kwargs: Additional parameters for PNGRenderer

    Returns:
        Path to the saved PNG file
    """
    renderer = PNGRenderer(**kwargs)
    return renderer.render(scene, output_path)
