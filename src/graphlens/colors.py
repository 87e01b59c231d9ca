"""Deterministic colour generation for an unknown number of groups."""

from typing import List

GOLDEN_ANGLE = 137.508
SATURATIONS = (65, 75, 85)
LIGHTNESSES = (45, 55, 65, 50)


class ColorAssigner:
    """
    Generates k visually distinct colours.

    Hues step around the colour wheel by the golden angle, which never
    revisits a hue; saturation and lightness cycle on different periods so
    adjacent groups also differ in tone. Output is CSS hsl() text, which
    Pillow's ImageColor also parses.
    """

    def __init__(self, offset: float = 0.0):
        self.offset = offset

    def color(self, index: int) -> str:
        """Colour for group number index (0-based)."""
        hue = (self.offset + index * GOLDEN_ANGLE) % 360
        saturation = SATURATIONS[index % len(SATURATIONS)]
        lightness = LIGHTNESSES[index % len(LIGHTNESSES)]
        return f"hsl({hue:.1f}, {saturation}%, {lightness}%)"

    def assign(self, k: int) -> List[str]:
        """Return exactly k colours; the same k always yields the same list."""
        if k < 0:
            raise ValueError(f"Number of groups must be non-negative, got {k}")
        return [self.color(i) for i in range(k)]


def assign_colors(k: int) -> List[str]:
    """Convenience function for ColorAssigner().assign(k)."""
    return ColorAssigner().assign(k)
