"""
Spinner atom - Animated loading spinner.
"""

import pygame
import math
import time
from typing import Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Spinner:
    """
    Rotating arc shown while the gallery is loading.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        size: int = 48,
        color: Optional[Color] = None,
        thickness: int = 4,
        now: Optional[float] = None,
    ) -> pygame.Rect:
        """
        Render the spinner.

        Args:
            screen: Surface to render to
            center: Center position (x, y)
            size: Diameter of the spinner
            color: Arc color (defaults to primary)
            thickness: Line thickness
            now: Time in seconds driving the rotation (default: time.time())

        Returns:
            Bounding rect of the spinner
        """
        if color is None:
            color = self.theme.primary
        if now is None:
            now = time.time()

        radius = size // 2
        cx, cy = center
        rotation = (now * 2 * math.pi) % (2 * math.pi)

        # Track
        pygame.draw.circle(screen, self.theme.surface_hover, center, radius, thickness)

        arc_length = math.pi * 0.75
        steps = 20
        points = []
        for i in range(steps + 1):
            angle = rotation + arc_length * i / steps
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        pygame.draw.lines(screen, color, False, points, thickness)

        return pygame.Rect(cx - radius, cy - radius, size, size)


# Default instance
spinner = Spinner()
