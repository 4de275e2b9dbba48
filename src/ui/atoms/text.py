"""
Text atom - Basic text rendering component.
"""

import pygame
from typing import List, Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Text:
    """
    Basic text rendering atom.

    Handles text rendering with various styles, truncation,
    and alignment options.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: dict = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given size."""
        if size not in self._font_cache:
            font_path = getattr(self.theme, "font_path", None)
            self._font_cache[size] = pygame.font.Font(font_path, size)
        return self._font_cache[size]

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",  # "left", "center", "right"
        antialias: bool = True,
    ) -> pygame.Rect:
        """
        Render text to the screen.

        Args:
            screen: Surface to render to
            text: Text to render
            position: (x, y) position
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Maximum width (truncate with ellipsis if exceeded)
            align: Text alignment ("left", "center", "right")
            antialias: Use antialiasing

        Returns:
            Rect of rendered text
        """
        if color is None:
            color = self.theme.text_primary
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)

        # Truncate if needed
        if max_width:
            text = self._truncate(text, font, max_width)

        surface = font.render(text, antialias, color)
        rect = surface.get_rect()

        # Apply alignment
        x, y = position
        if align == "center":
            rect.centerx = x
            rect.top = y
        elif align == "right":
            rect.right = x
            rect.top = y
        else:  # left
            rect.topleft = position

        screen.blit(surface, rect)
        return rect

    def render_multiline(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        line_spacing: int = 4,
        align: str = "left",
    ) -> pygame.Rect:
        """
        Render multiline text.

        Args:
            screen: Surface to render to
            text: Text to render (can contain newlines)
            position: (x, y) position
            color: Text color
            size: Font size
            max_width: Wrap width; lines are word-wrapped to fit
            line_spacing: Space between lines
            align: Text alignment

        Returns:
            Bounding rect of all rendered text
        """
        if color is None:
            color = self.theme.text_primary
        if size is None:
            size = self.theme.font_size_md

        lines = self.wrap(text, max_width, size) if max_width else text.split("\n")

        x, y = position
        total_rect = pygame.Rect(x, y, 0, 0)

        for line in lines:
            rect = self.render(
                screen,
                line,
                (x, y),
                color=color,
                size=size,
                max_width=max_width,
                align=align,
            )
            y += rect.height + line_spacing
            total_rect = total_rect.union(rect)

        return total_rect

    def measure(self, text: str, size: Optional[int] = None) -> Tuple[int, int]:
        """
        Measure text dimensions without rendering.

        Args:
            text: Text to measure
            size: Font size

        Returns:
            (width, height) tuple
        """
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)
        return font.size(text)

    def wrap(self, text: str, max_width: int, size: Optional[int] = None) -> List[str]:
        """
        Break text into lines that fit within max_width.

        Words longer than a line are left on their own line and get
        truncated when rendered.
        """
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)
        lines: List[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                if current and font.size(candidate)[0] > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def _truncate(
        self, text: str, font: pygame.font.Font, max_width: int, suffix: str = "..."
    ) -> str:
        """
        Truncate text to fit within max_width.

        Args:
            text: Text to truncate
            font: Font to use for measurement
            max_width: Maximum width in pixels
            suffix: Suffix to add when truncating

        Returns:
            Truncated text
        """
        if font.size(text)[0] <= max_width:
            return text

        suffix_width = font.size(suffix)[0]
        available_width = max_width - suffix_width

        # Binary search for optimal truncation point
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            if font.size(text[:mid])[0] <= available_width:
                low = mid
            else:
                high = mid - 1

        return text[:low] + suffix


# Default instance
text = Text()
