"""Text rendering for HUD elements."""

import pygame
from OpenGL.GL import *

from config import boids as config


class TextRenderer:
    """Renders text overlays using pygame fonts and glDrawPixels."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = config.COLORS["text"]
        self._cache = {}

    def _render(self, text: str):
        cached = self._cache.get(text)
        if cached is None:
            surface = self.font.render(text, True, self.color)
            data = pygame.image.tobytes(surface, "RGBA", True)
            cached = (data, surface.get_size())
            # HUD strings change every frame; keep the cache bounded
            if len(self._cache) > 256:
                self._cache.clear()
            self._cache[text] = cached
        return cached

    def draw_text(self, text: str, x: int, y: int):
        """
        Draw text with its top-left corner at screen pixel (x, y).

        Expects the screen-space orthographic projection (y down) set up by
        the application.
        """
        data, (w, h) = self._render(text)

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        # Raster position is the bottom-left corner of the pixel block
        glRasterPos2f(x, y + h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)
