"""Slider rendering."""

from OpenGL.GL import *
from config import boids as config

from .text import TextRenderer


def _quad(x: float, y: float, w: float, h: float):
    glVertex2f(x, y)
    glVertex2f(x + w, y)
    glVertex2f(x + w, y + h)
    glVertex2f(x, y + h)


class SliderRenderer:
    """Draws sliders as a track, a filled portion, a knob, and a label above."""

    def __init__(self, text_renderer: TextRenderer):
        self.text_renderer = text_renderer

    def draw(self, slider):
        x, y, w, h = slider.rect
        fill_w = w * slider.fraction
        knob_w = 6

        glBegin(GL_QUADS)
        glColor3f(*config.COLORS["slider_track"])
        _quad(x, y, w, h)
        glColor3f(*config.COLORS["slider_fill"])
        _quad(x, y, fill_w, h)
        glColor3f(*config.COLORS["slider_knob"])
        _quad(x + fill_w - knob_w / 2, y - 2, knob_w, h + 4)
        glEnd()

        self.text_renderer.draw_text(slider.text, x, y - 22)
