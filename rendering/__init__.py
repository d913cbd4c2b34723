"""Rendering components for the 2D boids simulation."""

from .flock_renderer import FlockRenderer
from .grid import WorldBorder
from .text import TextRenderer
from .widgets import SliderRenderer

__all__ = ["FlockRenderer", "WorldBorder", "TextRenderer", "SliderRenderer"]
