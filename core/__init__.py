"""Core application components.

``Application`` pulls in the OpenGL renderer, so import it directly from
``core.application``; this package only exposes the display-free pieces.
"""

from .view import View
from .controls import Slider
from .input_handler import InputHandler

__all__ = ["View", "Slider", "InputHandler"]
