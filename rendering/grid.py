"""World border rendering for spatial reference."""

from OpenGL.GL import *
from config import boids as config

from .flock_renderer import apply_view


class WorldBorder:
    """Outlines the toroidal wrap window in world space."""

    def __init__(self):
        self.color = config.COLORS["border"]

    def draw(self, flock, view, screen_size):
        """
        Draw the wrap window outline.

        Only visible once the view has been panned or zoomed away from the
        default, since the window otherwise matches the screen edges.
        """
        hw = flock.world_extent[0] / 2
        hh = flock.world_extent[1] / 2

        apply_view(view, screen_size)
        glColor3f(*self.color)

        glBegin(GL_LINE_LOOP)
        glVertex2f(-hw, -hh)
        glVertex2f(hw, -hh)
        glVertex2f(hw, hh)
        glVertex2f(-hw, hh)
        glEnd()

        glPopMatrix()
