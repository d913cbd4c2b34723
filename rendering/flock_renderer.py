"""Flock rendering - Numba-built disc vertices drawn from a VBO."""

import math
import numpy as np
from numba import njit
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import boids as config


@njit(fastmath=True, cache=True)
def build_disc_vertices(
    positions: np.ndarray,
    radii: np.ndarray,
    cos_table: np.ndarray,
    sin_table: np.ndarray,
    vertices: np.ndarray,
    num_boids: int
):
    """Write ``segments`` triangles per boid approximating a filled circle."""
    segments = cos_table.shape[0]

    for i in range(num_boids):
        px = positions[i, 0]
        py = positions[i, 1]
        r = radii[i]

        base = i * segments * 3
        for k in range(segments):
            k_next = (k + 1) % segments
            v = base + k * 3

            vertices[v, 0] = px
            vertices[v, 1] = py
            vertices[v + 1, 0] = px + cos_table[k] * r
            vertices[v + 1, 1] = py + sin_table[k] * r
            vertices[v + 2, 0] = px + cos_table[k_next] * r
            vertices[v + 2, 1] = py + sin_table[k_next] * r


def apply_view(view, screen_size):
    """Push the world-to-screen transform for ``view`` onto the modelview stack."""
    glPushMatrix()
    glTranslatef(screen_size[0] / 2, screen_size[1] / 2, 0.0)
    glScalef(view.zoom, view.zoom, 1.0)
    glTranslatef(view.offset[0], view.offset[1], 0.0)


class FlockRenderer:
    """Draws every boid as a filled disc. Never writes to the flock."""

    def __init__(self):
        self.segments = int(config.RENDER["disc_segments"])
        self.color = config.COLORS["boid"]

        angles = np.linspace(0.0, 2 * math.pi, self.segments, endpoint=False)
        self._cos_table = np.cos(angles)
        self._sin_table = np.sin(angles)

        self.verts_per_boid = self.segments * 3
        self._capacity = 0
        self._vertices = np.zeros((0, 2), dtype=np.float32)

        self._vbo_vertices = None
        self._vbo_initialized = False

    def _ensure_capacity(self, num_boids: int):
        if num_boids <= self._capacity:
            return
        self._capacity = num_boids
        self._vertices = np.zeros((num_boids * self.verts_per_boid, 2), dtype=np.float32)

    def _init_vbo(self):
        """Initialize the VBO for fast GPU rendering."""
        if self._vbo_initialized:
            return

        try:
            self._vbo_vertices = vbo.VBO(self._vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_initialized = True
        except Exception:
            # Fallback to client-array rendering
            self._vbo_initialized = False

    def draw(self, flock, view, screen_size):
        num_boids = flock.num_boids
        if num_boids == 0:
            return

        self._ensure_capacity(num_boids)
        if not self._vbo_initialized:
            self._init_vbo()

        build_disc_vertices(
            flock.positions,
            flock.radii,
            self._cos_table,
            self._sin_table,
            self._vertices,
            num_boids
        )
        total_verts = num_boids * self.verts_per_boid

        apply_view(view, screen_size)
        glColor3f(*self.color)

        if self._vbo_initialized and self._vbo_vertices is not None:
            self._vbo_vertices.set_array(self._vertices[:total_verts])
            self._vbo_vertices.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, None)

            glDrawArrays(GL_TRIANGLES, 0, total_verts)

            self._vbo_vertices.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
        else:
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, self._vertices[:total_verts])
            glDrawArrays(GL_TRIANGLES, 0, total_verts)
            glDisableClientState(GL_VERTEX_ARRAY)

        glPopMatrix()
