"""2D view transform - pan offset and zoom for the flock window."""

from config import boids as config


class View:
    """
    Pannable, zoomable 2D view.

    World origin sits at the screen center when the offset is zero; screen
    coordinates have y pointing down, matching pygame's mouse positions.
    """

    def __init__(self):
        self.offset = (0.0, 0.0)
        self.zoom = float(config.VIEW["initial_zoom"])
        self.zoom_factor = float(config.VIEW["zoom_factor"])

    def _clamp_zoom(self, zoom: float) -> float:
        return max(config.VIEW["min_zoom"], min(config.VIEW["max_zoom"], zoom))

    def screen_to_world(self, pos, screen_size) -> tuple:
        """Convert a screen pixel position to world coordinates."""
        cx = screen_size[0] / 2
        cy = screen_size[1] / 2
        return (
            (pos[0] - cx) / self.zoom - self.offset[0],
            (pos[1] - cy) / self.zoom - self.offset[1]
        )

    def world_to_screen(self, pos, screen_size) -> tuple:
        """Convert world coordinates to a screen pixel position."""
        cx = screen_size[0] / 2
        cy = screen_size[1] / 2
        return (
            (pos[0] + self.offset[0]) * self.zoom + cx,
            (pos[1] + self.offset[1]) * self.zoom + cy
        )

    def world_extent(self, screen_size) -> tuple:
        """Size of the wrap window: the screen expressed in world units."""
        return (screen_size[0] / self.zoom, screen_size[1] / self.zoom)

    def pan(self, dx: float, dy: float):
        """Shift the view by a mouse drag measured in screen pixels."""
        self.offset = (
            self.offset[0] + dx / self.zoom,
            self.offset[1] + dy / self.zoom
        )

    def zoom_in(self):
        self.zoom = self._clamp_zoom(self.zoom * self.zoom_factor)

    def zoom_out(self):
        self.zoom = self._clamp_zoom(self.zoom / self.zoom_factor)

    def handle_wheel(self, wheel_y: int):
        """Scroll up zooms in, anything else zooms out."""
        if wheel_y > 0:
            self.zoom_in()
        else:
            self.zoom_out()
