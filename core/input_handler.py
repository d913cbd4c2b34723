"""Input handling for pointer repulsion, panning, zooming, and sliders."""

import pygame
from pygame.locals import *

from .view import View


class InputHandler:
    """Translates pygame mouse/keyboard events into view and pointer state."""

    def __init__(self, view: View, sliders=None):
        self.view = view
        self.sliders = list(sliders or [])
        self.pointer_screen = (0, 0)
        self.pointer_active = False
        self.panning = False
        self.pan_button = None
        self.alt_held = False
        self.last_mouse_pos = (0, 0)
        self._active_slider = None

    def _slider_at(self, pos):
        for slider in self.sliders:
            if slider.contains(pos):
                return slider
        return None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            if event.key in (K_LALT, K_RALT):
                self.alt_held = True
        elif event.type == KEYUP:
            if event.key in (K_LALT, K_RALT):
                self.alt_held = False
        elif event.type == MOUSEMOTION:
            self._on_motion(event.pos)
        elif event.type == MOUSEBUTTONDOWN:
            self._on_press(event.button, event.pos)
        elif event.type == MOUSEBUTTONUP:
            self._on_release(event.button)
        elif event.type == MOUSEWHEEL:
            if event.y != 0:
                self.view.handle_wheel(event.y)

        return True

    def _on_motion(self, pos):
        self.pointer_screen = pos
        if self._active_slider is not None:
            self._active_slider.drag(pos)
        if self.panning:
            dx = pos[0] - self.last_mouse_pos[0]
            dy = pos[1] - self.last_mouse_pos[1]
            self.view.pan(dx, dy)
            self.last_mouse_pos = pos

    def _on_press(self, button: int, pos):
        self.pointer_screen = pos

        if button == 1 and not self.alt_held:
            slider = self._slider_at(pos)
            if slider is not None:
                slider.press(pos)
                self._active_slider = slider
                return

        # Left for repulsion
        if button == 1:
            self.pointer_active = True

        # Middle or Alt+left for panning
        if button == 2 or (button == 1 and self.alt_held):
            self.panning = True
            self.pan_button = button
            self.last_mouse_pos = pos

    def _on_release(self, button: int):
        if button == 1:
            self.pointer_active = False
            if self._active_slider is not None:
                self._active_slider.release()
                self._active_slider = None
        if self.panning and button == self.pan_button:
            self.panning = False
            self.pan_button = None
