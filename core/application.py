"""Main application class that ties everything together."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import boids as config
from .controls import Slider
from .view import View
from .input_handler import InputHandler
from rendering import FlockRenderer, WorldBorder, TextRenderer, SliderRenderer
from boids import Flock


class Application:
    """Main application managing the game loop and rendering."""

    def __init__(self, num_boids=None, speed_factor=None, seed=None,
                 width=None, height=None):
        pygame.init()

        self.screen_size = (
            width or config.WINDOW["width"],
            height or config.WINDOW["height"]
        )
        display_flags = DOUBLEBUF | OPENGL
        if config.WINDOW["resizable"]:
            display_flags |= RESIZABLE
        pygame.display.set_mode(self.screen_size, display_flags)
        pygame.display.set_caption(config.WINDOW["title"])

        self.spawn_center = config.BOIDS["spawn_center"]

        # Simulation
        print("[App] Initializing flock...")
        count = config.BOIDS["count"] if num_boids is None else num_boids
        self.flock = Flock(num_boids=count, spawn_center=self.spawn_center, seed=seed)
        if speed_factor is not None:
            self.flock.set_speed_factor(speed_factor)

        # Core components
        self.view = View()
        self.sliders = self._build_sliders()
        self.input_handler = InputHandler(self.view, self.sliders)

        # Rendering components
        self.text_renderer = TextRenderer()
        self.flock_renderer = FlockRenderer()
        self.border = WorldBorder()
        self.slider_renderer = SliderRenderer(self.text_renderer)

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.paused = False
        self.show_help = True

        self._setup_gl()
        print(f"[App] Ready with {self.flock.num_boids} boids")

    def _build_sliders(self):
        s = config.SLIDERS
        count_rect = (s["x"], s["y"], s["width"], s["height"])
        speed_rect = (s["x"], s["y"] + s["spacing"], s["width"], s["height"])
        return [
            Slider.from_config(
                s["count"], self.flock.num_boids, count_rect,
                on_change=self._on_count_change
            ),
            Slider.from_config(
                s["speed_factor"], self.flock.speed_factor, speed_rect,
                on_change=self.flock.set_speed_factor
            ),
        ]

    def _on_count_change(self, value: float):
        self.flock.set_population(int(value), self.spawn_center)

    def _respawn(self):
        self.flock.set_population(self.flock.num_boids, self.spawn_center)
        print(f"[App] Respawned {self.flock.num_boids} boids")

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glDisable(GL_DEPTH_TEST)
        self._setup_projection()

    def _setup_projection(self):
        """Screen-pixel orthographic projection with y pointing down."""
        w, h = self.screen_size
        glViewport(0, 0, w, h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, w, h, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def _on_resize(self, size):
        # pygame 2 keeps the GL context across resizes; only the viewport changes
        self.screen_size = (max(1, size[0]), max(1, size[1]))
        self._setup_projection()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == VIDEORESIZE:
                self._on_resize(event.size)
            elif event.type == KEYDOWN and event.key == K_SPACE:
                self.paused = not self.paused
                print(f"[App] {'Paused' if self.paused else 'Running'}")
            elif event.type == KEYDOWN and event.key == K_r:
                self._respawn()
            elif event.type == KEYDOWN and event.key == K_h:
                self.show_help = not self.show_help
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Push view and pointer state into the flock, then step it."""
        # Cap dt to keep per-tick displacement inside the wrap window
        dt = min(dt, config.BOIDS["max_frame_dt"])

        self.flock.set_world_extent(*self.view.world_extent(self.screen_size))
        self.flock.set_pointer(
            self.view.screen_to_world(self.input_handler.pointer_screen, self.screen_size),
            self.input_handler.pointer_active
        )

        if not self.paused:
            self.flock.advance(dt)

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT)
        glLoadIdentity()

        self.border.draw(self.flock, self.view, self.screen_size)
        self.flock_renderer.draw(self.flock, self.view, self.screen_size)

        # Draw HUD
        for slider in self.sliders:
            self.slider_renderer.draw(slider)

        status = "PAUSED" if self.paused else "RUNNING"
        self.text_renderer.draw_text(
            f"Boids: {self.flock.num_boids}  |  FPS: {self.fps:.0f}  |  "
            f"Zoom: {self.view.zoom:.2f}  |  {status}",
            10, 10
        )
        if self.show_help:
            self.text_renderer.draw_text(
                "LMB: Repel | MMB/Alt+LMB: Pan | Wheel: Zoom | SPACE: Pause | "
                "R: Respawn | H: Toggle help",
                10, self.screen_size[1] - 28
            )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            dt = self.clock.tick() / 1000.0  # Uncapped FPS
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
