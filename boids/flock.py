"""Flock state - owns the boid population, tunables, and the per-tick advance."""

import math
import numpy as np

from config import boids as config
from .boid import Boid
from .step import step_flock


def _require_finite(name: str, *values):
    for value in values:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


class Flock:
    """
    A 2D flock stored as struct-of-arrays.

    All mutation goes through the setters and ``advance``; the render layer
    only reads ``positions``/``radii`` or takes a ``snapshot()``.
    """

    def __init__(self, num_boids: int = 0, spawn_center=None, seed=None):
        self.max_speed = np.float64(config.BOIDS["max_speed"])
        self.radius = np.float64(config.BOIDS["radius"])
        self.spawn_jitter = np.float64(config.BOIDS["spawn_jitter"])
        self.min_spawn_speed = np.float64(config.BOIDS["min_spawn_speed"])
        self.max_spawn_speed = np.float64(config.BOIDS["max_spawn_speed"])

        # Flocking parameters
        self.neighbor_dist = np.float64(config.BOIDS["neighbor_dist"])
        self.separation_dist = np.float64(config.BOIDS["separation_dist"])
        self.alignment_weight = np.float64(config.BOIDS["alignment_weight"])
        self.cohesion_weight = np.float64(config.BOIDS["cohesion_weight"])
        self.separation_weight = np.float64(config.BOIDS["separation_weight"])
        self.repulsion_strength = np.float64(config.BOIDS["repulsion_strength"])

        # Live-tunable state
        self.speed_factor = float(config.BOIDS["speed_factor"])
        self.pointer = (0.0, 0.0)
        self.pointer_active = False
        self.world_extent = (
            float(config.WINDOW["width"]) / config.VIEW["initial_zoom"],
            float(config.WINDOW["height"]) / config.VIEW["initial_zoom"]
        )

        self._rng = np.random.default_rng(seed)

        if spawn_center is None:
            spawn_center = config.BOIDS["spawn_center"]
        self.initialize(num_boids, spawn_center)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    @property
    def num_boids(self) -> int:
        return self.positions.shape[0]

    def initialize(self, count: int, spawn_center=(0.0, 0.0)):
        """Discard every boid and spawn ``count`` fresh ones near ``spawn_center``."""
        count = int(count)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        cx, cy = (float(v) for v in spawn_center)
        _require_finite("spawn_center", cx, cy)

        jitter = (self._rng.random((count, 2)) - 0.5) * 2 * self.spawn_jitter
        positions = np.array([cx, cy], dtype=np.float64) + jitter

        angles = self._rng.random(count) * 2 * math.pi
        speeds = self.min_spawn_speed + self._rng.random(count) * (
            self.max_spawn_speed - self.min_spawn_speed
        )
        velocities = np.column_stack((np.cos(angles) * speeds, np.sin(angles) * speeds))

        self._load(positions, velocities, np.full(count, self.radius, dtype=np.float64))

    def set_population(self, count: int, spawn_center=(0.0, 0.0)):
        """UI-facing resize: same as ``initialize``."""
        self.initialize(count, spawn_center)

    def set_agents(self, agents):
        """Replace the flock with an explicit list of ``Boid`` records."""
        agents = list(agents)
        positions = np.array([b.position for b in agents], dtype=np.float64).reshape(-1, 2)
        velocities = np.array([b.velocity for b in agents], dtype=np.float64).reshape(-1, 2)
        radii = np.array([b.radius for b in agents], dtype=np.float64)
        self._load(positions, velocities, radii)

    def _load(self, positions: np.ndarray, velocities: np.ndarray, radii: np.ndarray):
        self.positions = np.ascontiguousarray(positions, dtype=np.float64)
        self.velocities = np.ascontiguousarray(velocities, dtype=np.float64)
        self.radii = radii

        # Scratch buffers for the double-buffered step
        self._next_positions = np.empty_like(self.positions)
        self._next_velocities = np.empty_like(self.velocities)

    @property
    def agents(self):
        """Copies of every boid as ``Boid`` records, in storage order."""
        return [
            Boid(self.positions[i].copy(), self.velocities[i].copy(), self.radii[i])
            for i in range(self.num_boids)
        ]

    def snapshot(self):
        """Ordered ``((x, y), radius)`` per boid for drawing."""
        return [
            ((float(p[0]), float(p[1])), float(r))
            for p, r in zip(self.positions, self.radii)
        ]

    # ------------------------------------------------------------------
    # Tunables
    # ------------------------------------------------------------------

    def set_speed_factor(self, value: float):
        value = float(value)
        _require_finite("speed_factor", value)
        self.speed_factor = value

    def set_pointer(self, position, active: bool):
        """Pointer position must already be in world space."""
        x, y = (float(v) for v in position)
        _require_finite("pointer", x, y)
        self.pointer = (x, y)
        self.pointer_active = bool(active)

    def set_world_extent(self, width: float, height: float):
        width, height = float(width), float(height)
        _require_finite("world_extent", width, height)
        self.world_extent = (width, height)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def advance(self, dt: float):
        """Advance every boid by ``dt`` wall-clock seconds (scaled by speed_factor)."""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self.num_boids == 0:
            return

        scaled_dt = np.float64(dt) * self.speed_factor

        step_flock(
            self.positions,
            self.velocities,
            self._next_positions,
            self._next_velocities,
            float(self.pointer[0]),
            float(self.pointer[1]),
            bool(self.pointer_active),
            float(self.world_extent[0]),
            float(self.world_extent[1]),
            float(scaled_dt),
            float(self.neighbor_dist),
            float(self.separation_dist),
            float(self.alignment_weight),
            float(self.cohesion_weight),
            float(self.separation_weight),
            float(self.repulsion_strength),
            float(self.max_speed)
        )

        # Commit the tick
        self.positions, self._next_positions = self._next_positions, self.positions
        self.velocities, self._next_velocities = self._next_velocities, self.velocities
