"""Individual boid record with position, velocity, and radius."""

import math
import numpy as np
from dataclasses import dataclass, field


@dataclass
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    The flock stores boids as arrays for the step kernels; this record is the
    per-agent view handed out by ``Flock.agents`` and accepted by
    ``Flock.set_agents``.

    Attributes:
        position: 2D world-space position
        velocity: 2D velocity in world units per second
        radius: Draw radius, fixed at creation
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    radius: float = 3.0

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64).reshape(2)
        self.velocity = np.asarray(self.velocity, dtype=np.float64).reshape(2)
        self.radius = float(self.radius)

    @property
    def speed(self) -> float:
        return math.hypot(self.velocity[0], self.velocity[1])

    @property
    def heading(self) -> float:
        """Direction of travel in radians."""
        return math.atan2(self.velocity[1], self.velocity[0])
