"""2D boids simulation core."""

from .boid import Boid
from .flock import Flock
from .step import MIN_DISTANCE

__all__ = ["Boid", "Flock", "MIN_DISTANCE"]
