"""Shared fixtures for flock tests."""

import pytest

from boids import Boid, Flock


@pytest.fixture
def make_flock():
    """
    Build a flock from explicit (position, velocity) pairs.

    Speed factor defaults to 1 and the wrap window to something large enough
    that wrapping never interferes unless a test asks for it.
    """
    def _make(agents, speed_factor=1.0, extent=(1e6, 1e6)):
        flock = Flock(num_boids=0, seed=0)
        flock.set_agents([Boid(pos, vel) for pos, vel in agents])
        flock.set_speed_factor(speed_factor)
        flock.set_world_extent(*extent)
        return flock
    return _make


@pytest.fixture
def random_flock():
    """A seeded 200-boid flock spawned at the origin."""
    flock = Flock(num_boids=200, spawn_center=(0.0, 0.0), seed=1234)
    flock.set_speed_factor(10.0)
    flock.set_world_extent(400.0, 300.0)
    return flock
