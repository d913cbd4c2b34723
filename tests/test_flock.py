"""
Tests for the Flock state and its per-tick advance.

Covers:
- Population spawn and resize
- Speed bound and wrap containment over many ticks
- Pre-tick snapshot semantics (order independence, determinism)
- Setter validation
"""

import math
import numpy as np
import pytest

from boids import Boid, Flock
from boids.step import step_agent


class TestPopulation:
    """Spawn and resize."""

    def test_count_matches(self):
        flock = Flock(num_boids=0, seed=1)
        flock.set_population(137, (0.0, 0.0))
        assert flock.num_boids == 137
        assert len(flock.agents) == 137
        assert len(flock.snapshot()) == 137

    def test_agents_within_jitter_of_center(self):
        center = (120.0, -40.0)
        flock = Flock(num_boids=500, spawn_center=center, seed=7)
        offsets = flock.positions - np.array(center)
        assert np.all(np.abs(offsets) <= 5.0)

    def test_spawn_speeds_in_range(self):
        flock = Flock(num_boids=500, seed=7)
        speeds = np.hypot(flock.velocities[:, 0], flock.velocities[:, 1])
        assert np.all(speeds >= 2.0 - 1e-12)
        assert np.all(speeds <= 3.0 + 1e-12)

    def test_radius_fixed(self):
        flock = Flock(num_boids=20, seed=7)
        assert all(radius == 3.0 for _, radius in flock.snapshot())

    def test_zero_count_yields_empty_flock(self):
        flock = Flock(num_boids=10, seed=3)
        flock.set_population(0, (0.0, 0.0))
        assert flock.num_boids == 0
        assert flock.agents == []
        flock.advance(0.1)
        assert flock.num_boids == 0

    def test_negative_count_rejected(self):
        flock = Flock(num_boids=0)
        with pytest.raises(ValueError):
            flock.set_population(-1, (0.0, 0.0))

    def test_resize_discards_previous_motion(self):
        flock = Flock(num_boids=50, seed=3)
        flock.set_world_extent(1e6, 1e6)
        for _ in range(20):
            flock.advance(0.05)
        flock.set_population(30, (0.0, 0.0))
        assert flock.num_boids == 30
        assert np.all(np.abs(flock.positions) <= 5.0)

    def test_seed_makes_spawn_reproducible(self):
        a = Flock(num_boids=40, seed=99)
        b = Flock(num_boids=40, seed=99)
        np.testing.assert_array_equal(a.positions, b.positions)
        np.testing.assert_array_equal(a.velocities, b.velocities)


class TestAdvance:
    """Flocking rules applied across the whole flock."""

    def test_two_agent_example(self, make_flock):
        """Agents at (0,0) and (10,0) at rest are pushed apart by 1.45."""
        flock = make_flock([((0, 0), (0, 0)), ((10, 0), (0, 0))])
        flock.advance(1.0)

        # cohesion 0.005 * 10 - separation 1.5 * 1
        assert flock.velocities[0] == pytest.approx([-1.45, 0.0])
        assert flock.velocities[1] == pytest.approx([1.45, 0.0])
        assert flock.positions[0] == pytest.approx([-1.45, 0.0])
        assert flock.positions[1] == pytest.approx([11.45, 0.0])

    def test_symmetric_separation(self, make_flock):
        flock = make_flock([((0, 0), (0, 0)), ((6, 8), (0, 0))])
        flock.advance(0.5)
        np.testing.assert_allclose(flock.velocities[0], -flock.velocities[1])
        assert flock.velocities[0][0] < 0
        assert flock.velocities[0][1] < 0

    def test_isolated_agent_keeps_direction(self, make_flock):
        flock = make_flock([((0, 0), (2.0, -1.5)), ((300, 300), (0, 1))])
        flock.advance(0.25)
        assert tuple(flock.velocities[0]) == (2.0, -1.5)
        assert flock.positions[0] == pytest.approx([0.5, -0.375])

    def test_speed_factor_scales_dt(self, make_flock):
        flock = make_flock([((0, 0), (1.0, 0.0))], speed_factor=4.0)
        flock.advance(0.5)
        assert flock.positions[0] == pytest.approx([2.0, 0.0])

    def test_zero_dt_leaves_state_unchanged(self, random_flock):
        before_pos = random_flock.positions.copy()
        before_vel = random_flock.velocities.copy()
        random_flock.advance(0.0)
        np.testing.assert_array_equal(random_flock.positions, before_pos)
        np.testing.assert_array_equal(random_flock.velocities, before_vel)

    def test_negative_dt_rejected(self, random_flock):
        with pytest.raises(ValueError):
            random_flock.advance(-0.01)

    def test_speed_bound_every_tick(self, random_flock):
        random_flock.set_pointer((1.0, 1.0), True)
        for _ in range(60):
            random_flock.advance(1 / 60)
            speeds = np.hypot(random_flock.velocities[:, 0], random_flock.velocities[:, 1])
            assert np.all(speeds <= random_flock.max_speed + 1e-9)

    def test_wrap_containment_every_tick(self, random_flock):
        random_flock.set_world_extent(120.0, 80.0)
        for _ in range(300):
            random_flock.advance(0.05)
            assert np.all(np.abs(random_flock.positions[:, 0]) <= 60.0)
            assert np.all(np.abs(random_flock.positions[:, 1]) <= 40.0)

    def test_pointer_scatters_flock(self, make_flock):
        flock = make_flock([((5, 0), (0, 0)), ((-200, 0), (0, 0))])
        flock.set_pointer((0.0, 0.0), True)
        flock.advance(0.01)
        assert flock.velocities[0][0] > 0
        assert flock.velocities[1][0] < 0

    def test_coincident_agents_stay_finite(self, make_flock):
        flock = make_flock([((1, 1), (0, 0)), ((1, 1), (0, 0)), ((1, 1), (1, 0))])
        flock.set_pointer((1.0, 1.0), True)
        for _ in range(5):
            flock.advance(0.1)
        assert np.all(np.isfinite(flock.positions))
        assert np.all(np.isfinite(flock.velocities))


class TestPreTickSnapshot:
    """Every boid is computed from the state at the start of the tick."""

    AGENTS = [
        ((0.0, 0.0), (1.0, 0.5)),
        ((8.0, 1.0), (-0.5, 2.0)),
        ((4.0, 9.0), (0.0, -1.0)),
        ((-6.0, 3.0), (2.0, 2.0)),
    ]

    def test_reversed_order_gives_reversed_result(self, make_flock):
        forward = make_flock(self.AGENTS)
        backward = make_flock(list(reversed(self.AGENTS)))
        forward.advance(0.5)
        backward.advance(0.5)

        np.testing.assert_allclose(forward.positions, backward.positions[::-1], atol=1e-12)
        np.testing.assert_allclose(forward.velocities, backward.velocities[::-1], atol=1e-12)

    def test_matches_step_against_untouched_snapshot(self, make_flock):
        """Each boid equals a single-boid step against the original arrays."""
        flock = make_flock(self.AGENTS)
        positions = flock.positions.copy()
        velocities = flock.velocities.copy()
        flock.advance(0.5)

        for i in range(len(self.AGENTS)):
            out_pos = positions.copy()
            out_vel = velocities.copy()
            step_agent(
                i, positions, velocities, out_pos, out_vel,
                0.0, 0.0, False, 1e6, 1e6, 0.5,
                50.0, 20.0, 1.0, 0.005, 1.5, 1000.0, 5.0,
            )
            np.testing.assert_array_equal(flock.positions[i], out_pos[i])
            np.testing.assert_array_equal(flock.velocities[i], out_vel[i])

    def test_deterministic_for_same_snapshot(self, make_flock):
        a = make_flock(self.AGENTS)
        b = make_flock(self.AGENTS)
        for _ in range(10):
            a.advance(0.1)
            b.advance(0.1)
        np.testing.assert_array_equal(a.positions, b.positions)
        np.testing.assert_array_equal(a.velocities, b.velocities)


class TestAccessorsAndSetters:
    """Read accessors and setter validation."""

    def test_snapshot_is_detached(self, make_flock):
        flock = make_flock([((1, 2), (0, 0))])
        snap = flock.snapshot()
        assert snap == [((1.0, 2.0), 3.0)]

        agents = flock.agents
        agents[0].position[0] = 99.0
        assert flock.positions[0][0] == 1.0

    def test_set_agents_round_trip(self):
        flock = Flock(num_boids=0)
        flock.set_agents([Boid((1, 2), (3, 4), 2.5)])
        [boid] = flock.agents
        assert tuple(boid.position) == (1.0, 2.0)
        assert tuple(boid.velocity) == (3.0, 4.0)
        assert boid.radius == 2.5
        assert boid.speed == pytest.approx(5.0)
        assert boid.heading == pytest.approx(math.atan2(4, 3))

    def test_setters_store_values(self):
        flock = Flock(num_boids=0)
        flock.set_speed_factor(2.5)
        flock.set_pointer((3, -4), True)
        flock.set_world_extent(640, 480)
        assert flock.speed_factor == 2.5
        assert flock.pointer == (3.0, -4.0)
        assert flock.pointer_active is True
        assert flock.world_extent == (640.0, 480.0)

    @pytest.mark.parametrize("call", [
        lambda f: f.set_speed_factor(float("nan")),
        lambda f: f.set_pointer((float("inf"), 0.0), True),
        lambda f: f.set_world_extent(100.0, float("nan")),
    ])
    def test_non_finite_rejected(self, call):
        with pytest.raises(ValueError):
            call(Flock(num_boids=0))
