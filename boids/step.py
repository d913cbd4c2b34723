"""Per-boid simulation step - Numba JIT kernels for the flocking rules."""

import math
import numpy as np
from numba import njit


# Floor for any distance used as a divisor
MIN_DISTANCE = 0.001


# ============================================================================
# NUMBA JIT-COMPILED STEP FUNCTIONS
# ============================================================================

@njit(cache=True)
def wrap_coordinate(value: float, extent: float) -> float:
    """
    Fold a coordinate back into [-extent/2, extent/2].

    A single add/subtract, not a modulo: per-tick displacement must stay
    below ``extent`` for the result to land inside the window.
    """
    half = extent * 0.5
    if value > half:
        value -= extent
    elif value < -half:
        value += extent
    return value


@njit(cache=True)
def neighbor_sums(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    neighbor_dist: float,
    separation_dist: float
):
    """
    Brute-force O(n) neighbor scan for boid ``i``.

    Returns (align_x, align_y, coh_x, coh_y, sep_x, sep_y, count), where the
    alignment and cohesion values are raw sums of neighbor velocities and
    positions, and separation is a sum of unit vectors pointing away from
    each neighbor inside ``separation_dist``.
    """
    px = positions[i, 0]
    py = positions[i, 1]

    align_x, align_y = 0.0, 0.0
    coh_x, coh_y = 0.0, 0.0
    sep_x, sep_y = 0.0, 0.0
    count = 0

    for j in range(positions.shape[0]):
        if j == i:
            continue

        dx = positions[j, 0] - px
        dy = positions[j, 1] - py
        d = math.sqrt(dx * dx + dy * dy)

        if d < neighbor_dist:
            align_x += velocities[j, 0]
            align_y += velocities[j, 1]

            coh_x += positions[j, 0]
            coh_y += positions[j, 1]

            count += 1

            if d < separation_dist:
                inv_dist = 1.0 / max(d, MIN_DISTANCE)
                sep_x -= dx * inv_dist
                sep_y -= dy * inv_dist

    return align_x, align_y, coh_x, coh_y, sep_x, sep_y, count


@njit(cache=True)
def step_agent(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    out_positions: np.ndarray,
    out_velocities: np.ndarray,
    pointer_x: float,
    pointer_y: float,
    pointer_active: bool,
    world_w: float,
    world_h: float,
    dt: float,
    neighbor_dist: float,
    separation_dist: float,
    alignment_weight: float,
    cohesion_weight: float,
    separation_weight: float,
    repulsion_strength: float,
    max_speed: float
):
    """
    Advance boid ``i`` by one tick.

    Reads only the pre-tick ``positions``/``velocities`` and writes row ``i``
    of the output arrays, so every boid sees the same snapshot.
    """
    px = positions[i, 0]
    py = positions[i, 1]
    vx = velocities[i, 0]
    vy = velocities[i, 1]

    align_x, align_y, coh_x, coh_y, sep_x, sep_y, count = neighbor_sums(
        i, positions, velocities, neighbor_dist, separation_dist
    )

    if count > 0:
        align_x /= count
        align_y /= count

        # Steer toward the local center of mass
        coh_x = coh_x / count - px
        coh_y = coh_y / count - py

        vx += align_x * alignment_weight * dt
        vy += align_y * alignment_weight * dt
        vx += coh_x * cohesion_weight * dt
        vy += coh_y * cohesion_weight * dt
        vx += sep_x * separation_weight * dt
        vy += sep_y * separation_weight * dt

    if pointer_active:
        dx = px - pointer_x
        dy = py - pointer_y
        d = max(math.sqrt(dx * dx + dy * dy), MIN_DISTANCE)
        force = repulsion_strength / (d * d)
        vx += (dx / d) * force * dt
        vy += (dy / d) * force * dt

    speed = math.sqrt(vx * vx + vy * vy)
    if speed > max_speed:
        scale = max_speed / speed
        vx *= scale
        vy *= scale

    out_velocities[i, 0] = vx
    out_velocities[i, 1] = vy
    out_positions[i, 0] = wrap_coordinate(px + vx * dt, world_w)
    out_positions[i, 1] = wrap_coordinate(py + vy * dt, world_h)


@njit(cache=True)
def step_flock(
    positions: np.ndarray,
    velocities: np.ndarray,
    out_positions: np.ndarray,
    out_velocities: np.ndarray,
    pointer_x: float,
    pointer_y: float,
    pointer_active: bool,
    world_w: float,
    world_h: float,
    dt: float,
    neighbor_dist: float,
    separation_dist: float,
    alignment_weight: float,
    cohesion_weight: float,
    separation_weight: float,
    repulsion_strength: float,
    max_speed: float
):
    """Advance every boid from the pre-tick arrays into the output arrays."""
    for i in range(positions.shape[0]):
        step_agent(
            i, positions, velocities, out_positions, out_velocities,
            pointer_x, pointer_y, pointer_active,
            world_w, world_h, dt,
            neighbor_dist, separation_dist,
            alignment_weight, cohesion_weight, separation_weight,
            repulsion_strength, max_speed
        )
