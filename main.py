"""
2D Boids Simulation
===================

A real-time flocking simulation with a pannable, zoomable view.

Controls:
    - Left mouse: Repel boids from the pointer
    - Middle mouse / Alt + left drag: Pan
    - Mouse wheel: Zoom
    - Sliders: Boid count and speed factor
    - SPACE: Pause/Resume
    - R: Respawn flock
    - H: Toggle help text
    - ESC: Quit

Usage:
    python main.py
    python main.py --count 500 --speed 5 --seed 42
"""

import argparse

from core.application import Application


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D Boids flocking simulation")
    parser.add_argument("--count", type=int, default=None, help="Initial number of boids")
    parser.add_argument("--speed", type=float, default=None, help="Initial speed factor")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the spawn RNG")
    parser.add_argument("--width", type=int, default=None, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Window height in pixels")
    args = parser.parse_args(argv)

    if args.count is not None and args.count < 0:
        parser.error("--count must be non-negative")
    return args


def main(argv=None):
    args = parse_args(argv)
    app = Application(
        num_boids=args.count,
        speed_factor=args.speed,
        seed=args.seed,
        width=args.width,
        height=args.height
    )
    app.run()


if __name__ == "__main__":
    main()
