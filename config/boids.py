"""Configuration for the 2D Boids flocking simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "2D Boids",
    "resizable": True
}

VIEW = {
    "initial_zoom": 1.0,
    "zoom_factor": 1.05,        # Per wheel notch
    "min_zoom": 0.05,
    "max_zoom": 40.0
}

BOIDS = {
    "count": 300,
    "spawn_center": (0.0, 0.0),  # Whole flock starts near the world origin
    "spawn_jitter": 5.0,         # +/- per axis around the spawn center
    "min_spawn_speed": 2.0,
    "max_spawn_speed": 3.0,
    "radius": 3.0,
    "max_speed": 5.0,
    "speed_factor": 10.0,        # Global dt multiplier
    "max_frame_dt": 0.05,        # Cap dt to keep per-tick displacement small

    # Flocking behavior
    "neighbor_dist": 50.0,       # How far boids can see neighbors
    "separation_dist": 20.0,     # Minimum comfortable distance
    "alignment_weight": 1.0,
    "cohesion_weight": 0.005,
    "separation_weight": 1.5,    # Not averaged: dense clusters push harder

    # Pointer interaction
    "repulsion_strength": 1000.0,
}

SLIDERS = {
    "count": {
        "label": "Boids",
        "min": 0,
        "max": 1000,
        "step": 1,
        "format": "{:.0f}"
    },
    "speed_factor": {
        "label": "Speed",
        "min": 0.1,
        "max": 30.0,
        "step": 0.1,
        "format": "{:.1f}"
    },
    "x": 16,
    "y": 70,
    "width": 220,
    "height": 14,
    "spacing": 44
}

RENDER = {
    "disc_segments": 10,
}

COLORS = {
    "background": (0.067, 0.067, 0.067, 1.0),
    "boid": (0.4, 0.8, 1.0),     # #66ccff
    "border": (0.2, 0.2, 0.25),
    "slider_track": (0.25, 0.25, 0.3),
    "slider_fill": (0.4, 0.8, 1.0),
    "slider_knob": (0.9, 0.9, 0.9),
    "text": (230, 230, 230)
}
