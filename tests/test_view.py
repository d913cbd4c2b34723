"""Tests for the pan/zoom view transform."""

import pytest

from config import boids as config
from core.view import View


SCREEN = (800, 600)


class TestCoordinateConversion:
    """Screen <-> world mapping."""

    def test_screen_center_is_world_origin(self):
        view = View()
        assert view.screen_to_world((400, 300), SCREEN) == (0.0, 0.0)

    def test_zoom_scales_distance_from_center(self):
        view = View()
        view.zoom = 2.0
        assert view.screen_to_world((500, 300), SCREEN) == (50.0, 0.0)

    def test_offset_shifts_world(self):
        view = View()
        view.offset = (10.0, -20.0)
        assert view.screen_to_world((400, 300), SCREEN) == (-10.0, 20.0)

    def test_round_trip(self):
        view = View()
        view.zoom = 1.7
        view.offset = (33.0, -12.5)
        world = view.screen_to_world((123, 456), SCREEN)
        assert view.world_to_screen(world, SCREEN) == pytest.approx((123, 456))


class TestPanZoom:
    """View manipulation from input."""

    def test_pan_divides_by_zoom(self):
        view = View()
        view.zoom = 2.0
        view.pan(10, -4)
        assert view.offset == (5.0, -2.0)

    def test_wheel_up_zooms_in(self):
        view = View()
        view.handle_wheel(1)
        assert view.zoom == pytest.approx(config.VIEW["zoom_factor"])

    def test_wheel_down_zooms_out(self):
        view = View()
        view.handle_wheel(-1)
        assert view.zoom == pytest.approx(1 / config.VIEW["zoom_factor"])

    def test_zoom_clamped(self):
        view = View()
        for _ in range(1000):
            view.zoom_in()
        assert view.zoom == config.VIEW["max_zoom"]
        for _ in range(2000):
            view.zoom_out()
        assert view.zoom == config.VIEW["min_zoom"]

    def test_world_extent_follows_zoom(self):
        view = View()
        assert view.world_extent(SCREEN) == (800.0, 600.0)
        view.zoom = 2.0
        assert view.world_extent(SCREEN) == (400.0, 300.0)
