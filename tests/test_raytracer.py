"""Unit tests for the recursive tracer.

Tests cover:
- Depth termination and misses
- Background gradient
- Reflectance splitting between direct shading and reflection
- Superposition of several lights
- Full-frame rendering into a framebuffer
"""

import math
import random

import numpy as np
import pytest

from camera.camera import Camera, Film
from core.color import BLACK, WHITE, Color
from core.errors import DegenerateVectorError
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import World
from lights.point_light import PointLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from renderer.context import RenderContext
from renderer.framebuffer import Framebuffer
from renderer.raytracer import MAX_BOUNCES, Renderer, background

BASE = Color(100, 150, 200)
FORWARD = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
# Delivers exactly one unit of energy to the front of a unit sphere at z=5
UNIT_POWER = 4 * math.pi * 16


def sphere_world(material, lights=None):
    if lights is None:
        lights = [PointLight(Vector3(0, 0, 0), UNIT_POWER)]
    return World([Sphere(Vector3(0, 0, 5), 1, material)], lights)


def assert_color(actual, expected):
    assert (actual.r, actual.g, actual.b) == pytest.approx((expected.r, expected.g, expected.b))


class TestTermination:
    def test_zero_depth_is_no_hit(self):
        world = sphere_world(Metal(BASE, 0))
        assert Renderer().trace(world, FORWARD, 0) is None

    def test_negative_depth_is_no_hit(self):
        world = sphere_world(Metal(BASE, 0))
        assert Renderer().trace(world, FORWARD, -3) is None

    def test_miss_is_no_hit(self):
        world = sphere_world(Metal(BASE, 0))
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert Renderer().trace(world, ray, MAX_BOUNCES) is None

    def test_empty_world(self):
        assert Renderer().trace(World(), FORWARD, 5) is None


class TestBackground:
    def test_straight_up_is_white(self):
        assert background(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))) == WHITE

    def test_floor_for_downward_rays(self):
        assert_color(background(Ray(Vector3(0, 0, 0), Vector3(0, -1, 0))), WHITE * 0.1)

    def test_scales_with_vertical_component(self):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0.5, math.sqrt(0.75)))
        assert_color(background(ray), Color(127.5, 127.5, 127.5))

    def test_pixel_color_uses_background_on_miss(self):
        world = sphere_world(Metal(BASE, 0))
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert Renderer().pixel_color(world, ray) == WHITE


class TestCompositing:
    def test_zero_reflectance_is_direct_shading(self):
        world = sphere_world(Metal(BASE, 0))
        assert_color(Renderer().trace(world, FORWARD, MAX_BOUNCES), BASE)

    def test_full_reflectance_with_missed_bounce_is_black(self):
        # The mirror bounce heads back toward the eye and escapes the scene
        world = sphere_world(Metal(BASE, 1.0, fuzz=0))
        assert_color(Renderer().trace(world, FORWARD, MAX_BOUNCES), BLACK)

    def test_partial_reflectance_without_bounce(self):
        world = sphere_world(Metal(BASE, 0.25, fuzz=0))
        assert_color(Renderer().trace(world, FORWARD, 1), BASE * 0.75)

    def test_unlit_surface_is_black(self):
        world = sphere_world(Metal(BASE, 0), lights=[])
        assert_color(Renderer().trace(world, FORWARD, MAX_BOUNCES), BLACK)

    def test_lights_add_up(self):
        one = sphere_world(Metal(BASE, 0))
        two = sphere_world(Metal(BASE, 0), lights=[
            PointLight(Vector3(0, 0, 0), UNIT_POWER),
            PointLight(Vector3(0, 0, 0), UNIT_POWER),
        ])
        renderer = Renderer()
        single = renderer.trace(one, FORWARD, 3)
        double = renderer.trace(two, FORWARD, 3)
        assert_color(double, single * 2)

    def test_reflection_is_tinted_by_albedo(self):
        """A mirror in front of a lit wall returns the wall's color times the albedo."""
        mirror_color = Color(255, 0, 255)
        wall_color = Color(200, 200, 200)
        mirror = Sphere(Vector3(0, 0, 5), 1, Metal(mirror_color, 1.0, fuzz=0))
        # Large sphere behind the camera that the mirror bounce runs into
        wall = Sphere(Vector3(0, 0, -1000), 990, Metal(wall_color, 0))
        light = PointLight(Vector3(0, 0, 3), 1000)
        world = World([mirror, wall], [light])

        color = Renderer().trace(world, FORWARD, 2)
        assert color.r > 0
        assert color.g == pytest.approx(0)
        assert color.b == pytest.approx(color.r)


class TestRender:
    @pytest.fixture
    def context(self):
        camera = Camera(Vector3(0, 0, 0), Film(Vector3(-1, 1, 1), Vector3(1, -1, 1)))
        world = World(
            [Sphere(Vector3(0, 0, 5), 1, Lambertian(BASE, 0.5))],
            [PointLight(Vector3(2, 2, 0), 300)],
        )
        return RenderContext(camera, world)

    def test_every_pixel_written_and_presented(self, context):
        presented = []
        fb = Framebuffer(8, 6, on_present=presented.append)
        elapsed = Renderer(max_depth=4, seed=1).render(context, fb)
        assert elapsed >= 0
        assert presented == [fb]
        assert fb.frames_presented == 1
        assert (fb.pixels[:, :, 3] == 255).all()

    def test_seeded_renders_match(self, context):
        a = Framebuffer(8, 8)
        b = Framebuffer(8, 8)
        Renderer(max_depth=4, seed=42).render(context, a)
        Renderer(max_depth=4, rng=random.Random(42)).render(context, b)
        np.testing.assert_array_equal(a.pixels, b.pixels)

    def test_top_row_sky_is_brighter_than_bottom_row(self, context):
        fb = Framebuffer(8, 8)
        Renderer(max_depth=2, seed=0).render(context, fb)
        assert fb.get_pixel(0, 0)[0] > fb.get_pixel(0, 7)[0]

    def test_degenerate_camera_aborts_frame(self):
        camera = Camera(Vector3(0, 0, 1), Film(Vector3(0, 0, 1), Vector3(1, -1, 1)))
        fb = Framebuffer(4, 4)
        with pytest.raises(DegenerateVectorError):
            Renderer().render(RenderContext(camera, World()), fb)
        assert fb.frames_presented == 0
