"""Pytest configuration for raytracer tests.

Shared fixtures: a seeded random source, a simple camera looking down +z,
and small worlds built from the library's own primitives.
"""

import random

import pytest

from camera.camera import Camera, Film
from core.color import Color
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import World
from lights.point_light import PointLight
from materials.metal import Metal


@pytest.fixture
def rng():
    """A random source with a fixed seed so scatter results are repeatable."""
    return random.Random(1234)


@pytest.fixture
def camera():
    """Camera at the origin looking down +z through a 2x2 film at z=1."""
    return Camera(Vector3(0, 0, 0), Film(Vector3(-1, 1, 1), Vector3(1, -1, 1)))


@pytest.fixture
def gray_metal():
    return Metal(Color(200, 200, 200), reflectance=0)


@pytest.fixture
def single_sphere_world(gray_metal):
    """One unit sphere at (0, 1, 5) lit by a single light at (5, 5, 5)."""
    return World(
        objects=[Sphere(Vector3(0, 1, 5), 1, gray_metal)],
        lights=[PointLight(Vector3(5, 5, 5), 500)],
    )
