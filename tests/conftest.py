"""Pytest configuration for ray tracer tests.

Shared fixtures for scenes, cameras and random streams. pygame is forced onto
its headless drivers before any test module imports it.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from camera.camera import Camera
from core.utils import make_rng
from core.vector import Point3
from geometry.sphere import Sphere
from geometry.world import HittableList


@pytest.fixture
def rng():
    """Seeded random stream so renders are repeatable within a test."""
    return make_rng(42)


@pytest.fixture
def camera():
    """Default camera at the origin looking down -z."""
    return Camera(aspect_ratio=2.0)


@pytest.fixture
def demo_world():
    """Small sphere resting on a large ground sphere."""
    return HittableList([
        Sphere(Point3(0, 0, -1), 0.5),
        Sphere(Point3(0, -100.5, -1), 100),
    ])
