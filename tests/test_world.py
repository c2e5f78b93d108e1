"""Unit tests for closest-hit resolution in HittableList."""

import itertools
import math

import pytest

from core.ray import Ray
from core.utils import make_rng
from core.vector import Point3, Vector3
from geometry.hittable import Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList


class RecordingHittable(Hittable):
    """Wraps a primitive and records the intervals it was queried with."""

    def __init__(self, inner):
        self.inner = inner
        self.queries = []

    def hit(self, ray, t_min, t_max):
        self.queries.append((t_min, t_max))
        return self.inner.hit(ray, t_min, t_max)


@pytest.fixture
def ray():
    return Ray(Point3(0, 0, 0), Vector3(0, 0, -1))


class TestHittableList:
    """Tests for the list container."""

    def test_empty_list_never_hits(self, ray):
        world = HittableList()
        assert len(world) == 0
        assert world.hit(ray, 0.0, math.inf) is None

    def test_add_and_clear(self):
        world = HittableList()
        sphere = Sphere(Point3(0, 0, -1), 0.5)
        world.add(sphere)
        assert len(world) == 1
        assert list(world) == [sphere]
        world.clear()
        assert len(world) == 0

    def test_constructor_copies_iterable(self):
        spheres = [Sphere(Point3(0, 0, -1), 0.5)]
        world = HittableList(spheres)
        spheres.append(Sphere(Point3(0, 0, -3), 0.5))
        assert len(world) == 1

    def test_base_class_is_abstract(self, ray):
        with pytest.raises(NotImplementedError):
            Hittable().hit(ray, 0.0, 1.0)


class TestClosestHit:
    """Tests for closest-hit resolution."""

    def test_returns_closest_of_two(self, ray):
        near = Sphere(Point3(0, 0, -2), 0.5)
        far = Sphere(Point3(0, 0, -5), 0.5)
        for objects in ([near, far], [far, near]):
            rec = HittableList(objects).hit(ray, 0.0, math.inf)
            assert rec.t == 1.5
            assert rec.p == Point3(0, 0, -1.5)

    def test_matches_smaller_individual_hit(self, ray):
        a = Sphere(Point3(0.1, 0, -3), 1.0)
        b = Sphere(Point3(0, -0.2, -2), 0.4)
        rec_a = a.hit(ray, 0.0, math.inf)
        rec_b = b.hit(ray, 0.0, math.inf)
        expected = rec_a if rec_a.t < rec_b.t else rec_b

        rec = HittableList([a, b]).hit(ray, 0.0, math.inf)
        assert rec.t == expected.t
        assert rec.p == expected.p
        assert rec.normal == expected.normal
        assert rec.front_face == expected.front_face

    def test_nothing_when_all_miss(self, ray):
        world = HittableList([
            Sphere(Point3(0, 0, 5), 0.5),
            Sphere(Point3(3, 0, -1), 0.5),
        ])
        assert world.hit(ray, 0.0, math.inf) is None

    def test_upper_bound_shrinks(self, ray):
        """Every primitive after a hit is queried with the tightened bound."""
        first = RecordingHittable(Sphere(Point3(0, 0, -5), 0.5))
        second = RecordingHittable(Sphere(Point3(0, 0, -2), 0.5))
        third = RecordingHittable(Sphere(Point3(0, 0, -9), 0.5))

        rec = HittableList([first, second, third]).hit(ray, 0.0, 100.0)

        assert rec.t == 1.5
        assert first.queries == [(0.0, 100.0)]
        assert second.queries == [(0.0, 4.5)]
        assert third.queries == [(0.0, 1.5)]

    def test_respects_original_interval(self, ray):
        world = HittableList([Sphere(Point3(0, 0, -2), 0.5), Sphere(Point3(0, 0, -5), 0.5)])
        assert world.hit(ray, 0.0, 1.0) is None
        assert world.hit(ray, 3.0, math.inf).t == 4.5

    def test_order_invariance(self):
        rng = make_rng(7)
        spheres = [
            Sphere(Point3(rng.uniform(-2, 2), rng.uniform(-2, 2), rng.uniform(-8, -2)),
                   rng.uniform(0.2, 1.0))
            for _ in range(5)
        ]
        for _ in range(50):
            ray = Ray(Point3(0, 0, 0),
                      Vector3(rng.uniform(-0.5, 0.5), rng.uniform(-0.5, 0.5), -1))
            results = set()
            for order in itertools.permutations(spheres):
                rec = HittableList(order).hit(ray, 0.0, math.inf)
                results.add(None if rec is None else (rec.t, rec.p, rec.normal))
            assert len(results) == 1
