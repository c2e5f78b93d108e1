# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.
    """
    def __init__(self, center: Point3, radius: float):
        if not math.isfinite(radius) or radius <= 0:
            raise ValueError(f"Sphere radius must be positive and finite, got {radius}")
        self._center = center
        self._radius = float(radius)

    @property
    def center(self) -> Point3:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self._center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self._radius * self._radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - self._center) / self._radius
        return HitRecord.from_outward_normal(ray, root, p, outward_normal)

    def __repr__(self) -> str:
        return f"Sphere({self._center!r}, {self._radius})"
