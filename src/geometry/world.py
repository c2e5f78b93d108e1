# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Iterable, Iterator, Optional, List
from core.ray import Ray

class HittableList(Hittable):
    """
    A list of Hittable objects. hit() returns the closest hit across all of
    them in a single pass. The list is built before rendering and only read
    afterwards.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        # Each hit tightens the upper bound, so order does not change the result
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
