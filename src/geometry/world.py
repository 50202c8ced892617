# src/geometry/world.py
import logging
from typing import Iterable, List, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

logger = logging.getLogger(__name__)

class World:
    """
    The scene: an ordered list of primitives and an ordered list of lights.

    Primitive order only matters for exact ties in t, where the first object
    found wins.
    """
    def __init__(self, objects: Iterable[Hittable] = (), lights: Iterable = ()):
        self.objects: List[Hittable] = list(objects)
        self.lights: List = list(lights)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        logger.debug("Added %r", obj)

    def add_light(self, light):
        self.lights.append(light)
        logger.debug("Added %r", light)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Finds the object with the smallest non-negative t along the ray.
        Returns None when nothing is hit.
        """
        closest_so_far = float("inf")
        closest = None
        for obj in self.objects:
            t = obj.intersect(ray)
            if t is not None and t < closest_so_far:
                closest_so_far = t
                closest = obj

        if closest is None:
            return None

        p = ray.at(closest_so_far)
        return HitRecord(closest_so_far, p, closest.surface_normal(p), closest)

    def __len__(self) -> int:
        return len(self.objects)
