# lights/point_light.py
import math
from typing import Iterable
from core.ray import Ray
from core.vector import Vector3
from core.utils import BIAS_EPSILON

class PointLight:
    """
    A point light radiating `power` equally in all directions, with
    inverse-square falloff and hard shadows.
    """
    def __init__(self, center: Vector3, power: float):
        self.center = center
        self.power = power

    def is_occluded(self, point: Vector3, objects: Iterable) -> bool:
        """
        True if any object lies strictly between point and the light.
        """
        point_to_light = self.center - point
        distance = point_to_light.length()
        shadow_ray = Ray(point, point_to_light.normalize())
        for obj in objects:
            t = obj.intersect(shadow_ray)
            if t is not None and BIAS_EPSILON < t < distance:
                return True
        return False

    def illuminate(self, point: Vector3, normal: Vector3, objects: Iterable) -> float:
        """
        Returns the direct light energy arriving at point, never negative.
        """
        point_to_light = self.center - point
        distance = point_to_light.length()

        if self.is_occluded(point, objects):
            return 0.0

        cosine = point_to_light.dot(normal) / distance
        energy = self.power * cosine / (4 * math.pi * distance * distance)
        return max(energy, 0.0)

    def __repr__(self) -> str:
        return f"PointLight({self.center!r}, {self.power})"
