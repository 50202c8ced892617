# geometry/sphere.py
import math
from typing import Optional
from core.color import Color
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[float]:
        oc = ray.origin - self.center
        dot = ray.direction.dot(oc)

        a = dot * dot
        b = oc.dot(oc) - self.radius * self.radius

        # No real root: the ray passes outside the sphere
        if a < b:
            return None

        sqrt = math.sqrt(a - b)
        roots = [t for t in (-dot - sqrt, -dot + sqrt) if t >= 0]
        if not roots:
            return None
        return min(roots)

    def surface_normal(self, point: Vector3) -> Vector3:
        return (point - self.center).normalize()

    def color_at(self, point: Vector3) -> Color:
        return self.material.color

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
