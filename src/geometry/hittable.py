# geometry/hittable.py
from typing import Optional
from core.color import Color
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "obj")

    def __init__(self, t: float, p: Vector3, normal: Vector3, obj: "Hittable"):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Unit surface normal at the intersection
        self.obj = obj          # The primitive that was hit

    @property
    def material(self):
        return self.obj.material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, obj={self.obj!r})"

class Hittable:
    """
    Abstract class for surfaces that can be hit by a ray.

    Subclasses implement intersect(), surface_normal() and color_at().
    intersect() assumes the ray direction has unit length.
    """
    material = None

    def intersect(self, ray: Ray) -> Optional[float]:
        """
        Returns the nearest non-negative ray parameter t, or None on a miss.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def surface_normal(self, point: Vector3) -> Vector3:
        raise NotImplementedError("surface_normal() must be implemented by subclasses.")

    def color_at(self, point: Vector3) -> Color:
        raise NotImplementedError("color_at() must be implemented by subclasses.")
