# geometry/plane.py
import math
from typing import Optional
from core.color import Color
from core.vector import Vector3
from core.ray import Ray
from core.utils import PARALLEL_EPSILON
from geometry.hittable import Hittable

# Color of the even squares of the checkerboard
DARK_SQUARE = Color(10, 10, 10)

def _round_half_up(v: float) -> int:
    return math.floor(v + 0.5)

class Plane(Hittable):
    """
    An infinite plane through a point, colored as a checkerboard of unit
    squares on the x/z axes: even squares are dark gray, odd squares take the
    material color.
    """
    def __init__(self, point: Vector3, normal: Vector3, material):
        self.point = point
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray) -> Optional[float]:
        ndotl = self.normal.dot(ray.direction)

        if abs(ndotl) < PARALLEL_EPSILON:
            return None

        t = self.normal.dot(self.point - ray.origin) / ndotl
        if t < 0:
            return None
        return t

    def surface_normal(self, point: Vector3) -> Vector3:
        return self.normal

    def color_at(self, point: Vector3) -> Color:
        square = _round_half_up(point.x) + _round_half_up(point.z)
        if square % 2 == 0:
            return DARK_SQUARE
        return self.material.color

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, {self.normal!r})"
