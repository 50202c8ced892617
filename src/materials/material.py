# materials/material.py
import random
from core.color import Color
from core.ray import Ray
from core.vector import Vector3

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    reflectance splits a surface's output between locally shaded direct light
    (1 - reflectance) and the tinted recursive reflection (reflectance).
    """
    def __init__(self, color: Color, reflectance: float):
        if not 0.0 <= reflectance <= 1.0:
            raise ValueError(f"reflectance must be within [0, 1], got {reflectance}")
        self.color = color
        self.reflectance = reflectance

    def scatter(self, ray_in: Ray, point: Vector3, normal: Vector3,
                rng: random.Random) -> Vector3:
        """
        Computes the outgoing direction for a ray hitting the surface at point.
        The result need not be normalized.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r}, {self.reflectance})"
