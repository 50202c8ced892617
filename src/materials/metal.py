# materials/metal.py
import random
from core.color import Color
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect
from materials.material import Material

DEFAULT_FUZZ = 0.1

class Metal(Material):
    """
    Mirror-like material. The reflected direction is jittered by a random
    vector with components in [0, fuzz) to blur the reflection.
    """
    def __init__(self, color: Color, reflectance: float, fuzz: float = DEFAULT_FUZZ):
        super().__init__(color, reflectance)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, point: Vector3, normal: Vector3,
                rng: random.Random) -> Vector3:
        reflected = reflect(ray_in.direction, normal)
        jitter = Vector3(rng.random(), rng.random(), rng.random())
        return reflected + jitter * self.fuzz
