# materials/lambertian.py

import random
from core.ray import Ray
from core.vector import Vector3
from core.utils import near_zero, random_in_unit_sphere
from materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def scatter(self, ray_in: Ray, point: Vector3, normal: Vector3,
                rng: random.Random) -> Vector3:
        """
        Aims at a random point in the unit sphere tangent to the surface at
        point, which gives a cosine-weighted distribution around the normal.
        """
        target = point + normal + random_in_unit_sphere(rng)
        scatter_direction = target - point

        # If scatter_direction is degenerate (very small), just use the normal.
        if near_zero(scatter_direction):
            scatter_direction = normal

        return scatter_direction
