# core/utils.py
import random
from core.errors import SamplingError
from core.vector import Vector3

# Offset along the normal for rays leaving a surface, and the lower bound
# on shadow-ray hits, so a point never intersects the surface it lies on.
BIAS_EPSILON = 1e-10

# Below this |normal . direction| a ray counts as parallel to a plane.
PARALLEL_EPSILON = 1e-10

MAX_REJECTION_SAMPLES = 1000

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere by rejection sampling
    the cube [-1, 1)^3.
    """
    for _ in range(MAX_REJECTION_SAMPLES):
        p = Vector3(rng.random(), rng.random(), rng.random()) * 2.0 - Vector3(1.0, 1.0, 1.0)
        if p.length() < 1.0:
            return p
    raise SamplingError(
        f"no sample inside the unit sphere after {MAX_REJECTION_SAMPLES} attempts"
    )

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def near_zero(v: Vector3, eps: float = 1e-8) -> bool:
    return abs(v.x) < eps and abs(v.y) < eps and abs(v.z) < eps
