# renderer/raytracer.py
import logging
import random
import time
from typing import Optional

from core.color import BLACK, WHITE, Color
from core.ray import Ray
from core.utils import BIAS_EPSILON
from geometry.world import World
from renderer.context import RenderContext
from renderer.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

MAX_BOUNCES = 50

# Darkest the sky gets, as a fraction of white
MIN_SKY_BRIGHTNESS = 0.1

def background(ray: Ray) -> Color:
    """
    Sky gradient: white scaled by the ray's upward component, floored at
    MIN_SKY_BRIGHTNESS.
    """
    return WHITE.scale(max(MIN_SKY_BRIGHTNESS, ray.direction.y))

class Renderer:
    """
    Whitted-style recursive ray tracer: direct light from point sources plus
    a single scattered bounce per hit, up to max_depth bounces.
    """
    def __init__(self, max_depth: int = MAX_BOUNCES, rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        self.max_depth = max_depth
        self.rng = rng if rng is not None else random.Random(seed)

    def trace(self, world: World, ray: Ray, remaining: int) -> Optional[Color]:
        """
        Returns the color seen along ray, or None if it hits nothing or the
        bounce budget is spent. Callers substitute a background for None.
        """
        if remaining <= 0:
            return None

        rec = world.hit(ray)
        if rec is None:
            return None

        energy = sum(light.illuminate(rec.p, rec.normal, world.objects)
                     for light in world.lights)

        material = rec.material
        color = rec.obj.color_at(rec.p)
        shade = color.scale(energy)

        scattered = material.scatter(ray, rec.p, rec.normal, self.rng)
        # Start just outside the surface so the bounce cannot hit it again
        origin = rec.p + rec.normal * BIAS_EPSILON
        reflection_ray = Ray(origin, scattered.normalize())

        reflection = self.trace(world, reflection_ray, remaining - 1)
        if reflection is None:
            reflection = BLACK

        albedo = color.scale(material.reflectance / 255)
        return shade.scale(1 - material.reflectance) + reflection.multiply(albedo)

    def pixel_color(self, world: World, ray: Ray) -> Color:
        color = self.trace(world, ray, self.max_depth)
        if color is None:
            return background(ray)
        return color

    def render(self, context: RenderContext, framebuffer: Framebuffer) -> float:
        """
        Traces one primary ray per pixel into framebuffer and presents it.
        Returns the render time in seconds.
        """
        width, height = framebuffer.width, framebuffer.height
        camera, world = context.camera, context.world
        logger.info("Rendering %dx%d, %d objects, %d lights, max depth %d",
                    width, height, len(world.objects), len(world.lights), self.max_depth)

        start = time.perf_counter()
        for y in range(height):
            for x in range(width):
                ray = camera.trace(x / width, y / height)
                framebuffer.set_pixel(x, y, self.pixel_color(world, ray))
            logger.debug("Row %d/%d done", y + 1, height)

        framebuffer.present()
        elapsed = time.perf_counter() - start
        logger.info("Frame rendered in %.2fs", elapsed)
        return elapsed
