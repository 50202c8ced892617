# main.py
import logging
import sys
from typing import Optional, Sequence

import pygame

from config import RenderSettings, parse_args
from core.errors import RaytracerError
from core.vector import Vector3
from camera.camera import Camera, Film
from camera.controls import handle_key
from geometry.world import World
from geometry.sphere import Sphere
from geometry.plane import Plane
from lights.point_light import PointLight
from materials.presets import MaterialPresets
from renderer.context import RenderContext
from renderer.framebuffer import Framebuffer
from renderer.raytracer import Renderer

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def create_camera() -> Camera:
    eye = Vector3(0, 0, 0.3)
    film = Film(Vector3(-0.8, 1.2, 1.3), Vector3(1.2, -0.3, 1.3))
    return Camera(eye, film)

def create_world() -> World:
    world = World()

    # Four metal spheres floating above the ground
    world.add(Sphere(Vector3(-1, 1, 5), 0.8, MaterialPresets.red_metal()))
    world.add(Sphere(Vector3(1, 1, 5), 0.8, MaterialPresets.green_mirror()))
    world.add(Sphere(Vector3(2.5, 1, 5), 0.8, MaterialPresets.blue_matte()))
    world.add(Sphere(Vector3(-1, 2, 4), 0.2, MaterialPresets.yellow_metal()))

    # Checkered ground plane
    world.add(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), MaterialPresets.ground()))

    world.add_light(PointLight(Vector3(5, 5, 5), 500))
    world.add_light(PointLight(Vector3(-5, 3, 1), 400))
    # Distant, very bright "sun"
    world.add_light(PointLight(Vector3(0, 1000, 5), 1e7))
    # Faint light just above the small yellow sphere
    world.add_light(PointLight(Vector3(-0.8, 1.3, 4.1), 2))

    logger.info("World created with %d objects and %d lights",
                len(world.objects), len(world.lights))
    return world

class Application:
    """
    Opens a window showing the rendered frame and re-renders whenever a
    camera key is pressed.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.context = RenderContext(create_camera(), create_world())
        self.renderer = Renderer(max_depth=settings.max_depth, seed=settings.seed)

        pygame.init()
        self.screen = pygame.display.set_mode((settings.width, settings.height))
        pygame.display.set_caption("Ray Tracer")
        self.framebuffer = Framebuffer(settings.width, settings.height,
                                       on_present=self.blit)

    def blit(self, framebuffer: Framebuffer):
        # surfarray is indexed (x, y), the framebuffer (y, x)
        rgb = framebuffer.pixels[:, :, :3].swapaxes(0, 1)
        surface = pygame.surfarray.make_surface(rgb)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def render(self):
        self.renderer.render(self.context, self.framebuffer)

    def handle_event(self, event) -> bool:
        """
        Handles one pygame event. Returns False when the application should quit.
        """
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            context = handle_key(self.context, pygame.key.name(event.key),
                                 self.settings.move_step)
            if context is not None:
                self.context = context
                self.render()
        return True

    def run(self):
        try:
            self.render()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                else:
                    pygame.time.wait(10)
        finally:
            pygame.quit()

def render_to_file(settings: RenderSettings) -> Framebuffer:
    context = RenderContext(create_camera(), create_world())
    renderer = Renderer(max_depth=settings.max_depth, seed=settings.seed)
    framebuffer = Framebuffer(settings.width, settings.height)
    renderer.render(context, framebuffer)
    path = framebuffer.save(settings.output)
    logger.info("Saved frame to %s", path.absolute())
    return framebuffer

def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = parse_args(argv)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        if settings.headless:
            render_to_file(settings)
        else:
            Application(settings).run()
    except RaytracerError:
        logger.exception("Render aborted")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
