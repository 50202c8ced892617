# renderer/context.py
from dataclasses import dataclass, replace

from camera.camera import Camera
from geometry.world import World


@dataclass(frozen=True)
class RenderContext:
    """Everything a render reads: the camera and the world it looks at."""

    camera: Camera
    world: World

    def with_camera(self, camera: Camera) -> "RenderContext":
        return replace(self, camera=camera)
