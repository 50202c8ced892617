# camera/controls.py
import logging
from core.vector import Vector3
from renderer.context import RenderContext

logger = logging.getLogger(__name__)

DEFAULT_STEP = 0.1

# Unit axis for each movement
DIRECTIONS = {
    "left": Vector3(-1, 0, 0),
    "right": Vector3(1, 0, 0),
    "down": Vector3(0, -1, 0),
    "up": Vector3(0, 1, 0),
    "forward": Vector3(0, 0, 1),
    "backward": Vector3(0, 0, -1),
}

KEY_BINDINGS = {
    "a": "left",
    "h": "left",
    "d": "right",
    "l": "right",
    "j": "down",
    "k": "up",
    "w": "forward",
    "s": "backward",
}

def nudge(context: RenderContext, direction: str, step: float = DEFAULT_STEP) -> RenderContext:
    """
    Returns a new context with the eye and film moved `step` world units
    in `direction`. The given context is left untouched.
    """
    try:
        axis = DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown camera direction: {direction!r}") from None

    camera = context.camera.translated(axis * step)
    logger.debug("Camera moved %s, eye now %r", direction, camera.eye)
    return context.with_camera(camera)

def handle_key(context: RenderContext, key: str, step: float = DEFAULT_STEP):
    """
    Applies the nudge bound to `key`. Returns the new context, or None if the
    key is not bound and nothing should be re-rendered.
    """
    direction = KEY_BINDINGS.get(key)
    if direction is None:
        return None
    return nudge(context, direction, step)
