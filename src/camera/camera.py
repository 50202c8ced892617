# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Film:
    """
    A rectangle of constant depth in front of the eye, spanned by its top-left
    and bottom-right corners. Image coordinates (x, y) in [0, 1] x [0, 1] run
    left to right and top to bottom; world y runs upward.
    """
    def __init__(self, top_left: Vector3, bottom_right: Vector3):
        self.top_left = top_left
        self.bottom_right = bottom_right

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.top_left.y - self.bottom_right.y

    @property
    def z(self) -> float:
        return self.top_left.z

    def project(self, x: float, y: float) -> Vector3:
        """Maps image coordinates to the world point on the film."""
        return Vector3(
            self.top_left.x + x * self.width,
            self.top_left.y - y * self.height,
            self.z
        )

    def translated(self, delta: Vector3) -> "Film":
        return Film(self.top_left + delta, self.bottom_right + delta)

    def __repr__(self) -> str:
        return f"Film({self.top_left!r}, {self.bottom_right!r})"

class Camera:
    """
    A pinhole camera: every primary ray starts at the eye and passes through
    a point on the film.
    """
    def __init__(self, eye: Vector3, film: Film):
        self.eye = eye
        self.film = film

    def trace(self, x: float, y: float) -> Ray:
        """Generates the primary ray through image coordinates (x, y)."""
        direction = (self.film.project(x, y) - self.eye).normalize()
        return Ray(self.eye, direction)

    def translated(self, delta: Vector3) -> "Camera":
        """Returns a camera with the eye and film both moved by delta."""
        return Camera(self.eye + delta, self.film.translated(delta))

    def __repr__(self) -> str:
        return f"Camera(eye={self.eye!r}, film={self.film!r})"
