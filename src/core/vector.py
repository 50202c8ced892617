# core/vector.py
import math

from core.errors import DegenerateVectorError

class Vector3:
    """
    A simple immutable 3D vector supporting arithmetic, dot and cross products,
    and normalization. Every operation returns a new instance.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, t: float) -> "Vector3":
        if not isinstance(t, (int, float)):
            return NotImplemented
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def add(self, other: "Vector3") -> "Vector3":
        return self + other

    def subtract(self, other: "Vector3") -> "Vector3":
        return self - other

    def scale(self, t: float) -> "Vector3":
        return self * t

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        """
        Returns a unit vector in the same direction.
        Raises DegenerateVectorError for a zero-length vector.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError(f"cannot normalize zero-length {self!r}")
        return self / l

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
