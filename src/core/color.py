# core/color.py


class Color:
    """
    An RGB triple on the 0-255 display scale. Channels are never clamped here:
    light energy and reflection blends may exceed the display range, and
    clamping happens when the framebuffer stores the pixel.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, scalar: float) -> "Color":
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __rmul__(self, scalar: float) -> "Color":
        return self.__mul__(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def add(self, other: "Color") -> "Color":
        return self + other

    def scale(self, scalar: float) -> "Color":
        return self * scalar

    def multiply(self, other: "Color") -> "Color":
        """Component-wise product, used to tint reflected light."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def as_tuple(self):
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
