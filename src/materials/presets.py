# materials/presets.py
from core.color import Color
from materials.metal import Metal
from materials.lambertian import Lambertian

class ColorPresets:
    """Colors of the default scene, on the 0-255 scale."""

    RED = Color(255, 50, 50)
    GREEN = Color(50, 255, 100)
    BLUE = Color(50, 100, 255)
    YELLOW = Color(220, 220, 75)
    GRAY = Color(100, 100, 100)

class MaterialPresets:
    """Predefined materials of the default scene."""

    @staticmethod
    def red_metal() -> Metal:
        return Metal(ColorPresets.RED, reflectance=0.2)

    @staticmethod
    def green_mirror() -> Metal:
        return Metal(ColorPresets.GREEN, reflectance=0.8)

    @staticmethod
    def blue_matte() -> Metal:
        return Metal(ColorPresets.BLUE, reflectance=0)

    @staticmethod
    def yellow_metal() -> Metal:
        return Metal(ColorPresets.YELLOW, reflectance=0.7)

    @staticmethod
    def ground() -> Metal:
        return Metal(ColorPresets.GRAY, reflectance=0)

    @staticmethod
    def matte(color: Color, reflectance: float = 0.5) -> Lambertian:
        """Create a diffuse material with the given color."""
        return Lambertian(color, reflectance)
