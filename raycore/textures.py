"""
Texture system for the ray tracer.

Implements:
- Solid color textures
- 3D checker pattern
- Perlin noise textures (smooth, turbulence and marble)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union
import math

import numpy as np

from .vec3 import Color, Point3
from .perlin import Perlin, NoiseSettings


class Texture(ABC):
    """Abstract base class for textures."""

    @abstractmethod
    def value(self, u: float, v: float, point: Point3) -> Color:
        """Get the texture color at a surface location.

        Args:
            u: Horizontal surface coordinate [0, 1]
            v: Vertical surface coordinate [0, 1]
            point: 3D point in world space (for procedural textures)

        Returns:
            Color at this location
        """
        pass


class SolidColor(Texture):
    """A solid color texture."""

    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> SolidColor:
        return cls(Color(r, g, b))

    def value(self, u: float, v: float, point: Point3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color})"


class CheckerTexture(Texture):
    """A volumetric checker pattern.

    The sign of sin(fx)·sin(fy)·sin(fz) picks the sub-texture, so the
    pattern lives in world space and does not depend on surface UVs.
    """

    def __init__(self, even: Texture, odd: Texture, frequency: float = 10.0):
        """Create a checker texture.

        Args:
            even: Texture where the sine product is non-negative
            odd: Texture where the sine product is negative
            frequency: Angular frequency f; cells repeat every 2π/f
        """
        self.even = even
        self.odd = odd
        self.frequency = frequency

    @classmethod
    def from_colors(cls, c1: Color, c2: Color, frequency: float = 10.0) -> CheckerTexture:
        return cls(SolidColor(c1), SolidColor(c2), frequency)

    def value(self, u: float, v: float, point: Point3) -> Color:
        f = self.frequency
        sines = math.sin(f * point.x) * math.sin(f * point.y) * math.sin(f * point.z)
        if sines < 0:
            return self.odd.value(u, v, point)
        return self.even.value(u, v, point)


class NoiseMode(Enum):
    """How a NoiseTexture turns Perlin noise into an intensity."""
    SMOOTH = "smooth"
    TURBULENCE = "turbulence"
    MARBLE = "marble"


class NoiseTexture(Texture):
    """Perlin noise texture.

    Every mode keeps the intensity non-negative, so the result is safe to
    feed through gamma correction.
    """

    def __init__(
        self,
        scale: float = 1.0,
        mode: Union[NoiseMode, str] = NoiseMode.MARBLE,
        color: Optional[Color] = None,
        perlin: Optional[Perlin] = None,
        settings: Optional[NoiseSettings] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """Create a noise texture.

        Args:
            scale: Frequency of the pattern
            mode: SMOOTH, TURBULENCE or MARBLE (enum or its string value)
            color: Base color modulated by the noise intensity
            perlin: Existing generator to share; a new one is built if None
            settings: Settings for a newly built generator
            rng: Random source for a newly built generator

        Raises:
            ValueError: If mode is not a known NoiseMode
        """
        self.scale = scale
        self.mode = NoiseMode(mode)
        self.color = color if color else Color(1, 1, 1)
        self.noise = perlin if perlin else Perlin(settings, rng)

    def intensity(self, point: Point3) -> float:
        """Scalar noise intensity at a point."""
        if self.mode is NoiseMode.SMOOTH:
            return 0.5 * (1 + self.noise.noise(point * self.scale))
        if self.mode is NoiseMode.TURBULENCE:
            return self.noise.turbulence(point * self.scale)
        gain = self.noise.settings.marble_gain
        return 0.5 * (1 + math.sin(self.scale * point.z + gain * self.noise.turbulence(point)))

    def value(self, u: float, v: float, point: Point3) -> Color:
        return self.color * self.intensity(point)
