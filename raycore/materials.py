"""
Materials and the scattering protocol.

Implements:
- Lambertian diffuse (texture backed)
- Metal (specular reflection with fuzz)
- Dielectric (glass, water - with refraction)

A material turns an incoming ray and hit record into an attenuation color
and a scattered ray, or returns None when the ray is absorbed.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union, TYPE_CHECKING
import logging
import math

import numpy as np

from .vec3 import Vec3, Color
from .ray import Ray
from .sampling import get_rng, random_double
from .textures import Texture, SolidColor

if TYPE_CHECKING:
    from .shapes import HitRecord

logger = logging.getLogger(__name__)


@dataclass
class ScatterResult:
    """Result of a material scatter operation."""
    attenuation: Color
    scattered_ray: Ray

    def __iter__(self):
        return iter((self.attenuation, self.scattered_ray))


class Material(ABC):
    """Abstract base class for materials.

    Materials are read-only after construction and may be shared by any
    number of shapes.
    """

    @abstractmethod
    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: Optional[np.random.Generator] = None
    ) -> Optional[ScatterResult]:
        """Compute the scattered ray and attenuation.

        Args:
            ray_in: The incoming ray
            rec: Hit record for the surface that was struck
            rng: Random source (thread default if None)

        Returns:
            ScatterResult if ray scatters, None if absorbed
        """
        pass


class Lambertian(Material):
    """Diffuse material with Lambertian (ideal matte) scattering."""

    def __init__(self, albedo: Union[Texture, Color]):
        """Create a Lambertian material.

        Args:
            albedo: Texture giving the base color, or a plain color
        """
        self.albedo = albedo if isinstance(albedo, Texture) else SolidColor(albedo)

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: Optional[np.random.Generator] = None
    ) -> Optional[ScatterResult]:
        rng = get_rng(rng)
        scatter_direction = rec.normal + Vec3.random_unit_vector(rng)

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterResult(
            attenuation=self.albedo.value(rec.u, rec.v, rec.point),
            scattered_ray=Ray(rec.point, scatter_direction, ray_in.time)
        )


class Metal(Material):
    """Metallic material with specular reflection."""

    def __init__(self, albedo: Color, fuzz: float = 0.0):
        """Create a metal material.

        Args:
            albedo: The reflection color
            fuzz: Radius of the reflection perturbation (0 = mirror), clamped to [0, 1]
        """
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))
        if self.fuzz != fuzz:
            logger.debug("Metal fuzz %r clamped to %r", fuzz, self.fuzz)

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: Optional[np.random.Generator] = None
    ) -> Optional[ScatterResult]:
        reflected = ray_in.direction.normalize().reflect(rec.normal)

        if self.fuzz > 0:
            reflected = reflected + Vec3.random_in_unit_sphere(get_rng(rng)) * self.fuzz

        scattered = Ray(rec.point, reflected, ray_in.time)

        # Fuzzed reflections that dip below the surface are absorbed
        if scattered.direction.dot(rec.normal) > 0:
            return ScatterResult(attenuation=self.albedo, scattered_ray=scattered)
        return None


class Dielectric(Material):
    """Dielectric (glass-like) material with refraction."""

    def __init__(self, ref_idx: float = 1.5):
        """Create a dielectric material.

        Args:
            ref_idx: Index of refraction (1.0 = air, 1.5 = glass, 2.4 = diamond).
                Must be positive.
        """
        self.ref_idx = ref_idx

    def scatter(
        self,
        ray_in: Ray,
        rec: HitRecord,
        rng: Optional[np.random.Generator] = None
    ) -> Optional[ScatterResult]:
        # Entering the surface from outside divides by the index
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if refraction_ratio * sin_theta > 1.0:
            # Total internal reflection
            direction = unit_direction.reflect(rec.normal)
        elif refraction_ratio == 1.0:
            # Matched indices: no interface to reflect from
            direction = unit_direction.refract(rec.normal, refraction_ratio)
        elif random_double(get_rng(rng)) < self.reflectance(cos_theta, refraction_ratio):
            direction = unit_direction.reflect(rec.normal)
        else:
            direction = unit_direction.refract(rec.normal, refraction_ratio)

        return ScatterResult(
            attenuation=Color(1.0, 1.0, 1.0),
            scattered_ray=Ray(rec.point, direction, ray_in.time)
        )

    @staticmethod
    def reflectance(cosine: float, ratio: float) -> float:
        """Schlick's approximation for reflectance."""
        r0 = (1 - ratio) / (1 + ratio)
        r0 = r0 * r0
        return r0 + (1 - r0) * pow(1 - cosine, 5)
