"""
raycore - Intersection and shading core for a Python ray tracer

Provides the pieces a renderer builds on:
- Rays with timestamps and time-aware geometry (motion blur)
- Axis-aligned bounding boxes for acceleration structures
- Analytic sphere and moving-sphere intersection with UV mapping
- Lambertian, metal and dielectric materials
- Solid, checker and Perlin noise textures
"""

import logging

__version__ = "0.1.0"
__author__ = "raycore Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .sampling import get_rng, seed, random_double, random_int
from .shapes import AABB, HitRecord, Hittable, Sphere, MovingSphere, get_sphere_uv
from .perlin import Perlin, NoiseSettings, generate_permutation
from .textures import Texture, SolidColor, CheckerTexture, NoiseTexture, NoiseMode
from .materials import Material, ScatterResult, Lambertian, Metal, Dielectric

logging.getLogger(__name__).addHandler(logging.NullHandler())
