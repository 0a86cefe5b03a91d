"""
Gradient (Perlin) noise for procedural textures.

The generator places a random unit vector on every lattice point, picked
through three per-axis permutation tables, and blends the eight corner
contributions of the enclosing cell with Hermite-smoothed weights.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import math

import numpy as np

from .vec3 import Vec3, Point3
from .sampling import get_rng, random_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoiseSettings:
    """Configuration for noise generation."""
    point_count: int = 256
    turbulence_depth: int = 7
    marble_gain: float = 10.0

    def __post_init__(self):
        if self.point_count <= 0 or self.point_count & (self.point_count - 1):
            raise ValueError(
                f"point_count must be a positive power of two, got {self.point_count}"
            )
        if self.turbulence_depth < 1:
            raise ValueError(
                f"turbulence_depth must be at least 1, got {self.turbulence_depth}"
            )


def generate_permutation(count: int, rng: np.random.Generator) -> np.ndarray:
    """Return a random permutation of [0, count) using a Fisher-Yates shuffle."""
    p = np.arange(count, dtype=np.int64)
    for i in range(count - 1, 0, -1):
        target = random_int(rng, 0, i)
        p[i], p[target] = p[target], p[i]
    return p


class Perlin:
    """Perlin noise generator.

    Tables are built once at construction and never modified, so a single
    instance can be queried from any number of threads.
    """

    def __init__(self, settings: Optional[NoiseSettings] = None, rng: Optional[np.random.Generator] = None):
        """Build the gradient and permutation tables.

        Args:
            settings: Table size and turbulence defaults
            rng: Random source for the tables (thread default if None)
        """
        self.settings = settings if settings else NoiseSettings()
        rng = get_rng(rng)
        count = self.settings.point_count

        self._mask = count - 1
        self._ranvec = np.array(
            [Vec3.random_unit_vector(rng).to_array() for _ in range(count)]
        )
        self._perm_x = generate_permutation(count, rng)
        self._perm_y = generate_permutation(count, rng)
        self._perm_z = generate_permutation(count, rng)

        for table in (self._ranvec, self._perm_x, self._perm_y, self._perm_z):
            table.setflags(write=False)

        logger.debug("Built Perlin tables with %d lattice vectors", count)

    def noise(self, point: Point3) -> float:
        """Smoothed gradient noise at a point, roughly in [-1, 1].

        Zero at every integer lattice point.
        """
        fi = math.floor(point.x)
        fj = math.floor(point.y)
        fk = math.floor(point.z)
        u = point.x - fi
        v = point.y - fj
        w = point.z - fk

        # Hermite smoothing for the interpolation weights only
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        i, j, k = int(fi), int(fj), int(fk)
        mask = self._mask
        accum = 0.0

        for di in (0, 1):
            px = self._perm_x[(i + di) & mask]
            wx = uu if di else 1 - uu
            for dj in (0, 1):
                py = self._perm_y[(j + dj) & mask]
                wy = vv if dj else 1 - vv
                for dk in (0, 1):
                    pz = self._perm_z[(k + dk) & mask]
                    wz = ww if dk else 1 - ww
                    gradient = self._ranvec[px ^ py ^ pz]
                    contribution = (
                        gradient[0] * (u - di)
                        + gradient[1] * (v - dj)
                        + gradient[2] * (w - dk)
                    )
                    accum += wx * wy * wz * contribution

        return float(accum)

    def turbulence(self, point: Point3, depth: Optional[int] = None) -> float:
        """Multi-octave noise (turbulence).

        Each octave doubles the frequency and halves the amplitude; the
        absolute value of the sum is returned.
        """
        if depth is None:
            depth = self.settings.turbulence_depth

        accum = 0.0
        weight = 1.0
        p = point

        for _ in range(depth):
            accum += weight * self.noise(p)
            weight *= 0.5
            p = p * 2

        return abs(accum)
