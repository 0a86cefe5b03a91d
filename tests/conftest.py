"""Shared fixtures for raycore tests."""

import pytest
import numpy as np

from raycore.vec3 import Vec3, Point3
from raycore.shapes import HitRecord


@pytest.fixture
def rng():
    """Seeded generator so stochastic tests are repeatable."""
    return np.random.default_rng(12345)


@pytest.fixture
def make_hit():
    """Build a hit record for material tests."""
    def _make(point=None, normal=None, front_face=True, u=0.0, v=0.0, t=1.0):
        return HitRecord(
            point=point if point is not None else Point3(0, 0, 0),
            normal=normal if normal is not None else Vec3(0, 1, 0),
            t=t,
            front_face=front_face,
            u=u,
            v=v
        )
    return _make
