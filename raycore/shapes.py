"""
Geometric shapes and bounding volumes for the ray tracer.

Each shape implements the Hittable interface: a `hit` test against a ray
and a time-aware `bounding_box` query used by acceleration structures.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import math

from .vec3 import Vec3, Point3
from .ray import Ray

if TYPE_CHECKING:
    from .materials import Material


class AABB:
    """Axis-Aligned Bounding Box for acceleration structures.

    The box is assumed well formed (``minimum[i] <= maximum[i]``); this is
    not enforced.
    """

    __slots__ = ('minimum', 'maximum')

    def __init__(self, minimum: Point3, maximum: Point3):
        """Create an AABB from corner points.

        Args:
            minimum: Corner with smallest x, y, z values
            maximum: Corner with largest x, y, z values
        """
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Test if ray passes through this box within (t_min, t_max).

        Slab method: each axis narrows the running interval, and the test
        fails as soon as the interval becomes empty.
        """
        for i in range(3):
            origin = ray.origin[i]
            direction = ray.direction[i]

            if direction == 0.0:
                # Parallel to this slab: either always inside it or never
                if origin < self.minimum[i] or origin > self.maximum[i]:
                    return False
                continue

            inv_d = 1.0 / direction
            t0 = (self.minimum[i] - origin) * inv_d
            t1 = (self.maximum[i] - origin) * inv_d

            if inv_d < 0:
                t0, t1 = t1, t0

            t_min = max(t0, t_min)
            t_max = min(t1, t_max)

            if t_max <= t_min:
                return False

        return True

    def contains(self, other: AABB) -> bool:
        """Return True if ``other`` lies entirely inside this box."""
        return all(
            self.minimum[i] <= other.minimum[i] and other.maximum[i] <= self.maximum[i]
            for i in range(3)
        )

    @staticmethod
    def surrounding_box(box0: AABB, box1: AABB) -> AABB:
        """Return the smallest AABB that contains both input boxes."""
        small = Point3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Point3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB(min={self.minimum}, max={self.maximum})"


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space
        normal: Unit surface normal at the intersection (always points against ray)
        t: The ray parameter at intersection
        front_face: True if ray hit from outside the object
        material: The material at the hit point, borrowed from the shape
        u, v: Surface coordinates at the hit point
    """
    point: Point3
    normal: Vec3
    t: float
    front_face: bool
    material: Optional[Material] = None
    u: float = 0.0
    v: float = 0.0

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Set the normal to always point against the ray direction.

        Args:
            ray: The incoming ray
            outward_normal: The unit geometric normal pointing outward from surface
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test
            t_min: Lower bound (exclusive) on the ray parameter
            t_max: Upper bound (exclusive) on the ray parameter

        Returns:
            HitRecord if intersection found, None otherwise
        """
        pass

    @abstractmethod
    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """Get a box enclosing this object over the interval [time0, time1].

        Returns:
            AABB if the object is bounded, None otherwise
        """
        pass


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Get spherical UV coordinates for a point on the unit sphere.

    u: [0,1] angle around the Y axis, decreasing from X=-1
    v: [0,1] angle from Y=-1 to Y=+1
    """
    phi = math.atan2(p.z, p.x)
    theta = math.asin(max(-1.0, min(1.0, p.y)))
    u = 1 - (phi + math.pi) / (2 * math.pi)
    v = (theta + math.pi / 2) / math.pi
    return u, v


def _hit_sphere(
    center: Point3,
    radius: float,
    material: Optional[Material],
    ray: Ray,
    t_min: float,
    t_max: float
) -> Optional[HitRecord]:
    """Ray-sphere intersection using the half-b form of the quadratic.

    The equation (P-C)·(P-C) = r² where P = ray.at(t)
    expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0.
    """
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius

    discriminant = half_b * half_b - a * c
    if discriminant <= 0:
        return None

    sqrtd = math.sqrt(discriminant)

    # Nearer root first
    root = (-half_b - sqrtd) / a
    if not t_min < root < t_max:
        root = (-half_b + sqrtd) / a
        if not t_min < root < t_max:
            return None

    point = ray.at(root)
    outward_normal = (point - center) / radius
    u, v = get_sphere_uv(outward_normal)

    hit_record = HitRecord(
        point=point,
        normal=outward_normal,
        t=root,
        front_face=True,
        material=material,
        u=u,
        v=v
    )
    hit_record.set_face_normal(ray, outward_normal)

    return hit_record


class Sphere(Hittable):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Optional[Material] = None):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere (negative flips normals inward)
            material: Material for shading, may be shared with other shapes
        """
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """Return the AABB containing this sphere (independent of time)."""
        r_vec = Vec3(abs(self.radius), abs(self.radius), abs(self.radius))
        return AABB(self.center - r_vec, self.center + r_vec)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class MovingSphere(Hittable):
    """A sphere that moves linearly between two positions over time.

    Used for motion blur. Outside [time0, time1] the motion continues on
    the same line. ``time1`` must differ from ``time0``.
    """

    def __init__(
        self,
        center0: Point3,
        center1: Point3,
        time0: float,
        time1: float,
        radius: float,
        material: Optional[Material] = None
    ):
        """Create a moving sphere.

        Args:
            center0: Center position at time0
            center1: Center position at time1
            time0: Start time
            time1: End time
            radius: Radius of the sphere
            material: Material for shading
        """
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Point3:
        """Get the center position at a given time."""
        s = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 * (1.0 - s) + self.center1 * s

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test ray-sphere intersection at the ray's time."""
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """Return an AABB enclosing the sphere at both ends of the interval.

        Exact for linear motion, since the swept volume is the hull of the
        two end spheres.
        """
        r_vec = Vec3(abs(self.radius), abs(self.radius), abs(self.radius))
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - r_vec, c0 + r_vec)
        box1 = AABB(c1 - r_vec, c1 + r_vec)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        return (f"MovingSphere(center0={self.center0}, center1={self.center1}, "
                f"time0={self.time0}, time1={self.time1}, radius={self.radius})")
