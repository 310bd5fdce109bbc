# geometry/sphere.py
import math
from typing import List

from raycaster.core.ray import Ray
from raycaster.core.vector import ZERO_POINT, Vector4
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.shape import Shape


class Sphere(Shape):
    """
    Unit sphere centered on the local origin. Size and position come from the
    transform.
    """
    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        sphere_to_ray = local_ray.origin - ZERO_POINT
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        # Both roots, nearest first, even when tangent or behind the origin
        return [
            Intersection((-b - sqrt_disc) / (2.0 * a), self),
            Intersection((-b + sqrt_disc) / (2.0 * a), self),
        ]

    def local_normal_at(self, local_point: Vector4) -> Vector4:
        return local_point - ZERO_POINT
