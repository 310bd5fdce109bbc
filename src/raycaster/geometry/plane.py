# geometry/plane.py
from typing import List

from raycaster.config import EPSILON
from raycaster.core.ray import Ray
from raycaster.core.vector import Vector4, vector
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.shape import Shape

_LOCAL_NORMAL = vector(0, 1, 0)


class Plane(Shape):
    """
    The infinite xz plane (y == 0) in local space.
    """
    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        # Parallel or coplanar rays never hit
        if abs(local_ray.direction.y) < EPSILON:
            return []
        t = -local_ray.origin.y / local_ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, local_point: Vector4) -> Vector4:
        return _LOCAL_NORMAL
