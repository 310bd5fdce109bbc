# geometry/intersection.py
from typing import TYPE_CHECKING, Iterable, Optional

from raycaster.config import EPSILON
from raycaster.core.ray import Ray
from raycaster.core.vector import Vector4

if TYPE_CHECKING:
    from raycaster.geometry.shape import Shape


class Intersection:
    """
    A candidate hit: the ray parameter t and the shape it belongs to.
    Only meaningful together with the ray that produced it.
    """
    def __init__(self, t: float, shape: "Shape"):
        self.t = t
        self.shape = shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.shape.id == other.shape.id

    __hash__ = None

    def __repr__(self) -> str:
        return f"Intersection({self.t}, {type(self.shape).__name__}:{str(self.shape.id)[:8]})"


def hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the nearest intersection at or in front of the ray origin, or None
    if every candidate lies behind it.
    """
    visible = [i for i in intersections if i.t >= 0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)


class Computations:
    """
    Shading state derived from one intersection and the ray that produced it.
    """
    def __init__(self, t: float, shape: "Shape", point: Vector4, over_point: Vector4,
                 eye: Vector4, normal: Vector4, inside: bool):
        self.t = t
        self.shape = shape
        self.point = point          # Hit point
        self.over_point = over_point  # Hit point nudged along the normal, origin for shadow rays
        self.eye = eye              # Points back towards the ray origin
        self.normal = normal        # Already flipped when the hit is on the inside
        self.inside = inside


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    point = ray.position(intersection.t)
    normal = intersection.shape.normal_at(point)
    eye = -ray.direction

    inside = normal.dot(eye) < 0
    if inside:
        normal = -normal

    over_point = point + normal * EPSILON
    return Computations(intersection.t, intersection.shape, point, over_point, eye, normal, inside)
