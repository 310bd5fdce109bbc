# core/ray.py
from raycaster.core.vector import Vector4
from raycaster.errors import InvalidOperandError


class Ray:
    """
    Represents a ray origin + t * direction. The origin must be a point and
    the direction a vector; the direction is not required to be unit length.
    """
    def __init__(self, origin: Vector4, direction: Vector4):
        if not origin.is_point():
            raise InvalidOperandError(f"ray origin must be a point, got {origin!r}")
        if not direction.is_vector():
            raise InvalidOperandError(f"ray direction must be a vector, got {direction!r}")
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Vector4:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        """
        Returns this ray mapped through matrix; the original is left untouched.
        """
        return Ray(matrix * self.origin, matrix * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
