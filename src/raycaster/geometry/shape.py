# geometry/shape.py
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from raycaster.core.matrix import Matrix, identity
from raycaster.core.ray import Ray
from raycaster.core.vector import Vector4
from raycaster.errors import NonInvertibleTransformError
from raycaster.geometry.intersection import Intersection
from raycaster.materials.material import Material


class Shape(ABC):
    """
    Base for every surface in a scene.

    Subclasses describe their geometry in local space only, by implementing
    local_intersect() and local_normal_at(). intersect() and normal_at() map
    world-space rays and points through the shape's transform and must not be
    overridden.

    A shape is immutable once built, so a single scene can be shared by every
    render worker without locking. Equality is identity: two shapes with the
    same transform and material are still different shapes.
    """
    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self._id = uuid.uuid4()
        self._transform = transform if transform is not None else identity()
        self._material = material if material is not None else Material()
        # None when the transform is singular; checked on first use.
        self._inverse = self._transform.inverse()
        self._normal_transform = self._inverse.transpose() if self._inverse is not None else None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def transform(self) -> Matrix:
        """Local-to-world transform."""
        return self._transform

    @property
    def material(self) -> Material:
        return self._material

    def inverse_transform(self) -> Matrix:
        if self._inverse is None:
            raise NonInvertibleTransformError(
                f"{type(self).__name__} {self._id} has a non-invertible transform:\n{self._transform!r}"
            )
        return self._inverse

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Intersects a world-space ray with this shape.
        """
        local_ray = ray.transform(self.inverse_transform())
        return self.local_intersect(local_ray)

    def normal_at(self, world_point: Vector4) -> Vector4:
        """
        Unit surface normal at a world-space point on the shape.
        """
        local_point = self.inverse_transform() * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._normal_transform * local_normal
        # The transpose of a translated inverse leaks into w.
        world_normal.w = 0.0
        return world_normal.normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> List[Intersection]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    @abstractmethod
    def local_normal_at(self, local_point: Vector4) -> Vector4:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
