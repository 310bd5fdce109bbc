"""CPU ray caster: spheres and planes, Phong shading, hard shadows."""

from raycaster.camera.camera import Camera
from raycaster.config import setup_logging
from raycaster.core import (
    BLACK,
    WHITE,
    Colour,
    Matrix,
    Ray,
    Vector4,
    identity,
    point,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    vector,
    view_transform,
)
from raycaster.errors import InvalidOperandError, NonInvertibleTransformError, RaycasterError
from raycaster.geometry import Intersection, Plane, Shape, Sphere, World, hit, prepare_computations
from raycaster.materials import Light, Material, PointLight, lighting

__version__ = "0.1.0"
