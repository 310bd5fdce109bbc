from raycaster.core.colour import BLACK, WHITE, Colour
from raycaster.core.matrix import (
    Matrix,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from raycaster.core.ray import Ray
from raycaster.core.vector import ZERO_POINT, ZERO_VECTOR, Vector4, point, vector
