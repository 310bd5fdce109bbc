# camera/camera.py
import math
from typing import Optional

import numpy as np

from raycaster.config import RENDER_CHUNKS
from raycaster.core.matrix import Matrix, identity
from raycaster.core.ray import Ray
from raycaster.core.vector import ZERO_POINT, point
from raycaster.errors import NonInvertibleTransformError
from raycaster.renderer import raytracer


class Camera:
    """
    Pinhole camera looking down -z in its own space, with the view plane one
    unit in front of the eye.

    transform maps world space to camera space (see view_transform). The
    view-plane geometry and the inverse transform are derived once here and
    never recomputed per pixel.
    """
    def __init__(self, hsize: int, vsize: int, fov: float, transform: Optional[Matrix] = None):
        self.hsize = hsize
        self.vsize = vsize
        self.fov = fov
        self.transform = transform if transform is not None else identity()

        inverse = self.transform.inverse()
        if inverse is None:
            raise NonInvertibleTransformError(f"camera transform is not invertible:\n{self.transform!r}")
        self.inverse_transform = inverse

        half_view = math.tan(fov / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """
        Ray from the eye through the center of pixel (px, py). Pixel (0, 0) is
        the top left of the image, which is +x, +y on the view plane.
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse_transform * point(world_x, world_y, -1)
        origin = self.inverse_transform * ZERO_POINT
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world) -> np.ndarray:
        return raytracer.render(self, world)

    def render_parallel(self, world, chunks: int = RENDER_CHUNKS, max_workers: Optional[int] = None) -> np.ndarray:
        return raytracer.render_parallel(self, world, chunks=chunks, max_workers=max_workers)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}, {self.vsize}, {self.fov})"
