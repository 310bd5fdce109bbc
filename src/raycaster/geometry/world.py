# geometry/world.py
from typing import Iterable, List, Optional

from raycaster.core.colour import BLACK, Colour
from raycaster.core.matrix import scaling
from raycaster.core.ray import Ray
from raycaster.core.vector import Vector4, point
from raycaster.geometry.intersection import Computations, Intersection, hit, prepare_computations
from raycaster.geometry.shape import Shape
from raycaster.geometry.sphere import Sphere
from raycaster.materials.light import Light, PointLight
from raycaster.materials.material import Material, lighting


class World:
    """
    A scene: every shape and every light. Shapes are tested exhaustively;
    there is no acceleration structure.

    Build the world up front. While a render is running it is only read, which
    is what lets the parallel renderer share it between threads.
    """
    def __init__(self, objects: Optional[Iterable[Shape]] = None, lights: Optional[Iterable[Light]] = None):
        self.objects: List[Shape] = list(objects) if objects is not None else []
        self.lights: List[Light] = list(lights) if lights is not None else []

    @classmethod
    def default(cls) -> "World":
        """
        Two concentric spheres lit from the upper left, front.
        """
        outer = Sphere(material=Material(colour=Colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        light = PointLight(Colour(1.0, 1.0, 1.0), point(-10, 10, -10))
        return cls([outer, inner], [light])

    def add(self, obj: Shape):
        self.objects.append(obj)

    def add_light(self, light: Light):
        self.lights.append(light)

    def intersect_world(self, ray: Ray) -> List[Intersection]:
        """
        Every intersection of the ray with every shape, sorted by t.
        """
        xs = [i for obj in self.objects for i in obj.intersect(ray)]
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed_by(self, light: Light, at: Vector4) -> bool:
        """
        True when some shape sits strictly between the point and the light.
        """
        to_light = light.position - at
        distance = to_light.magnitude()
        h = hit(self.intersect_world(Ray(at, to_light.normalize())))
        return h is not None and h.t < distance

    def is_shadowed(self, at: Vector4) -> bool:
        """
        True when the point is shadowed from at least one light.
        """
        return any(self.is_shadowed_by(light, at) for light in self.lights)

    def shade_hit(self, comps: Computations) -> Colour:
        """
        Averages the contribution of every light. A world without lights is
        black.
        """
        if not self.lights:
            return BLACK

        total = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed_by(light, comps.over_point)
            total = total + lighting(comps.shape.material, light, comps.point,
                                     comps.eye, comps.normal, shadowed)
        return total / len(self.lights)

    def colour_at(self, ray: Ray) -> Colour:
        """
        Colour seen along the ray, black when it hits nothing.
        """
        h = hit(self.intersect_world(ray))
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray))
