from raycaster.geometry.intersection import Computations, Intersection, hit, prepare_computations
from raycaster.geometry.plane import Plane
from raycaster.geometry.shape import Shape
from raycaster.geometry.sphere import Sphere
from raycaster.geometry.world import World
