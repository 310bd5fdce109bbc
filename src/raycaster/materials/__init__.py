from raycaster.materials.light import Light, PointLight
from raycaster.materials.material import Material, lighting
