# materials/material.py
from dataclasses import dataclass, field

from raycaster.core.colour import BLACK, Colour
from raycaster.core.vector import Vector4
from raycaster.materials.light import Light


@dataclass(frozen=True)
class Material:
    """
    Surface properties for the Phong model. A plain value: copy it freely.
    """
    colour: Colour = field(default_factory=lambda: Colour(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0


def lighting(material: Material, light: Light, point: Vector4,
             eye_vector: Vector4, normal_vector: Vector4, in_shadow: bool = False) -> Colour:
    """
    Phong illumination of a single surface point by a single light.

    Args:
        material: Surface material at the point.
        light: The light being evaluated.
        point: World-space point being shaded.
        eye_vector: Unit vector from the point towards the eye.
        normal_vector: Unit surface normal at the point.
        in_shadow: True when something blocks the light; only the ambient
            term survives.

    Returns:
        Colour: ambient + diffuse + specular.
    """
    effective_colour = material.colour * light.intensity
    ambient = effective_colour * material.ambient
    if in_shadow:
        return ambient

    light_vector = (light.position - point).normalize()
    light_dot_normal = light_vector.dot(normal_vector)

    if light_dot_normal < 0:
        # Light is on the other side of the surface
        diffuse = BLACK
        specular = BLACK
    else:
        diffuse = effective_colour * material.diffuse * light_dot_normal
        reflect_vector = (-light_vector).reflect(normal_vector)
        reflect_dot_eye = reflect_vector.dot(eye_vector)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
