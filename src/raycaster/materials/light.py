# materials/light.py
from abc import ABC, abstractmethod

from raycaster.core.colour import Colour
from raycaster.core.vector import Vector4


class Light(ABC):
    """
    Abstract light source. The lighting model only needs where the light is
    and what colour it emits.
    """
    @property
    @abstractmethod
    def intensity(self) -> Colour:
        raise NotImplementedError("intensity must be implemented by subclasses.")

    @property
    @abstractmethod
    def position(self) -> Vector4:
        raise NotImplementedError("position must be implemented by subclasses.")


class PointLight(Light):
    """
    A light with no size, emitting equally in every direction. Intensity does
    not fall off with distance.
    """
    def __init__(self, intensity: Colour, position: Vector4):
        self._intensity = intensity
        self._position = position

    @property
    def intensity(self) -> Colour:
        return self._intensity

    @property
    def position(self) -> Vector4:
        return self._position

    def __repr__(self) -> str:
        return f"PointLight({self._intensity!r}, {self._position!r})"
