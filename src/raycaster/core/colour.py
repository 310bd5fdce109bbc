# core/colour.py
from raycaster.config import EPSILON


class Colour:
    """
    Linear RGB colour. Components are unbounded; clamping belongs to whatever
    serializes the final image.
    """
    def __init__(self, red: float, green: float, blue: float):
        self.red = red
        self.green = green
        self.blue = blue

    def __add__(self, other: "Colour") -> "Colour":
        return Colour(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Colour") -> "Colour":
        return Colour(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Colour(self.red * other, self.green * other, self.blue * other)
        # Hadamard product, used to filter a surface colour by a light's colour.
        return Colour(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Colour":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Colour":
        return Colour(self.red / t, self.green / t, self.blue / t)

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return all(abs(a - b) < EPSILON for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Colour({self.red}, {self.green}, {self.blue})"


BLACK = Colour(0.0, 0.0, 0.0)
WHITE = Colour(1.0, 1.0, 1.0)
