"""Exceptions raised by the ray caster."""


class RaycasterError(Exception):
    """Base exception for rendering operations."""

    pass


class InvalidOperandError(RaycasterError, ValueError):
    """An operation received a tuple or matrix it is not defined for.

    Raised for a cross product of points, a ray whose origin is not a point or
    whose direction is not a vector, and matrix products of mismatched shape.
    These indicate a bug in scene construction rather than bad input data.
    """

    pass


class NonInvertibleTransformError(RaycasterError, ArithmeticError):
    """A shape or camera transform has a zero determinant."""

    pass
