"""Shared fixtures for the ray caster tests."""

import pytest

from raycaster.core.vector import vector
from raycaster.geometry.shape import Shape
from raycaster.geometry.world import World


class RecordingShape(Shape):
    """Shape that remembers the local-space ray it was asked to intersect."""

    def __init__(self, transform=None, material=None):
        super().__init__(transform, material)
        self.saved_ray = None

    def local_intersect(self, local_ray):
        self.saved_ray = local_ray
        return []

    def local_normal_at(self, local_point):
        return vector(local_point.x, local_point.y, local_point.z)


@pytest.fixture
def default_world():
    """The two-sphere reference scene."""
    return World.default()


@pytest.fixture
def recording_shape():
    """Factory for shapes that record their local-space rays."""
    return RecordingShape
