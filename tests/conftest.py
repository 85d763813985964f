"""Shared fixtures for the ascii_globe test suite."""

from __future__ import annotations

import pytest

from ascii_globe.camera import Camera
from ascii_globe.globe import Globe
from ascii_globe.texture import Texture


@pytest.fixture
def hash_globe() -> Globe:
    """Unit globe covered in '#', camera two radii out on +x."""
    texture = Texture([['#', '#'], ['#', '#']], palette=['#'])
    return Globe(Camera(2.0, 0.0, 0.0), texture, radius=1.0, angle=0.0)


@pytest.fixture
def striped_texture() -> Texture:
    """Four distinct columns, two rows."""
    return Texture([list('abcd'), list('efgh')])
