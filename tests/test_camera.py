"""Tests for the orbital camera."""

from __future__ import annotations

import math
import random

import pytest

from ascii_globe.camera import Camera, CameraConfig
from ascii_globe.math_utils import Vec3


def test_position_from_orbit() -> None:
    """Position follows the spherical-coordinate formulas."""
    cam = Camera(3.0, 0.7, -0.4)
    assert cam.x == pytest.approx(3.0 * math.cos(0.7) * math.cos(-0.4))
    assert cam.y == pytest.approx(3.0 * math.sin(0.7) * math.cos(-0.4))
    assert cam.z == pytest.approx(3.0 * math.sin(-0.4))
    assert cam.position == Vec3(cam.x, cam.y, cam.z)
    assert cam.orbit == (3.0, 0.7, -0.4)


def test_matrix_layout() -> None:
    """Translation column is the position, bottom row is (0, 0, 0, 1)."""
    cam = Camera(2.0, 0.3, 0.2)
    m = cam.matrix.m
    assert [m[0][3], m[1][3], m[2][3]] == [cam.x, cam.y, cam.z]
    assert m[3] == [0.0, 0.0, 0.0, 1.0]
    assert cam.matrix.flatten()[12:15] == [cam.x, cam.y, cam.z]


def test_basis_is_orthonormal() -> None:
    """The upper-left 3x3 block is a rotation."""
    cam = Camera(5.0, -1.2, 0.9)
    cols = [[cam.matrix.m[r][c] for r in range(3)] for c in range(3)]
    for i in range(3):
        for j in range(3):
            dot = sum(a * b for a, b in zip(cols[i], cols[j]))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_inverse_random_orbits() -> None:
    """matrix @ inverse is the identity for random orbits."""
    rng = random.Random(1234)
    for _ in range(1000):
        cam = Camera(rng.uniform(0.1, 100.0),
                     rng.uniform(-math.pi, math.pi),
                     rng.uniform(-math.pi, math.pi))
        product = cam.matrix @ cam.inverse
        for r in range(4):
            for c in range(4):
                expected = 1.0 if r == c else 0.0
                assert abs(product.m[r][c] - expected) <= 1e-4


def test_zero_radius_does_not_crash() -> None:
    """Radius 0 sits at the origin with a finite, invertible matrix."""
    cam = Camera(0.0, 0.5, 0.5)
    assert (cam.x, cam.y, cam.z) == (0.0, 0.0, 0.0)
    for row in cam.inverse.m:
        assert all(math.isfinite(v) for v in row)


def test_update_replaces_everything() -> None:
    """update() is a full recomputation, independent of the previous orbit."""
    cam = Camera(4.0, 1.0, 1.0)
    cam.update(2.0, 0.0, 0.0)
    fresh = Camera(2.0, 0.0, 0.0)
    assert cam.matrix.m == fresh.matrix.m
    assert cam.inverse.m == fresh.inverse.m
    assert (cam.x, cam.y, cam.z) == (fresh.x, fresh.y, fresh.z)


def test_direction_to_world_drops_translation() -> None:
    """Rotating a direction equals transforming it as a point minus the position."""
    cam = Camera(2.5, 0.8, -0.3)
    u = Vec3(0.25, -0.5, -1.0)
    m = cam.matrix.m
    position = list(cam.position)
    as_point = [sum(m[r][k] * u[k] for k in range(3)) + m[r][3] - position[r]
                for r in range(3)]
    direction = cam.direction_to_world(u)
    for a, b in zip(direction, as_point):
        assert a == pytest.approx(b, abs=1e-12)


def test_camera_looks_at_origin() -> None:
    """The view axis (0, 0, -1) points from the camera to the globe centre."""
    cam = Camera(2.0, 0.4, 0.3)
    forward = cam.direction_to_world(Vec3(0, 0, -1))
    for a, p in zip(forward, cam.position):
        assert a == pytest.approx(-p / 2.0, abs=1e-12)


def test_camera_config_defaults() -> None:
    """CameraConfig defaults to two radii on the +x axis."""
    cam = CameraConfig().build()
    assert cam.orbit == (2.0, 0.0, 0.0)
    assert cam.x == pytest.approx(2.0)
