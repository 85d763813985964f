#
# PROJECT: ascii-globe
# MODULE: ascii_globe/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from dataclasses import dataclass

from .math_utils import Vec3, Mat4


class Camera:
    """
    Orbital camera aimed at the globe centre.

    Stores the orbit it was built from (distance, azimuth in the xy plane,
    elevation towards +z), the resulting world position and the camera
    matrix with its exact inverse.

    update() recomputes every derived field from the three scalars and
    assigns them together, so there is no accumulated drift between frames.
    The basis does not depend on the distance: radius 0 leaves the camera
    at the origin with a finite, invertible matrix.
    """
    __slots__ = ('x', 'y', 'z', 'matrix', 'inverse', 'basis', 'orbit')

    def __init__(self, radius: float = 2.0, alpha: float = 0.0, beta: float = 0.0):
        self.update(radius, alpha, beta)

    def update(self, radius: float, alpha: float, beta: float):
        sin_a = math.sin(alpha)
        cos_a = math.cos(alpha)
        sin_b = math.sin(beta)
        cos_b = math.cos(beta)

        x = radius * cos_a * cos_b
        y = radius * sin_a * cos_b
        z = radius * sin_b

        # Columns: d(pos)/d(alpha) direction, d(pos)/d(beta) direction
        # (negated), outward radial direction, translation.
        matrix = Mat4([
            [-sin_a, cos_a * sin_b, cos_a * cos_b, x],
            [cos_a,  sin_a * sin_b, sin_a * cos_b, y],
            [0.0,    -cos_b,        sin_b,         z],
            [0.0,    0.0,           0.0,           1.0],
        ])
        inverse = matrix.inverse()

        self.x, self.y, self.z = x, y, z
        self.matrix = matrix
        self.inverse = inverse
        self.basis = matrix.basis()
        self.orbit = (radius, alpha, beta)

    @property
    def position(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def direction_to_world(self, u: Vec3) -> Vec3:
        """Rotate a view-space direction into world space (no translation)."""
        return self.basis.mul_vec3(u)


@dataclass
class CameraConfig:
    """Initial orbit of the camera."""
    radius: float = 2.0
    alpha: float = 0.0
    beta: float = 0.0

    def build(self) -> Camera:
        return Camera(self.radius, self.alpha, self.beta)
