#
# PROJECT: ascii-globe
# MODULE: ascii_globe/navigation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidConfig

MAX_TILT = 1.5   # camera elevation limit for manual moves (radians)
MIN_ZOOM = 1.0   # keeps the camera outside the unit globe
TILT_STEP = 0.1
PAN_STEP = 0.1
ZOOM_STEP = 0.1


def parse_coords(text: str) -> Tuple[float, float]:
    """Parse 'x,y' where both are fractions of the texture (0..1)."""
    parts = str(text).split(',')
    if len(parts) != 2:
        raise InvalidConfig(f"Coordinates must look like '0.4,0.6', got {text!r}")
    try:
        cx, cy = float(parts[0].strip()), float(parts[1].strip())
    except ValueError as e:
        raise InvalidConfig(f"Coordinates must be numbers, got {text!r}") from e
    if not (math.isfinite(cx) and math.isfinite(cy)):
        raise InvalidConfig(f"Coordinates must be finite, got {text!r}")
    return cx, cy


def parse_coord_list(text: str):
    """Parse 'x,y;x,y;...'; empty entries (e.g. a trailing ';') are skipped."""
    coords = [parse_coords(item) for item in text.split(';') if item.strip()]
    if not coords:
        raise InvalidConfig("No coordinates given")
    return coords


def focus_target(coords, xy_offset: float = 0.0):
    """Camera (azimuth, elevation) that looks straight at coords."""
    cx, cy = coords
    cam_xy = (cx * math.pi) * -1.0 - 1.5 - xy_offset
    cam_z = cy * 3.0 - 1.5
    return cam_xy, cam_z


def move_towards_target(speed: float, coords, xy_offset: float,
                        cam_xy: float, cam_z: float):
    """
    One animation step of the camera towards coords.

    Returns (cam_xy, cam_z, arrived).  Steps shrink with distance and are
    cut to a fifth near the target to avoid overshooting.
    """
    cx, cy = coords
    target_xy = (cx * math.pi - xy_offset) * -1.0 - 1.5
    target_z = cy * 3.0 - 1.5

    diff_xy = target_xy - cam_xy
    diff_z = target_z - cam_z

    if abs(diff_xy) < 0.01 and abs(diff_z) < 0.01:
        return cam_xy, cam_z, True

    xy_move = 0.01 * speed + (abs(diff_xy) / 30.0 * speed)
    if abs(diff_xy) < 0.07:
        xy_move /= 5.0
    if diff_xy > 0:
        cam_xy += xy_move
    elif diff_xy < 0:
        cam_xy -= xy_move

    z_move = 0.005 * speed + (abs(diff_z) / 30.0 * speed)
    if abs(diff_z) < 0.07:
        z_move /= 5.0
    if diff_z > 0:
        cam_z += z_move
    elif diff_z < 0:
        cam_z -= z_move

    return cam_xy, cam_z, False


@dataclass
class OrbitState:
    """
    Per-frame animation state owned by the terminal driver.

    Speeds are in radians per frame.  step() advances one frame and pushes
    the resulting orbit into the globe's camera.
    """
    zoom: float = 1.7
    cam_xy: float = 0.0
    cam_z: float = 0.0
    globe_speed: float = 0.0
    cam_speed: float = 0.0
    focus_speed: float = 1.0
    target: Optional[Tuple[float, float]] = None

    def focus(self, coords, xy_offset: float = 0.0):
        self.cam_xy, self.cam_z = focus_target(coords, xy_offset)

    def tilt(self, delta: float):
        # Step first, then stop: the limit can be passed by one step
        if (delta > 0 and self.cam_z < MAX_TILT) or (delta < 0 and self.cam_z > -MAX_TILT):
            self.cam_z += delta

    def pan(self, delta: float):
        self.cam_xy += delta

    def zoom_by(self, delta: float):
        self.zoom += delta

    def step(self, globe, clamp_zoom: bool = False):
        globe.angle += self.globe_speed
        self.cam_xy -= self.globe_speed / 2.0
        self.cam_xy -= self.cam_speed

        if clamp_zoom and self.zoom < MIN_ZOOM:
            self.zoom = MIN_ZOOM

        if self.target is not None:
            self.cam_xy, self.cam_z, arrived = move_towards_target(
                self.focus_speed, self.target, globe.angle / 2.0,
                self.cam_xy, self.cam_z)
            if arrived:
                self.target = None

        globe.camera.update(self.zoom, self.cam_xy, self.cam_z)
