"""Tests for the driver-side camera animation helpers."""

from __future__ import annotations

import math

import pytest

from ascii_globe.camera import Camera
from ascii_globe.errors import InvalidConfig
from ascii_globe.globe import Globe
from ascii_globe.navigation import (
    MAX_TILT,
    OrbitState,
    focus_target,
    move_towards_target,
    parse_coord_list,
    parse_coords,
)
from ascii_globe.texture import Texture


def _globe() -> Globe:
    return Globe(Camera(2.0, 0.0, 0.0), Texture([list('ab'), list('cd')]))


def test_parse_coords() -> None:
    """'x,y' parses to a float pair, whitespace allowed."""
    assert parse_coords('0.4,0.6') == (0.4, 0.6)
    assert parse_coords(' 1 , -0.5 ') == (1.0, -0.5)


@pytest.mark.parametrize('text', ['0.4', '1,2,3', 'a,b', '', 'nan,0.5', '0.4,inf'])
def test_parse_coords_rejects(text: str) -> None:
    """Malformed coordinates are configuration errors."""
    with pytest.raises(InvalidConfig):
        parse_coords(text)


def test_parse_coord_list() -> None:
    """Semicolon-separated pairs; trailing separators and newlines are ignored."""
    assert parse_coord_list('0.1,0.2;0.3,0.4;\n') == [(0.1, 0.2), (0.3, 0.4)]
    with pytest.raises(InvalidConfig):
        parse_coord_list(' ;\n')


def test_focus_target() -> None:
    """Focus angles follow the texture-fraction mapping."""
    cam_xy, cam_z = focus_target((0.5, 0.5), 0.25)
    assert cam_xy == pytest.approx(-0.5 * math.pi - 1.5 - 0.25)
    assert cam_z == pytest.approx(0.0)


def test_move_towards_target_converges() -> None:
    """Repeated steps reach the focus position and then report arrival."""
    cam_xy, cam_z = 0.0, 0.0
    arrived = False
    for _ in range(5000):
        cam_xy, cam_z, arrived = move_towards_target(1.0, (0.4, 0.6), 0.0, cam_xy, cam_z)
        if arrived:
            break
    assert arrived
    target_xy, target_z = focus_target((0.4, 0.6))
    assert cam_xy == pytest.approx(target_xy, abs=0.01)
    assert cam_z == pytest.approx(target_z, abs=0.01)


def test_move_towards_target_at_target() -> None:
    """Already there: nothing moves."""
    cam_xy, cam_z = focus_target((0.2, 0.3))
    assert move_towards_target(1.0, (0.2, 0.3), 0.0, cam_xy, cam_z) == (cam_xy, cam_z, True)


def test_orbit_step_rotates_globe_and_camera() -> None:
    """One frame advances the globe angle and counter-rotates the camera."""
    globe = _globe()
    state = OrbitState(zoom=3.0, globe_speed=0.02, cam_speed=0.01)
    state.step(globe)
    assert globe.angle == pytest.approx(0.02)
    assert state.cam_xy == pytest.approx(-0.01 - 0.01)
    assert globe.camera.orbit == (3.0, state.cam_xy, state.cam_z)


def test_orbit_step_clamps_zoom_only_when_asked() -> None:
    """Interactive mode keeps the camera outside the globe."""
    globe = _globe()
    state = OrbitState(zoom=0.5)
    state.step(globe)
    assert state.zoom == 0.5
    state.step(globe, clamp_zoom=True)
    assert state.zoom == 1.0


def test_orbit_tilt_limit() -> None:
    """Manual tilting stops once past the elevation limit."""
    state = OrbitState()
    for _ in range(50):
        state.tilt(0.1)
    assert MAX_TILT <= state.cam_z < MAX_TILT + 0.1 + 1e-9
    for _ in range(100):
        state.tilt(-0.1)
    assert -MAX_TILT - 0.1 - 1e-9 < state.cam_z <= -MAX_TILT


def test_orbit_target_cleared_on_arrival() -> None:
    """step() glides towards a target and drops it once reached."""
    globe = _globe()
    state = OrbitState(target=(0.3, 0.5))
    for _ in range(5000):
        state.step(globe)
        if state.target is None:
            break
    assert state.target is None
