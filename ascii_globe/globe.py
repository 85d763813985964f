#
# PROJECT: ascii-globe
# MODULE: ascii_globe/globe.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .camera import Camera
from .canvas import Canvas
from .texture import Texture

TAU = 2.0 * math.pi

# Point light far out on +Y, effectively directional
LIGHT = (0.0, 999999.0, 0.0)


def _clamp(v, lo, hi):
    if v < lo:
        return lo
    if v > hi:
        return hi
    return v


class Globe:
    """
    Textured sphere centred at the origin, seen through an orbital camera.

    The driver owns animation: it moves the camera and advances angle
    between frames.  render() only reads this object.
    """
    __slots__ = ('camera', 'radius', 'angle', 'texture', 'display_night')

    def __init__(self, camera: Camera, texture: Texture, radius: float = 1.0,
                 angle: float = 0.0, display_night: bool = False):
        self.camera = camera
        self.texture = texture
        self.radius = radius
        self.angle = angle
        self.display_night = display_night

    def render(self, canvas: Canvas):
        """
        Ray-trace one frame onto canvas.

        For every canvas pixel a ray leaves the camera through the view
        plane at z = -1.  Misses leave the pixel untouched.  Hits sample the
        equirectangular texture at the hit point; with night display on,
        day and night characters are blended along the palette by the
        diffuse light term.

        Pixel coordinates are normalised against the displayable character
        grid (size // char_pix).  Never raises once the globe is built.
        """
        width, height = canvas.get_size()
        cpx, cpy = canvas.char_pix
        half_w = width // cpx // 2
        half_h = height // cpy // 2
        if half_w == 0 or half_h == 0:
            return

        # ── Frame snapshot ───────────────────────────────────────────────
        camera = self.camera
        ox, oy, oz = camera.x, camera.y, camera.z
        (m0, m1, m2), (m3, m4, m5), (m6, m7, m8) = camera.basis.m
        radius = self.radius
        if not (radius > 0.0 and math.isfinite(radius)):
            return
        o_dot_o = ox * ox + oy * oy + oz * oz
        r_sq = radius * radius
        light_x, light_y, light_z = LIGHT
        angle_turns = self.angle / TAU
        if not math.isfinite(angle_turns):
            angle_turns = 0.0

        texture = self.texture
        tex_w, tex_h = texture.get_size()
        palette = texture.palette
        blend = bool(self.display_night and texture.night is not None and palette)
        last_index = len(palette) - 1 if palette else 0
        palette_index = texture.palette_index
        sample = texture.sample

        draw = canvas.draw
        sqrt = math.sqrt
        atan2 = math.atan2
        floor = math.floor

        for yi in range(height):
            vy = ((yi - half_h) + 0.5) / half_h
            for xi in range(width):
                # Horizontal axis is mirrored to keep the globe's handedness
                vx = -((xi - half_w) + 0.5) / half_w

                # ── View ray (vx, vy, -1) rotated into world space ───────
                dx = m0 * vx + m1 * vy - m2
                dy = m3 * vx + m4 * vy - m5
                dz = m6 * vx + m7 * vy - m8
                inv_len = 1.0 / sqrt(dx * dx + dy * dy + dz * dz)
                dx *= inv_len
                dy *= inv_len
                dz *= inv_len

                # ── Ray / sphere intersection ────────────────────────────
                d_dot_o = dx * ox + dy * oy + dz * oz
                discriminant = d_dot_o * d_dot_o - o_dot_o + r_sq
                # NaN compares false as well
                if not discriminant >= 0.0:
                    continue
                distance = -sqrt(discriminant) - d_dot_o

                px = ox + distance * dx
                py = oy + distance * dy
                pz = oz + distance * dz

                # ── Diffuse light ────────────────────────────────────────
                n_len = sqrt(px * px + py * py + pz * pz)
                lx = px - light_x
                ly = py - light_y
                lz = pz - light_z
                l_len = sqrt(lx * lx + ly * ly + lz * lz)
                if n_len > 0.0 and l_len > 0.0:
                    n_dot_l = (px * lx + py * ly + pz * lz) / (n_len * l_len)
                else:
                    n_dot_l = 0.0
                luminance = _clamp(5.0 * n_dot_l + 0.5, 0.0, 1.0)

                # ── Equirectangular lookup ───────────────────────────────
                phi = -pz / radius / 2.0 + 0.5
                theta = atan2(py, px) / TAU + 0.5 + angle_turns
                theta -= floor(theta)
                tex_x = _clamp(int(floor(theta * tex_w)), 0, tex_w - 1)
                tex_y = _clamp(int(floor(phi * tex_h)), 0, tex_h - 1)

                day_ch = sample(tex_x, tex_y)
                if blend:
                    day_idx = palette_index(day_ch)
                    night_idx = palette_index(sample(tex_x, tex_y, True))
                    mixed = (1.0 - luminance) * night_idx + luminance * day_idx
                    draw(xi, yi, palette[_clamp(int(floor(mixed + 0.5)), 0, last_index)])
                else:
                    draw(xi, yi, day_ch)

    render_on = render
