#
# PROJECT: ascii-globe
# MODULE: ascii_globe/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .camera import CameraConfig
from .errors import InvalidConfig, MissingTexture
from .globe import Globe
from .texture import Texture, load_template, load_texture_file, parse_palette

logger = logging.getLogger(__name__)


@dataclass
class GlobeConfig:
    """
    Everything needed to build a Globe.

    Texture sources are resolved in order: template, then texture_path
    (replaces the template's day side), then night_texture_path (replaces
    the night side; with no day texture it serves as both).  palette
    overrides the template palette.
    """
    camera: CameraConfig = field(default_factory=CameraConfig)
    radius: float = 1.0
    angle: float = 0.0
    template: Optional[str] = None
    texture_path: Optional[str] = None
    night_texture_path: Optional[str] = None
    palette: Optional[Union[str, Sequence[str]]] = None
    display_night: bool = False

    def validate(self):
        """Raise InvalidConfig for out-of-range numbers."""
        if not (math.isfinite(self.radius) and self.radius > 0):
            raise InvalidConfig(f"Globe radius must be a positive number, got {self.radius!r}")
        if not math.isfinite(self.angle):
            raise InvalidConfig(f"Globe angle must be finite, got {self.angle!r}")
        cam = self.camera
        if not (math.isfinite(cam.radius) and cam.radius >= 0):
            raise InvalidConfig(f"Camera radius must be >= 0, got {cam.radius!r}")
        if not (math.isfinite(cam.alpha) and math.isfinite(cam.beta)):
            raise InvalidConfig(
                f"Camera angles must be finite, got alpha={cam.alpha!r} beta={cam.beta!r}")


def _resolve_palette(palette):
    if palette is None:
        return None
    if isinstance(palette, str):
        return parse_palette(palette)
    palette = list(palette)
    if not palette:
        raise InvalidConfig("Palette must contain at least one character")
    if any(not isinstance(ch, str) or len(ch) != 1 for ch in palette):
        raise InvalidConfig("Palette entries must be single characters")
    return palette


def build_texture(config: GlobeConfig) -> Texture:
    day = night = None
    palette = _resolve_palette(config.palette)

    if config.template:
        template = load_template(config.template)
        day, night = template.day, template.night
        if palette is None:
            palette = template.palette

    if config.texture_path:
        day = load_texture_file(config.texture_path)

    if config.night_texture_path:
        night = load_texture_file(config.night_texture_path)
        if day is None:
            day = [list(row) for row in night]

    if day is None:
        raise MissingTexture("No texture configured: set a template or a texture path")
    return Texture(day, night, palette)


def build_globe(config: GlobeConfig) -> Globe:
    """
    Validate config and build the Globe.

    Raises MissingTexture, TextureNotFound or InvalidConfig; no Globe
    exists unless every check passes.
    """
    config.validate()
    texture = build_texture(config)
    camera = config.camera.build()
    width, height = texture.get_size()
    logger.info("Built globe: texture %dx%d, night=%s, palette=%d chars",
                width, height, texture.night is not None,
                len(texture.palette) if texture.palette else 0)
    return Globe(camera, texture, radius=float(config.radius),
                 angle=float(config.angle), display_night=config.display_night)
