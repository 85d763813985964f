#
# PROJECT: ascii-globe
# MODULE: ascii_globe/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

__version__ = "0.3.0"

from .math_utils import Vec3, Mat3, Mat4
from .errors import GlobeError, MissingTexture, TextureNotFound, InvalidConfig
from .texture import (Texture, EARTH_PALETTE, TEMPLATES, parse_texture, parse_palette,
                      load_texture_file, load_template)
from .canvas import Canvas
from .camera import Camera, CameraConfig
from .globe import Globe
from .config import GlobeConfig, build_globe, build_texture
from .navigation import OrbitState, focus_target, move_towards_target
