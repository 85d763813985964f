#
# PROJECT: ascii-globe
# MODULE: ascii_globe/texture.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import logging

from .errors import InvalidConfig, TextureNotFound

logger = logging.getLogger(__name__)

TEXTURE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'textures')

# Darkest to brightest; also the alphabet of the bundled earth textures
EARTH_PALETTE = [
    ' ', '.', ':', ';', '\'', ',', 'w', 'i', 'o', 'g', 'O', 'L', 'X', 'H', 'W',
    'Y', 'V', '@',
]

# name -> (day file, night file, palette)
TEMPLATES = {
    'earth': ('earth.txt', 'earth_night.txt', EARTH_PALETTE),
}


class Texture:
    """
    Equirectangular character map wrapped around the globe.

    day and night are lists of rows, each row a list of single characters;
    column 0 is longitude -pi and row 0 is the north pole.  The palette
    orders characters from darkest to brightest and is only needed for
    day/night blending.
    """
    __slots__ = ('day', 'night', 'palette', '_lookup')

    def __init__(self, day, night=None, palette=None):
        self.day = _check_grid(day, 'day')
        self.night = None
        if night is not None:
            night = _check_grid(night, 'night')
            if (len(night[0]), len(night)) != (len(self.day[0]), len(self.day)):
                raise InvalidConfig(
                    f"Night texture is {len(night[0])}x{len(night)}, "
                    f"day texture is {len(self.day[0])}x{len(self.day)}")
            self.night = night
        self.palette = list(palette) if palette else None

        # First occurrence wins, same as a linear scan
        self._lookup = {}
        for i, ch in enumerate(self.palette or ()):
            self._lookup.setdefault(ch, i)

    def get_size(self):
        """Returns (width, height) in texture cells."""
        return len(self.day[0]), len(self.day)

    def sample(self, tex_x: int, tex_y: int, night: bool = False) -> str:
        grid = self.night if night and self.night is not None else self.day
        return grid[tex_y][tex_x]

    def palette_index(self, ch: str) -> int:
        """Position of ch on the palette; 0 when absent."""
        return self._lookup.get(ch, 0)


def _check_grid(grid, name):
    rows = [list(row) for row in grid]
    if not rows:
        raise InvalidConfig(f"{name} texture is empty")
    width = len(rows[0])
    if width < 2:
        raise InvalidConfig(f"{name} texture rows must be at least 2 characters wide")
    for i, row in enumerate(rows):
        if len(row) != width:
            raise InvalidConfig(
                f"{name} texture row {i} has {len(row)} characters, expected {width}")
    return rows


def parse_texture(text: str):
    """
    Parse texture text into a grid.

    One row per line.  Each line is stored reversed, so the last character
    of a line becomes column 0.  Empty lines at the end are dropped.
    """
    lines = text.splitlines()
    while lines and not lines[-1]:
        lines.pop()
    return [list(reversed(line)) for line in lines]


def parse_palette(text: str):
    if not text:
        raise InvalidConfig("Palette must contain at least one character")
    return list(text)


def load_texture_file(path: str):
    """Read and parse a texture file.  Raises TextureNotFound on any I/O error."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TextureNotFound(path, e) from e
    grid = parse_texture(text)
    logger.debug("Loaded texture %s (%d rows)", path, len(grid))
    return grid


def load_template(name: str) -> Texture:
    """Build the Texture for a bundled template such as 'earth'."""
    key = (name or '').strip().lower()
    if key not in TEMPLATES:
        raise InvalidConfig(
            f"Unknown template '{name}' (available: {', '.join(sorted(TEMPLATES))})")
    day_file, night_file, palette = TEMPLATES[key]
    day = load_texture_file(os.path.join(TEXTURE_DIR, day_file))
    night = load_texture_file(os.path.join(TEXTURE_DIR, night_file))
    return Texture(day, night, palette)
