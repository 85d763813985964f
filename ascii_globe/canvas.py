#
# PROJECT: ascii-globe
# MODULE: ascii_globe/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class Canvas:
    """
    Character buffer the globe is rendered onto.

    Sizes are in pixels; char_pix is the (width, height) pixel footprint of
    one terminal character, so only the top-left
    (w // char_pix[0]) x (h // char_pix[1]) block is meant for display.
    Resizing means building a new Canvas.
    """
    __slots__ = ['w', 'h', 'char_pix', 'matrix']

    def __init__(self, w: int, h: int, char_pix=None):
        w, h = int(w), int(h)
        if w < 0 or h < 0:
            raise ValueError(f"Canvas size must not be negative, got {w}x{h}")
        cpx, cpy = char_pix if char_pix is not None else (4, 8)
        if cpx <= 0 or cpy <= 0:
            raise ValueError(f"char_pix entries must be positive, got {(cpx, cpy)}")
        self.w, self.h = w, h
        self.char_pix = (int(cpx), int(cpy))
        self.matrix = [[' '] * w for _ in range(h)]

    def get_size(self):
        return self.w, self.h

    size = get_size

    def char_size(self):
        """Displayable size in character cells."""
        return self.w // self.char_pix[0], self.h // self.char_pix[1]

    def clear(self):
        for row in self.matrix:
            for x in range(self.w):
                row[x] = ' '

    def draw(self, x, y, ch):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        self.matrix[y][x] = ch

    def lines(self):
        """Displayable region as strings, one per terminal row."""
        cols, rows = self.char_size()
        return [''.join(self.matrix[y][:cols]) for y in range(rows)]
