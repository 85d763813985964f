#
# PROJECT: ascii-globe
# MODULE: ascii_globe/app.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import math
import logging
from dataclasses import dataclass
from typing import Tuple

from .canvas import Canvas
from .errors import InvalidConfig
from .globe import Globe
from .navigation import OrbitState, PAN_STEP, TILT_STEP, ZOOM_STEP

logger = logging.getLogger(__name__)

INTERACTIVE = 'interactive'
SCREENSAVER = 'screensaver'
LISTING = 'listing'

SPEED_STEP = 0.005
# Not every curses build defines the wheel-down button
_WHEEL_UP = getattr(curses, 'BUTTON4_PRESSED', 0)
_WHEEL_DOWN = getattr(curses, 'BUTTON5_PRESSED', 0x200000)
_ENTER_KEYS = (10, 13, curses.KEY_ENTER)


@dataclass
class Settings:
    """Scene settings collected from the command line."""
    refresh_rate: int = 60
    globe_rotation_speed: float = 0.0
    cam_rotation_speed: float = 0.0
    cam_zoom: float = 1.7
    focus_speed: float = 1.0
    night: bool = False
    coords: Tuple[float, float] = (0.4, 0.6)

    def validate(self):
        """Raise InvalidConfig for values the frame loop cannot animate."""
        if self.refresh_rate <= 0:
            raise InvalidConfig(f"Refresh rate must be positive, got {self.refresh_rate!r}")
        for name in ('globe_rotation_speed', 'cam_rotation_speed', 'cam_zoom', 'focus_speed'):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidConfig(f"{name} must be finite, got {value!r}")
        if not all(math.isfinite(c) for c in self.coords):
            raise InvalidConfig(f"Coordinates must be finite, got {self.coords!r}")


def terminal_canvas(cols: int, rows: int) -> Canvas:
    """
    Canvas for a terminal of cols x rows characters.

    The globe gets a square area of rows*8 pixels (cols*4 on tall
    terminals) at the default 4x8 pixels per character.  Only the
    displayable part is allocated, one pixel per character, which casts
    the same rays for every visible cell.
    """
    side = rows * 8 if cols > rows else cols * 4
    return Canvas(side // 4, side // 8, char_pix=(1, 1))


class GlobeApp:
    """
    Curses driver: polls input once per frame, advances the orbit, renders
    the globe and copies the canvas to the screen.
    """

    def __init__(self, stdscr, globe: Globe, settings: Settings,
                 mode: str = INTERACTIVE, coord_list=None):
        self.stdscr = stdscr
        self.globe = globe
        self.settings = settings
        self.mode = mode
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        stdscr.timeout(max(1, 1000 // max(1, settings.refresh_rate)))
        if mode == INTERACTIVE:
            curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
            curses.mouseinterval(0)

        rows, cols = stdscr.getmaxyx()
        self.canvas = terminal_canvas(cols, rows)

        # ── Orbit (speeds are given per 1000 frames) ────────────────────
        state = OrbitState(
            zoom=settings.cam_zoom,
            globe_speed=settings.globe_rotation_speed / 1000.0,
            cam_speed=settings.cam_rotation_speed / 1000.0,
            focus_speed=settings.focus_speed,
        )
        state.focus(settings.coords, 0.0)
        self.state = state
        globe.display_night = settings.night

        self.coord_list = list(coord_list or [])
        self.coord_index = 0
        if mode == LISTING and self.coord_list:
            state.target = self.coord_list[0]

        self.last_drag_pos = None
        logger.info("Starting %s mode, canvas %dx%d", mode, *self.canvas.get_size())

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key: int):
        if key == curses.KEY_RESIZE:
            rows, cols = self.stdscr.getmaxyx()
            self.canvas = terminal_canvas(cols, rows)
            logger.debug("Terminal resized to %dx%d", cols, rows)
            return
        if self.mode == SCREENSAVER:
            if key != curses.KEY_MOUSE:
                self.running = False
        elif self.mode == LISTING:
            self._handle_listing_key(key)
        else:
            self._handle_interactive_key(key)

    def _handle_listing_key(self, key: int):
        if key == curses.KEY_MOUSE:
            return
        if key in (ord('c'), ord('d')):
            self.running = False
            return
        self.coord_index += 1
        if self.coord_index >= len(self.coord_list):
            self.running = False
            return
        self.state.target = self.coord_list[self.coord_index]

    def _handle_interactive_key(self, key: int):
        state = self.state
        globe = self.globe

        if key == curses.KEY_MOUSE:
            self._handle_mouse()
        elif key in _ENTER_KEYS:
            state.focus(self.settings.coords, globe.angle / 2.0)
        elif key == curses.KEY_PPAGE:
            state.zoom_by(ZOOM_STEP)
        elif key == curses.KEY_NPAGE:
            state.zoom_by(-ZOOM_STEP)
        elif key == curses.KEY_UP:
            state.tilt(TILT_STEP)
        elif key == curses.KEY_DOWN:
            state.tilt(-TILT_STEP)
        elif key == curses.KEY_LEFT:
            state.pan(PAN_STEP)
        elif key == curses.KEY_RIGHT:
            state.pan(-PAN_STEP)
        elif 0 <= key < 256:
            ch = chr(key)
            if ch == '-':
                state.globe_speed -= SPEED_STEP
            elif ch == '+':
                state.globe_speed += SPEED_STEP
            elif ch == ',':
                state.cam_speed -= SPEED_STEP
            elif ch == '.':
                state.cam_speed += SPEED_STEP
            elif ch == 'n':
                globe.display_night = not globe.display_night
            # vim-style navigation
            elif ch == 'h':
                state.pan(PAN_STEP)
            elif ch == 'l':
                state.pan(-PAN_STEP)
            elif ch == 'k':
                state.tilt(TILT_STEP)
            elif ch == 'j':
                state.tilt(-TILT_STEP)
            # Unmapped control keys (Esc, Tab, Backspace) are ignored
            elif ch.isprintable():
                self.running = False

    def _handle_mouse(self):
        try:
            _id, x, y, _z, bstate = curses.getmouse()
        except curses.error:
            return
        state = self.state

        if bstate & _WHEEL_UP:
            state.zoom_by(-ZOOM_STEP)
        elif bstate & _WHEEL_DOWN:
            state.zoom_by(ZOOM_STEP)
        elif bstate & (curses.BUTTON1_PRESSED | curses.REPORT_MOUSE_POSITION):
            # Dragging: motion reports while the button is held
            if self.last_drag_pos is not None:
                x_last, y_last = self.last_drag_pos
                x_diff = x - x_last
                y_diff = y - y_last
                if y_diff > 0:
                    state.tilt(TILT_STEP)
                elif y_diff < 0:
                    state.tilt(-TILT_STEP)
                state.pan(x_diff * math.pi / 30.0 + y_diff * math.pi / 30.0)
            self.last_drag_pos = (x, y)
        else:
            self.last_drag_pos = None

    # ────────────────────────────────────────────────────────────────────
    # Output
    # ────────────────────────────────────────────────────────────────────
    def draw_canvas(self):
        rows, cols = self.stdscr.getmaxyx()
        self.stdscr.erase()
        for y, line in enumerate(self.canvas.lines()):
            if y >= rows:
                break
            try:
                self.stdscr.addstr(y, 0, line[:max(0, cols - 1)])
            except curses.error:
                pass

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        while self.running:
            key = self.stdscr.getch()  # waits up to one frame
            if key != -1:
                self.handle_key(key)
                if not self.running:
                    break

            self.state.step(self.globe, clamp_zoom=self.mode == INTERACTIVE)

            self.canvas.clear()
            self.globe.render(self.canvas)
            self.draw_canvas()
            self.stdscr.refresh()
        logger.info("Leaving %s mode", self.mode)
