#
# PROJECT: ascii-globe
# MODULE: ascii_globe/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import sys
import curses
import logging
import argparse

from . import __version__
from .app import GlobeApp, Settings, INTERACTIVE, SCREENSAVER, LISTING
from .camera import CameraConfig
from .config import GlobeConfig, build_globe
from .errors import GlobeError, InvalidConfig
from .navigation import parse_coords, parse_coord_list

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s -s                                   Spinning earth screensaver
  %(prog)s -i -n                                Interactive, night side shown
  %(prog)s -s -g 20 -c 5                        Rotate globe and camera
  %(prog)s -i --texture moon.txt --palette " .:-=+*#%%@"
  echo "0.1,0.5;0.6,0.7" | %(prog)s -p          Glide between locations
"""
    parser = argparse.ArgumentParser(
        prog="ascii-globe",
        description="Render an ASCII globe in your terminal.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-V", "--version", action="version",
                        version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--interactive", action="store_true",
                      help="Interactive mode (input enabled)")
    mode.add_argument("-s", "--screensaver", action="store_true",
                      help="Screensaver mode (input disabled)")
    mode.add_argument("-p", "--pipe", action="store_true",
                      help="Read coordinates from stdin and display them on the globe")
    parser.add_argument("-r", "--refresh-rate", type=int, default=60, metavar="fps",
                        help="Refresh rate in frames per second (default: 60)")
    parser.add_argument("-g", "--globe-rotation", type=float, default=0.0,
                        metavar="move_per_frame",
                        help="Starting globe rotation speed (default: 0)")
    parser.add_argument("-c", "--cam-rotation", type=float, default=0.0,
                        metavar="move_per_frame",
                        help="Starting camera rotation speed (default: 0)")
    parser.add_argument("-z", "--cam-zoom", type=float, default=1.7, metavar="distance",
                        help="Starting camera zoom (default: 1.7)")
    parser.add_argument("-f", "--focus-speed", type=float, default=1.0, metavar="multiplier",
                        help="Target focusing animation speed (default: 1)")
    parser.add_argument("-l", "--location", default="0.4,0.6", metavar="coords",
                        help="Starting location coordinates (default: 0.4,0.6)")
    parser.add_argument("-n", "--night", action="store_true",
                        help="Enable displaying the night side of the globe")
    parser.add_argument("-t", "--template", default="earth", metavar="planet",
                        help="Display a built-in globe template (default: earth)")
    parser.add_argument("--texture", metavar="path",
                        help="Apply custom texture from file")
    parser.add_argument("--texture-night", metavar="path",
                        help="Apply custom night side texture from file")
    parser.add_argument("--palette", metavar="chars",
                        help="Custom palette, darkest to brightest character")
    parser.add_argument("--log-file", metavar="path",
                        help="Write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def _configure_logging(verbose: bool = False, log_file=None):
    """Log to --log-file when given (curses owns the terminal), else stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('ASCII_GLOBE_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    kwargs = {'filename': log_file} if log_file else {'stream': sys.stderr}
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        **kwargs,
    )


def config_from_args(args) -> GlobeConfig:
    if args.refresh_rate <= 0:
        raise InvalidConfig("--refresh-rate must be positive")
    return GlobeConfig(
        camera=CameraConfig(radius=args.cam_zoom),
        template=None if args.texture else args.template,
        texture_path=args.texture,
        night_texture_path=args.texture_night,
        palette=args.palette,
        display_night=args.night,
    )


def settings_from_args(args) -> Settings:
    settings = Settings(
        refresh_rate=args.refresh_rate,
        globe_rotation_speed=args.globe_rotation,
        cam_rotation_speed=args.cam_rotation,
        cam_zoom=args.cam_zoom,
        focus_speed=args.focus_speed,
        night=args.night,
        coords=parse_coords(args.location),
    )
    settings.validate()
    return settings


def _reattach_tty():
    """Point stdin back at the terminal after a pipe was consumed."""
    fd = os.open('/dev/tty', os.O_RDONLY)
    os.dup2(fd, 0)
    os.close(fd)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.log_file)
    logger.debug("Arguments: %s", vars(args))

    if args.interactive:
        mode = INTERACTIVE
    elif args.screensaver:
        mode = SCREENSAVER
    elif args.pipe:
        mode = LISTING
    else:
        parser.print_help()
        return 0

    try:
        settings = settings_from_args(args)
        globe = build_globe(config_from_args(args))
        coord_list = None
        if mode == LISTING:
            coord_list = parse_coord_list(sys.stdin.read())
            _reattach_tty()
    except (GlobeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        curses.wrapper(lambda stdscr: GlobeApp(stdscr, globe, settings, mode, coord_list).run())
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
