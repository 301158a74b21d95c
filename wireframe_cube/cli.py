#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import logging
import sys

from .config import load_config, DEFAULT_CONFIG_PATH
from .demo import main as run_demo
from .errors import RendererError
from .logging_config import setup_logging
from .mesh import Mesh


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                  Spinning cube, settings from wireframe_cube.yaml
  %(prog)s --legacy --no-clear              Plain reprint, frames scroll
  %(prog)s --model cobra.obj --fps 20       Load an OBJ wireframe
  %(prog)s --config other.yaml --no-color   Alternate config, monochrome

keys:
  w/s or Up/Down pitch, a/d or Left/Right yaw, z/c roll,
  +/- focal length, space pause/resume, q or Esc quit
"""
    parser = argparse.ArgumentParser(
        prog="wireframe-cube",
        description="Rotating wireframe cube in the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--config", default=None,
                        help=f"YAML config file, created if missing (default: {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--model", default=None,
                        help="Path to .obj file instead of the built-in cube")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--legacy", dest="legacy_mode", action="store_true", default=None,
                      help="Full-text reprint to stdout")
    mode.add_argument("--fast", dest="legacy_mode", action="store_false", default=None,
                      help="Cursor-addressed curses redraw")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None,
                        help="Disable color output")
    parser.add_argument("--no-clear", dest="clear_screen", action="store_false", default=None,
                        help="Do not clear the screen between frames")
    parser.add_argument("--fps", type=float, default=None,
                        help="Frames per second")
    parser.add_argument("--frames", type=positive_int, default=None,
                        help="Stop after this many frames")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug messages")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    if args.log_file:
        setup_logging(level, args.log_file, console=False)
    else:
        # Console logs would tear the picture; keep only warnings.
        setup_logging(logging.WARNING)

    try:
        config = load_config(args.config).with_overrides(
            legacy_mode=args.legacy_mode,
            color=args.color,
            clear_screen=args.clear_screen,
            fps=args.fps,
        )
        mesh = Mesh.from_obj(args.model) if args.model else Mesh.cube()
        run_demo(config, mesh, max_frames=args.frames)
    except KeyboardInterrupt:
        pass
    except RendererError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
