#
# PROJECT: wireframe-script-renderer
# MODULE: wireframe_script_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import dataclasses
import logging
import sys

from .config import RenderConfig
from .display import Exporter
from .errors import RenderError
from .logging_config import setup_logging
from .parser import ScriptInterpreter
from .session import RenderSession


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
examples:
  %(prog)s                                  Run ./script, viewing with 'display'
  %(prog)s scene.txt --no-viewer            Print a Braille preview instead
  %(prog)s scene.txt --no-viewer --ascii    ASCII preview for plain terminals
  %(prog)s scene.txt --xres 800 --yres 600  Larger canvas
  %(prog)s scene.txt -v --log-file run.log  Debug log of every command
"""
    parser = argparse.ArgumentParser(
        description="Script-driven 3D wireframe renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("script", nargs='?', default="script",
                        help="Path to the drawing script (default: ./script)")
    parser.add_argument("--xres", type=int, default=None,
                        help="Canvas width in pixels (default: 500)")
    parser.add_argument("--yres", type=int, default=None,
                        help="Canvas height in pixels (default: 500)")
    parser.add_argument("--ppm", default=None,
                        help="Intermediate PPM file (default: pic.ppm)")
    parser.add_argument("--viewer", default=None,
                        help="Image viewer command (default: display)")
    parser.add_argument("--no-viewer", action="store_true",
                        help="Print a text preview instead of launching a viewer")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille in the preview")
    parser.add_argument("--convert", default=None,
                        help="Image conversion command (default: convert)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log every command")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file")
    return parser


def config_from_args(args) -> RenderConfig:
    overrides = {}
    if args.xres is not None:
        overrides['xres'] = args.xres
    if args.yres is not None:
        overrides['yres'] = args.yres
    if args.ppm:
        overrides['ppm_filename'] = args.ppm
    if args.viewer:
        overrides['viewer_command'] = args.viewer
    if args.no_viewer:
        overrides['viewer_command'] = None
    if args.ascii:
        overrides['use_braille'] = False
    if args.convert:
        overrides['convert_command'] = args.convert
    # replace() re-runs __post_init__ on the overridden values
    return dataclasses.replace(RenderConfig.from_environment(), **overrides)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        config = config_from_args(args)
        session = RenderSession(config)
        interpreter = ScriptInterpreter(session, Exporter(config))
        interpreter.run_file(args.script)
    except (RenderError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
