#!/usr/bin/env python3
#
# PROJECT: charcell-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from charcell_renderer.demo import main


def parse_args():
    epilog = """\
examples:
  %(prog)s                            Spinning demo cube
  %(prog)s cobra.obj                  Load OBJ model
  %(prog)s cobra.obj --fov 60 --ascii Narrow lens, plain ASCII fill
  %(prog)s --no-cull --log-file r.log Draw back faces, log to a file
"""
    parser = argparse.ArgumentParser(
        description="Character-cell 3D renderer demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("--ascii", action="store_true",
                        help="Use '#' instead of a unicode block for solid fill")
    parser.add_argument("--no-cull", action="store_true",
                        help="Disable backface culling")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Horizontal field of view in degrees (default: 90)")
    parser.add_argument("--workers", type=int, default=0,
                        help="Threads for per-object projection, 0 = none (default: 0)")
    parser.add_argument("--log-file",
                        help="Write log output to this file (the screen belongs to curses)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    try:
        curses.wrapper(main, args)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger("client_demo").exception("Demo crashed")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
