import argparse
import logging
import sys

from asciimage.charsets import glyph_ramp
from asciimage.config import Config
from asciimage.engine import Mode, display, render
from asciimage.errors import DecodeError, EmptyRampError, InvalidRampError, SinkInitError
from asciimage.logging_conf import setup_logging
from asciimage.palette import DEFAULT_COLOUR_RAMP, parse_colour_ramp
from asciimage.raster import load_grid
from asciimage.terminal import TerminalSink, get_terminal_size

VERSION = "1.1"

log = logging.getLogger(__name__)

# Number of ramp arguments each mode accepts
MAX_MAPS = {Mode.ASCII: 1, Mode.COLOR: 1, Mode.ASCOL: 2}

EPILOG = """\
maps:
  ASCII  glyph ramp, darkest first (quote it if it holds a space)
  COLOR  colour ramp: digits 0-9 and A-F pick console colours, e.g. 0193BF
  ASCOL  colour ramp, then glyph ramp; the two may differ in length

  A glyph ramp may start with "-". Put "--" before it if it looks like an
  option, e.g. asciimage image.jpg ASCII -- -v.

examples:
  asciimage image.jpg ASCII " ._-oa3O@"
  asciimage image.jpg COLOR 0193BF
  asciimage image.jpg ASCOL 0193BF " ._-oa3O@"
"""


def _mode(text: str) -> Mode:
    try:
        return Mode.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciimage",
        description="Print an image in the terminal as ASCII art, colour blocks or both",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "mode", nargs="?", type=_mode, default=Mode.ASCII, help="ASCII, COLOR or ASCOL (default: ASCII)"
    )
    parser.add_argument("maps", nargs="*", help="Glyph and/or colour ramps for the chosen mode")
    parser.add_argument("--alpha", action="store_true", help="Decode the alpha channel as well")
    parser.add_argument("--per-cell", action="store_true", help="Write coloured output one cell at a time")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0
    args, extras = parser.parse_known_args(argv)
    # Unrecognised dash-prefixed words are ramps such as "-=#"
    unknown = [word for word in extras if word.startswith("--")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.maps = args.maps + extras

    cfg = Config.load()
    if args.verbose:
        cfg.log_level = "DEBUG"
    if args.log_file:
        cfg.log_file = args.log_file
    try:
        setup_logging(cfg)
    except OSError as exc:
        parser.error(f"cannot open log file {cfg.log_file}: {exc}")

    if len(args.maps) > MAX_MAPS[args.mode]:
        parser.error(f"{args.mode.value} takes at most {MAX_MAPS[args.mode]} map(s)")

    glyph_text = cfg.glyphs
    colour_text = cfg.colours
    if args.mode is Mode.ASCII:
        if args.maps:
            glyph_text = args.maps[0]
    else:
        if args.maps:
            colour_text = args.maps[0]
        if len(args.maps) > 1:
            glyph_text = args.maps[1]
    try:
        glyphs = glyph_ramp(glyph_text)
        colours = DEFAULT_COLOUR_RAMP if args.mode is Mode.ASCII else parse_colour_ramp(colour_text)
    except (EmptyRampError, InvalidRampError) as exc:
        parser.error(str(exc))

    try:
        sink = TerminalSink.open()
    except SinkInitError as exc:
        print(f"[!] Failed to init the console: {exc}", file=sys.stderr)
        return 1

    try:
        grid = load_grid(args.image, channels=4 if args.alpha else 3)
    except DecodeError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    log.debug("Glyph ramp %r, %d colours", glyphs, len(colours))
    columns, _ = get_terminal_size()
    if grid.width > columns:
        log.warning("Image is %d pixels wide but the terminal has %d columns", grid.width, columns)

    display(render(grid, args.mode, glyphs, colours), sink, per_cell=args.per_cell)
    return 0


if __name__ == "__main__":
    sys.exit(main())
