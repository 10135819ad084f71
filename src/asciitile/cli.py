import argparse
import sys
from pathlib import Path

from asciitile.config import LOG_LEVELS, Settings
from asciitile.errors import EmptyIndex, ImageLoadError
from asciitile.logging_conf import setup_logging
from asciitile.output import OUTPUTS, build_output
from asciitile.rounding import RoundingPolicy
from asciitile.session import Session
from asciitile.shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-r", "--resolution", type=int, default=None, help="Characters per row (default: 2)")
    parser.add_argument("-c", "--charset", default=None, help="Initial characters to draw with (default: 0-9)")
    parser.add_argument(
        "--round",
        dest="rounding",
        default=None,
        choices=[p.value for p in RoundingPolicy],
        help="Rounding policy between character scores (default: abs)",
    )
    parser.add_argument("-o", "--output", default=None, choices=OUTPUTS, help="Output method (default: console)")
    parser.add_argument("--html-path", default=None, help="File written by the html output (default: out.html)")
    parser.add_argument("--font", dest="font_path", default=None, help="TrueType font used to measure characters")
    parser.add_argument("--log-level", default=None, choices=LOG_LEVELS, help="Logging level (default: WARNING)")
    parser.add_argument(
        "-i", "--interactive", action="store_true", default=False, help="Start the interactive command shell"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = Settings.from_env().override(
        resolution=args.resolution,
        charset=args.charset,
        rounding=args.rounding,
        output=args.output,
        html_path=args.html_path,
        font_path=args.font_path,
        log_level=args.log_level,
    )
    setup_logging(settings.log_level)

    image_path = Path(args.image)
    try:
        session = Session.from_path(image_path, settings)
    except ImageLoadError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Cannot load font {settings.font_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if args.interactive:
        Shell(session).run()
        return

    try:
        grid = session.render()
    except EmptyIndex as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    build_output(settings.output, settings.html_path, settings.html_font).out(grid)
