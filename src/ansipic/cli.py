import argparse
import logging
import os
import sys
from pathlib import Path

from ansipic.charsets import RAMPS
from ansipic.config import RenderOptions
from ansipic.emitter import StreamEmitter
from ansipic.engine import ImageEngine
from ansipic.errors import AnsipicError
from ansipic.logging_conf import setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _alpha(value: str) -> int:
    number = int(value)
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError(f"must be between 0 and 255, got {value}")
    return number


def terminal_columns() -> int:
    """Columns of the attached terminal, or 80 if stdout is not a tty."""
    if not sys.stdout.isatty():
        return 80
    return os.get_terminal_size().columns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ansipic", description="Render an image as coloured text")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-W", "--width", type=_positive_int, default=None, help="Output width in columns")
    parser.add_argument("-H", "--height", type=_positive_int, default=None, help="Output height in rows")
    parser.add_argument(
        "-t",
        "--threshold",
        type=_alpha,
        default=0,
        help="Alpha values at or below this render as blank space (default: 0)",
    )
    parser.add_argument(
        "-c", "--charset", default="default", choices=sorted(RAMPS), help="Glyph ramp to use (default: default)"
    )
    parser.add_argument(
        "--no-colour", dest="colour", action="store_false", default=True, help="Disable truecolor ANSI output"
    )
    parser.add_argument(
        "--corrected-luminance",
        action="store_true",
        default=False,
        help="Normalise the whole weighted RGB sum instead of the historical blue-only division",
    )
    parser.add_argument(
        "--fit", action="store_true", default=False, help="Use the terminal width when no size is given"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.width is None and args.height is None:
        if not args.fit:
            parser.error("at least one of --width or --height is required (or pass --fit)")
        args.width = terminal_columns()

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    try:
        options = RenderOptions.from_args(args)
        engine = ImageEngine.from_path(image_path)
        engine.render_options(sys.stdout.buffer, options)
        trailer = StreamEmitter(sys.stdout.buffer)
        trailer.newline()
        trailer.flush()
    except AnsipicError as exc:
        logger.debug("Render failed", exc_info=True)
        print(f"ansipic: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
