import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import BinariesMode, HexdumpOptions, options_from_env
from .console import to_ansi
from .core import render_hexdump, render_hexdump_file
from .display import should_dump
from .errors import InvalidInputError

logger = logging.getLogger(__name__)


handler = logging.StreamHandler()
handler.setFormatter(
    logging.Formatter(
        "[%(asctime)s][%(levelname)s] %(filename)s:%(funcName)s:%(lineno)d %(message)s",
        datefmt="%H:%M:%S",
    )
)


def configure_logging(level: int = logging.WARNING) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    # main() can run many times in one process, install the handler once.
    if handler not in root.handlers:
        root.addHandler(handler)


def _non_negative(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexlens",
        description="Print a coloured hex dump of a file or of standard input.",
    )
    parser.add_argument("path", nargs="?", default="-", help="file to dump, - for stdin (default)")
    limits = parser.add_mutually_exclusive_group()
    limits.add_argument("-n", "--limit", type=_non_negative, help="elide everything after this many bytes")
    limits.add_argument("--no-limit", action="store_true", help="dump every byte")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BinariesMode],
        help="dump always, print as text, or infer from printability",
    )
    parser.add_argument("--printable-limit", type=_non_negative, help="characters checked in infer mode")
    parser.add_argument("--no-color", action="store_true", help="plain output without escapes")
    parser.add_argument("--tui", action="store_true", help="open the interactive viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def resolve_options(args: argparse.Namespace, base: HexdumpOptions) -> HexdumpOptions:
    overrides = {}
    if args.no_limit:
        overrides["limit"] = None
    elif args.limit is not None:
        overrides["limit"] = args.limit
    if args.mode is not None:
        overrides["binaries"] = BinariesMode(args.mode)
    if args.printable_limit is not None:
        overrides["printable_limit"] = args.printable_limit
    if args.no_color or not sys.stdout.isatty():
        overrides["color"] = False
    return dataclasses.replace(base, **overrides)


def _render(args: argparse.Namespace, options: HexdumpOptions) -> str:
    if args.path != "-" and options.binaries is BinariesMode.AS_BINARIES:
        return to_ansi(render_hexdump_file(args.path, options.limit), color=options.color)

    data = sys.stdin.buffer.read() if args.path == "-" else Path(args.path).read_bytes()
    if not should_dump(data, options):
        logger.debug(f"{len(data)} bytes printed as text ({options.binaries.value} mode)")
        return data.decode("utf-8", errors="replace")
    return to_ansi(render_hexdump(data, options.limit), color=options.color)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        options = resolve_options(args, options_from_env())

        if args.tui:
            from .viewer import HexViewerApp

            data = sys.stdin.buffer.read() if args.path == "-" else Path(args.path).read_bytes()
            HexViewerApp(data, subtitle=args.path, options=options).run()
            return 0

        output = _render(args, options)
    except (InvalidInputError, OSError) as err:
        logger.error(f"Cannot dump {args.path}: {err}")
        return 1

    sys.stdout.write(output + "\n")
    return 0
