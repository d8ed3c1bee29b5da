"""Command-line entry point: global options and the 'start' command."""

from __future__ import annotations

import argparse
import sys

from .constants import SLOGAN, VERSION, Settings, parse_print_mode
from .game import Game


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _add_options(parser: argparse.ArgumentParser, suppress: bool) -> None:
    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "-p",
        "--printmode",
        default=default("nocolor"),
        help="Print mode: (1)background, (2)foreground, (3)nocolor, (60)electronika 60",
    )
    parser.add_argument(
        "-s", "--sound", action="store_true", default=default(False), help="Enable sound"
    )
    parser.add_argument(
        "-e",
        "--endless",
        action="store_true",
        default=default(False),
        help="Enable endless mode.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="blocktris",
        description="A terminal falling-blocks game\n" + SLOGAN,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s version {VERSION}"
    )
    _add_options(parser, suppress=False)
    commands = parser.add_subparsers(dest="command", parser_class=_Parser)
    start = commands.add_parser("start", help="Start the game")
    _add_options(start, suppress=True)
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line; options may come before or after the command."""
    return _build_parser().parse_args(argv)


def main(argv=None) -> int:
    """Run the command line; without a command, print help."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    settings = Settings(
        print_mode=parse_print_mode(args.printmode),
        sound=args.sound,
        endless=args.endless,
    )
    Game(settings).start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())