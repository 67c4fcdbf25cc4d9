"""rcp-palette — parse CSS colour strings from the command line or from files.

Usage: uv run rcp-palette <command> [options]

Commands:
  parse COLOR   Parse one colour string, print canonical form and channels.
  file PATH     Parse every line of a file, one colour per line.
  author        Print attribution information.

Settings / .env loading:
  OS environment variables are always used first.
  If a variable is not set, rcp-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  See rcp_palette.core.config for the variables.
"""

import argparse
import sys
from enum import Enum

from rcp_palette import __version__
from rcp_palette.core.about import ABOUT_TEXT
from rcp_palette.core.colour_parser import parse_colour
from rcp_palette.core.config import ConfigError, Settings, load_settings
from rcp_palette.core.file_scanner import scan_file
from rcp_palette.core.report import (
    format_batch_json,
    format_batch_text,
    format_colour_json,
    format_colour_text,
    format_error_json,
    format_error_text,
)
from rcp_palette.core.types import ParseError, ScanIOError

PROG = 'rcp-palette'


class Command(Enum):
    PARSE = 'parse'
    FILE = 'file'
    AUTHOR = 'author'


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        "  rcp-palette parse '#1A2B3C'\n"
        "  rcp-palette parse 'rgb(255, 170, 0)' --json\n"
        '  rcp-palette parse teal\n'
        '  rcp-palette file ./colours.txt\n'
        "  rcp-palette file ./colours.txt --comment ';'\n"
        '  rcp-palette author\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  RCP_PALETTE_FORMAT=text|json\n'
        '  RCP_PALETTE_COMMENT=//      (comment marker for file mode)\n'
        '  RCP_PALETTE_NEAREST=1|0     (report nearest CSS colour name)\n'
    )
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Parse CSS colours: #RGB, #RRGGBB, #RRGGBBAA, rgb(r, g, b) and named colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser(Command.PARSE.value, help='Parse a single colour string')
    p.add_argument('colour', help="Colour string, e.g. '#1A2B3C', 'rgb(26, 43, 60)', 'teal'")
    _add_output_options(p)

    f = sub.add_parser(Command.FILE.value, help='Parse every line of a file')
    f.add_argument('path', help='Text file with one colour per line')
    f.add_argument('-c', '--comment', metavar='MARKER', default=None, help='Comment marker (default: //)')
    _add_output_options(f)

    sub.add_parser(Command.AUTHOR.value, help='Print author information')
    return parser


def _add_output_options(p: argparse.ArgumentParser) -> None:
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    p.add_argument('-n', '--no-nearest', action='store_true', help='Do not report the nearest CSS colour name')


def _is_author_call(argv: list[str]) -> bool:
    """True if the first command word is `author`, whatever follows it."""
    skip_next = False
    for tok in argv:
        if skip_next:
            skip_next = False
            continue
        if tok == '--env-file':
            skip_next = True
            continue
        if tok.startswith('-'):
            continue
        return tok == Command.AUTHOR.value
    return False


def _run_parse(args: argparse.Namespace, as_json: bool, show_nearest: bool) -> int:
    try:
        colour = parse_colour(args.colour)
    except ParseError as e:
        if as_json:
            print(format_error_json(e))
        print(f'{PROG}: {format_error_text(e)}', file=sys.stderr)
        return 1

    if as_json:
        print(format_colour_json(args.colour, colour, show_nearest=show_nearest))
    else:
        print(format_colour_text(args.colour, colour, show_nearest=show_nearest))
    return 0


def _run_file(args: argparse.Namespace, settings: Settings, as_json: bool, show_nearest: bool) -> int:
    marker = args.comment if args.comment is not None else settings.comment_marker
    try:
        result = scan_file(args.path, comment_marker=marker)
    except (ScanIOError, ValueError) as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        return 1

    if as_json:
        print(format_batch_json(result, show_nearest=show_nearest))
    else:
        print(format_batch_text(result, show_nearest=show_nearest))

    if not result.all_ok:
        print(f'{PROG}: {result.error_count} line(s) failed to parse', file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    # author never fails, so it bypasses argument validation and settings
    if _is_author_call(argv):
        print(ABOUT_TEXT)
        return 0

    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = load_settings(env_file=args.env_file)
    except ConfigError as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        return 1
    if settings.source:
        print(f'{PROG}: loaded {settings.source}', file=sys.stderr)

    as_json = args.json or settings.output_format == 'json'
    show_nearest = settings.show_nearest and not args.no_nearest

    command = Command(args.command)
    if command is Command.PARSE:
        return _run_parse(args, as_json, show_nearest)
    return _run_file(args, settings, as_json, show_nearest)


if __name__ == '__main__':
    sys.exit(main())
