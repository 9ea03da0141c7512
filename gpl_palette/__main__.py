"""gpl-tool — Create, inspect and edit GIMP palette (.gpl) files.

Usage: gpl-tool <command> <palette> [options]

Commands are auto-discovered from gpl_palette/commands/.
Each command module's docstring is its documentation.
Run `gpl-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, gpl-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import logging
import sys

from gpl_palette import registry
from gpl_palette.core.env import load_env
from gpl_palette.core.errors import PaletteError


def _short_help(name: str) -> str:
    doc = (registry.module_for(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else registry.get(name).help


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  gpl-tool default default.gpl\n'
        '  gpl-tool show default.gpl --json\n'
        "  gpl-tool add mine.gpl --color '#ff8800' --color 0,0,255\n"
        '  gpl-tool set mine.gpl --index 2 --color 10,20,30\n'
        '  gpl-tool remove mine.gpl --index 0\n'
        "  gpl-tool rename mine.gpl --name 'My Colours'\n"
        '  gpl-tool swatch mine.gpl --out mine.png\n'
        '  gpl-tool extract photo.gpl --image photo.jpg --max-colors 12\n'
        '  gpl-tool help add\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  GPL_DEFAULT_NAME  name for palettes made by `default` (default: Default)\n'
    )
    parser = argparse.ArgumentParser(
        prog='gpl-tool',
        description='Create, inspect and edit GIMP palette (.gpl) files.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name in sorted(commands):
        p = sub.add_parser(name, help=_short_help(name))
        p.add_argument('palette', help='Path to the .gpl palette file')
        p.add_argument('-c', '--color', action='append', metavar='COLOUR', help="'#rrggbb', '#rgb' or 'r,g,b'")
        p.add_argument('-i', '--index', type=int, default=None, help='Colour index (0-based)')
        p.add_argument('-n', '--name', default=None, help='Palette name')
        p.add_argument('-o', '--out', default=None, help='Output image path (swatch)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--image', default=None, help='Source image (extract)')
        p.add_argument('--max-colors', type=int, default=16, metavar='N', help='Colours to extract (default: 16)')
        p.add_argument('--columns', type=int, default=16, metavar='N', help='Swatch columns (default: 16)')
        p.add_argument('--cell', type=int, default=16, metavar='PX', help='Swatch cell size (default: 16)')

    # `help` prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: gpl-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (registry.module_for(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    # OS env vars always win over .env
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'gpl-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        registry.get(args.command).execute(args)
    except (PaletteError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
