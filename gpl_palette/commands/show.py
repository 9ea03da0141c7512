"""Print a palette's name, filename and colours.

Each colour line shows its index, hex value and decimal components.
Use --json for machine-readable output.

Example:
    gpl-tool show colours.gpl
    gpl-tool show colours.gpl --json
"""

from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.report import format_json, format_text
from gpl_palette.core.types import Command

command = Command(name='show', help='Print palette name, filename and colours.')


@command.run
def run(args) -> None:
    palette = load_palette(args.palette)
    if args.json:
        print(format_json(palette, path=args.palette))
    else:
        print(format_text(palette, path=args.palette))
