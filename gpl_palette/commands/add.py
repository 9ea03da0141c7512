"""Append colours to a palette, or insert them at --index.

--color may be repeated. With --index, the colours are inserted in order
starting at that position; --index equal to the colour count appends.

Example:
    gpl-tool add colours.gpl --color '#ff0000' --color 0,128,255
    gpl-tool add colours.gpl --color '#fff' --index 0
"""

from gpl_palette.commands._common import check_index, parse_colours, save_if_modified
from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.types import Command

command = Command(name='add', help='Append or insert colours.')


@command.run
def run(args) -> None:
    colours = parse_colours(args.color)
    palette = load_palette(args.palette)
    if args.index is None:
        for c in colours:
            palette.append_color(c)
    else:
        index = check_index(palette, args.index, allow_end=True)
        for offset, c in enumerate(colours):
            palette.insert_color(index + offset, c)
    save_if_modified(palette, args.palette)
    print(f'gpl-tool: {palette.name!r} now has {palette.count()} colours')
