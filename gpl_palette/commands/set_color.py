"""Replace the colour at --index with --color.

Example:
    gpl-tool set colours.gpl --index 3 --color '#00ff00'
"""

from gpl_palette.commands._common import check_index, parse_colours, require, save_if_modified
from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.types import Command

command = Command(name='set', help='Replace the colour at an index.')


@command.run
def run(args) -> None:
    colours = parse_colours(args.color)
    if len(colours) != 1:
        raise ValueError('set takes exactly one --color')
    palette = load_palette(args.palette)
    index = check_index(palette, require(args.index, '--index'))
    palette.set_color(index, colours[0])
    save_if_modified(palette, args.palette)
    print(f'gpl-tool: colour {index} is now {colours[0].hex}')
