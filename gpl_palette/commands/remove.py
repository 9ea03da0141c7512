"""Remove the colour at --index. Later colours move up by one.

Example:
    gpl-tool remove colours.gpl --index 0
"""

from gpl_palette.commands._common import check_index, require, save_if_modified
from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.types import Command

command = Command(name='remove', help='Remove the colour at an index.')


@command.run
def run(args) -> None:
    palette = load_palette(args.palette)
    index = check_index(palette, require(args.index, '--index'))
    removed = palette.color(index)
    palette.remove_color(index)
    save_if_modified(palette, args.palette)
    print(f'gpl-tool: removed {removed.hex}, {palette.count()} colours left')
