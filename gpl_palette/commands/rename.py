"""Change a palette's name (the Name: line).

The file is rewritten in place; it is not moved to <name>.gpl.

Example:
    gpl-tool rename colours.gpl --name 'Sunset Tones'
"""

from gpl_palette.commands._common import require, save_if_modified
from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.types import Command

command = Command(name='rename', help='Change the palette name.')


@command.run
def run(args) -> None:
    name = require(args.name, '--name').strip()
    if not name:
        raise ValueError('--name must not be blank')
    palette = load_palette(args.palette)
    palette.set_name(name)
    save_if_modified(palette, args.palette)
    print(f'gpl-tool: renamed to {palette.name!r}')
