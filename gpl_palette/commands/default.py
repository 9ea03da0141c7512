"""Write the default palette: 22 hues x 16 brightness steps, 352 colours.

The palette name comes from --name, else GPL_DEFAULT_NAME (environment or
.env), else "Default". An existing file at <palette> is replaced.

Example:
    gpl-tool default default.gpl
    gpl-tool default standard.gpl --name Standard
"""

from gpl_palette.core.default import make_default
from gpl_palette.core.env import default_palette_name
from gpl_palette.core.gpl_codec import save_palette
from gpl_palette.core.types import Command

command = Command(name='default', help='Write the 352-colour HSV sweep palette.')


@command.run
def run(args) -> None:
    palette = make_default(args.name or default_palette_name())
    save_palette(palette, args.palette)
    print(f'gpl-tool: wrote {palette.name!r} ({palette.count()} colours) to {args.palette}')
