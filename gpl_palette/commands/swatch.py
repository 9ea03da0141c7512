"""Render a palette as a PNG grid of colour squares.

Colours are laid out row-major, --columns per row (default 16), each
--cell pixels square (default 16). Empty cells in the last row are white.

Example:
    gpl-tool swatch colours.gpl --out colours.png
    gpl-tool swatch colours.gpl --out big.png --columns 8 --cell 32
"""

import os

from gpl_palette.commands._common import require
from gpl_palette.core.gpl_codec import load_palette
from gpl_palette.core.swatch import render_swatch
from gpl_palette.core.types import Command

command = Command(name='swatch', help='Render the palette as a PNG grid.')


@command.run
def run(args) -> None:
    out = require(args.out, '--out')
    palette = load_palette(args.palette)
    image = render_swatch(palette, columns=args.columns, cell=args.cell)
    try:
        os.makedirs(os.path.dirname(os.path.abspath(out)), exist_ok=True)
        image.save(out, format='PNG')
    except OSError as e:
        raise ValueError(f'cannot write swatch {out}: {e}') from e
    print(f'gpl-tool: wrote {image.width}\u00d7{image.height} swatch to {out}')
