"""Build a palette from the dominant colours of an image.

The image is downscaled and quantized with PIL's adaptive palette to at
most --max-colors colours (default 16), ordered by frequency. The palette
is named by --name, or the image file name without extension.

Example:
    gpl-tool extract sunset.gpl --image sunset.jpg
    gpl-tool extract ui.gpl --image screenshot.png --max-colors 8 --name UI
"""

from pathlib import Path

from PIL import Image

from gpl_palette.commands._common import require
from gpl_palette.core.gpl_codec import save_palette
from gpl_palette.core.palette import Palette
from gpl_palette.core.swatch import extract_colours
from gpl_palette.core.types import Command

command = Command(name='extract', help='Build a palette from the dominant colours of an image.')


@command.run
def run(args) -> None:
    image_path = require(args.image, '--image')
    try:
        with Image.open(image_path) as image:
            colours = extract_colours(image, max_colors=args.max_colors)
    except OSError as e:
        raise ValueError(f'cannot read image {image_path}: {e}') from e

    name = (args.name or Path(image_path).stem).strip()
    if not name:
        raise ValueError('--name must not be blank')
    palette = Palette(name)
    for c in colours:
        palette.append_color(c)
    save_palette(palette, args.palette)
    print(f'gpl-tool: extracted {palette.count()} colours from {image_path} into {args.palette}')
