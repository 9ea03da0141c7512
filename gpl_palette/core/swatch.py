"""Image helpers: render a palette as a PNG swatch, and pull a palette out of an image."""

import numpy as np
from PIL import Image

from gpl_palette.core.palette import Palette
from gpl_palette.core.types import Color

BACKGROUND = (255, 255, 255)


def render_swatch(palette: Palette, columns: int = 16, cell: int = 16) -> Image.Image:
    """Draw the palette as a grid of cell x cell squares, row-major.

    Unused cells in the last row are filled with BACKGROUND.
    """
    if columns < 1 or cell < 1:
        raise ValueError('columns and cell must be positive')
    if palette.count() == 0:
        raise ValueError(f'palette {palette.name!r} has no colours')

    rows = -(-palette.count() // columns)
    grid = np.empty((rows * columns, 3), dtype=np.uint8)
    grid[:] = BACKGROUND
    grid[: palette.count()] = [tuple(c) for c in palette]
    # Expand each grid entry into a cell x cell block
    grid = grid.reshape(rows, columns, 3)
    pixels = np.repeat(np.repeat(grid, cell, axis=0), cell, axis=1)
    return Image.fromarray(pixels)


def extract_colours(image: Image.Image, max_colors: int = 16) -> list[Color]:
    """Dominant colours of an image, most frequent first.

    Uses PIL's adaptive palette quantization on a downscaled copy.
    """
    if not 1 <= max_colors <= 256:
        raise ValueError('max_colors must be between 1 and 256')
    rgb = image.convert('RGB')
    rgb.thumbnail((256, 256))
    quantized = rgb.convert('P', palette=Image.Palette.ADAPTIVE, colors=max_colors)

    raw = quantized.getpalette() or []
    counts = quantized.getcolors(256) or []
    result: list[Color] = []
    for _count, index in sorted(counts, key=lambda x: -x[0]):
        r, g, b = raw[index * 3 : index * 3 + 3]
        color = Color(r, g, b)
        if color not in result:
            result.append(color)
    return result
