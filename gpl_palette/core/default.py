"""Default palette: a sweep of fully saturated hues at decreasing brightness.

22 hues (0, 16, ..., 336 degrees) times 16 values (255, 239, ..., 15),
hue-major, for 352 colours.
"""

import numpy as np

from gpl_palette.core.palette import Palette
from gpl_palette.core.types import Color

HUES = range(0, 352, 16)
VALUES = range(255, 14, -16)
SATURATION = 255


def hsv_to_rgb(h, s, v) -> np.ndarray:
    """Convert HSV to 8-bit RGB.

    h is in degrees [0, 360), s and v in [0, 255]. Accepts scalars or
    broadcastable arrays; returns an int array with a trailing axis of 3.
    """
    h = np.asarray(h, dtype=np.float64) % 360.0
    s = np.asarray(s, dtype=np.float64) / 255.0
    v = np.asarray(v, dtype=np.float64)
    h, s, v = np.broadcast_arrays(h, s, v)

    sector = h / 60.0
    i = np.floor(sector).astype(int) % 6
    f = sector - np.floor(sector)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    r = np.choose(i, [v, q, p, p, t, v])
    g = np.choose(i, [t, v, v, q, p, p])
    b = np.choose(i, [p, p, t, v, v, q])
    rgb = np.stack([r, g, b], axis=-1)
    # Round half up, then clip float noise
    return np.clip(np.floor(rgb + 0.5), 0, 255).astype(int)


def make_default(name: str = 'Default') -> Palette:
    """Build the default palette.

    The colours are appended one by one, so the result is left modified.
    """
    hue_grid, value_grid = np.meshgrid(np.array(HUES), np.array(VALUES), indexing='ij')
    rgb = hsv_to_rgb(hue_grid, SATURATION, value_grid).reshape(-1, 3)

    palette = Palette(name)
    for r, g, b in rgb.tolist():
        palette.append_color(Color(r, g, b))
    return palette
