"""Tests for gpl_palette.core.swatch — PNG swatch rendering and colour extraction."""

import pytest
from gpl_palette.core.default import make_default
from gpl_palette.core.palette import Palette
from gpl_palette.core.swatch import extract_colours, render_swatch
from gpl_palette.core.types import Color
from PIL import Image


def _palette(*colours: Color) -> Palette:
    p = Palette('Swatch')
    for c in colours:
        p.append_color(c)
    return p


class TestRenderSwatch:
    def test_dimensions(self):
        img = render_swatch(make_default(), columns=16, cell=4)
        assert img.size == (64, 22 * 4)
        assert img.mode == 'RGB'

    def test_cells_row_major(self):
        img = render_swatch(_palette(Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)), columns=2, cell=3)
        assert img.size == (6, 6)
        assert img.getpixel((1, 1)) == (255, 0, 0)
        assert img.getpixel((4, 1)) == (0, 255, 0)
        assert img.getpixel((1, 4)) == (0, 0, 255)

    def test_unused_cells_are_background(self):
        img = render_swatch(_palette(Color(0, 0, 0)), columns=3, cell=2)
        assert img.getpixel((5, 1)) == (255, 255, 255)

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            render_swatch(Palette('Empty'))

    def test_bad_geometry_rejected(self):
        with pytest.raises(ValueError):
            render_swatch(_palette(Color(0, 0, 0)), columns=0)


class TestExtractColours:
    def test_two_colour_image(self):
        img = Image.new('RGB', (40, 10), (255, 0, 0))
        img.paste((0, 0, 255), (30, 0, 40, 10))
        colours = extract_colours(img, max_colors=4)
        assert colours[0] == Color(255, 0, 0)
        assert Color(0, 0, 255) in colours
        assert len(colours) == 2

    def test_solid_image(self):
        colours = extract_colours(Image.new('RGB', (8, 8), (10, 20, 30)))
        assert colours == [Color(10, 20, 30)]

    def test_max_colors_bounds(self):
        with pytest.raises(ValueError):
            extract_colours(Image.new('RGB', (2, 2)), max_colors=0)
