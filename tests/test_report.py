"""Tests for gpl_palette.core.report — text and JSON palette views."""

import json

from gpl_palette.core.palette import Palette
from gpl_palette.core.report import format_json, format_text
from gpl_palette.core.types import Color


def _palette() -> Palette:
    p = Palette('Warm', 'warm.gpl')
    p.append_color(Color(255, 0, 0))
    p.append_color(Color(37, 99, 235))
    return p


class TestFormatText:
    def test_header(self):
        text = format_text(_palette(), path='/tmp/warm.gpl')
        first = text.splitlines()[0]
        assert 'Warm' in first
        assert '2 colours' in first
        assert '[warm.gpl]' in first
        assert '*modified*' in first

    def test_saved_palette_not_flagged(self):
        p = _palette()
        p.mark_saved()
        assert '*modified*' not in format_text(p)

    def test_one_line_per_colour(self):
        lines = format_text(_palette()).splitlines()
        assert lines[2] == '  0  #ff0000  255   0   0'
        assert lines[3] == '  1  #2563eb   37  99 235'

    def test_empty_palette(self):
        assert len(format_text(Palette('Empty')).splitlines()) == 1


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_palette(), path='warm.gpl'))
        assert obj['name'] == 'Warm'
        assert obj['filename'] == 'warm.gpl'
        assert obj['path'] == 'warm.gpl'
        assert obj['modified'] is True
        assert obj['count'] == 2
        assert obj['colors'][1] == {'index': 1, 'hex': '#2563eb', 'rgb': [37, 99, 235]}

    def test_path_omitted(self):
        assert 'path' not in json.loads(format_json(_palette()))
