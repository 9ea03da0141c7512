"""Report builder — text and JSON views of a palette for gpl-tool."""

import json
import os
from typing import Any

from gpl_palette.core.palette import Palette


def format_text(palette: Palette, path: str | None = None) -> str:
    """Format a palette as human-readable text, one colour per line."""
    header = f'gpl-tool: {palette.name} \u2014 {palette.filename} ({palette.count()} colours)'
    if path:
        header += f' [{os.path.basename(path)}]'
    if palette.modified:
        header += ' *modified*'
    lines = [header, '']

    width = len(str(max(palette.count() - 1, 0)))
    for index, c in enumerate(palette):
        lines.append(f'  {index:>{width}}  {c.hex}  {c.red:>3} {c.green:>3} {c.blue:>3}')
    return '\n'.join(lines)


def format_json(palette: Palette, path: str | None = None) -> str:
    """Format a palette as JSON."""
    obj: dict[str, Any] = {
        'name': palette.name,
        'filename': palette.filename,
        'modified': palette.modified,
    }
    if path:
        obj['path'] = path
    obj['count'] = palette.count()
    obj['colors'] = [{'index': i, 'hex': c.hex, 'rgb': list(c)} for i, c in enumerate(palette)]
    return json.dumps(obj, indent=2)
