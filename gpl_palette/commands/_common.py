"""Helpers shared by the editing commands."""

from gpl_palette.core.gpl_codec import save_palette
from gpl_palette.core.palette import Palette
from gpl_palette.core.types import Color


def require(value, flag: str):
    if value is None or value == []:
        raise ValueError(f'{flag} is required')
    return value


def parse_colours(values: list[str] | None) -> list[Color]:
    return [Color.parse(v) for v in require(values, '--color')]


def check_index(palette: Palette, index: int, allow_end: bool = False) -> int:
    """Validate a user-supplied index before it reaches the palette."""
    limit = palette.count() + 1 if allow_end else palette.count()
    if not 0 <= index < limit:
        raise ValueError(f'index {index} out of range: {palette.name!r} has {palette.count()} colours')
    return index


def save_if_modified(palette: Palette, path: str) -> bool:
    if not palette.modified:
        return False
    save_palette(palette, path)
    return True
