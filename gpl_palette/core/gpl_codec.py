"""Reader and writer for GIMP palette (.gpl) files.

Reading is tolerant: after the two mandatory header lines, anything that
does not look like a colour line (Columns:, comments, blank lines, lines
with fewer than three tokens) is skipped. Writing is strict and always
produces the same layout:

    GIMP Palette
    Name: <name>
    #
    <r> <g> <b>\tUntitled
"""

import logging
import os
import re
import shutil
import tempfile
from typing import BinaryIO

from gpl_palette.core.default import make_default
from gpl_palette.core.errors import InvalidHeaderError, MissingNameError, PaletteError, PaletteIOError
from gpl_palette.core.palette import Palette
from gpl_palette.core.types import Color

logger = logging.getLogger(__name__)

HEADER = 'GIMP Palette'
NAME_PREFIX = 'Name:'
COLOR_LABEL = 'Untitled'

_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')
_FIELD_SEP_RE = re.compile(r'[ \t]+')
_INT_RE = re.compile(r'[+-]?[0-9]+')
_ASCII_SPACE = ' \t\r\n\x0b\x0c'


def parse_gpl(stream: BinaryIO, filename: str = '') -> Palette:
    """Parse a .gpl palette from a binary stream.

    `filename` is the caller's source identifier (usually the file's base
    name). It becomes the palette filename; nothing in the stream does.
    Raises InvalidHeaderError, MissingNameError or PaletteIOError.
    """
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise PaletteIOError(f'cannot read palette: {e}') from e
    if isinstance(data, bytes):
        data = data.decode('utf-8-sig', errors='replace')
    return parse_gpl_string(data, filename)


def parse_gpl_string(text: str, filename: str = '') -> Palette:
    """Parse a .gpl palette from already-decoded text."""
    lines = _LINE_BREAK_RE.split(text)
    if lines[0] != HEADER:
        raise InvalidHeaderError(f'expected {HEADER!r} on line 1, got {lines[0][:40]!r}')

    if len(lines) < 2 or not lines[1].startswith(NAME_PREFIX):
        raise MissingNameError(f'line 2 does not start with {NAME_PREFIX!r}')
    name = lines[1][len(NAME_PREFIX) :].strip(_ASCII_SPACE)
    if not name:
        raise MissingNameError('palette name is empty')

    palette = Palette(name, filename or None)
    skipped = 0
    for lineno, line in enumerate(lines[2:], start=3):
        color = _parse_color_line(line)
        if color is None:
            if line.strip(_ASCII_SPACE):
                logger.debug(f'{filename or name}:{lineno}: skipped {line[:40]!r}')
                skipped += 1
            continue
        palette.append_color(color)

    palette.mark_saved()
    logger.debug(f'Parsed palette {name!r}: {palette.count()} colours, {skipped} lines skipped')
    return palette


def _parse_color_line(line: str) -> Color | None:
    """Return the colour on a line, or None if the line is not a colour line."""
    stripped = line.lstrip(_ASCII_SPACE)
    if not stripped or stripped.startswith('#'):
        return None
    tokens = [t for t in _FIELD_SEP_RE.split(line.strip(_ASCII_SPACE)) if t]
    if len(tokens) < 3:
        return None
    # Extra tokens are the colour's label, which is not kept
    r, g, b = (_to_int(t) for t in tokens[:3])
    return Color.clamped(r, g, b)


def _to_int(token: str) -> int:
    # Unparseable components count as 0
    if not _INT_RE.fullmatch(token):
        return 0
    # Anything past three significant digits saturates without calling int()
    if len(token.lstrip('+-').lstrip('0')) > 3:
        return 0 if token.startswith('-') else 255
    return int(token)


def format_gpl(palette: Palette) -> str:
    """Render a palette as .gpl text."""
    lines = [HEADER, f'{NAME_PREFIX} {palette.name}', '#']
    for c in palette:
        lines.append(f'{c.red} {c.green} {c.blue}\t{COLOR_LABEL}')
    return '\n'.join(lines) + '\n'


def emit_gpl(palette: Palette, stream: BinaryIO) -> None:
    """Write a palette to a binary stream and clear its modified flag.

    On failure raises PaletteIOError and leaves the flag untouched.
    """
    try:
        stream.write(format_gpl(palette).encode('utf-8'))
        stream.flush()
    except (OSError, ValueError) as e:
        raise PaletteIOError(f'cannot write palette: {e}') from e
    palette.mark_saved()


def load_palette(path: str | os.PathLike) -> Palette:
    """Load a palette from disk. Its filename is the file's base name."""
    try:
        with open(path, 'rb') as f:
            return parse_gpl(f, os.path.basename(os.fspath(path)))
    except OSError as e:
        raise PaletteIOError(f'cannot open {os.fspath(path)}: {e}') from e


def save_palette(palette: Palette, path: str | os.PathLike) -> None:
    """Save a palette to disk, replacing the file only once fully written.

    A failed save leaves any existing file at `path` as it was and does not
    clear the palette's modified flag.
    """
    path = os.fspath(path)
    data = format_gpl(palette).encode('utf-8')
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.', suffix='.gpl.tmp', dir=os.path.dirname(os.path.abspath(path)))
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None:
            _discard(tmp_path)
        raise PaletteIOError(f'cannot write {path}: {e}') from e

    palette.mark_saved()
    logger.info(f'Saved palette {palette.name!r} ({palette.count()} colours) to {path}')


def _discard(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def load_or_default(path: str | os.PathLike, default_name: str = 'Default') -> Palette:
    """Load a palette, falling back to the default palette if loading fails."""
    try:
        return load_palette(path)
    except PaletteError as e:
        logger.warning(f'Could not load palette {os.fspath(path)}: {e}; using default palette')
        return make_default(default_name)
