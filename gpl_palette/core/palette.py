"""In-memory palette model: an ordered, named list of RGB colours.

The `modified` flag tracks unsaved changes. It is cleared by the
constructor and by the codec after a successful parse or save, and set
by every editing operation, including set_name.
"""

from __future__ import annotations

from collections.abc import Iterator

from gpl_palette.core.errors import PreconditionViolation
from gpl_palette.core.types import Color


def default_filename(name: str) -> str:
    return f'{name}.gpl'


class Palette:
    """An ordered, mutable sequence of Colors with a name and a filename."""

    def __init__(self, name: str, filename: str | None = None):
        if not name or not name.strip():
            raise ValueError('palette name must not be blank')
        self._name = name
        self._filename = filename or default_filename(name)
        self._colors: list[Color] = []
        self._modified = False

    def __repr__(self) -> str:
        return f'Palette(name={self._name!r}, filename={self._filename!r}, count={len(self._colors)})'

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self.color(index)

    @property
    def name(self) -> str:
        return self._name

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def colors(self) -> tuple[Color, ...]:
        """Snapshot of the current colours."""
        return tuple(self._colors)

    def count(self) -> int:
        return len(self._colors)

    def color(self, index: int) -> Color:
        """Return the colour at index. Requires 0 <= index < count()."""
        self._check_index(index, len(self._colors))
        return self._colors[index]

    def set_color(self, index: int, color: Color) -> None:
        """Replace the colour at index. Requires 0 <= index < count()."""
        self._check_index(index, len(self._colors))
        self._colors[index] = color
        self._modified = True

    def insert_color(self, index: int, color: Color) -> None:
        """Insert color before index; later colours shift right.

        index == count() appends. Requires 0 <= index <= count().
        """
        self._check_index(index, len(self._colors) + 1)
        self._colors.insert(index, color)
        self._modified = True

    def append_color(self, color: Color) -> None:
        self.insert_color(len(self._colors), color)

    def remove_color(self, index: int) -> None:
        """Remove the colour at index; later colours shift left."""
        self._check_index(index, len(self._colors))
        del self._colors[index]
        self._modified = True

    def set_name(self, name: str) -> None:
        """Rename the palette. The filename is regenerated as '<name>.gpl'.

        The name is not validated as a path; callers sanitize it first.
        """
        if not name or not name.strip():
            raise ValueError('palette name must not be blank')
        self._name = name
        self._filename = default_filename(name)
        self._modified = True

    def mark_saved(self) -> None:
        """Clear the modified flag after a successful load or save."""
        self._modified = False

    @staticmethod
    def _check_index(index: int, limit: int) -> None:
        # Negative indices are rejected rather than wrapping like a list
        if not 0 <= index < limit:
            raise PreconditionViolation(f'palette index {index} out of range [0, {limit})')
