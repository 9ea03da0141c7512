"""Shared types for gpl-tool: Color and Command."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def _saturate(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB triple. No alpha channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for part in (self.red, self.green, self.blue):
            if not 0 <= part <= 255:
                raise ValueError(f'colour component out of range 0-255: {part}')

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue))

    @classmethod
    def clamped(cls, red: int, green: int, blue: int) -> Color:
        """Build a Color, saturating each component into [0, 255]."""
        return cls(_saturate(red), _saturate(green), _saturate(blue))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse '#rrggbb', '#rgb' or 'rrggbb'."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f'not a hex colour: {text!r}')
        digits = m.group(1)
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse a command-line colour: '#rrggbb', '#rgb' or 'r,g,b'."""
        if ',' in text:
            parts = [p.strip() for p in text.split(',')]
            if len(parts) != 3 or not all(p.isdigit() for p in parts):
                raise ValueError(f'not an r,g,b colour: {text!r}')
            return cls(int(parts[0]), int(parts[1]), int(parts[2]))
        return cls.from_hex(text)

    @property
    def hex(self) -> str:
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'


class Command:
    """A self-registering gpl-tool subcommand.

    Usage in a command module:

        command = Command(name='show', help='Print palette contents')

        @command.run
        def run(args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self.module: str | None = None
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        self.module = fn.__module__
        return fn

    def execute(self, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args)
