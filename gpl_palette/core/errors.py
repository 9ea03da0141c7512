"""Exceptions raised by the palette model and the .gpl codec."""


class PaletteError(Exception):
    """Base class for recoverable palette load/save failures."""


class PaletteIOError(PaletteError):
    """The underlying file or stream could not be opened, read, or written."""


class InvalidHeaderError(PaletteError):
    """First line of the stream is not exactly 'GIMP Palette'."""


class MissingNameError(PaletteError):
    """Second line of the stream does not start with 'Name:'."""


class PreconditionViolation(IndexError):
    """An editing operation was called with an out-of-range index.

    This is a programming error, so it is not a PaletteError.
    """
