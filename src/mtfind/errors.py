"""Exceptions raised by mtfind"""


class MtfindError(Exception):
    """Base class for all fatal mtfind errors."""


class InvalidMaskError(MtfindError, ValueError):
    """Mask is empty or contains a line terminator."""


class FileLoadError(MtfindError, OSError):
    """Input file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Cannot open file {path}: {reason}')
