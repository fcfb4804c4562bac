"""Wildcard mask compilation

A mask is a fixed-length pattern where the wildcard symbol (``?`` by default)
matches any single character and every other character matches itself. No
other character is special, so masks like ``a.b`` or ``(x)`` are searched
for verbatim.
"""

import logging
from dataclasses import dataclass

from mtfind.errors import InvalidMaskError
from mtfind.utils import LINE_TERMINATORS

logger = logging.getLogger(__name__)

DEFAULT_WILDCARD = '?'
MAX_MASK_LENGTH = 1000


@dataclass(frozen=True)
class Mask:
    """Compiled mask.

    Attributes:
        source: The mask string as given by the user
        cells: One entry per mask position, ``None`` for a wildcard,
               otherwise the literal character that must be present
    """

    source: str
    cells: tuple[str | None, ...]

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def literal_cells(self) -> tuple[tuple[int, str], ...]:
        """(offset, char) pairs for the non-wildcard positions."""
        return tuple((i, c) for i, c in enumerate(self.cells) if c is not None)

    @property
    def is_literal(self) -> bool:
        return all(c is not None for c in self.cells)

    def matches_at(self, line: str, pos: int) -> bool:
        """Test the mask against ``line`` starting at 0-based ``pos``."""
        if pos < 0 or pos + len(self.cells) > len(line):
            return False
        for offset, char in enumerate(self.cells):
            if char is not None and line[pos + offset] != char:
                return False
        return True


def compile_mask(mask: str, wildcard: str = DEFAULT_WILDCARD) -> Mask:
    """
    Compile a mask string into a position-wise matcher.

    Args:
        mask: Raw mask string
        wildcard: Single character that matches any character

    Returns:
        Compiled Mask

    Raises:
        InvalidMaskError: If the mask is empty, contains a line terminator,
                          or the wildcard is not exactly one character
    """
    if len(wildcard) != 1:
        raise InvalidMaskError(f'Wildcard must be a single character, got {wildcard!r}')
    if wildcard in LINE_TERMINATORS:
        raise InvalidMaskError('Wildcard cannot be a line terminator')
    if not mask:
        raise InvalidMaskError('Mask cannot be empty')
    if any(t in mask for t in LINE_TERMINATORS):
        raise InvalidMaskError('Mask cannot contain a line terminator')

    if len(mask) > MAX_MASK_LENGTH:
        logger.warning(f'Mask is {len(mask)} characters long, longer than the supported {MAX_MASK_LENGTH}')

    cells = tuple(None if ch == wildcard else ch for ch in mask)
    compiled = Mask(source=mask, cells=cells)
    logger.debug(f'[MASK] Compiled {mask!r}: length={len(compiled)}, literals={len(compiled.literal_cells)}')
    return compiled
