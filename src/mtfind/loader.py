"""Load an input file into memory as an ordered list of lines"""

import logging
import os
import time

from mtfind.errors import FileLoadError
from mtfind.utils import CARRIAGE_RETURN, NEWLINE_SYMBOL

logger = logging.getLogger(__name__)

# latin-1 maps every byte to one character, so decoding never fails and
# character offsets equal byte offsets for ASCII input
FILE_ENCODING = 'latin-1'


def split_lines(text: str) -> list[str]:
    """
    Split text into lines without their terminators.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped too. A trailing
    terminator does not start a new line, so ``'a\\nb\\n'`` gives two lines
    and ``''`` gives none.
    """
    if not text:
        return []

    lines = text.split(NEWLINE_SYMBOL)
    if lines[-1] == '':
        lines.pop()

    return [line[:-1] if line.endswith(CARRIAGE_RETURN) else line for line in lines]


def validate_file(filepath: str) -> None:
    """Raise FileLoadError if ``filepath`` is not a readable regular file."""
    if not os.path.exists(filepath):
        raise FileLoadError(filepath, 'file not found')
    if os.path.isdir(filepath):
        raise FileLoadError(filepath, 'is a directory')
    if not os.access(filepath, os.R_OK):
        raise FileLoadError(filepath, 'permission denied')


def load_lines(filepath: str) -> list[str]:
    """
    Read the whole file and return its lines in file order.

    Line N of the file is ``lines[N - 1]``. The file is closed before
    returning.

    Raises:
        FileLoadError: If the file cannot be opened or read
    """
    validate_file(filepath)

    start_time = time.time()
    try:
        with open(filepath, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise FileLoadError(filepath, e.strerror or str(e)) from e

    lines = split_lines(data.decode(FILE_ENCODING))
    elapsed = time.time() - start_time

    logger.info(f'[LOADER] Read {len(data)} bytes, {len(lines)} lines from {filepath} in {elapsed:.3f}s')
    return lines
