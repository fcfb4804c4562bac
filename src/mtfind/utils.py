"""Shared constants and environment helpers"""

import logging
import os

NEWLINE_SYMBOL = '\n'
CARRIAGE_RETURN = '\r'
LINE_TERMINATORS = (NEWLINE_SYMBOL, CARRIAGE_RETURN)

DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_int_env(name: str, default: int = 0) -> int:
    """Read an integer from the environment.

    Missing, empty or non-numeric values fall back to ``default``.
    """
    value = os.environ.get(name, '').strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(f'Invalid {name} value {value!r}, using default {default}')
        return default


def get_log_level() -> int:
    """Get logging level from MTFIND_LOG_LEVEL (default: WARNING)."""
    level_name = os.getenv('MTFIND_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)
