"""Split a line sequence into contiguous per-worker ranges"""

import bisect
import itertools
import logging

import psutil

from mtfind.utils import get_int_env

logger = logging.getLogger(__name__)

BALANCE_LINES = 'lines'
BALANCE_BYTES = 'bytes'
BALANCE_MODES = (BALANCE_LINES, BALANCE_BYTES)


def get_worker_count(requested: int | None = None) -> int:
    """
    Resolve the number of parallel workers.

    Priority: explicit ``requested`` value, then MTFIND_WORKERS, then the
    number of logical CPUs. Never less than 1.
    """
    if requested is not None and requested > 0:
        return requested

    from_env = get_int_env('MTFIND_WORKERS')
    if from_env > 0:
        return from_env

    return max(1, psutil.cpu_count(logical=True) or 1)


def partition_lines(line_count: int, workers: int) -> list[range]:
    """
    Split ``[0, line_count)`` into ``workers`` equal contiguous ranges.

    Chunk size is ``ceil(line_count / workers)``, the last range is clipped
    to ``line_count`` and ranges past the end are empty.

    Returns:
        Exactly ``workers`` ranges, in ascending order
    """
    if workers < 1:
        raise ValueError(f'workers must be >= 1, got {workers}')

    chunk = -(-line_count // workers)
    return [range(min(i * chunk, line_count), min((i + 1) * chunk, line_count)) for i in range(workers)]


def partition_by_size(line_lengths: list[int], workers: int) -> list[range]:
    """
    Split lines into ``workers`` contiguous ranges of similar character volume.

    Each line weighs its length plus one for the terminator, so runs of empty
    lines still count. Boundary ``k`` is placed at the first line where the
    cumulative weight reaches ``k / workers`` of the total.

    Returns:
        Exactly ``workers`` ranges covering ``[0, len(line_lengths))``
    """
    if workers < 1:
        raise ValueError(f'workers must be >= 1, got {workers}')

    line_count = len(line_lengths)
    prefix = [0, *itertools.accumulate(length + 1 for length in line_lengths)]
    total = prefix[-1]

    bounds = [0]
    for k in range(1, workers):
        target = total * k / workers
        boundary = min(max(bisect.bisect_left(prefix, target), bounds[-1]), line_count)
        bounds.append(boundary)
    bounds.append(line_count)

    return [range(bounds[i], bounds[i + 1]) for i in range(workers)]


def make_partitions(lines: list[str], workers: int, balance: str = BALANCE_LINES) -> list[range]:
    """Partition ``lines`` using the selected balancing mode."""
    if balance == BALANCE_LINES:
        partitions = partition_lines(len(lines), workers)
    elif balance == BALANCE_BYTES:
        partitions = partition_by_size([len(line) for line in lines], workers)
    else:
        raise ValueError(f'Unknown balance mode {balance!r}, expected one of {BALANCE_MODES}')

    logger.debug(
        f'[PARTITION] {len(lines)} lines into {workers} partitions ({balance}): '
        f'{[(r.start, r.stop) for r in partitions]}'
    )
    return partitions
