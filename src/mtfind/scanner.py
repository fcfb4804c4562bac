"""Per-line mask scanning

Matches are leftmost and non-overlapping: after a match at ``p`` the scan
resumes at ``p + len(mask)``, otherwise at ``p + 1``.
"""

import logging
import threading
import time

from mtfind import metrics
from mtfind.mask import Mask
from mtfind.models import MatchResult

logger = logging.getLogger(__name__)


def scan_line(mask: Mask, line: str, line_number: int) -> list[MatchResult]:
    """
    Find all non-overlapping mask occurrences in one line.

    Args:
        mask: Compiled mask
        line: Line content without terminator
        line_number: 1-based number of the line

    Returns:
        Matches ordered by position
    """
    length = len(mask)
    limit = len(line) - length
    results = []
    if limit < 0:
        return results

    if mask.is_literal:
        pos = line.find(mask.source, 0)
        while pos >= 0:
            results.append(MatchResult(line_number, pos + 1, line[pos : pos + length]))
            pos = line.find(mask.source, pos + length)
        return results

    literals = mask.literal_cells
    # Any match at p must have the first literal at p + anchor_offset, so
    # str.find can jump over positions that cannot match
    anchor_offset, anchor_char = literals[0] if literals else (0, None)

    pos = 0
    while pos <= limit:
        if anchor_char is not None:
            found = line.find(anchor_char, pos + anchor_offset, limit + anchor_offset + 1)
            if found < 0:
                break
            pos = found - anchor_offset

        if mask.matches_at(line, pos):
            results.append(MatchResult(line_number, pos + 1, line[pos : pos + length]))
            pos += length
        else:
            pos += 1

    return results


def scan_range(mask: Mask, lines: list[str], line_range: range, worker_index: int = 0) -> list[MatchResult]:
    """
    Scan a contiguous range of lines into a worker-local buffer.

    Args:
        mask: Compiled mask
        lines: All lines of the file (shared, read-only)
        line_range: 0-based indices of the lines this worker owns
        worker_index: Index used for logging only

    Returns:
        Matches ordered by (line_number, position)
    """
    start_time = time.time()
    thread_id = threading.current_thread().name

    metrics.active_workers.inc()
    try:
        local_results = []
        for index in line_range:
            local_results.extend(scan_line(mask, lines[index], index + 1))
    except Exception:
        metrics.worker_tasks_failed.inc()
        raise
    finally:
        metrics.active_workers.dec()

    metrics.worker_tasks_completed.inc()
    metrics.lines_scanned.inc(len(line_range))
    metrics.matches_found.inc(len(local_results))

    elapsed = time.time() - start_time
    logger.debug(
        f'[WORKER {worker_index} {thread_id}] lines {line_range.start + 1}-{line_range.stop}: '
        f'{len(local_results)} matches in {elapsed:.3f}s'
    )
    return local_results
