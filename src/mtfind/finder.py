"""Parallel mask search over a loaded file

The file is loaded and the mask compiled before any worker starts. Each
worker scans one contiguous partition into its own buffer and returns it;
buffers are merged only after every worker has finished, so there is no
shared mutable state while scanning.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from mtfind import metrics
from mtfind.aggregate import merge_results
from mtfind.loader import load_lines
from mtfind.mask import DEFAULT_WILDCARD, Mask, compile_mask
from mtfind.models import MatchResult, SearchResult
from mtfind.partition import BALANCE_LINES, get_worker_count, make_partitions
from mtfind.scanner import scan_range

logger = logging.getLogger(__name__)


def find_in_lines(
    lines: list[str],
    mask: Mask,
    workers: int | None = None,
    balance: str = BALANCE_LINES,
) -> SearchResult:
    """
    Search already loaded lines with a thread pool.

    Args:
        lines: File lines, line N at index N - 1
        mask: Compiled mask
        workers: Number of partitions (default: see get_worker_count)
        balance: 'lines' for equal line counts, 'bytes' for equal volume

    Returns:
        SearchResult with matches in file order
    """
    worker_count = get_worker_count(workers)
    partitions = make_partitions(lines, worker_count, balance)
    active = [(index, line_range) for index, line_range in enumerate(partitions) if line_range]

    start_time = time.time()
    metrics.partitions_created.observe(len(active))
    logger.info(f'[FINDER] Scanning {len(lines)} lines with {len(active)}/{worker_count} workers')

    buffers: dict[int, list[MatchResult]] = {}
    if active:
        with ThreadPoolExecutor(max_workers=len(active), thread_name_prefix='Worker') as executor:
            future_to_worker = {
                executor.submit(scan_range, mask, lines, line_range, index): index for index, line_range in active
            }

            for future in as_completed(future_to_worker):
                index = future_to_worker[future]
                try:
                    buffers[index] = future.result()
                except Exception as e:
                    logger.error(f'[FINDER] Worker {index} failed: {e}')
                    raise

    per_worker = [buffers.get(index, []) for index in range(worker_count)]
    matches = merge_results(per_worker)

    elapsed = time.time() - start_time
    metrics.search_duration_seconds.observe(elapsed)
    logger.info(f'[FINDER] Found {len(matches)} matches in {elapsed:.3f}s')

    return SearchResult(
        matches=matches,
        line_count=len(lines),
        workers=worker_count,
        worker_counts=[len(buffer) for buffer in per_worker],
        elapsed=elapsed,
    )


def find_in_file(
    filepath: str,
    mask: str,
    workers: int | None = None,
    balance: str = BALANCE_LINES,
    wildcard: str = DEFAULT_WILDCARD,
) -> SearchResult:
    """
    Load ``filepath`` and search it for ``mask``.

    The mask is compiled first so an invalid mask fails before any file I/O.

    Raises:
        InvalidMaskError: If the mask is invalid
        FileLoadError: If the file cannot be read
    """
    compiled = compile_mask(mask, wildcard)
    lines = load_lines(filepath)
    return find_in_lines(lines, compiled, workers, balance)
