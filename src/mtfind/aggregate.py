"""Merge per-worker match buffers back into file order"""

import logging

from mtfind.models import MatchResult

logger = logging.getLogger(__name__)


def check_non_overlapping(matches: list[MatchResult]) -> None:
    """
    Verify that matches on the same line never overlap.

    Raises:
        RuntimeError: On the first pair of overlapping matches
    """
    for prev, cur in zip(matches, matches[1:]):
        if prev.line_number == cur.line_number and cur.position < prev.end:
            raise RuntimeError(
                f'Overlapping matches on line {cur.line_number}: positions {prev.position} and {cur.position}'
            )


def merge_results(per_worker: list[list[MatchResult]]) -> list[MatchResult]:
    """
    Combine worker buffers into one list ordered by (line_number, position).

    Buffers must be given in worker-index order. Workers own disjoint,
    ascending line ranges, so concatenation is already ordered; the stable
    sort afterwards only guards against a caller passing them out of order.

    Raises:
        RuntimeError: If two matches on one line overlap
    """
    merged = []
    for buffer in per_worker:
        merged.extend(buffer)
    merged.sort(key=lambda m: (m.line_number, m.position))

    check_non_overlapping(merged)

    logger.debug(f'[AGGREGATE] Merged {len(per_worker)} buffers into {len(merged)} matches')
    return merged
