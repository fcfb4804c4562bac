"""Prometheus metrics for search runs

Metrics live in a private registry so repeated searches in one process (and
tests) do not collide with the global default registry.
"""

import logging

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, write_to_textfile

logger = logging.getLogger(__name__)

registry = CollectorRegistry()

lines_scanned = Counter(
    'mtfind_lines_scanned_total',
    'Total number of lines scanned by workers',
    registry=registry,
)
matches_found = Counter(
    'mtfind_matches_found_total',
    'Total number of mask occurrences found',
    registry=registry,
)
worker_tasks_completed = Counter(
    'mtfind_worker_tasks_completed_total',
    'Worker tasks that finished successfully',
    registry=registry,
)
worker_tasks_failed = Counter(
    'mtfind_worker_tasks_failed_total',
    'Worker tasks that raised',
    registry=registry,
)
active_workers = Gauge(
    'mtfind_active_workers',
    'Workers currently scanning',
    registry=registry,
)
search_duration_seconds = Histogram(
    'mtfind_search_duration_seconds',
    'Time spent scanning and merging one file',
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 30.0, 60.0),
    registry=registry,
)
partitions_created = Histogram(
    'mtfind_partitions_created',
    'Number of non-empty partitions per search',
    buckets=(1, 2, 4, 8, 16, 32, 64, 128),
    registry=registry,
)


def write_metrics(path: str) -> None:
    """Write the current metric values to ``path`` in Prometheus text format."""
    write_to_textfile(path, registry)
    logger.info(f'[METRICS] Wrote metrics to {path}')
