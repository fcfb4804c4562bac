"""Plain-text report of search results

Format::

    <total_match_count>
    <line_number> <position> <matched_text>
    ...
"""

from collections.abc import Callable, Iterator

from mtfind.models import MatchResult

# Lines per write when streaming large reports
WRITE_BATCH_LINES = 10000


def format_match(match: MatchResult) -> str:
    return f'{match.line_number} {match.position} {match.text}'


def iter_report_lines(matches: list[MatchResult]) -> Iterator[str]:
    """Yield the count line followed by one line per match."""
    yield str(len(matches))
    for match in matches:
        yield format_match(match)


def format_report(matches: list[MatchResult]) -> str:
    return '\n'.join(iter_report_lines(matches)) + '\n'


def write_report(matches: list[MatchResult], write: Callable[[str], object]) -> None:
    """
    Stream the report through ``write`` in batches.

    Args:
        matches: Matches in file order
        write: Called with chunks of text, each ending with a newline
    """
    batch = []
    for line in iter_report_lines(matches):
        batch.append(line)
        if len(batch) >= WRITE_BATCH_LINES:
            write('\n'.join(batch) + '\n')
            batch = []
    if batch:
        write('\n'.join(batch) + '\n')
