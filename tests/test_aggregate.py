"""Tests for merging worker results and the plain report"""

import pytest

from mtfind import report
from mtfind.aggregate import check_non_overlapping, merge_results
from mtfind.models import MatchResult
from mtfind.report import format_report, iter_report_lines, write_report


class TestMergeResults:
    """Tests for merge_results()"""

    def test_concatenates_in_worker_order(self):
        per_worker = [
            [MatchResult(1, 1, 'ab'), MatchResult(1, 4, 'ab')],
            [],
            [MatchResult(5, 2, 'ab')],
        ]
        merged = merge_results(per_worker)
        assert merged == [MatchResult(1, 1, 'ab'), MatchResult(1, 4, 'ab'), MatchResult(5, 2, 'ab')]

    def test_restores_file_order_from_shuffled_buffers(self):
        per_worker = [
            [MatchResult(7, 1, 'x')],
            [MatchResult(2, 3, 'x'), MatchResult(3, 1, 'x')],
            [MatchResult(2, 1, 'x')],
        ]
        merged = merge_results(per_worker)
        assert [(m.line_number, m.position) for m in merged] == [(2, 1), (2, 3), (3, 1), (7, 1)]

    def test_no_workers_no_matches(self):
        assert merge_results([]) == []
        assert merge_results([[], []]) == []

    def test_overlapping_matches_are_a_defect(self):
        with pytest.raises(RuntimeError, match='Overlapping matches on line 1'):
            merge_results([[MatchResult(1, 1, 'abc')], [MatchResult(1, 2, 'bcd')]])

    def test_adjacent_matches_are_fine(self):
        check_non_overlapping([MatchResult(1, 1, 'ab'), MatchResult(1, 3, 'cd'), MatchResult(2, 1, 'ab')])


class TestReport:
    """Tests for the plain-text report"""

    def test_empty_report_has_count_only(self):
        assert format_report([]) == '0\n'

    def test_report_format(self):
        matches = [MatchResult(5, 5, 'bad'), MatchResult(6, 6, 'mad')]
        assert format_report(matches) == '2\n5 5 bad\n6 6 mad\n'

    def test_text_with_spaces_kept_verbatim(self):
        assert list(iter_report_lines([MatchResult(1, 2, ' b ')])) == ['1', '1 2  b ']

    def test_write_report_in_batches(self, monkeypatch):
        monkeypatch.setattr(report, 'WRITE_BATCH_LINES', 2)
        matches = [MatchResult(i, 1, 'x') for i in range(1, 6)]
        chunks = []
        write_report(matches, chunks.append)
        # 6 report lines in batches of 2
        assert len(chunks) == 3
        assert ''.join(chunks) == format_report(matches)
