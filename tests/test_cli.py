"""Tests for the mtfind CLI command"""

import json
import os
import sys
import tempfile

import pytest
from click.testing import CliRunner

from mtfind.cli.main import main, mtfind_command


class TestMtfindCommand:
    """Test mtfind CLI command."""

    def setup_method(self):
        """Create test files before each test."""
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()

        self.test_file = os.path.join(self.temp_dir, 'input.txt')
        with open(self.test_file, 'w') as f:
            f.writelines(
                [
                    "I've paid my dues\n",
                    'Time after time.\n',
                    "I've done my sentence\n",
                    'But committed no crime.\n',
                    'And bad mistakes ?\n',
                    "I've made a few.\n",
                    "I've had my share of sand kicked in my face\n",
                    "But I've come through.\n",
                ]
            )

        self.empty_file = os.path.join(self.temp_dir, 'empty.txt')
        open(self.empty_file, 'w').close()

    def test_plain_report(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad'])
        assert result.exit_code == 0
        assert result.output == '3\n5 5 bad\n6 6 mad\n7 6 had\n'

    def test_no_matches_prints_zero(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, 'zzz'])
        assert result.exit_code == 0
        assert result.output == '0\n'

    def test_empty_file(self):
        result = self.runner.invoke(mtfind_command, [self.empty_file, '?'])
        assert result.exit_code == 0
        assert result.output == '0\n'

    @pytest.mark.parametrize('workers', ['1', '2', '5'])
    def test_worker_count_does_not_change_output(self, workers):
        result = self.runner.invoke(mtfind_command, [self.test_file, "I'?e", '--workers', workers])
        assert result.exit_code == 0
        assert result.output == '5\n1 1 I\'ve\n3 1 I\'ve\n6 1 I\'ve\n7 1 I\'ve\n8 5 I\'ve\n'

    def test_balance_bytes(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad', '--balance', 'bytes', '-w', '3'])
        assert result.exit_code == 0
        assert result.output == '3\n5 5 bad\n6 6 mad\n7 6 had\n'

    def test_question_mark_in_text_matched_by_wildcard(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, 's ?'])
        assert result.exit_code == 0
        assert result.output == '1\n5 16 s ?\n'

    def test_mask_starting_with_dash(self):
        path = os.path.join(self.temp_dir, 'dash.txt')
        with open(path, 'w') as f:
            f.write('a -x1 b -x2\n')
        result = self.runner.invoke(mtfind_command, [path, '--', '-x?'])
        assert result.exit_code == 0
        assert result.output == '2\n1 3 -x1\n1 9 -x2\n'

    def test_json_output(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad', '--json', '-w', '2'])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['total'] == 3
        assert data['workers'] == 2
        assert data['line_count'] == 8
        assert data['matches'][0] == {'line_number': 5, 'position': 5, 'text': 'bad'}

    def test_workers_from_environment(self, monkeypatch):
        monkeypatch.setenv('MTFIND_WORKERS', '3')
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad', '--json'])
        assert result.exit_code == 0
        assert json.loads(result.output)['workers'] == 3

    def test_summary_output(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad', '--summary', '--no-color'])
        assert result.exit_code == 0
        assert 'Mask: ?ad' in result.output
        assert 'Matches: 3' in result.output
        assert '5:5 bad' in result.output
        assert '\x1b[' not in result.output

    def test_metrics_file(self):
        metrics_path = os.path.join(self.temp_dir, 'metrics.prom')
        result = self.runner.invoke(mtfind_command, [self.test_file, '?ad', '--metrics-file', metrics_path])
        assert result.exit_code == 0
        with open(metrics_path) as f:
            content = f.read()
        assert 'mtfind_matches_found_total' in content
        assert 'mtfind_search_duration_seconds' in content

    def test_missing_file(self):
        result = self.runner.invoke(mtfind_command, [os.path.join(self.temp_dir, 'nope.txt'), 'abc'])
        assert result.exit_code == 1
        assert 'Error: Cannot open file' in result.output
        assert not result.output.startswith('0')

    def test_empty_mask(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, ''])
        assert result.exit_code == 1
        assert 'Mask cannot be empty' in result.output

    def test_mask_with_newline(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, 'a\nb'])
        assert result.exit_code == 1
        assert 'line terminator' in result.output

    def test_missing_argument_is_usage_error(self):
        result = self.runner.invoke(mtfind_command, [self.test_file])
        assert result.exit_code == 1
        assert 'Usage' in result.output

    def test_extra_argument_is_usage_error(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, 'abc', 'extra'])
        assert result.exit_code == 1
        assert 'Usage' in result.output

    def test_invalid_worker_count(self):
        result = self.runner.invoke(mtfind_command, [self.test_file, 'abc', '--workers', '0'])
        assert result.exit_code == 1

    def test_version(self):
        result = self.runner.invoke(mtfind_command, ['--version'])
        assert result.exit_code == 0
        assert 'mtfind' in result.output


class TestMain:
    """Tests for the console entry point"""

    def test_no_arguments_exits_with_one(self, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['mtfind'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
