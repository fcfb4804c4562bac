"""CLI entry point for mtfind"""

import logging
import sys

import click

from mtfind.__version__ import __version__
from mtfind.errors import MtfindError
from mtfind.finder import find_in_file
from mtfind.mask import DEFAULT_WILDCARD
from mtfind.metrics import write_metrics
from mtfind.models import SearchResponse
from mtfind.partition import BALANCE_LINES, BALANCE_MODES
from mtfind.report import write_report
from mtfind.utils import LOG_FORMAT, get_log_level

logger = logging.getLogger(__name__)


class UsageExitCommand(click.Command):
    """Click command that exits with status 1 on usage errors (click uses 2)"""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(cls=UsageExitCommand, context_settings={'ignore_unknown_options': True})
@click.argument('filepath', metavar='FILE', type=str)
@click.argument('mask', type=str)
@click.option(
    '--workers',
    '-w',
    type=click.IntRange(min=1),
    default=None,
    help='Number of parallel workers (default: $MTFIND_WORKERS or CPU count)',
)
@click.option(
    '--balance',
    type=click.Choice(BALANCE_MODES),
    default=BALANCE_LINES,
    show_default=True,
    help='Split work by equal line counts or by equal text volume',
)
@click.option(
    '--wildcard',
    type=str,
    default=DEFAULT_WILDCARD,
    show_default=True,
    help='Character that matches any single character',
)
@click.option('--json', 'output_json', is_flag=True, help='Output as JSON')
@click.option('--summary', is_flag=True, help='Human-readable output with a summary header')
@click.option('--no-color', is_flag=True, help='Disable colored output (with --summary)')
@click.option(
    '--metrics-file',
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help='Write Prometheus metrics to this file after the search',
)
@click.version_option(version=__version__, prog_name='mtfind')
def mtfind_command(filepath, mask, workers, balance, wildcard, output_json, summary, no_color, metrics_file):
    """
    Find all non-overlapping occurrences of MASK in FILE.

    MASK is matched literally except for the wildcard character ("?" by
    default), which matches any single character. Matches never span lines
    and never overlap; the leftmost candidate wins.

    \b
    Output:
      <number of matches>
      <line> <position> <matched text>
      ...

    \b
    Examples:
      mtfind input.txt "?ad"
      mtfind input.txt "n?ver" --workers 4
      mtfind big.log "ERR??" --balance bytes --json
      mtfind input.txt -- "-x?"
    """
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)

    try:
        result = find_in_file(filepath, mask, workers=workers, balance=balance, wildcard=wildcard)
    except MtfindError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if output_json:
        response = SearchResponse.from_result(filepath, mask, result)
        click.echo(response.model_dump_json(indent=2))
    elif summary:
        response = SearchResponse.from_result(filepath, mask, result)
        colorize = not no_color and sys.stdout.isatty()
        click.echo(response.to_cli(colorize=colorize))
    else:
        write_report(result.matches, lambda chunk: click.echo(chunk, nl=False))

    if metrics_file:
        try:
            write_metrics(metrics_file)
        except OSError as e:
            click.echo(f'Error: cannot write metrics to {metrics_file}: {e}', err=True)
            sys.exit(1)


def main():
    """Entry point for the CLI"""
    mtfind_command()


if __name__ == '__main__':
    main()
