"""Command-line interface for hmm."""


import argparse
import logging
import sys
from typing import List

from terminaltables import AsciiTable

from hmm.api import Hmm
from hmm.errors import Error
from hmm.models import Mode, ToolStatus

logger = logging.getLogger(__name__)


def _log_level(verbose: int, quiet: int) -> int:
    levels = [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL + 1]
    index = min(max(1 - verbose + quiet, 0), len(levels) - 1)
    return levels[index]


def _setup_logging(verbose: int, quiet: int) -> None:
    logging.basicConfig(
        level=_log_level(verbose, quiet),
        format='[%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _print_health(statuses: List[ToolStatus]) -> None:
    for status in statuses:
        logger.debug('health-check: %s - %s!', status.tool, status.describe())
    data = [('Tool', 'Status')] + [(s.tool, s.describe()) for s in statuses]
    print(AsciiTable(data).table)


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hmm',
        description='Keep your own man page style notes for shell commands.')
    parser.add_argument('cmd', nargs='?', help='Command to manage the custom man entry for.')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Interactively select from the available command entries.')
    parser.add_argument('-e', '--edit', action='store_true',
                        help='Edit the selected command\'s entry instead of viewing it.')
    parser.add_argument('--health-check', action='store_true',
                        help='Check whether the renderer, pager and editor programs are installed.')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log more detail. May be repeated.')
    parser.add_argument('-q', '--quiet', action='count', default=0,
                        help='Log less detail. May be repeated.')
    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    if args is None:
        args = sys.argv[1:]
    if not args:
        parser.print_help()
        return 1
    args = parser.parse_args(args)
    _setup_logging(args.verbose, args.quiet)

    try:
        hmm = Hmm.for_user()
        entries = hmm.load()
        logger.debug('before: %r', entries)
        mode = Mode.resolve(args.cmd, edit=args.edit, interactive=args.interactive,
                            health_check=args.health_check)
        result = hmm.dispatch(entries, mode, args.cmd)
        if mode == Mode.HEALTH_CHECK:
            _print_health(result)
        logger.debug('after: %r', entries)
    except (Error, OSError) as ex:
        logger.error('%s', ex)
        return 1
    return 0
