#!/usr/bin/env python3
"""
escapehtml - HTML-escape every file under a path

Prints each file's escaped content under a banner, or writes it to
<dest_dir>/<name>.txt when a destination directory is given.

Usage:
    escapehtml page.html
    escapehtml site/ escaped/
    escapehtml site/ escaped/ --fail-fast
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__
from .config import ConfigManager
from .errors import EscapeHtmlError, error_message
from .escaper import Escaper
from .validate import Arguments, USAGE_ARGS, usage, validate

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """The command line could not be parsed."""


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser(prog: Optional[str] = None) -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        usage=f"%(prog)s {USAGE_ARGS} [options]",
        description='Escape the HTML entities in a file or in every file of a directory tree.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s page.html
  %(prog)s site/ escaped/
  %(prog)s site/ escaped/ --config escapehtml.yaml
"""
    )
    parser.add_argument('paths', nargs='*', metavar='path',
                        help='Source file or directory, then an optional destination directory')
    parser.add_argument('-c', '--config', help='Path to configuration file (default: auto-discover escapehtml.yaml)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log skipped files and config discovery')
    parser.add_argument('--fail-fast', action='store_true',
                        help='Stop with exit status 1 at the first file that cannot be read or written')
    parser.add_argument('-q', '--quiet-skips', action='store_true',
                        help='Do not print the summary of skipped files')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def run(argv: Sequence[str], prog: Optional[str] = None) -> int:
    """
    Run the tool and return the process exit status.

    Args:
        argv: Arguments after the program name
        prog: Program name shown in the usage line (default: from sys.argv[0])

    Returns:
        0 on success (skipped files included), 1 on invalid arguments or,
        with --fail-fast, on the first failing file
    """
    parser = build_parser(prog)
    try:
        args, extras = parser.parse_known_intermixed_args(list(argv))
    except UsageError as e:
        logger.debug("Invalid command line: %s", e)
        print(usage(parser.prog))
        return 1
    setup_logging(args.verbose)

    if extras:
        logger.debug("Unrecognized arguments: %s", ' '.join(extras))
        print(usage(parser.prog))
        return 1

    paths = args.paths or []
    valid, error = validate(paths)
    if not valid:
        if error is not None:
            print(error)
        else:
            print(usage(parser.prog))
        return 1

    config = ConfigManager()
    try:
        config.load_config(args.config)
    except FileNotFoundError as e:
        print(error_message(str(e)))
        return 1
    config.update_from_args(args)

    arguments = Arguments.from_args(paths)
    try:
        escaper = Escaper(arguments.destination, config=config)
    except LookupError as e:
        print(error_message(str(e)))
        return 1

    try:
        report = escaper.run(arguments.source)
    except EscapeHtmlError as e:
        print(e)
        return 1

    if config.get('errors.report_skipped', True):
        for line in report.summary_lines(config.get_int('errors.max_reported', 10)):
            print(line, file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    sys.exit(run(sys.argv[1:] if argv is None else argv))


if __name__ == '__main__':
    main()
