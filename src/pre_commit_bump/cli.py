"""Command line interface for pre-commit-bump."""

import argparse
import asyncio
import logging
import pathlib
import sys
import typing

import pydantic

from pre_commit_bump import controller, errors, models, version

LOGGER = logging.getLogger(__name__)


def configure_logging(level: int) -> None:
    """Configure logging for the application.

    HTTP client libraries stay at WARNING unless debug logging is enabled.
    """
    logging.basicConfig(
        level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    if level > logging.DEBUG:
        for logger_name in ('httpcore', 'httpx'):
            logging.getLogger(logger_name).setLevel(logging.WARNING)


def _common_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        '-c',
        '--config',
        type=pathlib.Path,
        default=pathlib.Path('.pre-commit-config.yaml'),
        help='Path to the pre-commit configuration file '
        '(default: %(default)s)',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Enable debug logging'
    )
    parser.add_argument(
        '-a',
        '--allow',
        choices=[bump.value for bump in models.AllowedBump],
        default=models.AllowedBump.major.value,
        help='Largest version bump to allow (default: %(default)s)',
    )
    parser.add_argument(
        '--max-concurrency',
        type=int,
        default=10,
        help='Maximum number of concurrent tag requests '
        '(default: %(default)s)',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=30.0,
        help='HTTP request timeout in seconds (default: %(default)s)',
    )
    return parser


def parse_cli_args(
    argv: typing.Sequence[str] | None = None,
) -> argparse.Namespace:
    """Parse command line arguments."""
    common = _common_parser()
    parser = argparse.ArgumentParser(
        prog='pre-commit-bump',
        description='Check and update pre-commit hook revisions to the '
        'latest semantic version tag',
    )
    parser.add_argument(
        '--version', action='version', version=version.__version__
    )
    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser(
        'check',
        parents=[common],
        help='Report available updates without modifying anything',
    )
    update = subparsers.add_parser(
        'update',
        parents=[common],
        help='Write available updates to the configuration file',
    )
    update.add_argument(
        '-n',
        '--no-summary',
        action='store_true',
        help='Do not write the markdown summary',
    )
    update.add_argument(
        '-d',
        '--dry-run',
        action='store_true',
        help='Show the changes without writing any file',
    )
    update.add_argument(
        '--summary-path',
        type=pathlib.Path,
        default=pathlib.Path('summary.md'),
        help='Where to write the markdown summary (default: %(default)s)',
    )
    return parser.parse_args(argv)


async def run(configuration: models.Configuration, command: str) -> bool:
    bumper = controller.Bumper(configuration)
    match command:
        case 'check':
            return await bumper.check()
        case 'update':
            return await bumper.update()
        case _:
            raise ValueError(f'Unknown command: {command}')


def main(argv: typing.Sequence[str] | None = None) -> None:
    args = parse_cli_args(argv)
    try:
        configuration = models.Configuration.from_args(args)
    except pydantic.ValidationError as exc:
        configure_logging(logging.INFO)
        LOGGER.error('Invalid arguments: %s', exc)
        sys.exit(1)
    configure_logging(configuration.logging_level)

    LOGGER.info('pre-commit-bump v%s starting', version.__version__)
    try:
        success = asyncio.run(run(configuration, args.command))
    except errors.PreCommitBumpError as exc:
        LOGGER.error('%s', exc)
        sys.exit(1)
    except KeyboardInterrupt:
        LOGGER.info('Interrupted, exiting')
        sys.exit(130)
    sys.exit(0 if success else 1)
