"""
CLI entry point for the toyrobot command.

Reads commands from a script file or stdin and writes reports to stdout.
Logging goes to stderr.
"""

import argparse
import logging
import sys

import toyrobot.config as config
from toyrobot.config import TRACE
from toyrobot.interpreter import Context, process_commands, stream_sink, stream_source
from toyrobot.parser import parse_program
from toyrobot.utils.errors import ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toyrobot", description="Toy robot command interpreter")
    parser.add_argument('script', nargs='?', help='Command script to run (default: stdin)')
    parser.add_argument('--width', default=config.TABLE_WIDTH,
                        help=f'Largest x coordinate (default: {config.TABLE_WIDTH})')
    parser.add_argument('--height', default=config.TABLE_HEIGHT,
                        help=f'Largest y coordinate (default: {config.TABLE_HEIGHT})')
    parser.add_argument('--check', action='store_true',
                        help='Only parse the commands and print errors; exit 1 if any')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Enable quiet logging (ERROR level)')
    parser.add_argument('--log-level', choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set specific log level')
    return parser


def resolve_log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == 'TRACE':
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    if config.TRACE_ENABLED:
        return TRACE
    # getLevelName returns a string for unknown names
    level = logging.getLevelName(config.LOG_LEVEL_DEFAULT)
    return level if isinstance(level, int) else logging.WARNING


def _check(stream, out) -> int:
    _, errors = parse_program(stream)
    for error in errors:
        out.write(error + "\n")
    logger.info("Checked script: %d error(s)", len(errors))
    return 1 if errors else 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the interpreter."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
        stream=sys.stderr,
    )

    try:
        width = config.parse_dimension(args.width, "width")
        height = config.parse_dimension(args.height, "height")
    except ConfigError as e:
        logger.error(f"{e}")
        return 1

    try:
        stream = open(args.script) if args.script else sys.stdin
    except OSError as e:
        logger.error(f"Failed to open script: {e}")
        return 1

    try:
        if args.check:
            return _check(stream, sys.stdout)

        ctx = Context(stream_source(stream), stream_sink(sys.stdout), width=width, height=height)
        try:
            process_commands(ctx)
        except KeyboardInterrupt:
            logger.info("Interrupted")
    finally:
        if stream is not sys.stdin:
            stream.close()

    return 0


def main_entry():
    """Entry point for the toyrobot command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
