"""
Command parser for the toyrobot interpreter.

Turns a raw text line into a typed command. Expected failures are returned
as values: every parse yields a ``(command, error)`` pair where exactly one
side is set.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from toyrobot.types import (
    AutoReport,
    Command,
    Empty,
    Exit,
    Heading,
    Move,
    Place,
    Pose,
    Report,
    Reset,
    Turn,
    TurnCommand,
)
from toyrobot.utils.errors import PlaceSyntaxError

logger = logging.getLogger(__name__)

ParseResult = tuple[Command | None, str | None]

# Factory signature: takes the upper-cased arguments after the keyword
CommandFactory = Callable[[list[str]], ParseResult]

# Registry for command factories
_REGISTRY: dict[str, CommandFactory] = {}

INTEGER_PATTERN = re.compile(r"[+-]?\d+")

INVALID_COMMAND = "Invalid command"
INVALID_AUTOREPORT = "Invalid AUTOREPORT command"


def register_command(name: str) -> Callable[[CommandFactory], CommandFactory]:
    """Register a factory for a command keyword."""

    def decorator(factory: CommandFactory) -> CommandFactory:
        _REGISTRY[name.upper()] = factory
        return factory

    return decorator


def get_registry() -> dict[str, CommandFactory]:
    """Access the current registry (read-only)."""
    return dict(_REGISTRY)


def _parse_int(text: str) -> int:
    if not INTEGER_PATTERN.fullmatch(text.strip()):
        raise PlaceSyntaxError(f"invalid integer '{text}'")
    try:
        return int(text)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit
        raise PlaceSyntaxError(f"invalid integer '{text}'") from None


def parse_place_args(arg: str) -> Pose:
    """
    Parse the ``X,Y,F`` argument of PLACE.

    Only the lower bound is checked here; the upper bound depends on the
    table and is enforced by the interpreter.

    Raises:
        PlaceSyntaxError: On any malformed field
    """
    fields = arg.split(",")
    if len(fields) != 3:
        raise PlaceSyntaxError("incorrect syntax")

    x = _parse_int(fields[0])
    y = _parse_int(fields[1])
    if x < 0 or y < 0:
        raise PlaceSyntaxError("Invalid position")

    try:
        heading = Heading[fields[2].strip()]
    except KeyError:
        raise PlaceSyntaxError("Invalid direction") from None

    return Pose(x, y, heading)


@register_command("PLACE")
def _factory_place(args: list[str]) -> ParseResult:
    if not args:
        return None, str(PlaceSyntaxError("incorrect syntax"))
    try:
        return Place(parse_place_args(args[0])), None
    except PlaceSyntaxError as e:
        return None, str(e)


@register_command("MOVE")
def _factory_move(args: list[str]) -> ParseResult:
    return Move(), None


@register_command("LEFT")
def _factory_left(args: list[str]) -> ParseResult:
    return TurnCommand(Turn.LEFT), None


@register_command("RIGHT")
def _factory_right(args: list[str]) -> ParseResult:
    return TurnCommand(Turn.RIGHT), None


@register_command("REPORT")
def _factory_report(args: list[str]) -> ParseResult:
    return Report(), None


@register_command("AUTOREPORT")
def _factory_autoreport(args: list[str]) -> ParseResult:
    # AUTOREPORT ON|OFF, nothing more
    if len(args) != 1:
        return None, INVALID_AUTOREPORT
    if args[0] == "ON":
        return AutoReport(True), None
    if args[0] == "OFF":
        return AutoReport(False), None
    return None, INVALID_AUTOREPORT


@register_command("EXIT")
def _factory_exit(args: list[str]) -> ParseResult:
    return Exit(), None


@register_command("RESET")
def _factory_reset(args: list[str]) -> ParseResult:
    return Reset(), None


def parse_line(line: str | None) -> ParseResult:
    """
    Parse a single command line.

    Args:
        line: Raw input line; case and surrounding whitespace are ignored

    Returns:
        (command, None) on success, (None, error_message) otherwise
    """
    if line is None or not line.strip():
        return Empty(), None

    parts = line.strip().upper().split()
    name, args = parts[0], parts[1:]
    factory = _REGISTRY.get(name)
    if factory is None:
        logger.debug("Unknown command keyword %r", name)
        return None, INVALID_COMMAND

    try:
        return factory(args)
    except Exception as e:
        # Factories report failures as values; anything else is a bug in the factory
        logger.exception("Factory error while parsing '%s'", name)
        return None, f"{INVALID_COMMAND}: {e}"


def parse_program(lines: str | Iterable[str]) -> tuple[list[Command], list[str]]:
    """
    Parse a complete command script without executing it.

    Args:
        lines: Either a string with newlines or an iterable of lines

    Returns:
        Tuple of (parsed commands, errors prefixed with their line number)
    """
    if isinstance(lines, str):
        lines = lines.split("\n")

    commands: list[Command] = []
    errors: list[str] = []
    for line_num, line in enumerate(lines, 1):
        command, error = parse_line(line.rstrip("\r\n"))
        if error is not None:
            errors.append(f"Line {line_num}: {error}")
        elif command is not None:
            commands.append(command)
    return commands, errors
