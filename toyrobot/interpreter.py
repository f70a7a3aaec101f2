"""
Toyrobot interpreter

Owns the tabletop state machine and drives the read-eval-report loop:
pulls a line from the line source, parses it, folds the command into the
tabletop and writes reports/errors to the line sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TextIO

from toyrobot.config import TABLE_HEIGHT, TABLE_WIDTH, TRACE
from toyrobot.parser import parse_line
from toyrobot.types import (
    AutoReport,
    Command,
    Empty,
    Exit,
    Move,
    Place,
    Pose,
    Report,
    Reset,
    Tabletop,
    TurnCommand,
)

logger = logging.getLogger(__name__)

# Returned by a line source once input is exhausted; "" is a blank line
END_OF_INPUT = None

LineSource = Callable[[], str | None]
LineSink = Callable[[str], None]


@dataclass
class Context:
    """
    Session context shared by every command of a run.

    ``auto_report`` is set by AUTOREPORT and read after every transition.
    RESET replaces ``tabletop`` but keeps the context itself.
    """
    reader: LineSource
    output: LineSink
    auto_report: bool = False
    width: int = TABLE_WIDTH
    height: int = TABLE_HEIGHT
    tabletop: Tabletop = field(init=False)

    def __post_init__(self):
        self.tabletop = self.new_tabletop()

    def new_tabletop(self) -> Tabletop:
        return Tabletop(self.width, self.height)


# ----- Line source / sink adapters -----

def lines_source(lines: Iterable[str]) -> LineSource:
    """Line source over an iterable of lines; END_OF_INPUT once exhausted."""
    it = iter(lines)

    def read() -> str | None:
        return next(it, END_OF_INPUT)

    return read


def stream_source(stream: TextIO) -> LineSource:
    """Line source over a text stream such as stdin or an open file."""

    def read() -> str | None:
        line = stream.readline()
        if line == "":
            return END_OF_INPUT
        return line.rstrip("\r\n")

    return read


def stream_sink(stream: TextIO) -> LineSink:
    def write(text: str) -> None:
        stream.write(text + "\n")
        stream.flush()

    return write


# ----- State machine -----

def report(ctx: Context, pose: Pose) -> None:
    ctx.output(str(pose))


def _candidate_pose(ctx: Context, tabletop: Tabletop, command: Command) -> Pose | None:
    """Pose the command asks for, before bounds validation."""
    pose = tabletop.pose

    if isinstance(command, (Exit, Reset)):
        raise TypeError(f"{type(command).__name__} is handled by the command loop")

    if isinstance(command, Place):
        return command.pose

    if isinstance(command, AutoReport):
        ctx.auto_report = command.enabled
        ctx.output(f"Autoreport set to {'true' if command.enabled else 'false'}")
        return pose

    if isinstance(command, Empty):
        return pose

    if not tabletop.is_placed:
        # MOVE/LEFT/RIGHT/REPORT before PLACE
        logger.debug("Ignoring %s: robot not placed", type(command).__name__)
        return None

    if isinstance(command, Move):
        return pose.moved()
    if isinstance(command, TurnCommand):
        return pose.turned(command.turn)
    if isinstance(command, Report):
        report(ctx, pose)
        return pose

    raise TypeError(f"Unsupported command for the tabletop: {command!r}")


def process_command(ctx: Context, tabletop: Tabletop, command: Command) -> Tabletop:
    """
    Apply one command to the tabletop.

    The candidate pose replaces the current one only when it lies on the
    table; otherwise the current pose is kept and nothing is written.

    Args:
        ctx: Session context (sink and auto-report flag)
        tabletop: Current tabletop
        command: Parsed command (not EXIT/RESET, which belong to the loop)

    Returns:
        The resulting tabletop
    """
    candidate = _candidate_pose(ctx, tabletop, command)

    new_pose = tabletop.pose
    if candidate is not None:
        if tabletop.contains(candidate):
            new_pose = candidate
        else:
            logger.debug("Rejected %s: %s is off the table", type(command).__name__, candidate)

    if ctx.auto_report and new_pose is not None:
        report(ctx, new_pose)

    return tabletop.with_pose(new_pose)


def process_commands(ctx: Context) -> Tabletop:
    """
    Run the read-eval-report loop until EXIT or end of input.

    Returns:
        The final tabletop
    """
    tabletop = ctx.tabletop
    logger.info("Session started on a %dx%d table", tabletop.width, tabletop.height)

    while True:
        line = ctx.reader()
        if line is END_OF_INPUT:
            logger.info("End of input")
            break
        logger.log(TRACE, "line_received %r", line)

        command, error = parse_line(line)
        if error is not None:
            logger.info("Parse error for %r: %s", line, error)
            ctx.output(error)
            continue

        if isinstance(command, Exit):
            logger.info("Exit requested")
            break
        if isinstance(command, Reset):
            logger.info("Resetting tabletop")
            tabletop = ctx.new_tabletop()
        else:
            tabletop = process_command(ctx, tabletop, command)
            logger.debug("Applied %s -> %s", command, tabletop.pose)
        ctx.tabletop = tabletop

    return tabletop


def run_lines(
    lines: Iterable[str],
    width: int = TABLE_WIDTH,
    height: int = TABLE_HEIGHT,
) -> tuple[Tabletop, list[str]]:
    """
    Run a sequence of command lines and collect the output.

    Returns:
        Tuple of (final tabletop, output lines)
    """
    output: list[str] = []
    ctx = Context(lines_source(lines), output.append, width=width, height=height)
    tabletop = process_commands(ctx)
    return tabletop, output
