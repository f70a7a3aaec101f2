"""
Toyrobot Python Package

A line-oriented command interpreter for a single robot on a bounded square
table.

Key components:
- parse_line: Parse one command line into a typed command or an error
- Context: Session state (line source, line sink, auto-report flag, tabletop)
- process_command: Apply one command to the tabletop
- process_commands: Read-eval-report loop until EXIT or end of input
- run_lines: Convenience runner over a list of lines
"""

from ._version import __version__
from .interpreter import (
    END_OF_INPUT,
    Context,
    lines_source,
    process_command,
    process_commands,
    run_lines,
    stream_sink,
    stream_source,
)
from .parser import parse_line, parse_program
from .types import Heading, Pose, Tabletop, Turn

__all__ = [
    "__version__",
    "END_OF_INPUT",
    "Context",
    "Heading",
    "Pose",
    "Tabletop",
    "Turn",
    "lines_source",
    "parse_line",
    "parse_program",
    "process_command",
    "process_commands",
    "run_lines",
    "stream_sink",
    "stream_source",
]
