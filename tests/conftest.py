"""
Pytest configuration and shared fixtures for toyrobot tests.

Provides path setup, an output-capturing context factory and a runner for
scripted command sessions.
"""

import os
import sys
from typing import Callable

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from toyrobot.interpreter import Context, lines_source, process_commands
from toyrobot.types import Tabletop


@pytest.fixture
def make_ctx() -> Callable[..., tuple[Context, list[str]]]:
    """
    Build a Context over a list of lines that records everything written
    to the sink.
    """

    def factory(lines=(), **kwargs) -> tuple[Context, list[str]]:
        output: list[str] = []
        ctx = Context(lines_source(lines), output.append, **kwargs)
        return ctx, output

    return factory


@pytest.fixture
def run(make_ctx) -> Callable[..., tuple[Tabletop, list[str]]]:
    """Run a full session and return (final tabletop, output lines)."""

    def runner(lines, **kwargs) -> tuple[Tabletop, list[str]]:
        ctx, output = make_ctx(lines, **kwargs)
        return process_commands(ctx), output

    return runner
