"""
Type definitions for the toyrobot interpreter.

Defines the heading/turn enums, the immutable Pose and Tabletop values,
and the closed set of commands produced by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from toyrobot.config import TABLE_HEIGHT, TABLE_WIDTH


class Turn(Enum):
    """Rotation direction for LEFT/RIGHT."""
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Heading(Enum):
    """Cardinal direction the robot faces."""
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (dx, dy) for one MOVE in this heading."""
        return _DELTAS[self]

    def rotated(self, turn: Turn) -> Heading:
        # Members are declared clockwise
        order = list(Heading)
        step = 1 if turn is Turn.RIGHT else -1
        return order[(order.index(self) + step) % len(order)]


_DELTAS: dict[Heading, tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.SOUTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Pose:
    """Robot placement on the table"""

    x: int
    y: int
    heading: Heading

    def moved(self) -> Pose:
        dx, dy = self.heading.delta
        return replace(self, x=self.x + dx, y=self.y + dy)

    def turned(self, turn: Turn) -> Pose:
        return replace(self, heading=self.heading.rotated(turn))

    def __str__(self):
        return f"{self.x},{self.y},{self.heading.value}"


@dataclass(frozen=True)
class Tabletop:
    """
    Bounded grid plus the robot's optional pose.

    Valid coordinates are 0..width and 0..height inclusive, so the default
    4x4 describes a 5x5 table.
    """

    width: int = TABLE_WIDTH
    height: int = TABLE_HEIGHT
    pose: Pose | None = None

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Table dimensions must be >= 0, got {self.width}x{self.height}")

    def contains(self, pose: Pose) -> bool:
        return 0 <= pose.x <= self.width and 0 <= pose.y <= self.height

    def with_pose(self, pose: Pose | None) -> Tabletop:
        return replace(self, pose=pose)

    @property
    def is_placed(self) -> bool:
        return self.pose is not None


# ----- Commands -----

@dataclass(frozen=True)
class Place:
    pose: Pose


@dataclass(frozen=True)
class Move:
    pass


@dataclass(frozen=True)
class TurnCommand:
    turn: Turn


@dataclass(frozen=True)
class Report:
    pass


@dataclass(frozen=True)
class AutoReport:
    enabled: bool


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Reset:
    pass


Command = Union[Place, Move, TurnCommand, Report, AutoReport, Empty, Exit, Reset]
