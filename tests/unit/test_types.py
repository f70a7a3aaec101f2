import dataclasses

import pytest

from toyrobot.types import Heading, Pose, Tabletop, Turn


@pytest.mark.parametrize(
    "heading,left,right",
    [
        (Heading.NORTH, Heading.WEST, Heading.EAST),
        (Heading.WEST, Heading.SOUTH, Heading.NORTH),
        (Heading.SOUTH, Heading.EAST, Heading.WEST),
        (Heading.EAST, Heading.NORTH, Heading.SOUTH),
    ],
)
def test_heading_rotation(heading, left, right):
    assert heading.rotated(Turn.LEFT) is left
    assert heading.rotated(Turn.RIGHT) is right


@pytest.mark.parametrize("turn", list(Turn))
@pytest.mark.parametrize("heading", list(Heading))
def test_four_turns_is_identity(heading, turn):
    h = heading
    for _ in range(4):
        h = h.rotated(turn)
    assert h is heading


def test_pose_moves_along_heading():
    assert Pose(2, 2, Heading.NORTH).moved() == Pose(2, 3, Heading.NORTH)
    assert Pose(2, 2, Heading.SOUTH).moved() == Pose(2, 1, Heading.SOUTH)
    assert Pose(2, 2, Heading.EAST).moved() == Pose(3, 2, Heading.EAST)
    assert Pose(2, 2, Heading.WEST).moved() == Pose(1, 2, Heading.WEST)


def test_pose_is_immutable():
    pose = Pose(0, 0, Heading.NORTH)
    moved = pose.moved()
    assert pose == Pose(0, 0, Heading.NORTH)
    assert moved is not pose
    with pytest.raises(dataclasses.FrozenInstanceError):
        pose.x = 3  # type: ignore[misc]


def test_pose_str_is_report_format():
    assert str(Pose(0, 1, Heading.NORTH)) == "0,1,NORTH"
    assert str(Pose(4, 3, Heading.WEST)) == "4,3,WEST"


def test_tabletop_defaults():
    table = Tabletop()
    assert (table.width, table.height) == (4, 4)
    assert table.pose is None
    assert table.is_placed is False


def test_tabletop_bounds_are_inclusive():
    table = Tabletop(4, 4)
    assert table.contains(Pose(0, 0, Heading.NORTH))
    assert table.contains(Pose(4, 4, Heading.NORTH))
    assert not table.contains(Pose(5, 0, Heading.NORTH))
    assert not table.contains(Pose(0, 5, Heading.NORTH))
    assert not table.contains(Pose(-1, 0, Heading.NORTH))
    assert not table.contains(Pose(0, -1, Heading.NORTH))


def test_tabletop_with_pose_returns_new_value():
    table = Tabletop()
    placed = table.with_pose(Pose(1, 1, Heading.EAST))
    assert table.pose is None
    assert placed.pose == Pose(1, 1, Heading.EAST)
    assert placed.is_placed


def test_tabletop_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Tabletop(-1, 4)
