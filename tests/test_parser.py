import io

import pytest

from antfarm.model import Farm, LeminError, Link, Room, RoomType
from antfarm.parser import (
    all_rooms_linked,
    command_type,
    is_command,
    is_comment,
    is_non_negative_int,
    is_room,
    iter_lines,
    make_room,
    parse_farm,
    parse_link,
    unique_start_end,
    valid_start_end,
)

SAMPLE = [
    "3",
    "##start",
    "a 0 0",
    "b 1 1",
    "##end",
    "c 2 2",
    "a-b",
    "b-c",
]


def _farm_with(*rooms):
    farm = Farm()
    for room in rooms:
        farm.add_room(room)
    return farm


def test_iter_lines_strips_newlines():
    assert list(iter_lines(io.StringIO("a\nb\n"))) == ["a", "b"]


def test_iter_lines_keeps_inner_empty_lines():
    assert list(iter_lines(io.StringIO("a\n\nb"))) == ["a", "", "b"]
    assert list(iter_lines(io.StringIO("a\n\n"))) == ["a", ""]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


def test_is_comment():
    assert is_comment("#x") is True
    assert is_comment("#") is True
    assert is_comment("##start") is False
    assert is_comment("room") is False


def test_is_comment_rejects_empty_line():
    with pytest.raises(LeminError):
        is_comment("")


def test_is_command():
    assert is_command("##") is True
    assert is_command("##start") is True
    assert is_command("#") is False


def test_command_type():
    assert command_type("##start") is RoomType.START
    assert command_type("##end") is RoomType.END
    assert command_type("##other") is RoomType.UNKNOWN


def test_is_non_negative_int():
    assert is_non_negative_int("5") is True
    assert is_non_negative_int("-1") is False
    assert is_non_negative_int("abc") is True
    assert is_non_negative_int("") is False
    assert is_non_negative_int(None) is False


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a 1 2", True),
        ("a  1  2", True),
        ("La 1 2", False),
        ("#a 1 2", False),
        ("a 1", False),
        ("a 1 2 3", False),
        ("a 1 -2", False),
        ("a-b", False),
    ],
)
def test_is_room(line, expected):
    assert is_room(line) is expected


def test_make_room():
    room = make_room("name 1 2", RoomType.START)
    assert room.name == "name"
    assert room.type is RoomType.START
    assert room.bfs_level == -1
    assert room.ant == -1


def test_parse_link():
    a, b = Room("a"), Room("b")
    farm = _farm_with(a, b)
    link = parse_link(farm, "a-b")
    assert link.start is a
    assert link.end is b


@pytest.mark.parametrize("line", ["ab", "a-", "a-x", "-b", "a-b c"])
def test_parse_link_errors(line):
    farm = _farm_with(Room("a"), Room("b"))
    with pytest.raises(LeminError):
        parse_link(farm, line)


def test_all_rooms_linked():
    a, b, c = Room("a"), Room("b"), Room("c")
    farm = _farm_with(a, b, c)
    assert all_rooms_linked(farm) is True
    farm.add_link(Link(a, b))
    assert all_rooms_linked(farm) is False
    farm.add_link(Link(b, c))
    assert all_rooms_linked(farm) is True


def test_unique_start_end():
    farm = _farm_with(Room("a", RoomType.START), Room("b", RoomType.END))
    assert unique_start_end(farm) is True
    farm.add_room(Room("a"))
    assert unique_start_end(farm) is False


def test_unique_start_end_two_starts():
    farm = _farm_with(
        Room("a", RoomType.START), Room("c", RoomType.START), Room("b", RoomType.END)
    )
    assert unique_start_end(farm) is False


def test_valid_start_end():
    farm = _farm_with(Room("a", RoomType.START))
    assert valid_start_end(farm) is False
    farm.add_room(Room("b", RoomType.END))
    assert valid_start_end(farm) is True


def test_parse_farm_sample():
    farm = parse_farm(SAMPLE)
    assert farm.ants == 3
    assert [room.name for room in farm.rooms] == ["a", "b", "c"]
    assert farm.start.name == "a"
    assert farm.end.name == "c"
    assert [(l.start.name, l.end.name) for l in farm.links] == [("a", "b"), ("b", "c")]
    assert farm.lines == SAMPLE


def test_parse_farm_from_stream():
    stream = io.StringIO("\n".join(SAMPLE) + "\n")
    farm = parse_farm(iter_lines(stream))
    assert farm.lines == SAMPLE
    assert len(farm.links) == 2


def test_parse_farm_with_comments():
    lines = ["2", "#hello", "##start", "#c", "a 0 0", "##end", "b 1 1", "a-b", "#tail"]
    farm = parse_farm(lines)
    assert farm.start.name == "a"
    assert len(farm.links) == 1
    assert farm.lines == lines


def test_parse_farm_ants_with_trailing_text():
    lines = ["10abc", "##start", "a 0 0", "##end", "b 1 1", "a-b", "b-a"]
    assert parse_farm(lines).ants == 10


def test_parse_farm_unknown_command_marks_room():
    lines = ["1", "##start", "a 0 0", "##foo", "x 3 3", "##end", "b 1 1",
             "a-b", "x-b"]
    farm = parse_farm(lines)
    assert farm.find_room("x").type is RoomType.UNKNOWN


@pytest.mark.parametrize(
    "lines",
    [
        [],
        [""],
        ["0"],
        ["-3"],
        ["abc"],
        ["3"],
        ["3", "##start", "a 0 0", "##end", "b 1 1"],
        ["3", "a 0 0", "##end", "b 1 1", "a-b", "b-a"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "a-b"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "a-b", ""],
        ["3", "##start", "a 0 0", "", "##end", "b 1 1", "a-b", "b-a"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "x 2 2", "a-b", "b-a"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "a 2 2", "a-b", "b-a"],
        ["3", "##start", "a 0 0", "##start", "c 0 0", "##end", "b 1 1",
         "a-b", "c-b"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "a-b", "##start"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "a-z", "b-a"],
        ["3", "##start", "a 0 0", "##end", "b 1 1", "garbage"],
    ],
)
def test_parse_farm_errors(lines):
    with pytest.raises(LeminError):
        parse_farm(lines)