"""Reading an ant farm description: ant count, rooms, commands and tunnels."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import IO

from .model import Farm, LeminError, Link, Room, RoomType
from .numbers import check_number, parse_int
from .textops import split

_START_COMMAND = "##start"
_END_COMMAND = "##end"


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` without their trailing newline.

    A final newline does not produce an extra empty line.
    """
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def is_comment(line: str) -> bool:
    """True for a comment: starts with '#' but is not a command.

    Raises LeminError for an empty line, which the format never allows.
    """
    if not line:
        raise LeminError("empty line")
    return not is_command(line) and line.startswith("#")


def is_command(line: str) -> bool:
    """True for a command line, one starting with '##'."""
    return line.startswith("##")


def command_type(line: str) -> RoomType:
    """Room type that a command line assigns to the next room."""
    if line == _START_COMMAND:
        return RoomType.START
    if line == _END_COMMAND:
        return RoomType.END
    return RoomType.UNKNOWN


def is_non_negative_int(text: str | None) -> bool:
    """True when ``text`` is non-empty and reads as a number that is not negative."""
    return bool(text) and parse_int(text) >= 0


def is_room(line: str) -> bool:
    """True for a room line: a name and two coordinates separated by spaces.

    The name may not begin with '#' or 'L'.
    """
    words = split(line, " ")
    if len(words) != 3:
        return False
    name, x, y = words
    return name[0] not in "#L" and is_non_negative_int(x) and is_non_negative_int(y)


def make_room(line: str, room_type: RoomType) -> Room:
    """Build a room from a room line; the first word is its name."""
    words = split(line, " ")
    if not words:
        raise LeminError(f"not a room: {line!r}")
    return Room(name=words[0], type=room_type)


def parse_link(farm: Farm, line: str) -> Link:
    """Build a tunnel from a ``name1-name2`` line, split at the first hyphen.

    Raises LeminError when there is no hyphen, nothing after it, or either
    room is unknown.
    """
    hyphen = line.find("-")
    if hyphen < 0:
        raise LeminError(f"not a link: {line!r}")
    start_name, end_name = line[:hyphen], line[hyphen + 1:]
    if not end_name:
        raise LeminError(f"link without a second room: {line!r}")
    start = farm.find_room(start_name)
    end = farm.find_room(end_name)
    if start is None or end is None:
        raise LeminError(f"link to an unknown room: {line!r}")
    return Link(start, end)


def all_rooms_linked(farm: Farm) -> bool:
    """True when every room's name appears in some tunnel, or there are no tunnels."""
    if not farm.links:
        return True
    linked = {name for link in farm.links for name in (link.start.name, link.end.name)}
    return all(room.name in linked for room in farm.rooms)


def unique_start_end(farm: Farm) -> bool:
    """True for exactly one start and one end room, neither name reused by a normal room."""
    starts = sum(room.type is RoomType.START for room in farm.rooms)
    ends = sum(room.type is RoomType.END for room in farm.rooms)
    reserved = {room.name for room in (farm.start, farm.end) if room is not None}
    if any(room.type is RoomType.NORMAL and room.name in reserved for room in farm.rooms):
        return False
    return starts == 1 and ends == 1


def valid_start_end(farm: Farm) -> bool:
    """True when the farm has both a start and an end room with names."""
    if farm.start is None or farm.end is None:
        return False
    return bool(farm.start.name) and bool(farm.end.name)


def _parse_ants(farm: Farm, line: str | None) -> None:
    if not line:
        raise LeminError("missing number of ants")
    try:
        ants, _ = check_number(line)
    except ValueError as exc:
        raise LeminError(f"invalid number of ants: {line!r}") from exc
    if ants <= 0:
        raise LeminError(f"number of ants must be positive: {line!r}")
    farm.ants = ants


def _is_room_section_line(line: str) -> bool:
    return is_comment(line) or is_command(line) or is_room(line)


def _parse_rooms(farm: Farm, read: Callable[[], str | None]) -> str:
    line = read()
    if line is None:
        raise LeminError("missing rooms")
    room_type = RoomType.NORMAL
    while _is_room_section_line(line):
        if is_command(line):
            room_type = command_type(line)
        elif is_room(line):
            farm.add_room(make_room(line, room_type))
            room_type = RoomType.NORMAL
        line = read()
        if line is None:
            raise LeminError("unexpected end of input among rooms")
    if "-" not in line:
        raise LeminError(f"invalid line: {line!r}")
    return line


def _parse_links(farm: Farm, first: str, read: Callable[[], str | None]) -> None:
    if not is_comment(first):
        farm.add_link(parse_link(farm, first))
    line = read()
    if line is None:
        raise LeminError("unexpected end of input after the first link")
    while line is not None:
        if not is_comment(line):
            farm.add_link(parse_link(farm, line))
        line = read()
    if not all_rooms_linked(farm) or not unique_start_end(farm):
        raise LeminError("invalid farm layout")


def parse_farm(lines: Iterable[str]) -> Farm:
    """Parse a whole farm description; every line read is kept in ``farm.lines``.

    Raises LeminError for any invalid input.
    """
    farm = Farm()
    source = iter(lines)

    def read() -> str | None:
        line = next(source, None)
        if line is not None:
            farm.lines.append(line)
        return line

    _parse_ants(farm, read())
    first_link = _parse_rooms(farm, read)
    if not valid_start_end(farm):
        raise LeminError("missing start or end room")
    _parse_links(farm, first_link, read)
    return farm