"""Turning the pruned tunnels into paths and moving the ants along them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .graph import find_link
from .model import Farm, LeminError, Link, Room


@dataclass(eq=False)
class Way:
    """A path of tunnels leading from the start room to the end room."""

    links: list[Link] = field(default_factory=list)

    @property
    def length(self) -> int:
        """Number of tunnels on the path."""
        return len(self.links)

    @property
    def rooms(self) -> list[Room]:
        """Rooms along the path, start and end included."""
        if not self.links:
            return []
        return [self.links[0].start, *(link.end for link in self.links)]


@dataclass(frozen=True)
class Move:
    """One ant stepping into one room during a turn."""

    ant: int
    room: Room

    def __str__(self) -> str:
        return f"L{self.ant}-{self.room.name}"


def _ends(farm: Farm) -> tuple[Room, Room]:
    if farm.start is None or farm.end is None:
        raise LeminError("farm has no start or end room")
    return farm.start, farm.end


def _take_link(farm: Farm, start: Room) -> Link:
    link = find_link(farm, start, None)
    if link is None:
        raise LeminError("tunnels do not form paths from start to end")
    farm.links.remove(link)
    return link


def _insert_way(ways: list[Way], way: Way) -> None:
    index = next(
        (i for i, other in enumerate(ways) if way.length <= other.length),
        len(ways),
    )
    ways.insert(index, way)


def build_ways(farm: Farm) -> list[Way]:
    """Collect the farm's tunnels into paths, shortest first.

    The tunnels are taken out of ``farm.links``. A new path goes before
    existing paths of the same length. Raises LeminError when the tunnels
    do not chain from the start to the end.
    """
    start, end = _ends(farm)
    ways: list[Way] = []
    while farm.links:
        link = _take_link(farm, start)
        way = Way([link])
        while link.end is not end:
            link = _take_link(farm, link.end)
            way.links.append(link)
        _insert_way(ways, way)
    return ways


def extra_cost(ways: list[Way], way: Way) -> int:
    """Sum of how much longer ``way`` is than each path listed before it."""
    total = 0
    for other in ways:
        if other is way:
            return total
        total += way.length - other.length
    raise ValueError("way is not among ways")


def _advance(way: Way, end: Room, moves: list[Move]) -> int:
    """Push every ant on ``way`` one room forward; return how many arrived."""
    arrived = 0
    for link in reversed(way.links):
        ant = link.start.ant
        if ant == -1:
            continue
        moves.append(Move(ant, link.end))
        if link.end is end:
            arrived += 1
        else:
            link.end.ant = ant
        link.start.ant = -1
    return arrived


def launch_ants(farm: Farm, ways: list[Way]) -> Iterator[list[Move]]:
    """Yield the moves of each turn, ordered by ant number, until all ants arrive.

    Ants already under way advance first; then a new ant leaves the start
    on each path whose extra cost is below the number of ants still waiting.
    """
    _, end = _ends(farm)
    if farm.ants > 0 and not ways:
        raise LeminError("no path from start to end")
    costs = [extra_cost(ways, way) for way in ways]
    waiting = farm.ants
    launched = 0
    arrived = 0
    while waiting or launched != arrived:
        moves: list[Move] = []
        for way in ways:
            arrived += _advance(way, end, moves)
        for way, cost in zip(ways, costs):
            if not waiting:
                break
            if waiting > cost:
                waiting -= 1
                launched += 1
                first = way.links[0].end
                if first is end:
                    arrived += 1
                else:
                    first.ant = launched
                moves.append(Move(launched, first))
        moves.sort(key=lambda move: move.ant)
        yield moves


def format_turn(moves: list[Move]) -> str:
    """Text of one turn: each move as ``L<ant>-<room>`` followed by a space."""
    return "".join(f"{move} " for move in moves)


def format_input(farm: Farm) -> str:
    """The input lines read, each with a newline, then an empty line."""
    return "".join(f"{line}\n" for line in farm.lines) + "\n"