"""Core data types for an ant farm: rooms, tunnels and the farm itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class LeminError(ValueError):
    """Raised when a farm description is invalid or cannot be solved."""


class RoomType(IntEnum):
    """Role of a room, as set by the command line that precedes it."""

    UNKNOWN = 0
    START = 1
    NORMAL = 2
    END = 3


@dataclass(eq=False)
class Room:
    """A room of the farm.

    ``bfs_level`` is -1 until the room is reached by the search,
    ``ant`` is -1 while the room is empty.
    """

    name: str
    type: RoomType = RoomType.NORMAL
    bfs_level: int = -1
    inputs: int = 0
    outputs: int = 0
    ant: int = -1


@dataclass(eq=False)
class Link:
    """A tunnel between two rooms; once oriented it runs start -> end."""

    start: Room
    end: Room


@dataclass
class Farm:
    """The whole farm: ants, rooms, tunnels and the input lines read."""

    ants: int = 0
    rooms: list[Room] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    start: Room | None = None
    end: Room | None = None
    max_bfs: int = 0
    lines: list[str] = field(default_factory=list)

    def find_room(self, name: str) -> Room | None:
        """Return the first room called ``name``, or None."""
        return next((room for room in self.rooms if room.name == name), None)

    def add_room(self, room: Room) -> None:
        """Append a room; a start or end room becomes the farm's start or end."""
        self.rooms.append(room)
        if room.type is RoomType.START:
            self.start = room
        elif room.type is RoomType.END:
            self.end = room

    def add_link(self, link: Link) -> None:
        """Append a tunnel."""
        self.links.append(link)

    def remove_link(self, link: Link) -> None:
        """Drop a tunnel and update the link counters of its rooms."""
        try:
            self.links.remove(link)
        except ValueError:
            pass
        if link.start.outputs > 0:
            link.start.outputs -= 1
        if link.end.inputs > 0:
            link.end.inputs -= 1