"""Breadth-first levelling of the farm and pruning of tunnels to disjoint paths."""

from __future__ import annotations

from collections import deque

from .model import Farm, LeminError, Link, Room

END_LEVEL = 2147483647
"""BFS level given to the end room once it is reached."""


def _require_ends(farm: Farm) -> tuple[Room, Room]:
    if farm.start is None or farm.end is None:
        raise LeminError("farm has no start or end room")
    return farm.start, farm.end


def _visit(queue: deque[Room], room: Room, neighbour: Room) -> None:
    if neighbour.bfs_level == -1:
        neighbour.bfs_level = room.bfs_level + 1
        queue.append(neighbour)


def bfs(farm: Farm) -> None:
    """Give every room reachable from the start its distance from the start.

    The end room is not expanded and gets :data:`END_LEVEL`; ``farm.max_bfs``
    becomes the level of the deepest room expanded.
    """
    start, end = _require_ends(farm)
    start.bfs_level = 0
    queue: deque[Room] = deque([start])
    while queue:
        room = queue.popleft()
        if room is end:
            end.bfs_level = END_LEVEL
            continue
        for link in farm.links:
            if link.start is room:
                _visit(queue, room, link.end)
            elif link.end is room:
                _visit(queue, room, link.start)
        farm.max_bfs = room.bfs_level


def remove_waste_links(farm: Farm) -> None:
    """Drop tunnels touching unreached rooms or joining rooms of the same level."""
    for link in list(farm.links):
        if (
            link.start.bfs_level == -1
            or link.end.bfs_level == -1
            or link.start.bfs_level == link.end.bfs_level
        ):
            farm.remove_link(link)


def orient_links(farm: Farm) -> None:
    """Turn every tunnel to run from the lower level to the higher one.

    Raises LeminError when no tunnel leads to the end room.
    """
    reaches_end = False
    for link in farm.links:
        if link.start.bfs_level > link.end.bfs_level:
            link.start, link.end = link.end, link.start
        if END_LEVEL in (link.start.bfs_level, link.end.bfs_level):
            reaches_end = True
    if not reaches_end:
        raise LeminError("no path from start to end")


def count_links(farm: Farm) -> None:
    """Add each tunnel to the output count of its start and the input count of its end."""
    for link in farm.links:
        link.start.outputs += 1
        link.end.inputs += 1


def _is_dead(farm: Farm, link: Link) -> bool:
    source, target = link.start, link.end
    return (
        source is not farm.start and source.inputs == 0 and source.outputs > 0
    ) or (target is not farm.end and target.inputs > 0 and target.outputs == 0)


def remove_deadlocks(farm: Farm) -> None:
    """Repeatedly drop tunnels leaving rooms nothing enters or entering rooms nothing leaves."""
    removed = True
    while removed:
        removed = False
        for link in list(farm.links):
            if _is_dead(farm, link):
                farm.remove_link(link)
                removed = True


def find_link(farm: Farm, start: Room | None, end: Room | None) -> Link | None:
    """First tunnel leaving ``start`` or entering ``end``; either may be None."""
    for link in farm.links:
        if start is not None and link.start is start:
            return link
        if end is not None and link.end is end:
            return link
    return None


def leads_to_fork(farm: Farm, link: Link) -> bool:
    """True when, following tunnels back towards the start, a room with several exits is met."""
    current: Link | None = link
    while current is not None:
        if current.start is farm.start:
            return False
        if current.start.outputs > 1:
            return True
        current = find_link(farm, None, current.start)
    raise LeminError("path does not lead back to the start")


def path_length(farm: Farm, link: Link) -> int:
    """Number of tunnels from ``link`` to the end, always taking the first exit."""
    length = 0
    current: Link | None = link
    while current is not None:
        length += 1
        if current.end is farm.end:
            return length
        current = find_link(farm, current.end, None)
    raise LeminError("path does not lead to the end")


def _keep_only(farm: Farm, keep: Link, same_room) -> None:
    for link in list(farm.links):
        if link is not keep and same_room(link):
            farm.remove_link(link)


def _remove_inputs(farm: Farm, room: Room) -> None:
    for link in list(farm.links):
        if room.inputs <= 1:
            break
        if link not in farm.links or link.end is not room:
            continue
        if not leads_to_fork(farm, link):
            _keep_only(farm, link, lambda other: other.end is room)
        else:
            farm.remove_link(link)
        remove_deadlocks(farm)


def remove_waste_inputs(farm: Farm) -> None:
    """Level by level from the start, leave each room with a single entering tunnel."""
    for level in range(1, farm.max_bfs + 1):
        for room in farm.rooms:
            if room.bfs_level == level and room.inputs > 1:
                _remove_inputs(farm, room)


def _remove_outputs(farm: Farm, room: Room) -> None:
    best: Link | None = None
    best_length = END_LEVEL
    for link in farm.links:
        if link.start is room:
            length = path_length(farm, link)
            if length < best_length:
                best_length, best = length, link
    if best is None:
        return
    _keep_only(farm, best, lambda other: other.start is room)
    remove_deadlocks(farm)


def remove_waste_outputs(farm: Farm) -> None:
    """Level by level towards the start, keep only each room's shortest exit."""
    for level in range(farm.max_bfs, 0, -1):
        for room in farm.rooms:
            if room.bfs_level == level and room.outputs > 1:
                _remove_outputs(farm, room)


def prepare(farm: Farm) -> None:
    """Run the whole pruning pipeline, leaving tunnels that form disjoint paths."""
    bfs(farm)
    remove_waste_links(farm)
    orient_links(farm)
    count_links(farm)
    remove_deadlocks(farm)
    remove_waste_inputs(farm)
    remove_waste_outputs(farm)