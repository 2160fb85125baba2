"""
Construction of the nested containment layout.

The input is validated, sorted on (start ascending, end descending) and
partitioned into containment groups with an explicit stack of open
containers. The groups are then written breadth-first into one flat
sequence so every group is a contiguous slice and each item refers to the
slice holding the intervals it contains.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar

from .debug import debug_print
from .errors import InvalidInterval
from .interval import bounds

T = TypeVar('T')

# (offset, stop) into the flat storage
GroupSlice = tuple[int, int]


def _debug_print(msg: str) -> None:
    debug_print("BUILD", msg)


@dataclass(frozen=True)
class Layout(Generic[T]):
    """Flat, group-addressed storage produced by build_layout()."""
    items: tuple[T, ...]
    starts: tuple[Any, ...]
    ends: tuple[Any, ...]
    children: tuple[Optional[GroupSlice], ...]
    top: GroupSlice
    depth: int
    group_count: int


def _sorted_order(starts: list, ends: list) -> list[int]:
    """Positions sorted on start ascending, end descending; ties keep input order."""
    order = sorted(range(len(starts)), key=ends.__getitem__, reverse=True)
    order.sort(key=starts.__getitem__)
    return order


def _partition(order: list[int], ends: list) -> tuple[list[int], dict[int, list[int]], int]:
    """
    Split sorted positions into the top-level group and child groups.

    Returns the top-level group, a mapping from container position to its
    child group, and the maximum nesting depth.
    """
    top: list[int] = []
    groups: dict[int, list[int]] = {}
    # open containers, innermost last
    stack: list[int] = []
    depth = 0

    for i in order:
        end = ends[i]
        # a container ending before this item ends cannot hold it, nor
        # anything sorted after it that it would not also hold. Containers
        # with end <= item start, the closed ones, are a subset of these.
        while stack and ends[stack[-1]] < end:
            stack.pop()

        if stack:
            groups.setdefault(stack[-1], []).append(i)
        else:
            top.append(i)

        stack.append(i)
        if len(stack) > depth:
            depth = len(stack)

    return top, groups, depth


def build_layout(items: Iterable[T]) -> Layout[T]:
    """
    Validate, sort and partition items into a flat nested containment layout.

    Raises:
        InvalidInterval: for the first item whose end does not exceed its
            start. Nothing is built in that case.
        TypeError: if an item has no readable bounds.
    """
    source = list(items)
    starts: list = []
    ends: list = []
    for index, item in enumerate(source):
        start, end = bounds(item)
        if not end > start:
            raise InvalidInterval(index, item)
        starts.append(start)
        ends.append(end)

    order = _sorted_order(starts, ends)
    top, groups, depth = _partition(order, ends)

    flat_items: list[T] = []
    flat_starts: list = []
    flat_ends: list = []
    children: list[Optional[GroupSlice]] = []
    top_slice: GroupSlice = (0, 0)

    # (group members, flat position of the container or None for the top)
    queue: deque[tuple[list[int], Optional[int]]] = deque([(top, None)])
    while queue:
        group, parent = queue.popleft()
        offset = len(flat_items)
        for i in group:
            position = len(flat_items)
            flat_items.append(source[i])
            flat_starts.append(starts[i])
            flat_ends.append(ends[i])
            children.append(None)
            nested = groups.get(i)
            if nested:
                queue.append((nested, position))

        group_slice = (offset, len(flat_items))
        if parent is None:
            top_slice = group_slice
        else:
            children[parent] = group_slice

    group_count = len(groups) + (1 if top else 0)
    _debug_print(f"Built {len(flat_items)} intervals into {group_count} groups, depth {depth}")

    return Layout(
        items=tuple(flat_items),
        starts=tuple(flat_starts),
        ends=tuple(flat_ends),
        children=tuple(children),
        top=top_slice,
        depth=depth,
        group_count=group_count,
    )
