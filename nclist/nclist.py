"""
Nested containment list (NClist).

Intervals that do not contain one another are sorted on their end
coordinate as soon as they are sorted on their start coordinate. The
overlaps of such a group with a query are found by a binary search on the
query start followed by a scan that stops at the query end. Contained
intervals are moved into a child group of their container and searched only
when the container overlaps the query.

The structure is built once and never modified. Rebuild from a new
collection to change its contents.
"""

from bisect import bisect_right
from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .builder import GroupSlice, build_layout
from .interval import bounds
from .overlaps import Overlaps, OrderedOverlaps

T = TypeVar('T')


class NClist(Generic[T]):
    """
    Immutable overlap index over a collection of half-open intervals.

    Items may be anything ``bounds()`` understands: ``(start, end)`` tuples,
    ``range`` objects, ``Span`` instances or objects with ``start`` and
    ``end`` attributes. Items must not change their bounds while stored.
    """
    __slots__ = ['_items', '_starts', '_ends', '_children', '_top', '_depth', '_group_count']

    def __init__(self, items: Iterable[T] = ()):
        layout = build_layout(items)
        self._items: tuple[T, ...] = layout.items
        self._starts: tuple[Any, ...] = layout.starts
        self._ends: tuple[Any, ...] = layout.ends
        self._children: tuple[Optional[GroupSlice], ...] = layout.children
        self._top: GroupSlice = layout.top
        self._depth: int = layout.depth
        self._group_count: int = layout.group_count

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> 'NClist[T]':
        return cls(items)

    # --- Queries ---

    def count_overlaps(self, query: Any) -> int:
        """
        Count the stored intervals overlapping ``query``.

        Cheaper than counting the items of ``overlaps()`` since no iterator
        state is kept between groups.
        """
        query_start, query_end = bounds(query)
        if query_end <= query_start:
            return 0

        starts = self._starts
        ends = self._ends
        children = self._children
        count = 0
        queue: deque[GroupSlice] = deque([self._top])
        while queue:
            lo, hi = queue.popleft()
            pos = bisect_right(ends, query_start, lo, hi)
            while pos < hi and starts[pos] < query_end:
                count += 1
                child = children[pos]
                if child is not None:
                    queue.append(child)
                pos += 1
        return count

    def overlaps(self, query: Any) -> Overlaps[T]:
        """
        Iterate lazily over the stored items overlapping ``query``.

        Items come group by group, outer groups first; contained items are
        returned after the siblings of their container.
        """
        query_start, query_end = bounds(query)
        return Overlaps(self, query_start, query_end)

    def overlaps_ordered(self, query: Any) -> OrderedOverlaps[T]:
        """
        Iterate lazily over the items overlapping ``query`` ordered by start
        coordinate (ties: longer interval first).
        """
        query_start, query_end = bounds(query)
        return OrderedOverlaps(self, query_start, query_end)

    # --- Container protocol ---

    def into_list(self) -> list[T]:
        """Return the stored items. The order differs from the input order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (f"NClist({len(self._items)} intervals, "
                f"{self._group_count} groups, depth {self._depth})")

    @property
    def depth(self) -> int:
        """Maximum nesting depth; 1 when no interval contains another."""
        return self._depth

    @property
    def group_count(self) -> int:
        return self._group_count

    # --- Debug Tool ---

    def verify_integrity(self) -> None:
        """Raises RuntimeError if a layout invariant is violated."""
        starts = self._starts
        ends = self._ends
        seen = [False] * len(self._items)

        # (group slice, container position or None)
        queue: deque[tuple[GroupSlice, Optional[int]]] = deque([(self._top, None)])
        while queue:
            (lo, hi), parent = queue.popleft()
            if not 0 <= lo <= hi <= len(self._items):
                raise RuntimeError(f"Group slice out of range: ({lo}, {hi})")

            for pos in range(lo, hi):
                if seen[pos]:
                    raise RuntimeError(f"Interval at position {pos} appears in more than one group")
                seen[pos] = True

                start, end = bounds(self._items[pos])
                if start != starts[pos] or end != ends[pos]:
                    raise RuntimeError(f"Bounds of interval at position {pos} changed after construction")
                if not end > start:
                    raise RuntimeError(f"Zero or negative width interval at position {pos}")

                if parent is not None and not (starts[parent] <= start and end <= ends[parent]):
                    raise RuntimeError(
                        f"Interval at position {pos} is not contained in its parent at position {parent}"
                    )
                if pos > lo and (starts[pos] < starts[pos - 1] or ends[pos] < ends[pos - 1]):
                    raise RuntimeError(f"Group order violated at position {pos}")

                child = self._children[pos]
                if child is not None:
                    queue.append((child, pos))

        if not all(seen):
            raise RuntimeError(f"Interval at position {seen.index(False)} is not reachable")


def build(items: Iterable[T]) -> NClist[T]:
    """
    Build an NClist from ``items``.

    Raises:
        InvalidInterval: if an item's end does not exceed its start.
    """
    return NClist(items)
