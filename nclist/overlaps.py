"""
Lazy iterators over the intervals of an NClist overlapping a query.

Both iterators only read the structure and expand child groups on demand,
so a consumer that stops early never searches groups it did not reach.
They are single pass; run the query again for a fresh iterator.
"""

from bisect import bisect_right
from collections import deque
from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

if TYPE_CHECKING:
    from .nclist import NClist

T = TypeVar('T')


class Overlaps(Generic[T]):
    """
    Overlapping items in group order.

    Each group is scanned in start order; child groups of the items
    yielded are queued and searched once the current group is done. The
    result is therefore not globally sorted.
    """
    __slots__ = ['_nclist', '_query_start', '_query_end', '_pos', '_stop', '_pending']

    def __init__(self, nclist: 'NClist[T]', query_start: Any, query_end: Any):
        self._nclist = nclist
        self._query_start = query_start
        self._query_end = query_end
        self._pending: deque[tuple[int, int]] = deque()

        lo, hi = nclist._top
        self._stop = hi
        if query_end <= query_start:
            # empty or inverted queries overlap nothing
            self._pos = hi
        else:
            self._pos = bisect_right(nclist._ends, query_start, lo, hi)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        nclist = self._nclist
        starts = nclist._starts
        while True:
            pos = self._pos
            if pos < self._stop and starts[pos] < self._query_end:
                self._pos = pos + 1
                child = nclist._children[pos]
                if child is not None:
                    self._pending.append(child)
                return nclist._items[pos]

            if not self._pending:
                self._pos = self._stop
                raise StopIteration

            lo, hi = self._pending.popleft()
            self._pos = bisect_right(nclist._ends, self._query_start, lo, hi)
            self._stop = hi


class OrderedOverlaps(Generic[T]):
    """
    Overlapping items in storage order: start ascending, end descending.

    Walks the groups depth first with an explicit stack of suspended group
    cursors instead of collecting and sorting the result.
    """
    __slots__ = ['_nclist', '_query_start', '_query_end', '_pos', '_stop', '_suspended']

    def __init__(self, nclist: 'NClist[T]', query_start: Any, query_end: Any):
        self._nclist = nclist
        self._query_start = query_start
        self._query_end = query_end
        self._suspended: list[tuple[int, int]] = []

        lo, hi = nclist._top
        self._stop = hi
        if query_end <= query_start:
            self._pos = hi
        else:
            self._pos = bisect_right(nclist._ends, query_start, lo, hi)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        nclist = self._nclist
        starts = nclist._starts
        while True:
            pos = self._pos
            if pos < self._stop and starts[pos] < self._query_end:
                item = nclist._items[pos]
                child = nclist._children[pos]
                if child is None:
                    self._pos = pos + 1
                else:
                    # descend; resume this group after the child group
                    self._suspended.append((pos + 1, self._stop))
                    lo, hi = child
                    self._pos = bisect_right(nclist._ends, self._query_start, lo, hi)
                    self._stop = hi
                return item

            if not self._suspended:
                self._pos = self._stop
                raise StopIteration

            self._pos, self._stop = self._suspended.pop()
