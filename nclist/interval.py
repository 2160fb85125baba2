"""
Interval capability shared by everything stored in an NClist.

An item is queryable when its start and end coordinates can be read and the
coordinates are mutually ordered. Intervals are half-open, ``[start, end)``.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Generic, Optional, Protocol, TypeVar

from .timezone_utils import to_utc_coordinate

# C is the ordered coordinate type, T the payload type
C = TypeVar('C')
T = TypeVar('T')

_MISSING = object()


class Interval(Protocol[C]):
    """Structural type for items with ``start`` and ``end`` coordinates."""
    start: C
    end: C


def _read_attr(item: Any, name: str) -> Any:
    value = getattr(item, name, _MISSING)
    if value is not _MISSING and callable(value):
        value = value()
    return value


def bounds(item: Interval | range | tuple | list) -> tuple[Any, Any]:
    """
    Return the ``(start, end)`` coordinates of an item.

    Accepted forms, in lookup order:
      - ``range`` objects: ``(start, stop)``, the step is ignored
      - objects with ``start`` and ``end`` attributes or accessor methods
      - tuples or lists whose first two elements are the coordinates;
        further elements are treated as payload

    Raises:
        TypeError: if no coordinates can be read from the item.
    """
    if isinstance(item, range):
        return item.start, item.stop

    start = _read_attr(item, 'start')
    if start is not _MISSING:
        end = _read_attr(item, 'end')
        if end is not _MISSING:
            return start, end

    if isinstance(item, (tuple, list)) and len(item) >= 2:
        return item[0], item[1]

    raise TypeError(f"Cannot read interval bounds from {type(item).__name__}: {item!r}")


def is_overlapping(a_start: Any, a_end: Any, b_start: Any, b_end: Any) -> bool:
    """Half-open overlap test for ``[a_start, a_end)`` and ``[b_start, b_end)``."""
    return a_start < b_end and b_start < a_end


@dataclass(frozen=True, slots=True)
class Span(Generic[T]):
    """
    A half-open interval carrying an arbitrary payload.

    Spans do not validate their bounds; building an NClist does.
    """
    start: Any
    end: Any
    data: Optional[T] = None

    @classmethod
    def from_datetimes(cls, start: date, end: date, data: Optional[T] = None) -> 'Span[T]':
        """
        Create a span over datetime (or date) coordinates normalized to UTC.

        Naive values are interpreted in the configured local timezone, see
        ``timezone_utils.set_timezone``.
        """
        return cls(to_utc_coordinate(start), to_utc_coordinate(end), data)

    def __contains__(self, point: Any) -> bool:
        return self.start <= point < self.end

    @property
    def length(self) -> Any:
        return self.end - self.start
