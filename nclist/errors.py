"""Exceptions raised by the nclist package."""

from typing import Any


class InvalidInterval(ValueError):
    """
    Raised when an item's end coordinate does not exceed its start.

    Only construction raises this. The offending item's position in the
    input is available as ``index``.
    """

    def __init__(self, index: int, item: Any = None):
        self.index = index
        self.item = item
        super().__init__(
            f"Interval at index {index} has zero or negative width: {item!r}"
        )
