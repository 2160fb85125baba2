"""
NClist - nested containment lists for interval overlap queries

This package provides:
- Interval capability and the Span value type (interval.py)
- Construction of the nested containment layout (builder.py)
- The immutable NClist and its queries (nclist.py)
- Lazy overlap iterators (overlaps.py)
- Datetime coordinate normalization (timezone_utils.py)
- Benchmark configuration (config.py)
"""

from .debug import set_debug
from .errors import InvalidInterval
from .interval import Interval, Span, bounds, is_overlapping
from .nclist import NClist, build
from .overlaps import Overlaps, OrderedOverlaps

__all__ = [
    'NClist',
    'build',
    'Overlaps',
    'OrderedOverlaps',
    'Interval',
    'Span',
    'bounds',
    'is_overlapping',
    'InvalidInterval',
    'set_debug',
]
