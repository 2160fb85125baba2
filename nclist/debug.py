"""
Diagnostic output for the nclist package.

Messages go to stderr with a timestamp and a component tag. Output is
disabled by default; enable it with set_debug(True).
"""

from datetime import datetime
import sys


_debug_enabled: bool = False


def set_debug(enabled: bool = True):
    """Enable or disable diagnostic output for the whole package."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def is_debug_enabled() -> bool:
    return _debug_enabled


def debug_print(tag: str, msg: str) -> None:
    if not _debug_enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {tag}: {msg}", file=sys.stderr)
