"""
Data file parsing and persistence.

This package handles all file I/O for the location guide.
"""

from .parser import format_line, is_skippable, parse_line
from .store import LocationStore

__all__ = ["LocationStore", "parse_line", "format_line", "is_skippable"]
