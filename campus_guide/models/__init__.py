"""
Data models for the campus location guide.

These dataclasses serve as "contracts" between the table, the store,
and the presentation layer.
"""

from .location import LocationEntry

__all__ = ["LocationEntry"]
