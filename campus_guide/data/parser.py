"""
Line parsing for the location data file.

This module converts between one line of university_data.txt and a
LocationEntry. It knows nothing about files or the hash table.
"""

import logging
from typing import Optional

from ..config import COMMENT_PREFIX, FIELD_COUNT, FIELD_DELIMITER, MIN_LINE_LENGTH
from ..models import LocationEntry

logger = logging.getLogger(__name__)


def is_skippable(line: str) -> bool:
    """
    True for lines that carry no entry: blank, comment, or too short.

    The line terminator is removed before the length check, so "abcd\\n"
    counts as four characters.
    """
    text = line.rstrip("\r\n")
    return not text or text.startswith(COMMENT_PREFIX) or len(text) < MIN_LINE_LENGTH


def parse_line(line: str) -> Optional[LocationEntry]:
    """
    Parse one data line into a LocationEntry.

    Format:
        key;building;floor;room;description

    Every field is stripped of surrounding whitespace. A line is rejected
    (None) when it is skippable, does not split into exactly five fields,
    or has an empty key. Rejections are not errors; the caller just moves
    on to the next line.

    Args:
        line: Raw line as read from the file, terminator included or not

    Returns:
        LocationEntry, or None if the line holds no valid entry
    """
    if is_skippable(line):
        return None

    parts = line.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        logger.debug("Skipping line with %d fields: %r", len(parts), line)
        return None

    key, building, floor, room, description = (part.strip() for part in parts)
    if not key:
        logger.debug("Skipping line with empty key: %r", line)
        return None

    return LocationEntry(key, building, floor, room, description)


def format_line(entry: LocationEntry) -> str:
    """Format an entry as one data line, newline included."""
    return FIELD_DELIMITER.join(entry.fields()) + "\n"
