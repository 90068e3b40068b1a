"""
Configuration constants for the campus location guide.

This module contains all configuration values and constants used throughout
the location directory. Centralizing these makes it easy to adjust the
table size or file layout without touching the algorithm layer.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DATA_FILE = DATA_DIR / "university_data.txt"

FILE_ENCODING = "utf-8"

# Bytes that are not valid UTF-8 are carried through as lone surrogates so a
# load followed by a rewrite puts them back on disk unchanged.
FILE_ERRORS = "surrogateescape"


# =============================================================================
# HASH TABLE
# =============================================================================
# The table never grows. Collisions are resolved by chaining, so a small
# bucket count only makes chains longer, it never loses entries.

HASH_SIZE = 50
HASH_MULTIPLIER = 31


# =============================================================================
# FILE FORMAT
# =============================================================================
# One location per line:
#
#   key;building;floor;room;description
#
# There is no escaping. A ';' inside a field shifts every later column.

FIELD_DELIMITER = ";"
FIELD_COUNT = 5
COMMENT_PREFIX = "#"

# Lines shorter than this (after the line terminator is removed) are treated
# as blank and skipped on read.
MIN_LINE_LENGTH = 5

# Written at the top of the file on every full rewrite
FILE_HEADER = (
    "# Location Data File",
    "# Format: key;building;floor;room;description",
)


# =============================================================================
# FIELD LIMITS
# =============================================================================
# Enforced when a location is added through the directory service.
# Entries already on disk are loaded as they are.

MAX_KEY_LENGTH = 14
MAX_TEXT_LENGTH = 99

FIELD_LIMITS = {
    "key": MAX_KEY_LENGTH,
    "building": MAX_TEXT_LENGTH,
    "floor": MAX_KEY_LENGTH,
    "room": MAX_KEY_LENGTH,
    "description": MAX_TEXT_LENGTH,
}
