"""
Campus Location Guide Package
=============================

A task-key directory of campus locations, backed by a plain text file.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                 │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │  hash_key   │  │  BucketChain    │  │       LocationTable         │  │
│  │ (hashing)   │  │ (chaining)      │  │ (insert/search/delete)      │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐   │
│  │  parse_line/format_line │  │          LocationStore              │   │
│  │  (one file line)        │  │  (load / append+reload / rewrite)   │   │
│  └─────────────────────────┘  └─────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     DirectoryService                                    │
│    (Façade - uniqueness check, validation, persistence ordering)        │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns LocationEntry / lists / None
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│           cli.py menu loop + TerminalDisplay (only place that prints)   │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

campus_guide/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m campus_guide
├── config.py            # Configuration constants
├── errors.py            # Exception hierarchy
├── logging_config.py    # setup_logging() for the CLI
├── directory.py         # DirectoryService façade
├── cli.py               # Interactive menu
│
├── models/
│   └── location.py      # LocationEntry
│
├── engines/
│   ├── hasher.py        # hash_key
│   ├── chain.py         # BucketChain
│   └── table.py         # LocationTable
│
├── data/
│   ├── parser.py        # parse_line, format_line
│   └── store.py         # LocationStore
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from campus_guide import DirectoryService

    directory = DirectoryService.open("data/university_data.txt")
    directory.add_location("c_lab", "Engineering Hall", "2nd", "204", "Computer Lab")
    entry = directory.search_by_key("c_lab")

Running from command line:

    python -m campus_guide --admin

"""

# Version
__version__ = "1.0.0"

# Main exports
from .directory import DirectoryService
from .cli import main

# Model exports
from .models import LocationEntry

# Engine exports (for advanced use)
from .engines import BucketChain, LocationTable, hash_key

# Data exports
from .data import LocationStore, format_line, parse_line

# Error exports
from .errors import (
    CampusGuideError,
    DuplicateLocationKeyError,
    InvalidLocationError,
    LocationAllocationError,
    LocationFileWriteError,
)

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import DATA_DIR, DATA_FILE, HASH_SIZE

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "DirectoryService",
    "main",
    # Models
    "LocationEntry",
    # Engines
    "hash_key",
    "BucketChain",
    "LocationTable",
    # Data
    "LocationStore",
    "parse_line",
    "format_line",
    # Errors
    "CampusGuideError",
    "DuplicateLocationKeyError",
    "InvalidLocationError",
    "LocationAllocationError",
    "LocationFileWriteError",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "DATA_FILE",
    "HASH_SIZE",
]
