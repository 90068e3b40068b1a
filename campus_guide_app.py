"""
Campus Location Guide - Root Runner
===================================

Runs the interactive location guide from the project root without
installing the package.

USAGE:
------

Option 1 - Run as module:
    python -m campus_guide --admin

Option 2 - Run this file:
    python campus_guide_app.py --admin

Option 3 - Import in code:
    from campus_guide import DirectoryService

    directory = DirectoryService.open()
    directory.search_by_key("library")

For more information, see campus_guide/__init__.py
"""

from campus_guide.cli import main

if __name__ == "__main__":
    main()
