"""
Location file persistence.

This module keeps a LocationTable and its backing text file in step:
full load, append-and-reload, and full rewrite.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import DATA_FILE, FILE_ENCODING, FILE_ERRORS, FILE_HEADER
from ..engines import LocationTable
from ..errors import LocationAllocationError, LocationFileWriteError
from ..models import LocationEntry
from .parser import format_line, parse_line

logger = logging.getLogger(__name__)


class LocationStore:
    """
    Reads and writes the location data file for one LocationTable.

    STATE MACHINE:
    --------------
        Unloaded ──load_all()──▶ Loaded
        Loaded ──append_one()──▶ Loaded           (file appended, table reloaded)
        Loaded ──delete + rewrite_all()──▶ Loaded (file regenerated from table)

    WHY APPEND RELOADS:
    The new entry never goes into the table directly. It is written to the
    file, and then the whole file is read back. Memory therefore only ever
    holds what the file holds, at the cost of one full read per addition.

    WHY DELETE REWRITES:
    The format has no way to remove a row in place, so the file is rebuilt
    from the table after every delete.

    KNOWN INCONSISTENCY WINDOW:
    The caller deletes from the table BEFORE rewrite_all() runs. If the
    rewrite then fails, the entry is gone from memory but still on disk.
    Nothing is rolled back; the next successful load_all() brings it back.

    Usage:
        store = LocationStore(LocationTable(), "university_data.txt")
        store.load_all()
        store.append_one(LocationEntry("library", "Main Library", "Ground", "G01", "Study area"))
    """

    def __init__(self, table: LocationTable, path=None):
        self.table = table
        self.path = Path(path) if path is not None else DATA_FILE
        # True when the most recent load_all() found no readable file
        self.last_load_missing = False

    def exists(self) -> bool:
        return self.path.is_file()

    def load_all(self) -> int:
        """
        Rebuild the table from the data file.

        The table is cleared first. A missing or unreadable file is not an
        error: the table stays empty, a warning is logged, and
        last_load_missing is set. Bytes that are not valid UTF-8 are kept
        as surrogate escapes so rewrite_all() writes them back unchanged.

        Returns:
            Number of entries inserted

        Raises:
            LocationAllocationError: An entry could not be stored. The table
                is cleared before the error propagates, never half loaded.
        """
        self.table.clear()
        self.last_load_missing = False

        try:
            with open(self.path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                count = 0
                for line in f:
                    entry = parse_line(line)
                    if entry is None:
                        continue
                    try:
                        self.table.insert(entry)
                    except LocationAllocationError:
                        self.table.clear()
                        logger.error(
                            "Ran out of memory loading %s after %d location(s); table cleared",
                            self.path, count,
                        )
                        raise
                    count += 1
        except OSError as exc:
            self.table.clear()
            self.last_load_missing = True
            logger.warning(
                "Location file %s not found or could not be opened (%s). "
                "Location features will be empty.",
                self.path, exc.strerror or exc,
            )
            return 0

        logger.info("Loaded %d location(s) from %s", count, self.path)
        return count

    def append_one(self, entry: LocationEntry) -> int:
        """
        Append one entry to the data file, then reload the table.

        If the file does not end with a newline, one is written first so the
        new entry starts on its own line.

        Returns:
            Number of entries in the table after the reload

        Raises:
            LocationFileWriteError: The file could not be opened or written.
                The table is left as it was.
        """
        prefix = "\n" if self._needs_leading_newline() else ""
        try:
            with open(self.path, "a", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                f.write(prefix + format_line(entry))
        except OSError as exc:
            logger.error("Could not append location '%s' to %s: %s", entry.key, self.path, exc)
            raise LocationFileWriteError(
                f"Could not open {self.path} for writing", path=self.path
            ) from exc

        return self.load_all()

    def rewrite_all(self, table: Optional[LocationTable] = None):
        """
        Regenerate the data file from a table.

        Writes the two header comment lines, then one line per entry in
        iterate_all() order (bucket-ascending, head to tail).

        Args:
            table: Table to write out. Defaults to the store's own table.

        Raises:
            LocationFileWriteError: The file could not be opened or written.
        """
        source = table if table is not None else self.table
        try:
            with open(self.path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS) as f:
                for header_line in FILE_HEADER:
                    f.write(header_line + "\n")
                for entry in source.iterate_all():
                    f.write(format_line(entry))
        except OSError as exc:
            logger.error("Could not rewrite location file %s: %s", self.path, exc)
            raise LocationFileWriteError(
                f"Could not open {self.path} for writing", path=self.path
            ) from exc

    def _needs_leading_newline(self) -> bool:
        try:
            with open(self.path, "rb") as f:
                f.seek(0, 2)
                if f.tell() == 0:
                    return False
                f.seek(-1, 2)
                return f.read(1) != b"\n"
        except OSError:
            return False
