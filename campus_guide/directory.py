"""
Directory Service - the location guide's public interface.

This module contains the DirectoryService class that the menu layer talks
to. It ties one LocationTable to one LocationStore and adds the
caller-level rules the table itself does not have: key uniqueness and
field validation.
"""

import logging
from typing import Optional

from .config import FIELD_DELIMITER, FIELD_LIMITS, HASH_SIZE
from .data import LocationStore
from .engines import LocationTable
from .errors import DuplicateLocationKeyError, InvalidLocationError
from .models import LocationEntry

logger = logging.getLogger(__name__)


class DirectoryService:
    """
    Search, list, add and delete campus locations.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: FAÇADE
    ═══════════════════════════════════════════════════════════════════════════

    Every method returns plain data (LocationEntry objects, lists, None)
    and never prints. The terminal menu in cli.py decides how to show it.

    PERSISTENCE CONTRACT:
    ---------------------
    add_location:    file first, then the table is reloaded from the file.
                     A write failure leaves both memory and disk unchanged.
    delete_location: table first, then the file is rewritten.
                     A write failure leaves the entry deleted in memory but
                     still on disk. There is no rollback; reload() resyncs.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        directory = DirectoryService.open("data/university_data.txt")

        entry = directory.search_by_key("c_lab")
        directory.add_location("library", "Main Library", "Ground", "G01", "Study area")
        directory.delete_location("library")
    """

    def __init__(self, store: LocationStore):
        self.store = store

    @classmethod
    def open(cls, path=None, size: int = HASH_SIZE) -> "DirectoryService":
        """Build a directory over the given data file and load it."""
        directory = cls(LocationStore(LocationTable(size), path))
        directory.reload()
        return directory

    @property
    def table(self) -> LocationTable:
        return self.store.table

    @property
    def warnings(self) -> list:
        """Non-fatal problems from the last load, for display at startup."""
        if self.store.last_load_missing:
            return [
                f"'{self.store.path.name}' not found or could not be opened. "
                "Location features will be empty."
            ]
        return []

    def reload(self) -> int:
        """Discard the in-memory table and read the data file again."""
        return self.store.load_all()

    def search_by_key(self, key: str) -> Optional[LocationEntry]:
        return self.table.search(key)

    def list_all(self) -> list:
        """All entries in bucket-major order."""
        return list(self.table.iterate_all())

    def add_location(self, key: str, building: str, floor: str, room: str,
                     description: str) -> LocationEntry:
        """
        Add a new location and persist it.

        Fields are stripped of surrounding whitespace before validation.

        Returns:
            The entry as stored

        Raises:
            InvalidLocationError: Empty key, a field over its length limit,
                or a field containing ';' or a line break
            DuplicateLocationKeyError: The key is already in the directory
            LocationFileWriteError: The data file could not be appended to
        """
        entry = LocationEntry(
            key.strip(), building.strip(), floor.strip(), room.strip(), description.strip()
        )
        self._validate(entry)

        if self.search_by_key(entry.key) is not None:
            raise DuplicateLocationKeyError(entry.key)

        self.store.append_one(entry)
        logger.info("Added location '%s'", entry.key)
        return entry

    def delete_location(self, key: str) -> Optional[LocationEntry]:
        """
        Delete a location and rewrite the data file.

        Returns:
            The removed entry, or None if the key was not found (the file is
            not touched in that case)

        Raises:
            LocationFileWriteError: The rewrite failed. The entry stays
                deleted in memory.
        """
        removed = self.table.delete(key)
        if removed is None:
            return None

        self.store.rewrite_all(self.table)
        logger.info("Deleted location '%s'", key)
        return removed

    def _validate(self, entry: LocationEntry):
        if not entry.key:
            raise InvalidLocationError("Key cannot be empty.", field="key")

        for name, value in zip(FIELD_LIMITS, entry.fields()):
            if FIELD_DELIMITER in value or "\n" in value or "\r" in value:
                raise InvalidLocationError(
                    f"{name.capitalize()} cannot contain '{FIELD_DELIMITER}' or line breaks.",
                    field=name,
                )
            limit = FIELD_LIMITS[name]
            if len(value) > limit:
                raise InvalidLocationError(
                    f"{name.capitalize()} must be at most {limit} characters.",
                    field=name,
                )

    def __len__(self) -> int:
        return len(self.table)
