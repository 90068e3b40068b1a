"""
Error hierarchy for the campus location guide.

Every failure the directory reports to its caller derives from
CampusGuideError, so the menu layer can catch one type and print the
message without knowing which component raised it.

Conditions that are NOT errors:
    - A missing data file at load time. The table is left empty and a
      warning is logged (see LocationStore.load_all).
    - A search or delete miss. Those return None.
"""


class CampusGuideError(Exception):
    """Base exception for all campus guide errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocationFileWriteError(CampusGuideError):
    """The data file could not be opened or written for an append or rewrite."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class LocationAllocationError(CampusGuideError):
    """Storage for a new chain node could not be obtained; nothing was inserted."""


class DuplicateLocationKeyError(CampusGuideError):
    """The task key is already present in the directory."""

    def __init__(self, key: str):
        super().__init__(f"Task key '{key}' already exists")
        self.key = key


class InvalidLocationError(CampusGuideError):
    """A field supplied for a new location cannot be stored in the data file."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
