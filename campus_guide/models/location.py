"""
Location data models.

Contains the LocationEntry dataclass that represents one row of the
campus location guide.
"""

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class LocationEntry:
    """
    A single campus location, looked up by its task key.

    This is the core data unit that flows through the system: the table
    chains it, the store reads and writes it, and the terminal prints it.

    Frozen: the table hands out the stored object, and its key fixes
    the bucket it lives in.

    Attributes:
        key: Task key used for lookups (e.g., "c_lab", "library")
        building: Building name (e.g., "Engineering Hall")
        floor: Floor label as written by staff (e.g., "2nd", "Ground")
        room: Room or facility code (e.g., "204")
        description: Short human-readable description
    """
    key: str
    building: str
    floor: str
    room: str
    description: str

    def fields(self) -> tuple:
        """Return the five fields in file column order."""
        return astuple(self)
