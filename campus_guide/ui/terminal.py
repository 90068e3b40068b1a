"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the campus_guide package.

To create a different UI (web, kiosk, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import FILE_ENCODING, FILE_ERRORS
from ..models import LocationEntry


class TerminalDisplay:
    """
    Pretty terminal output for the location guide.

    Every method is a classmethod so the CLI can use the class directly
    without holding an instance.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    # Column widths for the "view all" table: key, building, floor, room, description
    COLUMNS = (
        ("Task Key", 15),
        ("Building", 19),
        ("Floor", 11),
        ("Room", 9),
        ("Description", 22),
    )

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_menu(cls, is_admin: bool):
        cls.print_header("CAMPUS LOCATION GUIDEBOOK")
        print(f"  {cls.DIM}Find locations by Task Key.{cls.RESET}")
        print(f"  {cls.DIM}Example keys: 'library', 'c_lab', 'admin_office'{cls.RESET}")
        print()
        admin_note = "" if is_admin else f" {cls.DIM}(admin only){cls.RESET}"
        print("  [1] Search for a Location (By Task Key)")
        print("  [2] View All Available Locations")
        print(f"  [3] Add a New Location{admin_note}")
        print(f"  [4] Delete a Location{admin_note}")
        print("  [5] Exit")

    @classmethod
    def print_location(cls, entry: LocationEntry):
        """Print one location as a labelled block."""
        cls.print_subheader("Search Results")
        print(f"  {cls.BOLD}Key:{cls.RESET} {cls._text(entry.key)}")
        print(f"  {cls.BOLD}Building:{cls.RESET} {cls._text(entry.building)}")
        print(f"  {cls.BOLD}Floor:{cls.RESET} {cls._text(entry.floor)}")
        print(f"  {cls.BOLD}Room/Facility:{cls.RESET} {cls._text(entry.room)}")
        print(f"  {cls.BOLD}Description:{cls.RESET} {cls._text(entry.description)}")

    @classmethod
    def print_location_table(cls, entries: list):
        """Print every location in a bordered table followed by a total count."""
        cls.print_header("ALL AVAILABLE LOCATIONS")
        border = "+" + "+".join("-" * (width + 2) for _, width in cls.COLUMNS) + "+"

        print(border)
        print("| " + " | ".join(f"{title:<{width}}" for title, width in cls.COLUMNS) + " |")
        print(border)
        for entry in entries:
            cells = (
                cls._fit(cls._text(value), width)
                for value, (_, width) in zip(entry.fields(), cls.COLUMNS)
            )
            print("| " + " | ".join(cells) + " |")
        print(border)
        print(f"\n  {cls.BOLD}Total locations found:{cls.RESET} {len(entries)}")

    @classmethod
    def _text(cls, value: str) -> str:
        """Make undecodable file bytes printable."""
        return value.encode(FILE_ENCODING, FILE_ERRORS).decode(FILE_ENCODING, "replace")

    @classmethod
    def _fit(cls, value: str, width: int) -> str:
        """Pad or cut a cell value to exactly `width` characters."""
        if len(value) > width:
            return value[:width - 3] + "..."
        return f"{value:<{width}}"

    @classmethod
    def print_success(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_warning(cls, message: str):
        print(f"  {cls.YELLOW}⚠ {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")
