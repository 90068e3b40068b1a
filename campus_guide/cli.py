"""
Command-Line Interface for the Campus Location Guide.

This module provides the interactive menu over the DirectoryService.
It handles user input and hands results to TerminalDisplay.

MENU:
-----
1. SEARCH:   Look up one location by its task key
2. VIEW ALL: Table of every location, bucket order, with a total
3. ADD:      Add a location (admin only)
4. DELETE:   Remove a location (admin only)
5. EXIT

Run from the project root:
    python -m campus_guide --admin
"""

import argparse

from .config import DATA_FILE
from .directory import DirectoryService
from .errors import CampusGuideError, DuplicateLocationKeyError, InvalidLocationError
from .logging_config import setup_logging
from .ui import TerminalDisplay


def _prompt(text: str) -> str:
    """Read one line of input, stripped. EOF is propagated to the menu loop."""
    return input(f"  {text}").strip()


def _search(directory: DirectoryService):
    TerminalDisplay.print_header("SEARCH LOCATION")
    print(f"  {TerminalDisplay.DIM}Enter the unique Task Key (e.g., 'library', 'c_lab').{TerminalDisplay.RESET}\n")

    key = _prompt("Enter Task Key to search: ")
    entry = directory.search_by_key(key)
    if entry is None:
        TerminalDisplay.print_error(f"Location for key '{key}' not found in the directory.")
    else:
        TerminalDisplay.print_location(entry)


def _view_all(directory: DirectoryService):
    TerminalDisplay.print_location_table(directory.list_all())


def _add(directory: DirectoryService):
    TerminalDisplay.print_header("ADD NEW LOCATION")
    print(f"  {TerminalDisplay.DIM}The Task Key must be unique for fast lookups.{TerminalDisplay.RESET}\n")

    # Ask again until the key is usable
    while True:
        key = _prompt("Enter UNIQUE Task Key (e.g., 'physics_lab'): ")
        if not key:
            TerminalDisplay.print_error("Key cannot be empty.")
            continue
        if directory.search_by_key(key) is not None:
            TerminalDisplay.print_error("This Task Key already exists. Please choose a different key.")
            continue
        break

    building = _prompt("Enter Building Name: ")
    floor = _prompt("Enter Floor (e.g., '1st', 'Ground'): ")
    room = _prompt("Enter Room/Facility Code: ")
    description = _prompt("Enter Short Description: ")

    try:
        entry = directory.add_location(key, building, floor, room, description)
    except (DuplicateLocationKeyError, InvalidLocationError) as exc:
        TerminalDisplay.print_error(exc.message)
        return
    except CampusGuideError as exc:
        TerminalDisplay.print_error(f"{exc.message}. The location was not added.")
        return

    TerminalDisplay.print_success(f"Location '{entry.key}' has been added to the guide.")


def _delete(directory: DirectoryService):
    TerminalDisplay.print_header("DELETE LOCATION")
    key = _prompt("Enter Task Key to delete: ")

    try:
        removed = directory.delete_location(key)
    except CampusGuideError as exc:
        TerminalDisplay.print_error(
            f"{exc.message}. '{key}' was removed for this session but is still in the data file."
        )
        return

    if removed is None:
        TerminalDisplay.print_error(f"Location with key '{key}' not found.")
    else:
        TerminalDisplay.print_success(f"Location '{key}' has been deleted from the guide.")


def run_menu(directory: DirectoryService, is_admin: bool = False):
    """
    Drive the location guide menu until the user exits.

    Add and delete are refused for non-admin sessions.
    """
    actions = {
        "1": (_search, False),
        "2": (_view_all, False),
        "3": (_add, True),
        "4": (_delete, True),
    }

    while True:
        TerminalDisplay.print_menu(is_admin)
        try:
            choice = input(f"\n{TerminalDisplay.BOLD}> Enter your choice (1-5): {TerminalDisplay.RESET}").strip()
        except EOFError:
            choice = "5"

        if choice == "5":
            print("\n  Goodbye!")
            return

        if choice not in actions:
            TerminalDisplay.print_error("Invalid input. Please enter a number between 1 and 5.")
            continue

        action, admin_only = actions[choice]
        if admin_only and not is_admin:
            TerminalDisplay.print_error("Authorization Required: only administrators can change locations.")
            continue

        try:
            action(directory)
        except EOFError:
            print("\n  Goodbye!")
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus_guide",
        description="Campus location guidebook: find, list, add and delete locations by task key.",
    )
    parser.add_argument("--data-file", "-f", default=str(DATA_FILE),
                        help="location data file (default: %(default)s)")
    parser.add_argument("--admin", action="store_true",
                        help="allow adding and deleting locations")
    parser.add_argument("--log-level", default="ERROR",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="logging threshold (default: %(default)s)")
    return parser


def main(argv=None):
    """Command-line entry point for the campus location guide."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    directory = DirectoryService.open(args.data_file)
    for warning in directory.warnings:
        TerminalDisplay.print_warning(warning)

    run_menu(directory, is_admin=args.admin)


if __name__ == "__main__":
    main()
