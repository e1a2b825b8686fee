"""Interactive menu for finding and handling duplicate files."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

from .handler import DuplicateAction, DuplicateHandler
from .hashing import HashAlgorithm
from .scanner import FileScanner

_MAIN_MENU_OPTIONS = (
    "Scan Directory for Duplicates",
    "Configure Settings",
    "Show Statistics",
    "Exit",
)

_ACTION_CHOICES = {
    1: DuplicateAction.SHOW_ONLY,
    2: DuplicateAction.DELETE,
    3: DuplicateAction.MOVE,
    4: DuplicateAction.HARD_LINK,
}


@dataclass
class Settings:
    """Options that control a scan and what is done with its results."""

    algorithm: HashAlgorithm = HashAlgorithm.SHA256
    recursive: bool = True
    action: DuplicateAction = DuplicateAction.SHOW_ONLY


def _read_line(prompt: str = "") -> str | None:
    """Read one line from standard input, or None at end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def _parse_int(text: str | None) -> int | None:
    """Return the integer at the start of a line, or None if there is none."""
    if text is None:
        return None
    tokens = text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def display_menu() -> str:
    """Print the main menu and its prompt; return the text printed."""
    lines = [
        "",
        "=== Duplicate File Finder ===",
        *(f"{number}. {label}" for number, label in enumerate(_MAIN_MENU_OPTIONS, 1)),
        "Choose an option: ",
    ]
    text = "\n".join(lines)
    print(text, end="", flush=True)
    return text


def display_settings(settings: Settings) -> None:
    """Print the current settings."""
    print("\n=== Current Settings ===")
    print(f"Hash Algorithm: {settings.algorithm.value}")
    print(f"Recursive Scan: {'Yes' if settings.recursive else 'No'}")
    print(f"Default Action: {settings.action.value}")


def configure_settings(settings: Settings) -> None:
    """Ask on standard input which setting to change and update it in place."""
    print("\n=== Configure Settings ===")
    print("1. Change Hash Algorithm")
    print("2. Toggle Recursive Scan")
    print("3. Change Default Action")
    print("4. Back to Main Menu")
    choice = _parse_int(_read_line("Choose option: "))
    if choice is None:
        print("Invalid input. Please enter a number.")
        return

    if choice == 1:
        print("Select Hash Algorithm:")
        print("1. MD5 (faster)")
        print("2. SHA256 (more secure)")
        algo_choice = _parse_int(_read_line("Choice: "))
        if algo_choice is None:
            print("Invalid input.")
            return
        settings.algorithm = HashAlgorithm.MD5 if algo_choice == 1 else HashAlgorithm.SHA256
        print("Hash algorithm updated.")
    elif choice == 2:
        settings.recursive = not settings.recursive
        print(f"Recursive scan {'enabled' if settings.recursive else 'disabled'}")
    elif choice == 3:
        print("Select Default Action:")
        print("1. Show Only")
        print("2. Delete Duplicates")
        print("3. Move Duplicates")
        print("4. Create Hard Links")
        action_choice = _parse_int(_read_line("Choice: "))
        if action_choice is None:
            print("Invalid input.")
            return
        action = _ACTION_CHOICES.get(action_choice)
        if action is None:
            print("Invalid choice.")
            return
        settings.action = action
        print("Default action updated.")
    elif choice == 4:
        return
    else:
        print("Invalid option.")


def show_statistics(scanner: FileScanner) -> None:
    """Print counts and total size from the scanner's last scan."""
    print("\n=== Scan Statistics ===")
    print(f"Total files scanned: {scanner.total_files_scanned}")
    print(f"Duplicate groups found: {scanner.total_duplicate_groups}")
    files = scanner.scanned_files
    if files:
        total_size = sum(info.size for info in files)
        print(f"Total size scanned: {total_size / (1024 * 1024):.2f} MB")


def _scan(
    scanner: FileScanner,
    handler: DuplicateHandler,
    settings: Settings,
    target_directory: str,
) -> str:
    """Run one scan and handle its duplicates; return the target directory used."""
    directory_path = _read_line("Enter directory path to scan: ") or ""
    try:
        groups = scanner.find_duplicates(
            directory_path, settings.algorithm, settings.recursive
        )
        if not groups:
            print("No duplicate files found!")
            return target_directory

        print(f"\nFound {len(groups)} groups of duplicate files.")
        if settings.action is DuplicateAction.SHOW_ONLY:
            for group in groups:
                handler.handle_duplicates_interactive(group)
        else:
            if settings.action in (DuplicateAction.MOVE, DuplicateAction.HARD_LINK):
                entered = _read_line("Enter target directory: ")
                target_directory = entered if entered is not None else ""
            for group in groups:
                handler.handle_duplicates(group, settings.action, target_directory)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return target_directory


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive duplicate file finder; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dupfinder",
        description="Find and manage duplicate files using hash comparison.",
    )
    parser.parse_args(argv)

    settings = Settings()
    scanner = FileScanner()
    handler = DuplicateHandler()
    target_directory = ""

    print("Welcome to Duplicate File Finder!")
    print("This tool helps you find and manage duplicate files using hash comparison.")

    while True:
        display_menu()
        line = _read_line()
        if line is None:
            print()
            return 0
        choice = _parse_int(line)
        if choice is None:
            print("Invalid input. Please enter a number.")
            continue

        if choice == 1:
            target_directory = _scan(scanner, handler, settings, target_directory)
        elif choice == 2:
            display_settings(settings)
            configure_settings(settings)
        elif choice == 3:
            show_statistics(scanner)
        elif choice == 4:
            print("Exiting...")
            return 0
        else:
            print("Invalid option. Please try again.")


if __name__ == "__main__":
    sys.exit(main())