"""Actions taken on groups of duplicate files: delete, move or hard-link."""

from __future__ import annotations

import enum
import os
import sys
from pathlib import Path
from typing import Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


class DuplicateAction(enum.Enum):
    """What to do with every file of a group except the first."""

    DELETE = "Delete"
    MOVE = "Move"
    HARD_LINK = "Hard Link"
    SHOW_ONLY = "Show Only"


def _print_group(duplicate_files: Sequence[str]) -> None:
    print(f"\nFound {len(duplicate_files)} duplicate files:")
    for number, path in enumerate(duplicate_files, start=1):
        print(f"  {number}. {path}")


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


class DuplicateHandler:
    """Deletes, moves or hard-links duplicate files, reporting what it did.

    Each single-file operation returns True on success and False on failure;
    failures are reported on standard error rather than raised.
    """

    def delete_duplicate(self, file_path: PathLike) -> bool:
        """Remove a file (or an empty directory)."""
        path = os.fspath(file_path)
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            print(f"Error deleting file: {path}", file=sys.stderr)
            return False
        except OSError as exc:
            print(f"Exception deleting file {path}: {exc}", file=sys.stderr)
            return False
        print(f"Deleted: {path}")
        return True

    def move_duplicate(self, file_path: PathLike, target_directory: PathLike) -> bool:
        """Move a file into a directory, creating it if needed.

        A name already taken in the target gets a ``_1``, ``_2``... suffix
        before its extension.
        """
        source = Path(file_path)
        target = Path(target_directory)
        try:
            if not target.exists():
                target.mkdir(parents=True, exist_ok=True)
            candidate = target / source.name
            final_path = candidate
            counter = 1
            while final_path.exists():
                final_path = target / f"{candidate.stem}_{counter}{candidate.suffix}"
                counter += 1
            os.rename(source, final_path)
        except OSError as exc:
            print(f"Exception moving file {os.fspath(file_path)}: {exc}", file=sys.stderr)
            return False
        print(f'Moved: {os.fspath(file_path)} to "{final_path}"')
        return True

    def create_hard_link(self, original_path: PathLike, link_path: PathLike) -> bool:
        """Create a hard link at link_path pointing to original_path."""
        original = os.fspath(original_path)
        link = os.fspath(link_path)
        try:
            link_dir = os.path.dirname(link)
            if link_dir and not os.path.exists(link_dir):
                os.makedirs(link_dir, exist_ok=True)
            os.link(original, link)
        except OSError as exc:
            print(
                f"Exception creating hard link for {original}: {exc}", file=sys.stderr
            )
            return False
        print(f"Created hard link: {link} for {original}")
        return True

    def handle_duplicates(
        self,
        duplicate_files: Sequence[str],
        action: DuplicateAction,
        target_directory: PathLike = "",
    ) -> None:
        """Show a group of duplicates and apply an action to all but the first.

        MOVE and HARD_LINK do nothing when no target directory is given.
        """
        if len(duplicate_files) <= 1:
            return
        action = DuplicateAction(action)
        target = os.fspath(target_directory)
        _print_group(duplicate_files)

        original = duplicate_files[0]
        for file_path in duplicate_files[1:]:
            if action is DuplicateAction.DELETE:
                self.delete_duplicate(file_path)
            elif action is DuplicateAction.MOVE:
                if target:
                    self.move_duplicate(file_path, target)
            elif action is DuplicateAction.HARD_LINK:
                if target:
                    link_path = os.path.join(target, os.path.basename(file_path))
                    self.create_hard_link(original, link_path)
                    self.delete_duplicate(file_path)

    def handle_duplicates_interactive(self, duplicate_files: Sequence[str]) -> None:
        """Show a group of duplicates and ask on standard input what to do."""
        if len(duplicate_files) <= 1:
            return
        _print_group(duplicate_files)

        print("\nChoose action:")
        print("1. Delete all duplicates (keep first)")
        print("2. Move duplicates to folder")
        print("3. Create hard links (replace duplicates)")
        print("4. Skip this group")
        answer = _read_line("Choice: ")
        try:
            choice = int(answer.strip()) if answer is not None else None
        except ValueError:
            choice = None

        if choice == 1:
            self.handle_duplicates(duplicate_files, DuplicateAction.DELETE)
        elif choice == 2:
            target = (_read_line("Enter target directory: ") or "").strip()
            self.handle_duplicates(duplicate_files, DuplicateAction.MOVE, target)
        elif choice == 3:
            target = (_read_line("Enter target directory for hard links: ") or "").strip()
            self.handle_duplicates(duplicate_files, DuplicateAction.HARD_LINK, target)
        elif choice == 4:
            print("Skipping this group.")
        else:
            print("Invalid choice. Skipping this group.")