# dupfinder

dupfinder finds files that have the same content. It hashes every regular
file in a directory with MD5 or SHA-256. Files whose hashes match are put in
one group. In each group the first file is kept. The other files can be
deleted, moved to another folder, or replaced by hard links to the first
file.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Interactive use

Start the program with:

```
dupfinder
```

The main menu has four options:

1. **Scan Directory for Duplicates**: asks for a directory path. The
   directory is scanned, recursively by default, and each group of
   duplicates is listed. A recursive scan does not follow symbolic links to
   directories.
2. **Configure Settings**: shows the current settings. You can then change
   the hash algorithm (MD5 or SHA256), turn recursive scanning on or off, or
   choose the default action.
3. **Show Statistics**: shows how many files the last scan covered, how many
   duplicate groups it found, and the total size of the scanned files in MB.
4. **Exit**

The menu also exits at the end of input.

The default action is **Show Only**. With this action the program asks what
to do with each group:

- delete the duplicates,
- move them to a folder (asked for each group),
- create hard links in a folder (asked for each group),
- skip the group.

If the default action is set to Delete, Move or Hard Link, every group is
handled that way without asking. For Move and Hard Link the program asks
once for a target directory. If that answer is empty, the groups are listed
but no file is changed.

What each action does to every file in a group except the first:

- **Delete** removes the file.
- **Move** moves the file into the target directory. The directory is
  created if it does not exist. If the name is already taken there, a
  suffix `_1`, `_2`, ... is added before the extension.
- **Hard Link** creates, in the target directory, a hard link to the
  group's first file. The link has the duplicate's file name. The duplicate
  is then deleted.

Failures are reported on standard error, and the program goes on with the
next file.

## Use from Python

```python
from dupfinder.hashing import HashAlgorithm, calculate_hash, compare_files
from dupfinder.scanner import FileScanner
from dupfinder.handler import DuplicateAction, DuplicateHandler

scanner = FileScanner()
groups = scanner.find_duplicates("photos", HashAlgorithm.SHA256, True)
print(scanner.total_files_scanned, scanner.total_duplicate_groups)

handler = DuplicateHandler()
for group in groups:
    handler.handle_duplicates(group, DuplicateAction.MOVE, "elsewhere/duplicates")

print(calculate_hash("a.txt", HashAlgorithm.MD5))
print(compare_files("a.txt", "b.txt", HashAlgorithm.SHA256))
```

- `dupfinder.hashing`: `calculate_md5`, `calculate_sha256` and
  `calculate_hash` return lower-case hex digests. `calculate_hash` raises
  `ValueError` for an unsupported algorithm. `compare_files` returns whether
  two files hash the same.
- `dupfinder.scanner`: `FileScanner.find_duplicates(directory_path,
  algorithm=HashAlgorithm.SHA256, recursive=True)` returns a list of groups.
  Each group is a list of at least two paths, and larger groups come first.
  After a scan, `scanned_files` holds a `FileInfo` (path, hash, size,
  last_modified) for each file that was read. Progress is printed to
  standard output.
- `dupfinder.handler`: `DuplicateHandler` has `delete_duplicate`,
  `move_duplicate` and `create_hard_link`. Each returns `True` on success
  and `False` on failure; none of them raises. `handle_duplicates` applies a
  `DuplicateAction` to a group. `handle_duplicates_interactive` asks on
  standard input what to do with a group.
- `dupfinder.cli`: `main()` runs the menu. `Settings` holds the algorithm,
  the recursive flag and the default action.

## Limitations

The `dupfinder` command is menu-driven only. It takes no options on the
command line, so a scan cannot be run in a single non-interactive call. For
scripted use, call the Python API. Files are compared only by hash and are
not compared byte by byte.