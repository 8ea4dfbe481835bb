# savescan

Building blocks for tools that back up and restore game save data: scan
result types, duplicate detection across games, OS filtering of save-file
entries, a YAML format for saved registry content, and a few file helpers.

## Installation

```
pip install savescan
```

## Modules

- `savescan.registry_item.RegistryItem` – a registry key path that accepts
  either `/` or `\` separators. `render()` gives forward slashes,
  `interpret()` backslashes; `split()`, `split_hive()`, `is_prefix_of()` and
  `nearest_prefix()` work on its components.
- `savescan.hives` – `Hives` and `Entry`, the YAML document that records
  registry keys and their typed values (`sz`, `expandSz`, `multiSz`, `dword`,
  `qword`). `Hives.from_yaml()` raises `ValueError` on invalid input,
  `Hives.load()` returns `None` for a missing or unreadable file,
  `save()` skips writing when the file already holds the same content,
  `serialize()` writes every level sorted by name, and `registry_items()`
  lists the stored keys as `RegistryItem`s.
- `savescan.scan_info` – `ScannedFile`, `ScannedRegistry`, `ScanInfo`,
  `BackupInfo`, `OperationStatus` (with `to_dict()` using camel-case keys),
  `OperationStepDecision` and `BackupId` (`name=None` means the latest backup).
- `savescan.duplicates.DuplicateDetector` – records which games claim each
  file and registry key. A file is identified by its `original_path` when set,
  otherwise by its `path`.
- `savescan.platform_filter` – `Os`, `GameFileConstraint`, `get_os()` and
  `should_exclude_as_other_os_data()` for skipping entries meant only for
  another operating system (Windows entries are kept when the game may run
  under Proton).
- `savescan.fileops` – `are_files_identical()` (raises `OSError` if a file
  cannot be read) and `prepare_backup_target()`, which raises
  `CannotPrepareBackupTarget`, a `SaveScanError`, on failure.
- `savescan.serialization` – `ordered_map`, `ordered_set`, `is_false` and
  `is_empty_set`, helpers for stable output.

## Example

```python
from savescan.duplicates import DuplicateDetector
from savescan.scan_info import ScanInfo, ScannedFile

detector = DuplicateDetector()
shared = ScannedFile("saves/shared.dat", 10)
detector.add_game(ScanInfo(game_name="game1", found_files={shared}))
detector.add_game(ScanInfo(game_name="game2", found_files={shared}))

assert detector.is_file_duplicated(shared)
assert detector.file(shared) == {"game1", "game2"}
assert detector.count_duplicates_for("game1") == 1
```

```python
from savescan.hives import Entry, Hives

hives = Hives({"HKEY_CURRENT_USER": {"Software\\Example": {"level": Entry(dword=3)}}})
text = hives.serialize()
assert Hives.from_yaml(text).same_content(hives)
```

## What it does not do

This package has no command-line program. It does not search the file system
or a game database for save files, does not read from or write to the Windows
registry (`Hives` only holds and stores registry content as YAML), and does
not copy files into or out of a backup. Those steps are left to the
application that uses these pieces.

## Running the tests

```
pip install -e ".[test]"
pytest
```