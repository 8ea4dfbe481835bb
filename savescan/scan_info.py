"""Results of scanning a game for backup or restoration, and running totals."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any

from savescan.registry_item import RegistryItem


@dataclass(frozen=True, order=True)
class ScannedFile:
    """A file found by a scan.

    ``original_path`` is the restoration target without redirects applied;
    it is only set by a restoration scan.
    """

    path: str
    size: int
    original_path: str | None = None
    ignored: bool = False

    def as_ignored(self) -> ScannedFile:
        """Return a copy marked as ignored."""
        return replace(self, ignored=True)


@dataclass(frozen=True, order=True)
class ScannedRegistry:
    """A registry key found by a scan."""

    path: RegistryItem
    ignored: bool = False

    def as_ignored(self) -> ScannedRegistry:
        """Return a copy marked as ignored."""
        return replace(self, ignored=True)


@dataclass
class BackupInfo:
    """What failed while backing up or restoring one game."""

    failed_files: set[ScannedFile] = field(default_factory=set)
    failed_registry: set[RegistryItem] = field(default_factory=set)

    def successful(self) -> bool:
        """Whether nothing failed."""
        return not self.failed_files and not self.failed_registry


@dataclass
class ScanInfo:
    """Everything a scan found for one game.

    ``registry_file``, ``available_backups`` and ``backup`` are only
    populated by a restoration scan.
    """

    game_name: str = ""
    found_files: set[ScannedFile] = field(default_factory=set)
    found_registry_keys: set[ScannedRegistry] = field(default_factory=set)
    registry_file: str | None = None
    available_backups: list[Any] = field(default_factory=list)
    backup: Any | None = None

    def sum_bytes(self, backup_info: BackupInfo | None) -> int:
        """Bytes of enabled files, minus those that failed to process."""
        successful = sum(f.size for f in self.found_files if not f.ignored)
        failed = sum(f.size for f in backup_info.failed_files) if backup_info is not None else 0
        return successful - failed

    def total_possible_bytes(self) -> int:
        """Bytes of every found file, ignored or not."""
        return sum(f.size for f in self.found_files)

    def found_anything(self) -> bool:
        """Whether any file or registry key was found."""
        return bool(self.found_files) or bool(self.found_registry_keys)

    def found_anything_processable(self) -> bool:
        """Whether any file or registry key was found and is not ignored."""
        return any(not f.ignored for f in self.found_files) or any(
            not r.ignored for r in self.found_registry_keys
        )

    def any_ignored(self) -> bool:
        """Whether any found item is ignored."""
        return any(f.ignored for f in self.found_files) or any(
            r.ignored for r in self.found_registry_keys
        )

    def total_items(self) -> int:
        """Number of found files and registry keys."""
        return len(self.found_files) + len(self.found_registry_keys)

    def enabled_items(self) -> int:
        """Number of found files and registry keys that are not ignored."""
        return sum(1 for f in self.found_files if not f.ignored) + sum(
            1 for r in self.found_registry_keys if not r.ignored
        )


@dataclass
class OperationStatus:
    """Running totals across the games of one backup or restore operation."""

    total_games: int = 0
    total_bytes: int = 0
    processed_games: int = 0
    processed_bytes: int = 0

    def add_game(self, scan_info: ScanInfo, backup_info: BackupInfo | None, processed: bool) -> None:
        """Count one game, and its processed bytes if it was processed."""
        self.total_games += 1
        self.total_bytes += scan_info.total_possible_bytes()
        if processed:
            self.processed_games += 1
            self.processed_bytes += scan_info.sum_bytes(backup_info)

    def processed_all(self) -> bool:
        """Whether every game and every byte was processed."""
        return self.processed_all_games() and self.processed_all_bytes()

    def processed_all_games(self) -> bool:
        """Whether every counted game was processed."""
        return self.total_games == self.processed_games

    def processed_all_bytes(self) -> bool:
        """Whether every counted byte was processed."""
        return self.total_bytes == self.processed_bytes

    def to_dict(self) -> dict[str, int]:
        """Return the serialised form with camel-case keys."""
        return {
            "totalGames": self.total_games,
            "totalBytes": self.total_bytes,
            "processedGames": self.processed_games,
            "processedBytes": self.processed_bytes,
        }


class OperationStepDecision(enum.Enum):
    """What happened to one game during an operation."""

    PROCESSED = "Processed"
    CANCELLED = "Cancelled"
    IGNORED = "Ignored"


@dataclass(frozen=True)
class BackupId:
    """Which backup of a game to use: a named one, or the latest when ``name`` is None."""

    name: str | None = None